"""Tests for the functional API."""

from pathlib import Path

import pytest

from dazzleproc import (
    build_config,
    collect_entries,
    process_tree,
    HiddenFilter,
    PatternCompileError,
    ProcessingError,
)
from dazzleproc.testing import build_tree


@pytest.fixture
def art(tmp_path):
    build_tree(tmp_path, {
        'art': {
            'b.png': '',
            'a.jpg': '',
            '.cache.png': '',
            'ui': {'button.png': '', 'font.fnt': ''},
        }
    })
    return tmp_path / 'art'


class TestBuildConfig:

    def test_options(self):
        config = build_config(suffixes=['.png'], regexes=[r'.*\.fnt'],
                              output_suffix='.atlas', recursive=False, flatten=False)
        assert len(config.patterns) == 2
        assert config.output_suffix == '.atlas'
        assert config.recursive is False
        assert config.flatten_output is False

    def test_invalid_regex(self):
        with pytest.raises(PatternCompileError):
            build_config(regexes=['(('])


class TestCollectEntries:

    def test_collects_all_matches_in_order(self, art, tmp_path):
        entries = collect_entries(art, tmp_path / 'out', suffixes=['.png'])
        assert [e.input_file.name for e in entries] == ['.cache.png', 'b.png', 'button.png']

    def test_with_filter_and_mirror(self, art, tmp_path):
        out = tmp_path / 'out'
        entries = collect_entries(art, out, suffixes=['.png', '.jpg'],
                                  name_filter=HiddenFilter(), output_suffix='.atlas',
                                  flatten=False)
        outputs = [Path(e.output_file.path_string()) for e in entries]
        assert outputs == [out / 'a.atlas', out / 'b.atlas', out / 'ui' / 'button.atlas']


class TestProcessTree:

    def test_two_phase_callbacks(self, art, tmp_path):
        calls = []

        def on_directory(run, dir_entry, entries):
            calls.append(('dir', dir_entry.input_file.name, [e.input_file.name for e in entries]))

        def on_file(run, entry):
            calls.append(('file', entry.input_file.name))
            run.add_processed_file(entry)

        result = process_tree(art, tmp_path / 'out', on_file=on_file, on_directory=on_directory,
                              suffixes=['.png'], name_filter=HiddenFilter())
        assert calls == [
            ('dir', 'art', ['b.png']),
            ('dir', 'ui', ['button.png']),
            ('file', 'b.png'),
            ('file', 'button.png'),
        ]
        assert [e.input_file.name for e in result] == ['b.png', 'button.png']

    def test_no_callbacks_returns_empty(self, art, tmp_path):
        assert process_tree(art, tmp_path / 'out', suffixes=['.png']) == []

    def test_callback_error(self, art, tmp_path):
        def on_file(run, entry):
            raise OSError("disk full")

        with pytest.raises(ProcessingError) as excinfo:
            process_tree(art, tmp_path / 'out', on_file=on_file, suffixes=['.png'])
        assert isinstance(excinfo.value.__cause__, OSError)
