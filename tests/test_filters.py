"""Tests for the stock name filters."""

from pathlib import Path

import pytest

from dazzleproc import (
    AllOf,
    ExcludeNamesFilter,
    ExtensionFilter,
    HiddenFilter,
    LocalFileHandle,
    NameFilter,
    PredicateFilter,
    as_name_filter,
)


@pytest.fixture
def tree(tmp_path):
    (tmp_path / 'hero.PNG').write_text('')
    (tmp_path / 'notes.txt').write_text('')
    (tmp_path / 'Makefile').write_text('')
    (tmp_path / '.git').mkdir()
    (tmp_path / 'art.png').mkdir()
    return tmp_path


def handle(path: Path) -> LocalFileHandle:
    return LocalFileHandle(path)


class TestStockFilters:

    def test_hidden_filter(self, tree):
        f = HiddenFilter()
        assert not f.accepts(handle(tree / '.git'))
        assert f.accepts(handle(tree / 'notes.txt'))

    def test_exclude_names(self, tree):
        f = ExcludeNamesFilter(['.git', '__pycache__'])
        assert not f.accepts(handle(tree / '.git'))
        assert f.accepts(handle(tree / 'notes.txt'))

    def test_extension_include(self, tree):
        f = ExtensionFilter(include=['png', '.txt'])
        assert f.accepts(handle(tree / 'hero.PNG'))
        assert f.accepts(handle(tree / 'notes.txt'))
        assert not f.accepts(handle(tree / 'Makefile'))

    def test_extension_exclude(self, tree):
        f = ExtensionFilter(exclude=['.txt'])
        assert not f.accepts(handle(tree / 'notes.txt'))
        assert f.accepts(handle(tree / 'Makefile'))

    def test_extension_filter_passes_directories(self, tree):
        # A directory named like a file must still be descended into
        f = ExtensionFilter(include=['.jpg'])
        assert f.accepts(handle(tree / 'art.png'))

    def test_all_of(self, tree):
        f = AllOf(HiddenFilter(), lambda h: h.name != 'notes.txt')
        assert not f.accepts(handle(tree / '.git'))
        assert not f.accepts(handle(tree / 'notes.txt'))
        assert f.accepts(handle(tree / 'Makefile'))

    def test_filters_are_callable(self, tree):
        assert HiddenFilter()(handle(tree / 'notes.txt')) is True


class TestAsNameFilter:

    def test_none(self):
        assert as_name_filter(None) is None

    def test_passthrough(self):
        f = HiddenFilter()
        assert as_name_filter(f) is f

    def test_wraps_callable(self, tree):
        f = as_name_filter(lambda h: h.name == 'Makefile')
        assert isinstance(f, PredicateFilter)
        assert isinstance(f, NameFilter)
        assert f.accepts(handle(tree / 'Makefile'))
        assert not f.accepts(handle(tree / 'notes.txt'))

    def test_rejects_non_callable(self):
        with pytest.raises(TypeError):
            as_name_filter('*.png')
