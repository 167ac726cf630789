"""Test fixtures for DazzleProc consumers.

These helpers make it easy to build throwaway source trees and to observe
exactly which callbacks a FileProcessor fires, in which order, without
writing a callback class in every test.
"""

from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from ..core.entry import Entry
from ..processor import ProcessorCallbacks, ProcessRun

TreeSpec = Dict[str, Union[str, None, "TreeSpec"]]


def build_tree(root: Union[str, Path], spec: TreeSpec) -> Path:
    """Materialize a nested dict as files and directories under ``root``.

    String values become file contents, dict values become directories and
    None creates an empty directory.

    Example:
        build_tree(tmp_path, {
            'images': {
                'a.png': 'a',
                'sub': {'b.png': 'b'},
                'empty': None,
            }
        })
    """
    root = Path(root)
    root.mkdir(parents=True, exist_ok=True)
    for name, content in spec.items():
        path = root / name
        if content is None:
            path.mkdir(exist_ok=True)
        elif isinstance(content, dict):
            build_tree(path, content)
        else:
            path.write_text(content)
    return root


class RecordingCallbacks(ProcessorCallbacks):
    """Callbacks that record every invocation.

    Attributes:
        directories: (dir_entry, [file entries]) per ``on_directory`` call
        files: Entry per ``on_file`` call
        calls: Ordered log of ('dir' | 'file', input name) tuples
    """

    def __init__(self, report_files: bool = False, report_dirs: bool = False,
                 fail_on: Optional[str] = None):
        """Initialize the recorder.

        Args:
            report_files: Call ``add_processed_file`` for every file entry
            report_dirs: Call ``add_processed_file`` for every directory entry
            fail_on: Raise RuntimeError when an input with this name is seen
        """
        self.report_files = report_files
        self.report_dirs = report_dirs
        self.fail_on = fail_on
        self.directories: List[Tuple[Entry, List[Entry]]] = []
        self.files: List[Entry] = []
        self.calls: List[Tuple[str, str]] = []

    def on_directory(self, run: ProcessRun, dir_entry: Entry, entries: List[Entry]) -> None:
        self.calls.append(('dir', dir_entry.input_file.name))
        self._maybe_fail(dir_entry)
        self.directories.append((dir_entry, list(entries)))
        if self.report_dirs:
            run.add_processed_file(dir_entry)

    def on_file(self, run: ProcessRun, entry: Entry) -> None:
        self.calls.append(('file', entry.input_file.name))
        self._maybe_fail(entry)
        self.files.append(entry)
        if self.report_files:
            run.add_processed_file(entry)

    def directory_names(self) -> List[str]:
        return [dir_entry.input_file.name for dir_entry, _ in self.directories]

    def file_names(self) -> List[str]:
        return [entry.input_file.name for entry in self.files]

    def entries_for(self, dir_name: str) -> List[Entry]:
        """File entries passed along with the directory named ``dir_name``."""
        for dir_entry, entries in self.directories:
            if dir_entry.input_file.name == dir_name:
                return entries
        raise KeyError(dir_name)

    def _maybe_fail(self, entry: Entry) -> None:
        if self.fail_on is not None and entry.input_file.name == self.fail_on:
            raise RuntimeError(f"refusing to process {self.fail_on}")
