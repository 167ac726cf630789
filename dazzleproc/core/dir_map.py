"""Insertion-ordered grouping of entries by source directory."""

from collections import OrderedDict
from typing import Iterator, List, Optional, Tuple

from .entry import Entry
from .handle import FileHandle


class OrderedDirectoryMap:
    """Maps each traversed directory to the entries found directly inside it.

    Keys keep first-encounter order, which is the order directories are
    handed to the per-directory callback. A directory with no matching
    files still gets a key (with an empty list) once it is registered.
    """

    def __init__(self):
        self._entries: "OrderedDict[FileHandle, List[Entry]]" = OrderedDict()

    def register(self, directory: FileHandle) -> List[Entry]:
        """Ensure ``directory`` has a key and return its entry list."""
        entries = self._entries.get(directory)
        if entries is None:
            entries = []
            self._entries[directory] = entries
        return entries

    def add(self, directory: FileHandle, entry: Entry) -> None:
        self.register(directory).append(entry)

    def get(self, directory: FileHandle) -> Optional[List[Entry]]:
        """Return the entry list for ``directory``, or None if never registered."""
        return self._entries.get(directory)

    def keys(self) -> List[FileHandle]:
        """Directories in first-encounter order."""
        return list(self._entries.keys())

    def items(self) -> Iterator[Tuple[FileHandle, List[Entry]]]:
        return iter(self._entries.items())

    def entry_count(self) -> int:
        """Total number of file entries across all directories."""
        return sum(len(entries) for entries in self._entries.values())

    def __iter__(self) -> Iterator[FileHandle]:
        return iter(self._entries)

    def __contains__(self, directory: object) -> bool:
        return directory in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"OrderedDirectoryMap(dirs={len(self)}, entries={self.entry_count()})"
