"""Local filesystem handles for DazzleProc.

LocalFileHandle backs the abstract FileHandle with ``pathlib``. It keeps
the path exactly as given (relative paths stay relative) so that output
paths computed from a relative output root remain relative too.
"""

import logging
import os
from pathlib import Path
from typing import Any, Callable, List, Optional, Union

from ..core.handle import FileHandle

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


class LocalFileHandle(FileHandle):
    """FileHandle for a path on the local filesystem.

    Designed to be lightweight - nothing is read from disk until a kind
    check or listing is requested.
    """

    def __init__(self, path: PathLike, include_hidden: bool = True):
        """Initialize a local handle.

        Args:
            path: Path to the file or directory (need not exist)
            include_hidden: Whether ``children()`` lists dot-files
        """
        self.path = Path(path)
        self.include_hidden = include_hidden

    def identifier(self) -> str:
        """Return absolute path as unique identifier."""
        try:
            return os.path.abspath(self.path)
        except OSError:
            # cwd may have been removed
            return str(self.path)

    @property
    def name(self) -> str:
        name = self.path.name
        # '.', '' and '..' have no usable name of their own
        if not name or name == '..':
            return Path(self.identifier()).name
        return name

    def exists(self) -> bool:
        return self.path.exists()

    def is_file(self) -> bool:
        return self.path.is_file()

    def is_dir(self) -> bool:
        return self.path.is_dir()

    def parent(self) -> Optional["LocalFileHandle"]:
        absolute = Path(self.identifier())
        if absolute.parent == absolute:
            return None
        # Relative parents stay relative until the path runs out
        if not self.path.is_absolute() and len(self.path.parts) > 1 and self.path.name != '..':
            return self._derive(self.path.parent)
        return self._derive(absolute.parent)

    def children(self, name_filter: Optional[Callable[[Any], bool]] = None) -> List["LocalFileHandle"]:
        """List children sorted by path so that walks are reproducible."""
        if not self.path.is_dir():
            return []

        try:
            child_paths = sorted(self.path.iterdir())
        except PermissionError as e:
            logger.warning("Skipping unreadable directory %s: %s", self.path, e)
            return []

        result = []
        for child_path in child_paths:
            if not self.include_hidden and child_path.name.startswith('.'):
                continue
            child = self._derive(child_path)
            if name_filter is not None and not name_filter(child):
                continue
            result.append(child)
        return result

    def child(self, name: str) -> "LocalFileHandle":
        # Path('.') / name and Path('') / name both give a bare relative name
        return self._derive(self.path / name)

    def path_string(self) -> str:
        return str(self.path)

    def _derive(self, path: Path) -> "LocalFileHandle":
        return LocalFileHandle(path, include_hidden=self.include_hidden)

    def __repr__(self) -> str:
        return f"LocalFileHandle(path={str(self.path)!r})"


def as_handle(target: Union[FileHandle, PathLike], include_hidden: bool = True) -> FileHandle:
    """Return ``target`` unchanged if it is a handle, else wrap the path.

    Raises:
        TypeError: If ``target`` is neither a FileHandle nor path-like
    """
    if isinstance(target, FileHandle):
        return target
    if isinstance(target, (str, os.PathLike)):
        return LocalFileHandle(target, include_hidden=include_hidden)
    raise TypeError(f"Expected a path or FileHandle, got {type(target).__name__}")
