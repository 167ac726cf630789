"""FileHandle abstraction for DazzleProc.

The FileHandle is the only view of a file tree the processor engine has.
It is intentionally small - existence and kind checks, naming, parent and
child navigation - so that the engine can run over the local filesystem,
an archive, or an in-memory tree without knowing which.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional


class FileHandle(ABC):
    """Abstract handle to a file or directory.

    Handles are value-like: two handles referring to the same location are
    equal and hash the same, which is what lets the engine use directory
    handles as keys when grouping entries.

    A handle does not have to refer to something that exists. Output
    locations computed by the engine are handles to paths that will only be
    written later by the caller.
    """

    @abstractmethod
    def identifier(self) -> str:
        """Return a unique, stable identifier for this location.

        For filesystem handles this is the absolute path. The identifier is
        used for equality and hashing.
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Final path component, e.g. ``"hero.png"``."""
        pass

    @abstractmethod
    def exists(self) -> bool:
        pass

    @abstractmethod
    def is_file(self) -> bool:
        pass

    @abstractmethod
    def is_dir(self) -> bool:
        pass

    @abstractmethod
    def parent(self) -> Optional["FileHandle"]:
        """Return the containing directory, or None at a root."""
        pass

    @abstractmethod
    def children(self, name_filter: Optional[Callable[[Any], bool]] = None) -> List["FileHandle"]:
        """List the immediate children of a directory.

        The order must be stable across calls. When ``name_filter`` is
        given, only children it accepts are returned.

        Args:
            name_filter: Optional predicate (or NameFilter) over child handles

        Returns:
            List of child handles; empty for files
        """
        pass

    @abstractmethod
    def child(self, name: str) -> "FileHandle":
        """Return a handle for ``name`` inside this directory.

        Joining onto an empty relative path must yield a handle for just
        ``name``. The target does not need to exist.
        """
        pass

    @abstractmethod
    def path_string(self) -> str:
        """Return the path as given, relative or absolute."""
        pass

    def absolute_path(self) -> str:
        """Absolute path used in error messages."""
        return self.identifier()

    def __str__(self) -> str:
        return self.path_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.path_string()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileHandle):
            return NotImplemented
        return self.identifier() == other.identifier()

    def __hash__(self) -> int:
        return hash(self.identifier())
