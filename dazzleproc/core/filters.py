"""Name filters for DazzleProc.

A name filter is a single predicate over a file handle. The engine applies
it to every candidate file and to the children listed when descending into
a subdirectory, so a filter that rejects a directory prunes that subtree.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Optional, Union

from .handle import FileHandle


class NameFilter(ABC):
    """Predicate that accepts or rejects individual files and directories."""

    @abstractmethod
    def accepts(self, handle: FileHandle) -> bool:
        pass

    def __call__(self, handle: FileHandle) -> bool:
        return self.accepts(handle)


class PredicateFilter(NameFilter):
    """Wraps a plain function as a NameFilter."""

    def __init__(self, predicate: Callable[[FileHandle], bool]):
        self.predicate = predicate

    def accepts(self, handle: FileHandle) -> bool:
        return bool(self.predicate(handle))

    def __repr__(self) -> str:
        return f"PredicateFilter({self.predicate!r})"


class HiddenFilter(NameFilter):
    """Rejects dot-files and dot-directories."""

    def accepts(self, handle: FileHandle) -> bool:
        return not handle.name.startswith('.')


class ExcludeNamesFilter(NameFilter):
    """Rejects handles whose name is in a fixed set.

    Typical use is skipping VCS and cache directories, e.g.
    ``ExcludeNamesFilter({'.git', '__pycache__'})``.
    """

    def __init__(self, names: Iterable[str]):
        self.names = frozenset(names)

    def accepts(self, handle: FileHandle) -> bool:
        return handle.name not in self.names


class ExtensionFilter(NameFilter):
    """Accepts or rejects files by extension.

    Directories always pass so that descent is never blocked by an
    extension rule. Extensions are compared case-insensitively and may be
    given with or without the leading dot.
    """

    def __init__(self,
                 include: Optional[Iterable[str]] = None,
                 exclude: Optional[Iterable[str]] = None):
        self.include = self._normalize(include) if include is not None else None
        self.exclude = self._normalize(exclude or ())

    @staticmethod
    def _normalize(extensions: Iterable[str]) -> frozenset:
        return frozenset(
            ext.lower() if ext.startswith('.') else '.' + ext.lower()
            for ext in extensions
        )

    def accepts(self, handle: FileHandle) -> bool:
        if handle.is_dir():
            return True
        name = handle.name.lower()
        dot = name.rfind('.')
        extension = name[dot:] if dot >= 0 else ''
        if extension in self.exclude:
            return False
        if self.include is not None:
            return extension in self.include
        return True


class AllOf(NameFilter):
    """Accepts only what every wrapped filter accepts."""

    def __init__(self, *filters: Union[NameFilter, Callable[[FileHandle], bool]]):
        self.filters = tuple(as_name_filter(f) for f in filters)

    def accepts(self, handle: FileHandle) -> bool:
        return all(f.accepts(handle) for f in self.filters)


def as_name_filter(candidate: Any) -> Optional[NameFilter]:
    """Coerce a NameFilter, a plain predicate, or None to a NameFilter.

    Raises:
        TypeError: If ``candidate`` is neither a NameFilter nor callable
    """
    if candidate is None or isinstance(candidate, NameFilter):
        return candidate
    if callable(candidate):
        return PredicateFilter(candidate)
    raise TypeError(f"Name filter must be a NameFilter or callable, got {type(candidate).__name__}")
