"""Core abstractions shared by the processor engine and its adapters."""

from .handle import FileHandle
from .entry import Entry
from .dir_map import OrderedDirectoryMap
from .filters import (
    NameFilter,
    PredicateFilter,
    HiddenFilter,
    ExcludeNamesFilter,
    ExtensionFilter,
    AllOf,
    as_name_filter,
)

__all__ = [
    'FileHandle',
    'Entry',
    'OrderedDirectoryMap',
    'NameFilter',
    'PredicateFilter',
    'HiddenFilter',
    'ExcludeNamesFilter',
    'ExtensionFilter',
    'AllOf',
    'as_name_filter',
]
