"""Concrete FileHandle implementations."""

from .filesystem import LocalFileHandle, as_handle

__all__ = [
    'LocalFileHandle',
    'as_handle',
]
