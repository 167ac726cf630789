"""Testing utilities for DazzleProc."""

from .fixtures import RecordingCallbacks, build_tree

__all__ = ['RecordingCallbacks', 'build_tree']
