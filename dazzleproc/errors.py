"""Exceptions raised by DazzleProc."""

from typing import Optional

from .core.entry import Entry


class ProcessorError(Exception):
    """Base class for all DazzleProc errors."""
    pass


class InvalidArgumentError(ProcessorError, ValueError):
    """Raised when the input does not exist or the output root is missing."""
    pass


class PatternCompileError(ProcessorError, ValueError):
    """Raised when a name pattern is not a valid regular expression.

    The originating ``re.error`` is available as ``__cause__``.
    """

    def __init__(self, pattern: str, reason: str):
        super().__init__(f"Invalid input pattern {pattern!r}: {reason}")
        self.pattern = pattern


class ProcessingError(ProcessorError):
    """Raised when a per-directory or per-file callback fails.

    The callback's exception is chained as ``__cause__``; the rest of the
    run is abandoned.

    Attributes:
        kind: ``"directory"`` or ``"file"``
        path: Absolute path of the input being processed
        entry: The Entry handed to the failing callback
    """

    def __init__(self, kind: str, path: str, entry: Optional[Entry] = None):
        super().__init__(f"Error processing {kind}: {path}")
        self.kind = kind
        self.path = path
        self.entry = entry
