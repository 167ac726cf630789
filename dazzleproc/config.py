"""Configuration system for DazzleProc.

A ProcessorConfig describes which files a run picks up and where their
outputs go. Configs are immutable; build them with ProcessorConfigBuilder
(chained calls ending in ``build()``) or modify a copy with
``ProcessorConfig.with_options``.
"""

import dataclasses
import re
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple

from .core.filters import NameFilter, as_name_filter
from .core.handle import FileHandle
from .errors import PatternCompileError

Comparator = Callable[[FileHandle, FileHandle], int]


def compare_by_name(a: FileHandle, b: FileHandle) -> int:
    """Default comparator: lexicographic by file name."""
    if a.name < b.name:
        return -1
    if a.name > b.name:
        return 1
    return 0


def compile_pattern(regex: str) -> re.Pattern:
    """Compile a name pattern, converting ``re.error`` to PatternCompileError."""
    try:
        return re.compile(regex)
    except re.error as e:
        raise PatternCompileError(regex, str(e)) from e


def suffix_pattern(suffix: str) -> str:
    """Case-insensitive regex matching names that end with ``suffix``."""
    return "(?i).*" + re.escape(suffix)


@dataclass(frozen=True)
class ProcessorConfig:
    """Immutable settings for a FileProcessor.

    Attributes:
        name_filter: Optional predicate rejecting individual files; also
            applied to children when descending into subdirectories
        patterns: Compiled patterns; a file must fully match at least one
            of them (when any are configured)
        comparator: Orders entries within each directory and in the final
            per-file pass; None disables sorting
        output_suffix: Replaces the input file's extension in output names
        recursive: Whether subdirectories are walked
        flatten_output: Root every output at the output root instead of
            mirroring the input directory structure
    """

    name_filter: Optional[NameFilter] = None
    patterns: Tuple[re.Pattern, ...] = ()
    comparator: Optional[Comparator] = compare_by_name
    output_suffix: Optional[str] = None
    recursive: bool = True
    flatten_output: bool = True

    def __post_init__(self):
        object.__setattr__(self, 'name_filter', as_name_filter(self.name_filter))
        object.__setattr__(self, 'patterns', tuple(
            p if isinstance(p, re.Pattern) else compile_pattern(p) for p in self.patterns
        ))

    def with_options(self, **changes: Any) -> "ProcessorConfig":
        """Return a copy with the given fields replaced."""
        return dataclasses.replace(self, **changes)

    def matches(self, name: str) -> bool:
        """Check a file name against the pattern set (logical OR)."""
        if not self.patterns:
            return True
        return any(pattern.fullmatch(name) for pattern in self.patterns)

    def output_name(self, name: str) -> str:
        """Compute the output file name for an input name.

        Everything from the last ``.`` is replaced by the output suffix.
        Names without a ``.`` get the suffix appended as-is.
        """
        if self.output_suffix is None:
            return name
        stem, dot, _ = name.rpartition('.')
        if not dot:
            stem = name
        return stem + self.output_suffix


class ProcessorConfigBuilder:
    """Chained builder producing an immutable ProcessorConfig.

    Example:
        >>> config = (ProcessorConfigBuilder()
        ...           .add_input_suffix('.png', '.jpg')
        ...           .output_suffix('.atlas')
        ...           .flatten_output(False)
        ...           .build())
    """

    def __init__(self):
        self._name_filter: Optional[NameFilter] = None
        self._patterns: List[re.Pattern] = []
        self._comparator: Optional[Comparator] = compare_by_name
        self._output_suffix: Optional[str] = None
        self._recursive = True
        self._flatten_output = True

    @classmethod
    def from_config(cls, config: ProcessorConfig) -> "ProcessorConfigBuilder":
        """Start a builder pre-populated from an existing config."""
        builder = cls()
        builder._name_filter = config.name_filter
        builder._patterns = list(config.patterns)
        builder._comparator = config.comparator
        builder._output_suffix = config.output_suffix
        builder._recursive = config.recursive
        builder._flatten_output = config.flatten_output
        return builder

    def input_filter(self, name_filter) -> "ProcessorConfigBuilder":
        self._name_filter = as_name_filter(name_filter)
        return self

    def comparator(self, comparator: Optional[Comparator]) -> "ProcessorConfigBuilder":
        """Set the file comparator. By default files are sorted by name."""
        self._comparator = comparator
        return self

    def add_input_suffix(self, *suffixes: str) -> "ProcessorConfigBuilder":
        """Add case-insensitive suffixes for matching input files."""
        for suffix in suffixes:
            self._patterns.append(compile_pattern(suffix_pattern(suffix)))
        return self

    def add_input_regex(self, *regexes: str) -> "ProcessorConfigBuilder":
        """Add raw regexes; each must match a whole file name.

        Raises:
            PatternCompileError: Immediately, if a regex does not compile
        """
        for regex in regexes:
            self._patterns.append(compile_pattern(regex))
        return self

    def output_suffix(self, suffix: Optional[str]) -> "ProcessorConfigBuilder":
        """Set the suffix for output files, replacing the input extension."""
        self._output_suffix = suffix
        return self

    def recursive(self, recursive: bool) -> "ProcessorConfigBuilder":
        """Default is True."""
        self._recursive = recursive
        return self

    def flatten_output(self, flatten: bool) -> "ProcessorConfigBuilder":
        """Default is True. When False, output mirrors the input tree."""
        self._flatten_output = flatten
        return self

    def build(self) -> ProcessorConfig:
        return ProcessorConfig(
            name_filter=self._name_filter,
            patterns=tuple(self._patterns),
            comparator=self._comparator,
            output_suffix=self._output_suffix,
            recursive=self._recursive,
            flatten_output=self._flatten_output,
        )
