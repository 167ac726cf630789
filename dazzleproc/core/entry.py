"""Entry records produced by the processor engine."""

from dataclasses import dataclass
from typing import Optional

from .handle import FileHandle


@dataclass(frozen=True)
class Entry:
    """One discovered file or directory and where its output goes.

    Attributes:
        input_file: Source file or directory
        output_dir: Directory that will hold the output, or None when no
            output location could be resolved
        output_file: Computed output path; None exactly when output_dir is None
        depth: 0 for entries directly under the input root, +1 per level
    """

    input_file: FileHandle
    output_dir: Optional[FileHandle] = None
    output_file: Optional[FileHandle] = None
    depth: int = 0

    def __post_init__(self):
        if self.depth < 0:
            raise ValueError(f"Entry depth must be non-negative, got {self.depth}")
        if (self.output_dir is None) != (self.output_file is None):
            raise ValueError("output_file must be set exactly when output_dir is set")

    def __str__(self) -> str:
        return self.input_file.path_string()
