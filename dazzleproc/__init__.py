"""DazzleProc - Recursive File Collection and Processing.

DazzleProc walks an input file or directory tree, picks out files by name
pattern, computes where each file's output belongs (flattened into one
output directory, or mirroring the source tree) and hands everything to a
two-phase callback protocol: once per directory, then once per file.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from dazzleproc import collect_entries

    for entry in collect_entries('art', 'build', suffixes=['.png'],
                                 output_suffix='.atlas', flatten=False):
        print(entry.input_file, '->', entry.output_file)
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

# Core components
from .core import (
    FileHandle,
    Entry,
    OrderedDirectoryMap,
    NameFilter,
    PredicateFilter,
    HiddenFilter,
    ExcludeNamesFilter,
    ExtensionFilter,
    AllOf,
    as_name_filter,
)

# Adapters
from .adapters import LocalFileHandle, as_handle

# Configuration and errors
from .config import (
    ProcessorConfig,
    ProcessorConfigBuilder,
    compare_by_name,
)
from .errors import (
    ProcessorError,
    InvalidArgumentError,
    PatternCompileError,
    ProcessingError,
)

# Engine
from .processor import (
    FileProcessor,
    ProcessorCallbacks,
    FunctionCallbacks,
    ProcessRun,
)

# High-level API
from .api import build_config, process_tree, collect_entries

__all__ = [
    '__version__',
    # Core
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
    # Adapters
    'LocalFileHandle',
    'as_handle',
    # Config
    'ProcessorConfig',
    'ProcessorConfigBuilder',
    'compare_by_name',
    # Errors
    'ProcessorError',
    'InvalidArgumentError',
    'PatternCompileError',
    'ProcessingError',
    # Engine
    'FileProcessor',
    'ProcessorCallbacks',
    'FunctionCallbacks',
    'ProcessRun',
    # API
    'build_config',
    'process_tree',
    'collect_entries',
]
