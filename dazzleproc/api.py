"""High-level API for DazzleProc.

Functional wrappers around FileProcessor for the common cases, so simple
scripts do not need to deal with builders and callback classes.
"""

from typing import Callable, Iterable, List, Optional

from .config import Comparator, ProcessorConfig, ProcessorConfigBuilder, compare_by_name
from .core.entry import Entry
from .processor import FileProcessor, FunctionCallbacks, ProcessRun, Target


def build_config(suffixes: Iterable[str] = (),
                 regexes: Iterable[str] = (),
                 name_filter=None,
                 comparator: Optional[Comparator] = compare_by_name,
                 output_suffix: Optional[str] = None,
                 recursive: bool = True,
                 flatten: bool = True) -> ProcessorConfig:
    """Build a ProcessorConfig from keyword options.

    Args:
        suffixes: Case-insensitive name suffixes to match (e.g. '.png')
        regexes: Raw regexes that must match whole file names
        name_filter: NameFilter or predicate over handles
        comparator: File comparator; None keeps discovery order
        output_suffix: Replaces the input extension in output names
        recursive: Walk subdirectories
        flatten: Put every output directly under the output root

    Raises:
        PatternCompileError: If a regex does not compile
    """
    return (ProcessorConfigBuilder()
            .add_input_suffix(*suffixes)
            .add_input_regex(*regexes)
            .input_filter(name_filter)
            .comparator(comparator)
            .output_suffix(output_suffix)
            .recursive(recursive)
            .flatten_output(flatten)
            .build())


def process_tree(input_file: Target,
                 output_root: Target,
                 on_file: Optional[Callable[[ProcessRun, Entry], None]] = None,
                 on_directory: Optional[Callable[[ProcessRun, Entry, List[Entry]], None]] = None,
                 **options) -> List[Entry]:
    """One-shot processing of a file or directory tree.

    Args:
        input_file: Input file or directory
        output_root: Root for computed output paths
        on_file: Function(run, entry) called per matched file
        on_directory: Function(run, dir_entry, entries) called per directory
        **options: Passed to ``build_config``

    Returns:
        Entries reported by the callbacks via ``run.add_processed_file``

    Example:
        >>> def pack(run, entry):
        ...     convert(entry.input_file, entry.output_file)
        ...     run.add_processed_file(entry)
        >>> process_tree('art', 'build', on_file=pack, suffixes=['.png'])
    """
    processor = FileProcessor(build_config(**options),
                              FunctionCallbacks(on_file=on_file, on_directory=on_directory))
    return processor.process(input_file, output_root)


def collect_entries(input_file: Target, output_root: Target, **options) -> List[Entry]:
    """Return every matched file entry in final processing order.

    Example:
        >>> for entry in collect_entries('art', 'build', suffixes=['.png'],
        ...                              output_suffix='.atlas', flatten=False):
        ...     print(entry.input_file, '->', entry.output_file)
    """
    return process_tree(input_file, output_root,
                        on_file=lambda run, entry: run.add_processed_file(entry),
                        **options)
