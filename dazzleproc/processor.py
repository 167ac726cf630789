"""The DazzleProc processor engine.

FileProcessor collects files recursively, filtering by name, and drives a
two-phase callback protocol over them: first once per traversed
directory (with the sorted entries found directly inside it), then once per
matched file in final sorted order. Each Entry carries the input file, the
output directory and the computed output file. When ``flatten_output`` is
False the output matches the directory structure of the input.

Only entries a callback explicitly reports through
``ProcessRun.add_processed_file`` are returned from ``process``.
"""

import functools
import logging
import os
from typing import Callable, Iterable, List, Optional, Union

from .adapters.filesystem import as_handle
from .config import ProcessorConfig
from .core.dir_map import OrderedDirectoryMap
from .core.entry import Entry
from .core.handle import FileHandle
from .errors import InvalidArgumentError, ProcessingError

logger = logging.getLogger(__name__)

Target = Union[FileHandle, str, os.PathLike]


class ProcessRun:
    """State belonging to one ``process`` call.

    A fresh run is created for every call, so nothing leaks from one call
    into the next. Callbacks receive the run and use it to report results.

    Attributes:
        config: The configuration the run was started with, e.g. for
            callbacks that need the output suffix
        output_root: Root handed to ``process``
        directories: Source directories mapped to their file entries
        processed: Entries reported via ``add_processed_file``
    """

    def __init__(self, config: ProcessorConfig, output_root: FileHandle):
        self.config = config
        self.output_root = output_root
        self.directories = OrderedDirectoryMap()
        self.processed: List[Entry] = []

    def add_processed_file(self, entry: Entry) -> None:
        """Report ``entry`` as having produced output.

        This is the only way an entry becomes part of the list returned
        by ``FileProcessor.process``.
        """
        self.processed.append(entry)


class ProcessorCallbacks:
    """Extension points invoked by FileProcessor.

    Subclass and override either hook, or both. The defaults do nothing.
    """

    def on_directory(self, run: ProcessRun, dir_entry: Entry, entries: List[Entry]) -> None:
        """Called once for each traversed directory, including empty ones.

        ``entries`` are the matched files directly inside the directory,
        already sorted by the configured comparator.
        """
        pass

    def on_file(self, run: ProcessRun, entry: Entry) -> None:
        """Called once for each matched file, in final sorted order."""
        pass


class FunctionCallbacks(ProcessorCallbacks):
    """Callbacks built from plain functions.

    Allows custom processing logic without subclassing.
    """

    def __init__(self,
                 on_file: Optional[Callable[[ProcessRun, Entry], None]] = None,
                 on_directory: Optional[Callable[[ProcessRun, Entry, List[Entry]], None]] = None):
        """Initialize with optional hook functions.

        Args:
            on_file: Function(run, entry)
            on_directory: Function(run, dir_entry, entries)
        """
        self.on_file_func = on_file
        self.on_directory_func = on_directory

    def on_directory(self, run: ProcessRun, dir_entry: Entry, entries: List[Entry]) -> None:
        if self.on_directory_func is not None:
            self.on_directory_func(run, dir_entry, entries)

    def on_file(self, run: ProcessRun, entry: Entry) -> None:
        if self.on_file_func is not None:
            self.on_file_func(run, entry)


class FileProcessor:
    """Recursive file collection and two-phase processing engine.

    The engine holds an immutable configuration and default callbacks.
    All per-call state lives in a ProcessRun, so one engine can be reused
    for any number of sequential ``process`` calls.

    Example:
        >>> config = ProcessorConfigBuilder().add_input_suffix('.png').build()
        >>> processor = FileProcessor(config, callbacks=MyAtlasPacker())
        >>> packed = processor.process('assets/images', 'build/atlases')
    """

    def __init__(self,
                 config: Optional[ProcessorConfig] = None,
                 callbacks: Optional[ProcessorCallbacks] = None):
        self.config = config or ProcessorConfig()
        self.callbacks = callbacks or ProcessorCallbacks()

    def process(self,
                input_file: Target,
                output_root: Optional[Target],
                callbacks: Optional[ProcessorCallbacks] = None) -> List[Entry]:
        """Process the specified input file or directory.

        A file is processed on its own; for a directory, its immediate
        children are the starting file list.

        Args:
            input_file: Input file or directory (path or FileHandle)
            output_root: Root for computed output paths (path or FileHandle)
            callbacks: Overrides the engine's callbacks for this call

        Returns:
            The entries reported via ``ProcessRun.add_processed_file``

        Raises:
            InvalidArgumentError: If the input does not exist or the output
                root is None
            ProcessingError: If a callback raises
        """
        input_handle = as_handle(input_file)
        if not input_handle.exists():
            raise InvalidArgumentError(
                f"Input file does not exist: {input_handle.absolute_path()}"
            )
        if output_root is not None:
            output_root = as_handle(output_root)

        if input_handle.is_file():
            return self.process_files([input_handle], output_root, callbacks=callbacks)
        return self.process_files(input_handle.children(), output_root,
                                  callbacks=callbacks, input_dir=input_handle)

    def process_files(self,
                      files: Iterable[FileHandle],
                      output_root: Optional[FileHandle],
                      callbacks: Optional[ProcessorCallbacks] = None,
                      input_dir: Optional[FileHandle] = None) -> List[Entry]:
        """Process the specified input files.

        Args:
            files: Files and directories to start from (depth 0)
            output_root: Root for computed output paths; required
            callbacks: Overrides the engine's callbacks for this call
            input_dir: Directory the files were listed from; registered
                up front so it is reported even when it has no children

        Returns:
            The entries reported via ``ProcessRun.add_processed_file``
        """
        if output_root is None:
            raise InvalidArgumentError("output_root must not be None")
        callbacks = callbacks or self.callbacks
        config = self.config

        run = ProcessRun(config, output_root)
        files = list(files)
        logger.debug("Processing %d input(s) into %s", len(files), output_root)
        if input_dir is not None:
            run.directories.register(input_dir)
        self._walk(run, files, output_root, 0)
        logger.debug("Collected %d file(s) in %d director(ies)",
                     run.directories.entry_count(), len(run.directories))

        sort_key = self._entry_sort_key()
        all_entries: List[Entry] = []
        for directory, dir_entries in run.directories.items():
            if sort_key is not None:
                dir_entries.sort(key=sort_key)

            dir_entry = self._directory_entry(run, directory, dir_entries)
            try:
                callbacks.on_directory(run, dir_entry, dir_entries)
            except Exception as e:
                raise ProcessingError("directory", directory.absolute_path(), dir_entry) from e
            all_entries.extend(dir_entries)

        if sort_key is not None:
            all_entries.sort(key=sort_key)
        for entry in all_entries:
            try:
                callbacks.on_file(run, entry)
            except Exception as e:
                raise ProcessingError("file", entry.input_file.absolute_path(), entry) from e

        logger.debug("Run finished: %d of %d entries reported as processed",
                     len(run.processed), len(all_entries))
        return run.processed

    def _entry_sort_key(self):
        comparator = self.config.comparator
        if comparator is None:
            return None
        file_key = functools.cmp_to_key(comparator)
        return lambda entry: file_key(entry.input_file)

    def _directory_entry(self, run: ProcessRun, input_dir: FileHandle,
                         dir_entries: List[Entry]) -> Entry:
        """Build the directory-level entry handed to ``on_directory``."""
        if self.config.flatten_output:
            output_dir = run.output_root
        elif dir_entries:
            output_dir = dir_entries[0].output_dir
        else:
            output_dir = None

        output_file = None
        if output_dir is not None:
            output_file = output_dir.child(self.config.output_name(input_dir.name))
        return Entry(input_file=input_dir, output_dir=output_dir, output_file=output_file)

    def _walk(self, run: ProcessRun, files: List[FileHandle],
              output_dir: FileHandle, depth: int) -> None:
        """Depth-first walk populating ``run.directories``."""
        config = self.config
        directories = run.directories

        # Every directory we pass through gets a key, even with no matches
        for file in files:
            parent = file.parent()
            if parent is not None:
                directories.register(parent)

        for file in files:
            if file.is_file():
                if not config.matches(file.name):
                    continue
                if config.name_filter is not None and not config.name_filter.accepts(file):
                    logger.debug("Rejected by name filter: %s", file)
                    continue

                entry_output_dir = run.output_root if config.flatten_output else output_dir
                entry = Entry(input_file=file, output_dir=entry_output_dir,
                              output_file=entry_output_dir.child(config.output_name(file.name)),
                              depth=depth)
                directories.add(file.parent(), entry)

            if config.recursive and file.is_dir():
                directories.register(file)
                children = file.children(config.name_filter)
                self._walk(run, children, output_dir.child(file.name), depth + 1)
