#!/usr/bin/env python3
"""Demo: plan texture atlases for an image tree.

Each source directory becomes one atlas. The per-directory callback writes
a JSON manifest listing the images that would be packed into it; the
per-file callback only reports where each image's standalone output would
go. Actual image packing is left to the real build tool.

Usage:
    python examples/atlas_manifest.py <images-dir> <output-dir> [--mirror]
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from dazzleproc import (
    FileProcessor,
    HiddenFilter,
    ProcessorCallbacks,
    ProcessorConfigBuilder,
)


class AtlasManifestWriter(ProcessorCallbacks):
    """Writes one ``<dir>.atlas`` manifest per directory with images."""

    def on_directory(self, run, dir_entry, entries):
        if not entries or dir_entry.output_file is None:
            return
        manifest = Path(dir_entry.output_file.path_string())
        manifest.parent.mkdir(parents=True, exist_ok=True)
        manifest.write_text(json.dumps({
            'atlas': dir_entry.input_file.name,
            'images': [entry.input_file.path_string() for entry in entries],
        }, indent=2))
        run.add_processed_file(dir_entry)

    def on_file(self, run, entry):
        indent = "  " * entry.depth
        print(f"{indent}{entry.input_file.name} -> {entry.output_file}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument('input', help="Image directory to scan")
    parser.add_argument('output', help="Directory receiving the manifests")
    parser.add_argument('--mirror', action='store_true',
                        help="Mirror the source tree instead of flattening")
    parser.add_argument('-v', '--verbose', action='store_true')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    config = (ProcessorConfigBuilder()
              .add_input_suffix('.png', '.jpg', '.jpeg')
              .input_filter(HiddenFilter())
              .output_suffix('.atlas')
              .flatten_output(not args.mirror)
              .build())
    written = FileProcessor(config, AtlasManifestWriter()).process(args.input, args.output)

    print(f"\nWrote {len(written)} atlas manifest(s):")
    for entry in written:
        print(f"  {entry.output_file}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
