#!/usr/bin/env python3
"""Convert every SVG file in a folder to React components."""

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from svgenius.batch import (
    BatchOptions,
    format_batch_report,
    parse_batch_config_file,
    run_batch,
)
from svgenius.errors import EmptyBatchError
from svgenius.files import collect_svg_sources, write_batch_outputs
from svgenius.generator import MANIFEST_FILENAMES

DEFAULT_OUTPUT_DIR = Path("./output")


def build_options(args: argparse.Namespace) -> BatchOptions:
    """Build batch options from an optional config file and CLI flags.

    CLI flags override values from the config file.

    Raises:
        ValueError: If the config file or a flag value is invalid.
    """
    options = parse_batch_config_file(args.config) if args.config else BatchOptions()

    overrides = {}
    if args.untyped:
        overrides["language_mode"] = "untyped"
    if args.barrel:
        overrides["emit_manifest"] = True
    if args.workers is not None:
        overrides["max_workers"] = args.workers
    if args.output is not None:
        overrides["output_directory"] = args.output
    elif options.output_directory is None:
        overrides["output_directory"] = DEFAULT_OUTPUT_DIR

    return dataclasses.replace(options, **overrides)


def main() -> int:
    """Main entry point.

    Returns:
        Exit code:
        - 0: Success
        - 1: I/O error
        - 2: Config file error
        - 3: Conversion errors detected (successful files are still written)
    """
    parser = argparse.ArgumentParser(
        description="Convert every SVG file in a folder to React components.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert icons/ into output/ as TypeScript components
  %(prog)s icons/

  # JavaScript components plus an index.js barrel file
  %(prog)s icons/ --output src/icons --untyped --barrel

  # Options from a YAML file
  %(prog)s icons/ --config svgenius.yaml
""",
    )
    parser.add_argument("folder", type=Path, help="Folder containing SVG files")
    parser.add_argument(
        "--output", "-o", type=Path, help="Output folder (default: ./output)"
    )
    parser.add_argument(
        "--untyped",
        action="store_true",
        help="Generate JavaScript (.jsx) components instead of TypeScript",
    )
    parser.add_argument(
        "--barrel", "-b", action="store_true", help="Generate barrel file (index.ts)"
    )
    parser.add_argument("--config", "-c", type=Path, help="YAML config file")
    parser.add_argument(
        "--workers", "-j", type=int, help="Number of worker threads (default: 1)"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.folder.is_dir():
        print(f"Error: Folder not found: {args.folder}", file=sys.stderr)
        return 1

    if args.config and not args.config.exists():
        print(f"Error: Config file not found: {args.config}", file=sys.stderr)
        return 1

    try:
        options = build_options(args)
    except Exception as e:
        print(f"Error: Failed to parse config: {e}", file=sys.stderr)
        return 2

    try:
        sources = collect_svg_sources(args.folder)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Failed to read SVG files: {e}", file=sys.stderr)
        return 1

    try:
        report = run_batch(sources, options)
    except EmptyBatchError:
        print(f"Error: No SVG files found in: {args.folder}", file=sys.stderr)
        return 1

    print(format_batch_report(report))

    out_dir = options.output_directory
    try:
        write_batch_outputs(report, out_dir, options.language_mode)
    except OSError as e:
        print(f"Error: Failed to write output: {e}", file=sys.stderr)
        return 1

    print(f"\nBatch conversion complete: {out_dir}")
    if report.manifest_text is not None:
        manifest = MANIFEST_FILENAMES[options.language_mode]
        print(f"Barrel file generated: {out_dir / manifest}")

    if report.has_errors:
        return 3

    return 0


if __name__ == "__main__":
    sys.exit(main())
