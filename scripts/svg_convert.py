#!/usr/bin/env python3
"""Convert a single SVG file to a React component."""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from svgenius.convert import convert_svg
from svgenius.errors import SvgeniusError
from svgenius.files import component_path, read_svg_source, write_component
from svgenius.naming import component_name_from_path


def main() -> int:
    """Main entry point.

    Returns:
        Exit code:
        - 0: Success
        - 1: I/O error
        - 2: Invalid arguments
        - 3: Conversion error
    """
    parser = argparse.ArgumentParser(
        description="Convert a single SVG file to a React component.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Write MyIcon.tsx to the current directory
  %(prog)s my-icon.svg

  # Plain JavaScript with an explicit name and path
  %(prog)s my-icon.svg --untyped --name close-button --output src/CloseButton.jsx
""",
    )
    parser.add_argument("svg_file", type=Path, help="Path to SVG file to convert")
    parser.add_argument(
        "--output", "-o", type=Path, help="Output file path (default: ./<Name>.tsx)"
    )
    parser.add_argument(
        "--name", "-n", help="Component name (default: derived from the file name)"
    )
    parser.add_argument(
        "--untyped",
        action="store_true",
        help="Generate a JavaScript (.jsx) component instead of TypeScript",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    mode = "untyped" if args.untyped else "typed"

    # Validate input file
    if not args.svg_file.exists():
        print(f"Error: SVG file not found: {args.svg_file}", file=sys.stderr)
        return 1

    if args.svg_file.suffix.lower() != ".svg":
        print(
            f"Error: Invalid file type: {args.svg_file} (expected .svg)",
            file=sys.stderr,
        )
        return 2

    try:
        svg_text = read_svg_source(args.svg_file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Failed to read SVG file: {e}", file=sys.stderr)
        return 1

    try:
        if args.name is not None:
            name = args.name
        else:
            name = component_name_from_path(args.svg_file)
        result = convert_svg(svg_text, name, mode)
    except SvgeniusError as e:
        print(f"Error: {args.svg_file}: {e}", file=sys.stderr)
        return 3

    for warning in result.warnings:
        print(f"[WARNING] {warning}", file=sys.stderr)

    out_path = args.output or component_path(Path.cwd(), result.component_name, mode)

    try:
        write_component(result, out_path)
    except OSError as e:
        print(f"Error: Failed to write output: {e}", file=sys.stderr)
        return 1

    print(f"Converted: {out_path}")
    print(f"Component name: {result.component_name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
