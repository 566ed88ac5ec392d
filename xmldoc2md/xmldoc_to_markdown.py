"""Convert compiler-generated XML documentation comments to Markdown.

Reads the XML file the C# compiler writes with `GenerateDocumentationFile`
and produces either one Markdown page per documented type (plus `index.md`)
or a single Markdown document.
"""

import argparse
import logging
from pathlib import Path

from xmldoc2md.run_conversion import run_conversion


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    ap = argparse.ArgumentParser(
        prog="xmldoc2md",
        description="Convert C# XML documentation comments to Markdown.",
    )
    ap.add_argument(
        "xml",
        type=Path,
        help="Path to the XML documentation file produced by the compiler",
    )
    ap.add_argument(
        "out",
        type=Path,
        help="Output directory, or output file path when --single is used",
    )
    ap.add_argument(
        "--single",
        action="store_true",
        default=None,
        help="Emit a single Markdown file instead of per-type files",
    )
    ap.add_argument(
        "--file-names",
        choices=["verbatim", "clean", "clean-generics"],
        default=None,
        help="File name mode: 'verbatim' (default) or 'clean' (strip generic arity)",
    )
    ap.add_argument(
        "--root-namespace",
        default=None,
        help="Namespace prefix to trim from displayed type names",
    )
    ap.add_argument(
        "--trim-root-in-file-names",
        action="store_true",
        default=None,
        help="Also trim --root-namespace from generated file names",
    )
    ap.add_argument(
        "--code-language",
        default=None,
        help="Language tag for fenced code blocks (default: csharp)",
    )
    ap.add_argument(
        "--config",
        default=None,
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--report",
        default=None,
        help="Write a JSON report of the run to this path",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Compute the output file list without writing Markdown",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the conversion process."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_conversion(args)


if __name__ == "__main__":
    raise SystemExit(main())
