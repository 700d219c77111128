"""CLI entry point for ebolg.

Usage: ebolg <FILE or DIRECTORY> <OUTPUT DIRECTORY>
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__


def app(argv: list[str] | None = None) -> None:
    """Console script entrypoint."""
    raise SystemExit(main(argv))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ebolg",
        description="Convert Markdown posts into Tailwind-styled HTML pages.",
    )
    parser.add_argument("source", type=Path, metavar="FILE_OR_DIRECTORY", help="Markdown file or directory of posts")
    parser.add_argument("out", type=Path, metavar="OUTPUT_DIRECTORY", help="Output directory")
    parser.add_argument(
        "--stylesheet",
        "-s",
        type=Path,
        default=None,
        help="Prebuilt tailwind.css to copy into OUTPUT_DIRECTORY/style/",
    )
    parser.add_argument("--index", action="store_true", help="Also write an index.html listing all posts")
    parser.add_argument("--verbose", action="store_true", help="Log every page written")
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"ebolg {__version__}",
    )

    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    return _cmd_build(args)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _cmd_build(args: argparse.Namespace) -> int:
    from .site.build import build_site

    try:
        report = build_site(
            args.source,
            args.out,
            stylesheet=args.stylesheet,
            with_index=bool(args.index),
        )
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("✓ Pages generated")
    print(f"  Output: {report.out_dir}")
    print(f"  Pages: {len(report.written)}")
    if report.index:
        print(f"  Index: {report.index}")
    print(f"  Stylesheet: {report.stylesheet or 'missing'}")

    if report.skipped:
        print(f"\nSkipped ({len(report.skipped)}):")
        for s in report.skipped[:10]:
            print(f"  - {s}")
        if len(report.skipped) > 10:
            print(f"  ... and {len(report.skipped) - 10} more")

    if report.warnings:
        print(f"\nWarnings ({len(report.warnings)}):")
        for w in report.warnings:
            print(f"  - {w}")

    return 0


if __name__ == "__main__":
    app()
