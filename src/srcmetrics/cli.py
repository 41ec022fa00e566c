"""Command-line interface for srcmetrics."""

import argparse
import pathlib

from srcmetrics.models import ScanConfig
from srcmetrics.output_generators import create_report


def parse_extensions(value: str) -> list[str]:
    """Split a comma-separated extension list, dropping empty items."""
    return [ext.strip() for ext in value.split(",") if ext.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="srcmetrics",
        description="A command line utility for reporting metrics.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "extensions",
        nargs="?",
        default=None,
        help=(
            "Comma-separated list of file extensions to report, without dots (e.g. rs,toml). "
            "With two or more positionals the first is always read as extensions; "
            "use -e/--extensions to pass several directories unambiguously."
        ),
    )
    parser.add_argument("path", nargs="+", help="The directories to report.")
    parser.add_argument(
        "-e",
        "--extensions",
        dest="extensions_flag",
        default=None,
        metavar="EXTS",
        help="Extensions as an option; every positional is then a directory.",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Skip paths matching this .gitignore-style pattern (repeatable).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show detailed processing information on stderr.",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Do not show the progress bar.",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> ScanConfig:
    """Parse command-line arguments into a ScanConfig."""
    args = build_parser().parse_args(argv)
    paths = list(args.path)
    extensions = args.extensions or ""
    if args.extensions_flag is not None:
        # The leading positional was a directory, not an extension list
        if args.extensions is not None:
            paths.insert(0, args.extensions)
        extensions = args.extensions_flag
    return ScanConfig(
        paths=[pathlib.Path(p) for p in paths],
        extensions=parse_extensions(extensions),
        exclude=args.exclude,
        verbose=args.verbose,
        progress=not args.no_progress,
    )


def main(argv: list[str] | None = None):
    """Main entry point for the srcmetrics CLI."""
    create_report(parse_args(argv))


if __name__ == "__main__":
    main()
