"""Report generation utilities."""

import sys
from typing import TextIO

from tqdm import tqdm

from srcmetrics.aggregation import AggregateMetrics, finalize, fold
from srcmetrics.file_operations import collect_files, get_exclude_spec, read_target
from srcmetrics.models import ScanConfig
from srcmetrics.scanning import scan

BYTE_UNITS = ["B", "KiB", "MiB", "GiB", "TiB", "PiB"]

LABEL_WIDTH = 20
PATH_PADDING = " " * 5


def format_bytes(size_bytes: int, width: int = 0) -> str:
    """Format a byte count with binary-prefix units.

    Args:
        size_bytes: Size in bytes
        width: Minimum width of the numeric part, right-aligned

    Returns:
        Formatted string like "1.50 KiB", or the raw integer digits at or
        above 1024 PiB

    Examples:
        >>> format_bytes(1023)
        '1023.00 B'
        >>> format_bytes(1536)
        '1.50 KiB'
    """
    for power, unit in enumerate(BYTE_UNITS):
        if size_bytes < 1024 ** (power + 1):
            value = size_bytes / 1024**power
            return f"{value:>{width}.2f} {unit}"
    return str(size_bytes)


def _row(label: str, value: int) -> str:
    return f"{label}{value:>{LABEL_WIDTH - len(label)}}"


def generate_report(metrics: AggregateMetrics) -> str:
    """Render aggregated metrics as the line-oriented text report.

    The smallest and largest rows pair the line-count extrema with the
    size extrema, which may belong to different files.

    Args:
        metrics: Finalized aggregate

    Returns:
        Report text ending with a newline
    """
    lines = [
        _row("semicolons", metrics.total_semicolons),
        _row("newlines", metrics.total_newlines),
        _row("todos", metrics.total_todos),
        _row("fixmes", metrics.total_fixmes),
        _row("files", metrics.total_files)
        + f" files{format_bytes(metrics.total_size_bytes, 8)}",
        "",
        _row("lines", metrics.total_lines),
    ]

    if metrics.is_empty:
        lines.append("no files found")
        return "\n".join(lines) + "\n"

    smallest_lines, smallest_path = metrics.min_lines()
    largest_lines, largest_path = metrics.max_lines()
    smallest_size, _ = metrics.min_size()
    largest_size, _ = metrics.max_size()

    lines.append(
        _row("smallest file", smallest_lines)
        + f" lines{format_bytes(smallest_size, 8)}{PATH_PADDING}{smallest_path}"
    )
    lines.append(
        _row("largest file", largest_lines)
        + f" lines{format_bytes(largest_size, 8)}{PATH_PADDING}{largest_path}"
    )
    lines.append(
        _row("average", metrics.average_lines())
        + f" lines{format_bytes(metrics.average_size(), 8)}"
    )
    return "\n".join(lines) + "\n"


def create_report(config: ScanConfig, out: TextIO | None = None) -> AggregateMetrics:
    """Scans the configured directories and writes the report.

    Files are read, scanned and folded one at a time. Any I/O or decoding
    failure aborts the run with exit status 1 before anything is written.

    Args:
        config: Validated run configuration
        out: Stream for the report, stdout by default

    Returns:
        The finalized aggregate
    """
    if out is None:
        out = sys.stdout
    exclude_spec = get_exclude_spec(config.exclude)

    if config.verbose:
        roots = ", ".join(str(p) for p in config.paths)
        print(f"📂 Scanning: {roots}", file=sys.stderr)
        print(f"🔍 Extensions: {', '.join(config.extensions) or '(none)'}", file=sys.stderr)

    try:
        file_paths = collect_files(config.paths, config.extensions, exclude_spec)
    except OSError as e:
        print(f"Error: Could not read directory: {e}", file=sys.stderr)
        sys.exit(1)

    if config.verbose:
        print(f"✓ Found {len(file_paths)} files to process", file=sys.stderr)

    state = AggregateMetrics()
    with tqdm(
        total=len(file_paths),
        desc="Scanning",
        unit="file",
        disable=not config.progress,
    ) as pbar:
        for file_path in file_paths:
            try:
                target = read_target(file_path)
            except UnicodeDecodeError as e:
                print(f"Error: Could not decode {file_path} as UTF-8: {e}", file=sys.stderr)
                sys.exit(1)
            except OSError as e:
                print(f"Error: Could not read {file_path}: {e}", file=sys.stderr)
                sys.exit(1)

            metrics = scan(target)
            fold(state, metrics)
            if config.verbose:
                print(
                    f"  ✓ {metrics.path} ({metrics.line_count} lines, "
                    f"{format_bytes(metrics.size_bytes)})",
                    file=sys.stderr,
                )
            pbar.update(1)

    state = finalize(state)
    out.write(generate_report(state))
    return state
