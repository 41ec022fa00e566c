"""Folding per-file metrics into run-wide totals."""

import bisect
import functools
from collections.abc import Iterable
from dataclasses import dataclass, field

from srcmetrics.models import EmptyDatasetError, FileMetrics


def _lowest(index: list[tuple[int, str]]) -> tuple[int, str]:
    return index[0]


def _highest(index: list[tuple[int, str]]) -> tuple[int, str]:
    # Among ties at the top value, report the lexicographically first path
    top = index[-1][0]
    return index[bisect.bisect_left(index, (top, ""))]


@dataclass
class AggregateMetrics:
    """Run-wide totals plus sorted indexes for extrema queries.

    ``lines_index`` and ``size_index`` hold one ``(metric, path)`` pair per
    folded file, kept in ascending order. Because every file is kept and ties
    are broken by path, folding the same files in any order produces an equal
    aggregate.

    Attributes:
        total_files: Number of files folded
        total_lines: Sum of line counts
        total_newlines: Sum of line-feed counts
        total_size_bytes: Sum of file sizes in bytes
        total_semicolons: Sum of semicolon counts
        total_todos: Sum of TODO marker counts
        total_fixmes: Sum of FIXME marker counts
        lines_index: Sorted (line_count, path) pairs
        size_index: Sorted (size_bytes, path) pairs
    """

    total_files: int = 0
    total_lines: int = 0
    total_newlines: int = 0
    total_size_bytes: int = 0
    total_semicolons: int = 0
    total_todos: int = 0
    total_fixmes: int = 0
    lines_index: list[tuple[int, str]] = field(default_factory=list)
    size_index: list[tuple[int, str]] = field(default_factory=list)

    def add(self, metrics: FileMetrics) -> None:
        """Fold one file's metrics into the totals."""
        self.total_files += 1
        self.total_lines += metrics.line_count
        self.total_newlines += metrics.newline_count
        self.total_size_bytes += metrics.size_bytes
        self.total_semicolons += metrics.semicolon_count
        self.total_todos += metrics.todo_count
        self.total_fixmes += metrics.fixme_count
        bisect.insort(self.lines_index, (metrics.line_count, metrics.path))
        bisect.insort(self.size_index, (metrics.size_bytes, metrics.path))

    def merge(self, other: "AggregateMetrics") -> "AggregateMetrics":
        """Combine two partial aggregates into a new one.

        Folding a partition of the files separately and merging the parts
        gives the same result as one sequential fold.
        """
        return AggregateMetrics(
            total_files=self.total_files + other.total_files,
            total_lines=self.total_lines + other.total_lines,
            total_newlines=self.total_newlines + other.total_newlines,
            total_size_bytes=self.total_size_bytes + other.total_size_bytes,
            total_semicolons=self.total_semicolons + other.total_semicolons,
            total_todos=self.total_todos + other.total_todos,
            total_fixmes=self.total_fixmes + other.total_fixmes,
            lines_index=sorted(self.lines_index + other.lines_index),
            size_index=sorted(self.size_index + other.size_index),
        )

    @property
    def is_empty(self) -> bool:
        return self.total_files == 0

    def _require_data(self) -> None:
        if self.is_empty:
            raise EmptyDatasetError("no files were scanned")

    def min_lines(self) -> tuple[int, str]:
        """Get the file with the fewest lines as ``(line_count, path)``.

        Raises:
            EmptyDatasetError: If no files were folded
        """
        self._require_data()
        return _lowest(self.lines_index)

    def max_lines(self) -> tuple[int, str]:
        """Get the file with the most lines as ``(line_count, path)``.

        Raises:
            EmptyDatasetError: If no files were folded
        """
        self._require_data()
        return _highest(self.lines_index)

    def average_lines(self) -> int:
        """Average number of lines per file, rounded down.

        Raises:
            EmptyDatasetError: If no files were folded
        """
        self._require_data()
        return self.total_lines // self.total_files

    def min_size(self) -> tuple[int, str]:
        """Get the smallest file as ``(size_bytes, path)``."""
        self._require_data()
        return _lowest(self.size_index)

    def max_size(self) -> tuple[int, str]:
        """Get the largest file as ``(size_bytes, path)``."""
        self._require_data()
        return _highest(self.size_index)

    def average_size(self) -> int:
        """Average file size in bytes, rounded down."""
        self._require_data()
        return self.total_size_bytes // self.total_files


def fold(state: AggregateMetrics, metrics: FileMetrics) -> AggregateMetrics:
    """Fold one file's metrics into ``state`` and return it."""
    state.add(metrics)
    return state


def finalize(state: AggregateMetrics) -> AggregateMetrics:
    """Finish a fold. Nothing is deferred, so the state is returned as is."""
    return state


def aggregate(metrics: Iterable[FileMetrics]) -> AggregateMetrics:
    """Fold a sequence of per-file metrics starting from empty totals.

    Args:
        metrics: Per-file metrics, in any order

    Returns:
        The finalized aggregate
    """
    return finalize(functools.reduce(fold, metrics, AggregateMetrics()))
