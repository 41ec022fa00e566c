"""srcmetrics: aggregate line, marker and size metrics for source trees.

This package walks directories, scans files with selected extensions,
and reports totals together with per-file extrema and averages.
"""

from srcmetrics.aggregation import AggregateMetrics, aggregate
from srcmetrics.cli import main
from srcmetrics.models import EmptyDatasetError, FileMetrics, ScanTarget
from srcmetrics.scanning import scan

__version__ = "0.1.0"
__all__ = [
    "main",
    "AggregateMetrics",
    "EmptyDatasetError",
    "FileMetrics",
    "ScanTarget",
    "aggregate",
    "scan",
]
