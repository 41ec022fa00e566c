"""Data models for srcmetrics."""

import pathlib
from dataclasses import dataclass, field


class EmptyDatasetError(ValueError):
    """Raised by extrema and average queries when no files were scanned."""


@dataclass(frozen=True)
class ScanTarget:
    """A file selected for scanning, with its decoded content.

    Attributes:
        content: Full text of the file
        path: Path of the file as discovered under its root
        size_bytes: File size in bytes, from file metadata
    """

    content: str
    path: str
    size_bytes: int


@dataclass(frozen=True)
class FileMetrics:
    """Metrics extracted from a single file.

    Attributes:
        line_count: Segments after splitting the content on line feeds
        newline_count: Number of line-feed characters
        semicolon_count: Occurrences of ``;``
        todo_count: Occurrences of ``// TODO:``
        fixme_count: Occurrences of ``// FIXME:``
        path: Path of the file
        size_bytes: File size in bytes
    """

    line_count: int
    newline_count: int
    semicolon_count: int
    todo_count: int
    fixme_count: int
    path: str
    size_bytes: int


@dataclass
class ScanConfig:
    """Validated command-line configuration."""

    paths: list[pathlib.Path]
    extensions: list[str] = field(default_factory=list)
    exclude: list[str] = field(default_factory=list)
    verbose: bool = False
    progress: bool = True
