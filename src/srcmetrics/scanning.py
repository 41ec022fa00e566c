"""Per-file text metrics."""

from srcmetrics.models import FileMetrics, ScanTarget

SEMICOLON = ";"
TODO_MARKER = "// TODO:"
FIXME_MARKER = "// FIXME:"


def count_lines(content: str) -> int:
    """Count the segments left after splitting on line feeds.

    A trailing newline opens one more (empty) segment, so an empty file
    has one line and ``"a\\n"`` has two.

    Examples:
        >>> count_lines("")
        1
        >>> count_lines("x;\\ny;\\n")
        3
    """
    return len(content.split("\n"))


def count_newlines(content: str) -> int:
    """Count line-feed characters.

    Blank lines count too, so this is not the number of non-blank
    newline-terminated lines.

    Examples:
        >>> count_newlines("")
        0
        >>> count_newlines("x;\\ny;\\n")
        2
    """
    return content.count("\n")


def scan(target: ScanTarget) -> FileMetrics:
    """Extract metrics from one file's content.

    Marker and semicolon counts are plain, non-overlapping substring counts;
    string literals and comments are not treated specially.

    Args:
        target: The decoded file to scan

    Returns:
        FileMetrics for the file
    """
    content = target.content
    return FileMetrics(
        line_count=count_lines(content),
        newline_count=count_newlines(content),
        semicolon_count=content.count(SEMICOLON),
        todo_count=content.count(TODO_MARKER),
        fixme_count=content.count(FIXME_MARKER),
        path=target.path,
        size_bytes=target.size_bytes,
    )
