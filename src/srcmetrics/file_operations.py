"""File system traversal and file reading utilities."""

import os
import pathlib
from collections.abc import Iterable

import pathspec

from srcmetrics.models import ScanTarget


def file_extension(name: str) -> str:
    """Return the extension of a file name without its leading dot.

    Args:
        name: File name (not a full path)

    Returns:
        The text after the final dot, or an empty string when the name has
        no extension

    Examples:
        >>> file_extension("a.b.rs")
        'rs'
        >>> file_extension(".bashrc")
        ''
    """
    return os.path.splitext(name)[1][1:]


def get_exclude_spec(patterns: Iterable[str]) -> pathspec.PathSpec | None:
    """Build a .gitignore-style PathSpec from exclude patterns.

    Args:
        patterns: Patterns in .gitignore syntax

    Returns:
        PathSpec matching the patterns, or None when there are none
    """
    patterns = [p for p in patterns if p.strip()]
    if not patterns:
        return None
    return pathspec.GitIgnoreSpec.from_lines(patterns)


def _is_excluded(
    exclude_spec: pathspec.PathSpec | None,
    root: pathlib.Path,
    path: pathlib.Path,
    is_dir: bool,
) -> bool:
    if exclude_spec is None:
        return False
    relative = path.relative_to(root).as_posix()
    # Trailing slash so directory patterns like "build/" match
    if is_dir:
        relative += "/"
    return exclude_spec.match_file(relative)


def collect_files(
    roots: Iterable[pathlib.Path | str],
    extensions: Iterable[str],
    exclude_spec: pathspec.PathSpec | None = None,
) -> list[pathlib.Path]:
    """Collect every file under the roots whose extension is selected.

    Roots that exist but are not directories are skipped. A missing root or
    an unreadable directory raises, aborting the whole collection.
    Directory symlinks are followed without a cycle guard.

    Args:
        roots: Directories to scan
        extensions: Extensions to select, without leading dots (case-sensitive)
        exclude_spec: Optional PathSpec of root-relative paths to skip

    Returns:
        List of selected file paths, in directory-read order

    Raises:
        OSError: If a directory cannot be read
    """
    wanted = set(extensions)
    files_to_process: list[pathlib.Path] = []

    for root in roots:
        root = pathlib.Path(root)
        if root.exists() and not root.is_dir():
            continue

        # Depth-first over an explicit stack of directories
        pending = [root]
        while pending:
            directory = pending.pop()
            with os.scandir(directory) as entries:
                children = list(entries)

            subdirs = []
            for entry in children:
                entry_path = pathlib.Path(entry.path)
                if entry.is_dir():
                    if not _is_excluded(exclude_spec, root, entry_path, True):
                        subdirs.append(entry_path)
                    continue

                extension = file_extension(entry.name)
                if not extension or extension not in wanted:
                    continue
                if _is_excluded(exclude_spec, root, entry_path, False):
                    continue
                files_to_process.append(entry_path)

            # Reversed so the first subdirectory read is the next one visited
            pending.extend(reversed(subdirs))

    return files_to_process


def read_target(file_path: pathlib.Path) -> ScanTarget:
    """Read a single file into a ScanTarget.

    The content is decoded as strict UTF-8 with no newline translation.

    Args:
        file_path: Path to the file

    Returns:
        ScanTarget holding the content, path and size in bytes

    Raises:
        OSError: If the file or its metadata cannot be read
        UnicodeDecodeError: If the content is not valid UTF-8
    """
    with open(file_path, encoding="utf-8", newline="") as f:
        content = f.read()
    size = file_path.stat().st_size
    return ScanTarget(content=content, path=str(file_path), size_bytes=size)


def walk(
    roots: Iterable[pathlib.Path | str],
    extensions: Iterable[str],
    exclude_spec: pathspec.PathSpec | None = None,
) -> list[ScanTarget]:
    """Collect and read every selected file under the roots.

    Args:
        roots: Directories to scan
        extensions: Extensions to select, without leading dots
        exclude_spec: Optional PathSpec of root-relative paths to skip

    Returns:
        One ScanTarget per selected file
    """
    return [read_target(path) for path in collect_files(roots, extensions, exclude_spec)]
