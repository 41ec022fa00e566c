"""Shared fixtures for srcmetrics tests."""

from pathlib import Path

import pytest


@pytest.fixture
def make_tree(tmp_path: Path):
    """Create files under tmp_path from a {relative_path: content} mapping.

    String content is written as UTF-8 bytes without newline translation;
    bytes are written as is. Returns the tree root.
    """

    def _make(files: dict[str, str | bytes], root: Path | None = None) -> Path:
        base = root or tmp_path
        base.mkdir(parents=True, exist_ok=True)
        for rel, content in files.items():
            path = base / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, str):
                content = content.encode("utf-8")
            path.write_bytes(content)
        return base

    return _make


@pytest.fixture
def rs_tree(make_tree):
    """Two Rust files: one with semicolons, one with a TODO marker."""
    return make_tree({"a.rs": "x;\ny;\n", "b.rs": "// TODO: z\n"})
