"""Tests for doctoc.files."""

from __future__ import annotations

from pathlib import Path

from doctoc.files import find_markdown_files
from tests._fixtures.doc_tree import DocTree


def test_find_markdown_files_skips_hidden_and_vendor_dirs(doc_tree: DocTree) -> None:
    doc_tree.write(
        {
            "README.md": "# Root\n",
            "CHANGES.markdown": "# Changes\n",
            "notes.txt": "# not markdown\n",
            "docs/guide.md": "# Guide\n",
            "docs/api/reference.MD": "# Reference\n",
            "node_modules/pkg/README.md": "# Vendored\n",
            ".git/description.md": "# Hidden\n",
        }
    )
    found = find_markdown_files(doc_tree.path())
    relative = [path.relative_to(doc_tree.path()).as_posix() for path in found]
    assert relative == [
        "CHANGES.markdown",
        "README.md",
        "docs/guide.md",
        "docs/api/reference.MD",
    ]


def test_find_markdown_files_empty_directory(tmp_path: Path) -> None:
    assert find_markdown_files(tmp_path) == []
