"""Discovery of Markdown files below a directory."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List

from .logging import get_logger

MARKDOWN_SUFFIXES = {".md", ".markdown"}

_EXCLUDED_DIRS = {
    "node_modules",
    "__pycache__",
}

logger = get_logger("files")


def find_markdown_files(root: Path) -> List[Path]:
    """Return Markdown files under ``root``, directory by directory in name order.

    Hidden directories (``.git`` and friends) and ``node_modules`` are skipped.
    """
    found: List[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(
            name for name in dirnames if name not in _EXCLUDED_DIRS and not name.startswith(".")
        )
        current_dir = Path(dirpath)
        markdown = [
            current_dir / name
            for name in sorted(filenames)
            if Path(name).suffix.lower() in MARKDOWN_SUFFIXES
        ]
        if markdown:
            logger.debug(
                'Found %s in "%s"', ", ".join(path.name for path in markdown), current_dir
            )
        else:
            logger.debug('Found nothing in "%s"', current_dir)
        found.extend(markdown)
    return found


__all__ = ["MARKDOWN_SUFFIXES", "find_markdown_files"]
