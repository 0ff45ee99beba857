"""Rendering of the table-of-contents block."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .models import AnchoredHeader, DelimitedSection

DEFAULT_TITLE = (
    "**Table of Contents**  *generated with [DocToc](https://github.com/thlorenz/doctoc)*"
)
DEFAULT_ENTRY_PREFIX = "-"
DEFAULT_INDENT = "  "


def determine_title(
    lines: Sequence[str],
    section: DelimitedSection,
    *,
    title: Optional[str] = None,
    notitle: bool = False,
) -> str:
    """Pick the title line, keeping a customised title of an existing block."""
    if notitle:
        return ""
    if title:
        return title
    # The title follows the two start marker lines.
    title_index = section.start_index + 2
    if section.has_start and title_index < len(lines):
        return lines[title_index]
    return DEFAULT_TITLE


def render_toc(
    title: str,
    headers: Sequence[AnchoredHeader],
    *,
    entry_prefix: str = DEFAULT_ENTRY_PREFIX,
    indent: str = DEFAULT_INDENT,
) -> Optional[str]:
    """Render ``headers`` as a nested list below ``title``.

    Returns ``None`` when there is nothing to list.
    """
    if not headers:
        return None
    lowest = min(header.rank for header in headers)
    entries: List[str] = []
    for header in headers:
        nesting = indent * (header.rank - lowest)
        entries.append(f"{nesting}{entry_prefix} {header.anchor}")
    return title + "\n\n" + "\n".join(entries) + "\n"


__all__ = [
    "DEFAULT_ENTRY_PREFIX",
    "DEFAULT_INDENT",
    "DEFAULT_TITLE",
    "determine_title",
    "render_toc",
]
