"""Marker comments delimiting the generated table of contents.

Locating and rewriting work on lists of lines so that every line outside the
delimited region survives a rewrite byte for byte.
"""

from __future__ import annotations

import re
from typing import Callable, List, Optional, Sequence, Tuple

from .models import DelimitedSection

LineMatcher = Callable[[str], bool]

START = (
    "<!-- START doctoc generated TOC please keep comment here to allow auto update -->\n"
    "<!-- DON'T EDIT THIS SECTION, INSTEAD RE-RUN doctoc TO UPDATE -->"
)
END = "<!-- END doctoc generated TOC please keep comment here to allow auto update -->"

_START_PATTERN = re.compile(r"<!-- START doctoc ")
_END_PATTERN = re.compile(r"<!-- END doctoc ")


def matches_start(line: str) -> bool:
    return bool(_START_PATTERN.search(line))


def matches_end(line: str) -> bool:
    return bool(_END_PATTERN.search(line))


def locate(
    lines: Sequence[str],
    start_matcher: LineMatcher = matches_start,
    end_matcher: LineMatcher = matches_end,
) -> DelimitedSection:
    """Find the first start marker and the first end marker following it."""
    start_index = -1
    end_index = -1
    for index, line in enumerate(lines):
        if start_index < 0:
            if start_matcher(line):
                start_index = index
        elif end_matcher(line):
            end_index = index
            break
    return DelimitedSection(
        has_start=start_index >= 0,
        has_end=end_index >= 0,
        start_index=start_index,
        end_index=end_index,
    )


def current_toc(lines: Sequence[str], section: DelimitedSection) -> Optional[str]:
    """Return the existing block, markers included, or ``None`` if there is none."""
    if not section.is_complete:
        return None
    return "\n".join(lines[section.start_index : section.end_index + 1])


def toc_eligible_lines(
    lines: Sequence[str], section: DelimitedSection
) -> Tuple[int, List[str]]:
    """Return ``(offset, lines)`` of the region headers may be taken from.

    When a complete block exists only the lines after its end marker count,
    so a regenerated TOC never lists itself or headings placed above it.
    """
    if not section.is_complete:
        return 0, list(lines)
    offset = section.end_index + 1
    return offset, list(lines[offset:])


def wrap_toc(toc: str) -> str:
    """Surround a rendered TOC with the start and end markers."""
    return f"{START}\n{toc}\n{END}"


def update_section(
    content: str,
    section_text: str,
    start_matcher: LineMatcher = matches_start,
    end_matcher: LineMatcher = matches_end,
    *,
    top: bool = True,
) -> str:
    """Replace the delimited block of ``content`` with ``section_text``.

    Without a start marker the block is inserted at the top (or appended when
    ``top`` is false). A start marker without its end marker leaves the
    content untouched since the extent of the old block is unknown.
    """
    if not content:
        return section_text

    lines = content.split("\n")
    section = locate(lines, start_matcher, end_matcher)

    if not section.has_start:
        if top:
            return f"{section_text}\n{content}"
        return f"{content}\n{section_text}"

    if not section.has_end:
        return content

    updated = (
        lines[: section.start_index]
        + section_text.split("\n")
        + lines[section.end_index + 1 :]
    )
    return "\n".join(updated)


__all__ = [
    "END",
    "START",
    "current_toc",
    "locate",
    "matches_end",
    "matches_start",
    "toc_eligible_lines",
    "update_section",
    "wrap_toc",
]
