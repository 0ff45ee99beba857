"""Header extraction from Markdown documents.

Markdown headings come from the markdown-it token stream; headings written as
HTML inside raw HTML blocks are picked out with BeautifulSoup. Both feed the
same ``Header`` records, ordered by the line they appear on.
"""

from __future__ import annotations

import re
from collections import defaultdict
from dataclasses import replace
from operator import attrgetter
from typing import Dict, Iterable, List, Optional, Sequence

from bs4 import BeautifulSoup
from markdown_it import MarkdownIt
from markdown_it.token import Token

from .markers import locate, toc_eligible_lines
from .models import Header

# Only HTML headings are capped by default; Markdown headings are not.
DEFAULT_HTML_MAX_LEVEL = 4

# Stands in for an image in the heading text. GitHub renders an image as a
# dash in the slug, which is what the space before a dropped ``*`` yields.
IMAGE_PLACEHOLDER = "*"

_HTML_HEADING = re.compile(r"^h([1-6])$")


def extract_headers(content: str, max_header_level: Optional[int] = None) -> List[Header]:
    """Return the headers of ``content`` that belong in its TOC.

    Headers above or inside an existing TOC block are skipped.
    """
    lines = content.split("\n")
    section = locate(lines)
    offset, eligible = toc_eligible_lines(lines, section)
    return parse_headers(eligible, max_header_level, line_offset=offset)


def parse_headers(
    lines: Sequence[str],
    max_header_level: Optional[int] = None,
    *,
    line_offset: int = 0,
) -> List[Header]:
    """Parse ``lines`` into headers sorted by source line.

    ``line_offset`` is the number of document lines preceding ``lines`` so
    that the reported source lines refer to the whole document.
    """
    # text_join would fold escapes and entities into decoded text.
    parser = MarkdownIt("commonmark").disable("text_join")
    tokens = parser.parse("\n".join(lines))
    html_max_level = max_header_level or DEFAULT_HTML_MAX_LEVEL
    headers = _markdown_headers(tokens, max_header_level, line_offset)
    headers.extend(_html_headers(tokens, html_max_level, line_offset))
    # sorted() is stable, so headers sharing a line keep their input order.
    return sorted(headers, key=attrgetter("source_line"))


def _markdown_headers(
    tokens: Sequence[Token], max_level: Optional[int], offset: int
) -> List[Header]:
    headers: List[Header] = []
    for index, token in enumerate(tokens):
        if token.type != "heading_open":
            continue
        rank = int(token.tag[1:])
        if max_level and rank > max_level:
            continue
        inline = tokens[index + 1]
        text = flatten_inline(inline.children or [])
        line = (token.map[0] if token.map else 0) + 1 + offset
        headers.append(Header(rank=rank, text=text, source_line=line))
    return headers


def _html_headers(tokens: Sequence[Token], max_level: int, offset: int) -> List[Header]:
    headers: List[Header] = []
    for token in tokens:
        if token.type != "html_block" or token.level != 0:
            continue
        block_start = token.map[0] if token.map else 0
        soup = BeautifulSoup(token.content, "html.parser")
        for element in soup.find_all(_HTML_HEADING):
            if element.find_parent("pre") is not None:
                continue
            rank = int(element.name[1:])
            if rank > max_level:
                continue
            line = block_start + (element.sourceline or 1) + offset
            headers.append(Header(rank=rank, text=element.get_text(), source_line=line))
    return headers


def flatten_inline(children: Iterable[Token]) -> str:
    """Collapse inline tokens into the plain text shown for a heading."""
    parts: List[str] = []
    for child in children:
        if child.type in ("link_open", "link_close"):
            continue
        if child.type == "image":
            parts.append(IMAGE_PLACEHOLDER)
            continue
        parts.append(_raw_text(child))
    return "".join(parts)


def _raw_text(token: Token) -> str:
    if token.type in ("text", "html_inline"):
        return token.content
    if token.type == "code_inline":
        return f"{token.markup}{token.content}{token.markup}"
    if token.type == "text_special":
        # Escapes and entities keep their source form, e.g. `\*` or `&amp;`.
        return token.markup or token.content
    if token.type.endswith("_open") or token.type.endswith("_close"):
        return token.markup
    if token.type in ("softbreak", "hardbreak"):
        return " "
    return ""


def count_instances(headers: Iterable[Header]) -> List[Header]:
    """Number repeated header texts per source document.

    The first header with a given text gets instance 0, the next 1 and so on.
    Headers without a source path are counted as one document.
    """
    seen: Dict[Optional[str], Dict[str, int]] = defaultdict(dict)
    counted: List[Header] = []
    for header in headers:
        by_text = seen[header.source_path]
        instance = by_text.get(header.text, -1) + 1
        by_text[header.text] = instance
        counted.append(replace(header, instance=instance))
    return counted


def normalize_header_ranks(headers: Sequence[Header]) -> List[Header]:
    """Shift ranks so the shallowest header sits at rank 1."""
    if not headers:
        return []
    lowest = min(header.rank for header in headers)
    return [replace(header, rank=header.rank - lowest + 1) for header in headers]


__all__ = [
    "DEFAULT_HTML_MAX_LEVEL",
    "IMAGE_PLACEHOLDER",
    "count_instances",
    "extract_headers",
    "flatten_inline",
    "normalize_header_ranks",
    "parse_headers",
]
