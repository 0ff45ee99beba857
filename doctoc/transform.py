"""Single-document TOC transform.

``transform`` runs one document through extraction, duplicate counting,
anchoring, rendering and comparison, and either reports that the document is
already up to date or returns its updated text. Headers harvested from other
documents can be passed in to build an aggregate ("main") TOC instead.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from .errors import InvalidConfigurationError
from .headers import count_instances, extract_headers, normalize_header_ranks, parse_headers
from .logging import get_logger
from .markers import current_toc, locate, toc_eligible_lines, update_section, wrap_toc
from .models import Header, TransformResult
from .platforms import DEFAULT_PLATFORM, Platform, anchor_for
from .toc import DEFAULT_ENTRY_PREFIX, determine_title, render_toc

logger = get_logger("transform")


def transform(
    content: str,
    *,
    platform: Platform | str = DEFAULT_PLATFORM,
    max_header_level: Optional[int] = None,
    title: Optional[str] = None,
    notitle: bool = False,
    entry_prefix: Optional[str] = None,
    main_toc_headers: Optional[Sequence[Header]] = None,
) -> TransformResult:
    """Generate or refresh the TOC of ``content``."""
    if title and notitle:
        raise InvalidConfigurationError("title and notitle are mutually exclusive")
    resolved = Platform.from_id(platform)
    prefix = entry_prefix or DEFAULT_ENTRY_PREFIX

    lines = content.split("\n")
    section = locate(lines)
    existing = current_toc(lines, section)
    inferred_title = determine_title(lines, section, title=title, notitle=notitle)

    if main_toc_headers is not None:
        headers = list(main_toc_headers)
    else:
        offset, eligible = toc_eligible_lines(lines, section)
        headers = parse_headers(eligible, max_header_level, line_offset=offset)
    logger.debug("Found %d header(s)", len(headers))

    anchored = [anchor_for(header, resolved) for header in count_instances(headers)]
    toc = render_toc(inferred_title, anchored, entry_prefix=prefix, indent=resolved.indent)
    if toc is None:
        return TransformResult(transformed=False, toc=existing)

    wrapped = wrap_toc(toc)
    if existing == wrapped:
        return TransformResult(transformed=False, toc=toc)

    if section.is_malformed:
        logger.warning(
            "Found a TOC start marker on line %d without an end marker; leaving the document unchanged",
            section.start_index + 1,
        )
        return TransformResult(transformed=False, toc=toc)

    data = update_section(content, wrapped)
    return TransformResult(transformed=True, toc=toc, data=data, wrapped_toc=wrapped)


def get_all_headers(content: str, max_header_level: Optional[int] = None) -> List[Header]:
    """Return the TOC-eligible headers of ``content`` for aggregation."""
    return extract_headers(content, max_header_level)


def prepare_main_toc_headers(groups: Iterable[Tuple[str, Sequence[Header]]]) -> List[Header]:
    """Merge per-document header lists into one aggregate list.

    Each header is tagged with the path of its document and ranks are
    normalised per document, so every document's shallowest heading becomes a
    top-level entry. Documents keep the order they are given in.
    """
    merged: List[Header] = []
    for path, headers in groups:
        tagged = [
            Header(rank=h.rank, text=h.text, source_line=h.source_line, source_path=path)
            for h in headers
        ]
        merged.extend(normalize_header_ranks(tagged))
    return merged


__all__ = ["get_all_headers", "prepare_main_toc_headers", "transform"]
