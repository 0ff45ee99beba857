"""Value types shared across the doctoc pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Header:
    """A heading harvested from a Markdown document."""

    rank: int
    text: str
    source_line: int
    source_path: Optional[str] = None
    instance: int = 0


@dataclass(frozen=True)
class AnchoredHeader:
    """A header paired with the rendered Markdown link pointing at it."""

    header: Header
    anchor: str

    @property
    def rank(self) -> int:
        return self.header.rank


@dataclass(frozen=True)
class DelimitedSection:
    """Location of the doctoc marker comments within a list of lines.

    Indices are 0-based and ``-1`` when the corresponding marker is absent.
    """

    has_start: bool = False
    has_end: bool = False
    start_index: int = -1
    end_index: int = -1

    @property
    def is_complete(self) -> bool:
        return self.has_start and self.has_end

    @property
    def is_malformed(self) -> bool:
        return self.has_start and not self.has_end


@dataclass
class TransformResult:
    """Outcome of running the pipeline over one document."""

    transformed: bool
    toc: Optional[str] = None
    data: Optional[str] = None
    wrapped_toc: Optional[str] = None
    path: Optional[str] = None
