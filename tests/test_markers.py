"""Tests for doctoc.markers."""

from __future__ import annotations

from doctoc.markers import (
    END,
    START,
    current_toc,
    locate,
    matches_end,
    matches_start,
    toc_eligible_lines,
    update_section,
    wrap_toc,
)
from doctoc.models import DelimitedSection


def test_marker_predicates() -> None:
    assert matches_start(START.split("\n")[0])
    assert not matches_start(START.split("\n")[1])
    assert matches_end(END)
    assert not matches_end("<!-- END something else -->")


def test_locate_without_markers() -> None:
    section = locate(["# Title", "text"])
    assert section == DelimitedSection()
    assert not section.has_start
    assert current_toc(["# Title"], section) is None


def test_locate_complete_block() -> None:
    lines = ["intro", *START.split("\n"), "toc", END, "# Title"]
    section = locate(lines)
    assert section.is_complete
    assert (section.start_index, section.end_index) == (1, 4)


def test_locate_start_without_end_is_malformed() -> None:
    section = locate([*START.split("\n"), "# Title"])
    assert section.has_start
    assert not section.has_end
    assert section.is_malformed
    assert current_toc([*START.split("\n"), "# Title"], section) is None


def test_end_marker_before_start_is_ignored() -> None:
    section = locate([END, *START.split("\n")])
    assert section.start_index == 1
    assert not section.has_end


def test_locate_accepts_custom_matchers() -> None:
    section = locate(
        ["a", "<<", "b", ">>"],
        lambda line: line == "<<",
        lambda line: line == ">>",
    )
    assert (section.start_index, section.end_index) == (1, 3)


def test_eligible_lines_follow_the_end_marker() -> None:
    lines = ["# Before", *START.split("\n"), END, "# After"]
    offset, eligible = toc_eligible_lines(lines, locate(lines))
    assert offset == 4
    assert eligible == ["# After"]


def test_all_lines_eligible_without_block() -> None:
    lines = ["# One", "# Two"]
    assert toc_eligible_lines(lines, locate(lines)) == (0, lines)


def test_wrapped_block_round_trips() -> None:
    toc = "**Contents**\n\n- [A](#a)\n"
    wrapped = wrap_toc(toc)
    document = update_section("# A\n", wrapped)
    lines = document.split("\n")
    assert current_toc(lines, locate(lines)) == wrapped


def test_update_section_inserts_at_top() -> None:
    assert update_section("# A\n", "BLOCK") == "BLOCK\n# A\n"


def test_update_section_appends_when_not_top() -> None:
    assert update_section("# A\n", "BLOCK", top=False) == "# A\n\nBLOCK"


def test_update_section_returns_block_for_empty_content() -> None:
    assert update_section("", "BLOCK") == "BLOCK"


def test_update_section_replaces_only_the_block() -> None:
    old = wrap_toc("old\n")
    content = f"before\n\n{old}\n\n# A\ntrailing  \n"
    new = wrap_toc("new\n")
    updated = update_section(content, new)
    assert updated == f"before\n\n{new}\n\n# A\ntrailing  \n"


def test_update_section_leaves_malformed_block_alone() -> None:
    content = f"{START}\nstale\n# A\n"
    assert update_section(content, wrap_toc("new\n")) == content
