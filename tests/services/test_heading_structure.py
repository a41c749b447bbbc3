"""Tests for heading hierarchy analysis.

Tests cover:
- extract_headings(): levels, nested markup, empty headings
- find_skipped_levels(): first-heading and step-down rules
- analyze_heading_structure(): score and recommendations
"""

import pytest

from content_scoring.services.heading_structure import (
    analyze_heading_structure,
    extract_headings,
    find_skipped_levels,
)
from content_scoring.services.seo_document import Heading


def headings(*levels: int) -> list[Heading]:
    return [Heading(level=level, text=f"H{level}", word_count=1) for level in levels]


class TestExtractHeadings:
    """Tests for extract_headings()."""

    def test_levels_and_text(self) -> None:
        markup = "<h1>Title</h1><p>x</p><h2 class='sub'>Sub <em>part</em></h2>"
        assert extract_headings(markup) == [
            Heading(level=1, text="Title", word_count=1),
            Heading(level=2, text="Sub part", word_count=2),
        ]

    def test_case_insensitive(self) -> None:
        assert [h.level for h in extract_headings("<H3>Upper</H3>")] == [3]

    def test_skips_empty_headings(self) -> None:
        assert extract_headings("<h2></h2><h3> <b></b> </h3>") == []

    def test_mismatched_closing_tag_is_ignored(self) -> None:
        assert extract_headings("<h2>Broken</h3>") == []

    def test_empty_content(self) -> None:
        assert extract_headings("") == []


class TestFindSkippedLevels:
    """Tests for find_skipped_levels()."""

    @pytest.mark.parametrize(
        "levels,expected",
        [
            ((1, 2, 3, 2), []),
            ((1, 3), [2]),
            ((1, 4), [2, 3]),
            ((2,), [1]),
            ((2, 4), [1, 3]),
            ((1, 2, 4, 2, 4), [3]),
            ((), []),
        ],
    )
    def test_skipped_levels(self, levels: tuple[int, ...], expected: list[int]) -> None:
        assert find_skipped_levels(headings(*levels)) == expected


class TestAnalyzeHeadingStructure:
    """Tests for analyze_heading_structure()."""

    def test_well_structured_content(self) -> None:
        """Should give full marks to one H1 followed by H2 and H3."""
        result = analyze_heading_structure("<h1>A</h1><h2>B</h2><h3>C</h3>")

        assert result.has_h1 is True
        assert result.h1_count == 1
        assert result.hierarchy_valid is True
        assert result.score == 100
        assert result.recommendations == []

    def test_no_headings(self) -> None:
        result = analyze_heading_structure("<p>Just text.</p>")

        assert result.has_h1 is False
        assert result.score == 40
        assert len(result.recommendations) == 2
        assert "Add an H1" in result.recommendations[0]
        assert "Add headings" in result.recommendations[1]

    def test_multiple_h1(self) -> None:
        result = analyze_heading_structure("<h1>A</h1><h1>B</h1><h2>C</h2>")

        assert result.h1_count == 2
        assert result.score == 75
        assert "multiple H1" in result.recommendations[0]

    def test_skipped_levels(self) -> None:
        result = analyze_heading_structure("<h2>A</h2><h4>B</h4>")

        assert result.hierarchy_valid is False
        assert result.skipped_levels == [1, 3]
        assert result.score == 40
        assert any("skips levels: 1, 3" in r for r in result.recommendations)

    def test_missing_h2(self) -> None:
        result = analyze_heading_structure("<h1>Only a title</h1>")

        assert result.score == 70
        assert result.recommendations == [
            "Add H2 subheadings to break up your content and improve readability."
        ]

    def test_to_dict(self) -> None:
        data = analyze_heading_structure("<h1>A title</h1>").to_dict()

        assert data["headings"] == [{"level": 1, "text": "A title", "word_count": 2}]
        assert data["h1_count"] == 1
