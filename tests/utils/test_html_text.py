"""Tests for markup-to-text normalization utilities.

Tests cover:
- normalize(): tag stripping, script/style removal, whitespace collapsing
- split_paragraphs(): blank-line boundaries in plain text
- has_tag() and count_links() pattern helpers
- Graceful handling of empty and malformed markup
"""

import pytest

from content_scoring.utils.html_text import (
    count_links,
    has_tag,
    normalize,
    split_paragraphs,
)


class TestNormalize:
    """Tests for normalize()."""

    def test_empty_input_returns_empty_string(self) -> None:
        assert normalize("") == ""

    def test_none_input_returns_empty_string(self) -> None:
        assert normalize(None) == ""

    def test_strips_tags(self) -> None:
        """Should replace tags with spaces and collapse them."""
        result = normalize("<p>This is <strong>SEO</strong> content.</p>")
        assert result == "This is SEO content."

    def test_removes_script_blocks_with_content(self) -> None:
        markup = "<p>Before</p><script type='text/javascript'>var x = 1;</script><p>After</p>"
        assert normalize(markup) == "Before After"

    def test_removes_multiline_style_blocks(self) -> None:
        markup = "<style>\n body { color: red; }\n</style><p>Visible</p>"
        assert normalize(markup) == "Visible"

    def test_collapses_whitespace_and_trims(self) -> None:
        assert normalize("  one \n\n  two\t\tthree  ") == "one two three"

    def test_plain_text_passes_through(self) -> None:
        assert normalize("Just text") == "Just text"

    def test_unbalanced_markup_degrades_gracefully(self) -> None:
        """Should not raise on broken markup."""
        result = normalize("<div><p>Open paragraph <b>bold")
        assert result == "Open paragraph bold"

    def test_markup_only_content(self) -> None:
        assert normalize("<div><span><p></p></span></div>") == ""


class TestSplitParagraphs:
    """Tests for split_paragraphs()."""

    def test_empty_input(self) -> None:
        assert split_paragraphs("") == []
        assert split_paragraphs(None) == []

    def test_splits_plain_text_on_blank_lines(self) -> None:
        text = "First block\nstill first.\n\n  \nSecond block."
        assert split_paragraphs(text) == ["First block\nstill first.", "Second block."]

    def test_drops_blank_paragraphs(self) -> None:
        assert split_paragraphs("\n\n   \n\nText\n\n") == ["Text"]

    def test_normalized_markup_is_one_paragraph(self) -> None:
        """Should see one paragraph once markup has been normalized."""
        markup = "<p>Short paragraph.</p><p>Another short one.</p>"
        assert split_paragraphs(normalize(markup)) == [
            "Short paragraph. Another short one."
        ]

    def test_single_block_without_boundaries(self) -> None:
        text = " ".join(["word"] * 150)
        paragraphs = split_paragraphs(text)
        assert len(paragraphs) == 1
        assert len(paragraphs[0].split()) == 150


class TestHasTag:
    """Tests for has_tag()."""

    @pytest.mark.parametrize(
        "markup,tag,expected",
        [
            ("<h1>Heading</h1>", "h1", True),
            ("<H1 class='title'>Heading</H1>", "h1", True),
            ("<h2>Sub</h2>", "h1", False),
            ('<img src="a.jpg">', "img", True),
            ("<p>No image</p>", "img", False),
            ("", "h1", False),
        ],
    )
    def test_detects_opening_tags(self, markup: str, tag: str, expected: bool) -> None:
        assert has_tag(markup, tag) is expected

    def test_none_markup(self) -> None:
        assert has_tag(None, "h1") is False


class TestCountLinks:
    """Tests for count_links()."""

    def test_counts_every_anchor(self) -> None:
        markup = '<a href="/one">One</a> text <A HREF="/two">Two</A> <a class="x" href="/3">3</a>'
        assert count_links(markup) == 3

    def test_ignores_other_tags_starting_with_a(self) -> None:
        markup = "<abbr>HTML</abbr><article>Body</article>"
        assert count_links(markup) == 0

    def test_empty_markup(self) -> None:
        assert count_links("") == 0
        assert count_links(None) == 0
