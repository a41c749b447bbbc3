"""Tests for internal/external link analysis.

Tests cover:
- is_internal_link(): relative URLs, site domain matching, www prefix
- analyze_links(): counts, nofollow, anchor texts, score, recommendations
"""

import pytest

from content_scoring.services.link_analysis import analyze_links, is_internal_link


class TestIsInternalLink:
    """Tests for is_internal_link()."""

    @pytest.mark.parametrize(
        "url,expected",
        [
            ("/about", True),
            ("page.html", True),
            ("#section", True),
            ("https://other.com/page", False),
            ("http://other.com", False),
        ],
    )
    def test_without_site_domain(self, url: str, expected: bool) -> None:
        assert is_internal_link(url) is expected

    @pytest.mark.parametrize(
        "url,expected",
        [
            ("/about", True),
            ("https://example.com/a", True),
            ("https://www.example.com/a", True),
            ("https://EXAMPLE.com/a", True),
            ("https://other.com/a", False),
            ("https://blog.example.com/a", False),
        ],
    )
    def test_with_site_domain(self, url: str, expected: bool) -> None:
        assert is_internal_link(url, "example.com") is expected

    def test_site_domain_as_base_url(self) -> None:
        """Should accept a full base URL as the site domain."""
        assert is_internal_link("https://example.com/a", "https://www.example.com") is True
        assert is_internal_link("https://other.com/a", "https://www.example.com") is False


class TestAnalyzeLinks:
    """Tests for analyze_links()."""

    def test_counts_internal_external_and_nofollow(self) -> None:
        content = (
            '<p><a href="/a">Guide</a> and <a href="/b">Tips</a> from '
            '<a href="https://ext.com" rel="nofollow">Source</a></p>'
        )
        result = analyze_links(content)

        assert result.internal_links == 2
        assert result.external_links == 1
        assert result.total_links == 3
        assert result.nofollow_links == 1
        assert result.link_texts == ["Guide", "Tips", "Source"]
        assert result.has_valid_internal_links is True
        assert result.has_valid_external_links is True
        # 30 internal + 20 external + 15 total - 10 nofollow
        assert result.score == 55
        assert result.recommendations == []

    def test_single_quoted_href_and_nested_text(self) -> None:
        result = analyze_links("<a class='x' href='/a'><strong>Bold</strong> link</a>")

        assert result.internal_links == 1
        assert result.link_texts == ["Bold link"]

    def test_anchor_without_href_is_ignored(self) -> None:
        result = analyze_links('<a name="top">Top</a>')

        assert result.total_links == 0

    def test_no_links(self) -> None:
        result = analyze_links("<p>No links at all.</p>")

        assert result.score == 0
        assert len(result.recommendations) == 1
        assert result.recommendations[0].startswith("Add links to your content.")

    def test_generic_link_text(self) -> None:
        content = '<a href="/a">click here</a> <a href="/b">Read More</a>'
        result = analyze_links(content)

        assert result.score == 40
        assert result.recommendations == [
            "Add at least 1 external link to a high-quality, authoritative source.",
            'Avoid generic link text like "click here" or "read more". '
            "Use descriptive anchor text.",
        ]

    def test_site_domain_classifies_absolute_links(self) -> None:
        content = (
            '<a href="https://www.example.com/a">A</a>'
            '<a href="https://example.com/b">B</a>'
            '<a href="https://other.com/c">C</a>'
        )
        result = analyze_links(content, site_domain="example.com")

        assert result.internal_links == 2
        assert result.external_links == 1

    def test_nofollow_internal_links(self) -> None:
        content = '<a href="/a" rel="nofollow">One</a><a href="/b" rel="nofollow">Two</a>'
        result = analyze_links(content)

        assert any("nofollow on internal links" in r for r in result.recommendations)

    def test_too_many_links(self) -> None:
        content = "".join(f'<a href="/p{i}">Page {i}</a>' for i in range(21))
        result = analyze_links(content)

        assert result.total_links == 21
        assert any(r.startswith("You have many links.") for r in result.recommendations)
