"""Pytest configuration and fixtures.

Provides fixtures for:
- Settings override for testing
- Sample documents (fully optimized, empty, partially optimized)
- A fresh SEOScoreService per test
"""

from collections.abc import Generator

import pytest

from content_scoring.core.config import Settings, get_settings
from content_scoring.services.seo_document import SEODocument
from content_scoring.services.seo_score import SEOScoreService

# ---------------------------------------------------------------------------
# Settings Fixtures
# ---------------------------------------------------------------------------


def get_test_settings() -> Settings:
    """Get test settings with text logging."""
    return Settings(
        app_name="Test App",
        app_version="0.0.1",
        debug=True,
        environment="test",
        log_level="DEBUG",
        log_format="text",
    )


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Session-scoped test settings."""
    return get_test_settings()


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Ensure every test reads settings fresh from its environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ---------------------------------------------------------------------------
# Document Fixtures
# ---------------------------------------------------------------------------

OPTIMIZED_TITLE = "Best Running Shoes for Beginners - Full Guide"  # 45 chars
OPTIMIZED_DESCRIPTION = (
    "Find the best running shoes for beginners with our guide to fit, "
    "cushioning and support, plus tips on caring for your shoes after every run."
)  # 140 chars
OPTIMIZED_CONTENT = (
    "<h1>Best Running Shoes</h1>"
    "<p>Choosing shoes is easier with a plan and a little patience.</p>"
    "<h2>Why Fit Matters</h2>"
    "<p>Good shoes support every stride. Read our "
    '<a href="/fit-guide">fit guide</a> and the '
    '<a href="/care-tips">care tips</a> before buying.</p>'
    '<img src="/images/trail.jpg" alt="Trail runner">'
)


@pytest.fixture
def optimized_document() -> SEODocument:
    """A document that passes every check ("shoes" appears 3 times)."""
    return SEODocument(
        title=OPTIMIZED_TITLE,
        content=OPTIMIZED_CONTENT,
        excerpt="A beginner's guide to running shoes.",
        meta_title=OPTIMIZED_TITLE,
        meta_description=OPTIMIZED_DESCRIPTION,
        meta_keywords="shoes, running, fitness",
        slug="best-shoes",
        featured_image_url="",
        word_count=500,
    )


@pytest.fixture
def empty_document() -> SEODocument:
    """A document with every field empty."""
    return SEODocument()


@pytest.fixture
def service() -> SEOScoreService:
    """Create an SEOScoreService with default rules."""
    return SEOScoreService()
