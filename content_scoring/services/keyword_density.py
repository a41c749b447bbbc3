"""Keyword frequency and density analysis.

Density is measured against the filtered token count (stop words and short
tokens removed), so it is not comparable to a document's raw word count.

Primary keyword placement is an advisory analysis of where one keyword
appears (title, opening text, headings, meta description, slug).
"""

import re
from collections import Counter
from collections.abc import Iterable

from content_scoring.core.logging import get_logger
from content_scoring.services.heading_structure import extract_headings
from content_scoring.services.seo_document import (
    KeywordDensityResult,
    KeywordEntry,
    KeywordPlacementResult,
)
from content_scoring.utils.html_text import normalize, split_paragraphs
from content_scoring.utils.lexical import STOP_WORDS, tokenize

logger = get_logger(__name__)

DEFAULT_TOP_KEYWORDS = 10

# Opening text used for the first-paragraph placement test
MIN_FIRST_PARAGRAPH_CHARS = 20
FIRST_PARAGRAPH_FALLBACK_CHARS = 500

# Title words shorter than this are skipped when deriving a keyword
MIN_TITLE_KEYWORD_WORD_LENGTH = 4

DENSITY_POINTS = 40
TITLE_PLACEMENT_POINTS = 20
PLACEMENT_POINTS = 10


def keyword_density(
    text: str,
    top_n: int = DEFAULT_TOP_KEYWORDS,
    stop_words: Iterable[str] = STOP_WORDS,
) -> KeywordDensityResult:
    """Compute per-word frequency and density over markup or plain text.

    Args:
        text: Content markup or plain text
        top_n: Number of ranked entries to return
        stop_words: Words excluded from the analysis

    Returns:
        KeywordDensityResult with counts, ranked entries and the filtered total
    """
    tokens = tokenize(normalize(text), stop_words)
    total_words = len(tokens)

    # Counter preserves first-seen order, and sorted() is stable, so equal
    # counts keep that order in the ranking.
    counts = Counter(tokens)
    ranked = sorted(counts.items(), key=lambda item: -item[1])

    top_keywords = [
        KeywordEntry(word=word, count=count, density=count * 100 / total_words)
        for word, count in ranked[: max(0, top_n)]
    ]

    logger.debug(
        "Keyword density computed",
        extra={
            "total_words": total_words,
            "unique_words": len(counts),
            "top_n": top_n,
        },
    )

    return KeywordDensityResult(
        keywords=dict(counts),
        top_keywords=top_keywords,
        total_words=total_words,
    )


# ---------------------------------------------------------------------------
# Primary keyword placement (advisory)
# ---------------------------------------------------------------------------


def count_occurrences(text: str, keyword: str) -> int:
    """Count case-insensitive whole-word occurrences of a keyword."""
    keyword = keyword.strip()
    if not text or not keyword:
        return 0
    return len(re.findall(rf"\b{re.escape(keyword)}\b", text, re.IGNORECASE))


def derive_keyword(title: str, text: str) -> str:
    """Pick a keyword when none is given.

    Uses the first two title words of four or more letters, falling back to
    the first word of the content.
    """
    words = [w for w in title.lower().split() if len(w) >= MIN_TITLE_KEYWORD_WORD_LENGTH]
    if words:
        return " ".join(words[:2])
    return text.split()[0] if text.split() else ""


def first_paragraph(text: str) -> str:
    paragraphs = [p for p in split_paragraphs(text) if len(p) > MIN_FIRST_PARAGRAPH_CHARS]
    return paragraphs[0] if paragraphs else text[:FIRST_PARAGRAPH_FALLBACK_CHARS]


def density_rating(density: float) -> str:
    """Describe a keyword density percentage."""
    if density < 0.5:
        return "Too Low"
    if density <= 2:
        return "Optimal"
    if density <= 3:
        return "Acceptable"
    return "Too High (Keyword Stuffing)"


def _density_points(density: float) -> int:
    if 1 <= density <= 2:
        return DENSITY_POINTS
    if 0.5 <= density < 3:
        return 25
    if 0 < density < 4:
        return 10
    return 0


def analyze_keyword_placement(
    content: str,
    keyword: str | None = None,
    title: str = "",
    slug: str = "",
    meta_description: str = "",
) -> KeywordPlacementResult:
    """Measure primary keyword density and placement.

    Density is counted against every whitespace-delimited word of the content
    text, unlike :func:`keyword_density` which counts filtered tokens. The
    score gives 40 points for a 1-2% density (less outside it), 20 for the
    title and 10 each for the opening text, headings, meta description and
    slug.

    Args:
        content: Article body markup
        keyword: Primary keyword; derived from the title when empty
        title: Article title
        slug: URL slug
        meta_description: Meta description

    Returns:
        KeywordPlacementResult (all zero when there is no text or keyword)
    """
    text = normalize(content)
    word_count = len(text.split())
    keyword = (keyword or "").strip() or derive_keyword(title or "", text)

    if word_count == 0 or not keyword:
        return KeywordPlacementResult(keyword=keyword, rating=density_rating(0))

    count = count_occurrences(text, keyword)
    density = count * 100 / word_count
    headings_text = " ".join(heading.text for heading in extract_headings(content))

    result = KeywordPlacementResult(
        keyword=keyword,
        count=count,
        density=density,
        in_title=count_occurrences(title or "", keyword) > 0,
        in_first_paragraph=count_occurrences(first_paragraph(text), keyword) > 0,
        in_url=count_occurrences(slug or "", keyword) > 0,
        in_meta_description=count_occurrences(meta_description or "", keyword) > 0,
        in_headings=count_occurrences(headings_text, keyword) > 0,
        rating=density_rating(density),
    )

    score = _density_points(density)
    if result.in_title:
        score += TITLE_PLACEMENT_POINTS
    for placed in (
        result.in_first_paragraph,
        result.in_headings,
        result.in_meta_description,
        result.in_url,
    ):
        if placed:
            score += PLACEMENT_POINTS
    result.score = min(100, score)

    logger.debug(
        "Keyword placement analyzed",
        extra={"keyword_length": len(keyword), "count": count, "score": result.score},
    )

    return result
