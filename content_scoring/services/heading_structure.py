"""Heading hierarchy analysis.

Advisory only: the weighted checklist uses its own H1/H2 presence check.
Headings are found with a regular expression over the markup, matching an
opening ``<hN>`` with the closing tag of the same level.
"""

import re

from content_scoring.core.logging import get_logger
from content_scoring.services.seo_document import Heading, HeadingStructureResult

logger = get_logger(__name__)

_HEADING_PATTERN = re.compile(r"<h([1-6])[^>]*>(.*?)</h\1>", re.IGNORECASE)
_TAG_PATTERN = re.compile(r"<[^>]+>")

# Score components (sum to 100)
H1_POINTS = 30
HIERARCHY_POINTS = 40
SUBHEADING_POINTS = 30

# Skipped levels still worth partial hierarchy credit
MAX_SKIPPED_FOR_PARTIAL = 2


def extract_headings(markup: str) -> list[Heading]:
    """Extract non-empty headings in document order."""
    headings: list[Heading] = []
    for match in _HEADING_PATTERN.finditer(markup or ""):
        text = _TAG_PATTERN.sub("", match.group(2)).strip()
        if text:
            headings.append(
                Heading(level=int(match.group(1)), text=text, word_count=len(text.split()))
            )
    return headings


def find_skipped_levels(headings: list[Heading]) -> list[int]:
    """Levels missing from the hierarchy, in the order they are first skipped.

    The first heading must be an H1, and each heading may go at most one
    level deeper than the one before it.
    """
    skipped: list[int] = []
    previous = 0
    for heading in headings:
        if previous == 0 and heading.level != 1 and 1 not in skipped:
            skipped.append(1)
        if previous > 0 and heading.level > previous + 1:
            for level in range(previous + 1, heading.level):
                if level not in skipped:
                    skipped.append(level)
        previous = heading.level
    return skipped


def calculate_heading_score(structure: HeadingStructureResult) -> int:
    """Score a heading structure (0-100)."""
    score = 0

    if structure.h1_count == 1:
        score += H1_POINTS
    elif structure.h1_count == 2:
        score += H1_POINTS // 2

    if structure.hierarchy_valid:
        score += HIERARCHY_POINTS
    elif len(structure.skipped_levels) <= MAX_SKIPPED_FOR_PARTIAL:
        score += HIERARCHY_POINTS // 2

    levels = {heading.level for heading in structure.headings}
    if 2 in levels and 3 in levels:
        score += SUBHEADING_POINTS
    elif 2 in levels:
        score += 20
    elif len(structure.headings) > 1:
        score += 10

    return min(100, score)


def heading_recommendations(structure: HeadingStructureResult) -> list[str]:
    recommendations: list[str] = []

    if not structure.has_h1:
        recommendations.append(
            "Add an H1 heading to your content. This is the most important heading for SEO."
        )
    elif structure.h1_count > 1:
        recommendations.append(
            "You have multiple H1 headings. Use only one H1 per page and use "
            "H2-H6 for subheadings."
        )

    if not structure.hierarchy_valid:
        skipped = ", ".join(str(level) for level in structure.skipped_levels)
        recommendations.append(
            f"Your heading hierarchy skips levels: {skipped}. "
            "Ensure headings follow a logical order (H1, then H2, then H3)."
        )

    has_h2 = any(heading.level == 2 for heading in structure.headings)
    if structure.has_h1 and not has_h2:
        recommendations.append(
            "Add H2 subheadings to break up your content and improve readability."
        )

    if not structure.headings:
        recommendations.append(
            "Add headings to structure your content. This helps both readers "
            "and search engines understand your content."
        )

    return recommendations


def analyze_heading_structure(content: str) -> HeadingStructureResult:
    """Analyze the heading hierarchy of content markup.

    Args:
        content: Article body markup

    Returns:
        HeadingStructureResult with extracted headings, H1 count, skipped
        levels, score and recommendations
    """
    headings = extract_headings(content)
    skipped = find_skipped_levels(headings)
    h1_count = sum(1 for heading in headings if heading.level == 1)

    structure = HeadingStructureResult(
        has_h1=h1_count > 0,
        h1_count=h1_count,
        hierarchy_valid=not skipped,
        headings=headings,
        skipped_levels=skipped,
    )
    structure.score = calculate_heading_score(structure)
    structure.recommendations = heading_recommendations(structure)

    logger.debug(
        "Heading structure analyzed",
        extra={
            "heading_count": len(headings),
            "h1_count": h1_count,
            "skipped_levels": skipped,
            "score": structure.score,
        },
    )

    return structure
