"""Internal and external link analysis.

Advisory only: the weighted checklist counts anchors without classifying
them. Broken-link detection needs network access and is not done here.
"""

import re
from urllib.parse import urlparse

from content_scoring.core.logging import get_logger
from content_scoring.services.seo_document import LinkAnalysisResult

logger = get_logger(__name__)

_ANCHOR_PATTERN = re.compile(
    r"""<a\s+(?:[^>]*?\s+)?href=(["'])([^"']+)\1[^>]*>(.*?)</a>""",
    re.IGNORECASE,
)
_NOFOLLOW_PATTERN = re.compile(r"""rel\s*=\s*["'][^"']*nofollow[^"']*["']""", re.IGNORECASE)
_TAG_PATTERN = re.compile(r"<[^>]+>")
_GENERIC_TEXT_PATTERN = re.compile(
    r"^(click here|read more|learn more|here|this)$", re.IGNORECASE
)

MIN_INTERNAL_LINKS = 2
MIN_EXTERNAL_LINKS = 1
MAX_RECOMMENDED_LINKS = 20
MAX_GENERIC_TEXT_SHARE = 0.3


def _normalize_domain(domain: str) -> str:
    domain = domain.lower()
    return domain[4:] if domain.startswith("www.") else domain


def is_internal_link(url: str, site_domain: str | None = None) -> bool:
    """Check if a URL is internal to the site.

    Args:
        url: Link target
        site_domain: Site domain or base URL; without it, only absolute
            http(s) URLs count as external

    Returns:
        True if the URL is relative or points at the site's host
    """
    if not site_domain:
        return not url.startswith(("http://", "https://"))

    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    if not parsed.netloc:
        return True

    site_netloc = urlparse(site_domain).netloc or site_domain
    return _normalize_domain(parsed.netloc) == _normalize_domain(site_netloc)


def calculate_link_score(analysis: LinkAnalysisResult) -> int:
    """Score a link breakdown (0-100)."""
    score = 0

    if analysis.has_valid_internal_links:
        if analysis.internal_links >= 5:
            score += 50
        elif analysis.internal_links >= 3:
            score += 40
        else:
            score += 30

    if analysis.has_valid_external_links:
        if analysis.external_links >= 3:
            score += 30
        elif analysis.external_links >= 2:
            score += 25
        else:
            score += 20

    if analysis.total_links >= 5:
        score += 20
    elif analysis.total_links >= 3:
        score += 15
    elif analysis.total_links >= 1:
        score += 10

    if analysis.nofollow_links > 0 and analysis.nofollow_links >= analysis.internal_links * 0.5:
        score -= 10

    return max(0, min(100, score))


def link_recommendations(analysis: LinkAnalysisResult) -> list[str]:
    recommendations: list[str] = []

    if analysis.total_links == 0:
        recommendations.append(
            "Add links to your content. Internal and external links help SEO "
            "and provide value to readers."
        )
    else:
        if not analysis.has_valid_internal_links:
            recommendations.append(
                "Add at least 2-3 internal links to related content on your site."
            )
        if not analysis.has_valid_external_links:
            recommendations.append(
                "Add at least 1 external link to a high-quality, authoritative source."
            )

    if analysis.internal_links > 0 and analysis.nofollow_links >= analysis.internal_links:
        recommendations.append(
            "Avoid using nofollow on internal links. Internal links should pass "
            "link equity freely."
        )

    generic = [text for text in analysis.link_texts if _GENERIC_TEXT_PATTERN.match(text)]
    if len(generic) > len(analysis.link_texts) * MAX_GENERIC_TEXT_SHARE:
        recommendations.append(
            'Avoid generic link text like "click here" or "read more". '
            "Use descriptive anchor text."
        )

    if analysis.total_links > MAX_RECOMMENDED_LINKS:
        recommendations.append(
            "You have many links. Too many links can dilute link equity and "
            "overwhelm readers."
        )

    return recommendations


def analyze_links(content: str, site_domain: str | None = None) -> LinkAnalysisResult:
    """Classify the links in content markup.

    Args:
        content: Article body markup
        site_domain: Site domain or base URL used to tell internal links apart

    Returns:
        LinkAnalysisResult with counts, anchor texts, score and recommendations
    """
    internal = external = nofollow = 0
    link_texts: list[str] = []

    for match in _ANCHOR_PATTERN.finditer(content or ""):
        href = match.group(2).strip()
        text = _TAG_PATTERN.sub("", match.group(3)).strip()

        if is_internal_link(href, site_domain):
            internal += 1
        else:
            external += 1
        if _NOFOLLOW_PATTERN.search(match.group(0)):
            nofollow += 1
        if text:
            link_texts.append(text)

    analysis = LinkAnalysisResult(
        internal_links=internal,
        external_links=external,
        total_links=internal + external,
        nofollow_links=nofollow,
        link_texts=link_texts,
        has_valid_internal_links=internal >= MIN_INTERNAL_LINKS,
        has_valid_external_links=external >= MIN_EXTERNAL_LINKS,
    )
    analysis.score = calculate_link_score(analysis)
    analysis.recommendations = link_recommendations(analysis)

    logger.debug(
        "Links analyzed",
        extra={
            "internal_links": internal,
            "external_links": external,
            "nofollow_links": nofollow,
            "score": analysis.score,
        },
    )

    return analysis
