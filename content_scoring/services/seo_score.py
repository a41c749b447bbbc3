"""SEO Score Service: weighted checklist scoring for written content.

Pipeline (single synchronous pass, no I/O):
    document -> normalizer/lexical analysis -> readability + keyword density
             -> checklist evaluation -> score aggregation -> ScoreResult

The same document always yields the same result. The service holds only the
immutable ScoringRules it was built with, so one instance can be shared
across threads.

ERROR LOGGING REQUIREMENTS:
- Log method entry at DEBUG with sanitized parameters (content length only)
- Log scoring completion at INFO with score, level and failed checks
- Add timing logs for operations above the slow threshold
- Scoring never raises for document input; only invalid ScoringRules raise
"""

import math
import time
from collections.abc import Sequence
from dataclasses import dataclass, field

from content_scoring.core.config import get_settings
from content_scoring.core.logging import get_logger, scoring_logger
from content_scoring.services.checklist import (
    DEFAULT_LEVEL_THRESHOLDS,
    DEFAULT_RULES,
    TOTAL_WEIGHT,
    ScoringRules,
    evaluate_checklist,
    parse_keywords,
)
from content_scoring.services.heading_structure import analyze_heading_structure
from content_scoring.services.keyword_density import (
    DEFAULT_TOP_KEYWORDS,
    analyze_keyword_placement,
    keyword_density,
)
from content_scoring.services.link_analysis import analyze_links
from content_scoring.services.readability import (
    DEFAULT_TARGET_GRADE_RANGE,
    analyze_readability,
    assess_target_grade,
    flesch_kincaid_grade,
)
from content_scoring.services.seo_document import (
    CheckItem,
    ContentAnalysisResult,
    QuickScoreItem,
    QuickScoreResult,
    ScoreLevel,
    ScoreResult,
    SEODocument,
)
from content_scoring.utils.html_text import has_tag, normalize

logger = get_logger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def score_level(
    score: int,
    thresholds: Sequence[tuple[int, ScoreLevel]] = DEFAULT_LEVEL_THRESHOLDS,
) -> ScoreLevel:
    """Map a 0-100 score to its qualitative band."""
    for minimum, level in thresholds:
        if score >= minimum:
            return level
    return ScoreLevel.POOR


@dataclass
class AggregateResult:
    """Score, level and suggestions derived from checklist outcomes."""

    score: int
    level: ScoreLevel
    checklist: list[CheckItem] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)


def aggregate(
    checks: Sequence[CheckItem],
    total_weight: int = TOTAL_WEIGHT,
    level_thresholds: Sequence[tuple[int, ScoreLevel]] = DEFAULT_LEVEL_THRESHOLDS,
) -> AggregateResult:
    """Combine weighted check outcomes into a 0-100 score.

    ``score = round(100 * sum(weight of passed checks) / total_weight)``.
    Suggestions of failed checks are collected in checklist order, skipping
    checks without one.

    Args:
        checks: Check outcomes in checklist order
        total_weight: Configured sum of all check weights
        level_thresholds: Score bands, highest first

    Returns:
        AggregateResult with score, level, checklist and suggestions
    """
    earned = sum(item.weight for item in checks if item.passed)
    score = round_half_up(100 * earned / total_weight) if total_weight > 0 else 0
    score = max(0, min(100, score))

    suggestions = [
        item.suggestion for item in checks if not item.passed and item.suggestion
    ]

    return AggregateResult(
        score=score,
        level=score_level(score, level_thresholds),
        checklist=list(checks),
        suggestions=suggestions,
    )


class SEOScoreService:
    """Service for weighted on-page SEO scoring.

    Example usage:
        service = SEOScoreService()
        result = service.score_document(
            SEODocument(
                title="Best Running Shoes for Beginners in 2025",
                content="<h1>Running shoes</h1><p>...</p>",
                meta_keywords="shoes, running, fitness",
                word_count=850,
            )
        )
        print(f"{result.score} ({result.level.value})")
    """

    def __init__(self, rules: ScoringRules | None = None) -> None:
        """Initialize the SEO score service.

        Args:
            rules: Scoring configuration (defaults to the standard checklist)
        """
        self.rules = rules or DEFAULT_RULES

        logger.debug(
            "SEOScoreService initialized",
            extra={
                "check_ids": list(self.rules.check_ids),
                "total_weight": self.rules.total_weight,
            },
        )

    def score_document(
        self,
        document: SEODocument,
        top_keywords: int = DEFAULT_TOP_KEYWORDS,
    ) -> ScoreResult:
        """Run the full weighted evaluation of a document.

        Args:
            document: Document snapshot to score
            top_keywords: Number of ranked keywords in the density analysis

        Returns:
            ScoreResult with score, level, checklist, keyword density,
            suggestions and advisory readability metrics
        """
        start_time = time.monotonic()
        scoring_logger.scoring_started(
            content_length=len(document.content),
            slug=document.slug,
            word_count=document.word_count,
        )

        checklist = evaluate_checklist(document, self.rules)
        aggregated = aggregate(
            checklist,
            total_weight=self.rules.total_weight,
            level_thresholds=self.rules.level_thresholds,
        )
        density = keyword_density(
            document.content,
            top_n=top_keywords,
            stop_words=self.rules.stop_words,
        )
        readability = analyze_readability(normalize(document.content))

        result = ScoreResult(
            score=aggregated.score,
            level=aggregated.level,
            checklist=aggregated.checklist,
            keyword_density=density,
            suggestions=aggregated.suggestions,
            readability=readability,
        )

        duration_ms = (time.monotonic() - start_time) * 1000
        scoring_logger.scoring_completed(
            score=result.score,
            level=result.level.value,
            failed_checks=result.failed_checks,
            duration_ms=duration_ms,
            slug=document.slug or None,
        )

        threshold_ms = get_settings().slow_operation_threshold_ms
        if duration_ms > threshold_ms:
            scoring_logger.slow_operation(
                "content scoring",
                duration_ms=duration_ms,
                threshold_ms=threshold_ms,
                content_length=len(document.content),
            )

        return result

    def score_documents(
        self,
        documents: Sequence[SEODocument],
        top_keywords: int = DEFAULT_TOP_KEYWORDS,
    ) -> list[ScoreResult]:
        """Score multiple documents.

        Args:
            documents: Documents to score
            top_keywords: Number of ranked keywords per document

        Returns:
            List of ScoreResult, one per document, in input order
        """
        if not documents:
            return []

        start_time = time.monotonic()
        results = [self.score_document(doc, top_keywords) for doc in documents]
        duration_ms = (time.monotonic() - start_time) * 1000

        scoring_logger.batch_completed(
            input_count=len(documents),
            average_score=sum(r.score for r in results) / len(results),
            duration_ms=duration_ms,
        )

        threshold_ms = get_settings().slow_operation_threshold_ms
        if duration_ms > threshold_ms:
            scoring_logger.slow_operation(
                "batch content scoring",
                duration_ms=duration_ms,
                threshold_ms=threshold_ms,
                input_count=len(documents),
            )

        return results

    def quick_score(
        self,
        title: str,
        content: str,
        meta_description: str,
        word_count: int,
    ) -> QuickScoreResult:
        """Coarse four-check score for interactive editing.

        Title and description lengths are measured untrimmed. The checks are
        unweighted and independent of :meth:`score_document`; the two scores
        are not expected to agree.

        Returns:
            QuickScoreResult with the passed share (0-100) and per-check items
        """
        title = title or ""
        content = content or ""
        meta_description = meta_description or ""
        title_min, title_max = self.rules.title_length
        desc_min, desc_max = self.rules.meta_description_length

        items = [
            QuickScoreItem("title", title_min <= len(title) <= title_max),
            QuickScoreItem(
                "description", desc_min <= len(meta_description) <= desc_max
            ),
            QuickScoreItem("content", (word_count or 0) >= self.rules.min_word_count),
            QuickScoreItem("headings", has_tag(content, "h1") and has_tag(content, "h2")),
        ]
        passed = sum(1 for item in items if item.passed)
        score = round_half_up(100 * passed / len(items))

        logger.debug(
            "Quick score computed",
            extra={"score": score, "passed": passed, "total": len(items)},
        )

        return QuickScoreResult(score=score, items=items)

    def analyze_content(
        self,
        document: SEODocument,
        target_keyword: str | None = None,
        site_domain: str | None = None,
        target_grade_range: tuple[float, float] = DEFAULT_TARGET_GRADE_RANGE,
    ) -> ContentAnalysisResult:
        """Run the advisory analyses that sit beside the weighted score.

        None of these feed :meth:`score_document`.

        Args:
            document: Document to analyze
            target_keyword: Primary keyword (defaults to the first meta keyword,
                then to one derived from the title)
            site_domain: Site domain or base URL for internal link detection
            target_grade_range: Acceptable Flesch-Kincaid grade range

        Returns:
            ContentAnalysisResult with keyword placement, heading structure,
            link breakdown and target grade assessment
        """
        start_time = time.monotonic()
        keywords = parse_keywords(document.meta_keywords)
        keyword = target_keyword or (keywords[0] if keywords else None)

        result = ContentAnalysisResult(
            keyword_placement=analyze_keyword_placement(
                document.content,
                keyword=keyword,
                title=document.title,
                slug=document.slug,
                meta_description=document.meta_description,
            ),
            headings=analyze_heading_structure(document.content),
            links=analyze_links(document.content, site_domain),
            target_grade=assess_target_grade(
                flesch_kincaid_grade(normalize(document.content)),
                target_grade_range,
            ),
        )

        duration_ms = (time.monotonic() - start_time) * 1000
        logger.debug(
            "Content analysis completed",
            extra={
                "content_length": len(document.content),
                "keyword_score": result.keyword_placement.score,
                "heading_score": result.headings.score,
                "link_score": result.links.score,
                "target_grade_met": result.target_grade.target_grade_met,
                "duration_ms": round(duration_ms, 2),
            },
        )

        return result


# Global SEOScoreService instance
_seo_score_service: SEOScoreService | None = None


def get_seo_score_service() -> SEOScoreService:
    """Get the default SEOScoreService instance (singleton).

    Returns:
        Default SEOScoreService instance.
    """
    global _seo_score_service
    if _seo_score_service is None:
        _seo_score_service = SEOScoreService()
        logger.info("SEOScoreService singleton created")
    return _seo_score_service


def score_document(
    document: SEODocument,
    top_keywords: int = DEFAULT_TOP_KEYWORDS,
) -> ScoreResult:
    """Convenience function to score a document with the default rules.

    Example:
        >>> result = score_document(SEODocument(title="...", word_count=500))
        >>> result.level
        <ScoreLevel.POOR: 'Poor'>
    """
    return get_seo_score_service().score_document(document, top_keywords)


def quick_score(
    title: str,
    content: str,
    meta_description: str,
    word_count: int,
) -> QuickScoreResult:
    """Convenience function for the coarse interactive score."""
    return get_seo_score_service().quick_score(
        title, content, meta_description, word_count
    )


def analyze_content(
    document: SEODocument,
    target_keyword: str | None = None,
    site_domain: str | None = None,
) -> ContentAnalysisResult:
    """Convenience function for the advisory content analyses."""
    return get_seo_score_service().analyze_content(document, target_keyword, site_domain)
