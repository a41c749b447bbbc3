"""Services layer - scoring logic.

Services are pure: they take plain records in and return plain records out,
with no persistence or network access.
"""

from content_scoring.services.checklist import (
    DEFAULT_CHECKS,
    DEFAULT_RULES,
    TOTAL_WEIGHT,
    CheckContext,
    CheckOutcome,
    CheckRule,
    ScoringRules,
    ScoringRulesError,
    SEOScoreServiceError,
    evaluate_checklist,
    parse_keywords,
)
from content_scoring.services.heading_structure import (
    analyze_heading_structure,
    extract_headings,
)
from content_scoring.services.keyword_density import (
    DEFAULT_TOP_KEYWORDS,
    analyze_keyword_placement,
    density_rating,
    keyword_density,
)
from content_scoring.services.link_analysis import analyze_links, is_internal_link
from content_scoring.services.readability import (
    DEFAULT_TARGET_GRADE_RANGE,
    analyze_readability,
    assess_target_grade,
    flesch_kincaid_grade,
    readability,
    readability_assessment,
    reading_level_description,
)
from content_scoring.services.seo_document import (
    CheckCategory,
    CheckItem,
    ContentAnalysisResult,
    Heading,
    HeadingStructureResult,
    KeywordDensityResult,
    KeywordEntry,
    KeywordPlacementResult,
    LinkAnalysisResult,
    QuickScoreItem,
    QuickScoreResult,
    ReadabilityResult,
    ScoreLevel,
    ScoreResult,
    SEODocument,
    TargetGradeResult,
)
from content_scoring.services.seo_score import (
    AggregateResult,
    SEOScoreService,
    aggregate,
    analyze_content,
    get_seo_score_service,
    quick_score,
    round_half_up,
    score_document,
    score_level,
)

__all__ = [
    # Data model
    "CheckCategory",
    "CheckItem",
    "ContentAnalysisResult",
    "Heading",
    "HeadingStructureResult",
    "KeywordDensityResult",
    "KeywordEntry",
    "KeywordPlacementResult",
    "LinkAnalysisResult",
    "QuickScoreItem",
    "QuickScoreResult",
    "ReadabilityResult",
    "ScoreLevel",
    "ScoreResult",
    "SEODocument",
    "TargetGradeResult",
    # Checklist
    "DEFAULT_CHECKS",
    "DEFAULT_RULES",
    "TOTAL_WEIGHT",
    "CheckContext",
    "CheckOutcome",
    "CheckRule",
    "ScoringRules",
    "ScoringRulesError",
    "SEOScoreServiceError",
    "evaluate_checklist",
    "parse_keywords",
    # Metrics
    "DEFAULT_TARGET_GRADE_RANGE",
    "DEFAULT_TOP_KEYWORDS",
    "analyze_readability",
    "assess_target_grade",
    "density_rating",
    "flesch_kincaid_grade",
    "keyword_density",
    "readability",
    "readability_assessment",
    "reading_level_description",
    # Advisory analyses
    "analyze_heading_structure",
    "analyze_keyword_placement",
    "analyze_links",
    "extract_headings",
    "is_internal_link",
    # Scoring
    "AggregateResult",
    "SEOScoreService",
    "aggregate",
    "analyze_content",
    "get_seo_score_service",
    "quick_score",
    "round_half_up",
    "score_document",
    "score_level",
]
