"""Content scoring engine for on-page SEO checklists."""

from content_scoring.services import (
    CheckItem,
    ContentAnalysisResult,
    QuickScoreResult,
    ScoreLevel,
    ScoreResult,
    SEODocument,
    SEOScoreService,
    analyze_content,
    quick_score,
    score_document,
)

__version__ = "1.0.0"

__all__ = [
    "CheckItem",
    "ContentAnalysisResult",
    "QuickScoreResult",
    "ScoreLevel",
    "ScoreResult",
    "SEODocument",
    "SEOScoreService",
    "__version__",
    "analyze_content",
    "quick_score",
    "score_document",
]
