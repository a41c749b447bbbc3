"""Pydantic schemas for validating input and serializing scoring results."""

from content_scoring.schemas.seo_score import (
    CheckItemSchema,
    ContentAnalysisRequest,
    ContentAnalysisResponse,
    HeadingSchema,
    HeadingStructureSchema,
    KeywordDensitySchema,
    KeywordEntrySchema,
    KeywordPlacementSchema,
    LinkAnalysisSchema,
    QuickScoreItemSchema,
    QuickScoreRequest,
    QuickScoreResponse,
    ReadabilitySchema,
    SEODocumentRequest,
    SEOScoreResponse,
    TargetGradeSchema,
)

__all__ = [
    "CheckItemSchema",
    "ContentAnalysisRequest",
    "ContentAnalysisResponse",
    "HeadingSchema",
    "HeadingStructureSchema",
    "KeywordDensitySchema",
    "KeywordEntrySchema",
    "KeywordPlacementSchema",
    "LinkAnalysisSchema",
    "QuickScoreItemSchema",
    "QuickScoreRequest",
    "QuickScoreResponse",
    "ReadabilitySchema",
    "SEODocumentRequest",
    "SEOScoreResponse",
    "TargetGradeSchema",
]
