"""Pydantic schemas for the scoring engine's host boundary.

The engine trusts its input. Hosts validate raw payloads with these schemas
before building an SEODocument, and serialize results back through the
response schemas.

- SEODocumentRequest: Document payload to score
- QuickScoreRequest: Payload for the coarse interactive score
- SEOScoreResponse: Full weighted scoring result
- QuickScoreResponse: Coarse score result
- ContentAnalysisRequest / ContentAnalysisResponse: Advisory analyses
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from content_scoring.services.keyword_density import DEFAULT_TOP_KEYWORDS
from content_scoring.services.seo_document import (
    ContentAnalysisResult,
    QuickScoreResult,
    ScoreResult,
    SEODocument,
)

# =============================================================================
# REQUEST SCHEMAS
# =============================================================================


class SEODocumentRequest(BaseModel):
    """Request schema for scoring a document."""

    title: str = Field("", description="Display title")
    content: str = Field("", description="Article body markup")
    excerpt: str | None = Field(None, description="Short summary (not scored)")
    meta_title: str = Field("", description="Meta title tag value")
    meta_description: str = Field("", description="Meta description tag value")
    meta_keywords: str = Field("", description="Comma-separated target keywords")
    slug: str = Field("", description="URL slug")
    featured_image_url: str = Field("", description="Featured image URL")
    word_count: int = Field(
        0,
        ge=0,
        description="Word count computed by the caller",
    )
    top_keywords: int = Field(
        DEFAULT_TOP_KEYWORDS,
        ge=0,
        le=100,
        description="Number of ranked keywords to return",
    )

    @field_validator(
        "title",
        "content",
        "meta_title",
        "meta_description",
        "meta_keywords",
        "slug",
        "featured_image_url",
        mode="before",
    )
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        """Treat missing text fields as empty strings."""
        return "" if v is None else v

    def to_document(self) -> SEODocument:
        """Build the engine's input record."""
        return SEODocument(
            title=self.title,
            content=self.content,
            excerpt=self.excerpt,
            meta_title=self.meta_title,
            meta_description=self.meta_description,
            meta_keywords=self.meta_keywords,
            slug=self.slug,
            featured_image_url=self.featured_image_url,
            word_count=self.word_count,
        )


class QuickScoreRequest(BaseModel):
    """Request schema for the coarse interactive score."""

    title: str = Field("", description="Display title")
    content: str = Field("", description="Article body markup")
    meta_description: str = Field("", description="Meta description tag value")
    word_count: int = Field(0, ge=0, description="Word count computed by the caller")

    @field_validator("title", "content", "meta_description", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        """Treat missing text fields as empty strings."""
        return "" if v is None else v


class ContentAnalysisRequest(SEODocumentRequest):
    """Request schema for the advisory content analyses."""

    target_keyword: str | None = Field(
        None,
        description="Primary keyword (defaults to the first meta keyword)",
    )
    site_domain: str | None = Field(
        None,
        description="Site domain or base URL for internal link detection",
    )
    target_grade_min: float = Field(8.0, ge=0, le=20)
    target_grade_max: float = Field(10.0, ge=0, le=20)

    @field_validator("target_grade_max")
    @classmethod
    def max_not_below_min(cls, v: float, info: ValidationInfo) -> float:
        """Reject a target range whose maximum is below its minimum."""
        minimum = info.data.get("target_grade_min")
        if minimum is not None and v < minimum:
            raise ValueError("target_grade_max must be >= target_grade_min")
        return v

    @property
    def target_grade_range(self) -> tuple[float, float]:
        return (self.target_grade_min, self.target_grade_max)


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================


class CheckItemSchema(BaseModel):
    """Schema for a single checklist outcome."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="Stable check identifier")
    label: str = Field(..., description="Display text")
    passed: bool = Field(..., description="Whether the check passed")
    weight: int = Field(..., gt=0, description="Contribution to the score")
    category: str = Field(
        ...,
        description="Check category (content, metadata, structure, readability)",
    )
    suggestion: str | None = Field(None, description="Remediation for failed checks")


class KeywordEntrySchema(BaseModel):
    """Schema for a ranked keyword."""

    word: str = Field(..., description="Normalized token")
    count: int = Field(..., ge=0, description="Occurrences in content")
    density: float = Field(
        ...,
        ge=0,
        le=100,
        description="Share of filtered tokens (percentage)",
    )


class KeywordDensitySchema(BaseModel):
    """Schema for keyword frequency analysis."""

    keywords: dict[str, int] = Field(
        default_factory=dict,
        description="Occurrence count per token",
    )
    top_keywords: list[KeywordEntrySchema] = Field(
        default_factory=list,
        description="Most frequent tokens, descending",
    )
    total_words: int = Field(0, ge=0, description="Tokens after filtering")


class ReadabilitySchema(BaseModel):
    """Schema for advisory readability metrics."""

    flesch_reading_ease: float = Field(0, ge=0, le=100)
    flesch_kincaid_grade: float = Field(0, ge=0, le=20)
    word_count: int = Field(0, ge=0)
    sentence_count: int = Field(0, ge=0)
    syllable_count: int = Field(0, ge=0)
    avg_sentence_length: float = Field(0, ge=0)
    avg_syllables_per_word: float = Field(0, ge=0)
    assessment: str = Field("", description="Reading ease band")
    reading_level: str = Field("", description="Grade level band")


class SEOScoreResponse(BaseModel):
    """Response schema for a full weighted scoring run."""

    score: int = Field(..., ge=0, le=100, description="Normalized score (0-100)")
    level: str = Field(..., description="Excellent, Good, Fair or Poor")
    checklist: list[CheckItemSchema] = Field(default_factory=list)
    keyword_density: KeywordDensitySchema = Field(default_factory=KeywordDensitySchema)
    suggestions: list[str] = Field(default_factory=list)
    readability: ReadabilitySchema = Field(default_factory=ReadabilitySchema)

    @classmethod
    def from_result(cls, result: ScoreResult) -> "SEOScoreResponse":
        """Build a response from an engine result."""
        return cls.model_validate(result.to_dict())


class QuickScoreItemSchema(BaseModel):
    """Schema for a single quick-score check."""

    id: str
    passed: bool


class QuickScoreResponse(BaseModel):
    """Response schema for the coarse interactive score."""

    score: int = Field(..., ge=0, le=100)
    items: list[QuickScoreItemSchema] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: QuickScoreResult) -> "QuickScoreResponse":
        """Build a response from an engine result."""
        return cls.model_validate(result.to_dict())


class KeywordPlacementSchema(BaseModel):
    """Schema for primary keyword placement."""

    keyword: str = ""
    count: int = Field(0, ge=0)
    density: float = Field(0, ge=0)
    in_title: bool = False
    in_first_paragraph: bool = False
    in_url: bool = False
    in_meta_description: bool = False
    in_headings: bool = False
    score: int = Field(0, ge=0, le=100)
    rating: str = ""


class HeadingSchema(BaseModel):
    """Schema for an extracted heading."""

    level: int = Field(..., ge=1, le=6)
    text: str
    word_count: int = Field(..., ge=0)


class HeadingStructureSchema(BaseModel):
    """Schema for heading hierarchy analysis."""

    has_h1: bool = False
    h1_count: int = Field(0, ge=0)
    hierarchy_valid: bool = True
    headings: list[HeadingSchema] = Field(default_factory=list)
    skipped_levels: list[int] = Field(default_factory=list)
    score: int = Field(0, ge=0, le=100)
    recommendations: list[str] = Field(default_factory=list)


class LinkAnalysisSchema(BaseModel):
    """Schema for the link breakdown."""

    internal_links: int = Field(0, ge=0)
    external_links: int = Field(0, ge=0)
    total_links: int = Field(0, ge=0)
    nofollow_links: int = Field(0, ge=0)
    link_texts: list[str] = Field(default_factory=list)
    has_valid_internal_links: bool = False
    has_valid_external_links: bool = False
    score: int = Field(0, ge=0, le=100)
    recommendations: list[str] = Field(default_factory=list)


class TargetGradeSchema(BaseModel):
    """Schema for the target grade assessment."""

    grade: float = Field(0, ge=0, le=20)
    target_grade_min: float
    target_grade_max: float
    target_grade_met: bool
    score: float = Field(..., ge=0, le=100)
    reading_level: str = ""


class ContentAnalysisResponse(BaseModel):
    """Response schema for the advisory content analyses."""

    keyword_placement: KeywordPlacementSchema
    headings: HeadingStructureSchema
    links: LinkAnalysisSchema
    target_grade: TargetGradeSchema

    @classmethod
    def from_result(cls, result: ContentAnalysisResult) -> "ContentAnalysisResponse":
        """Build a response from an analysis result."""
        return cls.model_validate(result.to_dict())
