"""Data model for SEO content scoring.

Every type here is created fresh per scoring call. The input document is
frozen so the engine cannot mutate it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class CheckCategory(str, Enum):
    """Grouping of checklist items."""

    CONTENT = "content"
    METADATA = "metadata"
    STRUCTURE = "structure"
    READABILITY = "readability"


class ScoreLevel(str, Enum):
    """Qualitative band derived from the 0-100 score."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"


@dataclass(frozen=True)
class SEODocument:
    """A piece of content to score.

    Attributes:
        title: Display title
        content: Block-level markup (headings, paragraphs, links, images)
        excerpt: Optional short summary, not scored
        meta_title: Meta title tag value
        meta_description: Meta description tag value
        meta_keywords: Comma-separated target keywords
        slug: URL slug
        featured_image_url: Featured image URL
        word_count: Word count pre-computed by the caller (trusted)
    """

    title: str = ""
    content: str = ""
    excerpt: str | None = None
    meta_title: str = ""
    meta_description: str = ""
    meta_keywords: str = ""
    slug: str = ""
    featured_image_url: str = ""
    word_count: int = 0

    def __post_init__(self) -> None:
        # None is accepted for any text field and treated as empty
        for name in (
            "title",
            "content",
            "meta_title",
            "meta_description",
            "meta_keywords",
            "slug",
            "featured_image_url",
        ):
            if getattr(self, name) is None:
                object.__setattr__(self, name, "")
        if self.word_count is None:
            object.__setattr__(self, "word_count", 0)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging (sanitized)."""
        return {
            "title": self.title,
            "content_length": len(self.content),
            "slug": self.slug,
            "meta_keywords": self.meta_keywords,
            "word_count": self.word_count,
        }


@dataclass(frozen=True)
class CheckItem:
    """Outcome of a single checklist rule.

    Attributes:
        id: Stable check identifier (e.g. ``word-count``)
        label: Display text
        passed: Whether the check passed
        weight: Contribution to the 0-100 scale
        category: Check grouping
        suggestion: Remediation text, only set when the check failed
    """

    id: str
    label: str
    passed: bool
    weight: int
    category: CheckCategory
    suggestion: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "label": self.label,
            "passed": self.passed,
            "weight": self.weight,
            "category": self.category.value,
            "suggestion": self.suggestion,
        }


@dataclass(frozen=True)
class KeywordEntry:
    """A ranked keyword with its raw count and density percentage."""

    word: str
    count: int
    density: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "word": self.word,
            "count": self.count,
            "density": round(self.density, 2),
        }


@dataclass
class KeywordDensityResult:
    """Keyword frequency analysis.

    Attributes:
        keywords: Word to occurrence count, in first-seen order
        top_keywords: Top entries by descending count
        total_words: Tokens kept after stop-word and length filtering
    """

    keywords: dict[str, int] = field(default_factory=dict)
    top_keywords: list[KeywordEntry] = field(default_factory=list)
    total_words: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "keywords": dict(self.keywords),
            "top_keywords": [entry.to_dict() for entry in self.top_keywords],
            "total_words": self.total_words,
        }


@dataclass
class ReadabilityResult:
    """Readability metrics. Advisory only, not part of the weighted score.

    Attributes:
        flesch_reading_ease: Flesch Reading Ease (0-100, higher = easier)
        flesch_kincaid_grade: Flesch-Kincaid Grade Level (0-20)
        word_count: Whitespace-delimited words
        sentence_count: Non-empty sentences
        syllable_count: Estimated syllables over all words
        avg_sentence_length: Words per sentence
        avg_syllables_per_word: Syllables per word
        assessment: Label for the reading ease band
        reading_level: Label for the grade level band
    """

    flesch_reading_ease: float = 0.0
    flesch_kincaid_grade: float = 0.0
    word_count: int = 0
    sentence_count: int = 0
    syllable_count: int = 0
    avg_sentence_length: float = 0.0
    avg_syllables_per_word: float = 0.0
    assessment: str = ""
    reading_level: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "flesch_reading_ease": round(self.flesch_reading_ease, 2),
            "flesch_kincaid_grade": round(self.flesch_kincaid_grade, 2),
            "word_count": self.word_count,
            "sentence_count": self.sentence_count,
            "syllable_count": self.syllable_count,
            "avg_sentence_length": round(self.avg_sentence_length, 2),
            "avg_syllables_per_word": round(self.avg_syllables_per_word, 2),
            "assessment": self.assessment,
            "reading_level": self.reading_level,
        }


@dataclass
class ScoreResult:
    """Result of a full weighted scoring run.

    Attributes:
        score: Normalized score (0-100)
        level: Qualitative band
        checklist: Check outcomes in fixed order
        keyword_density: Keyword frequency analysis of the content
        suggestions: Suggestions of failed checks, in checklist order
        readability: Advisory readability metrics
    """

    score: int
    level: ScoreLevel
    checklist: list[CheckItem] = field(default_factory=list)
    keyword_density: KeywordDensityResult = field(default_factory=KeywordDensityResult)
    suggestions: list[str] = field(default_factory=list)
    readability: ReadabilityResult = field(default_factory=ReadabilityResult)

    @property
    def failed_checks(self) -> list[str]:
        """Ids of the checks that did not pass."""
        return [item.id for item in self.checklist if not item.passed]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "score": self.score,
            "level": self.level.value,
            "checklist": [item.to_dict() for item in self.checklist],
            "keyword_density": self.keyword_density.to_dict(),
            "suggestions": list(self.suggestions),
            "readability": self.readability.to_dict(),
        }


@dataclass(frozen=True)
class QuickScoreItem:
    """A single unweighted quick-score check."""

    id: str
    passed: bool

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "passed": self.passed}


@dataclass
class QuickScoreResult:
    """Coarse score for interactive editing: share of passed checks (0-100)."""

    score: int
    items: list[QuickScoreItem] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "items": [item.to_dict() for item in self.items],
        }


# ---------------------------------------------------------------------------
# Advisory analyses (not weighted)
# ---------------------------------------------------------------------------


@dataclass
class KeywordPlacementResult:
    """Usage and placement of the primary keyword.

    Attributes:
        keyword: Keyword analyzed (given, or derived from the title)
        count: Whole-word occurrences in the content text
        density: Occurrences per 100 content words
        in_title: Keyword appears in the title
        in_first_paragraph: Keyword appears in the opening text
        in_url: Keyword appears in the slug
        in_meta_description: Keyword appears in the meta description
        in_headings: Keyword appears in any heading
        score: Density and placement score (0-100)
        rating: Density band label
    """

    keyword: str = ""
    count: int = 0
    density: float = 0.0
    in_title: bool = False
    in_first_paragraph: bool = False
    in_url: bool = False
    in_meta_description: bool = False
    in_headings: bool = False
    score: int = 0
    rating: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "keyword": self.keyword,
            "count": self.count,
            "density": round(self.density, 2),
            "in_title": self.in_title,
            "in_first_paragraph": self.in_first_paragraph,
            "in_url": self.in_url,
            "in_meta_description": self.in_meta_description,
            "in_headings": self.in_headings,
            "score": self.score,
            "rating": self.rating,
        }


@dataclass(frozen=True)
class Heading:
    """A heading extracted from content markup."""

    level: int
    text: str
    word_count: int

    def to_dict(self) -> dict[str, Any]:
        return {"level": self.level, "text": self.text, "word_count": self.word_count}


@dataclass
class HeadingStructureResult:
    """Heading hierarchy analysis."""

    has_h1: bool = False
    h1_count: int = 0
    hierarchy_valid: bool = True
    headings: list[Heading] = field(default_factory=list)
    skipped_levels: list[int] = field(default_factory=list)
    score: int = 0
    recommendations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "has_h1": self.has_h1,
            "h1_count": self.h1_count,
            "hierarchy_valid": self.hierarchy_valid,
            "headings": [heading.to_dict() for heading in self.headings],
            "skipped_levels": list(self.skipped_levels),
            "score": self.score,
            "recommendations": list(self.recommendations),
        }


@dataclass
class LinkAnalysisResult:
    """Internal and external link breakdown.

    Attributes:
        internal_links: Links pointing at the site (or relative)
        external_links: Absolute links to other hosts
        total_links: All anchors with an href
        nofollow_links: Anchors carrying rel="nofollow"
        link_texts: Non-empty anchor texts, in document order
        has_valid_internal_links: At least the recommended internal links
        has_valid_external_links: At least the recommended external links
        score: Link score (0-100)
        recommendations: Improvement hints
    """

    internal_links: int = 0
    external_links: int = 0
    total_links: int = 0
    nofollow_links: int = 0
    link_texts: list[str] = field(default_factory=list)
    has_valid_internal_links: bool = False
    has_valid_external_links: bool = False
    score: int = 0
    recommendations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "internal_links": self.internal_links,
            "external_links": self.external_links,
            "total_links": self.total_links,
            "nofollow_links": self.nofollow_links,
            "link_texts": list(self.link_texts),
            "has_valid_internal_links": self.has_valid_internal_links,
            "has_valid_external_links": self.has_valid_external_links,
            "score": self.score,
            "recommendations": list(self.recommendations),
        }


@dataclass
class TargetGradeResult:
    """Flesch-Kincaid grade compared with a target grade range."""

    grade: float = 0.0
    target_grade_min: float = 8.0
    target_grade_max: float = 10.0
    target_grade_met: bool = False
    score: float = 0.0
    reading_level: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "grade": round(self.grade, 1),
            "target_grade_min": self.target_grade_min,
            "target_grade_max": self.target_grade_max,
            "target_grade_met": self.target_grade_met,
            "score": round(self.score, 2),
            "reading_level": self.reading_level,
        }


@dataclass
class ContentAnalysisResult:
    """Advisory analyses of a document, reported next to the weighted score."""

    keyword_placement: KeywordPlacementResult = field(
        default_factory=KeywordPlacementResult
    )
    headings: HeadingStructureResult = field(default_factory=HeadingStructureResult)
    links: LinkAnalysisResult = field(default_factory=LinkAnalysisResult)
    target_grade: TargetGradeResult = field(default_factory=TargetGradeResult)

    @property
    def recommendations(self) -> list[str]:
        """Heading and link recommendations, in that order."""
        return [*self.headings.recommendations, *self.links.recommendations]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "keyword_placement": self.keyword_placement.to_dict(),
            "headings": self.headings.to_dict(),
            "links": self.links.to_dict(),
            "target_grade": self.target_grade.to_dict(),
        }
