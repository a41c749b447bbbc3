"""Checklist evaluation for on-page SEO rules.

Each check is an independent, side-effect-free function over the document
(and its normalized content) returning pass/fail plus an optional
suggestion. Checks are registered as ``CheckRule`` records in a fixed order;
thresholds, weights and the stop-word set live in an immutable
``ScoringRules`` value object injected at service construction.

The thresholds and boolean logic below are scoring contracts. Changing them
changes every stored score.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass

from content_scoring.core.logging import scoring_logger
from content_scoring.services.seo_document import (
    CheckCategory,
    CheckItem,
    ScoreLevel,
    SEODocument,
)
from content_scoring.utils.html_text import (
    count_links,
    has_tag,
    normalize,
    split_paragraphs,
)
from content_scoring.utils.lexical import STOP_WORDS

# Sum of all check weights; the 0-100 score is computed against it
TOTAL_WEIGHT = 100

DEFAULT_MIN_WORD_COUNT = 300
DEFAULT_TITLE_LENGTH = (30, 60)
DEFAULT_META_DESCRIPTION_LENGTH = (120, 160)
DEFAULT_MIN_LINKS = 2
DEFAULT_MIN_META_KEYWORDS = 3
DEFAULT_MIN_CONTENT_KEYWORD_LENGTH = 3
DEFAULT_CONTENT_KEYWORD_OCCURRENCES = (2, 10)
DEFAULT_MAX_AVG_PARAGRAPH_WORDS = 100

# (minimum score, level), checked top-down; anything lower is Poor
DEFAULT_LEVEL_THRESHOLDS: tuple[tuple[int, ScoreLevel], ...] = (
    (80, ScoreLevel.EXCELLENT),
    (60, ScoreLevel.GOOD),
    (40, ScoreLevel.FAIR),
)


class SEOScoreServiceError(Exception):
    """Base exception for SEO scoring errors."""


class ScoringRulesError(SEOScoreServiceError):
    """Raised when a ScoringRules configuration is inconsistent."""

    def __init__(self, field_name: str, value: object, message: str) -> None:
        self.field_name = field_name
        self.value = value
        super().__init__(f"Invalid scoring rules '{field_name}': {message}")


@dataclass(frozen=True)
class CheckOutcome:
    """Raw result of a check function."""

    passed: bool
    suggestion: str | None = None


PASSED = CheckOutcome(passed=True)


def parse_keywords(meta_keywords: str) -> list[str]:
    """Split a comma-separated keyword string into trimmed, non-empty keywords."""
    if not meta_keywords:
        return []
    return [kw.strip() for kw in meta_keywords.split(",") if kw.strip()]


@dataclass(frozen=True)
class CheckContext:
    """Per-call inputs shared by every check, derived once from the document."""

    document: SEODocument
    rules: "ScoringRules"
    plain_text: str
    paragraphs: list[str]
    keywords: list[str]

    @classmethod
    def build(cls, document: SEODocument, rules: "ScoringRules") -> "CheckContext":
        plain_text = normalize(document.content)
        return cls(
            document=document,
            rules=rules,
            plain_text=plain_text,
            paragraphs=split_paragraphs(plain_text),
            keywords=parse_keywords(document.meta_keywords),
        )


# ---------------------------------------------------------------------------
# Checks
# ---------------------------------------------------------------------------


def check_word_count(ctx: CheckContext) -> CheckOutcome:
    word_count = ctx.document.word_count
    minimum = ctx.rules.min_word_count
    if word_count >= minimum:
        return PASSED
    if word_count <= 0:
        return CheckOutcome(
            False,
            f"Add content to your article (minimum {minimum} words recommended for SEO)",
        )
    return CheckOutcome(
        False,
        f"Article is too short ({word_count} words). "
        f"Aim for at least {minimum} words for better SEO performance",
    )


def check_headings(ctx: CheckContext) -> CheckOutcome:
    content = ctx.document.content
    has_h1 = has_tag(content, "h1")
    has_h2 = has_tag(content, "h2")
    if has_h1 and has_h2:
        return PASSED
    if not has_h1:
        return CheckOutcome(False, "Add an H1 heading to structure your content")
    return CheckOutcome(
        False,
        "Add H2 subheadings to break up your content for better readability",
    )


def check_images(ctx: CheckContext) -> CheckOutcome:
    if ctx.document.featured_image_url or has_tag(ctx.document.content, "img"):
        return PASSED
    return CheckOutcome(
        False,
        "Add at least one image to make your article more engaging",
    )


def check_links(ctx: CheckContext) -> CheckOutcome:
    link_count = count_links(ctx.document.content)
    minimum = ctx.rules.min_links
    if link_count >= minimum:
        return PASSED
    if link_count == 0:
        return CheckOutcome(
            False,
            "Add internal links to other content on your site to improve SEO",
        )
    return CheckOutcome(
        False,
        f"Add more internal links ({link_count} found). "
        f"Aim for at least {minimum} links per article",
    )


def _length_outcome(
    value: str,
    bounds: tuple[int, int],
    subject: str,
    missing: str,
    too_long_hint: str,
) -> CheckOutcome:
    """Shared pass/fail logic for trimmed string length ranges."""
    low, high = bounds
    length = len(value.strip())
    if low <= length <= high:
        return PASSED
    if length == 0:
        return CheckOutcome(False, missing)
    if length < low:
        return CheckOutcome(
            False,
            f"{subject} is too short ({length} chars). Aim for {low}-{high} characters",
        )
    return CheckOutcome(
        False,
        f"{subject} is too long ({length} chars). "
        f"Aim for {low}-{high} characters {too_long_hint}",
    )


def check_title_length(ctx: CheckContext) -> CheckOutcome:
    low, high = ctx.rules.title_length
    return _length_outcome(
        ctx.document.title,
        ctx.rules.title_length,
        subject="Title",
        missing=f"Add a title to your article ({low}-{high} characters recommended)",
        too_long_hint="to avoid truncation in search results",
    )


def check_meta_description(ctx: CheckContext) -> CheckOutcome:
    low, high = ctx.rules.meta_description_length
    return _length_outcome(
        ctx.document.meta_description,
        ctx.rules.meta_description_length,
        subject="Meta description",
        missing=f"Add a meta description ({low}-{high} characters recommended)",
        too_long_hint="to avoid truncation",
    )


def check_slug(ctx: CheckContext) -> CheckOutcome:
    if ctx.document.slug.strip():
        return PASSED
    return CheckOutcome(False, "Add a URL slug for your article")


def check_meta_keywords(ctx: CheckContext) -> CheckOutcome:
    count = len(ctx.keywords)
    minimum = ctx.rules.min_meta_keywords
    if count >= minimum:
        return PASSED
    if count == 0:
        return CheckOutcome(
            False,
            f"Add target keywords for your article (at least {minimum}-5 keywords)",
        )
    return CheckOutcome(
        False,
        f"Add more target keywords ({count} defined). Aim for {minimum}-5 keywords",
    )


def check_title_keyword(ctx: CheckContext) -> CheckOutcome:
    # No keywords defined: nothing to check against
    if not ctx.keywords:
        return PASSED
    title = ctx.document.title.lower()
    if any(kw.lower() in title for kw in ctx.keywords):
        return PASSED
    return CheckOutcome(False, "Include your main keyword in the title for better SEO")


def check_content_keyword(ctx: CheckContext) -> CheckOutcome:
    # Only the first (primary) keyword is measured.
    candidates = [
        kw for kw in ctx.keywords if len(kw) >= ctx.rules.min_content_keyword_length
    ]
    if not candidates:
        return PASSED

    main_keyword = candidates[0].lower()
    pattern = rf"\b{re.escape(main_keyword)}\b"
    count = len(re.findall(pattern, ctx.plain_text, re.IGNORECASE))

    low, high = ctx.rules.content_keyword_occurrences
    if low <= count <= high:
        return PASSED
    if count == 0:
        return CheckOutcome(
            False,
            f'Include your main keyword "{main_keyword}" in the content '
            f"(at least {low} times recommended)",
        )
    return CheckOutcome(
        False,
        f'Main keyword "{main_keyword}" appears {count} times. '
        f"Use it {low}-{high} times to avoid "
        + ("keyword stuffing" if count > high else "under-optimization"),
    )


def check_paragraph_length(ctx: CheckContext) -> CheckOutcome:
    paragraphs = ctx.paragraphs
    total_words = sum(len(p.split()) for p in paragraphs)
    average = total_words / (len(paragraphs) or 1)
    maximum = ctx.rules.max_avg_paragraph_words
    if average <= maximum:
        return PASSED
    return CheckOutcome(
        False,
        f"Paragraphs average {round(average)} words. Break them into shorter "
        f"chunks (3-5 sentences, under {maximum} words) for better readability",
    )


# ---------------------------------------------------------------------------
# Rule table
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CheckRule:
    """A named, weighted check in the checklist.

    Attributes:
        id: Stable identifier
        label: Display text
        weight: Contribution to the score
        category: Check grouping
        evaluate: Pure function from CheckContext to CheckOutcome
    """

    id: str
    label: str
    weight: int
    category: CheckCategory
    evaluate: Callable[[CheckContext], CheckOutcome]


DEFAULT_CHECKS: tuple[CheckRule, ...] = (
    CheckRule(
        "word-count", "Word count (300+ words)", 15, CheckCategory.CONTENT,
        check_word_count,
    ),
    CheckRule(
        "headings", "Heading structure (H1, H2)", 10, CheckCategory.STRUCTURE,
        check_headings,
    ),
    CheckRule(
        "images", "At least one image", 10, CheckCategory.CONTENT,
        check_images,
    ),
    CheckRule(
        "links", "Internal links (2+)", 5, CheckCategory.STRUCTURE,
        check_links,
    ),
    CheckRule(
        "title-length", "Title length (30-60 chars)", 10, CheckCategory.METADATA,
        check_title_length,
    ),
    CheckRule(
        "meta-description", "Meta description (120-160 chars)", 10,
        CheckCategory.METADATA, check_meta_description,
    ),
    CheckRule(
        "slug", "URL slug present", 5, CheckCategory.METADATA,
        check_slug,
    ),
    CheckRule(
        "meta-keywords", "Target keywords defined", 10, CheckCategory.METADATA,
        check_meta_keywords,
    ),
    CheckRule(
        "title-keyword", "Title contains keyword", 8, CheckCategory.METADATA,
        check_title_keyword,
    ),
    CheckRule(
        "content-keyword", "Content uses keywords naturally", 7,
        CheckCategory.CONTENT, check_content_keyword,
    ),
    CheckRule(
        "paragraph-length", "Short, readable paragraphs", 10,
        CheckCategory.READABILITY, check_paragraph_length,
    ),
)


@dataclass(frozen=True)
class ScoringRules:
    """Immutable scoring configuration.

    Raises:
        ScoringRulesError: If check weights are not positive, check ids are
            duplicated, or weights do not sum to ``total_weight``
    """

    min_word_count: int = DEFAULT_MIN_WORD_COUNT
    title_length: tuple[int, int] = DEFAULT_TITLE_LENGTH
    meta_description_length: tuple[int, int] = DEFAULT_META_DESCRIPTION_LENGTH
    min_links: int = DEFAULT_MIN_LINKS
    min_meta_keywords: int = DEFAULT_MIN_META_KEYWORDS
    min_content_keyword_length: int = DEFAULT_MIN_CONTENT_KEYWORD_LENGTH
    content_keyword_occurrences: tuple[int, int] = DEFAULT_CONTENT_KEYWORD_OCCURRENCES
    max_avg_paragraph_words: int = DEFAULT_MAX_AVG_PARAGRAPH_WORDS
    level_thresholds: tuple[tuple[int, ScoreLevel], ...] = DEFAULT_LEVEL_THRESHOLDS
    stop_words: frozenset[str] = STOP_WORDS
    checks: tuple[CheckRule, ...] = DEFAULT_CHECKS
    total_weight: int = TOTAL_WEIGHT

    @property
    def check_ids(self) -> tuple[str, ...]:
        return tuple(rule.id for rule in self.checks)

    def __post_init__(self) -> None:
        ids = self.check_ids

        bad_weights = {rule.id: rule.weight for rule in self.checks if rule.weight <= 0}
        if bad_weights:
            scoring_logger.rules_invalid("non-positive weight", weights=bad_weights)
            raise ScoringRulesError("checks", bad_weights, "weights must be positive")

        if len(set(ids)) != len(ids):
            scoring_logger.rules_invalid("duplicate check id", check_ids=list(ids))
            raise ScoringRulesError("checks", ids, "check ids must be unique")

        weight_sum = sum(rule.weight for rule in self.checks)
        if weight_sum != self.total_weight:
            scoring_logger.rules_invalid(
                "weight sum mismatch",
                weight_sum=weight_sum,
                total_weight=self.total_weight,
            )
            raise ScoringRulesError(
                "total_weight",
                self.total_weight,
                f"check weights sum to {weight_sum}",
            )


DEFAULT_RULES = ScoringRules()


def evaluate_checklist(
    document: SEODocument,
    rules: ScoringRules = DEFAULT_RULES,
) -> list[CheckItem]:
    """Run every check in rule order.

    Args:
        document: Document to evaluate
        rules: Scoring configuration

    Returns:
        One CheckItem per rule, in rule order
    """
    ctx = CheckContext.build(document, rules)
    items: list[CheckItem] = []
    for rule in rules.checks:
        outcome = rule.evaluate(ctx)
        items.append(
            CheckItem(
                id=rule.id,
                label=rule.label,
                passed=outcome.passed,
                weight=rule.weight,
                category=rule.category,
                suggestion=None if outcome.passed else outcome.suggestion,
            )
        )
    return items
