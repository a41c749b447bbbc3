"""Readability scoring for plain text.

Flesch Reading Ease formula:
    206.835 - 1.015 x (words/sentences) - 84.6 x (syllables/words)

Flesch-Kincaid Grade Level formula:
    0.39 x (words/sentences) + 11.8 x (syllables/words) - 15.59

Word counts use whitespace-delimited tokens and sentence counts use runs of
``.``, ``!`` and ``?``. Syllables are estimated, so both values are
directional only and are not used as a weighted check.
"""

from content_scoring.core.logging import get_logger
from content_scoring.services.seo_document import ReadabilityResult, TargetGradeResult
from content_scoring.utils.lexical import count_syllables, split_sentences, split_words

logger = get_logger(__name__)

READING_EASE_MIN = 0.0
READING_EASE_MAX = 100.0
GRADE_LEVEL_MIN = 0.0
GRADE_LEVEL_MAX = 20.0

# (minimum reading ease, label), checked top-down
READING_EASE_BANDS: tuple[tuple[float, str], ...] = (
    (90, "Very Easy (5th grade)"),
    (80, "Easy (6th grade)"),
    (70, "Fairly Easy (7th grade)"),
    (60, "Standard (8-9th grade)"),
    (50, "Fairly Difficult (10-12th grade)"),
    (30, "Difficult (College)"),
)
READING_EASE_FLOOR_LABEL = "Very Difficult (Professional)"

# (maximum grade, label), checked top-down
GRADE_LEVEL_BANDS: tuple[tuple[float, str], ...] = (
    (5, "Elementary School (5th grade or lower)"),
    (8, "Middle School (6-8th grade)"),
    (12, "High School (9-12th grade)"),
    (16, "College Level"),
)
GRADE_LEVEL_CEILING_LABEL = "Professional/Academic"

DEFAULT_TARGET_GRADE_RANGE = (8.0, 10.0)
# Points lost per grade outside the target range
TARGET_GRADE_PENALTY = 10


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _counts(text: str) -> tuple[int, int, int]:
    words = split_words(text)
    sentences = split_sentences(text)
    syllables = sum(count_syllables(word) for word in words)
    return len(words), len(sentences), syllables


def _reading_ease(words: int, sentences: int, syllables: int) -> float:
    if words == 0 or sentences == 0:
        return 0.0
    score = 206.835 - 1.015 * (words / sentences) - 84.6 * (syllables / words)
    return _clamp(score, READING_EASE_MIN, READING_EASE_MAX)


def _grade_level(words: int, sentences: int, syllables: int) -> float:
    if words == 0 or sentences == 0:
        return 0.0
    grade = 0.39 * (words / sentences) + 11.8 * (syllables / words) - 15.59
    return _clamp(grade, GRADE_LEVEL_MIN, GRADE_LEVEL_MAX)


def readability(text: str) -> float:
    """Compute the Flesch Reading Ease score of plain text.

    Args:
        text: Plain text (markup already stripped)

    Returns:
        Score clamped to [0, 100]; 0 when there are no words or no sentences
    """
    return _reading_ease(*_counts(text or ""))


def flesch_kincaid_grade(text: str) -> float:
    """Compute the Flesch-Kincaid grade level, clamped to [0, 20]."""
    return _grade_level(*_counts(text or ""))


def readability_assessment(score: float) -> str:
    """Describe a Flesch Reading Ease score."""
    for minimum, label in READING_EASE_BANDS:
        if score >= minimum:
            return label
    return READING_EASE_FLOOR_LABEL


def reading_level_description(grade: float) -> str:
    """Describe a Flesch-Kincaid grade level."""
    for maximum, label in GRADE_LEVEL_BANDS:
        if grade <= maximum:
            return label
    return GRADE_LEVEL_CEILING_LABEL


def analyze_readability(text: str) -> ReadabilityResult:
    """Compute all readability metrics for plain text in one pass."""
    word_count, sentence_count, syllable_count = _counts(text or "")
    reading_ease = _reading_ease(word_count, sentence_count, syllable_count)
    grade = _grade_level(word_count, sentence_count, syllable_count)

    result = ReadabilityResult(
        flesch_reading_ease=reading_ease,
        flesch_kincaid_grade=grade,
        word_count=word_count,
        sentence_count=sentence_count,
        syllable_count=syllable_count,
        avg_sentence_length=word_count / sentence_count if sentence_count else 0.0,
        avg_syllables_per_word=syllable_count / word_count if word_count else 0.0,
        assessment=readability_assessment(reading_ease),
        reading_level=reading_level_description(grade),
    )

    logger.debug(
        "Readability computed",
        extra={
            "word_count": word_count,
            "sentence_count": sentence_count,
            "syllable_count": syllable_count,
            "flesch_reading_ease": round(reading_ease, 2),
            "flesch_kincaid_grade": round(grade, 2),
        },
    )

    return result


def assess_target_grade(
    grade: float,
    target_range: tuple[float, float] = DEFAULT_TARGET_GRADE_RANGE,
) -> TargetGradeResult:
    """Compare a grade level with a target range.

    Inside the range scores 100; outside it, 10 points are lost per grade of
    distance to the nearer bound, down to 0.
    """
    target_min, target_max = target_range
    met = target_min <= grade <= target_max
    if met:
        score = 100.0
    else:
        distance = min(abs(grade - target_min), abs(grade - target_max))
        score = max(0.0, 100 - distance * TARGET_GRADE_PENALTY)

    return TargetGradeResult(
        grade=grade,
        target_grade_min=target_min,
        target_grade_max=target_max,
        target_grade_met=met,
        score=score,
        reading_level=reading_level_description(grade),
    )
