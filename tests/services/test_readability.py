"""Tests for readability scoring.

Tests cover:
- readability(): Flesch Reading Ease formula, clamping and zero cases
- flesch_kincaid_grade(): grade level formula and clamping
- readability_assessment() / reading_level_description() label bands
- analyze_readability(): combined metrics
- assess_target_grade(): target range and distance penalty
"""

import pytest

from content_scoring.services.readability import (
    analyze_readability,
    assess_target_grade,
    flesch_kincaid_grade,
    readability,
    readability_assessment,
    reading_level_description,
)

# 5 words, 1 sentence, 8 estimated syllables
SAMPLE_SENTENCE = "The running table is yellow."


class TestReadability:
    """Tests for readability()."""

    def test_formula(self) -> None:
        expected = 206.835 - 1.015 * 5 - 84.6 * (8 / 5)
        assert readability(SAMPLE_SENTENCE) == pytest.approx(expected)

    def test_empty_text_is_zero(self) -> None:
        assert readability("") == 0

    def test_no_sentences_is_zero(self) -> None:
        assert readability("...") == 0

    def test_clamped_to_one_hundred(self) -> None:
        """Very simple text would exceed 100 without clamping."""
        assert readability("The cat sat. The dog ran.") == 100

    def test_clamped_to_zero(self) -> None:
        text = "Internationalization communication organizational responsibilities"
        assert readability(text) == 0

    def test_always_within_bounds(self) -> None:
        for text in ("a", "Hello world.", "Yes! No? Maybe.", "word " * 500):
            assert 0 <= readability(text) <= 100


class TestFleschKincaidGrade:
    """Tests for flesch_kincaid_grade()."""

    def test_formula(self) -> None:
        expected = 0.39 * 5 + 11.8 * (8 / 5) - 15.59
        assert flesch_kincaid_grade(SAMPLE_SENTENCE) == pytest.approx(expected)

    def test_clamped_to_zero(self) -> None:
        assert flesch_kincaid_grade("The cat sat. The dog ran.") == 0

    def test_clamped_to_twenty(self) -> None:
        text = " ".join(["internationalization"] * 60) + "."
        assert flesch_kincaid_grade(text) == 20

    def test_empty_text(self) -> None:
        assert flesch_kincaid_grade("") == 0


class TestLabels:
    """Tests for label bands."""

    @pytest.mark.parametrize(
        "score,label",
        [
            (95, "Very Easy (5th grade)"),
            (80, "Easy (6th grade)"),
            (66.4, "Standard (8-9th grade)"),
            (55, "Fairly Difficult (10-12th grade)"),
            (30, "Difficult (College)"),
            (10, "Very Difficult (Professional)"),
        ],
    )
    def test_readability_assessment(self, score: float, label: str) -> None:
        assert readability_assessment(score) == label

    @pytest.mark.parametrize(
        "grade,label",
        [
            (3, "Elementary School (5th grade or lower)"),
            (5.24, "Middle School (6-8th grade)"),
            (12, "High School (9-12th grade)"),
            (14, "College Level"),
            (18, "Professional/Academic"),
        ],
    )
    def test_reading_level_description(self, grade: float, label: str) -> None:
        assert reading_level_description(grade) == label


class TestAnalyzeReadability:
    """Tests for analyze_readability()."""

    def test_collects_counts(self) -> None:
        result = analyze_readability(SAMPLE_SENTENCE)

        assert result.word_count == 5
        assert result.sentence_count == 1
        assert result.syllable_count == 8
        assert result.avg_sentence_length == 5
        assert result.avg_syllables_per_word == pytest.approx(1.6)
        assert result.flesch_reading_ease == pytest.approx(readability(SAMPLE_SENTENCE))
        assert result.assessment == "Standard (8-9th grade)"
        assert result.reading_level == "Middle School (6-8th grade)"

    def test_empty_text(self) -> None:
        result = analyze_readability("")

        assert result.word_count == 0
        assert result.sentence_count == 0
        assert result.flesch_reading_ease == 0
        assert result.avg_sentence_length == 0
        assert result.avg_syllables_per_word == 0

    def test_to_dict_rounds_values(self) -> None:
        data = analyze_readability(SAMPLE_SENTENCE).to_dict()

        assert data["flesch_reading_ease"] == 66.4
        assert data["flesch_kincaid_grade"] == 5.24
        assert data["avg_syllables_per_word"] == 1.6


class TestAssessTargetGrade:
    """Tests for assess_target_grade()."""

    @pytest.mark.parametrize(
        "grade,met,score",
        [
            (8.0, True, 100),
            (9.0, True, 100),
            (10.0, True, 100),
            (12.0, False, 80),
            (5.0, False, 70),
            (20.0, False, 0),
        ],
    )
    def test_default_range(self, grade: float, met: bool, score: float) -> None:
        result = assess_target_grade(grade)

        assert result.target_grade_met is met
        assert result.score == pytest.approx(score)

    def test_custom_range(self) -> None:
        result = assess_target_grade(5.5, (4.0, 6.0))

        assert result.target_grade_met is True
        assert result.target_grade_min == 4.0
        assert result.target_grade_max == 6.0

    def test_reading_level(self) -> None:
        assert assess_target_grade(9.0).reading_level == reading_level_description(9.0)

    def test_to_dict_rounds_values(self) -> None:
        data = assess_target_grade(10.26).to_dict()

        assert data["grade"] == 10.3
        assert data["score"] == 97.4
