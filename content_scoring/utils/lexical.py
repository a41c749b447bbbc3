"""Lexical analysis helpers: tokenizers, sentence splitting and syllables.

Two tokenization paths exist. The density path lower-cases, splits on
whitespace and drops short tokens and stop words. The readability path keeps
every whitespace-delimited token. Punctuation stays attached in both paths.
"""

import re
from collections.abc import Iterable

# Tokens of this length or shorter are ignored on the density path
MIN_TOKEN_LENGTH = 3

# Common English function words excluded from keyword analysis
STOP_WORDS: frozenset[str] = frozenset(
    {
        "a", "an", "the", "and", "or", "but", "in", "on", "at", "to", "for",
        "of", "with", "by", "from", "as", "is", "was", "are", "were", "been",
        "be", "have", "has", "had", "do", "does", "did", "will", "would",
        "could", "should", "may", "might", "must", "shall", "can", "this",
        "that", "these", "those", "i", "you", "he", "she", "it", "we", "they",
        "what", "which", "who", "whom", "when", "where", "why", "how", "all",
        "each", "every", "both", "few", "more", "most", "other", "some", "such",
        "no", "nor", "not", "only", "own", "same", "so", "than", "too", "very",
        "just", "also", "now", "here", "there", "then", "once", "if", "because",
        "until", "while", "about", "into", "through", "during", "before", "after",
        "above", "below", "between", "under", "again", "their", "your", "our",
        "its", "his", "her", "my", "any", "being", "get", "got", "getting",
        "going", "go", "goes", "went", "comes", "came", "make", "makes", "made",
        "take", "takes", "took", "see", "seen", "saw", "know", "knows", "knew",
        "think", "thinks", "thought", "want", "wants", "wanted", "use", "uses",
        "used", "say", "says", "said", "tell", "tells", "told", "ask", "asks",
        "asked", "need", "needs", "needed", "feel", "feels", "felt", "try",
        "tries", "tried", "leave", "leaves", "left", "call", "calls", "called",
    }
)

_SENTENCE_BOUNDARY_PATTERN = re.compile(r"[.!?]+")
_NON_LETTER_PATTERN = re.compile(r"[^a-z]")
_SILENT_ENDING_PATTERN = re.compile(r"(?:[^laeiouy]es|ed|[^laeiouy]e)$")
_LEADING_Y_PATTERN = re.compile(r"^y")
_VOWEL_RUN_PATTERN = re.compile(r"[aeiouy]+")


def split_words(text: str) -> list[str]:
    """Split text on whitespace without any filtering (readability path)."""
    return text.split()


def tokenize(text: str, stop_words: Iterable[str] = STOP_WORDS) -> list[str]:
    """Tokenize text for keyword analysis (density path).

    Args:
        text: Plain text (markup already stripped)
        stop_words: Words to discard after lower-casing

    Returns:
        Lower-cased tokens longer than two characters that are not stop words
    """
    if not text:
        return []
    excluded = frozenset(stop_words)
    return [
        token
        for token in text.lower().split()
        if len(token) >= MIN_TOKEN_LENGTH and token not in excluded
    ]


def split_sentences(text: str) -> list[str]:
    """Split text on runs of sentence terminators, dropping blank segments."""
    if not text:
        return []
    return [s for s in _SENTENCE_BOUNDARY_PATTERN.split(text) if s.strip()]


def count_syllables(word: str) -> int:
    """Estimate the number of syllables in a word.

    This is a heuristic, not a dictionary lookup: strip a silent trailing
    ``e``/``es``/``ed``, drop a leading ``y`` and count vowel groups.
    Always returns at least 1.
    """
    word = _NON_LETTER_PATTERN.sub("", word.lower())
    if len(word) <= 3:
        return 1

    word = _SILENT_ENDING_PATTERN.sub("", word)
    word = _LEADING_Y_PATTERN.sub("", word)
    vowel_groups = _VOWEL_RUN_PATTERN.findall(word)

    return max(1, len(vowel_groups))
