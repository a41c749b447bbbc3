"""Text processing utilities shared by the scoring services."""

from content_scoring.utils.html_text import (
    count_links,
    has_tag,
    normalize,
    split_paragraphs,
)
from content_scoring.utils.lexical import (
    STOP_WORDS,
    count_syllables,
    split_sentences,
    split_words,
    tokenize,
)

__all__ = [
    # Markup
    "count_links",
    "has_tag",
    "normalize",
    "split_paragraphs",
    # Lexical
    "STOP_WORDS",
    "count_syllables",
    "split_sentences",
    "split_words",
    "tokenize",
]
