"""Plain-text extraction from rich article markup.

Markup is treated as trusted, engine-authored content, so tags are removed
with regular expressions rather than a full HTML parser. Malformed markup
degrades to best-effort stripping; nothing in this module raises.
"""

import re

_SCRIPT_STYLE_PATTERN = re.compile(
    r"<(script|style)\b[^>]*>.*?</\1\s*>",
    re.IGNORECASE | re.DOTALL,
)
_TAG_PATTERN = re.compile(r"<[^>]+>")
_WHITESPACE_PATTERN = re.compile(r"\s+")
_BLANK_LINE_PATTERN = re.compile(r"\n\s*\n")
_LINK_PATTERN = re.compile(r"<a\s", re.IGNORECASE)


def _strip_scripts(markup: str) -> str:
    return _SCRIPT_STYLE_PATTERN.sub("", markup)


def _collapse(text: str) -> str:
    return _WHITESPACE_PATTERN.sub(" ", text).strip()


def normalize(markup: str | None) -> str:
    """Strip markup into a single line of plain text.

    Script and style blocks are dropped together with their text, every other
    tag is replaced by a space, and whitespace runs collapse to one space.

    Args:
        markup: Rich content markup (may be empty)

    Returns:
        Trimmed plain text, or an empty string for empty input
    """
    if not markup:
        return ""
    text = _strip_scripts(markup)
    text = _TAG_PATTERN.sub(" ", text)
    return _collapse(text)


def split_paragraphs(text: str | None) -> list[str]:
    """Split plain text on blank lines, dropping blank paragraphs.

    Expects already normalized text, so paragraph boundaries come only from
    blank lines that survive normalization.
    """
    if not text:
        return []
    return [p.strip() for p in _BLANK_LINE_PATTERN.split(text) if p.strip()]


def has_tag(markup: str | None, tag: str) -> bool:
    """Check whether markup contains an opening tag starting with ``<tag``.

    Matching is a case-insensitive prefix test, so ``has_tag(html, "h1")``
    is true for ``<h1>`` and ``<H1 class="x">``.
    """
    if not markup:
        return False
    return re.search(rf"<{re.escape(tag)}", markup, re.IGNORECASE) is not None


def count_links(markup: str | None) -> int:
    """Count anchor opening tags (``<a `` followed by attributes)."""
    if not markup:
        return 0
    return len(_LINK_PATTERN.findall(markup))
