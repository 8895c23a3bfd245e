"""Text Metrics — word counting for rich-text (HTML) essay content. Pure, no IO."""

import re

_TAG = re.compile(r"<[^>]*>")
_WHITESPACE = re.compile(r"\s+")


def count_words_from_html(html: str | None) -> int:
    """Strip tags, collapse whitespace, count whitespace-separated words."""
    if not html or not isinstance(html, str):
        return 0
    stripped = _WHITESPACE.sub(" ", _TAG.sub(" ", html)).strip()
    return len(stripped.split(" ")) if stripped else 0
