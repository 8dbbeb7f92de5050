"""Bounding extracted text before it is sent to the model."""

from typing import Optional

from docdigest.config import FILE_LIMITS
from docdigest.models import TruncatedText

TRUNCATION_MARKER = (
    "\n\n…[Content truncated at {max_chars:,} characters. The full text is "
    "stored but only this portion was sent to the AI.]"
)


def truncation_marker(max_chars: int) -> str:
    return TRUNCATION_MARKER.format(max_chars=max_chars)


def truncate(text: str, max_chars: Optional[int] = None) -> TruncatedText:
    """Cap ``text`` at ``max_chars`` code points and flag whether it was cut.

    The cut is made at a raw offset; words and grapheme clusters may be
    split.
    """
    if max_chars is None:
        max_chars = FILE_LIMITS.max_chars_for_ai
    if len(text) <= max_chars:
        return TruncatedText(text=text, truncated=False)
    return TruncatedText(
        text=text[:max_chars] + truncation_marker(max_chars), truncated=True
    )


def truncate_text(text: str, max_chars: Optional[int] = None) -> str:
    """Return ``text`` unchanged, or its first ``max_chars`` characters plus a marker."""
    return truncate(text, max_chars).text
