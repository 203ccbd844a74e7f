"""Text helpers shared by the summarization engines and the content validator."""

from __future__ import annotations

import math
import re
from typing import Any, List

from note_summarizer.summarizer.errors import (
    EmptyInputError,
    InvalidTypeError,
    TooLongError,
)

_WHITESPACE_RE = re.compile(r"\s+")
_SENTENCE_BOUNDARY_RE = re.compile(r"[.!?]+")

TITLE_WORD_LIMIT = 8


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to a single space and trim the ends."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def split_sentences(text: str) -> List[str]:
    """
    Split on runs of terminal punctuation (``.``, ``!``, ``?``).

    Delimiters are consumed; fragments are trimmed and blank ones dropped.
    No minimum-length rule is applied here.
    """
    fragments = (fragment.strip() for fragment in _SENTENCE_BOUNDARY_RE.split(text))
    return [fragment for fragment in fragments if fragment]


def count_words(text: str) -> int:
    return len(text.split())


def generate_title(text: str) -> str:
    words = text.split()
    title = " ".join(words[:TITLE_WORD_LIMIT])
    if len(words) > TITLE_WORD_LIMIT:
        title += "..."
    return title


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going up, so 0.125 becomes 0.13 and 2.5 becomes 3."""
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def ensure_terminal_punctuation(text: str) -> str:
    if text.endswith((".", "!", "?")):
        return text
    return f"{text}."


def check_text_input(value: Any, max_chars: int) -> str:
    """Validate caller-supplied text before it reaches an engine."""
    if value is None or not isinstance(value, str):
        raise InvalidTypeError(
            "Text content is required and must be a non-empty string"
        )
    if not value.strip():
        raise EmptyInputError(
            "Text content is required and must be a non-empty string"
        )
    if len(value) > max_chars:
        raise TooLongError(
            f"Text content too long. Maximum {max_chars:,} characters allowed.",
            limit=max_chars,
        )
    return value
