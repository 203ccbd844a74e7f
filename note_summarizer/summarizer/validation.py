"""Advisory content analysis run before a user asks for a summary."""

from __future__ import annotations

import math

from note_summarizer.config import Settings
from note_summarizer.summarizer.models import ContentReport
from note_summarizer.summarizer.text import (
    count_words,
    round_half_up,
    split_sentences,
)

TOO_SHORT = (
    "Content is too short. Please provide at least {min_words} words "
    "for meaningful summarization."
)
TOO_LONG_WORDS = (
    "Content is quite long. Consider breaking it into smaller sections "
    "for better summaries."
)
TOO_LONG_CHARS = "Content exceeds maximum length limit of {max_chars:,} characters."
SINGLE_SENTENCE = (
    "Content appears to be a single sentence. Summaries work better "
    "with multiple sentences."
)


def analyze_content(content: str, settings: Settings) -> ContentReport:
    """
    Count words, characters and sentences and collect suggestions.

    Sentences are counted with the raw punctuation split, without the
    minimum-length rule the extractive engine applies.
    """
    trimmed = content.strip()
    word_count = count_words(trimmed)
    character_count = len(trimmed)
    sentence_count = len(split_sentences(trimmed))

    is_valid = True
    suggestions = []

    if word_count < settings.validation_min_words:
        is_valid = False
        suggestions.append(TOO_SHORT.format(min_words=settings.validation_min_words))

    if word_count > settings.validation_max_words:
        suggestions.append(TOO_LONG_WORDS)

    if character_count > settings.max_text_chars:
        is_valid = False
        suggestions.append(TOO_LONG_CHARS.format(max_chars=settings.max_text_chars))

    if sentence_count < 2:
        suggestions.append(SINGLE_SENTENCE)

    return ContentReport(
        is_valid=is_valid,
        word_count=word_count,
        character_count=character_count,
        estimated_reading_time=math.ceil(
            word_count / settings.reading_words_per_minute
        ),
        sentence_count=sentence_count,
        avg_words_per_sentence=(
            int(round_half_up(word_count / sentence_count))
            if sentence_count
            else 0
        ),
        suggestions=suggestions,
    )
