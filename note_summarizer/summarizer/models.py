from __future__ import annotations

"""Domain models shared across summarization engines."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

FALLBACK_SUMMARY = "Unable to generate summary from the provided text."


@dataclass(frozen=True, slots=True)
class Sentence:
    text: str
    index: int
    score: float = 0.0


@dataclass(frozen=True, slots=True)
class SummaryResult:
    summary: str
    engine: str
    sentences: Tuple[Sentence, ...] = ()
    sentence_count: int = 0
    target_count: int = 0


@dataclass(slots=True)
class SummarizationRequest:
    text: str
    length: str = "medium"
    engine: Optional[str] = None


@dataclass(slots=True)
class ContentReport:
    is_valid: bool
    word_count: int
    character_count: int
    estimated_reading_time: int
    sentence_count: int
    avg_words_per_sentence: int
    suggestions: List[str] = field(default_factory=list)
