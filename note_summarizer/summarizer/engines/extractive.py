"""Extractive summarization engine implementation."""

from __future__ import annotations

import logging
import math
import re
from typing import List, Sequence

from note_summarizer.config import Settings
from note_summarizer.summarizer.engines.base import SummarizationEngine
from note_summarizer.summarizer.models import (
    FALLBACK_SUMMARY,
    Sentence,
    SummarizationRequest,
    SummaryResult,
)
from note_summarizer.summarizer.text import (
    count_words,
    ensure_terminal_punctuation,
    normalize_whitespace,
    split_sentences,
)

logger = logging.getLogger(__name__)


# (fraction of sentences kept, minimum sentences kept)
LENGTH_POLICIES = {
    "short": (0.15, 1),
    "medium": (0.25, 1),
    "long": (0.4, 2),
}

POSITION_BONUS = 2.0
LENGTH_BONUS = 1.0
KEYWORD_BONUS = 1.0
NUMERIC_BONUS = 0.5

LENGTH_BONUS_MIN_WORDS = 8
LENGTH_BONUS_MAX_WORDS = 25

KEYWORD_INDICATORS = (
    "important",
    "significant",
    "key",
    "main",
    "primary",
    "essential",
    "conclusion",
    "result",
    "therefore",
    "however",
    "moreover",
    "furthermore",
    "in summary",
    "to conclude",
    "overall",
    "ultimately",
    "specifically",
)

_DIGIT_RE = re.compile(r"\d", re.ASCII)


def target_sentence_count(sentence_count: int, length: str) -> int:
    """Number of sentences to keep for a preset; unknown presets act as medium."""
    fraction, minimum = LENGTH_POLICIES.get(length, LENGTH_POLICIES["medium"])
    target = max(minimum, math.ceil(sentence_count * fraction))
    return min(target, sentence_count)


def segment(text: str, min_chars: int = 10) -> List[Sentence]:
    """Split normalized text into qualifying sentences numbered from zero."""
    fragments = [
        fragment for fragment in split_sentences(text) if len(fragment) >= min_chars
    ]
    return [
        Sentence(text=fragment, index=index)
        for index, fragment in enumerate(fragments)
    ]


def score_sentence(sentence: Sentence, total: int) -> float:
    score = 0.0

    # first and last share one bonus so a lone sentence is not counted twice
    if sentence.index == 0 or sentence.index == total - 1:
        score += POSITION_BONUS

    word_count = count_words(sentence.text)
    if LENGTH_BONUS_MIN_WORDS <= word_count <= LENGTH_BONUS_MAX_WORDS:
        score += LENGTH_BONUS

    lowered = sentence.text.lower()
    matches = sum(1 for keyword in KEYWORD_INDICATORS if keyword in lowered)
    score += KEYWORD_BONUS * matches

    if _DIGIT_RE.search(sentence.text):
        score += NUMERIC_BONUS

    return score


def score_sentences(sentences: Sequence[Sentence]) -> List[Sentence]:
    total = len(sentences)
    return [
        Sentence(
            text=sentence.text,
            index=sentence.index,
            score=score_sentence(sentence, total),
        )
        for sentence in sentences
    ]


def select_sentences(scored: Sequence[Sentence], length: str) -> List[Sentence]:
    """Pick the top sentences by score (ties by position) in document order."""
    target = target_sentence_count(len(scored), length)
    ranked = sorted(scored, key=lambda sentence: (-sentence.score, sentence.index))
    return sorted(ranked[:target], key=lambda sentence: sentence.index)


def assemble(selected: Sequence[Sentence]) -> str:
    summary = ". ".join(sentence.text for sentence in selected).strip()
    return ensure_terminal_punctuation(summary)


class ExtractiveEngine(SummarizationEngine):
    name = "extractive"

    def summarize(
        self, request: SummarizationRequest, settings: Settings
    ) -> SummaryResult:
        sentences = segment(
            normalize_whitespace(request.text), min_chars=settings.min_sentence_chars
        )
        if not sentences:
            logger.debug("No qualifying sentences; returning fallback summary")
            return SummaryResult(summary=FALLBACK_SUMMARY, engine=self.name)

        selected = select_sentences(score_sentences(sentences), request.length)
        logger.debug(
            f"Selected {len(selected)} of {len(sentences)} sentences "
            f"(length={request.length})"
        )
        return SummaryResult(
            summary=assemble(selected),
            engine=self.name,
            sentences=tuple(selected),
            sentence_count=len(sentences),
            target_count=len(selected),
        )
