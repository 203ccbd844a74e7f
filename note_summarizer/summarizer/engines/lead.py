"""Lead-sentence engine used when the extractive engine is unavailable."""

from __future__ import annotations

from typing import List

from note_summarizer.config import Settings
from note_summarizer.summarizer.engines.base import SummarizationEngine
from note_summarizer.summarizer.engines.extractive import target_sentence_count
from note_summarizer.summarizer.models import (
    FALLBACK_SUMMARY,
    Sentence,
    SummarizationRequest,
    SummaryResult,
)
from note_summarizer.summarizer.text import ensure_terminal_punctuation


def _lead_pieces(text: str) -> List[str]:
    return [piece for piece in text.split(". ") if piece.strip()]


def lead_summary(text: str, length: str = "medium") -> str:
    """
    Take the first sentences of ``text`` without scoring.

    Pieces come from a plain ``". "`` split, so no normalization or
    minimum-length filtering is applied.
    """
    return _build_lead_result(text, length).summary


def _build_lead_result(text: str, length: str) -> SummaryResult:
    pieces = _lead_pieces(text)
    if not pieces:
        return SummaryResult(summary=FALLBACK_SUMMARY, engine=LeadEngine.name)

    target = target_sentence_count(len(pieces), length)
    selected = tuple(
        Sentence(text=piece, index=index)
        for index, piece in enumerate(pieces[:target])
    )
    summary = ". ".join(sentence.text for sentence in selected).strip()
    return SummaryResult(
        summary=ensure_terminal_punctuation(summary),
        engine=LeadEngine.name,
        sentences=selected,
        sentence_count=len(pieces),
        target_count=target,
    )


class LeadEngine(SummarizationEngine):
    name = "lead"

    def summarize(
        self, request: SummarizationRequest, settings: Settings
    ) -> SummaryResult:
        return _build_lead_result(request.text, request.length)
