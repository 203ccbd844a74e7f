"""Abstract base class for summarization engines."""

from __future__ import annotations

from abc import ABC, abstractmethod

from note_summarizer.config import Settings
from note_summarizer.summarizer.models import SummarizationRequest, SummaryResult


class SummarizationEngine(ABC):
    name: str

    @abstractmethod
    def summarize(
        self, request: SummarizationRequest, settings: Settings
    ) -> SummaryResult:
        """Produce a summary result for the supplied request."""
