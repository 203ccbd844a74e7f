"""Engine registry and dispatch helpers."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from note_summarizer.config import Settings, get_settings
from note_summarizer.summarizer.engines.base import SummarizationEngine
from note_summarizer.summarizer.engines.extractive import ExtractiveEngine
from note_summarizer.summarizer.engines.lead import LeadEngine
from note_summarizer.summarizer.models import SummarizationRequest, SummaryResult

logger = logging.getLogger(__name__)


class EngineRegistry:
    """Simple registry allowing engines to be resolved by name."""

    def __init__(self, default: str = ExtractiveEngine.name) -> None:
        self._engines: Dict[str, SummarizationEngine] = {}
        self.default = default
        self.register(ExtractiveEngine())
        self.register(LeadEngine())

    def register(self, engine: SummarizationEngine) -> None:
        self._engines[engine.name] = engine

    def names(self) -> list[str]:
        return sorted(self._engines)

    def resolve(self, name: Optional[str]) -> SummarizationEngine:
        if name and name in self._engines:
            return self._engines[name]
        if name:
            logger.debug(f"Unknown engine {name!r}; using {self.default!r}")
        return self._engines[self.default]


registry = EngineRegistry()


def summarize(
    request: SummarizationRequest, settings: Settings | None = None
) -> SummaryResult:
    """Route a summarization request to the configured engine."""
    settings = settings or get_settings()
    engine = registry.resolve(request.engine or settings.default_engine)
    try:
        return engine.summarize(request, settings)
    except Exception as exc:
        if not settings.engine_fallback_to_lead or engine.name == LeadEngine.name:
            raise
        logger.warning(f"Engine {engine.name!r} failed, falling back to lead: {exc}")
        return registry.resolve(LeadEngine.name).summarize(request, settings)
