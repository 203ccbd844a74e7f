"""Async HTTP client for the summarizer API with a local fallback."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from note_summarizer.config import get_settings
from note_summarizer.summarizer.engines.lead import lead_summary

logger = logging.getLogger(__name__)


class SummarizerClient:
    """
    Talks to a running summarizer service.

    ``summarize`` never fails on transport, server or malformed-response
    errors: it answers with a lead-sentence summary computed locally instead.
    ``upload`` and ``validate`` raise ``httpx.HTTPError`` like any other httpx call.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        settings = get_settings()
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = httpx.Timeout(timeout or settings.client_timeout_seconds)
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self._transport
        )

    async def summarize(self, text: str, length: str = "medium") -> str:
        try:
            async with self._client() as client:
                response = await client.post(
                    "/api/summarize", json={"text": text, "length": length}
                )
                response.raise_for_status()
                return response.json()["summary"]
        except (httpx.HTTPError, ValueError, KeyError) as exc:
            logger.warning(f"Summarization API error, using local fallback: {exc}")
            return lead_summary(text, length)

    async def upload(
        self, filename: str, content: bytes, content_type: str = "text/plain"
    ) -> Dict[str, Any]:
        async with self._client() as client:
            response = await client.post(
                "/api/notes/upload", files={"file": (filename, content, content_type)}
            )
            response.raise_for_status()
            return response.json()

    async def validate(self, content: str) -> Dict[str, Any]:
        async with self._client() as client:
            response = await client.post(
                "/api/notes/validate", json={"content": content}
            )
            response.raise_for_status()
            return response.json()
