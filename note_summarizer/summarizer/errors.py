"""Caller-side input errors raised before summarization runs."""

from __future__ import annotations

from typing import Any, Dict, Optional


class TextInputError(ValueError):
    code = "invalid_input"

    def __init__(self, message: str, limit: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.limit = limit

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"error": self.code, "details": self.message}
        if self.limit is not None:
            payload["limit"] = self.limit
        return payload


class InvalidTypeError(TextInputError):
    code = "invalid_type"


class EmptyInputError(TextInputError):
    code = "empty_input"


class TooLongError(TextInputError):
    code = "too_long"
