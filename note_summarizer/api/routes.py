"""HTTP route handlers for the summarization API."""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from pathlib import PurePath
from typing import Any, Dict, Type

import orjson
from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile, status
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from note_summarizer.config import Settings, get_settings
from note_summarizer.summarizer.errors import InvalidTypeError
from note_summarizer.summarizer.models import SummarizationRequest
from note_summarizer.summarizer.service import summarize
from note_summarizer.summarizer.text import (
    check_text_input,
    count_words,
    generate_title,
    round_half_up,
)
from note_summarizer.summarizer.validation import analyze_content

from .schemas import (
    SummarizeRequestModel,
    SummaryMetadataModel,
    SummaryResponseModel,
    UploadMetadataModel,
    UploadResponseModel,
    ValidateRequestModel,
    ValidationResponseModel,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


async def _load_request_model(
    http_request: Request, model_cls: Type[BaseModel], settings: Settings
) -> BaseModel:
    header_length = http_request.headers.get("content-length")
    if header_length:
        try:
            content_length = int(header_length)
        except ValueError:
            content_length = None
        else:
            if content_length > settings.max_upload_bytes:
                raise HTTPException(
                    status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                    detail={
                        "error": "payload_too_large",
                        "limit_bytes": settings.max_upload_bytes,
                    },
                )

    body_bytes = await http_request.body()
    if body_bytes and len(body_bytes) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail={
                "error": "payload_too_large",
                "limit_bytes": settings.max_upload_bytes,
            },
        )

    if not body_bytes:
        data: Dict[str, Any] = {}
    else:
        try:
            data = orjson.loads(body_bytes)
        except orjson.JSONDecodeError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail={"error": "invalid_json", "details": str(exc)},
            ) from exc

    try:
        return model_cls.model_validate(data)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors()) from exc


async def load_summary_request(http_request: Request) -> SummarizeRequestModel:
    settings = get_settings()
    return await _load_request_model(http_request, SummarizeRequestModel, settings)


async def load_validate_request(http_request: Request) -> ValidateRequestModel:
    settings = get_settings()
    return await _load_request_model(http_request, ValidateRequestModel, settings)


def _is_supported_upload(file: UploadFile, settings: Settings) -> bool:
    extension = PurePath(file.filename or "").suffix.lower()
    allowed = {ext.lower() for ext in settings.upload_extensions}
    return extension in allowed or file.content_type == "text/plain"


@router.post("/summarize", response_model=SummaryResponseModel)
async def summarize_text(
    summary_request: SummarizeRequestModel = Depends(load_summary_request),
):
    settings = get_settings()
    text = check_text_input(summary_request.text, settings.max_text_chars)

    start_time = time.perf_counter()
    result = summarize(
        SummarizationRequest(
            text=text,
            length=summary_request.length,
            engine=summary_request.engine or settings.default_engine,
        ),
        settings=settings,
    )
    elapsed_ms = int((time.perf_counter() - start_time) * 1000)

    original_word_count = count_words(text)
    summary_word_count = count_words(result.summary)
    compression_ratio = round_half_up(summary_word_count / original_word_count, 2)
    logger.debug(
        f"Summarized {original_word_count} words to {summary_word_count} "
        f"with {result.engine} in {elapsed_ms}ms"
    )

    return SummaryResponseModel(
        summary=result.summary,
        original_word_count=original_word_count,
        summary_word_count=summary_word_count,
        compression_ratio=compression_ratio,
        metadata=SummaryMetadataModel(
            timestamp=_utc_timestamp(),
            length=summary_request.length,
            engine=result.engine,
            title=generate_title(text),
            sentence_count=result.sentence_count,
            target_count=result.target_count,
            processing_time=elapsed_ms,
        ),
    )


@router.post("/notes/upload", response_model=UploadResponseModel)
async def upload_note(file: UploadFile = File(...)):
    settings = get_settings()
    if not _is_supported_upload(file, settings):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": "unsupported_file_type",
                "details": "Only text files (.txt, .md, .rtf) are supported",
            },
        )

    # one byte past the limit is enough to know the file is too large
    raw = await file.read(settings.max_upload_bytes + 1)
    if len(raw) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail={
                "error": "file_too_large",
                "limit_bytes": settings.max_upload_bytes,
            },
        )

    try:
        content = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "invalid_encoding", "details": "File must be UTF-8 text."},
        ) from exc

    if not content.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": "empty_file",
                "details": "The uploaded file appears to be empty.",
            },
        )

    logger.info(f"Accepted upload {file.filename!r} ({len(raw)} bytes)")
    return UploadResponseModel(
        content=content.strip(),
        filename=file.filename or "",
        word_count=count_words(content),
        file_size=len(raw),
        metadata=UploadMetadataModel(timestamp=_utc_timestamp()),
    )


@router.post("/notes/validate", response_model=ValidationResponseModel)
async def validate_note(
    validate_request: ValidateRequestModel = Depends(load_validate_request),
):
    if not isinstance(validate_request.content, str) or not validate_request.content:
        raise InvalidTypeError("Content is required and must be a string")

    report = analyze_content(validate_request.content, get_settings())
    return ValidationResponseModel.from_domain(report)
