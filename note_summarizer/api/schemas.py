# note_summarizer/api/schemas.py
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from note_summarizer.summarizer.models import ContentReport


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SummarizeRequestModel(BaseModel):
    model_config = ConfigDict(protected_namespaces=(), extra="ignore")

    # type and size checks happen in check_text_input so they map to error codes
    text: Optional[Any] = Field(default=None, description="Text to summarize.")
    length: str = Field(default="medium", description="short, medium or long.")
    engine: Optional[str] = Field(default=None, description="extractive or lead.")

    @field_validator("length", mode="before")
    @classmethod
    def default_length(cls, value: Any) -> Any:
        if value is None:
            return "medium"
        return value


class SummaryMetadataModel(CamelModel):
    timestamp: str
    length: str
    engine: str
    title: str
    sentence_count: int
    target_count: int
    processing_time: int


class SummaryResponseModel(CamelModel):
    summary: str
    original_word_count: int
    summary_word_count: int
    compression_ratio: float
    metadata: SummaryMetadataModel


class ValidateRequestModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    content: Optional[Any] = None


class ValidationMetadataModel(CamelModel):
    sentence_count: int
    avg_words_per_sentence: int


class ValidationResponseModel(CamelModel):
    is_valid: bool
    word_count: int
    character_count: int
    estimated_reading_time: int
    suggestions: List[str] = Field(default_factory=list)
    metadata: ValidationMetadataModel

    @classmethod
    def from_domain(cls, report: ContentReport) -> "ValidationResponseModel":
        return cls(
            is_valid=report.is_valid,
            word_count=report.word_count,
            character_count=report.character_count,
            estimated_reading_time=report.estimated_reading_time,
            suggestions=list(report.suggestions),
            metadata=ValidationMetadataModel(
                sentence_count=report.sentence_count,
                avg_words_per_sentence=report.avg_words_per_sentence,
            ),
        )


class UploadMetadataModel(CamelModel):
    timestamp: str
    encoding: str = "utf-8"


class UploadResponseModel(CamelModel):
    content: str
    filename: str
    word_count: int
    file_size: int
    metadata: UploadMetadataModel
