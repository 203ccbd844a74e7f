from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Centralized application settings leveraging environment overrides.
    """

    app_name: str = "Note Summarizer"
    environment: str = Field("local", validation_alias="ENVIRONMENT")
    allow_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173"]
    )
    log_level: str = "INFO"

    max_text_chars: int = Field(50_000, ge=1)
    min_sentence_chars: int = Field(10, ge=1)
    default_engine: str = Field("extractive", description="extractive or lead")
    engine_fallback_to_lead: bool = Field(True, description="Fallback on engine failure")

    max_upload_bytes: int = Field(10 * 1024 * 1024, ge=1024)  # 10 MB
    upload_extensions: List[str] = Field(
        default_factory=lambda: [".txt", ".md", ".rtf"]
    )

    validation_min_words: int = Field(10, ge=0)
    validation_max_words: int = Field(10_000, ge=1)
    reading_words_per_minute: int = Field(200, ge=1)

    # Client settings
    api_base_url: str = Field("http://localhost:8000", validation_alias="API_BASE_URL")
    client_timeout_seconds: float = Field(10.0, gt=0)

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
