"""
Name: Application Configuration (Settings)

Responsibilities:
  - Centralized, typed configuration using pydantic-settings
  - Validate environment variables at startup
  - Provide defaults that match the extraction heuristics

Collaborators:
  - container.py: reads settings for parser options, segmenter limits, storage
  - crosscutting/logger.py: reads log level and format
  - cli.py: reads storage_root as default for local storage

Constraints:
  - Lives in the crosscutting layer, NOT in domain/application
  - No business logic - pure configuration

Notes:
  - Uses pydantic-settings for env parsing and validation
  - Singleton via lru_cache
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_env: Application environment (development/test/production)
        log_level: Root log level for the package logger (default: INFO)
        log_json: Emit JSON logs instead of plain text (default: True)
        storage_root: Base directory for the local document storage
        max_snippet_chars: Maximum characters kept per phase (default: 25_000)
        max_phase_name_chars: Maximum heading characters in a phase name (default: 50)
        max_generator_chars: Maximum snippet characters sent to a generator (default: 30_000)
        max_fallback_test_cases: Paragraphs turned into fallback test cases (default: 10)
        pdf_max_pages: Optional page limit for PDF extraction (default: no limit)
        normalize_whitespace: Collapse whitespace in extracted text (default: False)
    """

    # Environment
    app_env: str = "development"

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Storage
    storage_root: str = "."

    # Segmentation limits (defaults match current behavior)
    max_snippet_chars: int = 25_000
    max_phase_name_chars: int = 50

    # Test-case drafting
    max_generator_chars: int = 30_000
    max_fallback_test_cases: int = 10

    # Extraction
    pdf_max_pages: int | None = None
    normalize_whitespace: bool = False

    @field_validator(
        "max_snippet_chars",
        "max_phase_name_chars",
        "max_generator_chars",
        "max_fallback_test_cases",
    )
    @classmethod
    def limits_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("limits must be greater than 0")
        return v

    @field_validator("pdf_max_pages")
    @classmethod
    def pdf_max_pages_must_be_positive(cls, v: int | None) -> int | None:
        if v is not None and v <= 0:
            raise ValueError("pdf_max_pages must be greater than 0 when set")
        return v

    @field_validator("log_level")
    @classmethod
    def log_level_upper(cls, v: str) -> str:
        return (v or "INFO").strip().upper()

    def is_test(self) -> bool:
        return self.app_env.strip().lower() in {"test", "testing", "ci"}

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get singleton Settings instance.

    Raises:
        ValidationError: If env vars are invalid
    """
    return Settings()
