"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from flyer_events.models.row import NullCostPolicy


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Gemini
    gemini_api_key: str = ""
    gemini_timeout_ms: int = 60_000
    default_event_year: int | None = None

    # Google Sheets
    google_spreadsheet_id: str = ""
    google_service_account_email: str = ""
    google_private_key: str = ""
    sheet_range: str = "A:J"
    null_cost_policy: NullCostPolicy = NullCostPolicy.UNKNOWN

    # S3
    s3_bucket: str = ""
    region: str = "us-west-1"
    upload_join_timeout: float = 5.0

    # App
    environment: str = "development"
    log_level: str = "INFO"
    port: int = 8080


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()
