"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Slack
    slack_bot_token: str = ""
    slack_user_token: str = ""  # Needs files:write to delete other users' uploads
    slack_signing_secret: str = ""

    # AWS / S3
    aws_access_key_id: str = ""
    aws_secret_access_key: str = ""
    aws_region: str = "ap-northeast-1"
    s3_bucket: str = ""
    s3_endpoint_url: str | None = None
    s3_presign_expiry_seconds: int = 60 * 60 * 24 * 7

    # URL shortener
    url_shortener_url: str = ""
    url_shortener_api_key: str = ""

    # App
    http_timeout_seconds: float = 30.0
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()
