from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PKG_DIR = Path(__file__).resolve().parent
ENV_PATH = PKG_DIR / ".env"


class Settings(BaseSettings):
    # App
    host: str = Field("0.0.0.0", validation_alias="HOST")
    port: int = Field(3000, validation_alias="PORT")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")

    # Upstream credentials (each route refuses to run without its own)
    eventbrite_token: str | None = Field(
        default=None, validation_alias="EVENTBRITE_TOKEN"
    )
    google_api_key: str | None = Field(
        default=None, validation_alias="GOOGLE_API_KEY"
    )

    # HTTP client; None waits for the upstream indefinitely
    http_timeout_seconds: float | None = Field(
        default=None, validation_alias="HTTP_TIMEOUT_SECONDS"
    )

    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
