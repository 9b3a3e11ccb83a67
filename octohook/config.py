"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_env: Literal["development", "production", "test"] = "development"
    host: str = "0.0.0.0"
    port: int = 8080
    base_url: str | None = None

    # GitHub OAuth
    github_client_id: str = Field(min_length=1)
    github_client_secret: str = Field(min_length=1)

    # Logging
    log_file: str = "activity_log.log"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str | None) -> str | None:
        """Normalize the public base URL; an empty value means unset."""
        if not v:
            return None
        return v.rstrip("/")

    @property
    def effective_base_url(self) -> str:
        """Public base URL, falling back to localhost on the configured port."""
        return self.base_url or f"http://localhost:{self.port}"

    @property
    def redirect_uri(self) -> str:
        """OAuth callback URL registered with GitHub."""
        return f"{self.effective_base_url}/callback"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()  # type: ignore[call-arg]
