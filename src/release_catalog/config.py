"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App settings
    app_name: str = "Release Catalog API"
    debug: bool = False
    secret_key: str  # Required, no default

    # Database
    database_url: str = "sqlite+aiosqlite:///./release_catalog.db"

    # JWT Authentication
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_minutes: int = 30

    # Pagination
    default_per_page: int = 10
    max_per_page: int = 100

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v: str, info) -> str:
        """Validate that secret_key is secure."""
        if not v:
            raise ValueError("SECRET_KEY is required")

        # In production mode, ensure secret key is strong
        debug = info.data.get("debug", False)
        if not debug:
            if len(v) < 32:
                raise ValueError("SECRET_KEY must be at least 32 characters in production mode")
            if v in ("change-me-in-production", "secret", "password", "changeme"):
                raise ValueError("SECRET_KEY must not be a common weak value")

        return v

    @field_validator("default_per_page", "max_per_page")
    @classmethod
    def validate_page_size(cls, v: int) -> int:
        """Validate that page sizes are positive."""
        if v < 1:
            raise ValueError("Page sizes must be at least 1")
        return v

    def validate_runtime_config(self) -> list[str]:
        """Validate runtime configuration and return warnings."""
        warnings = []

        if self.default_per_page > self.max_per_page:
            warnings.append(
                f"DEFAULT_PER_PAGE ({self.default_per_page}) exceeds MAX_PER_PAGE "
                f"({self.max_per_page}) - explicit per_page values will be capped lower "
                "than the default"
            )

        # Warn about debug mode in production
        if self.debug:
            warnings.append("DEBUG mode is enabled - should be disabled in production")

        return warnings


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
