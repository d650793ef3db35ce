"""Configuration settings for the Result Extractor."""

from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ExtractorConfig(BaseSettings):
    """Extractor configuration settings.

    All settings have sensible defaults and can be overridden via
    environment variables with EXTRACTOR_ prefix or a .env file.

    Attributes:
        description_timeout_ms: How long to wait for the description region.
        employer_timeout_ms: How long to wait for the employer region. It is
            usually rendered together with the page, so this wait is shorter.
    """

    model_config = SettingsConfigDict(
        env_prefix="EXTRACTOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    description_timeout_ms: Annotated[int, Field(gt=0)] = Field(
        default=5000,
        description="Timeout for the description region in milliseconds",
    )
    employer_timeout_ms: Annotated[int, Field(gt=0)] = Field(
        default=2000,
        description="Timeout for the employer region in milliseconds",
    )


# Singleton instance for easy import
_extractor_config: ExtractorConfig | None = None


def get_extractor_config() -> ExtractorConfig:
    """Get the extractor configuration singleton."""
    global _extractor_config
    if _extractor_config is None:
        _extractor_config = ExtractorConfig()
    return _extractor_config


def reset_extractor_config() -> None:
    """Reset the extractor configuration singleton (useful for testing)."""
    global _extractor_config
    _extractor_config = None
