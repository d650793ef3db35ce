"""Configuration settings for the Listing Crawler."""

from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CrawlerConfig(BaseSettings):
    """Crawler configuration settings.

    All settings have sensible defaults and can be overridden via
    environment variables with CRAWLER_ prefix or a .env file.

    Attributes:
        settle_timeout_ms: Upper bound for waiting on a listing page's results.
        settle_poll_interval_ms: Pause between two result-count samples.
        navigation_timeout_ms: Timeout for page loads and new views.
    """

    model_config = SettingsConfigDict(
        env_prefix="CRAWLER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    settle_timeout_ms: Annotated[int, Field(gt=0)] = Field(
        default=10000,
        description="Maximum wait for the result list to stop changing",
    )
    settle_poll_interval_ms: Annotated[int, Field(ge=0)] = Field(
        default=500,
        description="Interval between result-count samples",
    )
    navigation_timeout_ms: Annotated[int, Field(gt=0)] = Field(
        default=30000,
        description="Timeout for navigations and opening result views",
    )


# Singleton instance for easy import
_crawler_config: CrawlerConfig | None = None


def get_crawler_config() -> CrawlerConfig:
    """Get the crawler configuration singleton."""
    global _crawler_config
    if _crawler_config is None:
        _crawler_config = CrawlerConfig()
    return _crawler_config


def reset_crawler_config() -> None:
    """Reset the crawler configuration singleton (useful for testing)."""
    global _crawler_config
    _crawler_config = None
