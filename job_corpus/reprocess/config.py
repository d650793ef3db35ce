"""Configuration settings for batch reprocessing."""

import json
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_NARROWING_VOCABULARY = [
    "aufgabe",
    "anforderung",
    "profil",
    "qualifikation",
    "rolle",
    "bring",
    "voraussetzung",
    "wir erwarten",
    "erwarten wir",
    "tätigkeit",
    "überzeugst",
    "fähigkeit",
]

DEFAULT_WORDLIST_STOPWORDS = [
    "indeed.com",
    "stepstone.de",
    "monster.de",
    "xing.com",
    "titel",
    "arbeitgeber",
    "stellenbörse",
    "zeitstempel",
    "suchbegriff",
    "ort",
]


class ReprocessConfig(BaseSettings):
    """Reprocessing configuration settings.

    All settings can be overridden via environment variables with the
    REPROCESS_ prefix or a .env file. List settings accept a JSON list or a
    comma/newline separated string.

    Attributes:
        narrowing_vocabulary: Lowercase substrings marking a relevant heading.
        max_ascents: How many parents the content search may climb.
        wordlist_stopwords: Tokens removed before a wordlist is built.
    """

    model_config = SettingsConfigDict(
        env_prefix="REPROCESS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        enable_decoding=False,
        extra="ignore",
    )

    narrowing_vocabulary: list[str] = Field(
        default_factory=lambda: list(DEFAULT_NARROWING_VOCABULARY),
        description="Substrings that mark a section heading as relevant",
    )
    max_ascents: Annotated[int, Field(gt=0)] = Field(
        default=5,
        description="Maximum parent steps when locating a heading's content",
    )
    wordlist_stopwords: list[str] = Field(
        default_factory=lambda: list(DEFAULT_WORDLIST_STOPWORDS),
        description="Job board names and metadata labels removed from wordlists",
    )

    @field_validator("narrowing_vocabulary", "wordlist_stopwords", mode="before")
    @classmethod
    def parse_word_list(cls, v: object) -> list[str]:
        """Parse list settings from env-friendly formats."""
        if v is None:
            return []

        if isinstance(v, list):
            return [str(item).strip().lower() for item in v if str(item).strip()]

        raw = str(v).strip()
        if not raw:
            return []

        if raw.startswith("["):
            try:
                parsed = json.loads(raw)
            except json.JSONDecodeError:
                parsed = None
            else:
                if isinstance(parsed, list):
                    return [
                        str(item).strip().lower() for item in parsed if str(item).strip()
                    ]

        parts: list[str] = []
        for chunk in raw.replace("\n", ",").split(","):
            item = chunk.strip().lower()
            if item:
                parts.append(item)
        return parts


# Singleton instance for easy import
_reprocess_config: ReprocessConfig | None = None


def get_reprocess_config() -> ReprocessConfig:
    """Get the reprocess configuration singleton."""
    global _reprocess_config
    if _reprocess_config is None:
        _reprocess_config = ReprocessConfig()
    return _reprocess_config


def reset_reprocess_config() -> None:
    """Reset the reprocess configuration singleton (useful for testing)."""
    global _reprocess_config
    _reprocess_config = None
