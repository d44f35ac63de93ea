"""
Centralized configuration for lecture-notes-i18n

Type-safe settings loaded through Pydantic Settings:
- Environment variable binding (prefix NOTES_I18N_) with defaults
- Optional .env file outside containers
- Test-friendly reload
"""

import os
from enum import Enum
from typing import List

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Application environment types"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TEST = "test"


class I18nSettings(BaseSettings):
    """Multilingual notes settings"""

    model_config = SettingsConfigDict(
        env_prefix="NOTES_I18N_",
        env_file=".env" if not os.getenv("DOCKER_CONTAINER") else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment"
    )
    supported_languages: List[str] = Field(
        default_factory=lambda: ["ru", "de", "en"],
        description="Language codes a document may carry versions for"
    )
    default_language: str = Field(
        default="en",
        description="Language picked when detection finds no distinguishing characters"
    )
    envelope_key: str = Field(
        default="i18n",
        min_length=1,
        description="Top-level key wrapping serialized translation data in the notes field"
    )
    script_share_threshold: float = Field(
        default=0.1,
        ge=0.0,
        le=1.0,
        description="Share of distinct-script characters above which that script's language is chosen"
    )
    diacritic_share_threshold: float = Field(
        default=0.01,
        ge=0.0,
        le=1.0,
        description="Share of distinguishing diacritics above which that language is chosen"
    )
    log_level: str = Field(
        default="INFO",
        description="Log level for notes_i18n loggers"
    )

    @field_validator("supported_languages", mode="before")
    @classmethod
    def split_languages(cls, v):
        # env values arrive JSON-decoded; "ru,de,en" is accepted from direct construction
        if isinstance(v, str):
            v = v.split(",")
        return [str(code).strip().lower() for code in v if str(code).strip()]

    @field_validator("default_language", mode="before")
    @classmethod
    def lower_default_language(cls, v):
        return str(v or "en").strip().lower()

    @model_validator(mode="after")
    def check_default_supported(self) -> "I18nSettings":
        if not self.supported_languages:
            raise ValueError("supported_languages must not be empty")
        if self.default_language not in self.supported_languages:
            raise ValueError(
                f"default_language '{self.default_language}' is not in supported_languages"
            )
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production mode"""
        return self.environment == Environment.PRODUCTION

    @property
    def is_test(self) -> bool:
        """Check if running in test mode"""
        return self.environment == Environment.TEST


settings = I18nSettings()


def get_settings() -> I18nSettings:
    """
    Get the global settings instance

    Returns:
        I18nSettings: The global settings instance
    """
    return settings


def reload_settings() -> I18nSettings:
    """
    Reload settings from environment (useful for testing)

    Returns:
        I18nSettings: New settings instance with reloaded values
    """
    global settings
    settings = I18nSettings()
    return settings
