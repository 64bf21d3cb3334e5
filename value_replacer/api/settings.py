# value_replacer/api/settings.py
"""
value_replacer.api.settings

Purpose:
    Centralized configuration for the FastAPI service, loaded from environment
    variables (and an optional .env file) with pydantic-settings.

Notes:
    - Validation is fail-fast: get_settings() raises pydantic.ValidationError
      at process start, never at request time.
    - Settings are frozen; one instance is built at startup and handed to the
      app (app.state.settings).
    - Env var names are unprefixed (PORT, TARGET_VALUE, ...).

Created:
    2026-10-18
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from value_replacer.shared.transform_adapter import ReplacementDefaults

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    service_name: str = Field(default="value-replacer-api")
    service_version: str = Field(default="0.1.0")

    # Server
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=3000, description="HTTP port")

    # Replacement
    target_value: str = Field(default="dog", description="Exact string to replace")
    replacement_value: str = Field(default="cat", description="String substituted for target_value")
    default_replacement_limit: int = Field(
        default=100,
        description="Replacements allowed per request when ?limit= is absent",
    )
    max_nesting_depth: int = Field(default=50, description="Maximum JSON nesting depth")

    # Limits
    max_body_bytes: int = Field(default=1024 * 1024, description="Maximum request body size (1 MiB)")

    log_level: str = Field(default="INFO", description="DEBUG, INFO, WARNING, ERROR or CRITICAL")

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if v < 1 or v > 65535:
            raise ValueError("PORT must be between 1 and 65535")
        return v

    @field_validator("target_value")
    @classmethod
    def validate_target_value(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("TARGET_VALUE cannot be empty")
        return v

    @field_validator("replacement_value")
    @classmethod
    def validate_replacement_value(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("REPLACEMENT_VALUE cannot be empty")
        return v

    @field_validator("default_replacement_limit")
    @classmethod
    def validate_default_limit(cls, v: int) -> int:
        if v < 0:
            raise ValueError("DEFAULT_REPLACEMENT_LIMIT must be >= 0")
        return v

    @field_validator("max_nesting_depth")
    @classmethod
    def validate_max_depth(cls, v: int) -> int:
        if v < 1:
            raise ValueError("MAX_NESTING_DEPTH must be >= 1")
        return v

    @field_validator("max_body_bytes")
    @classmethod
    def validate_max_body_bytes(cls, v: int) -> int:
        if v < 1:
            raise ValueError("MAX_BODY_BYTES must be >= 1")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of: {', '.join(_LOG_LEVELS)}")
        return level

    def replacement_defaults(self) -> ReplacementDefaults:
        return ReplacementDefaults(
            target_value=self.target_value,
            replacement_value=self.replacement_value,
            default_limit=self.default_replacement_limit,
            max_depth=self.max_nesting_depth,
        )


def get_settings(**overrides) -> Settings:
    """
    Build and validate settings from the environment.
    Keyword overrides take precedence over env vars (used by the CLI and tests).
    """
    return Settings(**overrides)
