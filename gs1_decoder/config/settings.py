"""
Application settings using Pydantic Settings.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Command-line tool configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GS1_",
        # Prefer local overrides while keeping .env as the default source
        env_file=(".env.local", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "text"

    # Scan input
    gs_placeholder: str = Field(
        "<GS>", description="Printable stand-in replaced with FNC1 (ASCII 29) before decoding"
    )

    # Output
    output_format: Literal["json", "table"] = "json"

    # Label generation
    label_template: str = Field("CUSTOM", description="Default label template key")
    verify_check_digit: bool = Field(False, description="Reject GTINs with a wrong check digit")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
