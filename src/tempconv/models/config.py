from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tempconv.models.conversion import ConversionDirection

DEFAULT_HISTORY_CAPACITY = 50


class AppSettings(BaseSettings):
    """Application-wide settings populated from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="TEMPCONV_",
        extra="ignore",
    )

    history_capacity: int = Field(default=DEFAULT_HISTORY_CAPACITY, ge=1)
    default_direction: ConversionDirection = ConversionDirection.F_TO_C
    output_format: Literal["rich", "json", "quiet"] | None = None
