"""Runtime configuration read from environment variables or a .env file."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from backend.engine.profiles import UnknownProfileError, get_profile

DEFAULT_API_BASE = "http://localhost:8000"


class Settings(BaseSettings):
    """Application settings, overridable through ``INCIDENTROI_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="INCIDENTROI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_profile: str = Field(default="standard", description="Profile used when a request names none")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    api_base: str = Field(default=DEFAULT_API_BASE, description="Backend URL used by the dashboard")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @field_validator("default_profile")
    @classmethod
    def _known_profile(cls, value: str) -> str:
        try:
            get_profile(value)
        except UnknownProfileError as exc:
            raise ValueError(str(exc)) from None
        return value


def load_settings() -> Settings:
    """Build settings from the environment; invalid values raise ``ValidationError``."""
    return Settings()
