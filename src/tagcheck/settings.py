"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MARKER = "notagcheck"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Configuration for the tagcheck command.

    Values are read from ``TAGCHECK_*`` environment variables and from a
    ``.env`` file in the working directory.  Command-line flags take
    precedence over anything set here.
    """

    model_config = SettingsConfigDict(
        env_prefix="TAGCHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"

    # Comment token that introduces an exemption list, e.g. ``// notagcheck:Foo,Bar``
    marker: str = DEFAULT_MARKER

    # Files are checked on a thread pool when > 1
    workers: int = 1

    # Walk subdirectories instead of a single package directory
    recursive: bool = False

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("workers")
    @classmethod
    def _positive_workers(cls, value: int) -> int:
        if value < 1:
            raise ValueError("workers must be at least 1")
        return value
