"""
Cleaner configuration.

Settings for a cleaning run, loaded from environment variables and an
optional .env file. Command-line flags override them.
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .validator import USER_AGENT

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class CleanerSettings(BaseSettings):
    """
    Cleaning run configuration from environment variables.

    All settings are prefixed with OPML_CLEANER_ in environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="OPML_CLEANER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    input_path: Path = Path("rss-export.opml")
    output_path: Path | None = None  # None writes to stdout
    timeout: float | None = Field(default=None, gt=0)  # None keeps the transport default
    title: str = "feeds"
    user_agent: str = USER_AGENT
    log_level: LogLevel = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value
