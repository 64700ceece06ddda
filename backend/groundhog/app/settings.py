"""Application configuration via environment variables."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from shared.dal.leaderboard_store import DEFAULT_LEADERBOARD_KEY, DEFAULT_MAX_ENTRIES
from shared.logging import LogFormat

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class GroundhogSettings(BaseSettings):
    model_config = {"env_prefix": "GROUNDHOG_"}

    data_dir: str = Field(default="backend/data", min_length=1)
    log_dir: str | None = None
    log_format: LogFormat = "console"
    log_level: LogLevel = "INFO"
    leaderboard_key: str = Field(default=DEFAULT_LEADERBOARD_KEY, min_length=1)
    leaderboard_max_entries: int = Field(default=DEFAULT_MAX_ENTRIES, ge=1)

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v: str) -> str:
        return v.lower() if isinstance(v, str) else v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v
