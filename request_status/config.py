"""Environment-driven engine configuration."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from request_status.constants import DEFAULT_USERS_NEEDED, STATUS_TIME_FORMAT, VALID_LOG_LEVELS


class Settings(BaseSettings):
    """Engine configuration loaded from environment variables."""

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_json: bool = Field(default=True, alias="LOG_JSON")
    default_users_needed: int = Field(default=DEFAULT_USERS_NEEDED, ge=1, alias="DEFAULT_USERS_NEEDED")
    status_time_format: str = Field(default=STATUS_TIME_FORMAT, min_length=1, alias="STATUS_TIME_FORMAT")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> str:
        """Accept any casing of a stdlib level name."""

        level = str(value).strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(sorted(VALID_LOG_LEVELS))}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
