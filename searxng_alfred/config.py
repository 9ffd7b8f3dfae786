"""Runtime configuration based on workflow environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, AnyHttpUrl, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from searxng_alfred.domain.filters import blank_to_none


class WorkflowSettings(BaseSettings):
    """Settings supplied by the launcher as workflow variables.

    Variable names are shared with the launcher configuration, so there is no
    prefix. ``category`` and ``timeRange`` are set by a previous selection to
    carry an active bang context into the next search.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )

    searxng_url: AnyHttpUrl = Field(
        default="http://localhost:8888",
        description="Base URL of the SearXNG instance, without the /search path.",
    )
    category: str | None = None
    time_range: str | None = Field(
        default=None,
        validation_alias=AliasChoices("timeRange", "time_range"),
    )
    request_timeout_seconds: float = Field(default=5.0, ge=1, le=30)
    suggestion_limit: int = Field(default=8, ge=1, le=50)
    result_limit: int = Field(default=10, ge=0, le=50)
    icon_path: str = "icon.png"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    @field_validator("category", "time_range", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        return blank_to_none(value)

    @property
    def base_url(self) -> str:
        return str(self.searxng_url).rstrip("/")


@lru_cache
def get_settings() -> WorkflowSettings:
    """Return cached settings instance."""

    return WorkflowSettings()


__all__ = ["WorkflowSettings", "get_settings"]
