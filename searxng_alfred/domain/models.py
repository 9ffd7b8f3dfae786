"""Pydantic models shared across domain/service layers."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_ICON_PATH = "icon.png"


class ItemIcon(BaseModel):
    path: str = DEFAULT_ICON_PATH


class DisplayItem(BaseModel):
    """One row of script filter output."""

    title: str
    subtitle: str
    arg: str
    valid: bool = True
    icon: ItemIcon = ItemIcon()
    autocomplete: str | None = None
    variables: dict[str, str] | None = None
    quicklookurl: str | None = None

    def to_alfred(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class SearchResult(BaseModel):
    model_config = ConfigDict(extra="ignore")

    url: str
    title: str = ""
    content: str = ""
    engine: str | None = None

    @field_validator("title", "content", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value


__all__ = [
    "DEFAULT_ICON_PATH",
    "DisplayItem",
    "ItemIcon",
    "SearchResult",
]
