"""Category and time-range modifiers: labels and URL parameters."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

TIME_RANGE_LABELS = {
    "day": "Past day",
    "week": "Past week",
    "month": "Past month",
    "year": "Past year",
}


def blank_to_none(value):
    """Map empty and whitespace-only strings to ``None``; other values pass through."""

    if isinstance(value, str) and not value.strip():
        return None
    return value


class FilterContext(BaseModel):
    """Active category and time-range restriction.

    ``None`` means "no restriction"; blank strings are normalised to ``None``.
    """

    model_config = ConfigDict(frozen=True)

    category: str | None = None
    time_range: str | None = None

    @field_validator("category", "time_range", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        return blank_to_none(value)

    @property
    def is_active(self) -> bool:
        return self.category is not None or self.time_range is not None

    def merged_with(self, fallback: FilterContext | None) -> FilterContext:
        """Fill unset fields from ``fallback``."""

        if fallback is None:
            return self
        return FilterContext(
            category=self.category if self.category is not None else fallback.category,
            time_range=self.time_range if self.time_range is not None else fallback.time_range,
        )


def category_label(category: str) -> str:
    return category[:1].upper() + category[1:]


def time_range_label(time_range: str) -> str:
    return TIME_RANGE_LABELS.get(time_range, time_range)


def format_filter_subtitle(category: str | None, time_range: str | None) -> str | None:
    """Render the active filters as ``"Images · Past month"``.

    Returns ``None`` when no filter is active so callers can pick their own default.
    """

    category, time_range = blank_to_none(category), blank_to_none(time_range)
    parts: list[str] = []
    if category:
        parts.append(category_label(category))
    if time_range:
        parts.append(time_range_label(time_range))
    if not parts:
        return None
    return " · ".join(parts)


def filter_query_params(category: str | None, time_range: str | None) -> list[tuple[str, str]]:
    category, time_range = blank_to_none(category), blank_to_none(time_range)
    params: list[tuple[str, str]] = []
    if category:
        params.append(("categories", category))
    if time_range:
        params.append(("time_range", time_range))
    return params


__all__ = [
    "FilterContext",
    "TIME_RANGE_LABELS",
    "blank_to_none",
    "category_label",
    "filter_query_params",
    "format_filter_subtitle",
    "time_range_label",
]
