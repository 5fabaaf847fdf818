"""Display ordering for enriched watchlist rows."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from stockwatch.errors import ValidationError

from .models import EnrichedPosition

SORT_KEYS: dict[str, Callable[[EnrichedPosition], Any]] = {
    "code": lambda row: row.code,
    "name": lambda row: (row.name or row.code).lower(),
    "buyPrice": lambda row: row.position.buy_price,
    "currentPrice": lambda row: row.current_price,
    "change": lambda row: row.change,
    "changePercent": lambda row: row.change_percent,
    "status": lambda row: row.status.value,
}

SORT_DIRECTIONS = ("asc", "desc")


def validate_sort(field: str, direction: str) -> None:
    if field not in SORT_KEYS:
        raise ValidationError(f"Cannot sort by {field!r}; choose one of {', '.join(SORT_KEYS)}")
    if direction not in SORT_DIRECTIONS:
        raise ValidationError("Sort order must be 'asc' or 'desc'")


def sort_rows(
    rows: Iterable[EnrichedPosition],
    field: str = "code",
    direction: str = "asc",
) -> list[EnrichedPosition]:
    """Return rows sorted by a display column. Ties keep their input order."""
    validate_sort(field, direction)
    return sorted(rows, key=SORT_KEYS[field], reverse=direction == "desc")
