"""Data models for market data."""

from __future__ import annotations

import time
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True, slots=True)
class QuoteRecord:
    """Immutable snapshot of a single ticker's latest market data."""

    code: str
    last_price: float
    previous_close_price: float
    name: str | None = None
    sector: str | None = None
    extra: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # Freeze the pass-through fields so a record can't be edited in place
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))

    @property
    def change(self) -> float:
        """Absolute change from the previous close."""
        return round(self.last_price - self.previous_close_price, 4)

    @property
    def change_percent(self) -> float:
        """Percentage change from the previous close."""
        if self.previous_close_price == 0:
            return 0.0
        return round((self.last_price - self.previous_close_price) / self.previous_close_price * 100, 4)

    def to_dict(self) -> dict:
        """Serialize for JSON persistence and API responses."""
        return {
            "code": self.code,
            "name": self.name,
            "sector": self.sector,
            "lastPrice": self.last_price,
            "previousClosePrice": self.previous_close_price,
            "change": self.change,
            "changePercent": self.change_percent,
            "extra": dict(self.extra),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> QuoteRecord:
        """Inverse of to_dict. Raises KeyError/TypeError/ValueError on bad input."""
        code = data["code"]
        if not isinstance(code, str) or not code:
            raise ValueError(f"invalid quote code: {code!r}")
        extra = data.get("extra") or {}
        if not isinstance(extra, Mapping):
            raise TypeError("quote extra must be an object")
        return cls(
            code=code,
            last_price=float(data["lastPrice"]),
            previous_close_price=float(data["previousClosePrice"]),
            name=data.get("name"),
            sector=data.get("sector"),
            extra=extra,
        )


@dataclass(frozen=True, slots=True)
class QuoteBatch:
    """One atomic snapshot of every ticker's latest quote.

    A batch is only ever replaced as a whole; it is never patched per ticker.
    """

    quotes: tuple[QuoteRecord, ...]
    fetched_at: float = field(default_factory=time.time)  # Unix seconds

    def __post_init__(self) -> None:
        object.__setattr__(self, "quotes", tuple(self.quotes))

    @classmethod
    def of(cls, quotes: Iterable[QuoteRecord], fetched_at: float | None = None) -> QuoteBatch:
        if fetched_at is None:
            return cls(quotes=tuple(quotes))
        return cls(quotes=tuple(quotes), fetched_at=fetched_at)

    def by_code(self) -> dict[str, QuoteRecord]:
        """Index by exact ticker code. The first record wins on duplicates."""
        index: dict[str, QuoteRecord] = {}
        for record in self.quotes:
            index.setdefault(record.code, record)
        return index

    def get(self, code: str) -> QuoteRecord | None:
        for record in self.quotes:
            if record.code == code:
                return record
        return None

    def age(self, now: float | None = None) -> float:
        """Seconds elapsed since this batch was fetched."""
        return (time.time() if now is None else now) - self.fetched_at

    def to_dict(self) -> dict:
        return {
            "fetchedAt": self.fetched_at,
            "quotes": [q.to_dict() for q in self.quotes],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> QuoteBatch:
        quotes = data["quotes"]
        if not isinstance(quotes, list):
            raise TypeError("quotes must be a list")
        return cls(
            quotes=tuple(QuoteRecord.from_dict(q) for q in quotes),
            fetched_at=float(data["fetchedAt"]),
        )

    def __len__(self) -> int:
        return len(self.quotes)

    def __contains__(self, code: object) -> bool:
        return any(q.code == code for q in self.quotes)
