"""Data models for watchlist positions."""

from __future__ import annotations

import math
import time
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from stockwatch.errors import ValidationError

STOP_LOSS_RATIO = 0.9  # 10% below the buy price
TAKE_PROFIT_RATIO = 1.3  # 30% above the buy price


class PositionStatus(str, Enum):
    STOP_LOSS = "Stop Loss"
    TAKE_PROFIT = "Take Profit"
    NORMAL = "Normal"


def suggest_thresholds(buy_price: float) -> tuple[float, float]:
    """Default (stop_loss, take_profit) bands for a buy price.

    A convenience for forms and API callers that omit the thresholds; users
    are free to override both.
    """
    if not math.isfinite(buy_price) or buy_price <= 0:
        raise ValidationError("Buy price must be greater than zero")
    return round(buy_price * STOP_LOSS_RATIO, 2), round(buy_price * TAKE_PROFIT_RATIO, 2)


def _number(value: Any, label: str) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"{label} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{label} must be a number") from None
    if not math.isfinite(number):
        raise ValidationError(f"{label} must be a finite number")
    return number


def normalize_code(code: Any) -> str:
    """Ticker codes are stored upper-case without surrounding whitespace."""
    if not isinstance(code, str) or not code.strip():
        raise ValidationError("Stock code is required")
    return code.strip().upper()


@dataclass(frozen=True, slots=True)
class Position:
    """One user's stake in one ticker.

    ``last_price`` is the most recent current price the enricher saw for this
    code; it is what the watchlist shows when the feed has no quote for it.
    """

    code: str
    buy_price: float
    stop_loss: float = 0.0
    take_profit: float = 0.0
    last_price: float = 0.0
    added_at: float = field(default_factory=time.time)  # Unix seconds

    def __post_init__(self) -> None:
        object.__setattr__(self, "code", normalize_code(self.code))
        buy_price = _number(self.buy_price, "Buy price")
        if buy_price <= 0:
            raise ValidationError("Buy price must be greater than zero")
        object.__setattr__(self, "buy_price", buy_price)
        for attr, label in (("stop_loss", "Stop loss"), ("take_profit", "Take profit"), ("last_price", "Last price")):
            value = _number(getattr(self, attr), label)
            if value < 0:
                raise ValidationError(f"{label} cannot be negative")
            object.__setattr__(self, attr, value)

    @classmethod
    def with_defaults(
        cls,
        code: str,
        buy_price: float,
        stop_loss: float | None = None,
        take_profit: float | None = None,
    ) -> Position:
        """Build a position, filling omitted thresholds from suggest_thresholds()."""
        suggested_sl, suggested_tp = suggest_thresholds(_number(buy_price, "Buy price"))
        return cls(
            code=code,
            buy_price=buy_price,
            stop_loss=suggested_sl if stop_loss is None else stop_loss,
            take_profit=suggested_tp if take_profit is None else take_profit,
        )

    def with_last_price(self, price: float) -> Position:
        return replace(self, last_price=price)

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "buyPrice": self.buy_price,
            "stopLoss": self.stop_loss,
            "takeProfit": self.take_profit,
            "currentPrice": self.last_price,
            "addedAt": self.added_at,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Position:
        """Read a stored record. Missing thresholds and prices count as unset (0)."""
        return cls(
            code=data.get("code"),
            buy_price=data.get("buyPrice"),
            stop_loss=data.get("stopLoss") or 0.0,
            take_profit=data.get("takeProfit") or 0.0,
            last_price=data.get("currentPrice") or 0.0,
            added_at=data.get("addedAt") or 0.0,
        )


@dataclass(frozen=True, slots=True)
class EnrichedPosition:
    """A Position joined with market data. Derived on every read, never stored."""

    position: Position
    current_price: float
    change: float
    change_percent: float
    status: PositionStatus
    name: str | None = None
    quoted: bool = True

    @property
    def code(self) -> str:
        return self.position.code

    @property
    def gain_percent(self) -> float:
        """Unrealized gain against the buy price."""
        if self.current_price == 0:
            return 0.0
        return round((self.current_price - self.position.buy_price) / self.position.buy_price * 100, 4)

    def to_dict(self) -> dict:
        return {
            "code": self.position.code,
            "name": self.name or self.position.code,
            "buyPrice": self.position.buy_price,
            "stopLoss": self.position.stop_loss,
            "takeProfit": self.position.take_profit,
            "currentPrice": self.current_price,
            "change": self.change,
            "changePercent": self.change_percent,
            "gainPercent": self.gain_percent,
            "status": self.status.value,
            "quoted": self.quoted,
            "addedAt": self.position.added_at,
        }
