"""Join watchlist positions with the latest market quotes."""

from __future__ import annotations

from collections.abc import Iterable

from stockwatch.market.models import QuoteBatch

from .models import EnrichedPosition, Position, PositionStatus


def classify(current_price: float, stop_loss: float, take_profit: float) -> PositionStatus:
    """Status of a price against its thresholds. Stop loss wins over take profit.

    A threshold of zero means "unset" and never triggers.
    """
    if stop_loss > 0 and current_price <= stop_loss:
        return PositionStatus.STOP_LOSS
    if take_profit > 0 and current_price >= take_profit:
        return PositionStatus.TAKE_PROFIT
    return PositionStatus.NORMAL


def enrich_position(position: Position, quotes: dict) -> EnrichedPosition:
    record = quotes.get(position.code)
    if record is None:
        # Newly listed or delisted tickers: keep the last price we saw
        current_price = position.last_price
        change = 0.0
        change_percent = 0.0
        name = None
    else:
        current_price = record.last_price
        change = record.change
        change_percent = record.change_percent
        name = record.name

    return EnrichedPosition(
        position=position,
        current_price=current_price,
        change=change,
        change_percent=change_percent,
        status=classify(current_price, position.stop_loss, position.take_profit),
        name=name,
        quoted=record is not None,
    )


def enrich(positions: Iterable[Position], quotes: QuoteBatch) -> list[EnrichedPosition]:
    """Enrich every position against one quote batch, preserving input order.

    Codes are matched exactly (case-sensitive); a missing quote is not an error.
    """
    index = quotes.by_code()
    return [enrich_position(p, index) for p in positions]
