"""Watchlist use cases: stored positions plus live quotes."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from stockwatch.errors import UpstreamError
from stockwatch.market import QuoteBatch, QuoteCacheManager

from .enricher import enrich
from .models import EnrichedPosition, Position
from .sorting import sort_rows, validate_sort
from .store import WatchlistStore

logger = logging.getLogger(__name__)

_EMPTY_BATCH = QuoteBatch(quotes=(), fetched_at=0.0)


@dataclass(frozen=True, slots=True)
class WatchlistView:
    rows: list[EnrichedPosition]
    quotes_fetched_at: float | None

    def to_dict(self) -> dict:
        return {
            "stocks": [row.to_dict() for row in self.rows],
            "quotesFetchedAt": self.quotes_fetched_at,
        }


class WatchlistService:
    """Glue between WatchlistStore, QuoteCacheManager and the enricher.

    Knows nothing about authentication: callers pass an already verified user id.
    """

    def __init__(self, store: WatchlistStore, quotes: QuoteCacheManager) -> None:
        self._store = store
        self._quotes = quotes

    async def view(self, user_id: str, sort: str = "code", order: str = "asc") -> WatchlistView:
        """Enriched, display-sorted watchlist for a user.

        With no market data at all the rows fall back to each position's last
        known price instead of failing the whole page.
        """
        validate_sort(sort, order)
        positions = await asyncio.to_thread(self._store.list, user_id)
        if not positions:
            return WatchlistView(rows=[], quotes_fetched_at=None)

        try:
            batch = await self._quotes.get_quotes()
        except UpstreamError:
            logger.warning("No market data for %s's watchlist, using last known prices", user_id)
            rows = enrich(positions, _EMPTY_BATCH)
            return WatchlistView(rows=sort_rows(rows, sort, order), quotes_fetched_at=None)

        rows = enrich(positions, batch)
        await asyncio.to_thread(self._store.remember_prices, user_id, rows)
        return WatchlistView(rows=sort_rows(rows, sort, order), quotes_fetched_at=batch.fetched_at)

    def positions(self, user_id: str) -> list[Position]:
        return self._store.list(user_id)

    def add(
        self,
        user_id: str,
        code: str,
        buy_price: float,
        stop_loss: float | None = None,
        take_profit: float | None = None,
    ) -> Position:
        position = Position.with_defaults(code, buy_price, stop_loss, take_profit)
        return self._store.add(user_id, position)

    def remove(self, user_id: str, code: str) -> bool:
        return self._store.remove(user_id, code.strip().upper())
