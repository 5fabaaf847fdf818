"""Per-user watchlist persistence."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from stockwatch.errors import DuplicateCodeError, StorageError, ValidationError
from stockwatch.storage import KeyValueStore

from .models import EnrichedPosition, Position

logger = logging.getLogger(__name__)


def watchlist_key(user_id: str) -> str:
    return f"{user_id}_stocks"


class WatchlistStore:
    """Positions for each user, one document per user.

    Each operation reads the whole list, changes it in memory and writes it
    back. Users never share a document, so there is no cross-user contention.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def list(self, user_id: str) -> list[Position]:
        """All positions for a user in insertion order. Empty if none stored."""
        raw = self._store.get(watchlist_key(user_id))
        if raw is None:
            return []
        if not isinstance(raw, list):
            logger.error("Watchlist for %s is not a list", user_id)
            raise StorageError()
        try:
            return [Position.from_dict(item) for item in raw]
        except (ValidationError, AttributeError) as e:
            logger.error("Watchlist for %s holds an invalid position: %s", user_id, e)
            raise StorageError() from e

    def get(self, user_id: str, code: str) -> Position | None:
        for position in self.list(user_id):
            if position.code == code:
                return position
        return None

    def add(self, user_id: str, position: Position) -> Position:
        """Append a position. Raises DuplicateCodeError if the code is present."""
        positions = self.list(user_id)
        if any(p.code == position.code for p in positions):
            raise DuplicateCodeError(position.code)
        positions.append(position)
        self._save(user_id, positions)
        logger.info("User %s added %s at %.2f", user_id, position.code, position.buy_price)
        return position

    def remove(self, user_id: str, code: str) -> bool:
        """Remove a position by code. Returns False (and writes nothing) if absent."""
        positions = self.list(user_id)
        remaining = [p for p in positions if p.code != code]
        if len(remaining) == len(positions):
            return False
        self._save(user_id, remaining)
        logger.info("User %s removed %s", user_id, code)
        return True

    def remember_prices(self, user_id: str, rows: Iterable[EnrichedPosition]) -> bool:
        """Store each quoted row's current price as its position's last price.

        Only writes when something changed. Returns whether a write happened.
        """
        latest = {row.code: row.current_price for row in rows if row.quoted}
        if not latest:
            return False

        positions = self.list(user_id)
        changed = False
        updated = []
        for position in positions:
            price = latest.get(position.code)
            if price is not None and price != position.last_price:
                position = position.with_last_price(price)
                changed = True
            updated.append(position)

        if changed:
            self._save(user_id, updated)
        return changed

    def clear(self, user_id: str) -> bool:
        return self._store.delete(watchlist_key(user_id))

    def _save(self, user_id: str, positions: list[Position]) -> None:
        self._store.put(watchlist_key(user_id), [p.to_dict() for p in positions])
