"""Persistent store for the last fetched quote batch."""

from __future__ import annotations

import logging

from stockwatch.errors import StorageError
from stockwatch.storage import KeyValueStore

from .models import QuoteBatch

logger = logging.getLogger(__name__)

CACHE_KEY = "quote_cache"


class QuoteCacheStore:
    """Single shared slot holding the most recent QuoteBatch.

    Writers: QuoteCacheManager after a successful fetch.
    Readers: QuoteCacheManager on every quote request.

    The batch is saved as one document, so replacement is as atomic as the
    underlying store's ``put``.
    """

    def __init__(self, store: KeyValueStore, key: str = CACHE_KEY) -> None:
        self._store = store
        self._key = key

    def load(self) -> QuoteBatch | None:
        """Return the persisted batch, or None if there is no usable one.

        A corrupt or unreadable cache is logged and treated as missing; a broken
        market-data cache must not take the rest of the service down with it.
        """
        try:
            raw = self._store.get(self._key)
        except StorageError as e:
            logger.warning("Quote cache unreadable, ignoring it: %s", e.__cause__ or e)
            return None

        if raw is None:
            return None

        try:
            return QuoteBatch.from_dict(raw)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Quote cache malformed, ignoring it: %s", e)
            return None

    def save(self, batch: QuoteBatch) -> None:
        """Replace the persisted batch. Raises StorageError if the write fails."""
        self._store.put(self._key, batch.to_dict())
        logger.debug("Quote cache saved: %d quotes fetched at %.0f", len(batch), batch.fetched_at)

    def clear(self) -> bool:
        return self._store.delete(self._key)
