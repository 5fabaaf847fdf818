"""Time-windowed quote cache with stale fallback."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable

from stockwatch.errors import StorageError, UpstreamError

from .cache import QuoteCacheStore
from .interface import QuoteFetcher
from .models import QuoteBatch

logger = logging.getLogger(__name__)

DEFAULT_MAX_AGE = 3600.0  # One hour


class QuoteCacheManager:
    """Serves the shared QuoteBatch, refetching lazily when it goes stale.

    Decision per request:
        fresh cache                -> cached batch, no network call
        stale/missing, fetch ok    -> new batch (persisted)
        stale, fetch failed        -> stale batch
        missing, fetch failed      -> UpstreamError

    There is no background refresh. Two requests that both see a stale cache
    may both fetch; the last successful save wins, which is harmless because a
    batch is always replaced whole.
    """

    def __init__(
        self,
        fetcher: QuoteFetcher,
        store: QuoteCacheStore,
        max_age: float = DEFAULT_MAX_AGE,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._fetcher = fetcher
        self._store = store
        self._max_age = max_age
        self._clock = clock

    @property
    def max_age(self) -> float:
        return self._max_age

    def is_fresh(self, batch: QuoteBatch, max_age: float | None = None) -> bool:
        limit = self._max_age if max_age is None else max_age
        age = batch.age(self._clock())
        # A batch stamped in the future (clock moved back, edited file) is stale
        return 0 <= age < limit

    async def get_quotes(self, max_age: float | None = None) -> QuoteBatch:
        """Return the latest usable quote batch. See class docstring."""
        cached = await asyncio.to_thread(self._store.load)
        if cached is not None and self.is_fresh(cached, max_age):
            logger.debug("Quote cache hit (age %.0fs)", cached.age(self._clock()))
            return cached

        if cached is None:
            logger.info("Quote cache empty, fetching")
        else:
            logger.info("Quote cache stale (age %.0fs), refetching", cached.age(self._clock()))

        try:
            # Fetchers are blocking; keep the event loop free for other requests
            batch = await asyncio.to_thread(self._fetcher.fetch)
        except UpstreamError:
            if cached is None:
                logger.error("Quote fetch failed and no cached quotes are available")
                raise
            logger.warning(
                "Quote fetch failed, serving stale cache from %.0fs ago",
                cached.age(self._clock()),
            )
            return cached

        try:
            await asyncio.to_thread(self._store.save, batch)
        except StorageError:
            # The fresh batch is still good for this request
            logger.exception("Failed to persist quote cache")
        return batch

    async def refresh(self) -> QuoteBatch:
        """Force a fetch regardless of cache age (max_age of zero)."""
        return await self.get_quotes(max_age=0)
