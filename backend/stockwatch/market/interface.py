"""Abstract interface for market data fetchers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .models import QuoteBatch


class QuoteFetcher(ABC):
    """Contract for market data providers.

    A fetcher makes exactly one attempt per ``fetch()`` call. Caching, retry
    and stale fallback belong to QuoteCacheManager, never to the fetcher.

    Usage:
        fetcher = create_quote_fetcher(settings)
        batch = fetcher.fetch()   # blocking; QuoteCacheManager runs it in a thread
    """

    @abstractmethod
    def fetch(self) -> QuoteBatch:
        """Return a fresh batch of quotes for every ticker the provider knows.

        Raises UpstreamError on network failure, non-success HTTP status or a
        payload that cannot be normalized.
        """
