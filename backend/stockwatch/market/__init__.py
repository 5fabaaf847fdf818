"""Market data subsystem for StockWatch.

Public API:
    QuoteRecord          - Immutable per-ticker quote snapshot
    QuoteBatch           - Immutable set of quotes plus its fetch time
    QuoteFetcher         - Abstract interface for data providers
    QuoteCacheStore      - Persistent slot for the last fetched batch
    QuoteCacheManager    - Fresh/stale/fallback decision over fetcher + store
    create_quote_fetcher - Factory that selects pasardana or the simulator
"""

from .cache import QuoteCacheStore
from .factory import create_quote_fetcher
from .interface import QuoteFetcher
from .manager import QuoteCacheManager
from .models import QuoteBatch, QuoteRecord

__all__ = [
    "QuoteRecord",
    "QuoteBatch",
    "QuoteFetcher",
    "QuoteCacheStore",
    "QuoteCacheManager",
    "create_quote_fetcher",
]
