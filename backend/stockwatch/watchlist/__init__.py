"""Watchlist subsystem for StockWatch.

Public API:
    Position, EnrichedPosition, PositionStatus - watchlist data models
    suggest_thresholds - default stop-loss/take-profit bands for a buy price
    enrich             - join positions with a QuoteBatch
    sort_rows          - display ordering for enriched rows
    WatchlistStore     - per-user position persistence
    WatchlistService   - store + quote cache + enrichment for the API
"""

from .enricher import classify, enrich
from .models import EnrichedPosition, Position, PositionStatus, suggest_thresholds
from .service import WatchlistService, WatchlistView
from .sorting import sort_rows
from .store import WatchlistStore

__all__ = [
    "Position",
    "EnrichedPosition",
    "PositionStatus",
    "suggest_thresholds",
    "classify",
    "enrich",
    "sort_rows",
    "WatchlistStore",
    "WatchlistService",
    "WatchlistView",
]
