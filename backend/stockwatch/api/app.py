"""FastAPI application factory: the one place where components are wired."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stockwatch.accounts import AccountService, PasswordHasher, SessionManager
from stockwatch.config import Settings
from stockwatch.market import QuoteCacheManager, QuoteCacheStore, QuoteFetcher, create_quote_fetcher
from stockwatch.storage import JsonFileStore, KeyValueStore
from stockwatch.watchlist import WatchlistService, WatchlistStore

from .auth import create_auth_router
from .errors import install_error_handlers
from .quotes import create_quotes_router
from .watchlist import create_watchlist_router

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    store: KeyValueStore | None = None,
    fetcher: QuoteFetcher | None = None,
) -> FastAPI:
    """Build the API.

    ``store`` and ``fetcher`` default to what ``settings`` selects (JSON files
    under the data directory, pasardana or the simulator); tests pass their own.
    """
    if settings is None:
        settings = Settings.from_env()
    if store is None:
        store = JsonFileStore(settings.data_dir)
    if fetcher is None:
        fetcher = create_quote_fetcher(settings)

    quotes = QuoteCacheManager(fetcher, QuoteCacheStore(store), max_age=settings.quote_max_age)
    accounts = AccountService(store, PasswordHasher(rounds=settings.bcrypt_rounds))
    sessions = SessionManager(ttl=settings.session_ttl)
    watchlist = WatchlistService(WatchlistStore(store), quotes)

    app = FastAPI(title="StockWatch API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_error_handlers(app)

    app.include_router(create_auth_router(accounts, sessions))
    app.include_router(create_watchlist_router(watchlist, sessions))
    app.include_router(create_quotes_router(quotes))

    @app.get("/api/health")
    async def health() -> dict:
        return {"status": "ok"}

    app.state.settings = settings
    app.state.quotes = quotes
    app.state.sessions = sessions
    logger.info("StockWatch API ready (quote max age %.0fs)", settings.quote_max_age)
    return app
