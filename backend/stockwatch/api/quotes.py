"""Market quote endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Query

from stockwatch.market import QuoteCacheManager


def create_quotes_router(manager: QuoteCacheManager) -> APIRouter:
    router = APIRouter(prefix="/api/quotes", tags=["quotes"])

    @router.get("")
    async def list_quotes(code: str | None = Query(None, max_length=12, description="Code prefix filter")) -> dict:
        """The shared quote batch, served from cache while it is fresh."""
        batch = await manager.get_quotes()
        quotes = batch.quotes
        if code and code.strip():
            prefix = code.strip().upper()
            quotes = tuple(q for q in quotes if q.code.upper().startswith(prefix))
        return {"fetchedAt": batch.fetched_at, "quotes": [q.to_dict() for q in quotes]}

    return router
