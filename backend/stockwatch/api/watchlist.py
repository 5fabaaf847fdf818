"""Watchlist endpoints for the logged-in user."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from stockwatch.accounts import SessionManager
from stockwatch.watchlist import WatchlistService, suggest_thresholds

from .deps import current_user_dependency
from .schemas import AddStockRequest


def create_watchlist_router(service: WatchlistService, sessions: SessionManager) -> APIRouter:
    router = APIRouter(prefix="/api/watchlist", tags=["watchlist"])
    current_user_id = current_user_dependency(sessions)

    @router.get("")
    async def list_watchlist(
        sort: str = Query("code", description="code, name, buyPrice, currentPrice, change, changePercent, status"),
        order: str = Query("asc", description="asc or desc"),
        user_id: str = Depends(current_user_id),
    ) -> dict:
        """Positions enriched with the latest quotes and their Stop Loss / Take Profit status."""
        view = await service.view(user_id, sort=sort, order=order)
        return view.to_dict()

    @router.post("", status_code=status.HTTP_201_CREATED)
    def add_stock(body: AddStockRequest, user_id: str = Depends(current_user_id)) -> dict:
        position = service.add(user_id, body.code, body.buyPrice, body.stopLoss, body.takeProfit)
        return {"stock": position.to_dict()}

    @router.delete("/{code}")
    def remove_stock(code: str, user_id: str = Depends(current_user_id)) -> dict:
        return {"removed": service.remove(user_id, code)}

    @router.get("/suggest")
    async def suggest(buyPrice: float = Query(..., gt=0)) -> dict:
        """Default thresholds for a buy price: 10% below and 30% above."""
        stop_loss, take_profit = suggest_thresholds(buyPrice)
        return {"stopLoss": stop_loss, "takeProfit": take_profit}

    return router
