"""Request bodies for the HTTP API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class Credentials(BaseModel):
    username: str = Field(..., min_length=1, max_length=64)
    password: str = Field(..., min_length=1, max_length=256)


class AddStockRequest(BaseModel):
    code: str = Field(..., min_length=1, max_length=12, description="IDX ticker code, e.g. BBCA")
    buyPrice: float = Field(..., gt=0)
    stopLoss: Optional[float] = Field(None, ge=0, description="Defaults to 90% of buyPrice")
    takeProfit: Optional[float] = Field(None, ge=0, description="Defaults to 130% of buyPrice")
