"""GBM-based quote simulator for offline and demo runs."""

from __future__ import annotations

import logging
import math
import time
from threading import Lock

import numpy as np

from .interface import QuoteFetcher
from .models import QuoteBatch, QuoteRecord
from .seed_prices import (
    CORRELATION_GROUPS,
    CROSS_GROUP_CORR,
    DEFAULT_PARAMS,
    INTRA_BANK_CORR,
    INTRA_COMMODITY_CORR,
    INTRA_TECH_CORR,
    SEED_PRICES,
    STOCK_INFO,
    TICK_SIZES,
    TICKER_PARAMS,
)

logger = logging.getLogger(__name__)


def round_to_tick(price: float) -> float:
    """Snap a price to the IDX tick size of its price band (minimum one tick)."""
    for upper, tick in TICK_SIZES:
        if price < upper:
            return max(tick, round(price / tick) * tick)
    return price


class GBMSimulator:
    """Geometric Brownian Motion simulator for correlated IDX prices.

    Math:
        S(t+dt) = S(t) * exp((mu - sigma^2/2) * dt + sigma * sqrt(dt) * Z)

    One step is one trading day (dt = 1/252), so each simulated fetch looks
    like the next session's close against the previous one.
    """

    TRADING_DAYS_PER_YEAR = 252
    DEFAULT_DT = 1.0 / TRADING_DAYS_PER_YEAR

    def __init__(
        self,
        tickers: list[str],
        dt: float = DEFAULT_DT,
        seed: int | None = None,
    ) -> None:
        self._dt = dt
        self._rng = np.random.default_rng(seed)
        self._tickers: list[str] = []
        self._prices: dict[str, float] = {}
        self._params: dict[str, dict[str, float]] = {}
        self._cholesky: np.ndarray | None = None

        for ticker in tickers:
            if ticker in self._prices:
                continue
            self._tickers.append(ticker)
            self._prices[ticker] = SEED_PRICES.get(ticker, float(self._rng.uniform(100.0, 5000.0)))
            self._params[ticker] = TICKER_PARAMS.get(ticker, dict(DEFAULT_PARAMS))
        self._rebuild_cholesky()

    @property
    def tickers(self) -> list[str]:
        return list(self._tickers)

    def get_price(self, ticker: str) -> float | None:
        return self._prices.get(ticker)

    def step(self) -> dict[str, float]:
        """Advance all tickers by one day. Returns {ticker: new_price}."""
        n = len(self._tickers)
        if n == 0:
            return {}

        z = self._rng.standard_normal(n)
        if self._cholesky is not None:
            z = self._cholesky @ z

        result: dict[str, float] = {}
        for i, ticker in enumerate(self._tickers):
            mu = self._params[ticker]["mu"]
            sigma = self._params[ticker]["sigma"]
            drift = (mu - 0.5 * sigma**2) * self._dt
            diffusion = sigma * math.sqrt(self._dt) * z[i]
            self._prices[ticker] = round_to_tick(self._prices[ticker] * math.exp(drift + diffusion))
            result[ticker] = self._prices[ticker]
        return result

    def _rebuild_cholesky(self) -> None:
        n = len(self._tickers)
        if n <= 1:
            self._cholesky = None
            return

        corr = np.eye(n)
        for i in range(n):
            for j in range(i + 1, n):
                rho = self._pairwise_correlation(self._tickers[i], self._tickers[j])
                corr[i, j] = rho
                corr[j, i] = rho
        self._cholesky = np.linalg.cholesky(corr)

    @staticmethod
    def _pairwise_correlation(t1: str, t2: str) -> float:
        if t1 in CORRELATION_GROUPS["banks"] and t2 in CORRELATION_GROUPS["banks"]:
            return INTRA_BANK_CORR
        if t1 in CORRELATION_GROUPS["commodities"] and t2 in CORRELATION_GROUPS["commodities"]:
            return INTRA_COMMODITY_CORR
        if t1 in CORRELATION_GROUPS["tech"] and t2 in CORRELATION_GROUPS["tech"]:
            return INTRA_TECH_CORR
        return CROSS_GROUP_CORR


class SimulatorQuoteFetcher(QuoteFetcher):
    """QuoteFetcher that answers every fetch with one simulated trading day.

    The previous close of each quote is the price returned by the prior
    fetch, so change and change percent behave like the real feed.
    """

    def __init__(self, tickers: list[str] | None = None, seed: int | None = None) -> None:
        self._sim = GBMSimulator(tickers=list(tickers or SEED_PRICES), seed=seed)
        self._lock = Lock()

    def fetch(self) -> QuoteBatch:
        with self._lock:
            previous = {t: self._sim.get_price(t) for t in self._sim.tickers}
            prices = self._sim.step()

        records = []
        for ticker, price in prices.items():
            name, sector = STOCK_INFO.get(ticker, (None, None))
            records.append(
                QuoteRecord(
                    code=ticker,
                    last_price=price,
                    previous_close_price=previous[ticker],
                    name=name,
                    sector=sector,
                    extra={"Source": "simulator"},
                )
            )
        logger.debug("Simulator produced %d quotes", len(records))
        return QuoteBatch.of(records, fetched_at=time.time())
