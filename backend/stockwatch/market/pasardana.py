"""Pasardana stock summary client for real IDX market data."""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Mapping
from typing import Any

import requests

from stockwatch.config import DEFAULT_UPSTREAM_URL
from stockwatch.errors import UpstreamError

from .interface import QuoteFetcher
from .models import QuoteBatch, QuoteRecord

logger = logging.getLogger(__name__)

# Upstream field aliases, in lookup order. The feed has changed shape over
# time (StockSummary vs StockSearchResult), so accept both.
CODE_FIELDS = ("Code", "StockCode", "code", "ticker")
LAST_PRICE_FIELDS = ("Last", "Close", "lastPrice")
PREVIOUS_CLOSE_FIELDS = ("PrevClosingPrice", "Previous", "previousClosePrice")
NAME_FIELDS = ("Name", "StockName", "name")
SECTOR_FIELDS = ("SectorName", "sector")

_KNOWN_FIELDS = frozenset(CODE_FIELDS + LAST_PRICE_FIELDS + PREVIOUS_CLOSE_FIELDS + NAME_FIELDS + SECTOR_FIELDS)

REQUEST_HEADERS = {
    "Accept": "application/json, text/plain, */*",
    "Referer": "https://pasardana.id/",
}


def _first(item: Mapping[str, Any], fields: tuple[str, ...]) -> Any:
    for name in fields:
        value = item.get(name)
        if value is not None:
            return value
    return None


def _as_price(value: Any) -> float:
    if isinstance(value, bool):
        raise TypeError("boolean is not a price")
    try:
        price = float(value)
    except OverflowError as e:
        raise ValueError(f"price out of range: {e}") from e
    if not math.isfinite(price):
        raise ValueError(f"non-finite price {value!r}")
    return price


def normalize_record(item: Any) -> QuoteRecord:
    """Turn one upstream summary row into a QuoteRecord.

    Raises ValueError/TypeError if the row has no code or no numeric last price.
    A missing previous close falls back to the last price (zero change).
    """
    if not isinstance(item, Mapping):
        raise TypeError(f"expected an object, got {type(item).__name__}")

    code = _first(item, CODE_FIELDS)
    if not isinstance(code, str) or not code.strip():
        raise ValueError("missing stock code")

    raw_last = _first(item, LAST_PRICE_FIELDS)
    if raw_last is None:
        raise ValueError("missing last price")
    last_price = _as_price(raw_last)

    raw_prev = _first(item, PREVIOUS_CLOSE_FIELDS)
    previous_close = _as_price(raw_prev) if raw_prev is not None else last_price

    name = _first(item, NAME_FIELDS)
    sector = _first(item, SECTOR_FIELDS)
    return QuoteRecord(
        code=code.strip(),
        last_price=last_price,
        previous_close_price=previous_close,
        name=str(name) if name is not None else None,
        sector=str(sector) if sector is not None else None,
        extra={k: v for k, v in item.items() if k not in _KNOWN_FIELDS},
    )


def normalize_payload(payload: Any, fetched_at: float | None = None) -> QuoteBatch:
    """Normalize a decoded upstream body into a QuoteBatch.

    Accepts either a bare list of rows or a ``{"data": [...]}`` envelope.
    Malformed rows are skipped; a malformed envelope raises UpstreamError.
    """
    rows = payload.get("data") if isinstance(payload, Mapping) else payload
    if not isinstance(rows, list):
        raise UpstreamError("Market data provider returned an unexpected response")

    records: list[QuoteRecord] = []
    seen: set[str] = set()
    for item in rows:
        try:
            record = normalize_record(item)
        except (TypeError, ValueError) as e:
            code = item.get("Code", "???") if isinstance(item, Mapping) else "???"
            logger.warning("Skipping quote for %s: %s", code, e)
            continue
        if record.code in seen:
            logger.warning("Skipping duplicate quote for %s", record.code)
            continue
        seen.add(record.code)
        records.append(record)

    if rows and not records:
        raise UpstreamError("Market data provider returned no usable quotes")

    return QuoteBatch.of(records, fetched_at=fetched_at)


class PasardanaQuoteFetcher(QuoteFetcher):
    """QuoteFetcher backed by the pasardana.id stock search endpoint.

    One GET returns the summary of every listed IDX stock (~900 rows), so a
    single call refreshes the whole batch. The endpoint is slow and rate
    sensitive; callers are expected to cache the result.
    """

    def __init__(
        self,
        url: str = DEFAULT_UPSTREAM_URL,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._session = session or requests.Session()

    @property
    def url(self) -> str:
        return self._url

    def fetch(self) -> QuoteBatch:
        started = time.time()
        try:
            response = self._session.get(self._url, headers=REQUEST_HEADERS, timeout=self._timeout)
        except requests.RequestException as e:
            logger.error("Pasardana request failed: %s", e)
            raise UpstreamError() from e

        if not response.ok:
            logger.error("Pasardana returned HTTP %s: %s", response.status_code, response.text[:120])
            raise UpstreamError()

        try:
            payload = response.json()
        except ValueError as e:
            logger.error("Pasardana returned a non-JSON body: %s", e)
            raise UpstreamError("Market data provider returned an unexpected response") from e

        batch = normalize_payload(payload, fetched_at=time.time())
        logger.info("Pasardana fetch: %d quotes in %.2fs", len(batch), time.time() - started)
        return batch
