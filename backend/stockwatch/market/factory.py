"""Factory for creating quote fetchers."""

from __future__ import annotations

import logging

from stockwatch.config import Settings

from .interface import QuoteFetcher

logger = logging.getLogger(__name__)

QUOTE_SOURCES = ("pasardana", "simulator")


def create_quote_fetcher(settings: Settings) -> QuoteFetcher:
    """Create the quote fetcher selected by STOCKWATCH_QUOTE_SOURCE.

    - "pasardana" (default) -> PasardanaQuoteFetcher (real IDX data)
    - "simulator"           -> SimulatorQuoteFetcher (GBM simulation)
    """
    source = settings.quote_source

    if source == "pasardana":
        from .pasardana import PasardanaQuoteFetcher

        logger.info("Quote source: pasardana (%s)", settings.upstream_url)
        return PasardanaQuoteFetcher(url=settings.upstream_url, timeout=settings.upstream_timeout)
    elif source == "simulator":
        from .simulator import SimulatorQuoteFetcher

        logger.info("Quote source: GBM simulator")
        return SimulatorQuoteFetcher()

    raise ValueError(f"Unknown quote source {source!r}; expected one of {', '.join(QUOTE_SOURCES)}")
