"""Test doubles shared across the test suite."""

from stockwatch.errors import UpstreamError
from stockwatch.market.interface import QuoteFetcher
from stockwatch.market.models import QuoteBatch, QuoteRecord

NOW = 1_760_000_000.0  # Fixed "current time" for cache age arithmetic


class FakeClock:
    """Manually advanced replacement for time.time."""

    def __init__(self, now: float = NOW) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeFetcher(QuoteFetcher):
    """Returns queued batches (or raises queued errors) and counts calls.

    With nothing queued, every fetch fails with UpstreamError.
    """

    def __init__(self, *results) -> None:
        self.results = list(results)
        self.calls = 0

    def fetch(self) -> QuoteBatch:
        self.calls += 1
        if not self.results:
            raise UpstreamError()
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


def make_batch(*quotes: tuple[str, float, float], fetched_at: float = NOW) -> QuoteBatch:
    """make_batch(("BBCA", 8500, 9200), ...) -> QuoteBatch."""
    return QuoteBatch(
        quotes=tuple(QuoteRecord(code=c, last_price=last, previous_close_price=prev) for c, last, prev in quotes),
        fetched_at=fetched_at,
    )
