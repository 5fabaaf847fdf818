"""Tests for WatchlistStore."""

import pytest
from fakes import make_batch

from stockwatch.errors import DuplicateCodeError, StorageError
from stockwatch.watchlist.enricher import enrich
from stockwatch.watchlist.models import Position
from stockwatch.watchlist.store import WatchlistStore, watchlist_key


class TestWatchlistStore:
    """Per-user position persistence."""

    def test_list_empty_for_unknown_user(self, memory_store):
        """Test that a user with no document has an empty watchlist."""
        assert WatchlistStore(memory_store).list("nobody") == []

    def test_add_and_list(self, memory_store):
        """Test that added positions are listed in insertion order."""
        store = WatchlistStore(memory_store)
        store.add("u1", Position(code="BBCA", buy_price=9000))
        store.add("u1", Position(code="TLKM", buy_price=3000))
        assert [p.code for p in store.list("u1")] == ["BBCA", "TLKM"]

    def test_duplicate_add_rejected(self, memory_store):
        """Adding the same code twice fails and leaves the list unchanged."""
        store = WatchlistStore(memory_store)
        store.add("u1", Position(code="BBCA", buy_price=9000))

        with pytest.raises(DuplicateCodeError) as exc_info:
            store.add("u1", Position(code="BBCA", buy_price=8000))

        assert exc_info.value.stock_code == "BBCA"
        assert len(store.list("u1")) == 1
        assert store.list("u1")[0].buy_price == 9000.0

    def test_users_are_independent(self, memory_store):
        """The same code may be held by different users."""
        store = WatchlistStore(memory_store)
        store.add("u1", Position(code="BBCA", buy_price=9000))
        store.add("u2", Position(code="BBCA", buy_price=8000))
        assert store.list("u1")[0].buy_price == 9000.0
        assert store.list("u2")[0].buy_price == 8000.0

    def test_remove(self, memory_store):
        """Test removing an existing position."""
        store = WatchlistStore(memory_store)
        store.add("u1", Position(code="BBCA", buy_price=9000))
        store.add("u1", Position(code="TLKM", buy_price=3000))

        assert store.remove("u1", "BBCA") is True
        assert [p.code for p in store.list("u1")] == ["TLKM"]

    def test_remove_missing_returns_false(self, memory_store):
        """Removing an absent code returns False and changes nothing."""
        store = WatchlistStore(memory_store)
        store.add("u1", Position(code="BBCA", buy_price=9000))

        assert store.remove("u1", "NOPE") is False
        assert [p.code for p in store.list("u1")] == ["BBCA"]

    def test_remove_for_unknown_user(self, memory_store):
        """Test removing from a watchlist that was never created."""
        assert WatchlistStore(memory_store).remove("nobody", "BBCA") is False
        assert watchlist_key("nobody") not in memory_store

    def test_get(self, memory_store):
        """Test fetching a single position."""
        store = WatchlistStore(memory_store)
        store.add("u1", Position(code="BBCA", buy_price=9000))
        assert store.get("u1", "BBCA").buy_price == 9000.0
        assert store.get("u1", "TLKM") is None

    def test_remember_prices(self, memory_store):
        """Quoted prices are stored as each position's last known price."""
        store = WatchlistStore(memory_store)
        store.add("u1", Position(code="BBCA", buy_price=9000))
        store.add("u1", Position(code="XYZ1", buy_price=100, last_price=95))
        rows = enrich(store.list("u1"), make_batch(("BBCA", 9250.0, 9200.0)))

        assert store.remember_prices("u1", rows) is True

        saved = {p.code: p for p in store.list("u1")}
        assert saved["BBCA"].last_price == 9250.0
        assert saved["BBCA"].buy_price == 9000.0
        assert saved["XYZ1"].last_price == 95.0

    def test_remember_prices_skips_unchanged(self, memory_store):
        """Test that nothing is written when prices did not move."""
        store = WatchlistStore(memory_store)
        store.add("u1", Position(code="BBCA", buy_price=9000, last_price=9250))
        rows = enrich(store.list("u1"), make_batch(("BBCA", 9250.0, 9200.0)))
        assert store.remember_prices("u1", rows) is False

    def test_document_layout(self, memory_store):
        """Each user's watchlist is a list of position records."""
        store = WatchlistStore(memory_store)
        store.add("u1", Position(code="BBCA", buy_price=9000, stop_loss=8100, take_profit=11700, added_at=1.0))
        assert memory_store.get("u1_stocks") == [
            {
                "code": "BBCA",
                "buyPrice": 9000.0,
                "stopLoss": 8100.0,
                "takeProfit": 11700.0,
                "currentPrice": 0.0,
                "addedAt": 1.0,
            }
        ]

    def test_invalid_document_is_storage_error(self, memory_store):
        """A corrupted watchlist is a storage failure, not an empty list."""
        memory_store.put("u1_stocks", {"code": "BBCA"})
        with pytest.raises(StorageError):
            WatchlistStore(memory_store).list("u1")

    def test_invalid_record_is_storage_error(self, memory_store):
        """Test that a record with a bad buy price is a storage failure."""
        memory_store.put("u1_stocks", [{"code": "BBCA", "buyPrice": -5}])
        with pytest.raises(StorageError):
            WatchlistStore(memory_store).list("u1")

    def test_persists_to_files(self, file_store):
        """Test the store over real JSON files."""
        WatchlistStore(file_store).add("u1", Position(code="BBCA", buy_price=9000))
        assert [p.code for p in WatchlistStore(file_store).list("u1")] == ["BBCA"]
        assert file_store.path_for("u1_stocks").exists()
