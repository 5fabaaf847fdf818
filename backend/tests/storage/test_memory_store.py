"""Tests for MemoryStore."""

from stockwatch.storage import MemoryStore


class TestMemoryStore:
    """Unit tests for the in-memory store."""

    def test_get_missing_returns_none(self):
        """Test that a never-written key reads as None."""
        assert MemoryStore().get("users") is None

    def test_put_get_delete(self):
        """Test the basic lifecycle."""
        store = MemoryStore()
        store.put("users", [1])
        assert store.get("users") == [1]
        assert "users" in store
        assert len(store) == 1
        assert store.delete("users") is True
        assert store.delete("users") is False

    def test_values_are_copied(self):
        """Mutating a read or written value does not change the stored document."""
        store = MemoryStore()
        doc = [{"code": "BBCA"}]
        store.put("k", doc)
        doc.append({"code": "TLKM"})
        read = store.get("k")
        read[0]["code"] = "XXXX"
        assert store.get("k") == [{"code": "BBCA"}]
