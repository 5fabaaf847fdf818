"""Abstract interface for document stores."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.-]*$")


def validate_key(key: str) -> str:
    """Reject keys that could escape the store's namespace (paths, blanks)."""
    if not isinstance(key, str) or not _KEY_PATTERN.match(key) or ".." in key:
        raise ValueError(f"Invalid storage key: {key!r}")
    return key


class KeyValueStore(ABC):
    """Contract for persisting whole JSON documents by key.

    Callers always read a document, change it in memory and write it back in
    full. Implementations must make ``put`` atomic: a concurrent ``get`` sees
    either the old document or the new one, never a mix.

    Lifecycle:
        store = JsonFileStore(Path("data"))
        store.put("users", [...])
        users = store.get("users")        # None if never written
        store.delete("users")
    """

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Return the decoded document, or None if the key was never written.

        Raises StorageError if the document exists but cannot be read or decoded.
        """

    @abstractmethod
    def put(self, key: str, value: Any) -> None:
        """Replace the document stored under key.

        Raises StorageError if the write fails.
        """

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Remove the document. Returns False if nothing was stored."""
