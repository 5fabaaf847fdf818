"""Thread-safe in-memory document store."""

from __future__ import annotations

import copy
from threading import Lock
from typing import Any

from .interface import KeyValueStore, validate_key


class MemoryStore(KeyValueStore):
    """Keeps documents in a dict. Values are deep-copied in and out so callers
    can never mutate stored state without a ``put``."""

    def __init__(self) -> None:
        self._docs: dict[str, Any] = {}
        self._lock = Lock()

    def get(self, key: str) -> Any | None:
        validate_key(key)
        with self._lock:
            if key not in self._docs:
                return None
            return copy.deepcopy(self._docs[key])

    def put(self, key: str, value: Any) -> None:
        validate_key(key)
        snapshot = copy.deepcopy(value)
        with self._lock:
            self._docs[key] = snapshot

    def delete(self, key: str) -> bool:
        validate_key(key)
        with self._lock:
            return self._docs.pop(key, None) is not None

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._docs

    def __len__(self) -> int:
        with self._lock:
            return len(self._docs)
