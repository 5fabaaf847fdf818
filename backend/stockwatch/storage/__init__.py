"""Document storage for StockWatch.

Public API:
    KeyValueStore   - Abstract get/put/delete interface over JSON documents
    JsonFileStore   - One JSON file per key, atomically replaced on write
    MemoryStore     - In-process store for tests and ephemeral runs
"""

from .interface import KeyValueStore
from .json_file import JsonFileStore
from .memory import MemoryStore

__all__ = [
    "KeyValueStore",
    "JsonFileStore",
    "MemoryStore",
]
