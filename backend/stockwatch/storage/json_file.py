"""JSON-file document store."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from stockwatch.errors import StorageError

from .interface import KeyValueStore, validate_key

logger = logging.getLogger(__name__)


class JsonFileStore(KeyValueStore):
    """Stores each key as ``<root>/<key>.json``.

    Writes go to a temporary file in the same directory and are moved into
    place with ``os.replace``, which is atomic on POSIX and Windows.
    """

    def __init__(self, root: Path | str) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def path_for(self, key: str) -> Path:
        return self._root / f"{validate_key(key)}.json"

    def get(self, key: str) -> Any | None:
        path = self.path_for(key)
        try:
            with path.open("r", encoding="utf-8") as fh:
                return json.load(fh)
        except FileNotFoundError:
            return None
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error("Failed to read %s: %s", path, e)
            raise StorageError() from e

    def put(self, key: str, value: Any) -> None:
        path = self.path_for(key)
        tmp_name = None
        try:
            self._root.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{key}.", suffix=".tmp", dir=self._root)
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(value, fh, indent=2, ensure_ascii=False)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, path)
            tmp_name = None
        except (OSError, TypeError, ValueError) as e:
            logger.error("Failed to write %s: %s", path, e)
            raise StorageError("Could not save data") from e
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    pass

    def delete(self, key: str) -> bool:
        path = self.path_for(key)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.error("Failed to delete %s: %s", path, e)
            raise StorageError("Could not delete data") from e
        return True
