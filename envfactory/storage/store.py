"""JSON file object store used as the persistence collaborator in tests."""

import json
from pathlib import Path
from typing import Any

import structlog
from pydantic import BaseModel

from envfactory.core.errors import ObjectStoreError


logger = structlog.get_logger(__name__)


class ObjectStore:
    """Collection/key store persisted to a single JSON file.

    The file is read lazily and rewritten on every mutation. Records are plain
    JSON objects; pydantic models are dumped with ``model_dump(mode="json")``.
    """

    def __init__(self, path: Path):
        """Initialize the store.

        Args:
            path: Path to the JSON file backing the store
        """
        self.path = Path(path)
        self._data: dict[str, dict[str, Any]] | None = None

        if get_default_store() is None:
            set_default_store(self)

        logger.debug("object_store_created", path=str(self.path), category="storage")

    def _read(self) -> dict[str, dict[str, Any]]:
        if self._data is not None:
            return self._data

        if not self.path.exists():
            self._data = {}
            return self._data

        try:
            with self.path.open(encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ObjectStoreError(
                f"Failed to parse object store {self.path}: {e}"
            ) from e
        except OSError as e:
            raise ObjectStoreError(
                f"Error reading object store {self.path}: {e}"
            ) from e

        if not isinstance(data, dict):
            raise ObjectStoreError(
                f"Object store {self.path} must contain a JSON object"
            )
        self._data = data
        return self._data

    def _write(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self._data or {}, f, indent=2)
        except OSError as e:
            raise ObjectStoreError(
                f"Error writing object store {self.path}: {e}"
            ) from e

    def save(self, collection: str, key: str, obj: BaseModel | dict[str, Any]) -> None:
        """Insert or replace a record."""
        record = obj.model_dump(mode="json") if isinstance(obj, BaseModel) else obj
        data = self._read()
        data.setdefault(collection, {})[key] = record
        self._write()

    def load(self, collection: str, key: str) -> dict[str, Any] | None:
        """Return the record stored under ``key`` or ``None``."""
        return self._read().get(collection, {}).get(key)

    def all(self, collection: str) -> dict[str, dict[str, Any]]:
        return dict(self._read().get(collection, {}))

    def delete(self, collection: str, key: str) -> bool:
        """Remove a record. Returns False when it did not exist."""
        data = self._read()
        records = data.get(collection, {})
        if key not in records:
            return False
        del records[key]
        self._write()
        return True

    def count(self, collection: str) -> int:
        return len(self._read().get(collection, {}))

    def delete_persistent_store(self) -> None:
        """Drop all records and remove the backing file."""
        self._data = {}
        if self.path.exists():
            try:
                self.path.unlink()
            except OSError as e:
                raise ObjectStoreError(
                    f"Error deleting object store {self.path}: {e}"
                ) from e
        logger.debug(
            "object_store_deleted", path=str(self.path), category="storage"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={str(self.path)!r})"


# Shared instance management
_default_store: ObjectStore | None = None


def get_default_store() -> ObjectStore | None:
    """Return the current default object store, if any."""
    return _default_store


def set_default_store(store: ObjectStore | None) -> None:
    """Replace the default object store. ``None`` clears it."""
    global _default_store
    _default_store = store


def reset_default_store() -> None:
    """Clear the default object store (mainly for testing).

    Persisted data is left alone; ``build_object_store()`` removes it.
    """
    global _default_store

    if _default_store is not None:
        _default_store = None
        logger.debug("default_object_store_cleared", category="lifecycle")
