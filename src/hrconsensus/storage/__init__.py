"""Keyed record stores backing the repositories."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Protocol, runtime_checkable


class StoreError(RuntimeError):
    """Raised when a persisted collection cannot be read."""


@runtime_checkable
class RecordStore(Protocol):
    """Whole-collection persistence contract.

    Every mutation is a read-modify-write of the full collection; there is no
    locking, so two interleaved writers can lose an update.
    """

    def load(self, collection: str) -> list[dict[str, Any]]:
        """Return every record of the collection, empty when it does not exist."""

    def save(self, collection: str, records: list[dict[str, Any]]) -> None:
        """Replace the collection with the given records."""

    def has(self, collection: str) -> bool:
        """Return True once the collection has been written at least once."""


class InMemoryStore:
    """Process-local store holding deep copies of each collection."""

    def __init__(self, initial: dict[str, list[dict[str, Any]]] | None = None) -> None:
        self._collections: dict[str, list[dict[str, Any]]] = copy.deepcopy(initial or {})

    def load(self, collection: str) -> list[dict[str, Any]]:
        return copy.deepcopy(self._collections.get(collection, []))

    def save(self, collection: str, records: list[dict[str, Any]]) -> None:
        self._collections[collection] = copy.deepcopy(records)

    def has(self, collection: str) -> bool:
        return collection in self._collections


class JsonFileStore:
    """Store keeping one pretty-printed JSON array per collection."""

    def __init__(self, base_path: str | Path) -> None:
        self._base_path = Path(base_path)

    def _path(self, collection: str) -> Path:
        return self._base_path / f"{collection}.json"

    def load(self, collection: str) -> list[dict[str, Any]]:
        path = self._path(collection)
        if not path.exists():
            return []
        try:
            with path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except (OSError, json.JSONDecodeError) as exc:
            raise StoreError(f"Cannot read collection {collection!r} from {path}: {exc}") from exc
        if not isinstance(data, list):
            raise StoreError(f"Collection {collection!r} in {path} is not a JSON array")
        return data

    def save(self, collection: str, records: list[dict[str, Any]]) -> None:
        self._base_path.mkdir(parents=True, exist_ok=True)
        self._path(collection).write_text(
            json.dumps(records, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )

    def has(self, collection: str) -> bool:
        return self._path(collection).exists()


__all__ = ["InMemoryStore", "JsonFileStore", "RecordStore", "StoreError"]
