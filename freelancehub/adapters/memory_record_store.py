"""
Concrete implementation of RecordStorePort held in process memory.
Used for local development and tests; data is lost on restart.
"""

from __future__ import annotations

import copy
import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from freelancehub.domain.collections import REFERENCES
from freelancehub.domain.errors import DuplicateRecordError, RecordNotFoundError
from freelancehub.domain.models import RecordPage
from freelancehub.ports.record_store_port import RecordQuery, RecordStorePort

logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class InMemoryRecordQuery(RecordQuery):
    """Filters, paginates and resolves references over a store snapshot."""

    def __init__(self, store: InMemoryRecordStore, collection: str) -> None:
        self._store = store
        self._collection = collection
        self._filters: list[tuple[str, Any]] = []
        self._includes: list[str] = []
        self._skip = 0
        self._limit: int | None = None

    def eq(self, field: str, value: Any) -> InMemoryRecordQuery:
        self._filters.append((field, value))
        return self

    def include(self, *fields: str) -> InMemoryRecordQuery:
        self._includes.extend(fields)
        return self

    def skip(self, count: int) -> InMemoryRecordQuery:
        self._skip = max(count, 0)
        return self

    def limit(self, count: int) -> InMemoryRecordQuery:
        self._limit = count
        return self

    async def find(self) -> RecordPage:
        rows = self._store._rows(self._collection)
        matches = [
            r for r in rows
            if all(r.get(field) == value for field, value in self._filters)
        ]
        total = len(matches)

        end = None if self._limit is None else self._skip + self._limit
        page = [copy.deepcopy(r) for r in matches[self._skip:end]]
        for record in page:
            self._resolve_references(record)

        logger.debug(
            "find %s filters=%s → %d of %d", self._collection, self._filters, len(page), total
        )
        return RecordPage(
            items=page,
            total_count=total,
            has_next=self._skip + len(page) < total,
            has_prev=self._skip > 0,
        )

    def _resolve_references(self, record: dict[str, Any]) -> None:
        targets = self._store.references.get(self._collection, {})
        for field in self._includes:
            target = targets.get(field)
            value = record.get(field)
            if target is None or value is None:
                continue
            if isinstance(value, list):
                record[field] = [self._store._lookup(target, v) or v for v in value]
            else:
                record[field] = self._store._lookup(target, value) or value


class InMemoryRecordStore(RecordStorePort):
    """All records live in a dict of collection → {_id → record}."""

    def __init__(self, references: dict[str, dict[str, str]] | None = None) -> None:
        self._collections: dict[str, dict[str, dict[str, Any]]] = {}
        self.references = REFERENCES if references is None else references

    # ── Helpers ───────────────────────────────────────────────

    def _rows(self, collection: str) -> list[dict[str, Any]]:
        return list(self._collections.get(collection, {}).values())

    def _lookup(self, collection: str, record_id: Any) -> dict[str, Any] | None:
        if not isinstance(record_id, str):
            return None
        found = self._collections.get(collection, {}).get(record_id)
        return copy.deepcopy(found) if found is not None else None

    # ── RecordStorePort ───────────────────────────────────────

    async def insert(self, collection: str, record: dict[str, Any]) -> dict[str, Any]:
        rows = self._collections.setdefault(collection, {})
        stored = copy.deepcopy(record)
        # IDs are always strings; 7 and "7" address the same record
        record_id = str(stored["_id"]) if stored.get("_id") else str(uuid.uuid4())
        if record_id in rows:
            raise DuplicateRecordError(collection, record_id)

        timestamp = _now()
        stored["_id"] = record_id
        stored.setdefault("_createdDate", timestamp)
        stored["_updatedDate"] = timestamp
        rows[record_id] = stored
        logger.debug("insert %s/%s", collection, record_id)
        return copy.deepcopy(stored)

    def query(self, collection: str) -> InMemoryRecordQuery:
        return InMemoryRecordQuery(self, collection)

    async def update(self, collection: str, record: dict[str, Any]) -> dict[str, Any]:
        record_id = str(record.get("_id"))
        rows = self._collections.get(collection, {})
        if record_id not in rows:
            raise RecordNotFoundError(collection, record_id)

        stored = rows[record_id]
        changes = copy.deepcopy(record)
        changes.pop("_createdDate", None)
        changes["_id"] = record_id
        stored.update(changes)
        stored["_updatedDate"] = _now()
        logger.debug("update %s/%s", collection, record_id)
        return copy.deepcopy(stored)

    async def remove(self, collection: str, record_id: str) -> str:
        rows = self._collections.get(collection, {})
        if record_id not in rows:
            raise RecordNotFoundError(collection, record_id)
        del rows[record_id]
        logger.debug("remove %s/%s", collection, record_id)
        return record_id
