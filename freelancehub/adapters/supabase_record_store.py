"""
Concrete implementation of RecordStorePort using the Supabase Python client.
One table per collection, keyed by an `_id` text column.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any

from supabase import Client

from freelancehub.domain.errors import RecordNotFoundError
from freelancehub.domain.models import RecordPage
from freelancehub.ports.record_store_port import RecordQuery, RecordStorePort

logger = logging.getLogger(__name__)


class SupabaseRecordQuery(RecordQuery):
    """Builds a PostgREST select; executed by `find()`."""

    def __init__(self, client: Client, collection: str) -> None:
        self._client = client
        self._collection = collection
        self._filters: list[tuple[str, Any]] = []
        self._includes: list[str] = []
        self._skip = 0
        self._limit: int | None = None

    def eq(self, field: str, value: Any) -> SupabaseRecordQuery:
        self._filters.append((field, value))
        return self

    def include(self, *fields: str) -> SupabaseRecordQuery:
        self._includes.extend(fields)
        return self

    def skip(self, count: int) -> SupabaseRecordQuery:
        self._skip = max(count, 0)
        return self

    def limit(self, count: int) -> SupabaseRecordQuery:
        self._limit = count
        return self

    def _columns(self) -> str:
        # Embed through the foreign-key column, e.g. "*, freelancer(*)"
        return ", ".join(["*", *(f"{field}(*)" for field in self._includes)])

    async def find(self) -> RecordPage:
        request = self._client.table(self._collection).select(self._columns(), count="exact")
        for field, value in self._filters:
            request = request.eq(field, value)

        if self._limit is not None:
            request = request.range(self._skip, self._skip + self._limit - 1)
        elif self._skip:
            request = request.offset(self._skip)

        result = request.execute()
        items = result.data or []
        total = result.count if result.count is not None else self._skip + len(items)
        return RecordPage(
            items=items,
            total_count=total,
            has_next=self._skip + len(items) < total,
            has_prev=self._skip > 0,
        )


class SupabaseRecordStore(RecordStorePort):
    """All record I/O goes through the Supabase REST client."""

    def __init__(self, client: Client) -> None:
        self._client = client

    async def insert(self, collection: str, record: dict[str, Any]) -> dict[str, Any]:
        data = dict(record)
        data["_id"] = str(data["_id"]) if data.get("_id") else str(uuid.uuid4())
        result = self._client.table(collection).insert(data).execute()
        return result.data[0] if result.data else data

    def query(self, collection: str) -> SupabaseRecordQuery:
        return SupabaseRecordQuery(self._client, collection)

    async def update(self, collection: str, record: dict[str, Any]) -> dict[str, Any]:
        record_id = str(record["_id"])
        changes = {k: v for k, v in record.items() if k != "_id"}
        result = (
            self._client.table(collection)
            .update(changes)
            .eq("_id", record_id)
            .execute()
        )
        # No rows touched means the ID is unknown
        if not result.data:
            raise RecordNotFoundError(collection, record_id)
        return result.data[0]

    async def remove(self, collection: str, record_id: str) -> str:
        result = (
            self._client.table(collection)
            .delete()
            .eq("_id", record_id)
            .execute()
        )
        if not result.data:
            raise RecordNotFoundError(collection, record_id)
        logger.info("Removed %s/%s", collection, record_id)
        return record_id
