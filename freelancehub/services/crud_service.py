"""
Generic CRUD service — the single data dependency of every page.
Wraps a RecordStorePort with uniform, collection-agnostic operations.
"""

from __future__ import annotations

import logging
from typing import Any, Generic, Sequence

from pydantic import ValidationError

from freelancehub.domain.errors import (
    CreationError,
    DeletionError,
    FetchError,
    MissingRecordIdError,
    UpdateError,
)
from freelancehub.domain.models import ModelT, Page, RecordPage
from freelancehub.ports.record_store_port import RecordStorePort

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 50


def _message_of(exc: Exception) -> str | None:
    """The failure's own message, if it carries one."""
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(exc) or None


class BaseCrudService:
    """
    Create/read/update/delete against any named collection.

    Stateless: every call is a fresh round trip to the store. Store
    failures are logged and re-raised as CreationError, FetchError,
    UpdateError or DeletionError, keeping the store's message when it
    has one and falling back to "Failed to <verb> <collection>".
    """

    def __init__(
        self, store: RecordStorePort, default_page_size: int = DEFAULT_PAGE_SIZE
    ) -> None:
        self._store = store
        self._page_size = default_page_size

    async def create(self, collection_id: str, record: dict[str, Any]) -> dict[str, Any]:
        """Insert a record and return it with store-assigned fields."""
        try:
            return await self._store.insert(collection_id, record)
        except Exception as exc:
            logger.error("Error creating %s: %s", collection_id, exc)
            raise CreationError(
                _message_of(exc) or f"Failed to create {collection_id}"
            ) from exc

    async def get_all(
        self,
        collection_id: str,
        include_referenced_fields: Sequence[str] | None = None,
        *,
        skip: int = 0,
        limit: int | None = None,
    ) -> RecordPage:
        """Fetch one page of a collection, optionally embedding references."""
        try:
            query = self._store.query(collection_id)
            if include_referenced_fields:
                query = query.include(*include_referenced_fields)
            query = query.skip(skip).limit(self._page_size if limit is None else limit)
            return await query.find()
        except Exception as exc:
            logger.error("Error fetching %s: %s", collection_id, exc)
            raise FetchError(
                _message_of(exc) or f"Failed to fetch {collection_id}"
            ) from exc

    async def get_by_id(
        self,
        collection_id: str,
        item_id: str,
        include_referenced_fields: Sequence[str] | None = None,
    ) -> dict[str, Any] | None:
        """First record whose `_id` equals `item_id`, or None."""
        try:
            query = self._store.query(collection_id).eq("_id", item_id)
            if include_referenced_fields:
                query = query.include(*include_referenced_fields)
            result = await query.find()
        except Exception as exc:
            logger.error("Error fetching %s by ID: %s", collection_id, exc)
            raise FetchError(
                _message_of(exc) or f"Failed to fetch {collection_id}"
            ) from exc

        return result.items[0] if result.items else None

    async def update(self, collection_id: str, record: dict[str, Any]) -> dict[str, Any]:
        """Write `record` over the stored record with the same `_id`."""
        if not record.get("_id"):
            raise MissingRecordIdError(f"{collection_id} ID is required for update")

        try:
            return await self._store.update(collection_id, record)
        except Exception as exc:
            logger.error("Error updating %s: %s", collection_id, exc)
            raise UpdateError(
                _message_of(exc) or f"Failed to update {collection_id}"
            ) from exc

    async def delete(self, collection_id: str, item_id: str) -> str:
        """Remove a record and return its ID."""
        if not item_id:
            raise MissingRecordIdError(f"{collection_id} ID is required for deletion")

        try:
            return await self._store.remove(collection_id, item_id)
        except Exception as exc:
            logger.error("Error deleting %s: %s", collection_id, exc)
            raise DeletionError(
                _message_of(exc) or f"Failed to delete {collection_id}"
            ) from exc


class CollectionRepository(Generic[ModelT]):
    """BaseCrudService bound to one collection and validated as `model`."""

    def __init__(self, crud: BaseCrudService, collection_id: str, model: type[ModelT]) -> None:
        self._crud = crud
        self.collection_id = collection_id
        self._model = model

    def _validate_page(self, records: list[dict[str, Any]]) -> list[ModelT]:
        """Records that don't fit the model are logged and left out."""
        items: list[ModelT] = []
        for record in records:
            try:
                items.append(self._model.model_validate(record))
            except ValidationError as exc:
                logger.warning(
                    "Skipping %s/%s: does not match %s (%d errors): %s",
                    self.collection_id,
                    record.get("_id"),
                    self._model.__name__,
                    exc.error_count(),
                    exc.errors(include_url=False)[0]["msg"],
                )
        return items

    async def list(
        self,
        include: Sequence[str] | None = None,
        *,
        skip: int = 0,
        limit: int | None = None,
    ) -> Page[ModelT]:
        page = await self._crud.get_all(self.collection_id, include, skip=skip, limit=limit)
        return Page[self._model](
            items=self._validate_page(page.items),
            total_count=page.total_count,
            has_next=page.has_next,
            has_prev=page.has_prev,
        )

    async def all(self, include: Sequence[str] | None = None) -> list[ModelT]:
        """Every valid record in the collection, following pages until exhausted."""
        items: list[ModelT] = []
        skip = 0
        while True:
            page = await self._crud.get_all(self.collection_id, include, skip=skip)
            items.extend(self._validate_page(page.items))
            if not page.has_next or not page.items:
                return items
            skip += len(page.items)

    async def get(self, item_id: str, include: Sequence[str] | None = None) -> ModelT | None:
        record = await self._crud.get_by_id(self.collection_id, item_id, include)
        if record is None:
            return None
        try:
            return self._model.model_validate(record)
        except ValidationError as exc:
            logger.error("Error reading %s/%s: %s", self.collection_id, item_id, exc)
            raise FetchError(
                f"{self.collection_id} record {item_id} does not match {self._model.__name__}"
            ) from exc

    async def add(self, item: ModelT) -> ModelT:
        stored = await self._crud.create(self.collection_id, item.to_record())
        return self._model.model_validate(stored)

    async def save(self, item: ModelT) -> ModelT:
        stored = await self._crud.update(self.collection_id, item.to_record())
        return self._model.model_validate(stored)

    async def remove(self, item_id: str) -> str:
        return await self._crud.delete(self.collection_id, item_id)
