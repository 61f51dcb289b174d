"""
Abstract interface for the external record store.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from freelancehub.domain.models import RecordPage


class RecordQuery(ABC):
    """
    Chainable query over a single collection.

    Builder methods return the query itself; nothing touches the store
    until `find()` is awaited.
    """

    @abstractmethod
    def eq(self, field: str, value: Any) -> RecordQuery:
        """Keep only records whose `field` equals `value`."""
        ...

    @abstractmethod
    def include(self, *fields: str) -> RecordQuery:
        """Resolve and embed the records referenced by `fields`."""
        ...

    @abstractmethod
    def skip(self, count: int) -> RecordQuery:
        ...

    @abstractmethod
    def limit(self, count: int) -> RecordQuery:
        ...

    @abstractmethod
    async def find(self) -> RecordPage:
        """Execute the query and return one page of matches."""
        ...


class RecordStorePort(ABC):
    """Port for CRUD against named collections of records."""

    @abstractmethod
    async def insert(
        self, collection: str, record: dict[str, Any]
    ) -> dict[str, Any]:
        """
        Store a new record and return it as stored.

        Args:
            collection: Collection identifier (e.g. 'jobpostings')
            record: Field mapping; `_id` is assigned when absent

        Returns:
            The stored record, including store-assigned fields.
        """
        ...

    @abstractmethod
    def query(self, collection: str) -> RecordQuery:
        """Start a query over `collection`."""
        ...

    @abstractmethod
    async def update(
        self, collection: str, record: dict[str, Any]
    ) -> dict[str, Any]:
        """Apply `record` to the stored record with the same `_id`."""
        ...

    @abstractmethod
    async def remove(self, collection: str, record_id: str) -> str:
        """Delete a record and return its ID."""
        ...
