"""
Pytest configuration and shared fixtures.
"""

import asyncio
import time
from typing import Any

import jwt
import pytest
from fastapi.testclient import TestClient

from freelancehub.adapters.memory_record_store import InMemoryRecordStore
from freelancehub.domain.models import RecordPage
from freelancehub.ports.record_store_port import RecordQuery, RecordStorePort
from freelancehub.services.crud_service import BaseCrudService


def run(coro):
    """Drive a coroutine to completion."""
    return asyncio.run(coro)


class RecordingQuery(RecordQuery):
    def __init__(self, store: "RecordingStore", collection: str) -> None:
        self.store = store
        self.collection = collection
        self.filters: list[tuple[str, Any]] = []
        self.includes: list[str] = []
        store.queries.append(self)

    def eq(self, field, value):
        self.filters.append((field, value))
        return self

    def include(self, *fields):
        self.includes.extend(fields)
        return self

    def skip(self, count):
        return self

    def limit(self, count):
        return self

    async def find(self) -> RecordPage:
        self.store.calls.append(("find", self.collection))
        if self.store.error is not None:
            raise self.store.error
        return self.store.page


class RecordingStore(RecordStorePort):
    """Fake store that records every call and can be told to fail."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []
        self.queries: list[RecordingQuery] = []
        self.error: Exception | None = None
        self.page = RecordPage()

    def _call(self, name: str, collection: str) -> None:
        self.calls.append((name, collection))
        if self.error is not None:
            raise self.error

    async def insert(self, collection, record):
        self._call("insert", collection)
        return {"_id": "generated", **record}

    def query(self, collection):
        return RecordingQuery(self, collection)

    async def update(self, collection, record):
        self._call("update", collection)
        return record

    async def remove(self, collection, record_id):
        self._call("remove", collection)
        return record_id


@pytest.fixture
def recording_store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def crud(store) -> BaseCrudService:
    return BaseCrudService(store)


@pytest.fixture
def seeded_store(store) -> InMemoryRecordStore:
    """Store with a small marketplace in it."""
    records = {
        "freelancers": [
            {"_id": "f1", "fullName": "Ada Lovelace", "headline": "Data engineer",
             "skills": "Python, SQL, Airflow", "hourlyRate": 4500, "bio": "Pipelines."},
            {"_id": "f2", "fullName": "Grace Hopper", "headline": "Compiler wizard",
             "skills": "COBOL, Python", "hourlyRate": 9000},
            {"_id": "f3", "fullName": "Linus T", "headline": "Kernel hacker",
             "skills": "C, Git", "hourlyRate": 1500},
        ],
        "jobpostings": [
            {"_id": "j1", "jobTitle": "Logo Design", "jobDescription": "A new brand mark",
             "budgetAmount": 500, "paymentModel": "fixed", "requiredSkills": "Illustrator, Branding"},
            {"_id": "j2", "jobTitle": "ETL pipeline", "jobDescription": "Move data nightly",
             "budgetAmount": 7000, "paymentModel": "hourly", "requiredSkills": "Python, Airflow"},
            {"_id": "j3", "jobTitle": "Mobile app", "jobDescription": "iOS and Android",
             "budgetAmount": 15000, "paymentModel": "Fixed", "requiredSkills": "Swift, Kotlin"},
        ],
        "clientmetrics": [
            {"_id": "c1", "clientName": "Acme Corp", "clientEmail": "ops@acme.test",
             "reliabilityRating": 4.8, "fairnessRating": 4.2},
            {"_id": "c2", "clientName": "Globex", "clientEmail": "hi@globex.test",
             "reliabilityRating": 3.6, "fairnessRating": 2.9},
            {"_id": "c3", "clientName": "Initech", "clientEmail": "tps@initech.test"},
        ],
        "reputationledger": [
            {"_id": "r1", "reviewContent": "Great work", "ratingScore": 5,
             "clientName": "Acme Corp", "jobTitle": "ETL pipeline",
             "reviewDate": "2026-03-01", "freelancer": "f1"},
            {"_id": "r2", "reviewContent": "Solid", "ratingScore": 4,
             "clientName": "Globex", "jobTitle": "Dashboards", "freelancer": "f1"},
            {"_id": "r3", "achievementTitle": "Top Rated", "achievementDescription": "100 jobs",
             "isVerifiedAchievement": True, "achievementDate": "2026-01-15", "freelancer": "f1"},
            {"_id": "r4", "achievementTitle": "Rising Talent", "freelancer": "f2"},
        ],
    }
    for collection, rows in records.items():
        for row in rows:
            run(store.insert(collection, row))
    return store


@pytest.fixture
def client(seeded_store):
    """TestClient wired to the seeded in-memory store."""
    from main import app
    from freelancehub.dependencies import get_record_store

    app.dependency_overrides[get_record_store] = lambda: seeded_store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def member_token() -> str:
    claims = {
        "sub": "member-1",
        "email": "user@example.com",
        "nickname": "Mock User",
        "given_name": "Mock",
        "family_name": "User",
        "exp": int(time.time()) + 3600,
    }
    return jwt.encode(claims, "test-secret", algorithm="HS256")


@pytest.fixture
def auth_headers(member_token) -> dict[str, str]:
    return {"Authorization": f"Bearer {member_token}"}
