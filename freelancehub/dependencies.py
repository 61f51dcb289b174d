"""
Dependency Injection container.

Wires the abstract RecordStorePort → a concrete store. To swap the
backend, change `RECORD_STORE` in the environment; nothing else in the
codebase changes.
"""

from functools import lru_cache

from fastapi import Depends
from supabase import create_client

from freelancehub.adapters.memory_record_store import InMemoryRecordStore
from freelancehub.adapters.supabase_record_store import SupabaseRecordStore
from freelancehub.config import settings
from freelancehub.domain.enums import RecordStoreBackend
from freelancehub.ports.record_store_port import RecordStorePort
from freelancehub.services.client_metrics_service import ClientMetricsService
from freelancehub.services.crud_service import BaseCrudService
from freelancehub.services.freelancer_service import FreelancerService
from freelancehub.services.job_service import JobService
from freelancehub.services.reputation_service import ReputationService


# ── Singletons (cached) ──────────────────────────────────────


@lru_cache(maxsize=1)
def _get_supabase_client():
    if not settings.supabase_url or not settings.supabase_service_role_key:
        raise RuntimeError(
            "RECORD_STORE=supabase requires SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY"
        )
    # Service role key — bypasses RLS for server-side operations
    return create_client(settings.supabase_url, settings.supabase_service_role_key)


@lru_cache(maxsize=1)
def _get_record_store() -> RecordStorePort:
    if settings.record_store == RecordStoreBackend.SUPABASE:
        return SupabaseRecordStore(client=_get_supabase_client())
    return InMemoryRecordStore()


# ── FastAPI Dependencies (return abstract types) ──────────────


def get_record_store() -> RecordStorePort:
    """Inject the configured record store."""
    return _get_record_store()


def get_crud_service(store: RecordStorePort = Depends(get_record_store)) -> BaseCrudService:
    return BaseCrudService(store, default_page_size=settings.default_page_size)


# ── Domain Services ───────────────────────────────────────────


def get_freelancer_service(crud: BaseCrudService = Depends(get_crud_service)) -> FreelancerService:
    return FreelancerService(crud)


def get_job_service(crud: BaseCrudService = Depends(get_crud_service)) -> JobService:
    return JobService(crud)


def get_client_metrics_service(
    crud: BaseCrudService = Depends(get_crud_service),
) -> ClientMetricsService:
    return ClientMetricsService(crud)


def get_reputation_service(crud: BaseCrudService = Depends(get_crud_service)) -> ReputationService:
    return ReputationService(crud)
