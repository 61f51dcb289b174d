"""
Client metrics endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from freelancehub.dependencies import get_client_metrics_service
from freelancehub.domain.models import ClientMetricsView
from freelancehub.services.client_metrics_service import ClientMetricsService

router = APIRouter(prefix="/metrics", tags=["Metrics"])


@router.get("/clients", response_model=list[ClientMetricsView], response_model_exclude_none=True)
async def search_clients(
    search: str | None = Query(None),
    reliability: str | None = Query(None, description="Inclusive range, e.g. 4-5"),
    fairness: str | None = Query(None, description="Inclusive range, e.g. 3.5-5"),
    svc: ClientMetricsService = Depends(get_client_metrics_service),
):
    try:
        return await svc.search(query=search, reliability=reliability, fairness=fairness)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        )
