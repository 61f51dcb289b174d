"""
Freelancer directory endpoints.
All logic delegated to FreelancerService.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from freelancehub.dependencies import get_freelancer_service
from freelancehub.domain.models import Freelancer, FreelancerProfileView
from freelancehub.services.freelancer_service import FreelancerService

router = APIRouter(prefix="/freelancers", tags=["Freelancers"])


@router.get("", response_model=list[Freelancer], response_model_exclude_none=True)
async def search_freelancers(
    search: str | None = Query(None),
    skill: str | None = Query(None),
    rate: str | None = Query(None, description="under-2000 | 2000-4000 | 4000-8000 | over-8000"),
    svc: FreelancerService = Depends(get_freelancer_service),
):
    """Directory listing (public)."""
    return await svc.search(query=search, skill=skill, rate_band=rate)


@router.get("/skills", response_model=list[str])
async def list_skills(svc: FreelancerService = Depends(get_freelancer_service)):
    return await svc.unique_skills()


@router.get("/{freelancer_id}", response_model=FreelancerProfileView, response_model_exclude_none=True)
async def get_freelancer_profile(
    freelancer_id: str,
    svc: FreelancerService = Depends(get_freelancer_service),
):
    """Profile plus the most recent reputation ledger entries."""
    profile = await svc.profile(freelancer_id)
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Freelancer not found",
        )
    return profile
