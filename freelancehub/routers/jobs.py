"""
Job endpoints — board, details, posting, and proposals.
All logic delegated to JobService.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Query, status

from freelancehub.dependencies import get_job_service
from freelancehub.domain.models import (
    JobBoardCard,
    JobPosting,
    JobPostingDraft,
    JobPostingView,
    MemberSession,
    ProposalCreateResponse,
    ProposalDraft,
)
from freelancehub.services.auth_service import get_current_member
from freelancehub.services.job_service import JobService, format_time_ago

router = APIRouter(prefix="/jobs", tags=["Jobs"])


@router.get("", response_model=list[JobBoardCard], response_model_exclude_none=True)
async def search_jobs(
    search: str | None = Query(None),
    category: str | None = Query(None),
    budget: str | None = Query(None, description="under-1000 | 1000-5000 | 5000-10000 | over-10000"),
    payment_model: str | None = Query(None),
    svc: JobService = Depends(get_job_service),
):
    """Job board listing (public)."""
    jobs = await svc.search(
        query=search, category=category, budget_band=budget, payment_model=payment_model
    )
    now = datetime.now(timezone.utc)
    return [JobBoardCard(job=j, posted=format_time_ago(j.created_date, now)) for j in jobs]


@router.get("/categories", response_model=list[str])
async def list_categories(svc: JobService = Depends(get_job_service)):
    return await svc.unique_categories()


@router.post(
    "",
    response_model=JobPosting,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def post_job(
    body: JobPostingDraft,
    session: MemberSession = Depends(get_current_member),
    svc: JobService = Depends(get_job_service),
):
    """Create a new job posting (members only)."""
    return await svc.post_job(body)


@router.get("/{job_id}", response_model=JobPostingView, response_model_exclude_none=True)
async def get_job_details(
    job_id: str,
    svc: JobService = Depends(get_job_service),
):
    job = await svc.get_details(job_id)
    if job is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Job not found",
        )

    return JobPostingView(
        job=job,
        posted=format_time_ago(job.created_date, datetime.now(timezone.utc)),
        proposals=await svc.proposals_for(job_id),
    )


@router.post(
    "/{job_id}/proposals",
    response_model=ProposalCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_proposal(
    job_id: str,
    body: ProposalDraft,
    session: MemberSession = Depends(get_current_member),
    svc: JobService = Depends(get_job_service),
):
    """Submit a proposal against a job (members only)."""
    try:
        proposal = await svc.submit_proposal(job_id, body)
    except LookupError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Job not found",
        )
    return ProposalCreateResponse(id=proposal.id)
