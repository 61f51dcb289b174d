"""
Reputation ledger endpoints — summary and portable export.
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from freelancehub.dependencies import get_reputation_service
from freelancehub.services.reputation_service import ReputationService

router = APIRouter(prefix="/reputation", tags=["Reputation"])


@router.get("")
async def get_reputation(
    freelancer: str | None = Query(None),
    svc: ReputationService = Depends(get_reputation_service),
):
    summary = await svc.summary(freelancer)
    return {
        "summary": summary.model_dump(by_alias=True),
        "shareText": await svc.share_text(freelancer),
    }


@router.get("/export")
async def export_reputation(
    freelancer: str | None = Query(None),
    svc: ReputationService = Depends(get_reputation_service),
):
    """Download the ledger as a dated JSON file."""
    export = await svc.export(freelancer)
    return JSONResponse(
        content=export.document,
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
    )
