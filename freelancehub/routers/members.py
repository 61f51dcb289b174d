"""
Member session endpoints.
"""

from fastapi import APIRouter, Depends

from freelancehub.domain.models import Member, MemberSession
from freelancehub.services.auth_service import (
    MemberSessions,
    get_current_member,
    get_member_sessions,
)

router = APIRouter(prefix="/members", tags=["Members"])


@router.get("/me", response_model=Member)
async def get_me(session: MemberSession = Depends(get_current_member)):
    return session.member


@router.post("/logout")
async def logout(
    session: MemberSession = Depends(get_current_member),
    sessions: MemberSessions = Depends(get_member_sessions),
):
    """Sign out: the current token is rejected from now on."""
    sessions.revoke(session.token)
    return {"ok": True}
