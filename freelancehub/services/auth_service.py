"""
Member session service.
Decodes member JWTs into an explicit MemberSession passed to the routes
that need one. The data-access layer never sees it.
"""

import logging
from datetime import datetime, timezone

import jwt
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from freelancehub.config import settings
from freelancehub.domain.models import Member, MemberSession

logger = logging.getLogger(__name__)

_bearer_scheme = HTTPBearer()


class MemberSessions:
    """
    Registry of signed-out tokens.

    Created when the app starts, stored on `app.state`, and cleared
    when the app shuts down.
    """

    def __init__(self) -> None:
        self._revoked: set[str] = set()

    def revoke(self, token: str) -> None:
        self._revoked.add(token)

    def is_revoked(self, token: str) -> bool:
        return token in self._revoked

    def clear(self) -> None:
        self._revoked.clear()


def _decode_claims(token: str) -> dict:
    """
    Decode the member JWT.

    With `member_jwt_secret` configured the HS256 signature is verified;
    without it only expiry is checked and the token is trusted as issued
    by the identity provider.
    """
    try:
        if settings.member_jwt_secret:
            return jwt.decode(
                token,
                settings.member_jwt_secret,
                algorithms=["HS256"],
                options={"verify_aud": False},
                leeway=30,
            )
        return jwt.decode(
            token,
            algorithms=["HS256"],
            options={"verify_signature": False, "verify_exp": True},
            leeway=30,  # 30-second tolerance for clock drift
        )
    except jwt.ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired",
        )
    except jwt.InvalidTokenError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid token: {e}",
        )


def session_from_token(token: str) -> MemberSession:
    claims = _decode_claims(token)

    member_id = claims.get("sub")
    if not member_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token missing member ID (sub claim)",
        )

    exp = claims.get("exp")
    return MemberSession(
        member=Member(
            id=member_id,
            login_email=claims.get("email"),
            nickname=claims.get("nickname"),
            first_name=claims.get("given_name"),
            last_name=claims.get("family_name"),
        ),
        token=token,
        expires_at=datetime.fromtimestamp(exp, tz=timezone.utc) if exp else None,
    )


def get_member_sessions(request: Request) -> MemberSessions:
    return request.app.state.member_sessions


async def get_current_member(
    credentials: HTTPAuthorizationCredentials = Depends(_bearer_scheme),
    sessions: MemberSessions = Depends(get_member_sessions),
) -> MemberSession:
    """FastAPI dependency resolving the bearer token into a MemberSession."""
    token = credentials.credentials
    if sessions.is_revoked(token):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Session has been signed out",
        )
    return session_from_token(token)
