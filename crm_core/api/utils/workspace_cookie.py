"""
Signed workspace preference cookie.

The cookie only remembers which workspace a browser last used. It is bound
to the user it was issued for and always re-checked against memberships.
"""

from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from fastapi import Response
from jose import JWTError, jwt

from config import ApplicationConfig

COOKIE_NAME = "current-workspace"
ALGORITHM = "HS256"


def encode_preference(user_id: UUID, workspace_id: UUID, config=ApplicationConfig) -> str:
    now = datetime.now(UTC)
    payload = {
        "sub": str(user_id),
        "wid": str(workspace_id),
        "iat": now,
        "exp": now + timedelta(days=config.WORKSPACE_PREFERENCE_MAX_AGE_DAYS),
    }
    return jwt.encode(payload, config.JWT_SECRET, algorithm=ALGORITHM)


def decode_preference(
    value: Optional[str], user_id: UUID, config=ApplicationConfig
) -> Optional[UUID]:
    """Workspace id from a cookie value, or None if unsigned, expired, malformed or foreign"""
    if not value:
        return None
    try:
        payload = jwt.decode(value, config.JWT_SECRET, algorithms=[ALGORITHM])
        if payload.get("sub") != str(user_id):
            return None
        return UUID(payload["wid"])
    except (JWTError, KeyError, TypeError, ValueError):
        return None


def set_preference_cookie(
    response: Response, user_id: UUID, workspace_id: UUID, config=ApplicationConfig
) -> None:
    response.set_cookie(
        key=COOKIE_NAME,
        value=encode_preference(user_id, workspace_id, config),
        max_age=config.WORKSPACE_PREFERENCE_MAX_AGE_DAYS * 24 * 60 * 60,
        httponly=True,
        samesite="lax",
        secure=config.is_production(),
        path="/",
    )


def clear_preference_cookie(response: Response) -> None:
    response.delete_cookie(key=COOKIE_NAME, path="/")
