"""
Bearer-token authentication.

Tokens are JWTs issued by the platform's sign-in flow. A token is accepted
only if it decodes with our secret AND a session row holding that exact
token exists, so signing out (deleting the session) revokes it.
"""

from typing import Optional

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.core.config import get_settings
from hotel_booking.core.logging import get_logger
from hotel_booking.db.session import get_db
from hotel_booking.models.user import Session

logger = get_logger(__name__)
settings = get_settings()

bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(data: dict) -> str:
    return jwt.encode(data.copy(), settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> Optional[int]:
    """Return the user id carried by the token, or None if it is not valid."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except jwt.PyJWTError:
        return None

    subject = payload.get("sub")
    try:
        return int(subject)
    except (TypeError, ValueError):
        return None


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="You must be signed in to continue",
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> int:
    if credentials is None:
        raise _unauthorized()

    token = credentials.credentials
    user_id = decode_access_token(token)
    if user_id is None:
        logger.warning("auth_failed", reason="invalid_token")
        raise _unauthorized()

    result = await db.execute(
        select(Session.id).where(Session.token == token, Session.user_id == user_id).limit(1)
    )
    if result.scalar_one_or_none() is None:
        logger.warning("auth_failed", reason="no_session", user_id=user_id)
        raise _unauthorized()

    return user_id
