"""
FastAPI dependencies for authentication.

Provides ``db_session`` and ``get_current_user_id`` dependencies that
are used across all protected routes.
"""

from __future__ import annotations

from typing import AsyncGenerator, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from auth.jwt import verify_access_token
from core.exceptions import InvalidToken
from database.session import get_db_session

# Returns None instead of raising when the header is absent.
_bearer_scheme = HTTPBearer(auto_error=False)


async def db_session(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AsyncSession, None]:
    """Yield a DB session for route handlers."""
    yield session


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
) -> int:
    """
    Extract and verify the Bearer access token, returning the authenticated
    user id.
    """
    if credentials is None:
        raise InvalidToken("Missing Bearer token")
    return verify_access_token(credentials.credentials)
