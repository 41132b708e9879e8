"""
Auth service — register, login, refresh, logout.

Every call re-reads the credential store; nothing is cached in process, so
any number of workers can share one database.

Session lifecycle per user::

    Anonymous ──login──▶ Authenticated(access, refresh)
                           │  refresh ──▶ new access token, same refresh token
                           │  login   ──▶ stored refresh token overwritten
                           └─ logout  ──▶ Anonymous (stored refresh token cleared)
"""

from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from auth import store
from auth.jwt import create_access_token, create_refresh_token, verify_refresh_token
from auth.password import dummy_hash, hash_password_async, verify_password_async
from core.exceptions import DuplicateUsername, InvalidCredentials, InvalidToken

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenPair:
    access_token: str
    refresh_token: str


async def register(session: AsyncSession, username: str, password: str) -> int:
    """
    Create an account and return its id. Does not log the user in.

    The existence check precedes the insert; a concurrent registration of the
    same name is still stopped by the unique index on ``users.username``.
    """
    if await store.get_user_by_username(session, username) is not None:
        raise DuplicateUsername()

    password_hash = await hash_password_async(password)
    try:
        user = await store.create_user(session, username, password_hash)
        user_id = user.id
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        raise DuplicateUsername() from exc

    logger.info("Registered user %s (%s)", username, user_id)
    return user_id


async def login(session: AsyncSession, username: str, password: str) -> TokenPair:
    """
    Check credentials and start a new session, replacing any previous one.

    An unknown username still pays for one bcrypt verification so the two
    failure cases cost the same.
    """
    user = await store.get_user_by_username(session, username)
    stored_hash = user.password_hash if user is not None else dummy_hash()
    password_ok = await verify_password_async(password, stored_hash)

    if user is None or not password_ok:
        logger.warning("Failed login for %r", username)
        raise InvalidCredentials()

    tokens = TokenPair(
        access_token=create_access_token(user.id, user.username),
        refresh_token=create_refresh_token(user.id),
    )
    await store.set_refresh_token(session, user.id, tokens.refresh_token)
    await session.commit()

    logger.info("Login: %s (%s)", user.username, user.id)
    return tokens


async def refresh(session: AsyncSession, refresh_token: str) -> str:
    """
    Exchange a refresh token for a new access token.

    The token must be validly signed, unexpired, and identical to the one
    currently stored for its user. The refresh token itself is not rotated.
    """
    user_id = verify_refresh_token(refresh_token)
    user = await store.get_user_by_id(session, user_id)

    if user is None or user.refresh_token is None or not hmac.compare_digest(
        user.refresh_token, refresh_token
    ):
        logger.warning("Rejected stale or unknown refresh token for user %s", user_id)
        raise InvalidToken()

    return create_access_token(user.id, user.username)


async def logout(session: AsyncSession, user_id: int) -> None:
    """Clear the stored refresh token. Idempotent."""
    await store.set_refresh_token(session, user_id, None)
    await session.commit()
    logger.info("Logout: user %s", user_id)
