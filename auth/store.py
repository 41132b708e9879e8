"""
Credential store — username, password hash and the current refresh token.

Pure data access over the ``users`` table; no hashing or token logic.
Reads use ``populate_existing`` so every call sees the persisted row rather
than a stale identity-map copy.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import User


async def get_user_by_username(session: AsyncSession, username: str) -> Optional[User]:
    result = await session.execute(
        select(User)
        .where(User.username == username)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def get_user_by_id(session: AsyncSession, user_id: int) -> Optional[User]:
    result = await session.execute(
        select(User)
        .where(User.id == user_id)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def create_user(session: AsyncSession, username: str, password_hash: str) -> User:
    user = User(username=username, password_hash=password_hash)
    session.add(user)
    await session.flush()
    return user


async def set_refresh_token(
    session: AsyncSession,
    user_id: int,
    refresh_token: Optional[str],
) -> None:
    """Overwrite (or clear, with ``None``) the user's single stored refresh token."""
    await session.execute(
        update(User)
        .where(User.id == user_id)
        .values(refresh_token=refresh_token)
    )
