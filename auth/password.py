"""
Password hashing and verification.

Uses bcrypt for password hashing with automatic
salting and configurable work factor.
"""

from __future__ import annotations

import asyncio
import logging
from functools import lru_cache

import bcrypt

from config.settings import config
from core.exceptions import InternalError

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    """Hash a password with bcrypt (auto-salted, ``config.bcrypt_rounds``)."""
    try:
        return bcrypt.hashpw(
            password.encode(), bcrypt.gensalt(rounds=config.bcrypt_rounds)
        ).decode()
    except (ValueError, TypeError) as exc:
        logger.error("Password hashing failed: %s", type(exc).__name__)
        raise InternalError("Password hashing failed") from exc


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time comparison against a bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode(), password_hash.encode())
    except (ValueError, TypeError):
        return False


@lru_cache(maxsize=1)
def dummy_hash() -> str:
    """A throwaway hash verified against when the username is unknown."""
    return hash_password("not-a-real-password")


async def hash_password_async(password: str) -> str:
    return await asyncio.to_thread(hash_password, password)


async def verify_password_async(password: str, password_hash: str) -> bool:
    return await asyncio.to_thread(verify_password, password, password_hash)
