"""
Demo data: one user (``testuser`` / ``password``) with two boards and a few
tasks. Existing rows are wiped first.

Usage::

    python -m database.seed
"""

from __future__ import annotations

import asyncio
import logging
import sys

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from auth.password import hash_password_async
from database.models import Board, Task, User
from database.session import async_session_factory, init_models

logger = logging.getLogger(__name__)

SEED_USERNAME = "testuser"
SEED_PASSWORD = "password"
SEED_BOARDS = ["Personal Tasks", "Work Projects"]
SEED_TASKS = [
    ("Learn FastAPI", False),
    ("Set up OpenAPI documentation", True),
    ("Deploy application", False),
]


async def seed_initial_data(session: AsyncSession) -> int:
    """Replace all data with the demo set; return the demo user's id."""
    for model in (Task, Board, User):
        await session.execute(delete(model))

    user = User(
        username=SEED_USERNAME,
        password_hash=await hash_password_async(SEED_PASSWORD),
    )
    session.add(user)
    await session.flush()

    boards = [Board(name=name, user_id=user.id) for name in SEED_BOARDS]
    session.add_all(boards)
    await session.flush()

    session.add_all(
        Task(title=title, completed=completed, board_id=boards[0].id)
        for title, completed in SEED_TASKS
    )
    user_id = user.id
    await session.commit()

    logger.info(
        "Seeded user %s (%s) with %d boards and %d tasks",
        SEED_USERNAME, user_id, len(SEED_BOARDS), len(SEED_TASKS),
    )
    return user_id


async def main() -> None:
    await init_models()
    async with async_session_factory() as session:
        await seed_initial_data(session)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, stream=sys.stdout)
    asyncio.run(main())
