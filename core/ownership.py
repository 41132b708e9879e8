"""
Ownership guard — the one place that decides whether a user may touch a
board or a task.

Policy, applied to every by-id path:

  • id does not exist                       → ``NotFound`` (404)
  • id exists, owned by someone else        → ``Forbidden`` (403)
  • id exists, owned by the requesting user → the ORM row

Tasks have no owner column; their owner is always resolved through
``tasks.board_id → boards.user_id``.
"""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import Forbidden, NotFound
from database.models import Board, Task

logger = logging.getLogger(__name__)


async def authorize_board(
    session: AsyncSession,
    user_id: int,
    board_id: int,
    *,
    lock: bool = False,
) -> Board:
    """
    Return the board if ``user_id`` owns it.

    ``lock=True`` takes a row lock (``SELECT ... FOR UPDATE``) held until the
    caller's transaction ends, so the board cannot disappear between this
    check and a dependent write.
    """
    stmt = select(Board).where(Board.id == board_id).execution_options(populate_existing=True)
    if lock:
        stmt = stmt.with_for_update()
    board = (await session.execute(stmt)).scalar_one_or_none()

    if board is None:
        raise NotFound("Board not found")
    if board.user_id != user_id:
        logger.warning("User %s denied access to board %s", user_id, board_id)
        raise Forbidden()
    return board


async def authorize_task(session: AsyncSession, user_id: int, task_id: int) -> Task:
    """Return the task if its board belongs to ``user_id``."""
    result = await session.execute(
        select(Task, Board.user_id)
        .join(Board, Task.board_id == Board.id)
        .where(Task.id == task_id)
        .execution_options(populate_existing=True)
    )
    row = result.one_or_none()

    if row is None:
        raise NotFound("Task not found")
    task, owner_id = row
    if owner_id != user_id:
        logger.warning("User %s denied access to task %s", user_id, task_id)
        raise Forbidden()
    return task
