"""
Task CRUD. A task is reachable only through a board owned by the requester.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import NotFound, ValidationError
from core.ownership import authorize_board, authorize_task
from database.models import Board, Task, utcnow

logger = logging.getLogger(__name__)


def _owned_board_ids(user_id: int):
    return select(Board.id).where(Board.user_id == user_id)


async def list_tasks(session: AsyncSession, user_id: int, board_id: int) -> List[Task]:
    await authorize_board(session, user_id, board_id)
    result = await session.execute(
        select(Task)
        .where(Task.board_id == board_id)
        .order_by(Task.created_at.desc(), Task.id.desc())
    )
    return list(result.scalars().all())


async def get_task(session: AsyncSession, user_id: int, task_id: int) -> Task:
    return await authorize_task(session, user_id, task_id)


async def create_task(session: AsyncSession, user_id: int, board_id: int, title: str) -> Task:
    """Add a task under a board the user owns; the board row stays locked until commit."""
    await authorize_board(session, user_id, board_id, lock=True)

    task = Task(title=title, completed=False, board_id=board_id)
    session.add(task)
    await session.flush()
    await session.refresh(task)
    await session.commit()
    logger.info("User %s created task %s on board %s", user_id, task.id, board_id)
    return task


async def update_task(
    session: AsyncSession,
    user_id: int,
    task_id: int,
    *,
    title: Optional[str] = None,
    completed: Optional[bool] = None,
) -> Task:
    values: Dict[str, Any] = {}
    if title is not None:
        values["title"] = title
    if completed is not None:
        values["completed"] = completed
    if not values:
        raise ValidationError("Nothing to update: provide title and/or completed")
    values["updated_at"] = utcnow()

    result = await session.execute(
        update(Task)
        .where(Task.id == task_id, Task.board_id.in_(_owned_board_ids(user_id)))
        .values(**values)
        .returning(Task)
        .execution_options(synchronize_session=False, populate_existing=True)
    )
    task = result.scalar_one_or_none()
    if task is None:
        await authorize_task(session, user_id, task_id)
        raise NotFound("Task not found")

    await session.commit()
    return task


async def delete_task(session: AsyncSession, user_id: int, task_id: int) -> None:
    result = await session.execute(
        delete(Task)
        .where(Task.id == task_id, Task.board_id.in_(_owned_board_ids(user_id)))
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        await authorize_task(session, user_id, task_id)
        raise NotFound("Task not found")

    await session.commit()
    logger.info("User %s deleted task %s", user_id, task_id)
