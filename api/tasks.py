"""
Task routes — nested under a board for list/create, flat by id otherwise.

Route prefix: /api
"""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import db_session, get_current_user_id
from core import tasks
from utils.schemas import MessageResponse, ResourceId, TaskCreate, TaskOut, TaskUpdate

router = APIRouter(tags=["tasks"])


@router.get("/boards/{board_id}/tasks", response_model=List[TaskOut])
async def list_tasks(
    board_id: ResourceId,
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
):
    """Tasks of a board, newest first."""
    return await tasks.list_tasks(session, user_id, board_id)


@router.post(
    "/boards/{board_id}/tasks",
    response_model=TaskOut,
    status_code=status.HTTP_201_CREATED,
)
async def create_task(
    board_id: ResourceId,
    req: TaskCreate,
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
):
    """Add a task to a board."""
    return await tasks.create_task(session, user_id, board_id, req.title)


@router.get("/tasks/{task_id}", response_model=TaskOut)
async def get_task(
    task_id: ResourceId,
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
):
    """One task, if its board belongs to the authenticated user."""
    return await tasks.get_task(session, user_id, task_id)


@router.put("/tasks/{task_id}", response_model=TaskOut)
async def update_task(
    task_id: ResourceId,
    req: TaskUpdate,
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
):
    """Partial update: any of ``title`` / ``completed``."""
    return await tasks.update_task(
        session, user_id, task_id, title=req.title, completed=req.completed,
    )


@router.delete("/tasks/{task_id}", response_model=MessageResponse)
async def delete_task(
    task_id: ResourceId,
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """Delete a task."""
    await tasks.delete_task(session, user_id, task_id)
    return {"message": "Task deleted successfully"}
