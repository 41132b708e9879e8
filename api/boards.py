"""
Board routes.

Route prefix: /api
"""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import db_session, get_current_user_id
from core import boards
from utils.schemas import BoardOut, BoardWrite, MessageResponse, ResourceId

router = APIRouter(tags=["boards"])


@router.get("/boards", response_model=List[BoardOut])
async def list_boards(
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
):
    """All boards of the authenticated user, newest first."""
    return await boards.list_boards(session, user_id)


@router.get("/boards/{board_id}", response_model=BoardOut)
async def get_board(
    board_id: ResourceId,
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
):
    """One board, if the authenticated user owns it."""
    return await boards.get_board(session, user_id, board_id)


@router.post("/boards", response_model=BoardOut, status_code=status.HTTP_201_CREATED)
async def create_board(
    req: BoardWrite,
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
):
    """Create a board owned by the authenticated user."""
    return await boards.create_board(session, user_id, req.name)


@router.put("/boards/{board_id}", response_model=BoardOut)
async def update_board(
    board_id: ResourceId,
    req: BoardWrite,
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
):
    """Rename a board."""
    return await boards.update_board(session, user_id, board_id, req.name)


@router.delete("/boards/{board_id}", response_model=MessageResponse)
async def delete_board(
    board_id: ResourceId,
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """Delete a board together with all of its tasks."""
    await boards.delete_board(session, user_id, board_id)
    return {"message": "Board deleted successfully"}
