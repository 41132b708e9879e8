"""
Board CRUD scoped to the requesting user.
"""

from __future__ import annotations

import logging
from typing import List

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import NotFound
from core.ownership import authorize_board
from database.models import Board, utcnow

logger = logging.getLogger(__name__)


async def list_boards(session: AsyncSession, user_id: int) -> List[Board]:
    result = await session.execute(
        select(Board)
        .where(Board.user_id == user_id)
        .order_by(Board.created_at.desc(), Board.id.desc())
    )
    return list(result.scalars().all())


async def get_board(session: AsyncSession, user_id: int, board_id: int) -> Board:
    return await authorize_board(session, user_id, board_id)


async def create_board(session: AsyncSession, user_id: int, name: str) -> Board:
    board = Board(name=name, user_id=user_id)
    session.add(board)
    await session.flush()
    await session.refresh(board)
    await session.commit()
    logger.info("User %s created board %s", user_id, board.id)
    return board


async def update_board(session: AsyncSession, user_id: int, board_id: int, name: str) -> Board:
    """Rename a board; the ownership condition is part of the UPDATE itself."""
    result = await session.execute(
        update(Board)
        .where(Board.id == board_id, Board.user_id == user_id)
        .values(name=name, updated_at=utcnow())
        .returning(Board)
        .execution_options(synchronize_session=False, populate_existing=True)
    )
    board = result.scalar_one_or_none()
    if board is None:
        # Explain the miss: raises NotFound or Forbidden.
        await authorize_board(session, user_id, board_id)
        raise NotFound("Board not found")

    await session.commit()
    return board


async def delete_board(session: AsyncSession, user_id: int, board_id: int) -> None:
    """Delete a board; its tasks go with it via ``ON DELETE CASCADE``."""
    result = await session.execute(
        delete(Board)
        .where(Board.id == board_id, Board.user_id == user_id)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        await authorize_board(session, user_id, board_id)
        raise NotFound("Board not found")

    await session.commit()
    logger.info("User %s deleted board %s", user_id, board_id)
