"""
Tests for the ownership guard and the resource services built on it.
"""

import pytest

from auth import service
from core import boards, tasks
from core.exceptions import Forbidden, NotFound, ValidationError
from core.ownership import authorize_board, authorize_task


@pytest.fixture
def users(session):
    async def _make():
        owner = await service.register(session, "owner", "pw123456")
        intruder = await service.register(session, "intruder", "pw123456")
        return owner, intruder

    return _make


class TestAuthorizeBoard:
    @pytest.mark.asyncio
    async def test_owner_gets_board(self, session, users):
        owner, _ = await users()
        board = await boards.create_board(session, owner, "Mine")
        assert (await authorize_board(session, owner, board.id)).name == "Mine"

    @pytest.mark.asyncio
    async def test_other_user_is_forbidden(self, session, users):
        owner, intruder = await users()
        board = await boards.create_board(session, owner, "Mine")
        with pytest.raises(Forbidden):
            await authorize_board(session, intruder, board.id)

    @pytest.mark.asyncio
    async def test_missing_board_is_not_found(self, session, users):
        owner, _ = await users()
        with pytest.raises(NotFound):
            await authorize_board(session, owner, 12345)


class TestAuthorizeTask:
    @pytest.mark.asyncio
    async def test_ownership_resolved_through_board(self, session, users):
        owner, intruder = await users()
        board = await boards.create_board(session, owner, "Mine")
        task = await tasks.create_task(session, owner, board.id, "Do it")

        assert (await authorize_task(session, owner, task.id)).title == "Do it"
        with pytest.raises(Forbidden):
            await authorize_task(session, intruder, task.id)

    @pytest.mark.asyncio
    async def test_missing_task_is_not_found(self, session, users):
        owner, _ = await users()
        with pytest.raises(NotFound):
            await authorize_task(session, owner, 999)


class TestConditionedWrites:
    @pytest.mark.asyncio
    async def test_intruder_cannot_rename_board(self, session, users):
        owner, intruder = await users()
        board = await boards.create_board(session, owner, "Mine")
        with pytest.raises(Forbidden):
            await boards.update_board(session, intruder, board.id, "Theirs")
        assert (await boards.get_board(session, owner, board.id)).name == "Mine"

    @pytest.mark.asyncio
    async def test_intruder_cannot_add_task(self, session, users):
        owner, intruder = await users()
        board = await boards.create_board(session, owner, "Mine")
        with pytest.raises(Forbidden):
            await tasks.create_task(session, intruder, board.id, "sneaky")
        assert await tasks.list_tasks(session, owner, board.id) == []

    @pytest.mark.asyncio
    async def test_intruder_cannot_update_or_delete_task(self, session, users):
        owner, intruder = await users()
        board = await boards.create_board(session, owner, "Mine")
        task = await tasks.create_task(session, owner, board.id, "Do it")

        with pytest.raises(Forbidden):
            await tasks.update_task(session, intruder, task.id, completed=True)
        with pytest.raises(Forbidden):
            await tasks.delete_task(session, intruder, task.id)

        assert (await tasks.get_task(session, owner, task.id)).completed is False

    @pytest.mark.asyncio
    async def test_empty_task_update_rejected(self, session, users):
        owner, _ = await users()
        board = await boards.create_board(session, owner, "Mine")
        task = await tasks.create_task(session, owner, board.id, "Do it")
        with pytest.raises(ValidationError):
            await tasks.update_task(session, owner, task.id)

    @pytest.mark.asyncio
    async def test_deleting_board_cascades_to_tasks(self, session, users):
        owner, _ = await users()
        board = await boards.create_board(session, owner, "Mine")
        task = await tasks.create_task(session, owner, board.id, "Do it")

        await boards.delete_board(session, owner, board.id)

        with pytest.raises(NotFound):
            await tasks.get_task(session, owner, task.id)
        with pytest.raises(NotFound):
            await boards.delete_board(session, owner, board.id)
