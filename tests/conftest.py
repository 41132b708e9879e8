"""
Shared fixtures: an in-memory SQLite database per test and an HTTP client
wired to it.
"""

import os

os.environ.setdefault("ACCESS_TOKEN_SECRET", "test-access-secret")
os.environ.setdefault("REFRESH_TOKEN_SECRET", "test-refresh-secret")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from database.session import enable_sqlite_foreign_keys, get_db_session, init_models
from main import create_app

DEFAULT_PASSWORD = "secret123"


@pytest_asyncio.fixture
async def engine():
    eng = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    enable_sqlite_foreign_keys(eng)
    await init_models(eng)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as s:
        yield s


@pytest_asyncio.fixture
async def client(session_factory):
    app = create_app()

    async def _session_override():
        async with session_factory() as s:
            try:
                yield s
                await s.commit()
            except Exception:
                await s.rollback()
                raise

    app.dependency_overrides[get_db_session] = _session_override
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest.fixture
def login_as(client):
    """Register (if needed) and log in; returns ``(auth_headers, token_body)``."""

    async def _login(username: str, password: str = DEFAULT_PASSWORD):
        await client.post("/api/register", json={"username": username, "password": password})
        resp = await client.post("/api/login", json={"username": username, "password": password})
        assert resp.status_code == 200, resp.text
        tokens = resp.json()
        return {"Authorization": f"Bearer {tokens['accessToken']}"}, tokens

    return _login
