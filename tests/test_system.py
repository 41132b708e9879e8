"""
Tests for the unauthenticated info/health routes and settings loading.
"""

import pytest
from pydantic import ValidationError

from config.settings import Settings, load_settings


class TestSystemRoutes:
    @pytest.mark.asyncio
    async def test_health(self, client):
        resp = await client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "OK"
        assert "timestamp" in resp.json()
        assert "X-Process-Time" in resp.headers

    @pytest.mark.asyncio
    async def test_root_info(self, client):
        resp = await client.get("/")
        assert resp.json() == {
            "name": "TaskMaster API",
            "version": "1.0.0",
            "documentation": "/documentation",
        }

    @pytest.mark.asyncio
    async def test_unknown_route_uses_error_shape(self, client):
        resp = await client.get("/api/nope")
        assert resp.status_code == 404
        assert resp.json() == {"error": "Not Found"}


class TestSettings:
    def test_secrets_required(self, monkeypatch):
        monkeypatch.delenv("ACCESS_TOKEN_SECRET", raising=False)
        monkeypatch.delenv("REFRESH_TOKEN_SECRET", raising=False)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_secrets_must_differ(self):
        with pytest.raises(ValidationError):
            Settings(access_token_secret="same", refresh_token_secret="same", _env_file=None)

    def test_defaults(self):
        settings = Settings(access_token_secret="a", refresh_token_secret="b", _env_file=None)
        assert settings.access_token_expiry_seconds == 15 * 60
        assert settings.refresh_token_expiry_seconds == 7 * 24 * 3600

    def test_missing_secrets_exit_nonzero(self, monkeypatch):
        monkeypatch.delenv("ACCESS_TOKEN_SECRET", raising=False)
        monkeypatch.delenv("REFRESH_TOKEN_SECRET", raising=False)
        monkeypatch.setitem(Settings.model_config, "env_file", None)
        with pytest.raises(SystemExit) as exc_info:
            load_settings()
        assert exc_info.value.code == 1
