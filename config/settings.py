"""
Application settings loaded from environment variables.
"""

import logging
import sys
from typing import List

from pydantic import Field, ValidationError, model_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    # ── Security Secrets ──────────────────────────────────────────────────
    access_token_secret: str = Field(..., min_length=1)    # HMAC secret for access tokens
    refresh_token_secret: str = Field(..., min_length=1)   # HMAC secret for refresh tokens
    access_token_expiry_seconds: int = 900                  # 15 minutes
    refresh_token_expiry_seconds: int = 604800              # 7 days
    bcrypt_rounds: int = Field(10, ge=4, le=31)

    # ── Database ─────────────────────────────────────────────────────────
    database_url: str = "sqlite+aiosqlite:///./taskmaster.db"

    # ── Server ───────────────────────────────────────────────────────────
    port: int = 3000
    host: str = "0.0.0.0"
    debug: bool = False
    cors_origins: List[str] = ["*"]

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
    }

    @model_validator(mode="after")
    def _distinct_secrets(self) -> "Settings":
        if self.access_token_secret == self.refresh_token_secret:
            raise ValueError("access and refresh token secrets must differ")
        return self


def load_settings() -> Settings:
    """Build settings, terminating the process if they are unusable."""
    try:
        return Settings()
    except ValidationError as exc:
        logger.critical("Invalid configuration:\n%s", exc)
        sys.exit(1)


config = load_settings()
