"""
JWT-style token creation and verification.

Tokens are base64url-encoded JSON payloads signed with HMAC-SHA256.
Access and refresh tokens use separate secrets
(``ACCESS_TOKEN_SECRET`` / ``REFRESH_TOKEN_SECRET``) and carry a ``typ``
claim, so neither kind is accepted in place of the other.

Verification here is stateless; the single-active-refresh-token check
lives in ``auth.service``.
"""

from __future__ import annotations

import hashlib
import hmac
import json
import logging
import time
import uuid
from base64 import urlsafe_b64decode, urlsafe_b64encode
from typing import Any, Dict, Optional

from config.settings import config
from core.exceptions import InvalidToken

logger = logging.getLogger(__name__)

ACCESS = "access"
REFRESH = "refresh"

_SECRETS = {
    ACCESS: config.access_token_secret,
    REFRESH: config.refresh_token_secret,
}
_ACCESS_EXPIRY_SECONDS = config.access_token_expiry_seconds
_REFRESH_EXPIRY_SECONDS = config.refresh_token_expiry_seconds


def _b64encode(raw: bytes) -> str:
    return urlsafe_b64encode(raw).decode().rstrip("=")


def _b64decode(text: str) -> bytes:
    return urlsafe_b64decode(text + "=" * (-len(text) % 4))


def _sign(raw: bytes, kind: str) -> str:
    return hmac.new(_SECRETS[kind].encode(), raw, hashlib.sha256).hexdigest()


def _create(kind: str, user_id: int, expiry_seconds: int, **claims: Any) -> str:
    now = int(time.time())
    payload = {
        "sub": str(user_id),
        "typ": kind,
        "iat": now,
        "exp": now + expiry_seconds,
        "jti": uuid.uuid4().hex,
        **claims,
    }
    raw = json.dumps(payload, separators=(",", ":")).encode()
    return _b64encode(raw) + "." + _sign(raw, kind)


def _verify(token: str, kind: str) -> Dict[str, Any]:
    try:
        parts = token.split(".", 1)
        if len(parts) != 2:
            raise ValueError("bad format")
        raw = _b64decode(parts[0])
        if not hmac.compare_digest(parts[1], _sign(raw, kind)):
            raise ValueError("bad signature")
        payload = json.loads(raw)
        if payload.get("typ") != kind:
            raise ValueError("wrong token type")
        if payload.get("exp", 0) < time.time():
            raise ValueError("token expired")
        payload["sub"] = int(payload["sub"])
        return payload
    except (ValueError, TypeError, KeyError) as exc:
        logger.debug("Rejected %s token: %s", kind, exc)
        raise InvalidToken() from exc


def create_access_token(user_id: int, username: Optional[str] = None) -> str:
    """Create a short-lived access token for ``user_id``."""
    claims = {"username": username} if username is not None else {}
    return _create(ACCESS, user_id, _ACCESS_EXPIRY_SECONDS, **claims)


def create_refresh_token(user_id: int) -> str:
    """Create a long-lived refresh token for ``user_id``."""
    return _create(REFRESH, user_id, _REFRESH_EXPIRY_SECONDS)


def decode_access_token(token: str) -> Dict[str, Any]:
    return _verify(token, ACCESS)


def verify_access_token(token: str) -> int:
    """
    Verify an access token and return its user id.

    Raises ``InvalidToken`` on a bad signature, malformed structure or expiry.
    """
    return decode_access_token(token)["sub"]


def verify_refresh_token(token: str) -> int:
    """Verify a refresh token's signature and expiry; return its user id."""
    return _verify(token, REFRESH)["sub"]
