"""
Unauthenticated service routes: API info and health check.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict

from fastapi import APIRouter

router = APIRouter(tags=["system"])

API_NAME = "TaskMaster API"
API_VERSION = "1.0.0"
DOCS_URL = "/documentation"


@router.get("/")
async def api_info() -> Dict[str, str]:
    return {"name": API_NAME, "version": API_VERSION, "documentation": DOCS_URL}


@router.get("/health")
async def health() -> Dict[str, str]:
    return {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()}
