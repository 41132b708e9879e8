"""
Auth API routes — register, login, refresh, logout.

Route prefix: /api
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from auth import service
from auth.dependencies import db_session, get_current_user_id
from utils.schemas import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RefreshRequest,
    RefreshResponse,
    RegisterRequest,
    RegisterResponse,
)

router = APIRouter(tags=["auth"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    req: RegisterRequest,
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """Register a new user."""
    user_id = await service.register(session, req.username, req.password)
    return {"message": "User registered successfully", "user_id": user_id}


@router.post("/login", response_model=LoginResponse)
async def login(
    req: LoginRequest,
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """Login with username + password; returns an access/refresh token pair."""
    tokens = await service.login(session, req.username, req.password)
    return {
        "access_token": tokens.access_token,
        "refresh_token": tokens.refresh_token,
    }


@router.post("/refresh", response_model=RefreshResponse)
async def refresh(
    req: RefreshRequest,
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """Trade the current refresh token for a fresh access token."""
    access_token = await service.refresh(session, req.refresh_token)
    return {"access_token": access_token}


@router.post("/logout", response_model=MessageResponse)
async def logout(
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """Invalidate the stored refresh token for the authenticated user."""
    await service.logout(session, user_id)
    return {"message": "Logged out successfully"}
