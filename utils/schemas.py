"""
Pydantic schemas for the HTTP surface.

Auth payloads are camelCase on the wire (``accessToken``, ``userId``);
board and task resources mirror their table columns.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Optional

from fastapi import Path
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


# Row ids are 64-bit integers in both SQLite and PostgreSQL.
MAX_ID = 2**63 - 1
ResourceId = Annotated[int, Path(ge=1, le=MAX_ID)]

# bcrypt only accepts passwords up to 72 bytes.
MAX_PASSWORD_BYTES = 72


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ═══════════════════════════════════════════════════════════════════════════════
# Auth
# ═══════════════════════════════════════════════════════════════════════════════


class RegisterRequest(BaseModel):
    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6, max_length=72)

    @field_validator("password")
    @classmethod
    def _fits_bcrypt(cls, value: str) -> str:
        if len(value.encode()) > MAX_PASSWORD_BYTES:
            raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class LoginRequest(BaseModel):
    username: str
    password: str


class RefreshRequest(CamelModel):
    refresh_token: str


class RegisterResponse(CamelModel):
    message: str
    user_id: int


class LoginResponse(CamelModel):
    access_token: str
    refresh_token: str


class RefreshResponse(CamelModel):
    access_token: str


class MessageResponse(BaseModel):
    message: str


# ═══════════════════════════════════════════════════════════════════════════════
# Boards / Tasks
# ═══════════════════════════════════════════════════════════════════════════════


class BoardWrite(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)


class BoardOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    user_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TaskCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)


class TaskUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    completed: Optional[bool] = None

    @model_validator(mode="after")
    def _at_least_one_field(self) -> "TaskUpdate":
        if self.title is None and self.completed is None:
            raise ValueError("provide title and/or completed")
        return self


class TaskOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    completed: bool
    board_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
