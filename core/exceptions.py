"""
Domain error taxonomy.

Each error carries the HTTP status it is rendered with; the mapping to a
``{"error": message}`` response lives in ``api.middleware``.
"""

from __future__ import annotations

from fastapi import status


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal Server Error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Validation Error"


class DuplicateUsername(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Username already exists"


class InvalidCredentials(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials"


class InvalidToken(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid or expired token"


class Forbidden(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Access denied"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class InternalError(AppError):
    pass
