"""
Pydantic schemas for API requests and responses.
"""

from .auth import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from .common import ErrorResponse, HealthCheckResponse
from .notes import NoteCreate, NoteListResponse, NoteResponse, NoteUpdate

__all__ = [
    # Auth schemas
    "LoginRequest",
    "RegisterRequest",
    "UserResponse",
    "AuthResponse",
    # Note schemas
    "NoteCreate",
    "NoteUpdate",
    "NoteResponse",
    "NoteListResponse",
    # Common schemas
    "ErrorResponse",
    "HealthCheckResponse",
]
