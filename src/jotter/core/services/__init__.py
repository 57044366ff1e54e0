"""
Service layer interfaces and implementations.
"""

from .interfaces import IAuthService, IHealthService, INoteService

from .auth_service import AuthService
from .health_service import HealthService
from .note_service import NoteService

__all__ = [
    # Interfaces
    "IAuthService",
    "INoteService",
    "IHealthService",
    # Implementations
    "AuthService",
    "NoteService",
    "HealthService",
]
