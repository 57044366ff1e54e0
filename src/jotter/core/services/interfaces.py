"""
Service interfaces for the Jotter application.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from uuid import UUID

from ..schemas.auth import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from ..schemas.common import HealthCheckResponse
from ..schemas.notes import NoteCreate, NoteListResponse, NoteResponse, NoteUpdate


class IAuthService(ABC):
    """Auth service for registration and login."""

    @abstractmethod
    async def register_user(self, request: RegisterRequest) -> AuthResponse:
        """Register new user and issue a token."""
        pass

    @abstractmethod
    async def authenticate_user(self, request: LoginRequest) -> AuthResponse:
        """Login user and issue a token."""
        pass

    @abstractmethod
    async def get_current_user(self, identity: str) -> UserResponse:
        """Get the user behind a token identity."""
        pass


class INoteService(ABC):
    """Note service for owner-scoped CRUD operations."""

    @abstractmethod
    async def list_notes(
        self,
        owner_id: str,
        search: Optional[str] = None,
        sort_by: Optional[str] = None,
        sort_dir: Optional[str] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> NoteListResponse:
        """List the caller's notes."""
        pass

    @abstractmethod
    async def count_notes(self, owner_id: str, search: Optional[str] = None) -> int:
        """Count the caller's notes."""
        pass

    @abstractmethod
    async def get_note(self, owner_id: str, note_id: UUID) -> NoteResponse:
        """Get note by ID."""
        pass

    @abstractmethod
    async def create_note(self, owner_id: str, request: NoteCreate) -> NoteResponse:
        """Create new note."""
        pass

    @abstractmethod
    async def update_note(self, owner_id: str, note_id: UUID, request: NoteUpdate) -> NoteResponse:
        """Replace title and content of a note."""
        pass

    @abstractmethod
    async def delete_note(self, owner_id: str, note_id: UUID) -> None:
        """Delete note."""
        pass


class IHealthService(ABC):
    """Health check service."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        """Get overall health status."""
        pass

    @abstractmethod
    async def check_database_health(self) -> Dict[str, Any]:
        """Check database connectivity."""
        pass
