"""Note service implementation."""

from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ...config import get_settings
from ..exceptions import NotFoundError, ValidationFailedError
from ..logging import get_logger
from ..repositories.note_repository import NoteRepository
from ..schemas.notes import NoteCreate, NoteListResponse, NoteResponse, NoteUpdate
from .interfaces import INoteService

logger = get_logger("services.notes")


class NoteService(INoteService):
    """Note service implementation.

    All input checks run before the repository is touched.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)
        self.settings = get_settings()

    async def list_notes(
        self,
        owner_id: str,
        search: Optional[str] = None,
        sort_by: Optional[str] = None,
        sort_dir: Optional[str] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> NoteListResponse:
        """List the caller's notes with the total for the same search."""
        self._validate_paging(page, page_size)

        notes = await self.note_repo.list_notes(
            owner_id,
            search=search,
            sort_by=sort_by,
            sort_dir=sort_dir,
            page=page,
            page_size=page_size,
        )
        total = await self.note_repo.count_notes(owner_id, search=search)

        paginated = page is not None and page_size is not None
        return NoteListResponse.create(
            items=[NoteResponse.model_validate(note) for note in notes],
            total=total,
            page=page if paginated else None,
            page_size=page_size if paginated else None,
        )

    async def count_notes(self, owner_id: str, search: Optional[str] = None) -> int:
        return await self.note_repo.count_notes(owner_id, search=search)

    async def get_note(self, owner_id: str, note_id: UUID) -> NoteResponse:
        """Get note by ID. Someone else's note is reported as missing."""
        note = await self.note_repo.get_note(owner_id, note_id)
        if not note:
            raise NotFoundError("note", str(note_id))
        return NoteResponse.model_validate(note)

    async def create_note(self, owner_id: str, request: NoteCreate) -> NoteResponse:
        """Create new note."""
        self._validate_note(request.title, request.content)

        note = await self.note_repo.create_note(owner_id, request.title, request.content)
        logger.info(f"Created note {note.id}", extra={"owner_id": owner_id})
        return NoteResponse.model_validate(note)

    async def update_note(self, owner_id: str, note_id: UUID, request: NoteUpdate) -> NoteResponse:
        """Replace title and content; missing content clears it."""
        self._validate_note(request.title, request.content)

        note = await self.note_repo.update_note(owner_id, note_id, request.title, request.content)
        if not note:
            logger.warning(f"Update of missing note {note_id}", extra={"owner_id": owner_id})
            raise NotFoundError("note", str(note_id))

        logger.info(f"Updated note {note_id}", extra={"owner_id": owner_id})
        return NoteResponse.model_validate(note)

    async def delete_note(self, owner_id: str, note_id: UUID) -> None:
        """Delete note."""
        deleted = await self.note_repo.delete_note(owner_id, note_id)
        if not deleted:
            logger.warning(f"Delete of missing note {note_id}", extra={"owner_id": owner_id})
            raise NotFoundError("note", str(note_id))

        logger.info(f"Deleted note {note_id}", extra={"owner_id": owner_id})

    def _validate_note(self, title: Optional[str], content: Optional[str]) -> None:
        if title is None or not title.strip():
            raise ValidationFailedError("Title cannot be empty", field="title")
        if len(title) > self.settings.note_title_max_length:
            raise ValidationFailedError(
                f"Title must be at most {self.settings.note_title_max_length} characters",
                field="title",
            )
        if content is not None and len(content) > self.settings.note_content_max_length:
            raise ValidationFailedError(
                f"Content must be at most {self.settings.note_content_max_length} characters",
                field="content",
            )

    def _validate_paging(self, page: Optional[int], page_size: Optional[int]) -> None:
        if page is not None and page < 1:
            raise ValidationFailedError("page must be at least 1", field="page")
        if page_size is not None and not 1 <= page_size <= self.settings.max_page_size:
            raise ValidationFailedError(
                f"page_size must be between 1 and {self.settings.max_page_size}",
                field="page_size",
            )
