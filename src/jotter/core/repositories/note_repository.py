"""Note repository for database operations.

Every method takes the caller's identity first and applies it as an
equality predicate on ``owner_id``; there is no unscoped lookup.
"""

from datetime import timedelta
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import asc, desc, func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from ..exceptions import UnexpectedError
from ..logging import get_logger
from ..models.note import Note
from ..models.types import utcnow

logger = get_logger("repositories.notes")

# Allow-list of sortable columns, keyed by lowercased name without underscores
# so "createdAt", "created_at" and "CREATEDAT" all resolve the same way.
SORT_COLUMNS = {
    "title": Note.title,
    "createdat": Note.created_at,
    "updatedat": Note.updated_at,
}
DEFAULT_SORT = "createdat"

# smallest difference the timestamp columns can store
_MIN_STEP = timedelta(microseconds=1)


def resolve_sort(sort_by: Optional[str], sort_dir: Optional[str]) -> Tuple[ColumnElement, bool]:
    """Map user-supplied sort options onto (column, ascending).

    Unknown fields fall back to created_at, unknown directions to descending.
    """
    key = (sort_by or "").replace("_", "").lower()
    column = SORT_COLUMNS.get(key, SORT_COLUMNS[DEFAULT_SORT])
    ascending = (sort_dir or "").strip().lower() == "asc"
    return column, ascending


class NoteRepository:
    """Repository for note database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    @staticmethod
    def _filters(owner_id: str, search: Optional[str] = None) -> List[ColumnElement]:
        conditions: List[ColumnElement] = [Note.owner_id == owner_id]
        if search and search.strip():
            term = search.strip()
            conditions.append(
                or_(
                    Note.title.icontains(term, autoescape=True),
                    Note.content.icontains(term, autoescape=True),
                )
            )
        return conditions

    async def _execute(self, stmt, operation: str):
        try:
            return await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            logger.error(f"Note query failed during {operation}: {exc}")
            raise UnexpectedError(context={"operation": operation}) from exc

    async def _commit(self, operation: str) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError as exc:
            logger.error(f"Note commit failed during {operation}: {exc}")
            await self.session.rollback()
            raise UnexpectedError(context={"operation": operation}) from exc

    async def list_notes(
        self,
        owner_id: str,
        search: Optional[str] = None,
        sort_by: Optional[str] = None,
        sort_dir: Optional[str] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> List[Note]:
        """List the owner's notes, optionally filtered, sorted and paginated.

        Pagination only applies when both ``page`` and ``page_size`` are given.
        """
        column, ascending = resolve_sort(sort_by, sort_dir)
        order = asc if ascending else desc

        stmt = (
            select(Note)
            .where(*self._filters(owner_id, search))
            .order_by(order(column), order(Note.id))
        )

        if page is not None and page_size is not None:
            stmt = stmt.offset((page - 1) * page_size).limit(page_size)

        result = await self._execute(stmt, "list")
        return list(result.scalars().all())

    async def count_notes(self, owner_id: str, search: Optional[str] = None) -> int:
        """Count the owner's notes matching the same filter as list_notes."""
        stmt = select(func.count(Note.id)).where(*self._filters(owner_id, search))
        result = await self._execute(stmt, "count")
        return result.scalar() or 0

    async def get_note(self, owner_id: str, note_id: UUID) -> Optional[Note]:
        """Get note by ID if owned by the caller."""
        stmt = select(Note).where(Note.id == note_id, Note.owner_id == owner_id)
        result = await self._execute(stmt, "get")
        return result.scalar_one_or_none()

    async def create_note(self, owner_id: str, title: str, content: Optional[str] = None) -> Note:
        """Create a note stamped with the owner and a single creation time."""
        now = utcnow()
        note = Note(
            owner_id=owner_id,
            title=title,
            content=content,
            created_at=now,
            updated_at=now,
        )
        self.session.add(note)
        await self._commit("create")
        await self.session.refresh(note)
        return note

    async def update_note(
        self, owner_id: str, note_id: UUID, title: str, content: Optional[str] = None
    ) -> Optional[Note]:
        """Overwrite title and content of an owned note. None if no match."""
        note = await self.get_note(owner_id, note_id)
        if not note:
            return None

        note.title = title
        note.content = content
        # strictly after created_at even if the clock has not advanced
        note.updated_at = max(utcnow(), note.created_at + _MIN_STEP)

        await self._commit("update")
        await self.session.refresh(note)
        return note

    async def delete_note(self, owner_id: str, note_id: UUID) -> bool:
        """Hard-delete an owned note. False if no match."""
        note = await self.get_note(owner_id, note_id)
        if not note:
            return False

        await self.session.delete(note)
        await self._commit("delete")
        return True
