"""Notes API endpoints."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.notes import NoteCreate, NoteListResponse, NoteResponse, NoteUpdate
from ..core.services import NoteService
from ..database import get_db_session
from ..middleware.auth import get_current_owner

router = APIRouter(prefix="/notes", tags=["notes"])


@router.get("/", response_model=NoteListResponse)
async def list_notes(
    search: Optional[str] = Query(None, max_length=200),
    sort_by: Optional[str] = Query(None, description="title, createdAt or updatedAt"),
    sort_dir: Optional[str] = Query(None, description="asc or desc"),
    page: Optional[int] = Query(None, ge=1),
    page_size: Optional[int] = Query(None, ge=1),
    owner_id: str = Depends(get_current_owner),
    session: AsyncSession = Depends(get_db_session),
):
    """List the caller's notes. Pagination applies only when page and page_size are both set."""
    note_service = NoteService(session)
    return await note_service.list_notes(
        owner_id,
        search=search,
        sort_by=sort_by,
        sort_dir=sort_dir,
        page=page,
        page_size=page_size,
    )


@router.post("/", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
async def create_note(
    request: NoteCreate,
    owner_id: str = Depends(get_current_owner),
    session: AsyncSession = Depends(get_db_session),
):
    """Create a new note."""
    note_service = NoteService(session)
    return await note_service.create_note(owner_id, request)


@router.get("/{note_id}", response_model=NoteResponse)
async def get_note(
    note_id: UUID,
    owner_id: str = Depends(get_current_owner),
    session: AsyncSession = Depends(get_db_session),
):
    """Get a specific note."""
    note_service = NoteService(session)
    return await note_service.get_note(owner_id, note_id)


@router.put("/{note_id}", response_model=NoteResponse)
async def update_note(
    note_id: UUID,
    request: NoteUpdate,
    owner_id: str = Depends(get_current_owner),
    session: AsyncSession = Depends(get_db_session),
):
    """Replace a note's title and content."""
    note_service = NoteService(session)
    return await note_service.update_note(owner_id, note_id, request)


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(
    note_id: UUID,
    owner_id: str = Depends(get_current_owner),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete a note."""
    note_service = NoteService(session)
    await note_service.delete_note(owner_id, note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
