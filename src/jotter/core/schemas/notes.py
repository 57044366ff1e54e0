"""
Note schemas.

API contracts for note CRUD and listing.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NoteCreate(BaseModel):
    """Note creation request schema.

    Length limits come from settings and are checked by NoteService.
    """

    title: str = Field(min_length=1, description="Note title")
    content: Optional[str] = Field(default=None, description="Note content")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Title cannot be empty")
        return v

    model_config = ConfigDict(
        json_schema_extra={"example": {"title": "Groceries", "content": "milk, eggs"}}
    )


class NoteUpdate(NoteCreate):
    """
    Note update request schema.

    Full replacement: omitting ``content`` (or sending null) clears it.
    """


class NoteResponse(BaseModel):
    """Note response schema."""

    id: uuid.UUID = Field(description="Note unique identifier")
    owner_id: str = Field(description="Owner identity")
    title: str = Field(description="Note title")
    content: Optional[str] = Field(default=None, description="Note content")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)


class NoteListResponse(BaseModel):
    """A page (or the whole set) of the caller's notes."""

    items: List[NoteResponse]
    total: int = Field(description="Matching notes, ignoring pagination")
    page: Optional[int] = None
    page_size: Optional[int] = None
    pages: Optional[int] = Field(default=None, description="Page count when paginating")

    @classmethod
    def create(
        cls,
        items: List[NoteResponse],
        total: int,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> "NoteListResponse":
        pages = None
        if page is not None and page_size:
            pages = (total + page_size - 1) // page_size
        return cls(items=items, total=total, page=page, page_size=page_size, pages=pages)
