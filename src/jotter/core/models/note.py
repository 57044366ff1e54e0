# Note model for user content
from datetime import datetime
from typing import Optional

from sqlalchemy import CheckConstraint, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel
from .types import UTCDateTime, utcnow

# Column widths; callers validate against these before writing.
OWNER_ID_MAX_LENGTH = 200
TITLE_MAX_LENGTH = 200


class Note(BaseModel):
    """A note owned by exactly one caller identity."""

    __tablename__ = "notes"

    # Opaque identity: the user id in token mode, the header value in header mode.
    # Deliberately no foreign key so both identity modes share one schema.
    owner_id: Mapped[str] = mapped_column(String(OWNER_ID_MAX_LENGTH), nullable=False)

    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False)
    content: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        default=utcnow,
        nullable=False,
    )

    __table_args__ = (
        # serves the default listing order
        Index("idx_notes_owner_created", "owner_id", "created_at"),
        CheckConstraint(f"length(title) <= {TITLE_MAX_LENGTH}", name="ck_notes_title_len"),
        CheckConstraint(f"length(owner_id) <= {OWNER_ID_MAX_LENGTH}", name="ck_notes_owner_len"),
    )

    def __repr__(self) -> str:
        truncated = self.title if len(self.title) <= 30 else (self.title[:30] + "...")
        return f"<Note(title='{truncated}', owner_id={self.owner_id})>"
