"""Create users and notes tables

Revision ID: 0001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from jotter.core.models.types import GUID, UTCDateTime


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users and notes with the owner/created_at listing index."""
    op.create_table(
        "users",
        sa.Column("id", GUID(), primary_key=True),
        sa.Column("username", sa.String(length=50), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("created_at", UTCDateTime(), nullable=False),
        sa.UniqueConstraint("username"),
        sa.UniqueConstraint("email"),
        sa.CheckConstraint("length(username) <= 50", name="ck_users_username_len"),
        sa.CheckConstraint("length(email) <= 255", name="ck_users_email_len"),
    )
    op.create_index("idx_users_username", "users", ["username"])
    op.create_index("idx_users_email", "users", ["email"])

    op.create_table(
        "notes",
        sa.Column("id", GUID(), primary_key=True),
        sa.Column("owner_id", sa.String(length=200), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("created_at", UTCDateTime(), nullable=False),
        sa.Column("updated_at", UTCDateTime(), nullable=False),
        sa.CheckConstraint("length(title) <= 200", name="ck_notes_title_len"),
        sa.CheckConstraint("length(owner_id) <= 200", name="ck_notes_owner_len"),
    )
    op.create_index("idx_notes_owner_created", "notes", ["owner_id", "created_at"])


def downgrade() -> None:
    """Drop notes and users."""
    op.drop_index("idx_notes_owner_created", table_name="notes")
    op.drop_table("notes")
    op.drop_index("idx_users_email", table_name="users")
    op.drop_index("idx_users_username", table_name="users")
    op.drop_table("users")
