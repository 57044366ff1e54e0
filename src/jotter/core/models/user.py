"""
User model for authentication.
"""

from sqlalchemy import CheckConstraint, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel


class User(BaseModel):
    """User account with username/email/password auth."""

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (
        # Enforce max lengths at DB level (SQLite compatible)
        CheckConstraint("length(username) <= 50", name="ck_users_username_len"),
        CheckConstraint("length(email) <= 255", name="ck_users_email_len"),
        Index("idx_users_username", "username"),
        Index("idx_users_email", "email"),
    )

    def __repr__(self) -> str:
        return f"<User(username='{self.username}')>"

    @property
    def identity(self) -> str:
        """Owner identity stamped on this user's notes."""
        return str(self.id)
