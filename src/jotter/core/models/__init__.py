"""
Database models for the Jotter application.

SQLAlchemy ORM models defining the schema:
    - User: account with unique username and email
    - Note: a note scoped to one owner identity
"""

from .base import BaseModel
from .note import OWNER_ID_MAX_LENGTH, TITLE_MAX_LENGTH, Note
from .user import User

__all__ = [
    "BaseModel",
    "User",
    "Note",
    "OWNER_ID_MAX_LENGTH",
    "TITLE_MAX_LENGTH",
]
