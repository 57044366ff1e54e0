"""User repository for database operations."""

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import ConflictError, UnexpectedError
from ..logging import get_logger
from ..models.user import User

logger = get_logger("repositories.users")


class UserRepository:
    """Repository for user database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _first(self, stmt) -> Optional[User]:
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            logger.error(f"User query failed: {exc}")
            raise UnexpectedError() from exc
        return result.scalar_one_or_none()

    async def create_user(self, user_data: dict) -> User:
        """Create new user.

        A unique-constraint hit (a concurrent registration won the race)
        is reported as a conflict.
        """
        user = User(**user_data)
        self.session.add(user)
        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            logger.warning(f"Duplicate user rejected by database: {user_data.get('username')}")
            raise ConflictError("Username or email already exists") from exc
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.error(f"Failed to create user: {exc}")
            raise UnexpectedError() from exc

        await self.session.refresh(user)
        return user

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID."""
        return await self._first(select(User).where(User.id == user_id))

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        return await self._first(select(User).where(User.username == username))

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email."""
        return await self._first(select(User).where(User.email == email))

    async def is_username_taken(self, username: str) -> bool:
        """Check if username exists."""
        return await self.get_by_username(username) is not None

    async def is_email_taken(self, email: str) -> bool:
        """Check if email exists."""
        return await self.get_by_email(email) is not None
