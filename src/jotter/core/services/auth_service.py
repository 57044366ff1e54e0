"""Authentication service implementation."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ...config import get_settings
from ...security import create_access_token, hash_password, verify_password
from ..exceptions import ConflictError, UnauthenticatedError
from ..logging import get_logger
from ..models.user import User
from ..repositories.user_repository import UserRepository
from ..schemas.auth import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from .interfaces import IAuthService

logger = get_logger("services.auth")


class AuthService(IAuthService):
    """Authentication service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repo = UserRepository(session)
        self.settings = get_settings()

    async def register_user(self, request: RegisterRequest) -> AuthResponse:
        """Register new user.

        Uniqueness is checked before hashing so duplicates fail fast;
        the database constraint still catches concurrent registrations.
        """
        if await self.user_repo.is_username_taken(request.username):
            raise ConflictError("Username already exists", field="username")

        if await self.user_repo.is_email_taken(request.email):
            raise ConflictError("Email already exists", field="email")

        user = await self.user_repo.create_user(
            {
                "username": request.username,
                "email": request.email,
                "password_hash": hash_password(request.password),
            }
        )
        logger.info(f"Registered user {user.id}")

        return self._issue_token(user)

    async def authenticate_user(self, request: LoginRequest) -> AuthResponse:
        """Login user and return a JWT."""
        user = await self.user_repo.get_by_username(request.username)

        # same message for unknown user and wrong password
        if not user or not verify_password(request.password, user.password_hash):
            logger.warning(f"Rejected login for username '{request.username}'")
            raise UnauthenticatedError("Invalid username or password")

        logger.info(f"User {user.id} logged in")
        return self._issue_token(user)

    async def get_current_user(self, identity: str) -> UserResponse:
        """Get the user a token was issued to."""
        try:
            user_id = UUID(identity)
        except ValueError:
            raise UnauthenticatedError("Token subject is not a user")

        user = await self.user_repo.get_by_id(user_id)
        if not user:
            raise UnauthenticatedError("Token subject is not a user")

        return UserResponse.model_validate(user)

    def _issue_token(self, user: User) -> AuthResponse:
        access_token = create_access_token(
            data={"sub": user.identity, "username": user.username, "email": user.email}
        )
        return AuthResponse(
            access_token=access_token,
            token_type="bearer",
            expires_in=self.settings.access_token_expire_minutes * 60,
            user=UserResponse.model_validate(user),
        )
