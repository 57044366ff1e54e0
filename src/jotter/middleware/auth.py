"""
Caller identity resolution.

Every note route depends on ``get_current_owner``; the identity it returns
is the owner predicate for all note store calls.
"""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..config import Settings, get_settings
from ..core.exceptions import UnauthenticatedError
from ..core.models.note import OWNER_ID_MAX_LENGTH
from ..security import get_identity_from_token


class JWTBearer(HTTPBearer):
    """Resolve identity from a verified ``Authorization: Bearer`` token."""

    def __init__(self):
        # we raise our own 401 instead of HTTPBearer's default error
        super().__init__(auto_error=False)

    async def __call__(self, request: Request) -> str:
        credentials: Optional[HTTPAuthorizationCredentials] = await super().__call__(request)
        if not credentials:
            raise UnauthenticatedError("Missing bearer token")

        if credentials.scheme.lower() != "bearer":
            raise UnauthenticatedError("Invalid authentication scheme")

        identity = get_identity_from_token(credentials.credentials)
        if not identity:
            raise UnauthenticatedError("Invalid or expired token")

        return identity


class HeaderIdentity:
    """
    Resolve identity from a plain request header.

    Trust-on-faith: anyone can send any value. Only meant for demos and
    for running behind a gateway that sets the header itself.
    """

    def __init__(self, header_name: str = "X-User-Id"):
        self.header_name = header_name

    async def __call__(self, request: Request) -> str:
        value = (request.headers.get(self.header_name) or "").strip()
        if not value:
            raise UnauthenticatedError(f"Missing {self.header_name} header")
        if len(value) > OWNER_ID_MAX_LENGTH:
            raise UnauthenticatedError(
                f"{self.header_name} must be at most {OWNER_ID_MAX_LENGTH} characters"
            )
        return value


jwt_bearer = JWTBearer()


async def get_token_identity(request: Request) -> str:
    """Identity from a bearer token regardless of identity mode (used by /auth/me)."""
    return await jwt_bearer(request)


async def get_current_owner(
    request: Request, settings: Settings = Depends(get_settings)
) -> str:
    """Current caller identity, resolved according to ``settings.identity_mode``."""
    if settings.identity_mode == "header":
        return await HeaderIdentity(settings.identity_header)(request)
    return await jwt_bearer(request)
