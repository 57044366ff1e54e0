"""Middleware for authentication and other cross-cutting concerns."""

from .auth import HeaderIdentity, JWTBearer, get_current_owner, get_token_identity

__all__ = ["get_current_owner", "get_token_identity", "JWTBearer", "HeaderIdentity"]
