"""Security utilities."""

from .jwt import create_access_token, decode_access_token, get_identity_from_token
from .password import hash_password, verify_password

__all__ = [
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_access_token",
    "get_identity_from_token",
]
