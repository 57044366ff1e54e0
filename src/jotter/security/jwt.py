"""JWT access token utilities."""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt

from ..config import get_settings


def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """Create a signed access token for the given claims (``sub`` required)."""
    settings = get_settings()
    to_encode = data.copy()

    now = datetime.now(timezone.utc)
    if expires_delta:
        expire = now + expires_delta
    else:
        expire = now + timedelta(minutes=settings.access_token_expire_minutes)

    to_encode.update(
        {
            "exp": expire,
            "iat": now,
            "iss": settings.token_issuer,
            "aud": settings.token_audience,
            "type": "access",
            "jti": str(uuid.uuid4()),
        }
    )
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Verify signature, expiry, issuer and audience. Returns claims or None."""
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.algorithm],
            audience=settings.token_audience,
            issuer=settings.token_issuer,
        )
    except JWTError:
        return None

    if payload.get("type") != "access":
        return None
    return payload


def get_identity_from_token(token: str) -> Optional[str]:
    """Extract the caller identity (``sub``) from a valid token."""
    payload = decode_access_token(token)
    if not payload:
        return None

    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject.strip():
        return None
    return subject
