"""Bearer tokens for logged-in users.

A token names the user (``sub``) and the role they held at login (``role``).
Requests still resolve the role from the stored user, so a role change takes
effect without logging out.
"""
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from capplan.config import get_settings
from capplan.models.user import User


def create_access_token(user: User) -> str:
    settings = get_settings()
    issued = datetime.now(timezone.utc)
    claims = {
        "sub": user.id,
        "role": user.role.value,
        "iat": issued,
        "exp": issued + timedelta(minutes=settings.access_token_expire_minutes),
    }
    return jwt.encode(claims, settings.secret_key, algorithm=settings.algorithm)


def decode_token(token: str) -> dict | None:
    """Return the claims of a valid token, or None if it is malformed, expired or has no subject."""
    settings = get_settings()
    try:
        claims = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        return None
    if not claims.get("sub"):
        return None
    return claims
