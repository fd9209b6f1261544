"""Auth dependencies for FastAPI."""
from typing import Annotated, Callable

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from capplan.auth.tokens import decode_token
from capplan.auth.rbac import can_edit_team, resolve_permissions
from capplan.database import get_db
from capplan.models.user import User
from capplan.schemas.auth import Capabilities

security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User:
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    payload = decode_token(credentials.credentials)
    if not payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )
    user = await db.get(User, str(payload["sub"]))
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")
    return user


async def get_permissions(user: Annotated[User, Depends(get_current_user)]) -> Capabilities:
    return resolve_permissions(user.role)


def require_capability(name: str) -> Callable:
    """Dependency that rejects users whose role lacks ``name``."""

    async def checker(permissions: Annotated[Capabilities, Depends(get_permissions)]) -> Capabilities:
        if not getattr(permissions, name):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Requires permission: {name}",
            )
        return permissions

    return checker


async def require_team_editor(user: Annotated[User, Depends(get_current_user)]) -> User:
    if not can_edit_team(user.role):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Team management is read-only")
    return user
