"""Auth API routes."""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from capplan.auth.deps import get_current_user, get_permissions
from capplan.auth.tokens import create_access_token
from capplan.auth.rbac import resolve_permissions
from capplan.database import get_db
from capplan.models.user import User
from capplan.schemas.auth import Capabilities, Token, UserLogin, UserResponse
from capplan.services.auth_service import authenticate_user, user_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=Token)
async def login(
    data: UserLogin,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    user = await authenticate_user(db, data)
    if not user:
        logger.info("Failed login for %s", data.email)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )
    token = create_access_token(user)
    return Token(access_token=token, user=user_to_response(user), permissions=resolve_permissions(user.role))


@router.get("/me", response_model=UserResponse)
async def me(user: Annotated[User, Depends(get_current_user)]):
    return user_to_response(user)


@router.get("/permissions", response_model=Capabilities)
async def permissions(caps: Annotated[Capabilities, Depends(get_permissions)]):
    return caps
