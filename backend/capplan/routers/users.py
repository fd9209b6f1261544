"""User administration API routes."""
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from capplan.auth.deps import get_current_user, require_capability
from capplan.database import get_db
from capplan.models.user import User
from capplan.schemas.auth import UserCreate, UserResponse
from capplan.services.auth_service import delete_user, upsert_user, user_to_response
from capplan.services.store import list_users

router = APIRouter(prefix="/users", tags=["users"])

can_manage_users = require_capability("view_settings")


@router.get("", response_model=list[UserResponse])
async def get_users(
    db: Annotated[AsyncSession, Depends(get_db)],
    user: Annotated[User, Depends(get_current_user)],
):
    return [user_to_response(u) for u in await list_users(db)]


@router.post("", response_model=UserResponse, status_code=201, dependencies=[Depends(can_manage_users)])
async def create_user(
    data: UserCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    return user_to_response(await upsert_user(db, data))


@router.put("/{user_id}", response_model=UserResponse, dependencies=[Depends(can_manage_users)])
async def update_user(
    user_id: str,
    data: UserCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    return user_to_response(await upsert_user(db, data, user_id))


@router.delete("/{user_id}", status_code=204, dependencies=[Depends(can_manage_users)])
async def remove_user(
    user_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    await delete_user(db, user_id)
