"""Authentication and user administration service."""
import logging

import bcrypt
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from capplan.exceptions import ConflictError, NotFoundError
from capplan.models.enums import UserRole
from capplan.models.user import User
from capplan.schemas.auth import UserCreate, UserLogin, UserResponse

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def check_password(password: str, hashed: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))


async def find_user_by_email(db: AsyncSession, email: str) -> User | None:
    result = await db.execute(select(User).where(func.lower(User.email) == email.strip().lower()))
    return result.scalar_one_or_none()


async def upsert_user(db: AsyncSession, data: UserCreate, user_id: str | None = None) -> User:
    """Create or overwrite a user. An empty password keeps the stored hash."""
    user_id = user_id or data.id
    user = await db.get(User, user_id) if user_id else None
    if data.email:
        existing = await find_user_by_email(db, data.email)
        if existing and existing is not user:
            raise ConflictError("Email already registered")
    if user is None:
        user = User(name=data.name, role=data.role, email=data.email)
        if user_id:
            user.id = user_id
        db.add(user)
    else:
        user.name = data.name
        user.role = data.role
        user.email = data.email
    if data.password:
        user.hashed_password = hash_password(data.password)
    await db.flush()
    await db.refresh(user)
    return user


async def delete_user(db: AsyncSession, user_id: str) -> None:
    user = await db.get(User, user_id)
    if not user:
        raise NotFoundError("User", user_id)
    remaining = await db.scalar(select(func.count()).select_from(User))
    if remaining <= 1:
        raise ConflictError("Cannot delete the last user")
    await db.delete(user)
    logger.info("Deleted user %s", user_id)


async def authenticate_user(db: AsyncSession, data: UserLogin) -> User | None:
    """Authenticate user by email and password."""
    user = await find_user_by_email(db, data.email)
    if not user or not user.hashed_password:
        return None
    if not check_password(data.password, user.hashed_password):
        return None
    return user


def user_to_response(user: User) -> UserResponse:
    return UserResponse(id=user.id, name=user.name, role=user.role, email=user.email)


async def bootstrap_admin(db: AsyncSession, email: str, password: str) -> User | None:
    """Create the first Admin when no user exists yet."""
    if not password:
        return None
    if await db.scalar(select(func.count()).select_from(User)):
        return None
    user = await upsert_user(db, UserCreate(name="Admin User", role=UserRole.ADMIN, email=email, password=password))
    logger.info("Created initial admin %s", email)
    return user
