"""Auth and user schemas."""
from pydantic import BaseModel, EmailStr, Field

from capplan.models.enums import UserRole


class UserCreate(BaseModel):
    id: str | None = Field(None, max_length=64)
    name: str = Field(..., min_length=1, max_length=255)
    role: UserRole = UserRole.TEAM_MATE
    email: EmailStr | None = None
    # Empty password on update keeps the stored credential
    password: str | None = None


class UserLogin(BaseModel):
    email: str  # str to allow internal addresses like admin@capplan.local
    password: str


class UserResponse(BaseModel):
    id: str
    name: str
    role: UserRole
    email: str | None

    class Config:
        from_attributes = True


class Capabilities(BaseModel):
    """What a role may see and do."""

    view_dashboard: bool
    view_team: bool
    team_read_only: bool
    view_projects: bool
    view_risk_log: bool
    edit_planner: bool
    create_project: bool
    edit_project: bool
    delete_project: bool
    view_settings: bool
    landing_view: str

    class Config:
        frozen = True


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
    permissions: Capabilities
