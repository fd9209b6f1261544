"""Team and developer schemas."""
from pydantic import BaseModel, Field

from capplan.models.enums import DeveloperRole, DeveloperType, Level


class TeamCreate(BaseModel):
    id: str | None = Field(None, max_length=64)
    name: str = Field(..., min_length=1, max_length=255)
    color: str = Field(..., min_length=1, max_length=100)
    sort_order: int = 0


class TeamResponse(BaseModel):
    id: str
    name: str
    color: str
    sort_order: int

    class Config:
        from_attributes = True


class DeveloperCreate(BaseModel):
    id: str | None = Field(None, max_length=64)
    name: str = Field(..., min_length=1, max_length=255)
    role: DeveloperRole
    level: Level
    type: DeveloperType = DeveloperType.INTERNAL
    avatar: str = ""
    team_id: str | None = None
    capacity: float = Field(default=8, gt=0, le=24)


class DeveloperResponse(BaseModel):
    id: str
    name: str
    role: DeveloperRole
    level: Level
    type: DeveloperType
    avatar: str
    team_id: str | None
    capacity: float

    class Config:
        from_attributes = True
