"""Project schemas."""
from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator, model_validator

from capplan.models.enums import Priority, RiskLevel, Stack


class SubprojectIn(BaseModel):
    name: str = ""
    deadline: date | None = None


class SubprojectResponse(BaseModel):
    id: str
    name: str
    deadline: date | None

    class Config:
        from_attributes = True


class ProjectCreate(BaseModel):
    id: str | None = Field(None, max_length=64)
    name: str = Field(..., min_length=1, max_length=255)
    color: str = Field(..., min_length=1, max_length=100)
    priority: Priority | None = None
    risk_level: RiskLevel = RiskLevel.GREEN
    risk_description: str | None = None
    short_update: str | None = None
    manager_id: str | None = None
    stack: Stack | None = None
    subprojects: list[SubprojectIn] = []
    # Stamped with the save time when omitted
    last_status_update: datetime | None = None

    @field_validator("subprojects")
    @classmethod
    def drop_blank_subprojects(cls, v: list[SubprojectIn]) -> list[SubprojectIn]:
        return [s for s in v if s.name.strip()]

    @model_validator(mode="after")
    def require_risk_description(self) -> "ProjectCreate":
        if self.risk_level != RiskLevel.GREEN and not (self.risk_description or "").strip():
            raise ValueError("A risk description is required when risk level is Yellow or Red")
        return self


class ProjectResponse(BaseModel):
    id: str
    name: str
    color: str
    priority: Priority | None
    risk_level: RiskLevel
    risk_description: str | None
    last_status_update: datetime | None
    short_update: str | None
    manager_id: str | None
    stack: Stack | None
    subprojects: list[SubprojectResponse]
    deadline: date | None

    class Config:
        from_attributes = True
