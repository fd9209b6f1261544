"""Assignment, allocation, absence and plan schemas."""
import datetime as dt

from pydantic import BaseModel, Field, field_validator

from capplan.models.enums import AbsenceType


class AssignmentCreate(BaseModel):
    developer_id: str = Field(..., min_length=1)
    project_id: str = Field(..., min_length=1)


class AssignmentResponse(BaseModel):
    developer_id: str
    project_id: str

    class Config:
        from_attributes = True


class AllocationUpsert(BaseModel):
    developer_id: str = Field(..., min_length=1)
    project_id: str = Field(..., min_length=1)
    date: dt.date
    hours: float = Field(..., ge=0, le=24)

    @field_validator("hours")
    @classmethod
    def half_hour_steps(cls, v: float) -> float:
        if (v * 2) != int(v * 2):
            raise ValueError("hours must be a multiple of 0.5")
        return v


class AllocationResponse(BaseModel):
    developer_id: str
    project_id: str
    date: dt.date
    hours: float

    class Config:
        from_attributes = True


class AbsenceSet(BaseModel):
    developer_id: str = Field(..., min_length=1)
    date: dt.date
    type: AbsenceType


class AbsenceResponse(BaseModel):
    developer_id: str
    date: dt.date
    type: AbsenceType

    class Config:
        from_attributes = True


class AssignedProjectResponse(BaseModel):
    project_id: str
    allocations: dict[dt.date, float]

    class Config:
        from_attributes = True


class DeveloperPlanResponse(BaseModel):
    developer_id: str
    projects: list[AssignedProjectResponse]
    absences: dict[dt.date, AbsenceType]

    class Config:
        from_attributes = True
