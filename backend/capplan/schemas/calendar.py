"""Calendar event and task schemas."""
import datetime as dt

from pydantic import BaseModel, Field

from capplan.models.enums import EventType


class EventCreate(BaseModel):
    id: str | None = Field(None, max_length=64)
    date: dt.date
    type: EventType
    title: str = Field(..., min_length=1, max_length=255)
    developer_id: str | None = None
    project_id: str | None = None


class EventResponse(BaseModel):
    id: str
    date: dt.date
    type: EventType
    title: str
    developer_id: str | None
    project_id: str | None

    class Config:
        from_attributes = True


class TaskCreate(BaseModel):
    id: str | None = Field(None, max_length=64)
    developer_id: str = Field(..., min_length=1)
    project_id: str = Field(..., min_length=1)
    date: dt.date
    title: str = Field(..., min_length=1, max_length=255)
    url: str = Field(..., min_length=1, max_length=1000)


class TaskResponse(BaseModel):
    id: str
    developer_id: str
    project_id: str
    date: dt.date
    title: str
    url: str

    class Config:
        from_attributes = True


class ReleaseToggle(BaseModel):
    developer_id: str = Field(..., min_length=1)
    project_id: str = Field(..., min_length=1)
    date: dt.date
    title: str = "Release"
