"""Risk log schemas."""
import datetime as dt

from pydantic import BaseModel, Field

from capplan.models.enums import RiskLevel


class RiskLogCreate(BaseModel):
    project_id: str = Field(..., min_length=1)
    risk_level: RiskLevel
    risk_description: str = ""


class RiskLogResponse(BaseModel):
    id: str
    project_id: str
    date: dt.datetime
    risk_level: RiskLevel
    risk_description: str
    updated_by: str | None

    class Config:
        from_attributes = True
