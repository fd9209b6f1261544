"""Pydantic schemas."""
from capplan.schemas.auth import Capabilities, Token, UserCreate, UserLogin, UserResponse
from capplan.schemas.calendar import EventCreate, EventResponse, ReleaseToggle, TaskCreate, TaskResponse
from capplan.schemas.dashboard import (
    ChartResponse,
    DashboardResponse,
    InsightRequest,
    InsightResponse,
    PlannerGrid,
    UtilizationTable,
)
from capplan.schemas.planning import (
    AbsenceResponse,
    AbsenceSet,
    AllocationResponse,
    AllocationUpsert,
    AssignmentCreate,
    AssignmentResponse,
    DeveloperPlanResponse,
)
from capplan.schemas.project import ProjectCreate, ProjectResponse, SubprojectIn, SubprojectResponse
from capplan.schemas.risk_log import RiskLogCreate, RiskLogResponse
from capplan.schemas.team import DeveloperCreate, DeveloperResponse, TeamCreate, TeamResponse

__all__ = [
    "AbsenceResponse",
    "AbsenceSet",
    "AllocationResponse",
    "AllocationUpsert",
    "AssignmentCreate",
    "AssignmentResponse",
    "Capabilities",
    "ChartResponse",
    "DashboardResponse",
    "DeveloperCreate",
    "DeveloperPlanResponse",
    "DeveloperResponse",
    "EventCreate",
    "EventResponse",
    "InsightRequest",
    "InsightResponse",
    "PlannerGrid",
    "ProjectCreate",
    "ProjectResponse",
    "ReleaseToggle",
    "RiskLogCreate",
    "RiskLogResponse",
    "SubprojectIn",
    "SubprojectResponse",
    "TaskCreate",
    "TaskResponse",
    "TeamCreate",
    "TeamResponse",
    "Token",
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "UtilizationTable",
]
