"""Aggregated view schemas: dashboard, utilization statistics and planner grid."""
import datetime as dt
from typing import Literal

from pydantic import BaseModel

from capplan.models.enums import AbsenceType, DeveloperRole, RiskLevel

CellStatus = Literal["absent", "over", "full", "under", "empty"]
TotalStatus = Literal["over", "full", "under"]
UtilizationStatus = Literal["Overloaded", "Underutilized", "On Leave", "Optimal"]


class DeveloperRef(BaseModel):
    developer_id: str
    name: str
    role: DeveloperRole
    team_id: str | None
    team_name: str


class DeveloperLoad(DeveloperRef):
    booked: float
    capacity: float


class AvailableToday(DeveloperRef):
    booked: float
    available: float


class AbsentToday(DeveloperRef):
    type: AbsenceType


class WorkloadStats(BaseModel):
    week_start: dt.date
    dates: list[dt.date]
    total_capacity: float
    total_booked: float
    utilization: int
    overloaded: list[DeveloperLoad]
    underloaded: list[DeveloperLoad]
    available_today: list[AvailableToday]
    absent_today: list[AbsentToday]
    absent_by_type: dict[AbsenceType, list[AbsentToday]]


class ProjectSummary(BaseModel):
    id: str
    name: str
    color: str
    risk_level: RiskLevel
    risk_description: str | None
    manager_id: str | None
    deadline: dt.date | None


class DeadlineItem(BaseModel):
    project: ProjectSummary
    days_left: int
    label: str


class StaleItem(BaseModel):
    project: ProjectSummary
    days_since: int
    label: str


class RiskCounts(BaseModel):
    green: int = 0
    yellow: int = 0
    red: int = 0


class ProjectStats(BaseModel):
    risk_counts: RiskCounts
    at_risk_projects: list[ProjectSummary]
    deadline_approaching: list[DeadlineItem]
    stale_reports: list[StaleItem]


class ReleaseGroup(BaseModel):
    project_id: str
    project_name: str | None
    developer_ids: list[str]
    developer_names: list[str]


class DashboardResponse(BaseModel):
    today: dt.date
    workload: WorkloadStats
    projects: ProjectStats
    releases_today: list[ReleaseGroup]


class UtilizationRow(DeveloperRef):
    total_capacity: float
    total_booked: float
    absence_hours: float
    utilization: int
    status: UtilizationStatus


class UtilizationTable(BaseModel):
    view: Literal["weekly", "monthly"]
    start: dt.date
    end: dt.date
    label: str
    internal: list[UtilizationRow]
    freelancers: list[UtilizationRow]


class ChartBucket(BaseModel):
    label: str
    full_label: str
    capacity: float
    booked: float
    utilization: int


class ChartResponse(BaseModel):
    mode: Literal["monthly", "weekly"]
    team_type: Literal["internal", "freelancer"]
    buckets: list[ChartBucket]


class PlannerDay(BaseModel):
    date: dt.date
    total: float
    absence: AbsenceType | None
    status: CellStatus


class PlannerCell(BaseModel):
    date: dt.date
    hours: float
    release: bool
    event_ids: list[str]
    task_count: int


class PlannerProjectRow(BaseModel):
    project_id: str
    project_name: str | None
    color: str | None
    cells: list[PlannerCell]


class PlannerDeveloperRow(DeveloperRef):
    daily_target: float
    weekly_target: float
    weekly_total: float
    weekly_status: TotalStatus
    days: list[PlannerDay]
    projects: list[PlannerProjectRow]


class PlannerTeamGroup(BaseModel):
    team_id: str | None
    team_name: str
    color: str | None
    developers: list[PlannerDeveloperRow]


class PlannerGrid(BaseModel):
    mode: Literal["weekly", "biweekly"]
    week_start: dt.date
    dates: list[dt.date]
    groups: list[PlannerTeamGroup]


class InsightRequest(BaseModel):
    week_start: dt.date | None = None


class InsightResponse(BaseModel):
    status: Literal["success", "error", "unavailable"]
    text: str
