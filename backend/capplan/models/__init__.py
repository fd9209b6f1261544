"""SQLAlchemy models."""
from capplan.models.calendar import CalendarEvent, Task
from capplan.models.developer import Developer
from capplan.models.planning import Absence, Allocation, Assignment
from capplan.models.project import Project, Subproject
from capplan.models.risk_log import RiskLog
from capplan.models.team import Team
from capplan.models.user import User

__all__ = [
    "Absence",
    "Allocation",
    "Assignment",
    "CalendarEvent",
    "Developer",
    "Project",
    "RiskLog",
    "Subproject",
    "Task",
    "Team",
    "User",
]
