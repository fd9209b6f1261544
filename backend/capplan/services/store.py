"""Full-collection reads and the snapshot every aggregated view is computed from."""
from dataclasses import dataclass, field
from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from capplan.engine.plan_assembler import DeveloperPlan, assemble_plans
from capplan.models import (
    Absence,
    Allocation,
    Assignment,
    CalendarEvent,
    Developer,
    Project,
    RiskLog,
    Task,
    Team,
    User,
)


async def list_developers(db: AsyncSession) -> list[Developer]:
    result = await db.execute(select(Developer).order_by(Developer.name))
    return list(result.scalars().all())


async def list_teams(db: AsyncSession) -> list[Team]:
    result = await db.execute(select(Team).order_by(Team.sort_order, Team.name))
    return list(result.scalars().all())


async def list_projects(db: AsyncSession) -> list[Project]:
    result = await db.execute(select(Project).order_by(Project.name))
    return list(result.scalars().all())


async def list_users(db: AsyncSession) -> list[User]:
    result = await db.execute(select(User).order_by(User.name))
    return list(result.scalars().all())


async def list_assignments(db: AsyncSession) -> list[Assignment]:
    # Insertion order is the order projects appear in a developer's plan
    result = await db.execute(select(Assignment).order_by(Assignment.id))
    return list(result.scalars().all())


async def list_allocations(
    db: AsyncSession,
    start: date | None = None,
    end: date | None = None,
    developer_id: str | None = None,
) -> list[Allocation]:
    query = select(Allocation)
    if start is not None:
        query = query.where(Allocation.date >= start)
    if end is not None:
        query = query.where(Allocation.date <= end)
    if developer_id is not None:
        query = query.where(Allocation.developer_id == developer_id)
    result = await db.execute(query.order_by(Allocation.date, Allocation.id))
    return list(result.scalars().all())


async def list_absences(
    db: AsyncSession,
    start: date | None = None,
    end: date | None = None,
    developer_id: str | None = None,
) -> list[Absence]:
    query = select(Absence)
    if start is not None:
        query = query.where(Absence.date >= start)
    if end is not None:
        query = query.where(Absence.date <= end)
    if developer_id is not None:
        query = query.where(Absence.developer_id == developer_id)
    result = await db.execute(query.order_by(Absence.date, Absence.id))
    return list(result.scalars().all())


async def list_events(db: AsyncSession, start: date | None = None, end: date | None = None) -> list[CalendarEvent]:
    query = select(CalendarEvent)
    if start is not None:
        query = query.where(CalendarEvent.date >= start)
    if end is not None:
        query = query.where(CalendarEvent.date <= end)
    result = await db.execute(query.order_by(CalendarEvent.date, CalendarEvent.title))
    return list(result.scalars().all())


async def list_tasks(
    db: AsyncSession,
    developer_id: str | None = None,
    project_id: str | None = None,
    day: date | None = None,
) -> list[Task]:
    query = select(Task)
    if developer_id is not None:
        query = query.where(Task.developer_id == developer_id)
    if project_id is not None:
        query = query.where(Task.project_id == project_id)
    if day is not None:
        query = query.where(Task.date == day)
    result = await db.execute(query.order_by(Task.date, Task.title))
    return list(result.scalars().all())


async def list_risk_logs(db: AsyncSession, project_id: str | None = None) -> list[RiskLog]:
    """Risk history, newest first; optionally for one project."""
    query = select(RiskLog)
    if project_id is not None:
        query = query.where(RiskLog.project_id == project_id)
    result = await db.execute(query.order_by(RiskLog.date.desc(), RiskLog.id))
    return list(result.scalars().all())


@dataclass
class Snapshot:
    """Everything the aggregation engine reads, loaded in one request."""

    developers: list[Developer] = field(default_factory=list)
    teams: list[Team] = field(default_factory=list)
    projects: list[Project] = field(default_factory=list)
    events: list[CalendarEvent] = field(default_factory=list)
    tasks: list[Task] = field(default_factory=list)
    plans: list[DeveloperPlan] = field(default_factory=list)


async def load_snapshot(db: AsyncSession) -> Snapshot:
    developers = await list_developers(db)
    plans = assemble_plans(
        developers,
        await list_assignments(db),
        await list_allocations(db),
        await list_absences(db),
    )
    return Snapshot(
        developers=developers,
        teams=await list_teams(db),
        projects=await list_projects(db),
        events=await list_events(db),
        tasks=await list_tasks(db),
        plans=plans,
    )
