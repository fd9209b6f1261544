"""Aggregated views: dashboard, utilization statistics, planner grid and AI insights."""
from datetime import date
from typing import Annotated, Literal

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from capplan.auth.deps import get_current_user, require_capability
from capplan.database import get_db
from capplan.engine.aggregation import AggregationEngine
from capplan.models.user import User
from capplan.schemas.dashboard import (
    ChartResponse,
    DashboardResponse,
    InsightRequest,
    InsightResponse,
    PlannerGrid,
    UtilizationTable,
)
from capplan.services.ai_service import analyze_capacity
from capplan.services.store import load_snapshot

router = APIRouter(tags=["dashboard"])

can_view_dashboard = require_capability("view_dashboard")


@router.get("/dashboard", response_model=DashboardResponse, dependencies=[Depends(can_view_dashboard)])
async def get_dashboard(
    db: Annotated[AsyncSession, Depends(get_db)],
    today: Annotated[date | None, Query(include_in_schema=False)] = None,
):
    snap = await load_snapshot(db)
    return AggregationEngine().dashboard(
        snap.developers,
        snap.plans,
        snap.teams,
        snap.projects,
        snap.events,
        today or date.today(),
    )


@router.get("/stats/utilization", response_model=UtilizationTable, dependencies=[Depends(can_view_dashboard)])
async def get_utilization(
    db: Annotated[AsyncSession, Depends(get_db)],
    view: Literal["weekly", "monthly"] = "weekly",
    reference: date | None = None,
):
    snap = await load_snapshot(db)
    return AggregationEngine().utilization_table(
        snap.developers, snap.plans, snap.teams, reference or date.today(), view
    )


@router.get("/stats/chart", response_model=ChartResponse, dependencies=[Depends(can_view_dashboard)])
async def get_chart(
    db: Annotated[AsyncSession, Depends(get_db)],
    mode: Literal["monthly", "weekly"] = "monthly",
    team_type: Literal["internal", "freelancer"] = "internal",
    reference: date | None = None,
):
    snap = await load_snapshot(db)
    return AggregationEngine().chart(snap.developers, snap.plans, reference or date.today(), mode, team_type)


@router.get("/planner", response_model=PlannerGrid)
async def get_planner(
    db: Annotated[AsyncSession, Depends(get_db)],
    user: Annotated[User, Depends(get_current_user)],
    week: date | None = None,
    biweekly: bool = False,
):
    snap = await load_snapshot(db)
    return AggregationEngine().planner_grid(
        snap.developers,
        snap.plans,
        snap.teams,
        snap.projects,
        snap.events,
        snap.tasks,
        week or date.today(),
        biweekly,
    )


@router.post(
    "/planner/insights",
    response_model=InsightResponse,
    dependencies=[Depends(require_capability("edit_planner"))],
)
async def planner_insights(
    data: InsightRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    snap = await load_snapshot(db)
    return await analyze_capacity(snap, data.week_start or date.today())
