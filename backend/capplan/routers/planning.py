"""Assignment, allocation, absence and plan API routes."""
from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from capplan.auth.deps import get_current_user, require_capability
from capplan.database import get_db
from capplan.engine.plan_assembler import assemble_plans
from capplan.models.user import User
from capplan.schemas.planning import (
    AbsenceResponse,
    AbsenceSet,
    AllocationResponse,
    AllocationUpsert,
    AssignmentCreate,
    AssignmentResponse,
    DeveloperPlanResponse,
)
from capplan.services import planning_service
from capplan.services.store import list_absences, list_allocations, list_assignments, list_developers

router = APIRouter(tags=["planning"])

can_edit_planner = require_capability("edit_planner")


@router.get("/assignments", response_model=list[AssignmentResponse])
async def get_assignments(
    db: Annotated[AsyncSession, Depends(get_db)],
    user: Annotated[User, Depends(get_current_user)],
):
    return await list_assignments(db)


@router.post("/assignments", response_model=AssignmentResponse, status_code=201, dependencies=[Depends(can_edit_planner)])
async def create_assignment(
    data: AssignmentCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    return await planning_service.create_assignment(db, data.developer_id, data.project_id)


@router.delete(
    "/assignments/{developer_id}/{project_id}",
    status_code=204,
    dependencies=[Depends(can_edit_planner)],
)
async def delete_assignment(
    developer_id: str,
    project_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    await planning_service.delete_assignment(db, developer_id, project_id)


@router.get("/allocations", response_model=list[AllocationResponse])
async def get_allocations(
    db: Annotated[AsyncSession, Depends(get_db)],
    user: Annotated[User, Depends(get_current_user)],
    start: date | None = None,
    end: date | None = None,
    developer_id: str | None = None,
):
    return await list_allocations(db, start, end, developer_id)


@router.put("/allocations", response_model=AllocationResponse, dependencies=[Depends(can_edit_planner)])
async def put_allocation(
    data: AllocationUpsert,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    return await planning_service.upsert_allocation(db, data.developer_id, data.project_id, data.date, data.hours)


@router.get("/absences", response_model=list[AbsenceResponse])
async def get_absences(
    db: Annotated[AsyncSession, Depends(get_db)],
    user: Annotated[User, Depends(get_current_user)],
    start: date | None = None,
    end: date | None = None,
    developer_id: str | None = None,
):
    return await list_absences(db, start, end, developer_id)


@router.put(
    "/absences",
    response_model=AbsenceResponse | None,
    dependencies=[Depends(can_edit_planner)],
)
async def put_absence(
    data: AbsenceSet,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Set a whole-day absence; Vacation or Sick Leave also zeroes that day's bookings."""
    absence = await planning_service.set_absence_with_clear(db, data.developer_id, data.date, data.type)
    if absence is None:
        return Response(status_code=204)
    return absence


@router.get("/plans", response_model=list[DeveloperPlanResponse])
async def get_plans(
    db: Annotated[AsyncSession, Depends(get_db)],
    user: Annotated[User, Depends(get_current_user)],
):
    developers = await list_developers(db)
    return assemble_plans(
        developers,
        await list_assignments(db),
        await list_allocations(db),
        await list_absences(db),
    )
