"""Calendar event and task API routes."""
from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from capplan.auth.deps import get_current_user, require_capability
from capplan.database import get_db
from capplan.models.user import User
from capplan.schemas.calendar import EventCreate, EventResponse, ReleaseToggle, TaskCreate, TaskResponse
from capplan.services import calendar_service
from capplan.services.store import list_events, list_tasks

router = APIRouter(tags=["calendar"])

can_edit_planner = require_capability("edit_planner")


@router.get("/events", response_model=list[EventResponse])
async def get_events(
    db: Annotated[AsyncSession, Depends(get_db)],
    user: Annotated[User, Depends(get_current_user)],
    start: date | None = None,
    end: date | None = None,
):
    return await list_events(db, start, end)


@router.post("/events", response_model=EventResponse, status_code=201, dependencies=[Depends(can_edit_planner)])
async def create_event(
    data: EventCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    return await calendar_service.create_event(db, data)


@router.post("/events/release", response_model=EventResponse | None, dependencies=[Depends(can_edit_planner)])
async def toggle_release(
    data: ReleaseToggle,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Mark a planner cell as a release, or clear an existing marker."""
    event = await calendar_service.toggle_release(db, data)
    if event is None:
        return Response(status_code=204)
    return event


@router.delete("/events/{event_id}", status_code=204, dependencies=[Depends(can_edit_planner)])
async def delete_event(
    event_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    await calendar_service.delete_event(db, event_id)


@router.get("/tasks", response_model=list[TaskResponse])
async def get_tasks(
    db: Annotated[AsyncSession, Depends(get_db)],
    user: Annotated[User, Depends(get_current_user)],
    developer_id: str | None = None,
    project_id: str | None = None,
    day: date | None = None,
):
    return await list_tasks(db, developer_id, project_id, day)


@router.post("/tasks", response_model=TaskResponse, status_code=201, dependencies=[Depends(can_edit_planner)])
async def create_task(
    data: TaskCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    return await calendar_service.create_task(db, data)


@router.delete("/tasks/{task_id}", status_code=204, dependencies=[Depends(can_edit_planner)])
async def delete_task(
    task_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    await calendar_service.delete_task(db, task_id)
