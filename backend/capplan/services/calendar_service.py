"""Calendar events and task links."""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from capplan.exceptions import ValidationFailure
from capplan.models.calendar import CalendarEvent, Task
from capplan.models.enums import EventType
from capplan.models.planning import Absence
from capplan.schemas.calendar import EventCreate, ReleaseToggle, TaskCreate

logger = logging.getLogger(__name__)


async def create_event(db: AsyncSession, data: EventCreate) -> CalendarEvent:
    event = CalendarEvent(**data.model_dump(exclude={"id"}))
    if data.id:
        event.id = data.id
    db.add(event)
    await db.flush()
    await db.refresh(event)
    return event


async def delete_event(db: AsyncSession, event_id: str) -> None:
    event = await db.get(CalendarEvent, event_id)
    if event:
        await db.delete(event)


async def toggle_release(db: AsyncSession, data: ReleaseToggle) -> CalendarEvent | None:
    """Add a release marker to a planner cell, or remove the ones already there.

    Returns the new event, or None when markers were removed. Markers
    cannot be added on a day the developer is absent.
    """
    result = await db.execute(
        select(CalendarEvent).where(
            CalendarEvent.type == EventType.RELEASE,
            CalendarEvent.date == data.date,
            CalendarEvent.developer_id == data.developer_id,
            CalendarEvent.project_id == data.project_id,
        )
    )
    existing = list(result.scalars().all())
    if existing:
        for event in existing:
            await db.delete(event)
        logger.info("Removed release marker for %s on %s", data.project_id, data.date)
        return None
    absent = await db.scalar(
        select(Absence.id).where(Absence.developer_id == data.developer_id, Absence.date == data.date)
    )
    if absent is not None:
        raise ValidationFailure("Developer is absent on this day")
    return await create_event(
        db,
        EventCreate(
            date=data.date,
            type=EventType.RELEASE,
            title=data.title,
            developer_id=data.developer_id,
            project_id=data.project_id,
        ),
    )


async def create_task(db: AsyncSession, data: TaskCreate) -> Task:
    task = Task(**data.model_dump(exclude={"id"}))
    if data.id:
        task.id = data.id
    db.add(task)
    await db.flush()
    await db.refresh(task)
    return task


async def delete_task(db: AsyncSession, task_id: str) -> None:
    task = await db.get(Task, task_id)
    if task:
        await db.delete(task)
