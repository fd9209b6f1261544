"""Assignment, allocation and absence mutations."""
import logging
from datetime import date

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from capplan.exceptions import ValidationFailure
from capplan.models.enums import AbsenceType
from capplan.models.planning import Absence, Allocation, Assignment

logger = logging.getLogger(__name__)


async def create_assignment(db: AsyncSession, developer_id: str, project_id: str) -> Assignment:
    """Assign a developer to a project; assigning twice returns the existing row."""
    result = await db.execute(
        select(Assignment).where(
            Assignment.developer_id == developer_id,
            Assignment.project_id == project_id,
        )
    )
    assignment = result.scalar_one_or_none()
    if assignment:
        return assignment
    assignment = Assignment(developer_id=developer_id, project_id=project_id)
    db.add(assignment)
    await db.flush()
    await db.refresh(assignment)
    logger.info("Assigned developer %s to project %s", developer_id, project_id)
    return assignment


async def delete_assignment(db: AsyncSession, developer_id: str, project_id: str) -> None:
    """Remove the assignment and every allocation booked against it."""
    await db.execute(
        delete(Allocation).where(
            Allocation.developer_id == developer_id,
            Allocation.project_id == project_id,
        )
    )
    await db.execute(
        delete(Assignment).where(
            Assignment.developer_id == developer_id,
            Assignment.project_id == project_id,
        )
    )
    logger.info("Unassigned developer %s from project %s", developer_id, project_id)


async def upsert_allocation(
    db: AsyncSession,
    developer_id: str,
    project_id: str,
    day: date,
    hours: float,
) -> Allocation:
    """At most one allocation per (developer, project, date); later writes replace hours.

    Absent days only accept zero hours.
    """
    assigned = await db.scalar(
        select(Assignment.id).where(
            Assignment.developer_id == developer_id,
            Assignment.project_id == project_id,
        )
    )
    if assigned is None:
        raise ValidationFailure("Developer is not assigned to this project")
    if hours > 0:
        absent = await db.scalar(
            select(Absence.id).where(Absence.developer_id == developer_id, Absence.date == day)
        )
        if absent is not None:
            raise ValidationFailure("Developer is absent on this day")
    result = await db.execute(
        select(Allocation).where(
            Allocation.developer_id == developer_id,
            Allocation.project_id == project_id,
            Allocation.date == day,
        )
    )
    allocation = result.scalar_one_or_none()
    if allocation:
        allocation.hours = hours
    else:
        allocation = Allocation(developer_id=developer_id, project_id=project_id, date=day, hours=hours)
        db.add(allocation)
    await db.flush()
    await db.refresh(allocation)
    return allocation


async def set_absence(db: AsyncSession, developer_id: str, day: date, absence_type: AbsenceType) -> Absence | None:
    """Upsert the day's absence; ``AbsenceType.NONE`` deletes it and returns None."""
    if absence_type == AbsenceType.NONE:
        await db.execute(delete(Absence).where(Absence.developer_id == developer_id, Absence.date == day))
        return None
    result = await db.execute(select(Absence).where(Absence.developer_id == developer_id, Absence.date == day))
    absence = result.scalar_one_or_none()
    if absence:
        absence.type = absence_type
    else:
        absence = Absence(developer_id=developer_id, date=day, type=absence_type)
        db.add(absence)
    await db.flush()
    await db.refresh(absence)
    return absence


async def set_absence_with_clear(
    db: AsyncSession,
    developer_id: str,
    day: date,
    absence_type: AbsenceType,
) -> Absence | None:
    """Mark a developer absent and zero that day's bookings in one transaction."""
    if absence_type != AbsenceType.NONE:
        cleared = await db.execute(
            update(Allocation)
            .where(Allocation.developer_id == developer_id, Allocation.date == day)
            .values(hours=0)
        )
        if cleared.rowcount:
            logger.info("Cleared %d allocations for %s on %s", cleared.rowcount, developer_id, day)
    return await set_absence(db, developer_id, day, absence_type)
