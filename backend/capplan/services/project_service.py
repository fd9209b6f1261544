"""Project upserts and deletes."""
import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from capplan.models.enums import RiskLevel
from capplan.models.project import Project, Subproject
from capplan.schemas.project import ProjectCreate
from capplan.services.risk_log_service import append_risk_log

logger = logging.getLogger(__name__)

LOGGED_RISK_LEVELS = (RiskLevel.YELLOW, RiskLevel.RED)


def _subprojects(data: ProjectCreate) -> list[Subproject]:
    return [
        Subproject(position=i, name=s.name.strip(), deadline=s.deadline)
        for i, s in enumerate(data.subprojects)
    ]


async def upsert_project(
    db: AsyncSession,
    data: ProjectCreate,
    project_id: str | None = None,
    updated_by: str | None = None,
) -> Project:
    """Create or overwrite a project.

    The subproject list is replaced wholesale. ``last_status_update`` is
    stamped with the save time unless the caller supplies one, and a Yellow
    or Red save appends a risk log entry in the same transaction.
    """
    project_id = project_id or data.id
    project = await db.get(Project, project_id) if project_id else None
    fields = data.model_dump(exclude={"id", "subprojects", "last_status_update"})
    status_time = data.last_status_update or datetime.now(timezone.utc)

    if project is None:
        project = Project(**fields, last_status_update=status_time, subprojects=_subprojects(data))
        if project_id:
            project.id = project_id
        db.add(project)
    else:
        for key, value in fields.items():
            setattr(project, key, value)
        project.last_status_update = status_time
        project.subprojects.clear()
        await db.flush()
        project.subprojects.extend(_subprojects(data))
    await db.flush()

    if data.risk_level in LOGGED_RISK_LEVELS:
        await append_risk_log(db, project.id, data.risk_level, data.risk_description, updated_by)

    result = await db.execute(
        select(Project)
        .where(Project.id == project.id)
        .options(selectinload(Project.subprojects))
        .execution_options(populate_existing=True)
    )
    return result.scalar_one()


async def delete_project(db: AsyncSession, project_id: str) -> None:
    project = await db.get(Project, project_id)
    if project:
        await db.delete(project)
        logger.info("Deleted project %s", project_id)
