"""Team and developer upserts and deletes."""
import logging

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from capplan.exceptions import NotFoundError
from capplan.models.developer import Developer
from capplan.models.team import Team
from capplan.schemas.team import DeveloperCreate, TeamCreate

logger = logging.getLogger(__name__)


async def upsert_team(db: AsyncSession, data: TeamCreate, team_id: str | None = None) -> Team:
    """Create the team, or overwrite it when the id already exists."""
    team_id = team_id or data.id
    team = await db.get(Team, team_id) if team_id else None
    if team is None:
        team = Team(name=data.name, color=data.color, sort_order=data.sort_order)
        if team_id:
            team.id = team_id
        db.add(team)
    else:
        team.name = data.name
        team.color = data.color
        team.sort_order = data.sort_order
    await db.flush()
    await db.refresh(team)
    return team


async def delete_team(db: AsyncSession, team_id: str) -> None:
    """Delete a team; its developers become unassigned."""
    team = await db.get(Team, team_id)
    if not team:
        raise NotFoundError("Team", team_id)
    result = await db.execute(update(Developer).where(Developer.team_id == team_id).values(team_id=None))
    await db.delete(team)
    logger.info("Deleted team %s, unassigned %d developers", team_id, result.rowcount)


async def upsert_developer(db: AsyncSession, data: DeveloperCreate, developer_id: str | None = None) -> Developer:
    developer_id = developer_id or data.id
    developer = await db.get(Developer, developer_id) if developer_id else None
    fields = data.model_dump(exclude={"id"})
    if developer is None:
        developer = Developer(**fields)
        if developer_id:
            developer.id = developer_id
        db.add(developer)
    else:
        for key, value in fields.items():
            setattr(developer, key, value)
    await db.flush()
    await db.refresh(developer)
    return developer


async def delete_developer(db: AsyncSession, developer_id: str) -> None:
    """Delete a developer. Their assignments, allocations and absences are left in place."""
    developer = await db.get(Developer, developer_id)
    if developer:
        await db.delete(developer)
        logger.info("Deleted developer %s", developer_id)
