"""Team and developer API routes."""
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from capplan.auth.deps import get_current_user, require_team_editor
from capplan.database import get_db
from capplan.models.user import User
from capplan.schemas.team import DeveloperCreate, DeveloperResponse, TeamCreate, TeamResponse
from capplan.services import team_service
from capplan.services.store import list_developers, list_teams

router = APIRouter(tags=["team"])


@router.get("/teams", response_model=list[TeamResponse])
async def get_teams(
    db: Annotated[AsyncSession, Depends(get_db)],
    user: Annotated[User, Depends(get_current_user)],
):
    return await list_teams(db)


@router.post("/teams", response_model=TeamResponse, status_code=201, dependencies=[Depends(require_team_editor)])
async def create_team(
    data: TeamCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    return await team_service.upsert_team(db, data)


@router.put("/teams/{team_id}", response_model=TeamResponse, dependencies=[Depends(require_team_editor)])
async def update_team(
    team_id: str,
    data: TeamCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    return await team_service.upsert_team(db, data, team_id)


@router.delete("/teams/{team_id}", status_code=204, dependencies=[Depends(require_team_editor)])
async def delete_team(
    team_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    await team_service.delete_team(db, team_id)


@router.get("/developers", response_model=list[DeveloperResponse])
async def get_developers(
    db: Annotated[AsyncSession, Depends(get_db)],
    user: Annotated[User, Depends(get_current_user)],
):
    return await list_developers(db)


@router.post("/developers", response_model=DeveloperResponse, status_code=201, dependencies=[Depends(require_team_editor)])
async def create_developer(
    data: DeveloperCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    return await team_service.upsert_developer(db, data)


@router.put("/developers/{developer_id}", response_model=DeveloperResponse, dependencies=[Depends(require_team_editor)])
async def update_developer(
    developer_id: str,
    data: DeveloperCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    return await team_service.upsert_developer(db, data, developer_id)


@router.delete("/developers/{developer_id}", status_code=204, dependencies=[Depends(require_team_editor)])
async def delete_developer(
    developer_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    await team_service.delete_developer(db, developer_id)
