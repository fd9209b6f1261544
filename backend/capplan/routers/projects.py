"""Project and risk log API routes."""
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from capplan.auth.deps import get_current_user, require_capability
from capplan.database import get_db
from capplan.models.user import User
from capplan.schemas.project import ProjectCreate, ProjectResponse
from capplan.schemas.risk_log import RiskLogCreate, RiskLogResponse
from capplan.services import project_service
from capplan.services.risk_log_service import append_risk_log
from capplan.services.store import list_projects, list_risk_logs

router = APIRouter(tags=["projects"])


@router.get("/projects", response_model=list[ProjectResponse])
async def get_projects(
    db: Annotated[AsyncSession, Depends(get_db)],
    user: Annotated[User, Depends(get_current_user)],
):
    return await list_projects(db)


@router.post(
    "/projects",
    response_model=ProjectResponse,
    status_code=201,
    dependencies=[Depends(require_capability("create_project"))],
)
async def create_project(
    data: ProjectCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    user: Annotated[User, Depends(get_current_user)],
):
    return await project_service.upsert_project(db, data, updated_by=user.id)


@router.put(
    "/projects/{project_id}",
    response_model=ProjectResponse,
    dependencies=[Depends(require_capability("edit_project"))],
)
async def update_project(
    project_id: str,
    data: ProjectCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    user: Annotated[User, Depends(get_current_user)],
):
    return await project_service.upsert_project(db, data, project_id, updated_by=user.id)


@router.delete(
    "/projects/{project_id}",
    status_code=204,
    dependencies=[Depends(require_capability("delete_project"))],
)
async def delete_project(
    project_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    await project_service.delete_project(db, project_id)


@router.get(
    "/risk-logs",
    response_model=list[RiskLogResponse],
    dependencies=[Depends(require_capability("view_risk_log"))],
)
async def get_risk_logs(
    db: Annotated[AsyncSession, Depends(get_db)],
    project_id: str | None = None,
):
    return await list_risk_logs(db, project_id)


@router.post(
    "/risk-logs",
    response_model=RiskLogResponse,
    status_code=201,
    dependencies=[Depends(require_capability("edit_project"))],
)
async def create_risk_log(
    data: RiskLogCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    user: Annotated[User, Depends(get_current_user)],
):
    return await append_risk_log(db, data.project_id, data.risk_level, data.risk_description, user.id)
