"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from capplan.config import get_settings
from capplan.database import async_session_maker, close_db, init_db
from capplan.exceptions import CapPlanError
from capplan.logging_config import setup_logging
from capplan.routers import auth, calendar, dashboard, planning, projects, team, users
from capplan.services.auth_service import bootstrap_admin

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level)
    await init_db()
    async with async_session_maker() as db:
        await bootstrap_admin(db, settings.admin_email, settings.admin_password)
        await db.commit()
    logger.info("CapPlan API started (%s)", settings.app_env)
    yield
    await close_db()


app = FastAPI(
    title="CapPlan",
    description="Team capacity planning: allocations, absences, utilization and project risk",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(CapPlanError)
async def capplan_error_handler(request: Request, exc: CapPlanError):
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning("%s %s conflict: %s", request.method, request.url.path, exc.orig)
    return JSONResponse(status_code=409, content={"detail": "Conflicting record"})


app.include_router(auth.router)
app.include_router(users.router)
app.include_router(team.router)
app.include_router(projects.router)
app.include_router(planning.router)
app.include_router(calendar.router)
app.include_router(dashboard.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
