"""Append-only project risk history."""
import logging
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from capplan.models.enums import RiskLevel
from capplan.models.risk_log import RiskLog

logger = logging.getLogger(__name__)


async def append_risk_log(
    db: AsyncSession,
    project_id: str,
    risk_level: RiskLevel,
    risk_description: str | None = "",
    updated_by: str | None = None,
) -> RiskLog:
    """Record a risk status; entries are never deduplicated, updated or deleted."""
    entry = RiskLog(
        project_id=project_id,
        date=datetime.now(timezone.utc),
        risk_level=risk_level,
        risk_description=risk_description or "",
        updated_by=updated_by,
    )
    db.add(entry)
    await db.flush()
    await db.refresh(entry)
    logger.info("Risk log %s for project %s by %s", RiskLevel(risk_level).value, project_id, updated_by)
    return entry
