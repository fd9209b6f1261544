"""Calendar event and task link models."""
import uuid
import datetime as dt

from sqlalchemy import Date, String
from sqlalchemy.orm import Mapped, mapped_column

from capplan.database import Base
from capplan.models.enums import EventType, enum_column


class CalendarEvent(Base):
    """Release or milestone marker on a planner cell."""

    __tablename__ = "calendar_events"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    type: Mapped[EventType] = mapped_column(enum_column(EventType), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    developer_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    project_id: Mapped[str | None] = mapped_column(String(64), nullable=True)


class Task(Base):
    """Link to an external ticket attached to a (developer, project, date) cell."""

    __tablename__ = "tasks"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    developer_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    project_id: Mapped[str] = mapped_column(String(64), nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    url: Mapped[str] = mapped_column(String(1000), nullable=False)
