"""Assignment, allocation and absence models."""
import datetime as dt

from sqlalchemy import Date, Float, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from capplan.database import Base
from capplan.models.enums import AbsenceType, enum_column


class Assignment(Base):
    """A developer may book hours against a project."""

    __tablename__ = "assignments"
    __table_args__ = (UniqueConstraint("developer_id", "project_id", name="uq_assignment_pair"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    developer_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    project_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)


class Allocation(Base):
    """Hours booked by a developer on a project for one day."""

    __tablename__ = "allocations"
    __table_args__ = (
        UniqueConstraint("developer_id", "project_id", "date", name="uq_allocation_day"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    developer_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    project_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    hours: Mapped[float] = mapped_column(Float, nullable=False)


class Absence(Base):
    """Whole-day absence. A "None" absence is never stored."""

    __tablename__ = "absences"
    __table_args__ = (UniqueConstraint("developer_id", "date", name="uq_absence_day"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    developer_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    type: Mapped[AbsenceType] = mapped_column(enum_column(AbsenceType), nullable=False)
