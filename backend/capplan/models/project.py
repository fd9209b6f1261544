"""Project and subproject models."""
import uuid
from datetime import date, datetime

from sqlalchemy import Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from capplan.database import Base
from capplan.models.enums import Priority, RiskLevel, Stack, enum_column


class Project(Base):
    """Project entity with its status report fields."""

    __tablename__ = "projects"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    color: Mapped[str] = mapped_column(String(100), nullable=False)
    priority: Mapped[Priority | None] = mapped_column(enum_column(Priority), nullable=True)
    risk_level: Mapped[RiskLevel] = mapped_column(
        enum_column(RiskLevel),
        nullable=False,
        default=RiskLevel.GREEN,
    )
    risk_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    last_status_update: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    short_update: Mapped[str | None] = mapped_column(Text, nullable=True)
    manager_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    stack: Mapped[Stack | None] = mapped_column(enum_column(Stack), nullable=True)

    subprojects: Mapped[list["Subproject"]] = relationship(
        "Subproject",
        back_populates="project",
        order_by="Subproject.position",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def primary_subproject(self) -> "Subproject | None":
        return self.subprojects[0] if self.subprojects else None

    @property
    def deadline(self) -> date | None:
        primary = self.primary_subproject
        return primary.deadline if primary else None


class Subproject(Base):
    """Ordered deliverable of a project; the first one is the primary."""

    __tablename__ = "subprojects"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    project_id: Mapped[str] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    deadline: Mapped[date | None] = mapped_column(Date, nullable=True)

    project: Mapped["Project"] = relationship("Project", back_populates="subprojects")
