"""Developer model."""
import uuid

from sqlalchemy import Float, String
from sqlalchemy.orm import Mapped, mapped_column

from capplan.database import Base
from capplan.models.enums import DeveloperRole, DeveloperType, Level, enum_column


class Developer(Base):
    """A person whose daily hours are planned."""

    __tablename__ = "developers"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[DeveloperRole] = mapped_column(enum_column(DeveloperRole), nullable=False)
    level: Mapped[Level] = mapped_column(enum_column(Level), nullable=False)
    type: Mapped[DeveloperType] = mapped_column(
        enum_column(DeveloperType),
        nullable=False,
        default=DeveloperType.INTERNAL,
    )
    avatar: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    # Weak reference: deleting the team leaves the developer unassigned
    team_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    capacity: Mapped[float] = mapped_column(Float, nullable=False, default=8)
