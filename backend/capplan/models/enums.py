"""Enumerations shared by models and schemas."""
from enum import Enum as PyEnum

from sqlalchemy import Enum


class DeveloperRole(str, PyEnum):
    BACKEND = "Backend"
    FRONTEND = "Frontend"
    QA = "QA"


class Level(str, PyEnum):
    JUNIOR = "Junior"
    MID = "Mid"
    SENIOR = "Senior"
    LEAD = "Lead"


class DeveloperType(str, PyEnum):
    INTERNAL = "Internal"
    FREELANCER = "Freelancer"


class Priority(str, PyEnum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class RiskLevel(str, PyEnum):
    GREEN = "Green"
    YELLOW = "Yellow"
    RED = "Red"


class Stack(str, PyEnum):
    MAGENTO_1 = "Magento 1"
    MAGENTO_2 = "Magento 2"
    MAGENTO_2_HYVA = "Magento 2 Hyva"
    SHOPIFY = "Shopify"
    WORDPRESS = "Wordpress"
    SHOPWARE = "Shopware"
    CUSTOM = "Custom"


class AbsenceType(str, PyEnum):
    NONE = "None"
    VACATION = "Vacation"
    SICK_LEAVE = "Sick Leave"


class EventType(str, PyEnum):
    RELEASE = "Release"
    MILESTONE = "Milestone"


class UserRole(str, PyEnum):
    ADMIN = "Admin"
    PROJECT_MANAGER = "Project Manager"
    TEAM_MATE = "Team Mate"


def enum_column(enum_cls: type[PyEnum]) -> Enum:
    """Store the enum's display value rather than its member name."""
    return Enum(
        enum_cls,
        values_callable=lambda members: [m.value for m in members],
        native_enum=False,
        length=30,
        validate_strings=True,
    )
