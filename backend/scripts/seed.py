"""Seed demo teams, developers, users, projects and assignments."""
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from capplan.database import async_session_maker, close_db, init_db
from capplan.models import Developer, Project, Team, User
from capplan.models.enums import DeveloperRole, Level, UserRole
from capplan.schemas.auth import UserCreate
from capplan.services.auth_service import upsert_user
from capplan.services.planning_service import create_assignment

TEAMS = [
    ("t1", "Alpha Squad", "bg-indigo-100 text-indigo-800", 0),
    ("t2", "Beta Force", "bg-emerald-100 text-emerald-800", 1),
]

DEVELOPERS = [
    ("d1", "Alice Chen", DeveloperRole.FRONTEND, Level.SENIOR, "t1"),
    ("d2", "Bob Smith", DeveloperRole.BACKEND, Level.MID, "t1"),
    ("d3", "Charlie Davis", DeveloperRole.QA, Level.JUNIOR, "t2"),
    ("d4", "Diana Prince", DeveloperRole.BACKEND, Level.LEAD, "t2"),
]

USERS = [
    ("u1", "Admin User", UserRole.ADMIN, "admin@company.com", "admin123"),
    ("u2", "PM User", UserRole.PROJECT_MANAGER, "pm@company.com", "pm123"),
    ("u3", "Dev User", UserRole.TEAM_MATE, "dev@company.com", "dev123"),
]

PROJECTS = [
    ("p1", "E-Commerce Platform", "bg-blue-200 text-blue-800", "u2"),
    ("p2", "Internal Dashboard", "bg-green-200 text-green-800", "u2"),
    ("p3", "Mobile App API", "bg-purple-200 text-purple-800", "u1"),
    ("p4", "Website Redesign", "bg-orange-200 text-orange-800", None),
]

ASSIGNMENTS = [("d1", "p1"), ("d1", "p4"), ("d2", "p3"), ("d3", "p1"), ("d3", "p2")]


async def seed():
    await init_db()
    async with async_session_maker() as db:
        for team_id, name, color, sort_order in TEAMS:
            if not await db.get(Team, team_id):
                db.add(Team(id=team_id, name=name, color=color, sort_order=sort_order))
        for dev_id, name, role, level, team_id in DEVELOPERS:
            if not await db.get(Developer, dev_id):
                db.add(
                    Developer(
                        id=dev_id,
                        name=name,
                        role=role,
                        level=level,
                        team_id=team_id,
                        avatar=f"https://picsum.photos/32/32?random={dev_id[1:]}",
                    )
                )
        for user_id, name, role, email, password in USERS:
            if not await db.get(User, user_id):
                await upsert_user(db, UserCreate(id=user_id, name=name, role=role, email=email, password=password))
        for project_id, name, color, manager_id in PROJECTS:
            if not await db.get(Project, project_id):
                db.add(Project(id=project_id, name=name, color=color, manager_id=manager_id))
        await db.flush()
        for developer_id, project_id in ASSIGNMENTS:
            await create_assignment(db, developer_id, project_id)
        await db.commit()
    await close_db()
    print("Seeded demo data (admin@company.com / admin123)")


if __name__ == "__main__":
    asyncio.run(seed())
