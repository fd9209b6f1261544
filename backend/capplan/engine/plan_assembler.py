"""Join assignments, allocations and absences into per-developer plans.

Plans are derived on every read and never persisted.
"""
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date

from capplan.models.enums import AbsenceType
from capplan.models.planning import Absence, Allocation, Assignment


@dataclass
class AssignedProject:
    project_id: str
    allocations: dict[date, float] = field(default_factory=dict)


@dataclass
class DeveloperPlan:
    developer_id: str
    projects: list[AssignedProject] = field(default_factory=list)
    absences: dict[date, AbsenceType] = field(default_factory=dict)

    def daily_total(self, day: date) -> float:
        """Hours booked on a day across every assigned project."""
        return sum(p.allocations.get(day, 0) for p in self.projects)

    def absence_on(self, day: date) -> AbsenceType | None:
        absence = self.absences.get(day)
        if absence is None or absence == AbsenceType.NONE:
            return None
        return absence

    def is_absent(self, day: date) -> bool:
        return self.absence_on(day) is not None


def assemble_plans(
    developers: Iterable,
    assignments: Iterable[Assignment] = (),
    allocations: Iterable[Allocation] = (),
    absences: Iterable[Absence] = (),
) -> list[DeveloperPlan]:
    """One plan per developer, in developer order.

    Projects keep assignment discovery order. Allocations without a matching
    assignment are not part of any plan.
    """
    hours_by_pair: dict[tuple[str, str], dict[date, float]] = defaultdict(dict)
    for a in allocations:
        hours_by_pair[(a.developer_id, a.project_id)][a.date] = a.hours

    projects_by_dev: dict[str, list[str]] = defaultdict(list)
    for a in assignments:
        if a.project_id not in projects_by_dev[a.developer_id]:
            projects_by_dev[a.developer_id].append(a.project_id)

    absences_by_dev: dict[str, dict[date, AbsenceType]] = defaultdict(dict)
    for a in absences:
        if a.type != AbsenceType.NONE:
            absences_by_dev[a.developer_id][a.date] = AbsenceType(a.type)

    plans = []
    for dev in developers:
        projects = [
            AssignedProject(project_id=pid, allocations=dict(hours_by_pair.get((dev.id, pid), {})))
            for pid in projects_by_dev.get(dev.id, [])
        ]
        plans.append(
            DeveloperPlan(
                developer_id=dev.id,
                projects=projects,
                absences=dict(absences_by_dev.get(dev.id, {})),
            )
        )
    return plans


def plan_for(plans: Iterable[DeveloperPlan], developer_id: str) -> DeveloperPlan:
    """Plan of a developer, or an empty plan when none was assembled."""
    for plan in plans:
        if plan.developer_id == developer_id:
            return plan
    return DeveloperPlan(developer_id=developer_id)
