"""Capacity and project-health aggregation - deterministic, recomputed on every read.

Weeks start on Monday and hold five business days (ten in biweekly mode).
A developer is either fully present or fully absent on a given day.
"""
import calendar
from collections.abc import Iterable, Sequence
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from capplan.config import Settings, get_settings
from capplan.engine.plan_assembler import DeveloperPlan, plan_for
from capplan.models.enums import AbsenceType, DeveloperType, EventType, RiskLevel
from capplan.schemas.dashboard import (
    AbsentToday,
    AvailableToday,
    ChartBucket,
    ChartResponse,
    DashboardResponse,
    DeadlineItem,
    DeveloperLoad,
    PlannerCell,
    PlannerDay,
    PlannerDeveloperRow,
    PlannerGrid,
    PlannerProjectRow,
    PlannerTeamGroup,
    ProjectStats,
    ProjectSummary,
    ReleaseGroup,
    RiskCounts,
    StaleItem,
    UtilizationRow,
    UtilizationTable,
    WorkloadStats,
)

BUSINESS_DAYS = 5
UNASSIGNED_TEAM = "Unassigned"
NEVER_UPDATED = -1


def week_start(day: date) -> date:
    """Monday on or before ``day``."""
    return day - timedelta(days=day.weekday())


def week_dates(day: date, biweekly: bool = False) -> list[date]:
    """Mon-Fri of the week containing ``day``; two consecutive spans when biweekly."""
    start = week_start(day)
    days = [start + timedelta(days=i) for i in range(BUSINESS_DAYS)]
    if biweekly:
        days += [start + timedelta(days=7 + i) for i in range(BUSINESS_DAYS)]
    return days


def is_workday(day: date) -> bool:
    return day.weekday() < 5


def month_bounds(day: date) -> tuple[date, date]:
    last = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last)


def month_workdays(day: date) -> list[date]:
    first, last = month_bounds(day)
    return [first + timedelta(days=i) for i in range((last - first).days + 1) if is_workday(first + timedelta(days=i))]


def percent(part: float, whole: float) -> int:
    """Whole percentage, halves rounded up; 0 when there is nothing to divide by."""
    if whole <= 0:
        return 0
    ratio = Decimal(str(part)) / Decimal(str(whole)) * Decimal(100)
    return int(ratio.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def deadline_label(days_left: int) -> str:
    if days_left == 0:
        return "Due Today"
    if days_left < 0:
        return f"{abs(days_left)} days overdue"
    return f"{days_left} days"


def stale_label(days_since: int) -> str:
    if days_since == NEVER_UPDATED:
        return "Never updated"
    return f"{days_since} days ago"


def _risk(project: Any) -> RiskLevel:
    return RiskLevel(project.risk_level) if project.risk_level else RiskLevel.GREEN


def _summary(project: Any) -> ProjectSummary:
    return ProjectSummary(
        id=project.id,
        name=project.name,
        color=project.color,
        risk_level=_risk(project),
        risk_description=project.risk_description,
        manager_id=project.manager_id,
        deadline=project.deadline,
    )


class AggregationEngine:
    """Dashboard, statistics and planner aggregation over developers and their plans."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    def daily_capacity(self, developer: Any) -> float:
        return developer.capacity or self.settings.default_daily_capacity

    def _ref(self, developer: Any, teams_by_id: dict[str, Any]) -> dict:
        team = teams_by_id.get(developer.team_id) if developer.team_id else None
        return {
            "developer_id": developer.id,
            "name": developer.name,
            "role": developer.role,
            "team_id": developer.team_id,
            "team_name": team.name if team else UNASSIGNED_TEAM,
        }

    def range_load(self, developer: Any, plan: DeveloperPlan, days: Sequence[date]) -> tuple[float, float]:
        """(booked, capacity) over ``days``; each absent day removes one day of capacity."""
        daily_cap = self.daily_capacity(developer)
        booked = sum(plan.daily_total(d) for d in days)
        absence_hours = sum(daily_cap for d in days if plan.is_absent(d))
        return booked, len(days) * daily_cap - absence_hours

    # --- Dashboard ---

    def workload_stats(
        self,
        developers: Iterable[Any],
        plans: Sequence[DeveloperPlan],
        teams: Iterable[Any],
        today: date,
        biweekly: bool = False,
    ) -> WorkloadStats:
        """Weekly load classification plus today's availability and absences."""
        teams_by_id = {t.id: t for t in teams}
        days = week_dates(today, biweekly)
        total_capacity = 0.0
        total_booked = 0.0
        overloaded: list[DeveloperLoad] = []
        underloaded: list[DeveloperLoad] = []
        available: list[AvailableToday] = []
        absent: list[AbsentToday] = []

        for dev in developers:
            plan = plan_for(plans, dev.id)
            ref = self._ref(dev, teams_by_id)
            daily_cap = self.daily_capacity(dev)

            absence_today = plan.absence_on(today)
            if absence_today is not None:
                absent.append(AbsentToday(**ref, type=absence_today))
            else:
                booked_today = plan.daily_total(today)
                if booked_today < daily_cap:
                    available.append(AvailableToday(**ref, booked=booked_today, available=daily_cap - booked_today))

            booked, capacity = self.range_load(dev, plan, days)
            total_capacity += capacity
            total_booked += booked
            if booked > capacity:
                overloaded.append(DeveloperLoad(**ref, booked=booked, capacity=capacity))
            elif booked < capacity and capacity > 0:
                underloaded.append(DeveloperLoad(**ref, booked=booked, capacity=capacity))

        by_type: dict[AbsenceType, list[AbsentToday]] = {}
        for item in absent:
            by_type.setdefault(item.type, []).append(item)

        return WorkloadStats(
            week_start=days[0],
            dates=days,
            total_capacity=total_capacity,
            total_booked=total_booked,
            utilization=percent(total_booked, total_capacity),
            overloaded=overloaded,
            underloaded=underloaded,
            available_today=available,
            absent_today=absent,
            absent_by_type=by_type,
        )

    def project_stats(self, projects: Iterable[Any], today: date) -> ProjectStats:
        counts = RiskCounts()
        at_risk = []
        deadlines: list[DeadlineItem] = []
        stale: list[StaleItem] = []
        window = self.settings.deadline_warning_days
        stale_after = self.settings.stale_report_days

        for p in projects:
            risk = _risk(p)
            summary = _summary(p)
            if risk == RiskLevel.RED:
                counts.red += 1
            elif risk == RiskLevel.YELLOW:
                counts.yellow += 1
            else:
                counts.green += 1
            if risk in (RiskLevel.RED, RiskLevel.YELLOW):
                at_risk.append(summary)

            if p.deadline is not None:
                days_left = (p.deadline - today).days
                if days_left <= window:
                    deadlines.append(DeadlineItem(project=summary, days_left=days_left, label=deadline_label(days_left)))

            if p.last_status_update is None:
                stale.append(StaleItem(project=summary, days_since=NEVER_UPDATED, label=stale_label(NEVER_UPDATED)))
            else:
                days_since = (today - p.last_status_update.date()).days
                if days_since > stale_after:
                    stale.append(StaleItem(project=summary, days_since=days_since, label=stale_label(days_since)))

        at_risk.sort(key=lambda s: 0 if s.risk_level == RiskLevel.RED else 1)
        deadlines.sort(key=lambda d: d.days_left)
        stale.sort(key=lambda s: (0, 0) if s.days_since == NEVER_UPDATED else (1, -s.days_since))
        return ProjectStats(
            risk_counts=counts,
            at_risk_projects=at_risk,
            deadline_approaching=deadlines,
            stale_reports=stale,
        )

    def releases_today(
        self,
        events: Iterable[Any],
        projects: Iterable[Any],
        developers: Iterable[Any],
        today: date,
    ) -> list[ReleaseGroup]:
        """Today's release markers grouped by project, developers listed once each."""
        projects_by_id = {p.id: p for p in projects}
        developers_by_id = {d.id: d for d in developers}
        groups: dict[str, ReleaseGroup] = {}
        for evt in events:
            if evt.type != EventType.RELEASE or evt.date != today:
                continue
            if not evt.project_id or not evt.developer_id:
                continue
            group = groups.get(evt.project_id)
            if group is None:
                project = projects_by_id.get(evt.project_id)
                group = ReleaseGroup(
                    project_id=evt.project_id,
                    project_name=project.name if project else None,
                    developer_ids=[],
                    developer_names=[],
                )
                groups[evt.project_id] = group
            dev = developers_by_id.get(evt.developer_id)
            if dev is not None and dev.id not in group.developer_ids:
                group.developer_ids.append(dev.id)
                group.developer_names.append(dev.name)
        return list(groups.values())

    def dashboard(
        self,
        developers: Sequence[Any],
        plans: Sequence[DeveloperPlan],
        teams: Sequence[Any],
        projects: Sequence[Any],
        events: Sequence[Any],
        today: date,
    ) -> DashboardResponse:
        return DashboardResponse(
            today=today,
            workload=self.workload_stats(developers, plans, teams, today),
            projects=self.project_stats(projects, today),
            releases_today=self.releases_today(events, projects, developers, today),
        )

    # --- Utilization statistics ---

    def utilization_status(self, utilization: int, capacity: float) -> str:
        if utilization > 100:
            return "Overloaded"
        if utilization < self.settings.underutilized_threshold_pct and capacity > 0:
            return "Underutilized"
        if capacity == 0:
            return "On Leave"
        return "Optimal"

    def utilization_rows(
        self,
        developers: Iterable[Any],
        plans: Sequence[DeveloperPlan],
        teams: Iterable[Any],
        days: Sequence[date],
    ) -> list[UtilizationRow]:
        """Per-developer utilization over present days only, highest first."""
        teams_by_id = {t.id: t for t in teams}
        rows = []
        for dev in developers:
            plan = plan_for(plans, dev.id)
            daily_cap = self.daily_capacity(dev)
            capacity = booked = absence_hours = 0.0
            for d in days:
                if plan.is_absent(d):
                    absence_hours += daily_cap
                else:
                    capacity += daily_cap
                    booked += plan.daily_total(d)
            utilization = percent(booked, capacity)
            rows.append(
                UtilizationRow(
                    **self._ref(dev, teams_by_id),
                    total_capacity=capacity,
                    total_booked=booked,
                    absence_hours=absence_hours,
                    utilization=utilization,
                    status=self.utilization_status(utilization, capacity),
                )
            )
        rows.sort(key=lambda r: r.utilization, reverse=True)
        return rows

    def utilization_table(
        self,
        developers: Sequence[Any],
        plans: Sequence[DeveloperPlan],
        teams: Sequence[Any],
        reference: date,
        view: str = "weekly",
    ) -> UtilizationTable:
        if view == "weekly":
            days = week_dates(reference)
            start, end = days[0], days[-1]
            label = f"{start:%b} {start.day} - {end:%b} {end.day}, {end.year}"
        else:
            days = month_workdays(reference)
            start, end = month_bounds(reference)
            label = f"{reference:%B %Y}"
        internal = [d for d in developers if d.type != DeveloperType.FREELANCER]
        freelancers = [d for d in developers if d.type == DeveloperType.FREELANCER]
        return UtilizationTable(
            view=view,
            start=start,
            end=end,
            label=label,
            internal=self.utilization_rows(internal, plans, teams, days),
            freelancers=self.utilization_rows(freelancers, plans, teams, days),
        )

    def _bucket(self, developers: Sequence[Any], plans: Sequence[DeveloperPlan], days: Sequence[date]) -> tuple[float, float]:
        capacity = booked = 0.0
        for dev in developers:
            plan = plan_for(plans, dev.id)
            daily_cap = self.daily_capacity(dev)
            for d in days:
                if not plan.is_absent(d):
                    capacity += daily_cap
                    booked += plan.daily_total(d)
        return capacity, booked

    def chart(
        self,
        developers: Sequence[Any],
        plans: Sequence[DeveloperPlan],
        reference: date,
        mode: str = "monthly",
        team_type: str = "internal",
    ) -> ChartResponse:
        """Monthly buckets for the reference year, or weekly buckets for the reference month."""
        if team_type == "freelancer":
            targets = [d for d in developers if d.type == DeveloperType.FREELANCER]
        else:
            targets = [d for d in developers if d.type != DeveloperType.FREELANCER]

        buckets = []
        if mode == "monthly":
            for month in range(1, 13):
                month_start = date(reference.year, month, 1)
                capacity, booked = self._bucket(targets, plans, month_workdays(month_start))
                buckets.append(
                    ChartBucket(
                        label=f"{month_start:%b}",
                        full_label=f"{month_start:%B %Y}",
                        capacity=capacity,
                        booked=booked,
                        utilization=percent(booked, capacity),
                    )
                )
        else:
            first, last = month_bounds(reference)
            start = week_start(first)
            index = 0
            while start <= last:
                days = [start + timedelta(days=i) for i in range(BUSINESS_DAYS)]
                days = [d for d in days if first <= d <= last]
                capacity, booked = self._bucket(targets, plans, days)
                index += 1
                buckets.append(
                    ChartBucket(
                        label=f"W{index}",
                        full_label=f"Week {index} ({start:%b} {start.day})",
                        capacity=capacity,
                        booked=booked,
                        utilization=percent(booked, capacity),
                    )
                )
                start += timedelta(days=7)
        return ChartResponse(mode=mode, team_type=team_type, buckets=buckets)

    # --- Planner grid ---

    @staticmethod
    def cell_status(hours: float, absent: bool, daily_target: float) -> str:
        if absent:
            return "absent"
        if hours > daily_target:
            return "over"
        if hours == daily_target:
            return "full"
        if 0 < hours < daily_target:
            return "under"
        return "empty"

    @staticmethod
    def total_status(hours: float, target: float) -> str:
        if hours > target:
            return "over"
        if hours == target:
            return "full"
        return "under"

    def planner_grid(
        self,
        developers: Sequence[Any],
        plans: Sequence[DeveloperPlan],
        teams: Sequence[Any],
        projects: Sequence[Any],
        events: Sequence[Any],
        tasks: Sequence[Any],
        reference: date,
        biweekly: bool = False,
    ) -> PlannerGrid:
        """Developers grouped by team (sort order, unassigned last) with per-day cells."""
        days = week_dates(reference, biweekly)
        day_set = set(days)
        teams_by_id = {t.id: t for t in teams}
        projects_by_id = {p.id: p for p in projects}

        releases: dict[tuple[str, str, date], list[str]] = {}
        for evt in events:
            if evt.type == EventType.RELEASE and evt.date in day_set and evt.developer_id and evt.project_id:
                releases.setdefault((evt.developer_id, evt.project_id, evt.date), []).append(evt.id)
        task_counts: dict[tuple[str, str, date], int] = {}
        for t in tasks:
            if t.date in day_set:
                key = (t.developer_id, t.project_id, t.date)
                task_counts[key] = task_counts.get(key, 0) + 1

        def developer_row(dev: Any) -> PlannerDeveloperRow:
            plan = plan_for(plans, dev.id)
            target = self.daily_capacity(dev)
            day_rows = []
            for d in days:
                total = plan.daily_total(d)
                absence = plan.absence_on(d)
                day_rows.append(
                    PlannerDay(date=d, total=total, absence=absence, status=self.cell_status(total, absence is not None, target))
                )
            weekly_total = sum(r.total for r in day_rows)
            weekly_target = target * len(days)
            project_rows = []
            for assigned in plan.projects:
                project = projects_by_id.get(assigned.project_id)
                cells = []
                for d in days:
                    event_ids = releases.get((dev.id, assigned.project_id, d), [])
                    cells.append(
                        PlannerCell(
                            date=d,
                            hours=assigned.allocations.get(d, 0),
                            release=bool(event_ids),
                            event_ids=event_ids,
                            task_count=task_counts.get((dev.id, assigned.project_id, d), 0),
                        )
                    )
                project_rows.append(
                    PlannerProjectRow(
                        project_id=assigned.project_id,
                        project_name=project.name if project else None,
                        color=project.color if project else None,
                        cells=cells,
                    )
                )
            return PlannerDeveloperRow(
                **self._ref(dev, teams_by_id),
                daily_target=target,
                weekly_target=weekly_target,
                weekly_total=weekly_total,
                weekly_status=self.total_status(weekly_total, weekly_target),
                days=day_rows,
                projects=project_rows,
            )

        groups = []
        for team in sorted(teams, key=lambda t: t.sort_order or 0):
            members = [developer_row(d) for d in developers if d.team_id == team.id]
            if members:
                groups.append(PlannerTeamGroup(team_id=team.id, team_name=team.name, color=team.color, developers=members))
        unassigned = [developer_row(d) for d in developers if not d.team_id or d.team_id not in teams_by_id]
        if unassigned:
            groups.append(PlannerTeamGroup(team_id=None, team_name=UNASSIGNED_TEAM, color=None, developers=unassigned))

        return PlannerGrid(
            mode="biweekly" if biweekly else "weekly",
            week_start=days[0],
            dates=days,
            groups=groups,
        )
