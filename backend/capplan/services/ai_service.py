"""AI capacity insights for a planner week."""
import json
import logging
from datetime import date

from openai import AsyncOpenAI

from capplan.config import get_settings
from capplan.engine.aggregation import week_dates
from capplan.engine.plan_assembler import plan_for
from capplan.schemas.dashboard import InsightResponse
from capplan.services.store import Snapshot

logger = logging.getLogger(__name__)


CAPACITY_ANALYSIS_PROMPT = """You are an expert Engineering Manager assistant.
Analyze the following capacity planning data for the week starting {week_start}.

Data: {data}

Please provide a concise analysis in HTML format (using <ul>, <li>, <strong> tags only, no markdown blocks) covering:
1. **Overloaded Resources**: Anyone with > 8 hours/day or > 40 hours/week.
2. **Underutilized Resources**: Anyone with < 30 hours/week (unless on leave).
3. **Risk Assessment**: Any project dependencies at risk due to lack of allocation?
4. **Suggestions**: 1-2 quick balancing moves.

Keep the tone professional and actionable.
"""


def build_capacity_summary(snapshot: Snapshot, start: date) -> list[dict]:
    """Per-developer load for the week, restricted to the week's business days."""
    days = week_dates(start)
    project_names = {p.id: p.name for p in snapshot.projects}
    summary = []
    for dev in snapshot.developers:
        plan = plan_for(snapshot.plans, dev.id)
        daily_loads = {d.isoformat(): plan.daily_total(d) for d in days if plan.daily_total(d)}
        summary.append(
            {
                "name": dev.name,
                "role": dev.role.value,
                "totalWeeklyHours": sum(daily_loads.values()),
                "assignedProjects": [
                    project_names[p.project_id] for p in plan.projects if p.project_id in project_names
                ],
                "absences": {d.isoformat(): plan.absence_on(d).value for d in days if plan.is_absent(d)},
                "dailyLoads": daily_loads,
            }
        )
    return summary


async def analyze_capacity(snapshot: Snapshot, start: date) -> InsightResponse:
    settings = get_settings()
    if not settings.openai_api_key:
        return InsightResponse(status="unavailable", text="AI insights unavailable: OPENAI_API_KEY not configured")

    week_start = week_dates(start)[0]
    prompt = CAPACITY_ANALYSIS_PROMPT.format(
        week_start=week_start.isoformat(),
        data=json.dumps(build_capacity_summary(snapshot, week_start), indent=2),
    )
    try:
        client = AsyncOpenAI(api_key=settings.openai_api_key)
        response = await client.chat.completions.create(
            model=settings.openai_model,
            messages=[
                {"role": "system", "content": "You answer with HTML fragments only. No markdown."},
                {"role": "user", "content": prompt},
            ],
            temperature=0.3,
        )
        content = response.choices[0].message.content or ""
        return InsightResponse(status="success", text=content.strip() or "No analysis generated.")
    except Exception:
        logger.exception("Capacity analysis failed")
        return InsightResponse(status="error", text="Failed to generate analysis. Please try again later.")
