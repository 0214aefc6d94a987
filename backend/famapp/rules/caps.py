# backend/famapp/rules/caps.py

from typing import Optional

from famapp.models.task_models import Priority, SmartTask, TaskIntelligence


# ----------------------------------------------------------
# PER-GROUP CONTRIBUTION LIMITS
# ----------------------------------------------------------
MAX_COMPOSITION_TASKS = 2
MAX_PAIN_POINT_TASKS = 1
MAX_HOLIDAY_TASKS = 1
MAX_COUNTRY_TASKS = 1
MAX_CITY_TASKS = 2
MAX_DESTINATION_TASKS = 1
MAX_DIETARY_TASKS = 1
MAX_BUDGET_TASKS = 1


def make_task(
    task_id: str,
    title: str,
    subtitle: str,
    *,
    category: str = "planning",
    priority: Priority = Priority.MEDIUM,
    reasoning: str,
    source: str,
    days_before_trip: Optional[int] = None,
    urgent: bool = False,
) -> SmartTask:
    """Build a system-generated (non-custom, incomplete) task."""
    return SmartTask(
        id=task_id,
        title=title,
        subtitle=subtitle,
        category=category,
        urgent=urgent,
        priority=priority,
        days_before_trip=days_before_trip,
        intelligence=TaskIntelligence(reasoning=reasoning, source=source),
    )
