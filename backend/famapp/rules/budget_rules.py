# backend/famapp/rules/budget_rules.py

from typing import List

from famapp.models.task_models import Priority, SmartTask
from famapp.models.trip_models import BudgetLevel, TripProfile
from famapp.rules.caps import make_task


def generate_budget_tasks(profile: TripProfile, days_until_trip: int) -> List[SmartTask]:
    if profile.budget_level != BudgetLevel.BUDGET and "Budget" not in profile.concerns:
        return []

    source = "Budget concerns or budget travel style selected"
    return [
        make_task(
            "budget-research",
            "Research Budget-Friendly Options",
            "Find free activities, happy hours, and local markets",
            priority=Priority.MEDIUM,
            days_before_trip=30,
            reasoning="Budget-conscious travelers benefit from advance planning",
            source=source,
        ),
        make_task(
            "local-transport",
            "Research Public Transportation",
            "Find cost-effective ways to get around locally",
            priority=Priority.MEDIUM,
            days_before_trip=21,
            reasoning="Public transport often saves significant money over taxis",
            source=source,
        ),
    ]
