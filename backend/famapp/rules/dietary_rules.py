# backend/famapp/rules/dietary_rules.py

from typing import List

from famapp.models.task_models import Priority, SmartTask
from famapp.models.trip_models import TripProfile
from famapp.rules.caps import make_task


RESTRICTED_DIETS = {"Vegetarian", "Vegan", "Gluten-free", "Halal", "Kosher"}
SOURCE = "User-provided dietary preferences"


def generate_dietary_tasks(profile: TripProfile, days_until_trip: int) -> List[SmartTask]:
    needs = profile.dietary_preferences
    if not needs:
        return []

    tasks: List[SmartTask] = []
    joined = ", ".join(needs)

    if any(pref in RESTRICTED_DIETS for pref in needs):
        tasks.append(make_task(
            "dietary-restaurant-research",
            "Research Dietary-Friendly Restaurants",
            f"Find restaurants with {joined} options in {profile.city or 'your destination'}",
            priority=Priority.MEDIUM,
            days_before_trip=21,
            reasoning=f"Family has specific dietary needs: {joined}",
            source=SOURCE,
        ))

    allergies = [pref for pref in needs if "allerg" in pref.lower()]
    if allergies:
        tasks.append(make_task(
            "allergy-emergency-prep",
            "Prepare Allergy Emergency Kit",
            f"Pack medications, learn key phrases in local language about {', '.join(allergies)}",
            category="health",
            priority=Priority.HIGH,
            days_before_trip=14,
            reasoning=f"Family has serious allergies: {', '.join(allergies)}",
            source=SOURCE,
        ))

    if "Diabetic-friendly" in needs:
        tasks.append(make_task(
            "diabetic-meal-planning",
            "Plan Diabetic-Friendly Meal Schedule",
            "Regular meal times, healthy snacks, research local pharmacy locations",
            category="health",
            priority=Priority.HIGH,
            days_before_trip=21,
            reasoning="Family member has diabetes requiring meal planning",
            source=SOURCE,
        ))

    return tasks
