# backend/famapp/rules/destination_rules.py

from typing import List

from famapp.data.destinations import (
    get_climate_category,
    get_power_adapter_info,
    is_european_country,
    is_international,
)
from famapp.models.task_models import Priority, SmartTask
from famapp.models.trip_models import TripProfile
from famapp.rules.caps import make_task


def generate_destination_tasks(profile: TripProfile, days_until_trip: int) -> List[SmartTask]:
    """Country-level preparation: plugs, transport, climate, local customs."""
    if not profile.country:
        return []

    country = profile.country_key
    tasks: List[SmartTask] = []

    if is_international(profile.country):
        tasks.append(make_task(
            "travel-adapter",
            "Get Travel Power Adapter",
            get_power_adapter_info(country),
            category="packing",
            priority=Priority.MEDIUM,
            days_before_trip=21,
            reasoning="Different countries use different electrical outlets",
            source=f"Traveling to {profile.country}",
        ))

    if is_european_country(country):
        tasks.append(make_task(
            "research-transport",
            "Research European Transport Options",
            "Look into rail passes, metro cards, and regional transport",
            priority=Priority.MEDIUM,
            days_before_trip=30,
            reasoning="Europe has excellent public transport that can save money",
            source=f"Traveling to European country: {profile.country}",
        ))

    climate = get_climate_category(country)
    if climate == "tropical":
        tasks.append(make_task(
            "tropical-prep",
            "Tropical Climate Preparation",
            "Pack sunscreen, insect repellent, and lightweight clothing",
            category="health",
            priority=Priority.MEDIUM,
            days_before_trip=21,
            reasoning="Tropical climates require specific health and packing considerations",
            source=f"Tropical destination: {profile.country}",
        ))
    elif climate == "cold":
        tasks.append(make_task(
            "cold-climate-prep",
            "Cold Climate Preparation",
            "Pack thermal layers, waterproof boots, and hats and gloves for the kids",
            category="packing",
            priority=Priority.MEDIUM,
            days_before_trip=21,
            reasoning="Kids lose body heat faster than adults in cold climates",
            source=f"Cold-climate destination: {profile.country}",
        ))

    if country == "spain":
        tasks.append(make_task(
            "spain-siesta",
            "Research Spanish Siesta Schedule",
            "Plan around 2-5pm closures for shops and restaurants",
            category="cultural",
            priority=Priority.LOW,
            days_before_trip=14,
            reasoning="Spanish afternoon siesta affects business hours",
            source="Spain-specific cultural knowledge",
        ))

    return tasks
