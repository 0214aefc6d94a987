# backend/famapp/agents/smart_task_generator.py

import asyncio
from typing import Awaitable, Callable, List, Optional

from famapp.core.config_loader import settings
from famapp.core.logger import logger
from famapp.models.task_models import SmartTask
from famapp.models.trip_models import TripProfile
from famapp.rules import caps
from famapp.rules.budget_rules import generate_budget_tasks
from famapp.rules.city_rules import generate_curated_city_tasks, get_city_tasks
from famapp.rules.core_rules import generate_core_logistics_tasks
from famapp.rules.destination_rules import generate_destination_tasks
from famapp.rules.dietary_rules import generate_dietary_tasks
from famapp.rules.external_rules import (
    generate_country_data_tasks,
    generate_holiday_tasks,
    generate_weather_tasks,
)
from famapp.rules.family_rules import generate_family_composition_tasks
from famapp.rules.pain_point_rules import generate_pain_point_tasks
from famapp.rules.purpose_rules import generate_trip_purpose_tasks
from famapp.rules.style_rules import generate_travel_style_tasks
from famapp.services.external_data_service import ExternalDataService
from famapp.utils.scoring import prioritize_tasks


RuleGroup = Callable[[TripProfile, int], List[SmartTask]]
ExternalRuleGroup = Callable[[TripProfile, int, ExternalDataService], Awaitable[List[SmartTask]]]


class SmartTaskGenerator:
    """
    Runs every rule group against a trip profile, caps each group's
    contribution, then ranks and truncates the combined list.

    Never raises for a well-formed profile: a failing group is logged and
    contributes nothing, and unavailable external data means no tasks
    from that source.
    """

    def __init__(
        self,
        external_data: Optional[ExternalDataService] = None,
        max_tasks: Optional[int] = None,
    ):
        self.external_data = external_data or ExternalDataService()
        self.max_tasks = max_tasks if max_tasks is not None else settings.max_tasks

    # -----------------------------------------------------------
    # Helpers: guarded group execution
    # -----------------------------------------------------------
    def _run(self, name: str, group: RuleGroup, profile: TripProfile, days: int,
             limit: Optional[int] = None) -> List[SmartTask]:
        try:
            tasks = group(profile, days)
        except Exception as e:
            logger.warning(f"Rule group '{name}' failed, skipping: {e}")
            return []
        return tasks[:limit] if limit is not None else tasks

    async def _run_external(self, name: str, group: ExternalRuleGroup, profile: TripProfile, days: int,
                            limit: Optional[int] = None) -> List[SmartTask]:
        try:
            tasks = await group(profile, days, self.external_data)
        except Exception as e:
            logger.warning(f"External rule group '{name}' failed, continuing without it: {e}")
            return []
        return tasks[:limit] if limit is not None else tasks

    @staticmethod
    def _dedupe(tasks: List[SmartTask]) -> List[SmartTask]:
        """First task wins; a repeat is the same id or the same title from another group."""
        seen_ids = set()
        seen_titles = set()
        unique = []
        for task in tasks:
            title = task.title.strip().lower()
            if task.id in seen_ids or title in seen_titles:
                continue
            seen_ids.add(task.id)
            seen_titles.add(title)
            unique.append(task)
        return unique

    # -----------------------------------------------------------
    # MAIN ENTRY
    # -----------------------------------------------------------
    async def generate_tasks(self, profile: TripProfile, days_until_trip: int) -> List[SmartTask]:
        days = max(0, days_until_trip)
        logger.info(f"Generating tasks: city={profile.city!r}, country={profile.country!r}, days_until_trip={days}")

        all_tasks: List[SmartTask] = []

        # 1. Static profile rules
        all_tasks += self._run("core", generate_core_logistics_tasks, profile, days)
        all_tasks += self._run("purpose", generate_trip_purpose_tasks, profile, days)
        all_tasks += self._run("style", generate_travel_style_tasks, profile, days)
        all_tasks += self._run("composition", generate_family_composition_tasks, profile, days,
                               caps.MAX_COMPOSITION_TASKS)
        if profile.city and profile.has_kids:
            all_tasks += self._run("pain_points", generate_pain_point_tasks, profile, days,
                                   caps.MAX_PAIN_POINT_TASKS)

        # 2. External data (independent lookups, run concurrently)
        external = [
            self._run_external("weather", generate_weather_tasks, profile, days),
            self._run_external("holiday", generate_holiday_tasks, profile, days, caps.MAX_HOLIDAY_TASKS),
        ]
        if profile.country:
            external.append(
                self._run_external("country", generate_country_data_tasks, profile, days, caps.MAX_COUNTRY_TASKS)
            )
        for group_tasks in await asyncio.gather(*external):
            all_tasks += group_tasks

        # 3. City intelligence: registry first, curated picks after
        if profile.city:
            city_tasks = self._run("city", get_city_tasks, profile, days)
            city_tasks += self._run("curated_city", generate_curated_city_tasks, profile, days)
            all_tasks += city_tasks[:caps.MAX_CITY_TASKS]

        # 4. Supplemental preparation
        all_tasks += self._run("destination", generate_destination_tasks, profile, days, caps.MAX_DESTINATION_TASKS)
        all_tasks += self._run("dietary", generate_dietary_tasks, profile, days, caps.MAX_DIETARY_TASKS)
        all_tasks += self._run("budget", generate_budget_tasks, profile, days, caps.MAX_BUDGET_TASKS)

        # 5. Rank and truncate
        ranked = prioritize_tasks(self._dedupe(all_tasks), days)
        result = ranked[:self.max_tasks]

        logger.info(f"Generated {len(result)} tasks ({len(all_tasks)} candidates)")
        return result
