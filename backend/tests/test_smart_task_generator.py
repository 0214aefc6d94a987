# backend/tests/test_smart_task_generator.py

import asyncio
import datetime as dt
import time

import pytest

from famapp.agents import smart_task_generator
from famapp.agents.smart_task_generator import SmartTaskGenerator
from famapp.core.cache import TTLCache
from famapp.core.config_loader import settings
from famapp.models.task_models import Priority
from famapp.models.trip_models import TripProfile
from famapp.services.external_data_service import ExternalDataService
from famapp.utils.scoring import score_task
from fakes import FRANCE_PAYLOAD, FRENCH_HOLIDAYS_2025, StalledSession, forecast_payload


ORLANDO_TASK_IDS = {
    "disney-dining-reservations",
    "disney-genie-plus-strategy",
    "city-restaurant-0",
    "city-restaurant-1",
    "city-activity-0",
    "city-activity-1",
}


def _generate(service, profile, days, **kwargs):
    generator = SmartTaskGenerator(external_data=service, **kwargs)
    return asyncio.run(generator.generate_tasks(profile, days))


def _ids(tasks):
    return [t.id for t in tasks]


def _orlando_family():
    return TripProfile(
        city="Orlando",
        trip_purpose="Theme Parks & Entertainment",
        adults=[{"name": "Sam", "age": "36"}, {"name": "Alex", "age": "35"}],
        kids=[{"name": "Leo", "age": "2"}],
    )


PROFILES = [
    TripProfile(),
    _orlando_family(),
    TripProfile(
        city="Paris", country="France", trip_purpose="family-vacation", travel_style="culture",
        budget_level="budget", dietary_preferences=["Vegan"],
        adults=[{"age": "70"}, {"age": "40"}, {"age": "38"}],
        kids=[{"age": "3"}, {"age": "14"}, {"age": "not sure"}],
        start_date=dt.date(2025, 7, 10), end_date=dt.date(2025, 7, 20),
    ),
    TripProfile(city="Tokyo", country="Japan", trip_purpose="event", travel_style="adventure", kids=[{"age": "15"}]),
]


# ----------------------------------------------------------
# GENERAL PROPERTIES
# ----------------------------------------------------------
@pytest.mark.parametrize("profile", PROFILES)
@pytest.mark.parametrize("days", [0, 7, 45, 90, 200])
def test_output_bounded_and_well_formed(offline_service, profile, days):
    tasks = _generate(offline_service, profile, days)

    assert len(tasks) <= 8
    for task in tasks:
        assert task.priority in (Priority.HIGH, Priority.MEDIUM, Priority.LOW)
        assert task.days_before_trip is None or task.days_before_trip >= 0
        assert not task.is_custom


def test_idempotent_for_same_inputs(make_service):
    service, _ = make_service({
        "7timer": (200, forecast_payload(weather="rain")),
        "nager": (200, FRENCH_HOLIDAYS_2025),
        "restcountries": (200, FRANCE_PAYLOAD),
    })
    profile = PROFILES[2]

    first = _generate(service, profile, 10)
    second = _generate(service, profile, 10)

    assert _ids(first) == _ids(second)


def test_sorted_by_score_descending(offline_service):
    tasks = _generate(offline_service, PROFILES[2], 30)
    scores = [score_task(t, 30) for t in tasks]
    assert scores == sorted(scores, reverse=True)


def test_custom_max_tasks(offline_service):
    assert len(_generate(offline_service, PROFILES[2], 30, max_tasks=3)) == 3


# ----------------------------------------------------------
# SCENARIOS
# ----------------------------------------------------------
def test_orlando_toddler_theme_parks(offline_service):
    tasks = _generate(offline_service, _orlando_family(), 45)
    by_id = {t.id: t for t in tasks}

    assert "purpose-theme-parks-lightning-lane" in by_id
    assert by_id["purpose-theme-parks-lightning-lane"].priority == Priority.HIGH
    assert len([t for t in tasks if t.id in ORLANDO_TASK_IDS]) <= 2


def test_bare_profile_only_core_logistics(offline_service):
    tasks = _generate(offline_service, TripProfile(), 90)
    assert _ids(tasks) == ["core-flights", "core-accommodation"]


def test_france_gets_documents_united_states_does_not(offline_service):
    france = _ids(_generate(offline_service, TripProfile(country="France"), 90))
    usa = _ids(_generate(offline_service, TripProfile(country="United States"), 90))

    assert "core-passports" in france and "core-bank-notify" in france
    assert "core-passports" not in usa and "core-bank-notify" not in usa


def test_zero_days_everything_with_threshold_is_urgent(offline_service):
    tasks = _generate(offline_service, PROFILES[2], 0)

    assert tasks
    assert "core-confirmations" in _ids(tasks)
    for task in tasks:
        if task.days_before_trip is not None:
            assert score_task(task, 0) >= 1000


def test_negative_days_clamped_to_zero(offline_service):
    assert _ids(_generate(offline_service, PROFILES[2], -5)) == _ids(_generate(offline_service, PROFILES[2], 0))


# ----------------------------------------------------------
# EXTERNAL DATA & DEGRADATION
# ----------------------------------------------------------
def test_weather_500_adds_no_weather_task(make_service):
    service, session = make_service({"7timer": (500, None)})
    tasks = _generate(service, TripProfile(city="Paris"), 5)

    assert session.count("7timer") == 1
    assert tasks
    assert not any(t.id.startswith("weather-") for t in tasks)


def test_rain_forecast_adds_packing_task(make_service):
    service, _ = make_service({"7timer": (200, forecast_payload(weather="lightrain"))})
    tasks = _generate(service, TripProfile(city="Paris"), 5)
    assert "weather-rain" in _ids(tasks)


def test_external_groups_are_capped(make_service):
    service, _ = make_service({
        "nager": (200, FRENCH_HOLIDAYS_2025),
        "restcountries": (200, FRANCE_PAYLOAD),
    })
    profile = TripProfile(country="France", start_date=dt.date(2025, 7, 10), end_date=dt.date(2025, 7, 20))
    ids = _ids(_generate(service, profile, 20, max_tasks=50))

    assert "holiday-crowds" in ids and "holiday-reservations" not in ids
    assert "currency-exchange" in ids and "learn-basic-phrases" not in ids


def test_failing_rule_group_is_contained(offline_service, monkeypatch):
    def boom(profile, days):
        raise RuntimeError("rule exploded")

    monkeypatch.setattr(smart_task_generator, "generate_trip_purpose_tasks", boom)
    tasks = _generate(offline_service, _orlando_family(), 45)

    assert "core-flights" in _ids(tasks)
    assert not any(t.id.startswith("purpose-") for t in tasks)


def test_duplicate_ids_keep_first():
    tasks = _generate_fixed_tasks()
    unique = SmartTaskGenerator._dedupe(tasks + tasks)
    assert _ids(unique) == _ids(tasks)


def _generate_fixed_tasks():
    from famapp.rules.core_rules import generate_core_logistics_tasks
    return generate_core_logistics_tasks(TripProfile(country="France"), 90)


def test_stalled_external_calls_do_not_hold_up_generation(monkeypatch, clock):
    monkeypatch.setattr(settings, "weather_timeout_seconds", 0.2)
    monkeypatch.setattr(settings, "country_timeout_seconds", 0.2)
    session = StalledSession()
    generator = SmartTaskGenerator(external_data=ExternalDataService(cache=TTLCache(clock=clock), session=session))

    async def run():
        started = time.monotonic()
        try:
            tasks = await generator.generate_tasks(TripProfile(city="Paris", country="France"), 5)
            return tasks, time.monotonic() - started
        finally:
            session.release()

    tasks, elapsed = asyncio.run(run())

    assert elapsed < 2
    assert "core-flights" in _ids(tasks)
    assert not any(t.id.startswith("weather-") or t.id == "currency-exchange" for t in tasks)


def test_same_advice_from_two_groups_listed_once(offline_service):
    profile = TripProfile(city="Lisbon", trip_purpose="family-vacation", travel_style="culture")
    tasks = _generate(offline_service, profile, 10, max_tasks=50)
    titles = [t.title for t in tasks]

    assert titles.count("Plan museum visits before 11am") == 1
    assert "purpose-family-vacation-morning-museums" in _ids(tasks)
    assert "style-culture-morning-museums" not in _ids(tasks)
