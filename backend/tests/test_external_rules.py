# backend/tests/test_external_rules.py

import asyncio
import datetime as dt
import time

from famapp.core.cache import TTLCache
from famapp.core.config_loader import settings
from famapp.models.trip_models import TripProfile
from famapp.rules.external_rules import (
    generate_country_data_tasks,
    generate_holiday_tasks,
    generate_weather_tasks,
)
from famapp.services.external_data_service import ExternalDataService
from fakes import FRANCE_PAYLOAD, FRENCH_HOLIDAYS_2025, StalledSession, forecast_payload


def _ids(tasks):
    return [t.id for t in tasks]


def test_weather_rain_heat_cold(make_service):
    paris = TripProfile(city="Paris")

    rainy, _ = make_service({"7timer": (200, forecast_payload(weather="ishower"))})
    assert _ids(asyncio.run(generate_weather_tasks(paris, 5, rainy))) == ["weather-rain"]

    hot, _ = make_service({"7timer": (200, forecast_payload(t_max=38))})
    assert _ids(asyncio.run(generate_weather_tasks(paris, 5, hot))) == ["weather-heat"]

    cold, _ = make_service({"7timer": (200, forecast_payload(t_max=2, t_min=-4))})
    task = asyncio.run(generate_weather_tasks(paris, 5, cold))[0]
    assert task.id == "weather-cold"
    assert task.category == "packing" and task.priority == "high" and task.days_before_trip == 3


def test_weather_only_counts_first_seven_days(make_service):
    payload = forecast_payload(days=10)
    for day in payload["dataseries"][7:]:
        day["weather"] = "rain"
    service, _ = make_service({"7timer": (200, payload)})

    assert asyncio.run(generate_weather_tasks(TripProfile(city="Paris"), 5, service)) == []


def test_weather_skipped_outside_horizon_or_unknown_city(make_service):
    service, session = make_service({"7timer": (200, forecast_payload(weather="rain"))})

    assert asyncio.run(generate_weather_tasks(TripProfile(city="Paris"), 30, service)) == []
    assert asyncio.run(generate_weather_tasks(TripProfile(city="Atlantis"), 5, service)) == []
    assert session.calls == []


def test_weather_http_500_yields_no_tasks(make_service):
    service, _ = make_service({"7timer": (500, None)})
    assert asyncio.run(generate_weather_tasks(TripProfile(city="Paris"), 5, service)) == []


def test_holiday_inside_trip(make_service):
    service, _ = make_service({"nager": (200, FRENCH_HOLIDAYS_2025)})
    profile = TripProfile(country="France", start_date=dt.date(2025, 7, 10), end_date=dt.date(2025, 7, 20))

    tasks = asyncio.run(generate_holiday_tasks(profile, 10, service))

    assert _ids(tasks) == ["holiday-crowds", "holiday-reservations"]
    assert tasks[0].subtitle == "Bastille Day occurs during your trip"
    assert tasks[1].urgent


def test_holiday_outside_trip_or_missing_dates(make_service):
    service, _ = make_service({"nager": (200, FRENCH_HOLIDAYS_2025)})
    june = TripProfile(country="France", start_date=dt.date(2025, 6, 1), end_date=dt.date(2025, 6, 10))

    assert asyncio.run(generate_holiday_tasks(june, 10, service)) == []
    assert asyncio.run(generate_holiday_tasks(TripProfile(country="France"), 10, service)) == []


def test_holiday_trip_spanning_new_year_fetches_both_years(make_service):
    service, session = make_service({
        "/2025/ES": (200, []),
        "/2026/ES": (200, [{"date": "2026-01-01", "localName": "Año Nuevo", "name": "New Year's Day", "countryCode": "ES"}]),
    })
    profile = TripProfile(country="Spain", start_date=dt.date(2025, 12, 28), end_date=dt.date(2026, 1, 4))

    tasks = asyncio.run(generate_holiday_tasks(profile, 40, service))

    assert session.count("/2025/ES") == 1 and session.count("/2026/ES") == 1
    assert "New Year's Day" in tasks[0].subtitle


def test_country_data_tasks(make_service):
    service, _ = make_service({"restcountries": (200, FRANCE_PAYLOAD)})
    tasks = asyncio.run(generate_country_data_tasks(TripProfile(country="France"), 30, service))

    assert _ids(tasks) == ["currency-exchange", "learn-basic-phrases"]
    assert tasks[0].subtitle == "Get EUR (Euro) for your trip"


def test_country_data_skips_usd_and_english(make_service):
    usa = [{
        "name": {"common": "United States"},
        "currencies": {"USD": {"name": "United States dollar", "symbol": "$"}},
        "languages": {"eng": "English"},
        "timezones": ["UTC-05:00"],
    }]
    service, _ = make_service({"restcountries": (200, usa)})
    assert asyncio.run(generate_country_data_tasks(TripProfile(country="United States"), 30, service)) == []


def test_country_data_offline(offline_service):
    assert asyncio.run(generate_country_data_tasks(TripProfile(country="France"), 30, offline_service)) == []


def test_stalled_lookups_resolve_to_nothing_after_their_deadline(monkeypatch, clock):
    monkeypatch.setattr(settings, "weather_timeout_seconds", 0.2)
    monkeypatch.setattr(settings, "holiday_timeout_seconds", 0.2)
    monkeypatch.setattr(settings, "country_timeout_seconds", 0.2)
    session = StalledSession()
    service = ExternalDataService(cache=TTLCache(clock=clock), session=session)
    profile = TripProfile(city="Paris", country="France", start_date=dt.date(2025, 7, 10), end_date=dt.date(2025, 7, 20))

    async def run_all():
        started = time.monotonic()
        try:
            results = await asyncio.gather(
                generate_weather_tasks(profile, 5, service),
                generate_holiday_tasks(profile, 5, service),
                generate_country_data_tasks(profile, 5, service),
            )
            return results, time.monotonic() - started
        finally:
            session.release()

    results, elapsed = asyncio.run(run_all())

    assert results == [[], [], []]
    assert elapsed < 2
    assert len(session.calls) == 3
