# backend/famapp/rules/external_rules.py

import asyncio
from typing import Any, Callable, List

from famapp.core.config_loader import settings
from famapp.core.logger import logger
from famapp.data.destinations import get_city_coordinates, get_country_code
from famapp.models.task_models import Priority, SmartTask
from famapp.models.trip_models import TripProfile
from famapp.rules.caps import make_task
from famapp.services.external_data_service import ExternalDataService


FORECAST_WINDOW_DAYS = 7

RAIN_DAYS_THRESHOLD = 4
HEAT_DAYS_THRESHOLD = 3
COLD_DAYS_THRESHOLD = 3
EXTREME_HEAT_C = 35
EXTREME_COLD_C = 5


async def _bounded_lookup(fetch: Callable[..., Any], *args: Any, timeout: float) -> Any:
    """
    Run a blocking lookup on a worker thread with a total deadline.

    The `requests` timeout only bounds each socket read, so a server that
    trickles its body can hold a call open far longer. Past the deadline
    the lookup counts as unavailable and resolves to None; the worker
    thread finishes on its own.
    """
    try:
        return await asyncio.wait_for(asyncio.to_thread(fetch, *args), timeout=timeout)
    except asyncio.TimeoutError:
        logger.warning(f"{fetch.__name__} exceeded {timeout}s, continuing without it")
        return None


# -----------------------------------------------------------
# WEATHER
# -----------------------------------------------------------
async def generate_weather_tasks(
    profile: TripProfile, days_until_trip: int, external_data: ExternalDataService
) -> List[SmartTask]:
    """
    Severe-weather packing tasks. Forecasts are only trusted inside the
    forecast horizon, and only for cities with known coordinates.
    """
    if days_until_trip > settings.weather_forecast_horizon_days or not profile.city:
        return []

    coords = get_city_coordinates(profile.city)
    if coords is None:
        return []

    forecast = await _bounded_lookup(
        external_data.get_weather_forecast, *coords, timeout=settings.weather_timeout_seconds
    )
    if forecast is None:
        return []

    days = forecast.dataseries[:FORECAST_WINDOW_DAYS]
    rain_days = [d for d in days if d.is_rainy]
    hot_days = [d for d in days if d.temp2m.max is not None and d.temp2m.max > EXTREME_HEAT_C]
    cold_days = [d for d in days if d.temp2m.max is not None and d.temp2m.max < EXTREME_COLD_C]

    tasks: List[SmartTask] = []

    if len(rain_days) >= RAIN_DAYS_THRESHOLD:
        tasks.append(make_task(
            "weather-rain",
            "Pack umbrella & rain gear",
            f"Heavy rain expected {len(rain_days)} days during trip",
            category="packing",
            priority=Priority.HIGH,
            days_before_trip=3,
            reasoning=f"Significant rain forecast for {profile.city}",
            source="7Timer API (cached)",
        ))

    if len(hot_days) >= HEAT_DAYS_THRESHOLD:
        tasks.append(make_task(
            "weather-heat",
            "Pack extreme heat protection",
            "Temperatures above 35°C expected - sunscreen, hats essential",
            category="packing",
            priority=Priority.HIGH,
            days_before_trip=3,
            reasoning=f"Extreme heat warning for {profile.city}",
            source="7Timer API (cached)",
        ))

    if len(cold_days) >= COLD_DAYS_THRESHOLD:
        tasks.append(make_task(
            "weather-cold",
            "Pack winter gear",
            "Freezing temperatures expected - warm clothes essential",
            category="packing",
            priority=Priority.HIGH,
            days_before_trip=3,
            reasoning=f"Extreme cold warning for {profile.city}",
            source="7Timer API (cached)",
        ))

    return tasks


# -----------------------------------------------------------
# PUBLIC HOLIDAYS
# -----------------------------------------------------------
async def generate_holiday_tasks(
    profile: TripProfile, days_until_trip: int, external_data: ExternalDataService
) -> List[SmartTask]:
    if not profile.country or profile.start_date is None or profile.end_date is None:
        return []

    code = get_country_code(profile.country)
    if code is None:
        return []

    years = range(profile.start_date.year, profile.end_date.year + 1)
    results = await asyncio.gather(
        *(
            _bounded_lookup(external_data.get_public_holidays, code, year, timeout=settings.holiday_timeout_seconds)
            for year in years
        )
    )

    in_trip = [
        holiday
        for holidays in results if holidays
        for holiday in holidays
        if profile.start_date <= holiday.date <= profile.end_date
    ]
    if not in_trip:
        return []

    names = ", ".join(h.name for h in in_trip)
    logger.info(f"{len(in_trip)} public holiday(s) fall inside the trip to {profile.country}")

    return [
        make_task(
            "holiday-crowds",
            "Expect Holiday Crowds",
            f"{names} occurs during your trip",
            priority=Priority.MEDIUM,
            days_before_trip=21,
            reasoning=f"Public holidays in {profile.country} may cause crowds and closures",
            source="Nager.Date Holiday API (cached)",
        ),
        make_task(
            "holiday-reservations",
            "Book Restaurants Early",
            "Holiday periods require advance reservations",
            priority=Priority.HIGH,
            urgent=days_until_trip < 14,
            days_before_trip=14,
            reasoning=f"{names} will increase demand for dining",
            source="Nager.Date Holiday API (cached)",
        ),
    ]


# -----------------------------------------------------------
# COUNTRY METADATA
# -----------------------------------------------------------
async def generate_country_data_tasks(
    profile: TripProfile, days_until_trip: int, external_data: ExternalDataService
) -> List[SmartTask]:
    if not profile.country:
        return []

    country = await _bounded_lookup(
        external_data.get_country_metadata, profile.country, timeout=settings.country_timeout_seconds
    )
    if country is None:
        return []

    tasks: List[SmartTask] = []

    currency_code = country.primary_currency
    if currency_code and currency_code != "USD":
        currency_name = country.currencies[currency_code].name
        tasks.append(make_task(
            "currency-exchange",
            "Exchange Currency",
            f"Get {currency_code} ({currency_name}) for your trip",
            category="financial",
            priority=Priority.MEDIUM,
            days_before_trip=14,
            reasoning=f"{profile.country} uses {currency_code}, different from USD",
            source="REST Countries API (cached)",
        ))

    language = country.primary_language
    if language and language != "English":
        tasks.append(make_task(
            "learn-basic-phrases",
            "Learn Basic Phrases",
            f"Download {language} translation app or phrasebook",
            category="cultural",
            priority=Priority.LOW,
            days_before_trip=21,
            reasoning=f"Primary language in {profile.country} is {language}",
            source="REST Countries API (cached)",
        ))

    return tasks
