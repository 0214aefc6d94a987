# backend/tests/test_external_data_service.py

import datetime as dt
import threading

import requests

from famapp.services.external_data_service import ExternalDataService
from fakes import FRANCE_PAYLOAD, FRENCH_HOLIDAYS_2025, FakeSession, forecast_payload


# ----------------------------------------------------------
# WEATHER
# ----------------------------------------------------------
def test_weather_round_trip_served_from_cache(make_service, clock):
    service, session = make_service({"7timer": (200, forecast_payload(weather="lightrain"))})

    first = service.get_weather_forecast(48.8566, 2.3522)
    clock.advance(5 * 60 * 60)          # still inside the 6h TTL
    second = service.get_weather_forecast(48.8566, 2.3522)

    assert first is not None
    assert second == first
    assert session.count("7timer") == 1
    assert first.dataseries[0].is_rainy


def test_weather_refetched_after_ttl(make_service, clock):
    service, session = make_service({"7timer": (200, forecast_payload())})

    service.get_weather_forecast(40.4168, -3.7038)
    clock.advance(6 * 60 * 60 + 1)
    service.get_weather_forecast(40.4168, -3.7038)

    assert session.count("7timer") == 2


def test_weather_request_shape(make_service):
    service, session = make_service({"7timer": (200, forecast_payload())})
    service.get_weather_forecast(51.5074, -0.1278)

    call = session.calls[0]
    assert call["params"]["product"] == "civillight"
    assert call["params"]["output"] == "json"
    assert call["timeout"] == 10
    assert "User-Agent" in call["headers"]


def test_weather_http_500_returns_none_and_is_not_cached(make_service):
    service, session = make_service({"7timer": (500, {"error": "boom"})})

    assert service.get_weather_forecast(48.85, 2.35) is None
    assert service.get_weather_forecast(48.85, 2.35) is None
    assert session.count("7timer") == 2


def test_weather_timeout_returns_none(make_service):
    service, _ = make_service({"7timer": requests.exceptions.Timeout("slow")})
    assert service.get_weather_forecast(48.85, 2.35) is None


def test_weather_missing_dataseries_is_invalid(make_service):
    service, _ = make_service({"7timer": (200, {"product": "civillight"})})
    assert service.get_weather_forecast(48.85, 2.35) is None
    assert service.get_cache_stats()["weather_entries"] == 0


# ----------------------------------------------------------
# HOLIDAYS
# ----------------------------------------------------------
def test_holidays_parsed_and_cached(make_service):
    service, session = make_service({"nager": (200, FRENCH_HOLIDAYS_2025)})

    holidays = service.get_public_holidays("fr", 2025)
    again = service.get_public_holidays("FR", 2025)

    assert [h.name for h in holidays] == ["Bastille Day", "Assumption Day"]
    assert holidays[0].date == dt.date(2025, 7, 14)
    assert again == holidays
    assert session.count("/2025/FR") == 1


def test_holidays_404_caches_empty_list(make_service):
    service, session = make_service({"nager": (404, None)})

    assert service.get_public_holidays("XX", 2025) == []
    assert service.get_public_holidays("XX", 2025) == []
    assert session.count("nager") == 1


def test_holidays_non_list_payload_not_cached(make_service):
    service, session = make_service({"nager": (200, {"unexpected": True})})

    assert service.get_public_holidays("FR", 2025) is None
    assert service.get_public_holidays("FR", 2025) is None
    assert session.count("nager") == 2


def test_holidays_connection_error_returns_none(offline_service):
    assert offline_service.get_public_holidays("FR", 2025) is None


# ----------------------------------------------------------
# COUNTRY
# ----------------------------------------------------------
def test_country_metadata_first_element(make_service):
    service, session = make_service({"restcountries": (200, FRANCE_PAYLOAD)})

    country = service.get_country_metadata("France")

    assert country.primary_currency == "EUR"
    assert country.primary_language == "French"
    assert session.calls[0]["params"] == {"fields": "name,currencies,languages,timezones"}


def test_country_404_caches_none(make_service):
    service, session = make_service({"restcountries": (404, {"status": 404})})

    assert service.get_country_metadata("Atlantis") is None
    assert service.get_country_metadata("atlantis") is None
    assert session.count("restcountries") == 1
    assert service.get_cache_stats()["country_entries"] == 1


def test_country_empty_list_is_invalid_and_not_cached(make_service):
    service, session = make_service({"restcountries": (200, [])})

    assert service.get_country_metadata("France") is None
    assert service.get_country_metadata("France") is None
    assert session.count("restcountries") == 2


# ----------------------------------------------------------
# CACHE MANAGEMENT
# ----------------------------------------------------------
def test_cache_stats_cleanup_and_clear(make_service, clock):
    service, _ = make_service({
        "7timer": (200, forecast_payload()),
        "nager": (200, FRENCH_HOLIDAYS_2025),
        "restcountries": (200, FRANCE_PAYLOAD),
    })
    service.get_weather_forecast(48.85, 2.35)
    service.get_public_holidays("FR", 2025)
    service.get_country_metadata("France")

    assert service.get_cache_stats() == {
        "total_entries": 3,
        "weather_entries": 1,
        "holiday_entries": 1,
        "country_entries": 1,
        "expired_entries": 0,
    }

    clock.advance(8 * 24 * 60 * 60)     # weather (6h) and country (7d) expire, holidays (30d) remain
    assert service.get_cache_stats()["expired_entries"] == 2
    assert service.cleanup_cache() == 2
    assert service.get_cache_stats()["total_entries"] == 1

    service.clear_cache()
    assert service.get_cache_stats()["total_entries"] == 0


# ----------------------------------------------------------
# HTTP SESSIONS
# ----------------------------------------------------------
def test_each_worker_thread_gets_its_own_session():
    service = ExternalDataService()
    seen = []

    def grab():
        seen.append(service._http())

    workers = [threading.Thread(target=grab) for _ in range(2)]
    for w in workers:
        w.start()
    for w in workers:
        w.join()

    assert isinstance(seen[0], requests.Session)
    assert seen[0] is not seen[1]
    assert service._http() is service._http()


def test_injected_session_is_used_everywhere():
    session = FakeSession()
    service = ExternalDataService(session=session)
    assert service._http() is session
