# backend/famapp/services/external_data_service.py

import threading
from typing import Dict, List, Optional
from urllib.parse import quote

import requests
from pydantic import ValidationError

from famapp.core.cache import TTLCache
from famapp.core.config_loader import settings
from famapp.core.logger import logger
from famapp.models.external_models import CountryInfo, ForecastData, Holiday


WEATHER_PREFIX = "weather_"
HOLIDAY_PREFIX = "holiday_"
COUNTRY_PREFIX = "country_"


class ExternalDataService:
    """
    Weather, public-holiday and country lookups against free public APIs.

    Every lookup is cache-then-fetch-then-degrade: a fresh cache entry is
    returned as-is, otherwise the API is called once with a bounded
    timeout. Network errors, timeouts, non-2xx answers and malformed
    payloads are logged and turned into `None`; nothing is raised to the
    caller. Only validated payloads (and the stable "not found" answers)
    are cached.
    """

    def __init__(
        self,
        cache: Optional[TTLCache] = None,
        session: Optional[requests.Session] = None,
    ):
        self.cache = cache if cache is not None else TTLCache()
        self.session = session
        self.headers = {"User-Agent": settings.user_agent}
        self._local = threading.local()

    def _http(self) -> requests.Session:
        """
        The session for the calling thread. Lookups run concurrently on
        worker threads and a `requests.Session` is not thread-safe, so
        each thread gets its own unless one was injected.
        """
        if self.session is not None:
            return self.session
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            self._local.session = session
        return session

    # -------------------------------------------------------
    # WEATHER FORECAST (7Timer)
    # -------------------------------------------------------
    def get_weather_forecast(self, latitude: float, longitude: float) -> Optional[ForecastData]:
        """
        Multi-day forecast for a coordinate pair.

        Coordinates are rounded to 2 decimals for the cache key so nearby
        lookups for the same city share one entry.
        """
        cache_key = f"{WEATHER_PREFIX}{latitude:.2f}_{longitude:.2f}"

        hit, cached = self.cache.get(cache_key)
        if hit:
            logger.debug(f"Weather data served from cache: {cache_key}")
            return cached

        params = {
            "lat": latitude,
            "lon": longitude,
            "product": "civillight",
            "output": "json",
        }

        try:
            logger.debug(f"Fetching fresh weather data: lat={latitude}, lon={longitude}")
            resp = self._http().get(
                settings.weather_api_url,
                params=params,
                headers=self.headers,
                timeout=settings.weather_timeout_seconds,
            )
            resp.raise_for_status()
            forecast = ForecastData.model_validate(resp.json())
        except requests.exceptions.RequestException as e:
            logger.warning(f"Weather API failed, skipping weather tasks: {e}")
            return None
        except (ValueError, ValidationError) as e:
            logger.warning(f"Invalid weather data structure: {e}")
            return None

        self.cache.set(cache_key, forecast, settings.weather_cache_ttl_seconds)
        logger.info(f"Weather data fetched and cached ({len(forecast.dataseries)} days)")
        return forecast

    # -------------------------------------------------------
    # PUBLIC HOLIDAYS (Nager.Date)
    # -------------------------------------------------------
    def get_public_holidays(self, country_code: str, year: int) -> Optional[List[Holiday]]:
        """
        Public holidays for an ISO country code and year.

        404 means the country/year is unsupported: that answer is cached as
        an empty list. Any other failure returns None and is NOT cached, so
        the next call retries.
        """
        code = country_code.upper()
        cache_key = f"{HOLIDAY_PREFIX}{code}_{year}"

        hit, cached = self.cache.get(cache_key)
        if hit:
            logger.debug(f"Holiday data served from cache: {cache_key}")
            return cached

        url = f"{settings.holiday_api_url}/{year}/{code}"

        try:
            logger.debug(f"Fetching fresh holiday data: {code} {year}")
            resp = self._http().get(url, headers=self.headers, timeout=settings.holiday_timeout_seconds)

            if resp.status_code == 404:
                logger.info(f"Holiday API has no data for {code} {year}, caching empty result")
                self.cache.set(cache_key, [], settings.holiday_cache_ttl_seconds)
                return []

            resp.raise_for_status()
            raw = resp.json()
            if not isinstance(raw, list):
                raise ValueError("Invalid holiday data structure: expected a list")
            holidays = [Holiday.model_validate(item) for item in raw]
        except requests.exceptions.RequestException as e:
            logger.warning(f"Holiday API failed, skipping holiday tasks: {e}")
            return None
        except (ValueError, ValidationError) as e:
            logger.warning(f"Invalid holiday data structure: {e}")
            return None

        self.cache.set(cache_key, holidays, settings.holiday_cache_ttl_seconds)
        logger.info(f"Holiday data fetched and cached ({len(holidays)} holidays for {code} {year})")
        return holidays

    # -------------------------------------------------------
    # COUNTRY METADATA (REST Countries)
    # -------------------------------------------------------
    def get_country_metadata(self, country_name: str) -> Optional[CountryInfo]:
        """
        Currencies, languages and timezones for a country name.

        404 (unknown country) is a stable fact and is cached as None.
        An empty list response is treated as a malformed payload.
        """
        cache_key = f"{COUNTRY_PREFIX}{country_name.strip().lower()}"

        hit, cached = self.cache.get(cache_key)
        if hit:
            logger.debug(f"Country data served from cache: {cache_key}")
            return cached

        url = f"{settings.country_api_url}/{quote(country_name.strip())}"
        params = {"fields": "name,currencies,languages,timezones"}

        try:
            logger.debug(f"Fetching fresh country data: {country_name}")
            resp = self._http().get(
                url,
                params=params,
                headers=self.headers,
                timeout=settings.country_timeout_seconds,
            )

            if resp.status_code == 404:
                logger.info(f"Country not found: {country_name}, caching empty result")
                self.cache.set(cache_key, None, settings.country_cache_ttl_seconds)
                return None

            resp.raise_for_status()
            raw = resp.json()
            if not isinstance(raw, list) or len(raw) == 0:
                raise ValueError("Invalid country data structure: expected a non-empty list")
            country = CountryInfo.model_validate(raw[0])
        except requests.exceptions.RequestException as e:
            logger.warning(f"Country API failed, skipping country tasks: {e}")
            return None
        except (ValueError, ValidationError) as e:
            logger.warning(f"Invalid country data structure: {e}")
            return None

        self.cache.set(cache_key, country, settings.country_cache_ttl_seconds)
        logger.info(f"Country data fetched and cached: {country.name.common or country_name}")
        return country

    # -------------------------------------------------------
    # CACHE MANAGEMENT
    # -------------------------------------------------------
    def get_cache_stats(self) -> Dict[str, int]:
        raw = self.cache.stats((WEATHER_PREFIX, HOLIDAY_PREFIX, COUNTRY_PREFIX))
        return {
            "total_entries": raw["total"],
            "weather_entries": raw[WEATHER_PREFIX],
            "holiday_entries": raw[HOLIDAY_PREFIX],
            "country_entries": raw[COUNTRY_PREFIX],
            "expired_entries": raw["expired"],
        }

    def cleanup_cache(self) -> int:
        removed = self.cache.cleanup()
        if removed:
            logger.info(f"Evicted {removed} expired cache entries")
        return removed

    def clear_cache(self) -> None:
        self.cache.clear()
