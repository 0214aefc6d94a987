# backend/famapp/data/destinations.py

from typing import Dict, List, Optional, Tuple


# ----------------------------------------------------------
# CITY COORDINATES (lat, lon) for weather lookups
# ----------------------------------------------------------
CITY_COORDINATES: Dict[str, Tuple[float, float]] = {
    "madrid": (40.4168, -3.7038),
    "barcelona": (41.3851, 2.1734),
    "paris": (48.8566, 2.3522),
    "london": (51.5074, -0.1278),
    "rome": (41.9028, 12.4964),
    "tokyo": (35.6762, 139.6503),
    "new york": (40.7128, -74.0060),
    "los angeles": (34.0522, -118.2437),
    "orlando": (28.5384, -81.3789),
    "san diego": (32.7157, -117.1611),
    "amsterdam": (52.3676, 4.9041),
    "berlin": (52.5200, 13.4050),
    "vienna": (48.2082, 16.3738),
    "prague": (50.0755, 14.4378),
    "lisbon": (38.7223, -9.1393),
    "copenhagen": (55.6761, 12.5683),
    "stockholm": (59.3293, 18.0686),
    "reykjavik": (64.1466, -21.9426),
}


# ----------------------------------------------------------
# COUNTRY NAME -> ISO 3166 alpha-2 (holiday lookups)
# ----------------------------------------------------------
COUNTRY_CODES: Dict[str, str] = {
    "spain": "ES",
    "france": "FR",
    "italy": "IT",
    "germany": "DE",
    "united kingdom": "GB",
    "uk": "GB",
    "england": "GB",
    "netherlands": "NL",
    "denmark": "DK",
    "portugal": "PT",
    "austria": "AT",
    "czech republic": "CZ",
    "sweden": "SE",
    "iceland": "IS",
    "japan": "JP",
    "united states": "US",
    "usa": "US",
    "us": "US",
    "canada": "CA",
    "mexico": "MX",
    "australia": "AU",
}

US_ALIASES = ("united states", "usa", "us", "united states of america")


# ----------------------------------------------------------
# POWER ADAPTERS
# ----------------------------------------------------------
POWER_ADAPTERS: Dict[str, str] = {
    "spain": "Type C and F outlets (European standard)",
    "france": "Type C and E outlets (European standard)",
    "germany": "Type C and F outlets (European standard)",
    "italy": "Type C, F, and L outlets",
    "united kingdom": "Type G outlets (3-prong)",
    "japan": "Type A and B outlets",
    "china": "Type A, C, and I outlets",
    "australia": "Type I outlets",
}

DEFAULT_ADAPTER_INFO = "Research local outlet types for your destination"


# ----------------------------------------------------------
# REGIONS & CLIMATE
# ----------------------------------------------------------
EUROPEAN_COUNTRIES = {
    "spain", "france", "germany", "italy", "portugal", "netherlands",
    "belgium", "austria", "switzerland", "czech republic", "poland",
    "hungary", "croatia", "greece", "norway", "sweden", "denmark",
}

CLIMATE_BUCKETS: Dict[str, List[str]] = {
    "tropical": ["thailand", "malaysia", "indonesia", "philippines", "vietnam", "costa rica", "colombia", "brazil"],
    "cold": ["norway", "sweden", "finland", "iceland", "russia", "canada"],
    "arid": ["egypt", "morocco", "jordan", "israel", "uae", "saudi arabia"],
}

# Cities where must-see attractions and restaurants sell out
POPULAR_DESTINATIONS = ("paris", "london", "rome", "barcelona", "tokyo", "new york")


def get_city_coordinates(city: Optional[str]) -> Optional[Tuple[float, float]]:
    if not city:
        return None
    return CITY_COORDINATES.get(city.strip().lower())


def get_country_code(country: Optional[str]) -> Optional[str]:
    if not country:
        return None
    return COUNTRY_CODES.get(country.strip().lower())


def is_domestic_us(country: Optional[str]) -> bool:
    return bool(country) and country.strip().lower() in US_ALIASES


def is_international(country: Optional[str]) -> bool:
    """A trip is international when a country is given and it isn't the US."""
    return bool(country and country.strip()) and not is_domestic_us(country)


def get_power_adapter_info(country: str) -> str:
    return POWER_ADAPTERS.get(country.strip().lower(), DEFAULT_ADAPTER_INFO)


def is_european_country(country: str) -> bool:
    return country.strip().lower() in EUROPEAN_COUNTRIES


def get_climate_category(country: str) -> str:
    key = country.strip().lower()
    for climate, countries in CLIMATE_BUCKETS.items():
        if any(c in key for c in countries):
            return climate
    return "temperate"


def is_popular_destination(city: Optional[str]) -> bool:
    key = (city or "").lower()
    return any(name in key for name in POPULAR_DESTINATIONS)
