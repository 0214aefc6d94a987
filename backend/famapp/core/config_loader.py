# backend/famapp/core/config_loader.py

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "FamApp Smart Tasks"
    environment: str = "development"
    user_agent: str = "FamApp/1.0 (Family Travel Planner)"

    # Third-party endpoints (no API keys needed)
    weather_api_url: str = "https://www.7timer.info/bin/api.pl"
    holiday_api_url: str = "https://date.nager.at/api/v3/PublicHolidays"
    country_api_url: str = "https://restcountries.com/v3.1/name"

    weather_timeout_seconds: float = 10.0
    holiday_timeout_seconds: float = 8.0
    country_timeout_seconds: float = 8.0

    weather_cache_ttl_seconds: int = 6 * 60 * 60            # 6 hours
    holiday_cache_ttl_seconds: int = 30 * 24 * 60 * 60      # 30 days
    country_cache_ttl_seconds: int = 7 * 24 * 60 * 60       # 7 days

    max_tasks: int = 8
    weather_forecast_horizon_days: int = 14
    default_days_until_trip: int = 90
    timezone: str = "UTC"

    log_level: str = "DEBUG"
    log_to_file: bool = True
    log_dir: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
