# backend/famapp/models/external_models.py

import datetime as dt
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


# ----------------------------------------------------------
# WEATHER (7Timer civil-light product)
# ----------------------------------------------------------
class Temperature(BaseModel):
    max: Optional[float] = None
    min: Optional[float] = None


class ForecastDay(BaseModel):
    date: Optional[int] = None          # 7Timer sends YYYYMMDD as an int
    weather: str = ""                   # e.g. "clear", "lightrain", "ishower"
    temp2m: Temperature = Field(default_factory=Temperature)

    @property
    def is_rainy(self) -> bool:
        return "rain" in self.weather or "shower" in self.weather


class ForecastData(BaseModel):
    dataseries: List[ForecastDay]


# ----------------------------------------------------------
# PUBLIC HOLIDAYS (Nager.Date)
# ----------------------------------------------------------
class Holiday(BaseModel):
    date: dt.date
    name: str
    localName: str = ""
    countryCode: str = ""


# ----------------------------------------------------------
# COUNTRY METADATA (REST Countries)
# ----------------------------------------------------------
class CountryName(BaseModel):
    common: str = ""


class Currency(BaseModel):
    name: str = ""
    symbol: str = ""


class CountryInfo(BaseModel):
    name: CountryName = Field(default_factory=CountryName)
    currencies: Dict[str, Currency] = Field(default_factory=dict)
    languages: Dict[str, str] = Field(default_factory=dict)
    timezones: List[str] = Field(default_factory=list)

    @property
    def primary_currency(self) -> Optional[str]:
        return next(iter(self.currencies), None)

    @property
    def primary_language(self) -> Optional[str]:
        return next(iter(self.languages.values()), None)
