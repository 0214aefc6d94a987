# backend/famapp/models/trip_models.py

import datetime as dt
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ----------------------------------------------------------
# ENUM-LIKE TRIP ATTRIBUTES
# ----------------------------------------------------------
class TripPurpose(str, Enum):
    FAMILY_VACATION = "family-vacation"
    THEME_PARKS = "theme-parks"
    VISITING_FAMILY = "visiting-family"
    EVENT = "event"
    BUSINESS_FAMILY = "business-family"
    OTHER = "other"


class TravelStyle(str, Enum):
    ADVENTURE = "adventure"
    CULTURE = "culture"
    RELAXED = "relaxed"
    COMFORT = "comfort"


class BudgetLevel(str, Enum):
    BUDGET = "budget"
    MID_RANGE = "mid-range"
    LUXURY = "luxury"


# Wizard display labels and legacy ids -> canonical value
TRIP_PURPOSE_ALIASES: Dict[str, TripPurpose] = {
    "family vacation & sightseeing": TripPurpose.FAMILY_VACATION,
    "theme parks & entertainment": TripPurpose.THEME_PARKS,
    "visiting family & friends": TripPurpose.VISITING_FAMILY,
    "wedding, celebration, or event": TripPurpose.EVENT,
    "business trip + family extension": TripPurpose.BUSINESS_FAMILY,
    "other purpose": TripPurpose.OTHER,
}

TRAVEL_STYLE_ALIASES: Dict[str, TravelStyle] = {
    "adventure-seekers": TravelStyle.ADVENTURE,
    "culture-enthusiasts": TravelStyle.CULTURE,
    "cultural": TravelStyle.CULTURE,
    "relaxed-explorers": TravelStyle.RELAXED,
    "relaxation": TravelStyle.RELAXED,
    "comfort-focused": TravelStyle.COMFORT,
    "comfort-seekers": TravelStyle.COMFORT,
}

BUDGET_LEVEL_ALIASES: Dict[str, BudgetLevel] = {
    "budget-friendly": BudgetLevel.BUDGET,
    "mid-range-comfort": BudgetLevel.MID_RANGE,
    "premium": BudgetLevel.LUXURY,
    "luxury-experience": BudgetLevel.LUXURY,
}


def _normalize_choice(value: Any, enum_cls, aliases: Dict[str, Enum]):
    """
    Accept canonical values, display labels or known aliases.
    Anything else becomes None: an unknown choice means "rule not applicable".
    """
    if value is None or isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        return None

    key = value.strip().lower()
    if not key:
        return None
    if key in aliases:
        return aliases[key]
    try:
        return enum_cls(key)
    except ValueError:
        return None


# ----------------------------------------------------------
# TRAVELERS
# ----------------------------------------------------------
class FamilyMember(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    age: Optional[str] = None           # free text, e.g. "2" or "7 years"
    email: Optional[str] = None
    special_needs: Optional[str] = None
    dietary_info: Optional[str] = None

    @field_validator("age", mode="before")
    @classmethod
    def _age_as_text(cls, v):
        if v is None or isinstance(v, str):
            return v
        return str(v)


class BookingStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    flights_booked: bool = False
    primary_transport_booked: bool = False   # driving / train / bus
    accommodation_booked: bool = False
    insurance_purchased: bool = False
    activities_booked: bool = False


# ----------------------------------------------------------
# TRIP PROFILE (input to task generation)
# ----------------------------------------------------------
class TripProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    city: Optional[str] = None
    country: Optional[str] = None
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None

    adults: List[FamilyMember] = Field(default_factory=list)
    kids: List[FamilyMember] = Field(default_factory=list)

    trip_purpose: Optional[TripPurpose] = None
    travel_style: Optional[TravelStyle] = None
    budget_level: Optional[BudgetLevel] = None

    concerns: List[str] = Field(default_factory=list)
    dietary_preferences: List[str] = Field(default_factory=list)
    booking: BookingStatus = Field(default_factory=BookingStatus)

    @field_validator("city", "country", mode="before")
    @classmethod
    def _blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v.strip() if isinstance(v, str) else v

    @field_validator("trip_purpose", mode="before")
    @classmethod
    def _normalize_purpose(cls, v):
        return _normalize_choice(v, TripPurpose, TRIP_PURPOSE_ALIASES)

    @field_validator("travel_style", mode="before")
    @classmethod
    def _normalize_style(cls, v):
        return _normalize_choice(v, TravelStyle, TRAVEL_STYLE_ALIASES)

    @field_validator("budget_level", mode="before")
    @classmethod
    def _normalize_budget(cls, v):
        return _normalize_choice(v, BudgetLevel, BUDGET_LEVEL_ALIASES)

    @property
    def total_travelers(self) -> int:
        return len(self.adults) + len(self.kids)

    @property
    def has_kids(self) -> bool:
        return len(self.kids) > 0

    @property
    def city_key(self) -> str:
        return (self.city or "").strip().lower()

    @property
    def country_key(self) -> str:
        return (self.country or "").strip().lower()
