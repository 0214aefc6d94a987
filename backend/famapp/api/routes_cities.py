# backend/famapp/api/routes_cities.py

from fastapi import APIRouter, HTTPException

from famapp.data.city_knowledge import get_city_knowledge
from famapp.rules.city_rules import (
    get_city_metadata,
    get_city_welcome_message,
    get_supported_cities,
    has_city_intelligence,
)

router = APIRouter(prefix="/cities", tags=["cities"])


@router.get("")
def list_cities():
    return {"cities": get_supported_cities()}


@router.get("/{city}")
def city_details(city: str):
    """Coverage info, welcome message and curated picks for one city."""
    knowledge = get_city_knowledge(city)
    if not has_city_intelligence(city) and knowledge is None:
        raise HTTPException(status_code=404, detail=f"No city intelligence for '{city}'")

    return {
        "city": city,
        **get_city_metadata(city),
        "welcome_message": get_city_welcome_message(city),
        "knowledge": knowledge.model_dump() if knowledge else None,
    }
