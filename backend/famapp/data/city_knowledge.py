# backend/famapp/data/city_knowledge.py

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class RestaurantPick(BaseModel):
    name: str
    address: str
    phone: Optional[str] = None
    family_features: List[str] = Field(default_factory=list)
    best_time: str
    price_level: str                     # budget | mid-range | expensive
    notes: str


class ActivityPick(BaseModel):
    name: str
    address: str
    age_recommendation: str
    duration: str
    notes: str


class CityKnowledge(BaseModel):
    city: str
    country: str
    restaurants: List[RestaurantPick] = Field(default_factory=list)
    activities: List[ActivityPick] = Field(default_factory=list)
    practical_tips: List[str] = Field(default_factory=list)


# ----------------------------------------------------------
# CURATED CITY TABLE (keyed by lowercased city)
# ----------------------------------------------------------
CITY_KNOWLEDGE: Dict[str, CityKnowledge] = {
    "madrid": CityKnowledge(
        city="Madrid",
        country="Spain",
        restaurants=[
            RestaurantPick(
                name="Casa Botín",
                address="Calle Cuchilleros, 17",
                phone="+34 913 664 217",
                family_features=["high chairs", "children portions", "historic atmosphere"],
                best_time="5:30pm early dinner",
                price_level="expensive",
                notes="World's oldest restaurant (1725). Book 2-3 weeks ahead, kids love the historic setting",
            ),
            RestaurantPick(
                name="Mercado de San Miguel",
                address="Plaza de San Miguel, s/n",
                family_features=["multiple food options", "casual eating", "stroller accessible"],
                best_time="11am-2pm lunch",
                price_level="mid-range",
                notes="Perfect for picky eaters with 10+ food stalls. Avoid 7-9pm crowds",
            ),
        ],
        activities=[
            ActivityPick(
                name="Retiro Park",
                address="Plaza de la Independencia, 7",
                age_recommendation="All ages",
                duration="2-3 hours",
                notes="Great for morning walks, playground areas, boat rentals on the lake",
            ),
            ActivityPick(
                name="Prado Museum",
                address="Calle de Ruiz de Alarcón, 23",
                age_recommendation="8+ years",
                duration="1.5 hours max with kids",
                notes="Visit before 11am, focus on Velázquez rooms, get family audio guides",
            ),
        ],
        practical_tips=[
            "Metro is stroller-friendly with elevators at most stations",
            "Siesta time 2-5pm - plan indoor activities or rest time",
            "Dinner starts late (9pm+) - stick to early family dining",
        ],
    ),
    "paris": CityKnowledge(
        city="Paris",
        country="France",
        restaurants=[
            RestaurantPick(
                name="L'As du Fallafel",
                address="34 Rue des Rosiers",
                family_features=["quick service", "outdoor seating", "kid-friendly"],
                best_time="12pm lunch",
                price_level="budget",
                notes="Famous falafel in the Marais district. Kids love the wraps, expect queues",
            ),
        ],
        activities=[
            ActivityPick(
                name="Luxembourg Gardens",
                address="Rue de Médicis",
                age_recommendation="All ages",
                duration="Half day",
                notes="Huge playground, puppet shows, boat rentals - perfect family day out",
            ),
        ],
        practical_tips=[
            "Many metro stations lack elevators - research stroller-friendly routes",
            "Playgrounds often locked - bring kids' own toys",
            "Museums free for EU residents under 26",
        ],
    ),
    "orlando": CityKnowledge(
        city="Orlando",
        country="United States",
        restaurants=[
            RestaurantPick(
                name="Be Our Guest",
                address="Magic Kingdom, Fantasyland",
                family_features=["character theming", "kids menu", "reservations required"],
                best_time="11am lunch seating",
                price_level="expensive",
                notes="Dine inside the Beast's castle. Reservations open 60 days out and go fast",
            ),
            RestaurantPick(
                name="Chef Mickey's",
                address="Disney's Contemporary Resort",
                family_features=["character dining", "buffet", "high chairs"],
                best_time="7:30am breakfast",
                price_level="expensive",
                notes="Buffet with Mickey and friends visiting every table. Breakfast is the easiest slot with toddlers",
            ),
            RestaurantPick(
                name="'Ohana",
                address="Disney's Polynesian Village Resort",
                family_features=["family-style platters", "kids activities", "monorail access"],
                best_time="5pm early dinner",
                price_level="expensive",
                notes="All-you-care-to-enjoy family-style dinner. Walk to the beach afterwards for fireworks",
            ),
        ],
        activities=[
            ActivityPick(
                name="Magic Kingdom",
                address="1180 Seven Seas Dr, Lake Buena Vista",
                age_recommendation="All ages",
                duration="Full day",
                notes="Arrive 45 minutes before opening, ride Fantasyland first, break midday",
            ),
            ActivityPick(
                name="Orlando Science Center",
                address="777 E Princeton St, Orlando",
                age_recommendation="3-12 years",
                duration="3-4 hours",
                notes="Great rainy-day backup with a dedicated area for under-8s",
            ),
        ],
        practical_tips=[
            "Afternoon thunderstorms are common in summer - plan indoor breaks 2-4pm",
            "Rent a stroller even for kids who usually walk - parks mean 10+ miles a day",
            "Mobile order food in the park apps to skip counter lines",
        ],
    ),
}


def get_city_knowledge(city: Optional[str]) -> Optional[CityKnowledge]:
    if not city:
        return None
    return CITY_KNOWLEDGE.get(city.strip().lower())
