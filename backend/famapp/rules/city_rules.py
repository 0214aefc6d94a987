# backend/famapp/rules/city_rules.py

from typing import Callable, Dict, List, Optional

from famapp.core.logger import logger
from famapp.data.city_knowledge import get_city_knowledge
from famapp.models.task_models import Priority, SmartTask
from famapp.models.trip_models import TripProfile, TripPurpose
from famapp.rules.caps import make_task
from famapp.rules.family_rules import parse_age


CityProvider = Callable[[TripProfile, int], List[SmartTask]]

FAMILY_VACATION = TripPurpose.FAMILY_VACATION
THEME_PARKS = TripPurpose.THEME_PARKS


def _kids_aged(profile: TripProfile, low: int, high: int) -> bool:
    ages = (parse_age(kid.age) for kid in profile.kids)
    return any(age is not None and low <= age <= high for age in ages)


def _essential(task_id: str, title: str, subtitle: str, tips: List[str], source: str, **kwargs) -> SmartTask:
    return make_task(
        task_id, title, subtitle,
        category="essential", reasoning="\n".join(tips), source=source, **kwargs,
    )


# ----------------------------------------------------------
# PER-CITY PROVIDERS
# ----------------------------------------------------------
def orlando_tasks(profile: TripProfile, days_until_trip: int) -> List[SmartTask]:
    if profile.trip_purpose not in (THEME_PARKS, FAMILY_VACATION):
        return []

    tasks = []
    if days_until_trip >= 60:
        tasks.append(_essential(
            "disney-dining-reservations",
            "Disney Dining Reservations Open at 60 Days",
            "Character meals book instantly at 6am EST - Be Our Guest, Chef Mickey's, Ohana",
            [
                "Opens exactly 60 days before at 6am EST",
                "Most popular: Be Our Guest, Chef Mickey's, Ohana",
                "Character dining sells out in minutes",
                "Set alarms - this is the #1 Orlando mistake",
            ],
            "Disney booking essentials",
            priority=Priority.HIGH, urgent=days_until_trip <= 65, days_before_trip=60,
        ))

    tasks.append(_essential(
        "disney-genie-plus-strategy",
        "Understand Genie+ Before Your Trip",
        "Saves 2-3 hours per day at Magic Kingdom/Hollywood Studios - worth every penny",
        [
            "Purchase at 7am on day of visit ($15-30/person)",
            "Essential for Magic Kingdom & Hollywood Studios",
            "Book first Lightning Lane exactly at 7am",
        ],
        "Disney efficiency essentials",
        priority=Priority.HIGH, days_before_trip=7,
    ))
    return tasks


def paris_tasks(profile: TripProfile, days_until_trip: int) -> List[SmartTask]:
    if profile.trip_purpose not in (THEME_PARKS, FAMILY_VACATION):
        return []
    return [_essential(
        "disneyland-paris-tickets",
        "Consider Disneyland Paris Day Trip",
        "45min from Paris center - smaller than US parks, advance tickets save money",
        [
            "Online tickets are cheaper than gate prices",
            "RER A train direct from central Paris (45 mins)",
            "Much smaller than US Disney parks",
        ],
        "Paris family options",
        priority=Priority.MEDIUM, urgent=days_until_trip <= 14, days_before_trip=30,
    )]


def london_tasks(profile: TripProfile, days_until_trip: int) -> List[SmartTask]:
    if not (_kids_aged(profile, 5, 12) and profile.trip_purpose == FAMILY_VACATION and days_until_trip >= 90):
        return []
    return [_essential(
        "harry-potter-studio-tour",
        "Book Harry Potter Studio Tour",
        "Sells out months in advance - most popular family attraction in London",
        [
            "Most popular family attraction in the London area",
            "Books up 2-4 months in advance",
            "Round-trip transport from central London available",
        ],
        "London booking essentials",
        priority=Priority.HIGH, urgent=days_until_trip <= 90, days_before_trip=90,
    )]


def tokyo_tasks(profile: TripProfile, days_until_trip: int) -> List[SmartTask]:
    tasks = []
    if profile.trip_purpose in (THEME_PARKS, FAMILY_VACATION):
        tasks.append(_essential(
            "tokyo-disney-tickets",
            "Choose Tokyo Disney Park Strategy",
            "DisneySea unique to Tokyo, Disneyland better for young kids - advance tickets recommended",
            [
                "DisneySea: unique to Tokyo, better for 8+ and adults",
                "Disneyland: better for kids under 8, familiar characters",
                "Can sell out during busy periods",
            ],
            "Tokyo Disney essentials",
            priority=Priority.HIGH, urgent=days_until_trip <= 30, days_before_trip=30,
        ))

    if profile.trip_purpose != TripPurpose.VISITING_FAMILY:
        tasks.append(_essential(
            "tokyo-language-prep",
            "Download Google Translate with Camera",
            "Essential for menus, signs, emergency communication - works offline",
            [
                "Camera translation for menus and signs",
                "Download the offline Japanese pack",
                "Critical for emergencies with kids",
            ],
            "Tokyo communication intelligence",
            priority=Priority.HIGH, days_before_trip=7,
        ))
    return tasks


def barcelona_tasks(profile: TripProfile, days_until_trip: int) -> List[SmartTask]:
    if not (profile.trip_purpose == FAMILY_VACATION and days_until_trip >= 14):
        return []
    return [_essential(
        "sagrada-familia-tickets",
        "Book Sagrada Familia Tickets",
        "Sells out daily - book skip-the-line tickets with tower access in advance",
        [
            "Sells out daily, especially with tower access",
            "Time slots required - plan your day around this",
        ],
        "Barcelona booking essentials",
        priority=Priority.MEDIUM, days_before_trip=14,
    )]


def amsterdam_tasks(profile: TripProfile, days_until_trip: int) -> List[SmartTask]:
    if not (_kids_aged(profile, 8, 16) and profile.trip_purpose == FAMILY_VACATION and days_until_trip >= 60):
        return []
    return [_essential(
        "anne-frank-house-tickets",
        "Book Anne Frank House Online",
        "Releases tickets 2 months ahead - sells out within hours, not suitable for young kids",
        [
            "Tickets released exactly 2 months in advance",
            "Best for kids 8+ who can understand the history",
        ],
        "Amsterdam booking essentials",
        priority=Priority.MEDIUM, days_before_trip=60,
    )]


def rome_tasks(profile: TripProfile, days_until_trip: int) -> List[SmartTask]:
    if not (profile.trip_purpose == FAMILY_VACATION and days_until_trip >= 30):
        return []
    return [_essential(
        "colosseum-skip-line",
        "Book Colosseum Skip-the-Line Tickets",
        "Lines can be 2+ hours - gladiator stories fascinate kids, underground tours for 8+",
        [
            "Skip 2+ hour lines with advance booking",
            "Combo tickets include Roman Forum and Palatine Hill",
        ],
        "Rome booking essentials",
        priority=Priority.MEDIUM, days_before_trip=30,
    )]


def new_york_tasks(profile: TripProfile, days_until_trip: int) -> List[SmartTask]:
    if not (profile.trip_purpose == FAMILY_VACATION and days_until_trip >= 60):
        return []
    return [_essential(
        "broadway-family-show",
        "Book Family Broadway Show",
        "Lion King, Aladdin, or Frozen - book 2-3 months ahead for good prices",
        [
            "Lion King: best for all ages",
            "Lottery tickets day-of for cheaper options",
        ],
        "NYC Broadway intelligence",
        priority=Priority.HIGH, urgent=days_until_trip <= 60, days_before_trip=60,
    )]


def madrid_tasks(profile: TripProfile, days_until_trip: int) -> List[SmartTask]:
    tasks = []
    if profile.trip_purpose != TripPurpose.BUSINESS_FAMILY:
        tasks.append(_essential(
            "madrid-meal-timing",
            "Note: Spanish Meal Times Very Different",
            "Lunch 2-4pm, dinner 9-11pm - restaurants closed between. Pack snacks!",
            [
                "Spanish lunch: 2-4pm (restaurants closed before)",
                "Spanish dinner: 9-11pm (very late for kids)",
                "Pack snacks for the 5-7pm hunger gap",
            ],
            "Madrid cultural essentials",
            priority=Priority.HIGH, days_before_trip=7,
        ))

    if _kids_aged(profile, 5, 12) and days_until_trip >= 21 and profile.trip_purpose == FAMILY_VACATION:
        tasks.append(make_task(
            "prado-museum-advance-booking",
            "Consider Prado Museum Family Tour",
            "World-class art - family tours make it engaging, book ahead for skip-the-line",
            category="booking",
            priority=Priority.MEDIUM,
            days_before_trip=21,
            reasoning="Skip-the-line family tours available\nUnder 18 free admission\n90 minutes max with young kids",
            source="Madrid booking essentials",
        ))
    return tasks


def no_tasks(profile: TripProfile, days_until_trip: int) -> List[SmartTask]:
    """Cities we recognise but have no booking deadlines for yet."""
    return []


# ----------------------------------------------------------
# REGISTRY
# ----------------------------------------------------------
CITY_PROVIDERS: Dict[str, CityProvider] = {
    "orlando": orlando_tasks,
    "paris": paris_tasks,
    "london": london_tasks,
    "tokyo": tokyo_tasks,
    "barcelona": barcelona_tasks,
    "amsterdam": amsterdam_tasks,
    "rome": rome_tasks,
    "new york": new_york_tasks,
    "new york city": new_york_tasks,
    "nyc": new_york_tasks,
    "san diego": no_tasks,
    "copenhagen": no_tasks,
    "madrid": madrid_tasks,

    # alternative names
    "orlando, florida": orlando_tasks,
    "paris, france": paris_tasks,
    "london, england": london_tasks,
    "london, uk": london_tasks,
    "tokyo, japan": tokyo_tasks,
    "barcelona, spain": barcelona_tasks,
    "amsterdam, netherlands": amsterdam_tasks,
    "rome, italy": rome_tasks,
    "san diego, california": no_tasks,
    "copenhagen, denmark": no_tasks,
    "madrid, spain": madrid_tasks,
}

SUPPORTED_CITIES = [
    "Orlando, Florida",
    "Paris, France",
    "London, England",
    "Tokyo, Japan",
    "Barcelona, Spain",
    "Amsterdam, Netherlands",
    "Rome, Italy",
    "New York City",
    "San Diego, California",
    "Copenhagen, Denmark",
    "Madrid, Spain",
]

WELCOME_MESSAGES = {
    "orlando": "Orlando detected! Get ready for Disney World magic - we'll help you navigate the most complex family destination on Earth!",
    "paris": "Bonjour! Planning Paris with kids requires strategy - we'll help you master Disneyland Paris, museums, and French dining culture!",
    "london": "Brilliant! London is incredibly family-friendly - we'll help you book Harry Potter tours, navigate the Tube, and find the best playgrounds!",
    "tokyo": "Tokyo with kids is amazing! We'll help you conquer Disney, master the trains, and handle the language barrier with confidence!",
    "barcelona": "Barcelona combines beaches and culture for families - we'll help you time Sagrada Familia visits and navigate Spanish meal times!",
    "amsterdam": "Amsterdam is bike paradise for families! We'll help you rent cargo bikes, find playgrounds, and plan canal adventures!",
    "rome": "Rome's history comes alive for kids! We'll help you make the Colosseum exciting and find the best gelato spots!",
    "new york": "The Big Apple with kids! We'll help you score Broadway tickets, navigate the subway, and find Central Park's best playgrounds!",
    "new york city": "The Big Apple with kids! We'll help you score Broadway tickets, navigate the subway, and find Central Park's best playgrounds!",
    "san diego": "Perfect weather for family fun! We'll help you plan zoo days, beach visits, and Legoland adventures!",
    "copenhagen": "Hygge family time in Copenhagen! We'll help you enjoy Tivoli Gardens, rent family bikes, and find the best Danish pastries!",
    "madrid": "Hola! Madrid with kids is amazing - we'll help you navigate Spanish meal times, enjoy Retiro Park, and find the best churros!",
}


def _city_key(city: Optional[str]) -> str:
    return (city or "").strip().lower()


def has_city_intelligence(city: Optional[str]) -> bool:
    return _city_key(city) in CITY_PROVIDERS


def get_supported_cities() -> List[str]:
    return list(SUPPORTED_CITIES)


def get_city_metadata(city: Optional[str]) -> Dict[str, object]:
    if not has_city_intelligence(city):
        return {
            "has_intelligence": False,
            "tier": "basic",
            "coverage_level": "Generic family travel advice only",
        }
    return {
        "has_intelligence": True,
        "tier": "premium",
        "coverage_level": "Full family intelligence with specific recommendations",
    }


def get_city_welcome_message(city: str) -> str:
    if not has_city_intelligence(city):
        return (
            f"Planning your family trip to {city}! We'll provide general family travel advice "
            "and are working on specific recommendations for this destination."
        )
    return WELCOME_MESSAGES.get(
        _city_key(city),
        f"{city} family adventure incoming! We've got specific intelligence to make your trip amazing!",
    )


def get_city_tasks(profile: TripProfile, days_until_trip: int) -> List[SmartTask]:
    """
    Run the registered provider for the trip's city.
    Unknown cities and providers that raise both yield no tasks.
    """
    provider = CITY_PROVIDERS.get(profile.city_key)
    if provider is None:
        return []

    try:
        return provider(profile, days_until_trip)
    except Exception as e:
        logger.warning(f"City intelligence failed for {profile.city}: {e}")
        return []


# ----------------------------------------------------------
# CURATED RESTAURANTS & ACTIVITIES
# ----------------------------------------------------------
def generate_curated_city_tasks(profile: TripProfile, days_until_trip: int) -> List[SmartTask]:
    knowledge = get_city_knowledge(profile.city)
    if knowledge is None:
        return []

    tasks: List[SmartTask] = []

    for i, restaurant in enumerate(knowledge.restaurants[:2]):
        details = [
            f"Phone: {restaurant.phone}" if restaurant.phone else "",
            f"Address: {restaurant.address}",
            f"Family features: {', '.join(restaurant.family_features)}",
            restaurant.notes,
        ]
        tasks.append(make_task(
            f"city-restaurant-{i}",
            f"Try: {restaurant.name}",
            f"{restaurant.notes.split('.')[0]} - {restaurant.best_time}",
            priority=Priority.MEDIUM if i == 0 else Priority.LOW,
            days_before_trip=14,
            reasoning="\n".join(d for d in details if d),
            source="Curated city recommendations",
        ))

    for i, activity in enumerate(knowledge.activities[:2]):
        tasks.append(make_task(
            f"city-activity-{i}",
            f"Visit: {activity.name}",
            f"{activity.age_recommendation} - {activity.duration}",
            priority=Priority.MEDIUM,
            days_before_trip=7,
            reasoning=f"Address: {activity.address}\n{activity.notes}",
            source="Curated city recommendations",
        ))

    return tasks
