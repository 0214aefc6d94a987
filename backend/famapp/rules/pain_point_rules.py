# backend/famapp/rules/pain_point_rules.py

from typing import Callable, Dict, List, Optional, Tuple

from famapp.models.task_models import Priority, SmartTask
from famapp.models.trip_models import TripProfile
from famapp.rules.caps import make_task
from famapp.rules.family_rules import FamilySignals, derive_family_signals


SOURCE = "real_family_pain_points"

# city fragment -> [(gate, slug, title, subtitle, priority, days_before_trip, reasoning)]
PainPoint = Tuple[Callable[[FamilySignals], bool], str, str, str, Priority, int, str]


def _young(s: FamilySignals) -> bool:
    return s.has_young_kids


def _under_four(s: FamilySignals) -> bool:
    return s.has_under_four


def _older_kids(s: FamilySignals) -> bool:
    return s.has_older_kids


def _any_kids(s: FamilySignals) -> bool:
    return s.has_kids


CITY_PAIN_POINTS: Dict[str, List[PainPoint]] = {
    "paris": [
        (_young, "paris-louvre",
         "Skip Louvre with kids under 8 - try Musée d'Orsay instead",
         "Louvre is overwhelming for young children - Orsay has better kid-friendly exhibits",
         Priority.MEDIUM, 14,
         "The Louvre is too big, too crowded and not interactive enough for young kids"),
        (_under_four, "paris-metro",
         "Plan metro alternatives - most stations lack elevators",
         "Bring lightweight stroller or baby carrier for metro stairs",
         Priority.HIGH, 7,
         "Paris metro stairs are exhausting with toddlers and strollers"),
    ],
    "london": [
        (_young, "london-museums",
         "Hit Natural History Museum before 10am or after 4pm",
         "Dinosaur gallery becomes unbearably crowded 10am-4pm with school groups",
         Priority.MEDIUM, 14,
         "School groups make popular museums impossible for families during peak hours"),
        (_older_kids, "london-teens",
         "Book Camden Market for teen shopping - skip Oxford Street",
         "Oxford Street overwhelms teens - Camden has unique shops they actually want",
         Priority.LOW, 14,
         "Teens get bored with generic shopping streets but love market atmospheres"),
    ],
    "rome": [
        (_young, "rome-colosseum",
         "Book underground Colosseum tour for kids 8+ only",
         "Regular tour works for younger kids - underground is claustrophobic for under 8",
         Priority.MEDIUM, 21,
         "Underground Colosseum tours overwhelm young children but fascinate older kids"),
        (_any_kids, "rome-restaurants",
         "Eat dinner before 7pm or after 9pm",
         "Roman restaurants are chaos 7-9pm - families need off-peak timing",
         Priority.MEDIUM, 14,
         "Peak dinner hours in Rome are overwhelming for families with children"),
    ],
    "new york": [
        (_young, "nyc-times-square",
         "Avoid Times Square with young kids except early morning",
         "Times Square overwhelms children - if you must go, do it before 10am",
         Priority.MEDIUM, 14,
         "Times Square crowds and sensory overload cause meltdowns in young children"),
        (_under_four, "nyc-subway",
         "Plan subway backup routes - many stations lack elevators",
         "Bring baby carrier as backup for stroller-unfriendly stations",
         Priority.HIGH, 7,
         "NYC subway accessibility is limited, families need contingency plans"),
    ],
    "barcelona": [
        (_young, "barcelona-sagrada",
         "Book Sagrada Familia audioguide for kids",
         "Without context, kids get bored quickly - audioguide makes it magical",
         Priority.MEDIUM, 21,
         "Architecture is abstract for children without storytelling context"),
    ],
}

CITY_ALIASES = {"nyc": "new york"}


def _match_city(city_key: str) -> Optional[str]:
    for alias, canonical in CITY_ALIASES.items():
        if alias in city_key:
            return canonical
    for fragment in CITY_PAIN_POINTS:
        if fragment in city_key:
            return fragment
    return None


def generate_pain_point_tasks(profile: TripProfile, days_until_trip: int) -> List[SmartTask]:
    """Destination-specific advice from real family trips. Needs a city and kids."""
    if not profile.city or not profile.has_kids:
        return []

    signals = derive_family_signals(profile)
    tasks: List[SmartTask] = []

    city = _match_city(profile.city_key)
    for gate, slug, title, subtitle, priority, dbt, reasoning in CITY_PAIN_POINTS.get(city, []):
        if gate(signals):
            tasks.append(make_task(
                f"painpoint-{slug}", title, subtitle,
                priority=priority, days_before_trip=dbt, reasoning=reasoning, source=SOURCE,
            ))

    # universal fallback
    if not tasks and signals.has_young_kids:
        tasks.append(make_task(
            "painpoint-universal-timing",
            "Plan major attractions before 11am or after 4pm",
            "Beat tourist crowds and school groups for better family experience",
            priority=Priority.MEDIUM,
            days_before_trip=14,
            reasoning="Popular attractions are overwhelming for families during peak tourist hours",
            source=SOURCE,
        ))

    return tasks
