# backend/famapp/rules/family_rules.py

import re
from typing import Callable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from famapp.models.task_models import Priority, SmartTask
from famapp.models.trip_models import FamilyMember, TravelStyle, TripProfile
from famapp.rules.caps import make_task


_LEADING_INT = re.compile(r"^\s*(\d+)")


def parse_age(raw: Optional[str]) -> Optional[int]:
    """
    Read the leading integer of a free-text age ("2", "7 years", " 13yo").
    Blank or non-numeric text yields None and never raises.
    """
    if raw is None:
        return None
    match = _LEADING_INT.match(str(raw))
    return int(match.group(1)) if match else None


def _ages(members: List[FamilyMember]) -> List[int]:
    return [age for age in (parse_age(m.age) for m in members) if age is not None]


# ----------------------------------------------------------
# FAMILY SIGNALS
# ----------------------------------------------------------
class FamilySignals(BaseModel):
    model_config = ConfigDict(frozen=True)

    has_kids: bool = False
    has_baby: bool = False              # <= 2
    has_toddler: bool = False           # 3-5
    has_school_age: bool = False        # 6-12
    has_teen: bool = False              # 13-17
    has_older_kids: bool = False        # >= 13, no upper bound
    has_young_kids: bool = False        # <= 8
    has_under_four: bool = False        # <= 4
    has_elder: bool = False             # adult >= 65
    is_large_family: bool = False       # >= 6 travelers
    is_single_parent: bool = False
    has_significant_age_gap: bool = False   # >= 8 years between kids
    kid_count: int = 0
    total_travelers: int = 0
    min_kid_age: Optional[int] = None
    max_kid_age: Optional[int] = None


def derive_family_signals(profile: TripProfile) -> FamilySignals:
    kid_ages = sorted(_ages(profile.kids))
    adult_ages = _ages(profile.adults)
    kid_count = len(profile.kids)
    total = profile.total_travelers

    return FamilySignals(
        has_kids=kid_count > 0,
        has_baby=any(a <= 2 for a in kid_ages),
        has_toddler=any(3 <= a <= 5 for a in kid_ages),
        has_school_age=any(6 <= a <= 12 for a in kid_ages),
        has_teen=any(13 <= a <= 17 for a in kid_ages),
        has_older_kids=any(a >= 13 for a in kid_ages),
        has_young_kids=any(a <= 8 for a in kid_ages),
        has_under_four=any(a <= 4 for a in kid_ages),
        has_elder=any(a >= 65 for a in adult_ages),
        is_large_family=total >= 6,
        is_single_parent=len(profile.adults) == 1 and kid_count > 0,
        has_significant_age_gap=len(kid_ages) >= 2 and kid_ages[-1] - kid_ages[0] >= 8,
        kid_count=kid_count,
        total_travelers=total,
        min_kid_age=kid_ages[0] if kid_ages else None,
        max_kid_age=kid_ages[-1] if kid_ages else None,
    )


# ----------------------------------------------------------
# STRATEGY TEXT (title, subtitle, reasoning)
# ----------------------------------------------------------
def _age_gap_strategy(signals: FamilySignals) -> Tuple[str, str, str]:
    lo, hi = signals.min_kid_age, signals.max_kid_age
    if lo <= 5 and hi >= 13:
        return (
            "Plan separate toddler and teen activities",
            f"Age gap {lo}-{hi} requires different engagement strategies",
            "Toddlers and teens need completely different activities and timing",
        )
    if lo <= 8 and hi >= 14:
        return (
            "Find activities that engage both age groups",
            "Interactive experiences work better than passive sightseeing",
            "Mixed school-age and teen groups need hands-on activities to keep everyone engaged",
        )
    return (
        "Plan age-appropriate activity rotation",
        "Take turns choosing activities that appeal to different ages",
        "Significant age gaps require alternating between different types of activities",
    )


def _nap_strategy(signals: FamilySignals) -> Tuple[str, str, str]:
    if signals.has_baby:
        return (
            "Block 1-3pm for nap time daily",
            "Babies/toddlers need consistent rest - plan around this",
            "Very young children need predictable nap schedules to prevent meltdowns",
        )
    return (
        "Plan rest breaks every 2-3 hours",
        "Toddlers need frequent breaks from stimulation",
        "Toddlers get overstimulated quickly and need regular quiet time",
    )


def _teen_strategy(profile: TripProfile) -> Tuple[str, str, str]:
    if profile.travel_style == TravelStyle.CULTURE:
        return (
            "Choose interactive cultural experiences",
            f"Skip traditional museums in {profile.city} - find hands-on workshops",
            "Teens engage better with interactive cultural experiences than passive museum visits",
        )
    if profile.travel_style == TravelStyle.ADVENTURE:
        return (
            "Let teens research and suggest activities",
            "Give them ownership of 1-2 activity choices",
            "Teens need to feel involved in planning adventure activities",
        )
    return (
        "Find Instagram-worthy photo spots",
        f"Research photogenic locations in {profile.city}",
        "Teens are more engaged when they can document experiences",
    )


def _single_parent_strategy(signals: FamilySignals) -> Tuple[str, str, str]:
    if signals.kid_count >= 3:
        return (
            "Book family suite or connecting rooms",
            "Single parents with multiple kids need space management",
            "Solo parents managing several children need both supervision and space",
        )
    if signals.has_baby or signals.has_toddler:
        return (
            "Choose hotels with kids clubs or family amenities",
            "Built-in childcare gives solo parents essential breaks",
            "Single parents need accommodations with safe, supervised activities for children",
        )
    return (
        "Plan one relaxing activity per day",
        "Solo parenting while traveling is exhausting - pace yourself",
        "Single parents need to balance children's activities with their own energy",
    )


# ----------------------------------------------------------
# RULE TABLE: (predicate, builder), evaluated in order
# ----------------------------------------------------------
Predicate = Callable[[FamilySignals, TripProfile], bool]
Builder = Callable[[FamilySignals, TripProfile], SmartTask]


def _dynamics_task(task_id: str, text: Tuple[str, str, str], **kwargs) -> SmartTask:
    title, subtitle, reasoning = text
    return make_task(
        task_id, title, subtitle,
        reasoning=reasoning, source="advanced_family_dynamics", **kwargs,
    )


COMPOSITION_RULES: List[Tuple[Predicate, Builder]] = [
    (
        lambda s, p: s.has_elder and bool(p.city),
        lambda s, p: _dynamics_task(
            "family-multigen",
            ("Book accessible accommodations",
             "Ground floor rooms and elevator access for grandparents",
             "Multi-generational families need lodging that works for all mobility levels"),
            priority=Priority.HIGH, days_before_trip=14,
        ),
    ),
    (
        lambda s, p: s.has_significant_age_gap,
        lambda s, p: _dynamics_task("family-agegap", _age_gap_strategy(s), priority=Priority.HIGH),
    ),
    (
        lambda s, p: s.has_baby or s.has_toddler,
        lambda s, p: _dynamics_task(
            "family-naptime", _nap_strategy(s), priority=Priority.HIGH, days_before_trip=7,
        ),
    ),
    (
        lambda s, p: s.has_teen and bool(p.city),
        lambda s, p: _dynamics_task(
            "family-teen-engagement", _teen_strategy(p), category="Activities", priority=Priority.MEDIUM,
        ),
    ),
    (
        lambda s, p: s.is_large_family,
        lambda s, p: _dynamics_task(
            "family-logistics",
            ("Plan split activities for large group",
             f"{s.total_travelers} people - consider splitting for some activities",
             "Large families often do better split into smaller groups for some activities"),
            priority=Priority.MEDIUM,
        ),
    ),
    (
        lambda s, p: s.is_single_parent,
        lambda s, p: _dynamics_task("family-solo-support", _single_parent_strategy(s), priority=Priority.HIGH),
    ),
]


def generate_family_composition_tasks(profile: TripProfile, days_until_trip: int) -> List[SmartTask]:
    signals = derive_family_signals(profile)
    return [build(signals, profile) for matches, build in COMPOSITION_RULES if matches(signals, profile)]
