# backend/famapp/rules/style_rules.py

from typing import List

from famapp.models.task_models import Priority, SmartTask
from famapp.models.trip_models import TravelStyle, TripProfile
from famapp.rules.caps import make_task


# (slug, title, subtitle, category, priority, days_before_trip, reasoning)
STYLE_TEMPLATES = {
    TravelStyle.ADVENTURE: [
        ("active-experiences", "Research family-friendly active experiences",
         "Find age-appropriate adventures in {city}", "planning", Priority.HIGH, None,
         "Adventure seekers need active options suitable for all ages"),
        ("motion-sickness", "Pack motion sickness remedies",
         "Essential for active trips with kids", "packing", Priority.MEDIUM, 3,
         "Adventure activities often involve movement that can trigger motion sickness"),
    ],
    TravelStyle.CULTURE: [
        ("morning-museums", "Plan museum visits before 11am",
         "Beat crowds and keep kids engaged", "planning", Priority.HIGH, None,
         "Early museum visits are less crowded and kids are more alert"),
        ("cultural-workshops", "Book family cultural workshops",
         "Interactive experiences in {city}", "planning", Priority.MEDIUM, None,
         "Hands-on cultural activities engage kids better than passive sightseeing"),
    ],
    TravelStyle.RELAXED: [
        ("green-spaces", "Research family-friendly parks & green spaces",
         "Find relaxing outdoor spots in {city}", "planning", Priority.MEDIUM, None,
         "Relaxed explorers benefit from unstructured outdoor time"),
        ("nap-block", "Block 1-3pm for nap time daily",
         "Babies/toddlers need consistent rest - plan around this", "planning", Priority.HIGH, None,
         "Very young children need predictable nap schedules to prevent meltdowns"),
    ],
    TravelStyle.COMFORT: [
        ("accessible-transport", "Research accessible transportation",
         "Pre-book transfers and easy transit in {city}", "travel", Priority.HIGH, None,
         "Comfort-focused families need reliable, easy transportation"),
        ("ground-floor", "Book ground floor or elevator access",
         "Request accessible rooms for easy movement", "planning", Priority.MEDIUM, None,
         "Accessibility reduces stress for families prioritizing comfort"),
    ],
}


def generate_travel_style_tasks(profile: TripProfile, days_until_trip: int) -> List[SmartTask]:
    if profile.travel_style is None:
        return []

    city = profile.city or "your destination"
    return [
        make_task(
            f"style-{profile.travel_style.value}-{slug}",
            title,
            subtitle.format(city=city),
            category=category,
            priority=priority,
            days_before_trip=dbt,
            reasoning=reasoning,
            source="travel_style",
        )
        for slug, title, subtitle, category, priority, dbt, reasoning in STYLE_TEMPLATES[profile.travel_style]
    ]
