# backend/famapp/rules/purpose_rules.py

from typing import Any, Dict, List

from famapp.models.task_models import Priority, SmartTask
from famapp.models.trip_models import TripProfile, TripPurpose
from famapp.rules.caps import make_task


HIGH, MEDIUM, LOW = Priority.HIGH, Priority.MEDIUM, Priority.LOW

# Template keys: slug, title, subtitle ({city} placeholder allowed),
# priority, days_before_trip, optional category and urgent_within (days).
PURPOSE_TEMPLATES: Dict[TripPurpose, List[Dict[str, Any]]] = {
    TripPurpose.FAMILY_VACATION: [
        {
            "slug": "kid-friendly-attractions",
            "title": "Research kid-friendly attractions first",
            "subtitle": "Find interactive experiences in {city} - avoid passive sightseeing with children",
            "priority": HIGH, "days_before_trip": 21,
            "reasoning": "Children engage better with hands-on experiences than traditional tourist sites",
        },
        {
            "slug": "morning-museums",
            "title": "Plan museum visits before 11am",
            "subtitle": "Kids are fresh in morning, crowds are lighter, exhibits are quieter",
            "priority": MEDIUM, "days_before_trip": 14,
            "reasoning": "Early museum visits maximize family engagement and minimize crowds",
        },
        {
            "slug": "offline-maps",
            "title": "Download offline maps and city apps",
            "subtitle": "Save {city} maps and family-friendly app recommendations for navigation",
            "priority": MEDIUM, "days_before_trip": 3,
            "reasoning": "Offline navigation avoids roaming charges and works in areas with poor signal",
        },
        {
            "slug": "early-dinners",
            "title": "Book early dinner reservations (5:30pm)",
            "subtitle": "Beat dinner rush, kids are hungry but not overtired yet",
            "priority": MEDIUM, "days_before_trip": 14,
            "reasoning": "Children eat better before getting tired",
        },
        {
            "slug": "indoor-backups",
            "title": "Research backup indoor activities",
            "subtitle": "Find malls, indoor play areas, or family cafes for weather emergencies",
            "priority": LOW, "days_before_trip": 14,
            "reasoning": "Families need weather backup plans to prevent disappointed children",
        },
    ],
    TripPurpose.THEME_PARKS: [
        {
            "slug": "park-apps",
            "title": "Download all park apps and create accounts",
            "subtitle": "Disney, Universal, or park-specific apps for mobile ordering and wait times",
            "priority": HIGH, "days_before_trip": 7,
            "reasoning": "Park apps can save 2+ hours per day through mobile ordering and wait time tracking",
        },
        {
            "slug": "lightning-lane",
            "title": "Book FastPass/Lightning Lane/Express Pass",
            "subtitle": "Skip regular lines for popular rides - especially important with kids",
            "priority": HIGH, "days_before_trip": 30, "urgent_within": 14,
            "reasoning": "Skip-the-line passes maximize park time and minimize waiting for families",
        },
        {
            "slug": "height-requirements",
            "title": "Check height requirements for all rides",
            "subtitle": "Avoid disappointment - know which rides each child can enjoy",
            "priority": MEDIUM, "days_before_trip": 14,
            "reasoning": "Height restrictions cause major disappointment, plan alternative experiences",
        },
        {
            "slug": "survival-kit",
            "title": "Pack theme park survival kit",
            "subtitle": "Portable chargers, cooling towels, snacks, pain relievers, band-aids",
            "category": "packing",
            "priority": MEDIUM, "days_before_trip": 3,
            "reasoning": "Theme parks are physically demanding for the whole family",
        },
        {
            "slug": "rest-day",
            "title": "Plan mandatory rest day after theme parks",
            "subtitle": "Theme parks are exhausting - schedule pool/hotel day for recovery",
            "priority": MEDIUM, "days_before_trip": 21,
            "reasoning": "Theme park days are physically and emotionally exhausting for families",
        },
        {
            "slug": "in-park-dining",
            "title": "Make dining reservations inside parks",
            "subtitle": "Popular restaurants fill up 60+ days in advance, especially character dining",
            "priority": HIGH, "days_before_trip": 60, "urgent_within": 30,
            "reasoning": "Theme park dining reservations book extremely early",
        },
    ],
    TripPurpose.VISITING_FAMILY: [
        {
            "slug": "arrival-plans",
            "title": "Coordinate detailed arrival plans with hosts",
            "subtitle": "Share flight details, confirm pickup arrangements, exchange phone numbers",
            "priority": HIGH, "days_before_trip": 2,
            "reasoning": "Clear coordination prevents confusion and stress for both families",
        },
        {
            "slug": "host-gifts",
            "title": "Pack thoughtful gifts for host family",
            "subtitle": "Regional specialties or family favorites from your area",
            "subtitle_with_kids": "Include gifts for host family children (ask about ages/interests)",
            "priority": MEDIUM, "days_before_trip": 7,
            "reasoning": "Thoughtful gifts show appreciation and help children bond with host family kids",
        },
        {
            "slug": "backup-activities",
            "title": "Plan 2-3 backup activities together",
            "subtitle": "Prepare alternatives in case host family plans change or weather interferes",
            "priority": MEDIUM, "days_before_trip": 14,
            "reasoning": "Backup plans reduce stress when visiting family with unpredictable schedules",
        },
        {
            "slug": "sleeping-arrangements",
            "title": "Confirm sleeping arrangements for everyone",
            "subtitle": "Clarify bed/room assignments, bring air mattresses or sleeping bags if needed",
            "priority": HIGH, "days_before_trip": 7,
            "reasoning": "Sleep arrangements affect family comfort and host relationships",
        },
        {
            "slug": "host-favorites",
            "title": "Ask hosts about their favorite family spots",
            "subtitle": "Get insider recommendations for kid-friendly restaurants and activities",
            "priority": LOW, "days_before_trip": 14,
            "reasoning": "Local family recommendations beat tourist guides",
        },
        {
            "slug": "meal-responsibilities",
            "title": "Coordinate meal responsibilities",
            "subtitle": "Clarify who cooks, shops, or pays for meals to avoid awkwardness",
            "priority": MEDIUM, "days_before_trip": 7,
            "reasoning": "Clear meal expectations prevent financial and social awkwardness",
        },
    ],
    TripPurpose.EVENT: [
        {
            "slug": "dress-code",
            "title": "Confirm dress code for all family members",
            "subtitle": "Verify formal requirements, check weather for outdoor ceremonies, pack backup outfits",
            "category": "packing",
            "priority": HIGH, "days_before_trip": 7,
            "reasoning": "Event dress codes are strictly enforced and hard to fix on location",
        },
        {
            "slug": "gifts",
            "title": "Purchase and wrap celebration gifts",
            "subtitle": "Buy appropriate gifts, wrap at home, pack carefully in carry-on luggage",
            "priority": MEDIUM, "days_before_trip": 5,
            "reasoning": "Gifts are easier to select and wrap at home than during travel",
        },
        {
            "slug": "childcare",
            "title": "Research childcare options if event isn't kid-friendly",
            "subtitle": "Find hotel babysitting services or child-friendly activities during adult events",
            "priority": LOW, "priority_with_kids": HIGH, "days_before_trip": 21,
            "reasoning": "Many celebration events are adult-focused and need child supervision planning",
        },
        {
            "slug": "room-blocks",
            "title": "Book hotel room blocks early",
            "subtitle": "Wedding/event locations often sell out - book immediately after receiving invitation",
            "priority": HIGH, "days_before_trip": 90, "urgent_within": 30,
            "reasoning": "Event destinations have limited accommodations that book quickly",
        },
        {
            "slug": "non-event-days",
            "title": "Plan activities for non-event days",
            "subtitle": "Research family-friendly activities near event location for extra days",
            "priority": MEDIUM, "days_before_trip": 21,
            "reasoning": "Event trips often include extra days that need family-appropriate planning",
        },
        {
            "slug": "venue-transport",
            "title": "Arrange transportation to/from event venue",
            "subtitle": "Confirm whether transportation is provided or if you need rideshare/rental car",
            "priority": HIGH, "days_before_trip": 14,
            "reasoning": "Event venues often have limited parking or are hard to reach",
        },
    ],
    TripPurpose.BUSINESS_FAMILY: [
        {
            "slug": "family-time",
            "title": "Block dedicated family time in work calendar",
            "subtitle": "Protect mornings, evenings, and weekends from business meetings",
            "priority": HIGH, "days_before_trip": 14,
            "reasoning": "Business trips easily overtake family time without explicit boundaries",
        },
        {
            "slug": "hotel-near-business",
            "title": "Book family-friendly hotel near business district",
            "subtitle": "Find accommodations with pool, family amenities, and walking distance to work",
            "priority": HIGH, "days_before_trip": 30,
            "reasoning": "Mixed-purpose trips need lodging that serves both business and family needs",
        },
        {
            "slug": "childcare",
            "title": "Arrange childcare during business commitments",
            "subtitle": "Hotel kids clubs, babysitting services, or partner family member supervision",
            "priority": LOW, "priority_with_kids": HIGH, "days_before_trip": 21,
            "reasoning": "Business meetings require childcare solutions",
        },
        {
            "slug": "nearby-activities",
            "title": "Research family activities within 30 minutes of business location",
            "subtitle": "Find kid-friendly options that don't require long commutes from work area",
            "priority": MEDIUM, "days_before_trip": 21,
            "reasoning": "Geographic convenience is crucial for mixed business-family trips",
        },
        {
            "slug": "weekend-activities",
            "title": "Plan special weekend family activities",
            "subtitle": "Schedule memorable experiences to compensate for business days",
            "priority": MEDIUM, "days_before_trip": 14,
            "reasoning": "Quality family time must be planned to offset business demands",
        },
        {
            "slug": "family-dining",
            "title": "Research family dining near business meetings",
            "subtitle": "Find restaurants suitable for business dinners that also welcome families",
            "priority": LOW, "days_before_trip": 14,
            "reasoning": "Business dining often needs to accommodate family members",
        },
    ],
    TripPurpose.OTHER: [
        {
            "slug": "trip-goals",
            "title": "Clarify trip goals and expectations",
            "subtitle": "Define what success looks like for this unique trip purpose",
            "priority": MEDIUM, "days_before_trip": 21,
            "reasoning": "Unique trip purposes need explicit goal setting",
        },
        {
            "slug": "destination-research",
            "title": "Research destination-specific family recommendations",
            "subtitle": "Find family travel blogs and forums specific to {city}",
            "priority": MEDIUM, "days_before_trip": 21,
            "reasoning": "Non-standard trip purposes benefit from real family experiences at the destination",
        },
    ],
}


def generate_trip_purpose_tasks(profile: TripProfile, days_until_trip: int) -> List[SmartTask]:
    """Expand the template table for the trip's purpose. No purpose, no tasks."""
    if profile.trip_purpose is None:
        return []

    city = profile.city or "your destination"
    tasks: List[SmartTask] = []

    for tpl in PURPOSE_TEMPLATES.get(profile.trip_purpose, []):
        subtitle = tpl.get("subtitle_with_kids") if profile.has_kids and "subtitle_with_kids" in tpl else tpl["subtitle"]
        priority = tpl.get("priority_with_kids", tpl["priority"]) if profile.has_kids else tpl["priority"]
        urgent_within = tpl.get("urgent_within")

        tasks.append(make_task(
            f"purpose-{profile.trip_purpose.value}-{tpl['slug']}",
            tpl["title"],
            subtitle.format(city=city),
            category=tpl.get("category", "planning"),
            priority=priority,
            urgent=urgent_within is not None and days_until_trip <= urgent_within,
            days_before_trip=tpl["days_before_trip"],
            reasoning=tpl["reasoning"],
            source="trip_purpose",
        ))

    return tasks
