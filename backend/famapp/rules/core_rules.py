# backend/famapp/rules/core_rules.py

from typing import List

from famapp.data.destinations import is_international, is_popular_destination
from famapp.models.task_models import Priority, SmartTask
from famapp.models.trip_models import TripProfile
from famapp.rules.caps import make_task


def generate_core_logistics_tasks(profile: TripProfile, days_until_trip: int) -> List[SmartTask]:
    """
    Booking essentials every trip needs: transport, lodging, documents,
    insurance, and last-minute confirmations.
    """
    tasks: List[SmartTask] = []
    booking = profile.booking
    international = is_international(profile.country)
    travelers = profile.total_travelers

    # ----- TRANSPORT -----
    if not booking.flights_booked and not booking.primary_transport_booked:
        tasks.append(make_task(
            "core-flights",
            "Book international flights now" if international else "Book flights or confirm transportation",
            "Prices increasing daily - book immediately" if days_until_trip <= 30 else "Lock in travel dates and pricing",
            category="travel",
            priority=Priority.HIGH,
            urgent=days_until_trip <= 30,
            days_before_trip=60 if international else 45,
            reasoning="Primary transportation is essential and prices increase closer to travel dates",
            source="booking_status",
        ))

    # ----- ACCOMMODATION -----
    if not booking.accommodation_booked:
        tasks.append(make_task(
            "core-accommodation",
            "Book family accommodations",
            f"Secure {travelers} traveler rooms in {profile.city or 'destination'} - family-friendly places fill fast",
            category="travel",
            priority=Priority.HIGH,
            urgent=days_until_trip <= 21,
            days_before_trip=30,
            reasoning="Family accommodations book up early, especially rooms that fit multiple travelers",
            source="booking_status",
        ))

    # ----- INTERNATIONAL DOCUMENTS -----
    if international:
        tasks.append(make_task(
            "core-passports",
            "Verify all passports are valid",
            f"Check {travelers} passports have 6+ months validity from travel date",
            priority=Priority.HIGH,
            urgent=days_until_trip <= 60,
            days_before_trip=90,
            reasoning="International travel requires valid passports with sufficient time remaining",
            source="trip_type",
        ))
        tasks.append(make_task(
            "core-bank-notify",
            "Notify banks of international travel",
            f"Alert credit/debit card companies about {profile.country} travel to prevent blocks",
            category="financial",
            priority=Priority.MEDIUM,
            days_before_trip=14,
            reasoning="Banks often freeze cards for unexpected international transactions",
            source="trip_type",
        ))

    # ----- INSURANCE -----
    if not booking.insurance_purchased and (international or travelers >= 3):
        tasks.append(make_task(
            "core-insurance",
            "Purchase travel insurance",
            f"Coverage for {travelers} travelers - medical, cancellation, and lost luggage protection",
            priority=Priority.MEDIUM,
            days_before_trip=21,
            reasoning="Travel insurance matters for families, especially with several travelers or international trips",
            source="risk_management",
        ))

    # ----- POPULAR DESTINATIONS -----
    popular = is_popular_destination(profile.city)

    if popular and not booking.activities_booked and days_until_trip <= 45:
        tasks.append(make_task(
            "core-activities",
            "Book must-see attractions now",
            f"{profile.city} popular attractions sell out - book family tickets in advance",
            category="Activities",
            priority=Priority.HIGH,
            urgent=days_until_trip <= 21,
            days_before_trip=30,
            reasoning="Popular destinations require advance booking to avoid disappointment",
            source="destination_intelligence",
        ))

    if popular and travelers >= 4 and days_until_trip <= 30:
        tasks.append(make_task(
            "core-restaurants",
            "Book family restaurant reservations",
            f"Large family groups ({travelers} people) need advance reservations in {profile.city}",
            priority=Priority.MEDIUM,
            urgent=days_until_trip <= 14,
            days_before_trip=21,
            reasoning="Large families struggle to find restaurant availability without advance booking",
            source="family_logistics",
        ))

    # ----- FINAL WEEK -----
    if days_until_trip <= 7:
        tasks.append(make_task(
            "core-confirmations",
            "Confirm all bookings and reservations",
            "Double-check flights, hotels, and activities - print confirmation emails",
            priority=Priority.HIGH,
            urgent=True,
            days_before_trip=3,
            reasoning="Final confirmations prevent travel day surprises",
            source="pre_departure_checklist",
        ))

    return tasks
