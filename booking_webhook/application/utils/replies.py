from __future__ import annotations


FALLBACK_REPLY = (
    "I help with buses, movies and museums bookings. "
    "Try 'Book a bus from Hyderabad to Bangalore'."
)
MISSING_PASSENGER_REPLY = "Please provide passenger name and phone to complete the booking."
APOLOGY_REPLY = "Sorry — something went wrong on the server."


def build_booking_confirmed(booking_id: str) -> str:
    return f"✅ Booking confirmed. ID: {booking_id}"


def build_cancellation_requested(booking_id: str) -> str:
    return f"✅ Cancellation requested for {booking_id}"
