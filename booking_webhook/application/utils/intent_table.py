from __future__ import annotations

from booking_webhook.domain.entities.booking_domain import BookingDomain


CANCEL_INTENT = "Cancel_Booking"
CANCEL_ID_PARAM = "booking_id"

BOOKING_DOMAINS: tuple[BookingDomain, ...] = (
    BookingDomain(
        domain="bus",
        intents=("Book_Bus_Step", "Quick_Bus_Booking"),
        detail_fields=(
            "source_city",
            "destination_city",
            "travel_date",
            "travel_time",
            "seat_type",
            "num_passengers",
        ),
    ),
    BookingDomain(
        domain="movie",
        intents=("Book_Movie_Step", "Quick_Movie_Booking"),
        detail_fields=("movie_title", "theatre_name", "show_date", "show_time", "num_tickets"),
    ),
    BookingDomain(
        domain="museum",
        intents=("Book_Museum_Step", "Quick_Museum_Booking"),
        detail_fields=("museum_name", "visit_date", "slot_time", "num_tickets"),
        name_param="visitor_name",
    ),
)


def build_intent_index(domains: tuple[BookingDomain, ...] = BOOKING_DOMAINS) -> dict[str, BookingDomain]:
    index: dict[str, BookingDomain] = {}
    for entry in domains:
        for intent in entry.intents:
            if intent in index:
                raise ValueError(f"Intent {intent!r} is mapped to more than one domain")
            index[intent] = entry
    return index
