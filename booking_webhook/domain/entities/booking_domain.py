from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BookingDomain:
    domain: str
    intents: tuple[str, ...]
    detail_fields: tuple[str, ...]
    name_param: str = "passenger_name"
    phone_param: str = "contact_phone"
