from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Passenger:
    name: Any = None
    phone: Any = None

    def is_complete(self) -> bool:
        return _present(self.name) and _present(self.phone)


@dataclass(frozen=True)
class BookingRecord:
    booking_id: str
    created_at: str
    domain: str = "unknown"  # "bus", "movie", "museum", "unknown"
    details: dict[str, Any] = field(default_factory=dict)
    passenger: Passenger = field(default_factory=Passenger)
    raw: str = ""

    def to_payload(self) -> dict[str, Any]:
        return {
            "bookingId": self.booking_id,
            "createdAt": self.created_at,
            "domain": self.domain,
            "details": dict(self.details),
            "passenger": {"name": self.passenger.name, "phone": self.passenger.phone},
            "raw": self.raw,
        }


@dataclass(frozen=True)
class CancellationRecord:
    booking_id: str
    created_at: str
    raw: str = ""
    action: str = "CANCEL"

    def to_payload(self) -> dict[str, Any]:
        return {
            "action": self.action,
            "bookingId": self.booking_id,
            "createdAt": self.created_at,
            "raw": self.raw,
        }


def _present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        # Stricter than a plain truthiness check: a whitespace-only name or phone is missing.
        return bool(value.strip())
    return True
