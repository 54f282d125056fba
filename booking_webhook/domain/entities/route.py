from __future__ import annotations

from dataclasses import dataclass

from booking_webhook.domain.entities.booking import BookingRecord, CancellationRecord


@dataclass(frozen=True)
class RouteDecision:
    action: str  # "book", "cancel", "reply"
    booking: BookingRecord | None = None
    cancellation: CancellationRecord | None = None
    reply_text: str | None = None
