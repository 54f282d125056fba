from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from booking_webhook.application.utils.booking_id import generate_booking_id
from booking_webhook.application.utils.intent_table import (
    BOOKING_DOMAINS,
    CANCEL_ID_PARAM,
    CANCEL_INTENT,
    build_intent_index,
)
from booking_webhook.application.utils.parameters import last_token, param_or_none
from booking_webhook.application.utils.replies import FALLBACK_REPLY
from booking_webhook.application.utils.timestamps import utc_now_iso
from booking_webhook.domain.entities.booking import BookingRecord, CancellationRecord, Passenger
from booking_webhook.domain.entities.booking_domain import BookingDomain
from booking_webhook.domain.entities.route import RouteDecision


class ClassifyRequestUseCase:
    def __init__(
        self,
        domains: tuple[BookingDomain, ...] = BOOKING_DOMAINS,
        id_factory: Callable[[], str] = generate_booking_id,
        clock: Callable[[], str] = utc_now_iso,
    ) -> None:
        self._index = build_intent_index(domains)
        self._id_factory = id_factory
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    def execute(
        self,
        intent_name: str | None,
        parameters: Mapping[str, Any] | None,
        query_text: str | None,
    ) -> RouteDecision:
        """
        Map one platform request onto a booking skeleton, a cancellation record or a direct reply.
        Never raises for missing data; absent parameters become None.
        """
        params = parameters or {}
        raw = query_text or ""

        if intent_name == CANCEL_INTENT:
            booking_id = param_or_none(params, CANCEL_ID_PARAM) or last_token(raw)
            return RouteDecision(
                action="cancel",
                cancellation=CancellationRecord(
                    booking_id=str(booking_id),
                    created_at=self._clock(),
                    raw=raw,
                ),
            )

        entry = self._index.get(intent_name) if intent_name else None
        if entry is None:
            self._logger.info("Unrecognized intent", extra={"intent": intent_name or "<none>"})
            return RouteDecision(action="reply", reply_text=FALLBACK_REPLY)

        return RouteDecision(action="book", booking=self._build_skeleton(entry, params, raw))

    def _build_skeleton(self, entry: BookingDomain, params: Mapping[str, Any], raw: str) -> BookingRecord:
        details = {name: param_or_none(params, name) for name in entry.detail_fields}
        passenger = Passenger(
            name=param_or_none(params, entry.name_param),
            phone=param_or_none(params, entry.phone_param),
        )
        return BookingRecord(
            booking_id=self._id_factory(),
            created_at=self._clock(),
            domain=entry.domain,
            details=details,
            passenger=passenger,
            raw=raw,
        )
