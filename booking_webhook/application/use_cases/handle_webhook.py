from __future__ import annotations

import logging
from typing import Any, Mapping

from booking_webhook.application.exceptions import ForwardingError
from booking_webhook.application.use_cases.classify_request import ClassifyRequestUseCase
from booking_webhook.application.use_cases.forward_record import ForwardRecordUseCase
from booking_webhook.application.utils.replies import (
    APOLOGY_REPLY,
    FALLBACK_REPLY,
    MISSING_PASSENGER_REPLY,
    build_booking_confirmed,
    build_cancellation_requested,
)


class HandleWebhookUseCase:
    def __init__(
        self,
        classify_request: ClassifyRequestUseCase,
        forward_record: ForwardRecordUseCase,
    ) -> None:
        self._classify_request = classify_request
        self._forward_record = forward_record
        self._logger = logging.getLogger(__name__)

    def handle(
        self,
        intent_name: str | None,
        parameters: Mapping[str, Any] | None,
        query_text: str | None,
    ) -> str:
        """Returns the fulfillment text for one platform request."""
        decision = self._classify_request.execute(intent_name, parameters, query_text)

        try:
            if decision.action == "cancel" and decision.cancellation is not None:
                cancellation = decision.cancellation
                self._forward_record.execute(cancellation)
                return build_cancellation_requested(cancellation.booking_id)

            if decision.action == "book" and decision.booking is not None:
                booking = decision.booking
                # Slot filling across turns is the platform's job; resend with every parameter set.
                if not booking.passenger.is_complete():
                    self._logger.info(
                        "Passenger details missing",
                        extra={"intent": intent_name, "domain": booking.domain, "reason": "incomplete_passenger"},
                    )
                    return MISSING_PASSENGER_REPLY

                self._forward_record.execute(booking)
                return build_booking_confirmed(booking.booking_id)
        except ForwardingError as e:
            self._logger.error(
                "Webhook error",
                extra={"intent": intent_name, "error": str(e), "reason": type(e).__name__},
            )
            return APOLOGY_REPLY

        return decision.reply_text or FALLBACK_REPLY
