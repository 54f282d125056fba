from __future__ import annotations

import logging
from typing import Any

from booking_webhook.application.ports.sheet import SheetPort
from booking_webhook.domain.entities.booking import BookingRecord, CancellationRecord


class ForwardRecordUseCase:
    def __init__(self, sheet: SheetPort) -> None:
        self._sheet = sheet
        self._logger = logging.getLogger(__name__)

    def execute(self, record: BookingRecord | CancellationRecord) -> Any:
        """Forward a record to the sheet. Raises ConfigurationError or TransportError."""
        result = self._sheet.forward(record.to_payload())
        self._logger.info(
            "Record forwarded",
            extra={"booking_id": record.booking_id, "domain": getattr(record, "domain", "cancel")},
        )
        return result
