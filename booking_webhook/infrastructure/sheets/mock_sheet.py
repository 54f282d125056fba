from __future__ import annotations

import logging
from typing import Any, Mapping

from booking_webhook.application.ports.sheet import SheetPort


class MockSheet(SheetPort):
    def __init__(self) -> None:
        self.records: list[dict[str, Any]] = []
        self._logger = logging.getLogger(__name__)

    def forward(self, record: Mapping[str, Any]) -> Any:
        self.records.append(dict(record))
        self._logger.info("Mock sheet row appended", extra={"booking_id": record.get("bookingId")})
        return {"status": "ok", "rows": len(self.records)}
