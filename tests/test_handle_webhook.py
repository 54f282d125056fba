"""
Tests for the request flow: classification, passenger gate, forwarding and replies.
"""

from __future__ import annotations

from typing import Any, Mapping

from booking_webhook.application.exceptions import ConfigurationError, TransportError
from booking_webhook.application.ports.sheet import SheetPort
from booking_webhook.application.use_cases.classify_request import ClassifyRequestUseCase
from booking_webhook.application.use_cases.forward_record import ForwardRecordUseCase
from booking_webhook.application.use_cases.handle_webhook import HandleWebhookUseCase
from booking_webhook.application.utils.replies import (
    APOLOGY_REPLY,
    FALLBACK_REPLY,
    MISSING_PASSENGER_REPLY,
)
from booking_webhook.infrastructure.sheets.mock_sheet import MockSheet


FULL_BUS_PARAMS = {
    "source_city": "Hyderabad",
    "destination_city": "Bangalore",
    "travel_date": "2024-05-01",
    "passenger_name": "Asha",
    "contact_phone": "9999999999",
}


class FailingSheet(SheetPort):
    def __init__(self, error: Exception) -> None:
        self.calls = 0
        self._error = error

    def forward(self, record: Mapping[str, Any]) -> Any:
        self.calls += 1
        raise self._error


def _use_case(sheet: SheetPort) -> HandleWebhookUseCase:
    return HandleWebhookUseCase(
        classify_request=ClassifyRequestUseCase(id_factory=lambda: "BK-FIXED01"),
        forward_record=ForwardRecordUseCase(sheet=sheet),
    )


def test_complete_bus_booking_is_forwarded_and_confirmed():
    sheet = MockSheet()

    reply = _use_case(sheet).handle("Quick_Bus_Booking", FULL_BUS_PARAMS, "Book a bus")

    assert reply == "✅ Booking confirmed. ID: BK-FIXED01"
    assert len(sheet.records) == 1
    row = sheet.records[0]
    assert row["bookingId"] == "BK-FIXED01"
    assert row["domain"] == "bus"
    assert row["details"]["source_city"] == "Hyderabad"
    assert row["details"]["destination_city"] == "Bangalore"
    assert row["details"]["travel_date"] == "2024-05-01"
    assert row["details"]["seat_type"] is None
    assert row["passenger"] == {"name": "Asha", "phone": "9999999999"}
    assert row["raw"] == "Book a bus"


def test_missing_phone_asks_for_passenger_details():
    sheet = MockSheet()
    params = {k: v for k, v in FULL_BUS_PARAMS.items() if k != "contact_phone"}

    reply = _use_case(sheet).handle("Quick_Bus_Booking", params, "Book a bus")

    assert reply == MISSING_PASSENGER_REPLY
    assert sheet.records == []


def test_missing_name_asks_for_passenger_details():
    sheet = MockSheet()
    params = {k: v for k, v in FULL_BUS_PARAMS.items() if k != "passenger_name"}

    assert _use_case(sheet).handle("Book_Bus_Step", params, "") == MISSING_PASSENGER_REPLY
    assert sheet.records == []


def test_blank_name_counts_as_missing():
    sheet = MockSheet()
    params = dict(FULL_BUS_PARAMS, passenger_name="   ")

    assert _use_case(sheet).handle("Book_Bus_Step", params, "") == MISSING_PASSENGER_REPLY
    assert sheet.records == []


def test_museum_gate_uses_visitor_name():
    sheet = MockSheet()
    params = {"museum_name": "Salar Jung", "passenger_name": "Asha", "contact_phone": "1"}

    assert _use_case(sheet).handle("Quick_Museum_Booking", params, "") == MISSING_PASSENGER_REPLY

    params["visitor_name"] = "Asha"
    assert _use_case(sheet).handle("Quick_Museum_Booking", params, "").startswith("✅ Booking confirmed")
    assert sheet.records[0]["domain"] == "museum"


def test_cancellation_is_forwarded():
    sheet = MockSheet()

    reply = _use_case(sheet).handle("Cancel_Booking", {}, "cancel BK-OLD1234")

    assert reply == "✅ Cancellation requested for BK-OLD1234"
    assert len(sheet.records) == 1
    assert sheet.records[0]["action"] == "CANCEL"
    assert sheet.records[0]["bookingId"] == "BK-OLD1234"


def test_unknown_intent_replies_without_forwarding():
    sheet = MockSheet()

    assert _use_case(sheet).handle("Small_Talk", FULL_BUS_PARAMS, "hi") == FALLBACK_REPLY
    assert _use_case(sheet).handle(None, {}, "") == FALLBACK_REPLY
    assert sheet.records == []


def test_configuration_error_becomes_apology():
    sheet = FailingSheet(ConfigurationError("APPS_SCRIPT_URL not set"))

    assert _use_case(sheet).handle("Quick_Bus_Booking", FULL_BUS_PARAMS, "") == APOLOGY_REPLY
    assert sheet.calls == 1


def test_transport_error_becomes_apology_for_cancellation():
    sheet = FailingSheet(TransportError("Sheet endpoint returned HTTP 500"))

    assert _use_case(sheet).handle("Cancel_Booking", {"booking_id": "BK-1234567"}, "") == APOLOGY_REPLY


def test_gate_runs_before_forwarding():
    """An incomplete booking never reaches the sheet, even a failing one."""
    sheet = FailingSheet(TransportError("unreachable"))

    assert _use_case(sheet).handle("Quick_Movie_Booking", {"movie_title": "Dune"}, "") == MISSING_PASSENGER_REPLY
    assert sheet.calls == 0


def test_forwarding_failure_logs_one_diagnostic_line(caplog):
    """A failed forward produces a single ERROR record and nothing else at WARNING or above."""
    import httpx

    from booking_webhook.infrastructure.sheets.apps_script_sheet import AppsScriptSheet

    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(500)))
    sheet = AppsScriptSheet(endpoint_url="https://sheet.example/exec", client=client)

    with caplog.at_level("DEBUG"):
        assert _use_case(sheet).handle("Quick_Bus_Booking", FULL_BUS_PARAMS, "") == APOLOGY_REPLY

    loud = [r for r in caplog.records if r.levelno >= 30]
    assert len(loud) == 1
    assert loud[0].levelname == "ERROR"
    assert loud[0].reason == "TransportError"
