from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from booking_webhook.application.exceptions import ConfigurationError, TransportError
from booking_webhook.application.ports.sheet import SheetPort


class AppsScriptSheet(SheetPort):
    def __init__(
        self,
        endpoint_url: str | None,
        secret: str = "",
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        self._endpoint_url = endpoint_url
        self._secret = secret
        # Apps Script web apps answer POSTs with a redirect to the content host.
        self._client = client or httpx.Client(timeout=timeout, follow_redirects=True)
        self._logger = logging.getLogger(__name__)

    def forward(self, record: Mapping[str, Any]) -> Any:
        if not self._endpoint_url:
            raise ConfigurationError("APPS_SCRIPT_URL not set")

        body = dict(record)
        if self._secret:
            body["token"] = self._secret

        try:
            resp = self._client.post(
                self._endpoint_url,
                json=body,
                headers={"Content-Type": "application/json"},
            )
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            self._logger.debug(
                "Sheet endpoint returned an error",
                extra={"status": e.response.status_code, "booking_id": record.get("bookingId")},
            )
            raise TransportError(f"Sheet endpoint returned HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            self._logger.debug(
                "Sheet endpoint unreachable",
                extra={"error": str(e), "booking_id": record.get("bookingId")},
            )
            raise TransportError(f"Sheet endpoint call failed: {e}") from e

        try:
            return resp.json()
        except ValueError:
            return resp.text
