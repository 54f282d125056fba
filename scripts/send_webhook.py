#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
from typing import Any

import httpx
from httpx import ConnectError


def build_payload(intent: str, text: str, params: dict[str, Any]) -> dict[str, Any]:
    return {
        "responseId": "local-test",
        "queryResult": {
            "queryText": text,
            "parameters": params,
            "intent": {"displayName": intent},
        },
    }


def parse_params(pairs: list[str]) -> dict[str, Any]:
    params: dict[str, Any] = {}
    for pair in pairs:
        key, _, value = pair.partition("=")
        if key:
            params[key] = value
    return params


def main() -> None:
    parser = argparse.ArgumentParser(description="Send a test intent webhook POST")
    parser.add_argument("--url", default="http://127.0.0.1:10000/webhook")
    parser.add_argument("--intent", default="Quick_Bus_Booking")
    parser.add_argument("--text", default="Book a bus from Hyderabad to Bangalore")
    parser.add_argument(
        "--param",
        action="append",
        default=[],
        help="Intent parameter as name=value (repeatable)",
    )
    args = parser.parse_args()

    params = parse_params(args.param) or {
        "source_city": "Hyderabad",
        "destination_city": "Bangalore",
        "travel_date": "2024-05-01",
        "passenger_name": "Asha",
        "contact_phone": "9999999999",
    }
    payload = build_payload(args.intent, args.text, params)

    try:
        resp = httpx.post(args.url, json=payload, timeout=10.0)
    except ConnectError:
        print("Connection refused. Is the webhook server running?")
        print("Try: booking-webhook")
        return

    print(resp.status_code)
    if resp.text:
        print(json.dumps(resp.json(), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
