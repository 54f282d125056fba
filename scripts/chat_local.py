#!/usr/bin/env python3
"""
Interactive local harness (no HTTP, no spreadsheet).

Usage:
  python3 scripts/chat_local.py

Type an intent name followed by name=value parameters, e.g.
  Quick_Movie_Booking movie_title=Dune passenger_name=Asha contact_phone=9999999999
Requests run through the same HandleWebhookUseCase as the server, against a MockSheet,
and the forwarded rows are printed after each reply.
"""

from __future__ import annotations

import json
import shlex
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from booking_webhook.infrastructure.sheets.mock_sheet import MockSheet  # noqa: E402
from booking_webhook.wiring.dependencies import build_handle_webhook_use_case  # noqa: E402


def _print_header() -> None:
    print("\nLocal Booking Harness")
    print("-" * 60)
    print("Enter: <Intent_Name> [name=value ...]")
    print("Commands: /rows (show forwarded rows), /quit, /help")
    print("-" * 60)


def _parse_line(line: str) -> tuple[str | None, dict[str, str], str]:
    parts = shlex.split(line)
    if not parts:
        return None, {}, ""
    intent, rest = parts[0], parts[1:]
    params: dict[str, str] = {}
    words: list[str] = []
    for token in rest:
        key, sep, value = token.partition("=")
        if sep:
            params[key] = value
        else:
            words.append(token)
    return intent, params, " ".join(words)


def main() -> None:
    sheet = MockSheet()
    use_case = build_handle_webhook_use_case(sheet)
    _print_header()

    while True:
        try:
            line = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not line:
            continue
        if line == "/quit":
            break
        if line == "/help":
            _print_header()
            continue
        if line == "/rows":
            print(json.dumps(sheet.records, ensure_ascii=False, indent=2))
            continue

        before = len(sheet.records)
        intent, params, text = _parse_line(line)
        reply = use_case.handle(intent, params, text)
        print(f"bot: {reply}")
        for row in sheet.records[before:]:
            print(f"  forwarded: {json.dumps(row, ensure_ascii=False)}")


if __name__ == "__main__":
    main()
