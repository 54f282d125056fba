from __future__ import annotations

from typing import Any, Mapping


def param_or_none(params: Mapping[str, Any], name: str) -> Any:
    """Parameter value, or None when the slot is unfilled (missing, null, "" or [])."""
    value = params.get(name)
    if value in ("", None, []):
        return None
    return value


def last_token(text: str) -> str:
    tokens = text.split()
    return tokens[-1] if tokens else ""
