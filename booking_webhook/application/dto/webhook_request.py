from __future__ import annotations

from typing import Any

from pydantic import BaseModel, field_validator


class IntentDTO(BaseModel):
    displayName: str | None = None

    @field_validator("displayName", mode="before")
    @classmethod
    def _string_or_none(cls, value: Any) -> Any:
        return value if isinstance(value, str) else None


class QueryResultDTO(BaseModel):
    intent: IntentDTO | None = None
    parameters: dict[str, Any] | None = None
    queryText: str | None = None

    # A malformed field degrades to None on its own; the rest of the request is kept.
    @field_validator("intent", "parameters", mode="before")
    @classmethod
    def _mapping_or_none(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else None

    @field_validator("queryText", mode="before")
    @classmethod
    def _text_or_none(cls, value: Any) -> Any:
        return value if isinstance(value, str) else None


class WebhookRequestDTO(BaseModel):
    queryResult: QueryResultDTO | None = None

    @field_validator("queryResult", mode="before")
    @classmethod
    def _mapping_or_none(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else None

    def intent_name(self) -> str | None:
        if self.queryResult and self.queryResult.intent:
            return self.queryResult.intent.displayName
        return None

    def parameters(self) -> dict[str, Any]:
        if self.queryResult and self.queryResult.parameters:
            return dict(self.queryResult.parameters)
        return {}

    def query_text(self) -> str:
        if self.queryResult and self.queryResult.queryText:
            return self.queryResult.queryText
        return ""
