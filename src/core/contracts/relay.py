from __future__ import annotations

from typing import Any

from pydantic import BaseModel, field_validator

QUERY_REQUIRED = "Query is required."
SOMETHING_WENT_WRONG = "Something went wrong."


class AskRequest(BaseModel):
    query: str

    @field_validator("query")
    @classmethod
    def _not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("query must not be empty")
        return v


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    model: str
    prompt_mode: str


class ReplyEnvelope(BaseModel):
    reply: str


class PlanEnvelope(BaseModel):
    plan: list[Any]


class IntentsEnvelope(BaseModel):
    intents: list[Any]


class OpaqueValue(BaseModel):
    value: Any
