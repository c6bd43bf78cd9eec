"""Tag a parsed completion as reply / plan / intents / opaque without validating it further."""
from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import ValidationError

from src.core.contracts.relay import IntentsEnvelope, OpaqueValue, PlanEnvelope, ReplyEnvelope

Envelope = Union[ReplyEnvelope, PlanEnvelope, IntentsEnvelope, OpaqueValue]
EnvelopeKind = Literal["reply", "plan", "intents", "opaque"]

# Only single-key objects count as an envelope; the prompt forbids mixing reply and plan.
_SHAPES: tuple[tuple[str, type[ReplyEnvelope | PlanEnvelope | IntentsEnvelope]], ...] = (
    ("reply", ReplyEnvelope),
    ("plan", PlanEnvelope),
    ("intents", IntentsEnvelope),
)


def classify_envelope(body: Any) -> Envelope:
    if isinstance(body, dict) and len(body) == 1:
        for key, model in _SHAPES:
            if key in body:
                try:
                    return model.model_validate(body)
                except ValidationError:
                    break
    return OpaqueValue(value=body)


def envelope_kind(envelope: Envelope) -> EnvelopeKind:
    if isinstance(envelope, ReplyEnvelope):
        return "reply"
    if isinstance(envelope, PlanEnvelope):
        return "plan"
    if isinstance(envelope, IntentsEnvelope):
        return "intents"
    return "opaque"
