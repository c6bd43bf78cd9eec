from src.core.contracts.relay import (
    AskRequest,
    ErrorResponse,
    HealthResponse,
    ReplyEnvelope,
    PlanEnvelope,
    IntentsEnvelope,
    OpaqueValue,
    QUERY_REQUIRED,
    SOMETHING_WENT_WRONG,
)
from src.core.contracts.envelope import Envelope, classify_envelope, envelope_kind
from src.core.contracts.plan import PlanStep, TOOLBOX_ACTIONS

__all__ = [
    "AskRequest",
    "ErrorResponse",
    "HealthResponse",
    "ReplyEnvelope",
    "PlanEnvelope",
    "IntentsEnvelope",
    "OpaqueValue",
    "QUERY_REQUIRED",
    "SOMETHING_WENT_WRONG",
    "Envelope",
    "classify_envelope",
    "envelope_kind",
    "PlanStep",
    "TOOLBOX_ACTIONS",
]
