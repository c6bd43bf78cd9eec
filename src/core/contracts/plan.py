"""Shapes the planner prompt asks the model to produce.

Nothing in the relay enforces these; they document the contract for clients
that consume ``/ask`` responses.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict

TOOLBOX_ACTIONS = (
    "SET_BRIGHTNESS",
    "SET_VOLUME",
    "TOGGLE_FLASHLIGHT",
    "TOGGLE_BLUETOOTH",
    "OPEN_CAMERA",
    "SET_ALARM",
    "MAKE_CALL",
    "SEND_SMS",
    "OPEN_APP",
    "NAVIGATE_SETTINGS",
    "CLICK",
    "TYPE",
    "SWIPE",
    "BACK",
)


class PlanStep(BaseModel):
    model_config = ConfigDict(extra="allow")

    action: str

    @property
    def is_known_action(self) -> bool:
        return self.action in TOOLBOX_ACTIONS
