"""Normalize model completions: strip markdown fences and interpret the text as JSON."""
from __future__ import annotations

import json
import re
from typing import Any

from src.core.config.models import MalformedOutputPolicy
from src.core.exceptions import MalformedCompletion

# Opening fence: optional leading whitespace, ``` plus an optional language tag, then end of line.
_OPENING_FENCE = re.compile(r"\A\s*```[\w+.-]*[ \t]*\r?\n")
# Closing fence: a line holding only ```, optionally followed by trailing whitespace.
_CLOSING_FENCE = re.compile(r"\r?\n[ \t]*```\s*\Z")


def strip_fences(text: str) -> str:
    """Remove one leading and one trailing code fence line, if present. Inner content is untouched."""
    text = _OPENING_FENCE.sub("", text, count=1)
    return _CLOSING_FENCE.sub("", text, count=1)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def parse_json(text: str) -> Any:
    """Strict JSON parse. NaN/Infinity are refused since they cannot be sent back as JSON."""
    return json.loads(text, parse_constant=_reject_constant)


def interpret_completion(text: str, policy: MalformedOutputPolicy) -> Any:
    """Return the response body for an already-normalized completion."""
    try:
        return parse_json(text)
    except ValueError as e:
        if policy is MalformedOutputPolicy.WRAP:
            return {"reply": text}
        raise MalformedCompletion(text, str(e)) from e
