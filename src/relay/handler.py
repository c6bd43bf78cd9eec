"""POST /ask logic: prompt -> completion -> normalized JSON body."""
from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from src.core.config.models import RelayConfig
from src.core.contracts.envelope import classify_envelope, envelope_kind
from src.core.contracts.plan import PlanStep
from src.core.contracts.relay import AskRequest, PlanEnvelope
from src.core.exceptions import QueryRequired, UpstreamError
from src.relay.completion import interpret_completion, strip_fences
from src.relay.llm import CompletionClient
from src.relay.prompts import build_prompt

log = logging.getLogger("relay")


def preview(text: str, max_len: int = 200) -> str:
    return (text[:max_len] + "…") if len(text) > max_len else text


def parse_ask_request(payload: Any) -> AskRequest:
    if not isinstance(payload, dict):
        raise QueryRequired("Request body must be a JSON object")
    try:
        return AskRequest.model_validate(payload)
    except ValidationError as e:
        raise QueryRequired(str(e)) from e


def _log_unknown_actions(envelope: PlanEnvelope) -> None:
    unknown = []
    for raw in envelope.plan:
        try:
            step = PlanStep.model_validate(raw)
        except ValidationError:
            unknown.append(repr(raw))
            continue
        if not step.is_known_action:
            unknown.append(step.action)
    if unknown:
        log.warning("PLAN has %s step(s) outside the toolbox: %s", len(unknown), ", ".join(unknown))


class RelayHandler:
    def __init__(self, config: RelayConfig, client: CompletionClient):
        self.config = config
        self.client = client

    async def ask(self, query: str) -> Any:
        prompt = build_prompt(query, self.config.prompt_mode)
        try:
            raw = await self.client.complete(prompt)
        except Exception as e:
            raise UpstreamError(f"{type(e).__name__}: {e}") from e

        log.info("COMPLETION: %s", raw)
        body = interpret_completion(strip_fences(raw), self.config.on_malformed_output)

        envelope = classify_envelope(body)
        log.info("ENVELOPE: %s", envelope_kind(envelope))
        if isinstance(envelope, PlanEnvelope):
            _log_unknown_actions(envelope)
        return body
