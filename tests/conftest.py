from __future__ import annotations

from typing import Callable

import pytest
from fastapi.testclient import TestClient

from src.core.config.models import MalformedOutputPolicy, PromptMode, RelayConfig
from src.relay.main import create_app


class FakeCompletionClient:
    """Records prompts and answers with a canned completion (or raises)."""

    def __init__(self, text: str = '{"reply": "hi"}', error: Exception | None = None, model: str = "gemini-2.5-pro"):
        self.text = text
        self.error = error
        self.model = model
        self.prompts: list[str] = []

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


def make_config(**overrides) -> RelayConfig:
    data = {"api_key": "test-key"}
    data.update(overrides)
    return RelayConfig.model_validate(data)


@pytest.fixture
def fake_client() -> FakeCompletionClient:
    return FakeCompletionClient()


@pytest.fixture
def relay_client_factory() -> Callable[..., TestClient]:
    """Build a TestClient around create_app with a fake completion client."""

    def _factory(
        client: FakeCompletionClient,
        prompt_mode: PromptMode = PromptMode.VERBATIM,
        on_malformed_output: MalformedOutputPolicy = MalformedOutputPolicy.WRAP,
        model: str = "gemini-2.5-pro",
    ) -> TestClient:
        cfg = make_config(prompt_mode=prompt_mode, on_malformed_output=on_malformed_output, model=model)
        return TestClient(create_app(cfg, client=client))

    return _factory
