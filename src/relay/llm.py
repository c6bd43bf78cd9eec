"""Completion client: a single prompt in, the model's text out."""
from __future__ import annotations

import logging
from typing import Any, Protocol

from langchain_core.language_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI

from src.core.config.models import RelayConfig

log = logging.getLogger("relay.llm")


class CompletionClient(Protocol):
    model: str

    async def complete(self, prompt: str) -> str:
        ...


def content_text(out: Any) -> str:
    """Text of a chat model message. Gemini may return a list of content blocks instead of a str."""
    content = out.content if hasattr(out, "content") else out
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type", "text") == "text":
                parts.append(str(block.get("text", "")))
        return "".join(parts)
    return str(content)


class ChatModelCompletionClient:
    """Wraps any LangChain chat model; the prompt is sent as one human message."""

    def __init__(self, llm: BaseChatModel, model: str):
        self.llm = llm
        self.model = model

    async def complete(self, prompt: str) -> str:
        out = await self.llm.ainvoke(prompt)
        return content_text(out)


def build_completion_client(config: RelayConfig) -> ChatModelCompletionClient:
    # No retries: an upstream failure is reported to the caller right away.
    llm = ChatGoogleGenerativeAI(
        model=config.model,
        google_api_key=config.api_key,
        max_retries=0,
    )
    log.info("Completion client ready (model=%s)", config.model)
    return ChatModelCompletionClient(llm, config.model)
