"""Relay FastAPI app: POST /ask -> Gemini -> JSON.

Run with: python -m src.relay.main  (or: uvicorn --factory src.relay.main:app_from_env)
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.core.config.env import get_env_vars
from src.core.config.loader import load_relay_config
from src.core.config.models import RelayConfig
from src.core.contracts.relay import QUERY_REQUIRED, SOMETHING_WENT_WRONG, ErrorResponse, HealthResponse
from src.core.exceptions import MalformedCompletion, QueryRequired
from src.relay.handler import RelayHandler, preview, parse_ask_request
from src.relay.llm import CompletionClient, build_completion_client
from src.relay.middleware import RequestIDMiddleware

LOG_FORMAT = "%(asctime)s [%(name)s] %(message)s"

log = logging.getLogger("relay")


def create_app(config: RelayConfig, client: CompletionClient | None = None) -> FastAPI:
    handler = RelayHandler(config, client or build_completion_client(config))

    app = FastAPI(title="Ask Relay")
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
    app.state.config = config
    app.state.handler = handler

    @app.get("/health", response_model=HealthResponse)
    def health():
        return HealthResponse(status="ok", model=config.model, prompt_mode=config.prompt_mode.value)

    @app.post("/ask")
    async def ask(request: Request):
        request_id = getattr(request.state, "request_id", "-")
        try:
            payload = await request.json()
        except ValueError:
            payload = None
        try:
            req = parse_ask_request(payload)
        except QueryRequired as e:
            log.info("REJECTED [%s]: %s", request_id, e)
            return JSONResponse(status_code=400, content=ErrorResponse(error=QUERY_REQUIRED).model_dump())

        log.info("QUERY [%s]: %s", request_id, preview(req.query))
        try:
            body = await handler.ask(req.query)
        except MalformedCompletion as e:
            log.exception("Relay failed [%s]", request_id)
            log.error("Problematic text to parse [%s]: %s", request_id, e.text)
            return JSONResponse(status_code=500, content=ErrorResponse(error=SOMETHING_WENT_WRONG).model_dump())
        except Exception:
            log.exception("Relay failed [%s]", request_id)
            return JSONResponse(status_code=500, content=ErrorResponse(error=SOMETHING_WENT_WRONG).model_dump())
        return JSONResponse(content=body)

    return app


def configure_logging() -> None:
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, datefmt="%H:%M:%S")


def config_from_env() -> RelayConfig:
    """Startup path shared by the factory and __main__: logging, .env, then config."""
    configure_logging()
    return load_relay_config(get_env_vars())


def app_from_env() -> FastAPI:
    return create_app(config_from_env())


if __name__ == "__main__":
    import uvicorn

    cfg = config_from_env()
    log.info("Relay listening on port %s (model=%s, prompt_mode=%s, on_malformed_output=%s)",
             cfg.port, cfg.model, cfg.prompt_mode.value, cfg.on_malformed_output.value)
    uvicorn.run(create_app(cfg), host="0.0.0.0", port=cfg.port)
