"""FastAPI entrypoint exposing the `/chat` endpoint."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import BaseModel, Field

from shop_agent.agent.orchestrator import TurnOrchestrator
from shop_agent.agent.registry import ToolRegistry
from shop_agent.agent.tools import register_commerce_tools
from shop_agent.commerce.client import CommerceClient
from shop_agent.commerce.service import CommerceQueryAdapter
from shop_agent.config import Settings
from shop_agent.errors import ConfigurationError
from shop_agent.obs.logging import configure_logging
from shop_agent.obs.tracing import log_tool_trace

_MISSING_MESSAGE = "Request body must include a `message` string."


class ChatRequest(BaseModel):
    message: str = Field(min_length=1)


def _create_llm(settings: Settings) -> Any:
    from langchain_openai import ChatOpenAI

    agent_config = settings.agent_config()
    return ChatOpenAI(
        model=agent_config.model,
        temperature=agent_config.temperature,
        api_key=settings.require_openai_key(),
    )


def build_orchestrator(settings: Settings) -> tuple[TurnOrchestrator, CommerceClient]:
    """Wire the commerce client, tool catalog and chat model from `settings`.

    Raises:
        ConfigurationError: if the store or model credentials are missing.
    """
    commerce_config = settings.commerce_config()
    llm = _create_llm(settings)

    client = CommerceClient(commerce_config)
    registry = ToolRegistry(observer=log_tool_trace)
    register_commerce_tools(registry, CommerceQueryAdapter(client))
    orchestrator = TurnOrchestrator(
        llm=llm,
        tool_registry=registry,
        config=settings.agent_config(),
    )
    return orchestrator, client


def create_app(
    settings: Settings | None = None,
    *,
    orchestrator: TurnOrchestrator | None = None,
) -> FastAPI:
    settings = settings or Settings()
    configure_logging(settings.log_level)

    client: CommerceClient | None = None
    config_error: ConfigurationError | None = None
    if orchestrator is None:
        try:
            orchestrator, client = build_orchestrator(settings)
        except ConfigurationError as exc:
            logger.warning(f"Chat endpoint disabled: {exc.message}")
            config_error = exc

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(f"Shopify agent server is running on port {settings.port}")
        yield
        if client is not None:
            client.close()

    app = FastAPI(title="Shopify Chat Agent", version="0.1.0", lifespan=lifespan)

    @app.exception_handler(RequestValidationError)
    async def _invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": _MISSING_MESSAGE})

    @app.get("/health")
    def health() -> dict[str, Any]:
        return {
            "status": "ok",
            "llm_configured": bool(settings.openai_api_key.strip()),
            "commerce_configured": bool(settings.shopify_store.strip() and settings.shopify_token.strip()),
            "chat_ready": orchestrator is not None,
        }

    @app.post("/chat")
    def chat(request: ChatRequest) -> dict[str, Any]:
        if orchestrator is None:
            raise HTTPException(status_code=500, detail=str(config_error))
        try:
            return orchestrator.invoke(request.message).as_payload()
        except Exception as exc:
            logger.exception(f"Chat turn failed: {exc}")
            raise HTTPException(status_code=500, detail=str(exc)) from exc

    return app


app = create_app()
