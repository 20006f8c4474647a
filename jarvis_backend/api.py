"""FastAPI application exposing health, echo and host metrics endpoints."""
from __future__ import annotations

import json
from typing import Any, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from .config import Settings, get_settings
from .metrics import PsutilSampler, Sampler, collect_system_metrics
from .schemas import EchoRequest, EchoResponse, HealthResponse, SystemMetrics

GREETING = "Welcome to JARVIS! 🤖"
HEALTH_MESSAGE = "JARVIS backend is running!"


def get_sampler(request: Request) -> Sampler:
    return request.app.state.sampler


class ASCIIJSONResponse(JSONResponse):
    """JSON response that escapes non-ASCII, so echoed lone surrogates still encode."""

    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=True, allow_nan=False, separators=(",", ":")).encode("utf-8")


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return ASCIIJSONResponse(status_code=422, content={"detail": jsonable_encoder(exc.errors())})


def create_app(sampler: Optional[Sampler] = None, settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title="JARVIS Backend",
        description="Health, echo and host metrics service for the JARVIS dashboard.",
        version="0.1.0",
    )
    app.state.sampler = sampler if sampler is not None else PsutilSampler()
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.cors_origins),
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )

    @app.get("/", response_class=PlainTextResponse, summary="Greeting", tags=["system"])
    async def root():
        return GREETING

    @app.get("/health", response_model=HealthResponse, summary="Service health check", tags=["system"])
    async def health_check():
        return HealthResponse(status="ok", message=HEALTH_MESSAGE)

    @app.post("/api/echo", response_model=EchoResponse, summary="Reflect a message", tags=["api"])
    async def echo_handler(payload: EchoRequest):
        return EchoResponse(echo=payload.message, length=len(payload.message.encode("utf-8")))

    @app.get(
        "/api/metrics",
        response_model=SystemMetrics,
        summary="Return current host CPU and memory metrics",
        tags=["api"],
    )
    def get_metrics(host_sampler: Sampler = Depends(get_sampler)):
        return collect_system_metrics(host_sampler)

    return app


app = create_app()
