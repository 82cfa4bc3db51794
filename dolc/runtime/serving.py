"""FastAPI-based serving layer for the DOL compiler.

Provides an HTTP API for compiling, validating, and formatting DOL source,
plus health and version endpoints. The compile endpoint is rate-limited
per client.
"""

from __future__ import annotations

import logging
import time
from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI, HTTPException, Request, Response
from pydantic import BaseModel

from dolc.api import compile_source, format_source, get_version, validate_source
from dolc.compiler.serializer import serialize_to_dict
from dolc.core.config import DolConfig, get_config
from dolc.runtime.lifecycle import initialize
from dolc.runtime.ratelimit import RateLimiter

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Request / response models
# ---------------------------------------------------------------------------


class SourceRequest(BaseModel):
    source: str


class DiagnosticModel(BaseModel):
    message: str
    line: int
    column: int
    category: str


class MetadataModel(BaseModel):
    compiler_version: str
    spirit_count: int
    function_count: int
    source_line_count: int


class CompileResponse(BaseModel):
    success: bool
    ast: list[dict[str, Any]]
    errors: list[DiagnosticModel]
    warnings: list[DiagnosticModel]
    metadata: MetadataModel
    compile_time_ms: float


class ValidateResponse(BaseModel):
    valid: bool


class FormatResponse(BaseModel):
    source: str


class VersionResponse(BaseModel):
    version: str


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    timestamp: str


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------


def create_app(config: DolConfig | None = None) -> FastAPI:
    """Create the FastAPI application."""
    config = config or get_config()
    initialize(config)

    limiter = RateLimiter(
        max_requests=config.rate_limit_requests,
        window_seconds=config.rate_limit_window,
    )

    app = FastAPI(
        title="DOL Compiler API",
        description="Structural analysis for DOL source",
        version=get_version(),
    )
    app.state.rate_limiter = limiter

    def client_key(request: Request) -> str:
        # The header is only honoured behind a proxy that overwrites it
        if config.trust_client_ip_header:
            forwarded = request.headers.get(config.client_ip_header)
            if forwarded:
                return forwarded
        return request.client.host if request.client else "unknown"

    def check_size(source: str) -> None:
        if len(source) > config.max_source_chars:
            raise HTTPException(
                status_code=413,
                detail=f"Source exceeds {config.max_source_chars} characters",
            )

    @app.get("/api/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(
            status="ok",
            service="dolc",
            version=get_version(),
            timestamp=datetime.now(UTC).isoformat(),
        )

    @app.get("/api/version", response_model=VersionResponse)
    async def version() -> VersionResponse:
        return VersionResponse(version=get_version())

    @app.post("/api/compile", response_model=CompileResponse)
    async def compile_endpoint(
        payload: SourceRequest, request: Request, response: Response, compact: bool = False
    ) -> CompileResponse:
        key = client_key(request)
        if not limiter.check(key):
            logger.warning("Rate limit exceeded for %s", key)
            raise HTTPException(
                status_code=429,
                detail="Rate limit exceeded. Please wait before trying again.",
            )
        check_size(payload.source)

        start = time.perf_counter()
        result = compile_source(payload.source)
        elapsed_ms = (time.perf_counter() - start) * 1000.0

        if not result.success:
            response.status_code = 400
        return CompileResponse(
            **serialize_to_dict(result, compact=compact), compile_time_ms=elapsed_ms
        )

    @app.post("/api/validate", response_model=ValidateResponse)
    async def validate_endpoint(payload: SourceRequest) -> ValidateResponse:
        check_size(payload.source)
        return ValidateResponse(valid=validate_source(payload.source))

    @app.post("/api/format", response_model=FormatResponse)
    async def format_endpoint(payload: SourceRequest) -> FormatResponse:
        check_size(payload.source)
        return FormatResponse(source=format_source(payload.source))

    return app


def start_server(host: str | None = None, port: int | None = None) -> None:
    """Start the DOL compiler API.

    Args:
        host: Host to bind to; defaults to the configured server host.
        port: Port to listen on; defaults to the configured server port.
    """
    import uvicorn

    config = get_config()
    host = host or config.server_host
    port = port or config.server_port

    app = create_app(config)
    logger.info("Starting dolc server on %s:%d", host, port)
    uvicorn.run(app, host=host, port=port)
