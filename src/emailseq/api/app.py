"""FastAPI application factory.

The service is injected, never created here: the CLI ``serve`` command
builds it from settings, tests build it over an in-memory or temporary
SQLite repository.
"""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError

from emailseq import __version__
from emailseq.api.errors import request_validation_handler
from emailseq.api.routes import router
from emailseq.services.sequence import SequenceService


async def _log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    log = structlog.get_logger("emailseq.api")
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        log.exception("request.error", method=request.method, path=request.url.path)
        raise
    log.info(
        "request",
        method=request.method,
        path=request.url.path,
        status=response.status_code,
        duration_ms=round((time.perf_counter() - started) * 1000, 2),
    )
    return response


def create_app(service: SequenceService) -> FastAPI:
    """Build the HTTP API around *service*."""
    app = FastAPI(
        title="emailseq",
        description="Email sequences and their steps.",
        version=__version__,
    )
    app.state.sequence_service = service
    app.middleware("http")(_log_requests)
    app.add_exception_handler(
        RequestValidationError,
        request_validation_handler,  # type: ignore[arg-type]
    )
    app.include_router(router)
    return app
