"""Map service error codes onto HTTP responses."""

from __future__ import annotations

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from emailseq.services.result import ErrorCode, ServiceError


def status_for(code: ErrorCode) -> int:
    """Validation → 400, not found → 404, anything else → 500."""
    if code.is_validation:
        return status.HTTP_400_BAD_REQUEST
    if code.is_not_found:
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(error: ServiceError | None) -> JSONResponse:
    if error is None:
        error = ServiceError(code=ErrorCode.STORAGE_ERROR, message="unknown error")
    return JSONResponse(
        status_code=status_for(error.code),
        content={"code": error.code.value, "message": error.message},
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed ids and bodies are the client's fault: 400, not FastAPI's 422."""
    first = exc.errors()[0] if exc.errors() else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "invalid request")
    if location:
        message = f"{location}: {message}"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"code": "BAD_REQUEST", "message": message},
    )
