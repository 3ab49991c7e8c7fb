"""ServiceResult and ServiceError — the service contract.

All public service methods return a ServiceResult. The HTTP transport and
the CLI both consume it; the transport maps ``error.code`` onto status
codes, so the codes below are part of the public contract:

- ``*_VALIDATION``: the caller sent something invalid.
- ``*_NOT_FOUND``: the referenced sequence or step does not exist.
- ``STORAGE_ERROR``: anything else; opaque to the caller.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Error taxonomy for the sequence service."""

    SEQUENCE_VALIDATION = "SEQUENCE_VALIDATION"
    SEQUENCE_NOT_FOUND = "SEQUENCE_NOT_FOUND"
    STEP_VALIDATION = "STEP_VALIDATION"
    STEP_NOT_FOUND = "STEP_NOT_FOUND"
    STORAGE_ERROR = "STORAGE_ERROR"

    @property
    def is_validation(self) -> bool:
        return self.value.endswith("_VALIDATION")

    @property
    def is_not_found(self) -> bool:
        return self.value.endswith("_NOT_FOUND")


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"patch_sequence"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (timing, etc.).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: ErrorCode,
        message: str,
        **detail: Any,
    ) -> ServiceResult:
        """Shorthand for a failed result carrying one ServiceError."""
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
