"""Sequence and step endpoints.

Handlers are plain ``def``: the service and repository are synchronous,
so FastAPI runs each request on its worker threadpool.
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Path, Request, Response, status

from emailseq.api.errors import error_response
from emailseq.api.schemas import (
    CreatedResponse,
    CreateSequenceBody,
    ErrorResponse,
    PatchedResponse,
    PatchSequenceBody,
    UpdateStepBody,
)
from emailseq.domain.sequence import MAX_ID, Sequence
from emailseq.services.sequence import SequenceService

_ERRORS: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def get_service(request: Request) -> SequenceService:
    return request.app.state.sequence_service


Service = Annotated[SequenceService, Depends(get_service)]

# 0 still reaches the service, which reports it as a missing id.
EntityId = Annotated[int, Path(ge=0, le=MAX_ID)]

router = APIRouter()


@router.post(
    "/sequence",
    status_code=status.HTTP_201_CREATED,
    response_model=CreatedResponse,
    responses=_ERRORS,
)
def create_sequence(body: CreateSequenceBody, service: Service) -> Any:
    result = service.create_sequence(body.to_sequence())
    if not result.ok:
        return error_response(result.error)
    return result.data


@router.get("/sequence/{sequence_id}", response_model=Sequence, responses=_ERRORS)
def get_sequence(sequence_id: EntityId, service: Service) -> Any:
    result = service.get_sequence(sequence_id)
    if not result.ok:
        return error_response(result.error)
    return result.data


@router.patch("/sequence/{sequence_id}", response_model=PatchedResponse, responses=_ERRORS)
def patch_sequence(sequence_id: EntityId, body: PatchSequenceBody, service: Service) -> Any:
    result = service.patch_sequence(body.to_patch(sequence_id))
    if not result.ok:
        return error_response(result.error)
    return result.data


@router.put("/step/{step_id}", responses=_ERRORS)
def update_step(step_id: EntityId, body: UpdateStepBody, service: Service) -> Any:
    result = service.update_step(body.to_step(step_id))
    if not result.ok:
        return error_response(result.error)
    return result.data


@router.delete("/step/{step_id}", status_code=status.HTTP_204_NO_CONTENT, responses=_ERRORS)
def delete_step(step_id: EntityId, service: Service) -> Response:
    result = service.delete_step(step_id)
    if not result.ok:
        return error_response(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
