"""SequenceService — create, patch and read sequences; update and delete steps.

Pipeline per write: VALIDATE → (FETCH → APPLY) → PERSIST → RESPOND.
Validation always runs before the repository is touched. The repository's
"row matched" answer is the only concurrency signal: a row deleted between
fetch and update surfaces as not-found. Nothing is retried.
"""

from __future__ import annotations

import logging

from emailseq.domain.errors import RepositoryError, SequenceValidationError, StepValidationError
from emailseq.domain.sequence import Sequence, SequencePatch, Step
from emailseq.services.base import BaseService
from emailseq.services.result import ErrorCode, ServiceResult
from emailseq.services.telemetry import traced

logger = logging.getLogger(__name__)


class SequenceService(BaseService):
    """Business rules for the sequence aggregate."""

    @traced
    def create_sequence(self, sequence: Sequence) -> ServiceResult:
        """Validate and atomically store a new sequence with its steps."""
        op = "create_sequence"

        try:
            sequence.validate()
        except SequenceValidationError as exc:
            return ServiceResult.failure(
                op, ErrorCode.SEQUENCE_VALIDATION, f"sequence model is invalid: {exc}"
            )

        try:
            sequence_id = self._repo.create_sequence(sequence)
        except RepositoryError as exc:
            return _storage_failure(op, exc)

        logger.info("Created sequence %d", sequence_id)
        return ServiceResult(ok=True, op=op, data={"id": sequence_id})

    @traced
    def patch_sequence(self, patch: SequencePatch) -> ServiceResult:
        """Apply the present fields of *patch* to an existing sequence."""
        op = "patch_sequence"

        try:
            patch.validate()
        except SequenceValidationError as exc:
            return ServiceResult.failure(
                op, ErrorCode.SEQUENCE_VALIDATION, f"sequence model is invalid: {exc}"
            )

        try:
            sequence = self._repo.get_sequence(patch.id)
            if sequence is None:
                return _sequence_not_found(op, patch.id)

            fields_changed = patch.apply(sequence)

            if not self._repo.update_sequence(sequence):
                return _sequence_not_found(op, patch.id)
        except RepositoryError as exc:
            return _storage_failure(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data={"id": patch.id, "fields_changed": fields_changed},
        )

    @traced
    def get_sequence(self, sequence_id: int) -> ServiceResult:
        """Fetch a sequence with its steps in creation order."""
        op = "get_sequence"

        try:
            sequence = self._repo.get_sequence(sequence_id)
        except RepositoryError as exc:
            return _storage_failure(op, exc)

        if sequence is None:
            return _sequence_not_found(op, sequence_id)
        return ServiceResult(ok=True, op=op, data=sequence.model_dump())

    @traced
    def update_step(self, step: Step) -> ServiceResult:
        """Overwrite the subject and content of an existing step."""
        op = "update_step"

        if step.id == 0:
            return ServiceResult.failure(
                op, ErrorCode.STEP_VALIDATION, "step model is invalid: id is required"
            )
        try:
            step.validate()
        except StepValidationError as exc:
            return ServiceResult.failure(
                op, ErrorCode.STEP_VALIDATION, f"step model is invalid: {exc}"
            )

        try:
            updated = self._repo.update_step(step)
        except RepositoryError as exc:
            return _storage_failure(op, exc)

        if not updated:
            return ServiceResult.failure(
                op,
                ErrorCode.STEP_NOT_FOUND,
                f"No step found with ID: {step.id}",
                id=step.id,
            )
        return ServiceResult(ok=True, op=op, data={"id": step.id})

    @traced
    def delete_step(self, step_id: int) -> ServiceResult:
        """Delete a step. Deleting an already absent step succeeds."""
        op = "delete_step"

        try:
            self._repo.delete_step(step_id)
        except RepositoryError as exc:
            return _storage_failure(op, exc)

        return ServiceResult(ok=True, op=op, data={"id": step_id})


def _sequence_not_found(op: str, sequence_id: int) -> ServiceResult:
    return ServiceResult.failure(
        op,
        ErrorCode.SEQUENCE_NOT_FOUND,
        f"No sequence found with ID: {sequence_id}",
        id=sequence_id,
    )


def _storage_failure(op: str, exc: RepositoryError) -> ServiceResult:
    logger.error("Repository failure during %s", op, exc_info=exc)
    message = f"failed to {op.replace('_', ' ')}"
    return ServiceResult.failure(op, ErrorCode.STORAGE_ERROR, message)
