"""Domain layer — the sequence aggregate and its validation rules.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, api, commands, or config.
"""

from emailseq.domain.errors import RepositoryError, SequenceValidationError, StepValidationError
from emailseq.domain.sequence import MAX_ID, Sequence, SequencePatch, Step

__all__ = [
    "MAX_ID",
    "RepositoryError",
    "Sequence",
    "SequencePatch",
    "SequenceValidationError",
    "Step",
    "StepValidationError",
]
