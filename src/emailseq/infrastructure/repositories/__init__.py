"""Repository abstractions and implementations for the sequence aggregate."""

from emailseq.infrastructure.repositories.contract import SequenceRepository
from emailseq.infrastructure.repositories.memory import InMemorySequenceRepository
from emailseq.infrastructure.repositories.rows import rows_to_sequence
from emailseq.infrastructure.repositories.sql import SqlSequenceRepository

__all__ = [
    "InMemorySequenceRepository",
    "SequenceRepository",
    "SqlSequenceRepository",
    "rows_to_sequence",
]
