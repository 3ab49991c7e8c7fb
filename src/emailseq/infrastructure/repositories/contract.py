"""Persistence contract the sequence service depends on.

Structural typing: any object with these methods is a repository, whether
it talks to a relational database, a document store, or a dict.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from emailseq.domain.sequence import Sequence, Step


@runtime_checkable
class SequenceRepository(Protocol):
    """Storage operations for the sequence aggregate.

    Implementations raise :class:`~emailseq.domain.errors.RepositoryError`
    when the backing store fails.
    """

    def create_sequence(self, sequence: Sequence) -> int:
        """Atomically insert the sequence and all its steps; return the new id."""
        ...

    def update_sequence(self, sequence: Sequence) -> bool:
        """Overwrite the scalar fields; return whether a row matched ``sequence.id``."""
        ...

    def get_sequence(self, sequence_id: int) -> Sequence | None:
        """Fetch the full aggregate with steps in creation order, or None."""
        ...

    def update_step(self, step: Step) -> bool:
        """Overwrite subject and content; return whether a row matched ``step.id``."""
        ...

    def delete_step(self, step_id: int) -> None:
        """Delete a step. Deleting an absent step is not an error."""
        ...
