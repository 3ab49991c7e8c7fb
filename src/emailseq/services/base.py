"""BaseService — foundation for emailseq services.

Every service receives its repository at construction time and reaches
storage only through it. Services own no other state, so one instance can
serve concurrent requests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from emailseq.infrastructure.repositories.contract import SequenceRepository


class BaseService:
    """Abstract base for service-layer classes.

    Usage::

        class SequenceService(BaseService):
            def get_sequence(self, sequence_id: int) -> ServiceResult:
                sequence = self._repo.get_sequence(sequence_id)
                ...
    """

    def __init__(self, repository: SequenceRepository) -> None:
        self._repo = repository
