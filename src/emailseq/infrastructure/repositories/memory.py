"""Dict-backed :class:`SequenceRepository` for tests and local experiments."""

from __future__ import annotations

import itertools
import threading

from emailseq.domain.sequence import Sequence, Step


class InMemorySequenceRepository:
    """Keeps aggregates in a dict keyed by sequence id.

    Aggregates are deep-copied on the way in and out, so a caller mutating
    a fetched sequence never changes the stored one. Ids come from two
    independent counters starting at 1, as an autoincrement column would.
    """

    def __init__(self) -> None:
        self._sequences: dict[int, Sequence] = {}
        self._sequence_ids = itertools.count(1)
        self._step_ids = itertools.count(1)
        self._lock = threading.Lock()

    def create_sequence(self, sequence: Sequence) -> int:
        with self._lock:
            stored = sequence.model_copy(deep=True)
            stored.id = next(self._sequence_ids)
            for step in stored.steps:
                step.id = next(self._step_ids)
            self._sequences[stored.id] = stored
            return stored.id

    def update_sequence(self, sequence: Sequence) -> bool:
        with self._lock:
            stored = self._sequences.get(sequence.id)
            if stored is None:
                return False
            stored.name = sequence.name
            stored.open_tracking = sequence.open_tracking
            stored.click_tracking = sequence.click_tracking
            return True

    def get_sequence(self, sequence_id: int) -> Sequence | None:
        with self._lock:
            stored = self._sequences.get(sequence_id)
            return stored.model_copy(deep=True) if stored is not None else None

    def update_step(self, step: Step) -> bool:
        with self._lock:
            existing = self._find_step(step.id)
            if existing is None:
                return False
            existing.subject = step.subject
            existing.content = step.content
            return True

    def delete_step(self, step_id: int) -> None:
        with self._lock:
            for stored in self._sequences.values():
                stored.steps = [step for step in stored.steps if step.id != step_id]

    def _find_step(self, step_id: int) -> Step | None:
        for stored in self._sequences.values():
            for step in stored.steps:
                if step.id == step_id:
                    return step
        return None
