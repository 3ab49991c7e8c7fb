"""Sequence aggregate — Sequence, Step, SequencePatch.

Models carry no field constraints: an invalid aggregate is representable
in memory and rejected explicitly by ``validate()``. Services call
``validate()`` before any repository access.

Field names are python-style; the HTTP wire names
(``openTrackingEnabled`` / ``clickTrackingEnabled``) are pydantic aliases.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from emailseq.domain.errors import SequenceValidationError, StepValidationError

# Largest id a 64-bit INTEGER / BIGINT primary key can hold.
MAX_ID = 2**63 - 1


class Step(BaseModel):
    """One email in a sequence. Order is creation order; no position field."""

    id: int = 0
    subject: str = ""
    content: str = ""

    def validate(self) -> None:
        """Raise :class:`StepValidationError` if subject or content is empty."""
        if not self.subject:
            raise StepValidationError("subject is required")
        if not self.content:
            raise StepValidationError("content is required")


class Sequence(BaseModel):
    """A named, ordered list of steps plus the two tracking flags.

    ``id`` is 0 until storage assigns one. A persisted sequence may hold
    zero steps after deletions, but one cannot be created that way.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int = 0
    name: str = ""
    open_tracking: bool = Field(default=False, alias="openTrackingEnabled")
    click_tracking: bool = Field(default=False, alias="clickTrackingEnabled")
    steps: list[Step] = Field(default_factory=list)

    def validate(self) -> None:
        """Raise :class:`SequenceValidationError` if the sequence cannot be created.

        A failing step is chained as the ``__cause__``.
        """
        if not self.name:
            raise SequenceValidationError("name is required")
        if not self.steps:
            raise SequenceValidationError("steps are required")
        for step in self.steps:
            try:
                step.validate()
            except StepValidationError as exc:
                raise SequenceValidationError(f"step model is invalid: {exc}") from exc


class SequencePatch(BaseModel):
    """Sparse update of a sequence's scalar fields.

    ``None`` means the field is absent and is left unchanged on apply.
    """

    id: int = 0
    name: str | None = None
    open_tracking: bool | None = None
    click_tracking: bool | None = None

    def validate(self) -> None:
        """Raise :class:`SequenceValidationError` on a missing id or blank name."""
        if self.id == 0:
            raise SequenceValidationError("id is required")
        if self.name is not None and not self.name.strip():
            raise SequenceValidationError("name cannot be empty")

    def apply(self, target: Sequence) -> list[str]:
        """Overwrite the present fields on *target*.

        Returns the names of the fields that were present.
        """
        fields_changed: list[str] = []
        if self.name is not None:
            target.name = self.name
            fields_changed.append("name")
        if self.open_tracking is not None:
            target.open_tracking = self.open_tracking
            fields_changed.append("open_tracking")
        if self.click_tracking is not None:
            target.click_tracking = self.click_tracking
            fields_changed.append("click_tracking")
        return fields_changed
