"""Request bodies for the HTTP API.

Strings are stripped of surrounding whitespace on the way in, so
``"  "`` arrives at the domain layer as an empty (invalid) value.
Each body knows how to build the domain object it stands for.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from emailseq.domain.sequence import Sequence, SequencePatch, Step


class _Body(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)


class CreateStepBody(_Body):
    subject: str = ""
    content: str = ""


class CreateSequenceBody(_Body):
    name: str = ""
    open_tracking: bool = Field(default=False, alias="openTrackingEnabled")
    click_tracking: bool = Field(default=False, alias="clickTrackingEnabled")
    steps: list[CreateStepBody] = Field(default_factory=list)

    def to_sequence(self) -> Sequence:
        return Sequence(
            name=self.name,
            open_tracking=self.open_tracking,
            click_tracking=self.click_tracking,
            steps=[Step(subject=s.subject, content=s.content) for s in self.steps],
        )


class PatchSequenceBody(_Body):
    """Only the keys present in the JSON body are applied; null counts as absent."""

    name: str | None = None
    open_tracking: bool | None = Field(default=None, alias="openTrackingEnabled")
    click_tracking: bool | None = Field(default=None, alias="clickTrackingEnabled")

    def to_patch(self, sequence_id: int) -> SequencePatch:
        return SequencePatch(
            id=sequence_id,
            name=self.name,
            open_tracking=self.open_tracking,
            click_tracking=self.click_tracking,
        )


class UpdateStepBody(_Body):
    subject: str = ""
    content: str = ""

    def to_step(self, step_id: int) -> Step:
        return Step(id=step_id, subject=self.subject, content=self.content)


class CreatedResponse(BaseModel):
    id: int


class PatchedResponse(BaseModel):
    id: int
    fields_changed: list[str]


class ErrorResponse(BaseModel):
    code: str
    message: str
