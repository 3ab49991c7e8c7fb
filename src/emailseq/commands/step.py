"""Command group: update and delete individual steps."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from emailseq.commands._base import SeqGroup
from emailseq.domain.sequence import MAX_ID

if TYPE_CHECKING:
    from emailseq.commands._context import AppContext


@click.group(cls=SeqGroup)
def step() -> None:
    """Update or delete a single step of a sequence."""


@step.command(
    examples='  emailseq step update 3 --subject "New subject" --content "New body"',
)
@click.argument("step_id", type=click.IntRange(0, MAX_ID))
@click.option("--subject", required=True, help="New subject.")
@click.option("--content", required=True, help="New content.")
@click.pass_obj
def update(app: AppContext, step_id: int, subject: str, content: str) -> None:
    """Replace a step's subject and content."""
    from emailseq.domain.sequence import Step

    step_model = Step(id=step_id, subject=subject.strip(), content=content.strip())
    app.emit(app.service.update_step(step_model))


@step.command(examples="  emailseq step delete 3")
@click.argument("step_id", type=click.IntRange(0, MAX_ID))
@click.pass_obj
def delete(app: AppContext, step_id: int) -> None:
    """Delete a step. Deleting a step that does not exist succeeds."""
    app.emit(app.service.delete_step(step_id))
