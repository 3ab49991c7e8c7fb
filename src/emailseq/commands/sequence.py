"""Command group: create, inspect and patch sequences."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from emailseq.commands._base import SeqGroup
from emailseq.domain.sequence import MAX_ID

if TYPE_CHECKING:
    from emailseq.commands._context import AppContext


@click.group(
    cls=SeqGroup,
    examples="""\
  emailseq sequence create "Onboarding" --step "Welcome" "Hi there" --step "Tips" "Try this"
  emailseq sequence get 1
  emailseq sequence patch 1 --name "Onboarding v2" --open-tracking true""",
)
def sequence() -> None:
    """Create, inspect and patch email sequences."""


@sequence.command(
    examples="""\
  emailseq sequence create "Onboarding" --step "Welcome" "Hi there"
  emailseq --json sequence create "Nurture" --open-tracking --click-tracking \\
      --step "Day 1" "First email" --step "Day 3" "Second email" """,
)
@click.argument("name")
@click.option(
    "--step",
    "steps",
    type=(str, str),
    multiple=True,
    metavar="SUBJECT CONTENT",
    help="Add a step (repeatable, kept in order).",
)
@click.option("--open-tracking", is_flag=True, help="Enable open tracking.")
@click.option("--click-tracking", is_flag=True, help="Enable click tracking.")
@click.pass_obj
def create(
    app: AppContext,
    name: str,
    steps: tuple[tuple[str, str], ...],
    open_tracking: bool,
    click_tracking: bool,
) -> None:
    """Create a sequence with its steps in one transaction."""
    from emailseq.domain.sequence import Sequence, Step

    model = Sequence(
        name=name.strip(),
        open_tracking=open_tracking,
        click_tracking=click_tracking,
        steps=[
            Step(subject=subject.strip(), content=content.strip()) for subject, content in steps
        ],
    )
    app.emit(app.service.create_sequence(model))


@sequence.command(examples="  emailseq sequence get 1\n  emailseq --json sequence get 1")
@click.argument("sequence_id", type=click.IntRange(0, MAX_ID))
@click.pass_obj
def get(app: AppContext, sequence_id: int) -> None:
    """Show a sequence and its steps."""
    app.emit(app.service.get_sequence(sequence_id))


@sequence.command(
    examples="""\
  emailseq sequence patch 1 --name "Renamed"
  emailseq sequence patch 1 --open-tracking false --click-tracking true""",
)
@click.argument("sequence_id", type=click.IntRange(0, MAX_ID))
@click.option("--name", default=None, help="New name.")
@click.option("--open-tracking", type=click.BOOL, default=None, help="true / false.")
@click.option("--click-tracking", type=click.BOOL, default=None, help="true / false.")
@click.pass_obj
def patch(
    app: AppContext,
    sequence_id: int,
    name: str | None,
    open_tracking: bool | None,
    click_tracking: bool | None,
) -> None:
    """Change a sequence's name or tracking flags; omitted options stay as they are."""
    from emailseq.domain.sequence import SequencePatch

    if name is None and open_tracking is None and click_tracking is None:
        click.echo("No changes specified. Use --help for options.", err=True)
        raise SystemExit(1)

    sequence_patch = SequencePatch(
        id=sequence_id,
        name=name.strip() if name is not None else None,
        open_tracking=open_tracking,
        click_tracking=click_tracking,
    )
    app.emit(app.service.patch_sequence(sequence_patch))
