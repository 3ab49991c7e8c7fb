"""Subcommand modules for emailseq.

Provides register_commands() which uses deferred imports to keep
``emailseq --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the command groups and standalone commands on the root group."""
    # --- Groups ---
    from emailseq.commands.sequence import sequence
    from emailseq.commands.step import step

    cli.add_command(sequence)
    cli.add_command(step)

    # --- Standalone commands ---
    from emailseq.commands.serve import serve

    cli.add_command(serve)
