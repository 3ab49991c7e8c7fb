"""Root CLI group for emailseq with global flags and command registration."""

from __future__ import annotations

import click

from emailseq import __version__
from emailseq.commands import register_commands
from emailseq.commands._context import AppContext
from emailseq.config.settings import EmailSeqSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="emailseq")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and timing info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """emailseq — manage email sequences and serve them over HTTP."""
    ctx.ensure_object(dict)
    settings = EmailSeqSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
