"""serve — run the HTTP API with uvicorn."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from emailseq.commands._base import SeqCommand

if TYPE_CHECKING:
    from emailseq.commands._context import AppContext


@click.command(
    cls=SeqCommand,
    examples="""\
  # Bind address and port from emailseq.toml / EMAILSEQ_SERVER__* (default 127.0.0.1:3000)
  emailseq serve

  # Listen on all interfaces
  emailseq serve --host 0.0.0.0 --port 8080

  # JSON request logs
  emailseq --log-json serve""",
)
@click.option("--host", default=None, help="Bind address (default: [server] host).")
@click.option("--port", default=None, type=int, help="Listen port (default: [server] port).")
@click.pass_obj
def serve(app: AppContext, host: str | None, port: int | None) -> None:
    """Start the HTTP API server."""
    import uvicorn

    from emailseq.api.app import create_app
    from emailseq.config.logging import configure_logging

    configure_logging(verbose=app.settings.verbose, log_json=app.settings.log_json, server=True)

    http_app = create_app(app.service)
    uvicorn.run(
        http_app,
        host=host or app.settings.server.host,
        port=port or app.settings.server.port,
        log_config=None,
    )
