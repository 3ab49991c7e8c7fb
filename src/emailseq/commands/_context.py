"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Builds the database engine and the sequence service
lazily, so ``--help`` and ``--version`` never touch the database, and
renders results with the right stream and exit code.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from emailseq.output.formatters import format_result

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from emailseq.config.settings import EmailSeqSettings
    from emailseq.services.result import ServiceResult
    from emailseq.services.sequence import SequenceService

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: EmailSeqSettings) -> None:
        self.settings = settings
        self._engine: Engine | None = None
        self._service: SequenceService | None = None

        from emailseq.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from emailseq.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def engine(self) -> Engine:
        """Database engine, migrated to the latest schema on first access."""
        if self._engine is None:
            from emailseq.infrastructure.database.engine import create_db_engine
            from emailseq.infrastructure.database.migrations import upgrade_database

            url = self.settings.database_url
            self._engine = create_db_engine(url)
            upgrade_database(url)
            logger.debug("Database ready")
        return self._engine

    @property
    def service(self) -> SequenceService:
        """The sequence service over the SQL repository (created lazily)."""
        if self._service is None:
            from emailseq.infrastructure.repositories.sql import SqlSequenceRepository
            from emailseq.services.sequence import SequenceService

            self._service = SequenceService(SqlSequenceRepository(self.engine))
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout, returns normally. Warnings go to stderr
          so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(result, json_output=self.settings.json_output)
        if result.ok:
            click.echo(output)
            if not self.settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
