"""Alembic migration infrastructure for emailseq.

Provides programmatic Alembic configuration — no alembic.ini needed.
The migration scripts live alongside this module.
"""

from __future__ import annotations

import logging
from pathlib import Path

from alembic.config import Config

logger = logging.getLogger(__name__)


def build_config(db_url: str) -> Config:
    """Build an Alembic Config pointing at our migration scripts."""
    cfg = Config()
    cfg.set_main_option("script_location", str(Path(__file__).parent))
    # ConfigParser interpolation would choke on '%' in URL-encoded passwords.
    cfg.set_main_option("sqlalchemy.url", db_url.replace("%", "%%"))
    return cfg


def upgrade_database(db_url: str) -> None:
    """Apply every pending migration up to head.

    Called before a CLI command or the HTTP server first touches the
    database, so a fresh database is created and an old one is brought up
    to date.
    """
    from alembic import command

    logger.debug("Upgrading database schema to head")
    command.upgrade(build_config(db_url), "head")


def current_revision(db_url: str) -> str | None:
    """Return the revision the database is stamped at (None if unversioned)."""
    from alembic.runtime.migration import MigrationContext
    from sqlalchemy import create_engine, pool

    engine = create_engine(db_url, poolclass=pool.NullPool)
    try:
        with engine.connect() as conn:
            return MigrationContext.configure(conn).get_current_revision()
    finally:
        engine.dispose()
