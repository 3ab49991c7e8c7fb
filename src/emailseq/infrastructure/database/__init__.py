"""Database engine, schema, and migrations via SQLAlchemy Core and Alembic."""

from emailseq.infrastructure.database.engine import create_db_engine, init_database, sqlite_url
from emailseq.infrastructure.database.schema import metadata, sequences, steps

__all__ = [
    "create_db_engine",
    "init_database",
    "metadata",
    "sequences",
    "sqlite_url",
    "steps",
]
