"""Database engine setup.

SQLAlchemy Core (not ORM) is used: every repository call is one short
statement or one short transaction, so there is no benefit from session
management or identity maps.

Any SQLAlchemy URL works. SQLite connections get WAL mode and foreign
keys switched on; PostgreSQL is reached through ``postgresql+psycopg``
(the ``postgres`` extra).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url

from emailseq.infrastructure.database.schema import metadata


def sqlite_url(db_path: Path) -> str:
    """SQLAlchemy URL for a SQLite file at *db_path*."""
    return f"sqlite:///{db_path}"


def set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
    """Enable WAL and foreign keys on a fresh SQLite connection."""
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(url: str) -> Engine:
    """Create an engine for *url*; SQLite files get their parent directory created."""
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite":
        if parsed.database and parsed.database != ":memory:":
            Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)
        engine = create_engine(url, echo=False)
        event.listen(engine, "connect", set_sqlite_pragma)
        return engine

    return create_engine(url, echo=False, pool_pre_ping=True)


def init_database(engine: Engine) -> Engine:
    """Create all tables from :data:`schema.metadata` that do not exist yet.

    Idempotent. Used for throwaway databases (tests, local experiments);
    long-lived databases are managed by :func:`migrations.upgrade_database`.
    """
    metadata.create_all(engine)
    return engine
