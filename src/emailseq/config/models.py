"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, emailseq.toml only contains
overrides. A local SQLite setup needs no config file at all.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

# --- emailseq.toml sections ---


class DatabaseConfig(BaseModel):
    """[database] section.

    Either a full SQLAlchemy ``url``, or the discrete Postgres connection
    fields. The password may come inline or from ``password_file`` (a
    mounted secret); the file wins when both are set.
    """

    model_config = {"frozen": True}

    url: str | None = None
    driver: str = "postgresql+psycopg"
    host: str | None = None
    port: int = 5432
    name: str = "emailseq"
    user: str = "emailseq"
    password: str | None = None
    password_file: Path | None = None


class ServerConfig(BaseModel):
    """[server] section."""

    model_config = {"frozen": True}

    host: str = "127.0.0.1"
    port: int = 3000
