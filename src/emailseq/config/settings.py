"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``EMAILSEQ_*`` prefix, ``__`` for nested sections
                    (``EMAILSEQ_DATABASE__HOST``, ``EMAILSEQ_SERVER__PORT``)
  3. TOML file    — ``emailseq.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource
from sqlalchemy.engine import URL

from emailseq.config.discovery import find_config
from emailseq.config.models import DatabaseConfig, ServerConfig
from emailseq.infrastructure.database.engine import sqlite_url

DATA_DIRNAME = ".emailseq"
DB_FILENAME = "emailseq.db"


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from an ``emailseq.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# The TOML path has to reach settings_customise_sources, a classmethod.
_tls = threading.local()


def read_secret(path: Path) -> str:
    """Read a mounted secret file, stripping surrounding whitespace."""
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        msg = f"Cannot read secret file {path}: {exc.strerror or exc}"
        raise click.ClickException(msg) from exc


class EmailSeqSettings(BaseSettings):
    """Unified settings for the emailseq CLI and HTTP server.

    Attributes:
        root: Project directory (parent of ``emailseq.toml``, or CWD). The
            default SQLite database lives under ``{root}/.emailseq/``.
        config_path: The TOML file in effect, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "EMAILSEQ_",
        "env_nested_delimiter": "__",
    }

    root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        root: Path | None = None,
        **cli_flags: Any,
    ) -> EmailSeqSettings:
        """Construct settings from a CLI invocation.

        Discovers ``emailseq.toml`` via walk-up (or explicit *config_path*),
        resolves *root* from the config file's parent directory, and merges
        CLI flags as highest-priority overrides.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(root)

        resolved_root = root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        _tls.toml_path = toml_path
        try:
            return cls(root=resolved_root, config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None

    @property
    def database_url(self) -> str:
        """SQLAlchemy URL for the configured database.

        ``database.url`` wins; otherwise ``database.host`` selects Postgres;
        otherwise a SQLite file under the project root.
        """
        db = self.database
        if db.url:
            return db.url
        if db.host:
            password = read_secret(db.password_file) if db.password_file else db.password
            return URL.create(
                db.driver,
                username=db.user,
                password=password,
                host=db.host,
                port=db.port,
                database=db.name,
            ).render_as_string(hide_password=False)
        return sqlite_url(self.root / DATA_DIRNAME / DB_FILENAME)
