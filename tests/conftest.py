"""Shared pytest fixtures for emailseq tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine

from emailseq.api.app import create_app
from emailseq.domain.sequence import Sequence, Step
from emailseq.infrastructure.database.engine import create_db_engine, init_database, sqlite_url
from emailseq.infrastructure.repositories.memory import InMemorySequenceRepository
from emailseq.infrastructure.repositories.sql import SqlSequenceRepository
from emailseq.services.sequence import SequenceService
from emailseq.services.telemetry import disable_telemetry


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """``--verbose`` switches telemetry on for the whole thread; switch it back off."""
    yield
    disable_telemetry()


@pytest.fixture(autouse=True)
def _restore_root_handlers() -> Generator[None]:
    """CLI invocations bind a stderr handler to the runner's stream; drop it afterwards."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    yield
    root.handlers = original_handlers


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Generator[Engine]:
    """SQLite engine in a temp directory with all tables created."""
    engine = init_database(create_db_engine(sqlite_url(tmp_path / "test.db")))
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sql_repo(db_engine: Engine) -> SqlSequenceRepository:
    return SqlSequenceRepository(db_engine)


@pytest.fixture
def memory_repo() -> InMemorySequenceRepository:
    return InMemorySequenceRepository()


@pytest.fixture
def service(sql_repo: SqlSequenceRepository) -> SequenceService:
    """SequenceService over a real SQLite repository."""
    return SequenceService(sql_repo)


@pytest.fixture
def api_client(service: SequenceService) -> TestClient:
    """HTTP client for the FastAPI app over the SQLite-backed service."""
    return TestClient(create_app(service))


@pytest.fixture
def make_sequence() -> Callable[..., Sequence]:
    """Factory for a valid unsaved sequence; defaults to two steps."""

    def _make(
        name: str = "Onboarding",
        *,
        steps: list[tuple[str, str]] | None = None,
        open_tracking: bool = False,
        click_tracking: bool = False,
    ) -> Sequence:
        pairs = steps if steps is not None else [("Subj1", "Body1"), ("Subj2", "Body2")]
        return Sequence(
            name=name,
            open_tracking=open_tracking,
            click_tracking=click_tracking,
            steps=[Step(subject=subject, content=content) for subject, content in pairs],
        )

    return _make


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from an empty temp directory with no config in the environment.

    Use via ``@pytest.mark.usefixtures("_isolated_project")``. The default
    SQLite database then lands in ``tmp_path / ".emailseq"``.
    """
    monkeypatch.chdir(tmp_path)
    for var in ("EMAILSEQ_CONFIG", "EMAILSEQ_DATABASE__URL", "EMAILSEQ_DATABASE__HOST"):
        monkeypatch.delenv(var, raising=False)
