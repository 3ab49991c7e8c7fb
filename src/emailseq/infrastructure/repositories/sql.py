"""SQLAlchemy Core implementation of :class:`SequenceRepository`."""

from __future__ import annotations

import logging

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from emailseq.domain.errors import RepositoryError
from emailseq.domain.sequence import Sequence, Step
from emailseq.infrastructure.database.schema import sequences, steps
from emailseq.infrastructure.repositories.rows import rows_to_sequence

logger = logging.getLogger(__name__)


class SqlSequenceRepository:
    """Encapsulates SQL for the sequence aggregate.

    Create is the only multi-statement write and runs in a single
    ``engine.begin()`` transaction. The update paths report whether a row
    matched; a concurrent delete therefore surfaces as "no row". Driver
    errors, and ids the driver cannot bind, are raised as RepositoryError.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def create_sequence(self, sequence: Sequence) -> int:
        """Insert the sequence row and all step rows; roll back both on failure."""
        try:
            with self._engine.begin() as conn:
                result = conn.execute(
                    insert(sequences).values(
                        name=sequence.name,
                        open_tracking_enabled=sequence.open_tracking,
                        click_tracking_enabled=sequence.click_tracking,
                    )
                )
                sequence_id = int(result.inserted_primary_key[0])

                # One statement per step keeps the autoincrement ids in list order.
                for step in sequence.steps:
                    conn.execute(
                        insert(steps).values(
                            sequence_id=sequence_id,
                            subject=step.subject,
                            content=step.content,
                        )
                    )
        except (SQLAlchemyError, OverflowError) as exc:
            raise RepositoryError(f"failed to create sequence: {exc}") from exc

        logger.debug("Created sequence %d with %d steps", sequence_id, len(sequence.steps))
        return sequence_id

    def update_sequence(self, sequence: Sequence) -> bool:
        """Overwrite name and tracking flags."""
        stmt = (
            update(sequences)
            .where(sequences.c.id == sequence.id)
            .values(
                name=sequence.name,
                open_tracking_enabled=sequence.open_tracking,
                click_tracking_enabled=sequence.click_tracking,
            )
        )
        try:
            with self._engine.begin() as conn:
                rowcount = conn.execute(stmt).rowcount
        except (SQLAlchemyError, OverflowError) as exc:
            raise RepositoryError(f"failed to update sequence: {exc}") from exc
        return rowcount > 0

    def get_sequence(self, sequence_id: int) -> Sequence | None:
        """Fetch the aggregate with one LEFT OUTER JOIN, steps in creation order."""
        stmt = (
            select(
                sequences.c.id,
                sequences.c.name,
                sequences.c.open_tracking_enabled,
                sequences.c.click_tracking_enabled,
                steps.c.id.label("step_id"),
                steps.c.subject,
                steps.c.content,
            )
            .select_from(sequences.outerjoin(steps, sequences.c.id == steps.c.sequence_id))
            .where(sequences.c.id == sequence_id)
            .order_by(steps.c.id)
        )
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(stmt).mappings().all()
        except (SQLAlchemyError, OverflowError) as exc:
            raise RepositoryError(f"failed to get sequence: {exc}") from exc

        if not rows:
            return None
        return rows_to_sequence(rows)

    def update_step(self, step: Step) -> bool:
        """Overwrite subject and content."""
        stmt = (
            update(steps)
            .where(steps.c.id == step.id)
            .values(subject=step.subject, content=step.content)
        )
        try:
            with self._engine.begin() as conn:
                rowcount = conn.execute(stmt).rowcount
        except (SQLAlchemyError, OverflowError) as exc:
            raise RepositoryError(f"failed to update step: {exc}") from exc
        return rowcount > 0

    def delete_step(self, step_id: int) -> None:
        """Delete one step row; zero rows deleted is fine."""
        try:
            with self._engine.begin() as conn:
                conn.execute(delete(steps).where(steps.c.id == step_id))
        except (SQLAlchemyError, OverflowError) as exc:
            raise RepositoryError(f"failed to delete step: {exc}") from exc
