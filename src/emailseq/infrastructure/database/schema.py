"""SQLAlchemy Core table definitions for the emailseq database.

One row per sequence, one row per step. Steps carry no ordering column:
creation order is recovered by ordering on the autoincrement ``step.id``.
On SQLite both tables use ``AUTOINCREMENT`` so a deleted id is never
handed out again.
"""

from __future__ import annotations

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    false,
)

metadata = MetaData()

sequences = Table(
    "sequence",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False),
    Column(
        "open_tracking_enabled", Boolean, nullable=False, default=False, server_default=false()
    ),
    Column(
        "click_tracking_enabled", Boolean, nullable=False, default=False, server_default=false()
    ),
    sqlite_autoincrement=True,
)

steps = Table(
    "step",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("sequence_id", Integer, ForeignKey("sequence.id"), nullable=False),
    Column("subject", Text, nullable=False),
    Column("content", Text, nullable=False),
    sqlite_autoincrement=True,
)

Index("ix_step_sequence_id", steps.c.sequence_id)
