"""Baseline schema — sequence and step tables.

Revision ID: 001_baseline
Revises: None
Create Date: 2026-10-19
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision: str = "001_baseline"
down_revision: str | None = None
branch_labels: tuple[str, ...] | None = None
depends_on: tuple[str, ...] | None = None


def upgrade() -> None:
    op.create_table(
        "sequence",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column(
            "open_tracking_enabled", sa.Boolean, nullable=False, server_default=sa.false()
        ),
        sa.Column(
            "click_tracking_enabled", sa.Boolean, nullable=False, server_default=sa.false()
        ),
        sqlite_autoincrement=True,
    )

    op.create_table(
        "step",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("sequence_id", sa.Integer, sa.ForeignKey("sequence.id"), nullable=False),
        sa.Column("subject", sa.Text, nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_step_sequence_id", "step", ["sequence_id"])


def downgrade() -> None:
    op.drop_index("ix_step_sequence_id", table_name="step")
    op.drop_table("step")
    op.drop_table("sequence")
