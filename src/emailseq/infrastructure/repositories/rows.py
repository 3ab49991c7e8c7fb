"""Rebuild the sequence aggregate from flat ``sequence LEFT JOIN step`` rows.

Every row repeats the sequence scalars. A sequence without steps still
yields exactly one row, with ``step_id``, ``subject`` and ``content`` all
NULL; that first-row NULL is the only way the join can say "no children".
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence as RowSequence
from typing import Any

from emailseq.domain.sequence import Sequence, Step


def rows_to_sequence(rows: RowSequence[Mapping[str, Any]]) -> Sequence:
    """Map ordered join rows to a :class:`Sequence`.

    Steps keep the row order; the query owns the ordering.

    Raises:
        ValueError: If *rows* is empty. Callers check for absence first.
    """
    if not rows:
        msg = "Cannot map an empty row set to a sequence"
        raise ValueError(msg)

    first = rows[0]
    sequence = Sequence(
        id=first["id"],
        name=first["name"],
        open_tracking=bool(first["open_tracking_enabled"]),
        click_tracking=bool(first["click_tracking_enabled"]),
    )

    if first["step_id"] is None:
        sequence.steps = []
        return sequence

    sequence.steps = [
        Step(id=row["step_id"], subject=row["subject"] or "", content=row["content"] or "")
        for row in rows
    ]
    return sequence
