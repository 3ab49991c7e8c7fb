"""Human / JSON rendering of ServiceResult for the CLI.

The CLI renders ServiceResult for humans (one ``key: value`` line per data
field, steps listed one per line) or machines (--json, the full model).
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from emailseq.services.result import ServiceResult


def _format_steps(steps: list[dict[str, Any]]) -> list[str]:
    if not steps:
        return ["  steps: (none)"]
    lines = ["  steps:"]
    for position, step in enumerate(steps, start=1):
        lines.append(f"    {position}. [{step['id']}] {step['subject']}")
    return lines


def _format_data_human(data: dict[str, Any]) -> str:
    """Format result data as indented key-value pairs."""
    lines: list[str] = []
    for key, value in data.items():
        if key == "steps":
            lines.extend(_format_steps(value))
        elif isinstance(value, (dict, list)):
            lines.append(f"  {key}: {_json.dumps(value, separators=(',', ':'))}")
        else:
            lines.append(f"  {key}: {value}")
    return "\n".join(lines)


def format_result(result: ServiceResult, *, json_output: bool = False) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
    """
    if json_output:
        return result.model_dump_json(indent=2)
    if result.ok:
        parts = [f"OK: {result.op}"]
        if result.data:
            parts.append(_format_data_human(result.data))
        return "\n".join(parts)
    if result.error is None:
        return f"ERROR: {result.op}: Unknown error"
    return f"ERROR: {result.op}: [{result.error.code}] {result.error.message}"
