"""ASCII table formatter for displaying lookup results."""

from __future__ import annotations

from typing import Any

from chaindict.model.chain import Dictionary

ABSENT = "(absent)"

# Stands in for a miss in lookup rows, distinct from a stored None.
_ABSENT_MARK: Any = object()


def lookup_rows(d: Dictionary[Any, Any], keys: list[Any]) -> list[tuple[Any, Any]]:
    """Resolve each key in d, keeping misses as absent rows."""
    return [(key, d.get(key, _ABSENT_MARK)) for key in keys]


def format_value(value: object) -> str:
    """Format a single value for display."""
    if value is _ABSENT_MARK:
        return ABSENT
    return str(value)


def format_lookups(rows: list[tuple[Any, Any]]) -> str:
    """Format (key, value) lookup rows as an ASCII table."""
    if not rows:
        return "(no keys)"
    cells = [[format_value(k), format_value(v)] for k, v in rows]
    return _build_table(["key", "value"], cells)


def _build_table(headers: list[str], rows: list[list[str]]) -> str:
    """Build an ASCII table from headers and rows."""
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    sep = "+-" + "-+-".join("-" * w for w in widths) + "-+"
    header = "| " + " | ".join(h.ljust(w) for h, w in zip(headers, widths)) + " |"

    lines = [sep, header, sep]
    for row in rows:
        lines.append("| " + " | ".join(cell.ljust(w) for cell, w in zip(row, widths)) + " |")
    lines.append(sep)

    return "\n".join(lines)
