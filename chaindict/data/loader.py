"""CSV loading: parse key/value columns into pairs with type inference."""

from __future__ import annotations

import csv
import logging
from decimal import Decimal, InvalidOperation
from typing import Any, TextIO

from chaindict.model.chain import Dictionary

_logger = logging.getLogger(__name__)


class LoadError(Exception):
    """Raised when data loading fails."""


def load_pairs(
    source: TextIO,
    *,
    key_column: str | None = None,
    value_column: str | None = None,
) -> list[tuple[Any, Any]]:
    """Read CSV data from a text stream and return (key, value) pairs in file order.

    The first row is treated as headers. Unless named, the key column is the
    first column and the value column the second. Keys are typed one value
    at a time with parse_scalar, the same way command-line keys are, so a
    typed ``404`` finds a loaded ``404`` even in a column that also holds
    text. Values get per-column inference: int > Decimal > bool > str.
    Empty strings remain as empty strings.

    Raises LoadError for unusable columns, undecodable text or malformed CSV.
    """
    try:
        headers, rows = _read_rows(source)
    except (UnicodeDecodeError, csv.Error) as e:
        raise LoadError(f"Cannot parse CSV: {e}") from e

    if not headers:
        return []

    key_col = _pick_column(headers, key_column, 0, "key")
    value_col = _pick_column(headers, value_column, 1, "value")

    if not rows:
        return []

    types = infer_types(rows)
    pairs = []
    for row in rows:
        coerced = coerce_row(row, types)
        pairs.append((parse_scalar(row[key_col]), coerced[value_col]))
    _logger.debug("Loaded %d pairs (key=%r, value=%r)", len(pairs), key_col, value_col)
    return pairs


def _read_rows(source: TextIO) -> tuple[list[str], list[dict[str, str]]]:
    """Read the header row and the well-formed data rows."""
    reader = csv.reader(source)
    try:
        headers = next(reader)
    except StopIteration:
        return [], []

    headers = [h.strip() for h in headers]
    rows: list[dict[str, str]] = []
    for line_no, row in enumerate(reader, start=2):
        if len(row) != len(headers):
            _logger.warning(
                "Skipping line %d: expected %d columns, got %d",
                line_no, len(headers), len(row),
            )
            continue
        rows.append(dict(zip(headers, row)))
    return headers, rows


def load_dictionary(
    source: TextIO,
    *,
    key_column: str | None = None,
    value_column: str | None = None,
) -> Dictionary[Any, Any]:
    """Read CSV data and build a Dictionary; later rows win on duplicate keys."""
    pairs = load_pairs(source, key_column=key_column, value_column=value_column)
    return Dictionary.from_list(pairs)


def _pick_column(headers: list[str], name: str | None, position: int, role: str) -> str:
    """Resolve a column by name, or by position when no name is given."""
    if name is not None:
        if name not in headers:
            raise LoadError(f"No {role} column {name!r} in headers {headers}")
        return name
    if len(headers) <= position:
        raise LoadError(
            f"Need at least 2 columns for key and value, got {len(headers)}"
        )
    return headers[position]


def infer_types(rows: list[dict[str, str]]) -> dict[str, type]:
    """Scan column values and infer the best type per column.

    Priority: int > Decimal > bool > str.
    A column is int if every non-empty value parses as int.
    A column is Decimal if every non-empty value parses as a decimal number (but not all int).
    A column is bool if every non-empty value is 'true' or 'false' (case-insensitive).
    Otherwise str.
    """
    if not rows:
        return {}

    columns: dict[str, list[str]] = {k: [] for k in rows[0]}
    for row in rows:
        for k, v in row.items():
            columns[k].append(v)

    return {col: _infer_column_type(values) for col, values in columns.items()}


def _infer_column_type(values: list[str]) -> type:
    """Infer the type for a single column's values."""
    non_empty = [v for v in values if v != ""]
    if not non_empty:
        return str

    if all(_is_int(v) for v in non_empty):
        return int

    if all(_is_decimal(v) for v in non_empty):
        return Decimal

    if all(v.lower() in ("true", "false") for v in non_empty):
        return bool

    return str


def _is_int(s: str) -> bool:
    """Check if a string is a valid integer literal."""
    try:
        int(s)
        return True
    except ValueError:
        return False


def _is_decimal(s: str) -> bool:
    """Check if a string is a finite decimal number."""
    try:
        return Decimal(s).is_finite()
    except InvalidOperation:
        return False


def coerce_row(row: dict[str, str], types: dict[str, type]) -> dict[str, Any]:
    """Convert string values in a row to their inferred types."""
    return {k: _coerce_value(v, types.get(k, str)) for k, v in row.items()}


def parse_scalar(text: str) -> Any:
    """Coerce a single token with the same inference used for CSV columns.

    Lets a command-line ``404`` find a key loaded as the int 404.
    """
    return _coerce_value(text, _infer_column_type([text]))


def _coerce_value(value: str, target_type: type) -> Any:
    """Coerce a single string value to the target type."""
    if value == "":
        return value

    if target_type is int:
        return int(value)
    if target_type is Decimal:
        return Decimal(value)
    if target_type is bool:
        return value.lower() == "true"
    return value
