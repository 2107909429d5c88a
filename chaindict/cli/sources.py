"""Build a dictionary from the command-line data options."""

from __future__ import annotations

import logging
import sys
from typing import Any

import click

from chaindict.data.loader import LoadError, load_pairs, parse_scalar
from chaindict.data.sample import sample_dictionary
from chaindict.model.chain import EMPTY, Dictionary
from chaindict.model.predicates import Always

_logger = logging.getLogger(__name__)


def build_dictionary(
    pair_files: tuple[str, ...],
    *,
    sample: bool = False,
    default_value: str | None = None,
) -> Dictionary[Any, Any]:
    """Layer the sample, the default rule and the pair files, in that order."""
    d: Dictionary[Any, Any] = sample_dictionary() if sample else EMPTY
    if default_value is not None:
        d = d.with_predicate(Always(), parse_scalar(default_value))

    for filepath in pair_files:
        if filepath == "-":
            pairs = _load_stdin()
        else:
            pairs = _load_file(filepath)
        _logger.info("Inserting %d pairs from %s", len(pairs), filepath)
        d = d.insert_all(pairs)
    return d


def _load_file(filepath: str) -> list[tuple[Any, Any]]:
    """Load pairs from a CSV file."""
    try:
        with open(filepath, encoding="utf-8") as f:
            return load_pairs(f)
    except OSError as e:
        raise click.ClickException(f"Cannot read {filepath}: {e}")
    except LoadError as e:
        raise click.ClickException(f"{filepath}: {e}")


def _load_stdin() -> list[tuple[Any, Any]]:
    """Load pairs from CSV data on stdin."""
    if sys.stdin.isatty():
        raise click.ClickException("stdin requested but no data piped")
    try:
        return load_pairs(sys.stdin)
    except LoadError as e:
        raise click.ClickException(f"stdin: {e}")
