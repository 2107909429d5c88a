"""CLI subcommand: get."""

from __future__ import annotations

import logging
from typing import Any

import click

from chaindict.cli.sources import build_dictionary
from chaindict.data.loader import parse_scalar
from chaindict.repl.formatter import format_lookups, lookup_rows

_logger = logging.getLogger(__name__)


def _upper(value: Any) -> Any:
    return value.upper() if isinstance(value, str) else value


@click.command("get")
@click.argument("keys", nargs=-1, required=True)
@click.option(
    "--pairs",
    "pair_files",
    multiple=True,
    type=click.Path(),
    help="CSV file of key,value rows to insert (repeatable, - for stdin).",
)
@click.option("--sample", is_flag=True, default=False, help="Start from the HTTP status sample.")
@click.option(
    "--default",
    "default_value",
    default=None,
    help="Value for any key no other rule matches.",
)
@click.option(
    "--remove",
    "removals",
    multiple=True,
    help="Key to remove after loading (repeatable).",
)
@click.option("--upper", is_flag=True, default=False, help="Upper-case string values.")
def get_cmd(
    keys: tuple[str, ...],
    pair_files: tuple[str, ...],
    sample: bool,
    default_value: str | None,
    removals: tuple[str, ...],
    upper: bool,
) -> None:
    """Look up KEYS and print a key/value table.

    The dictionary is built bottom-up: the sample (if any), then the
    --default rule, then each --pairs file in order, then the removals.
    Later layers win over earlier ones.
    """
    d = build_dictionary(pair_files, sample=sample, default_value=default_value)
    for key in removals:
        d = d.remove(parse_scalar(key))
    if upper:
        d = d.map(_upper)

    _logger.debug("Resolving %d key(s) against depth %d", len(keys), d.depth())
    click.echo(format_lookups(lookup_rows(d, [parse_scalar(k) for k in keys])))
