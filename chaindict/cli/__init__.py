"""CLI entry point for chaindict."""

import logging

import click

from chaindict.cli.get_cmd import get_cmd
from chaindict.cli.repl_cmd import repl_cmd


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """Predicate-chain dictionary tools."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


main.add_command(get_cmd)
main.add_command(repl_cmd)
