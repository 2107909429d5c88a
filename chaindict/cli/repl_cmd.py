"""CLI subcommand: repl."""

import os
import sys

import click

from chaindict.cli.sources import build_dictionary
from chaindict.repl.repl import run_repl
from chaindict.repl.session import Session


@click.command("repl")
@click.option(
    "--pairs",
    "pair_files",
    multiple=True,
    type=click.Path(),
    help="CSV file of key,value rows to preload (repeatable, - for stdin).",
)
@click.option("--sample", is_flag=True, default=False, help="Preload the HTTP status sample.")
def repl_cmd(pair_files: tuple[str, ...], sample: bool) -> None:
    """Start the interactive REPL.

    Optionally preload the sample and CSV pair files. Use - to read pairs
    from stdin.
    """
    d = build_dictionary(pair_files, sample=sample)

    # If stdin was consumed for data, reopen fd 0 from the terminal
    # so the REPL can still read interactive input with readline history.
    if "-" in pair_files:
        try:
            tty_fd = os.open("/dev/tty", os.O_RDONLY)
            os.dup2(tty_fd, 0)
            os.close(tty_fd)
            sys.stdin = open(0, closefd=False)
            # Python sets stdout to fully-buffered when stdin is a pipe.
            sys.stdout.reconfigure(line_buffering=True)
        except OSError:
            raise click.ClickException(
                "Cannot reopen terminal for interactive input after reading stdin"
            )

    if d.depth():
        click.echo(f"Preloaded: depth {d.depth()}")

    run_repl(Session(d))
