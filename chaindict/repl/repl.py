"""REPL loop: read a statement, update or query the dictionary, display."""

from __future__ import annotations

import logging
import readline  # noqa: F401  (line editing and history for input())
import shlex
from pathlib import Path

from chaindict.data.loader import LoadError, load_pairs, parse_scalar
from chaindict.data.sample import sample_dictionary
from chaindict.model.predicates import Always, Between, OneOf, Prefix
from chaindict.repl.formatter import format_lookups, lookup_rows
from chaindict.repl.session import Session

_logger = logging.getLogger(__name__)

STATEMENTS = (
    "set KEY VALUE, del KEY, get KEY..., default VALUE, "
    "prefix P VALUE, between LO HI VALUE, oneof K1,K2,... VALUE"
)


class StatementError(Exception):
    """Raised when a statement is malformed."""


def run_repl(session: Session | None = None) -> None:
    """Run the interactive REPL."""
    if session is None:
        session = Session()

    print("chaindict REPL")
    print(f"Statements: {STATEMENTS}")
    print(
        "Commands: \\load <file>, \\sample, \\undo, \\depth, \\reset, \\quit"
    )
    print()

    while True:
        try:
            line = input("chaindict> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not line:
            continue

        if line.startswith("\\"):
            try:
                _handle_command(line, session)
            except Exception as e:
                print(f"Internal error: {e}")
            continue

        try:
            _run_statement(line, session)
        except StatementError as e:
            print(f"Error: {e}")
        except Exception as e:
            print(f"Internal error: {e}")

        print()


def _run_statement(line: str, session: Session) -> None:
    """Parse and run one statement against the session."""
    try:
        words = shlex.split(line)
    except ValueError as e:
        raise StatementError(str(e)) from e

    verb = words[0].lower()
    args = [parse_scalar(w) for w in words[1:]]
    _logger.debug("Statement %s with %d args", verb, len(args))
    d = session.current

    if verb == "get":
        if not args:
            raise StatementError("get requires at least one key")
        print(format_lookups(lookup_rows(d, args)))
        return

    if verb == "set":
        _expect(verb, args, 2)
        session.push(d.insert(args[0], args[1]))
    elif verb == "del":
        _expect(verb, args, 1)
        session.push(d.remove(args[0]))
    elif verb == "default":
        _expect(verb, args, 1)
        session.push(d.with_predicate(Always(), args[0]))
    elif verb == "prefix":
        _expect(verb, args, 2)
        session.push(d.with_predicate(Prefix(words[1]), args[1]))
    elif verb == "between":
        _expect(verb, args, 3)
        session.push(d.with_predicate(Between(args[0], args[1]), args[2]))
    elif verb == "oneof":
        _expect(verb, args, 2)
        keys = tuple(parse_scalar(k) for k in words[1].split(",") if k)
        session.push(d.with_predicate(OneOf(keys), args[1]))
    else:
        raise StatementError(f"Unknown statement: {verb}")

    print(f"ok (depth {session.current.depth()})")


def _expect(verb: str, args: list[object], count: int) -> None:
    """Check a statement's argument count."""
    if len(args) != count:
        raise StatementError(f"{verb} takes {count} argument(s), got {len(args)}")


def _handle_command(line: str, session: Session) -> None:
    """Handle REPL meta-commands."""
    parts = line.split()
    cmd = parts[0].lower()
    args = parts[1:]

    if cmd in ("\\quit", "\\q"):
        raise SystemExit(0)
    elif cmd == "\\load":
        _cmd_load(args, session)
    elif cmd == "\\sample":
        session.push(sample_dictionary())
        print("Loaded sample: HTTP status codes")
    elif cmd == "\\undo":
        _cmd_undo(session)
    elif cmd == "\\depth":
        print(f"depth {session.current.depth()}, {session.versions()} version(s)")
    elif cmd == "\\reset":
        session.reset()
        print("Reset to empty")
    else:
        print(f"Unknown command: {cmd}")


def _cmd_load(args: list[str], session: Session) -> None:
    """Handle \\load: insert the pairs of a CSV file on top of the current version."""
    file_arg = None
    key_column: str | None = None
    value_column: str | None = None
    for arg in args:
        if arg.startswith("--key="):
            key_column = arg[len("--key="):]
        elif arg.startswith("--value="):
            value_column = arg[len("--value="):]
        elif file_arg is None:
            file_arg = arg
        else:
            print(f"Error: unexpected argument: {arg}")
            return

    if file_arg is None:
        print("Error: \\load requires a filename")
        return

    path = Path(file_arg)
    if not path.exists():
        print(f"Error: file not found: {path}")
        return

    try:
        with open(path, encoding="utf-8") as f:
            pairs = load_pairs(f, key_column=key_column, value_column=value_column)
    except LoadError as e:
        print(f"Error: {e}")
        return
    except OSError as e:
        print(f"Error loading {path}: {e}")
        return

    session.push(session.current.insert_all(pairs))
    print(f"Loaded {len(pairs)} pairs from {path.name}")


def _cmd_undo(session: Session) -> None:
    """Handle \\undo: step back one version."""
    try:
        d = session.undo()
    except IndexError as e:
        print(f"Error: {e}")
        return
    print(f"Undone (depth {d.depth()})")
