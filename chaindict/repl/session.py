"""Session: the REPL's history of Dictionary versions."""

from __future__ import annotations

from typing import Any

from chaindict.model.chain import EMPTY, Dictionary


class Session:
    """A mutable stack of immutable Dictionary versions.

    Each write pushes a new version. Older versions share structure with
    newer ones, so keeping them all for undo costs one layer per write.
    """

    def __init__(self, initial: Dictionary[Any, Any] | None = None) -> None:
        self._history: list[Dictionary[Any, Any]] = [initial if initial is not None else EMPTY]

    @property
    def current(self) -> Dictionary[Any, Any]:
        """Return the newest version."""
        return self._history[-1]

    def push(self, d: Dictionary[Any, Any]) -> None:
        """Make d the newest version."""
        self._history.append(d)

    def undo(self) -> Dictionary[Any, Any]:
        """Drop the newest version and return the one below it.

        Raises IndexError if only the initial version is left.
        """
        if len(self._history) == 1:
            raise IndexError("Nothing to undo")
        self._history.pop()
        return self.current

    def reset(self) -> None:
        """Start over from the empty Dictionary."""
        self._history = [EMPTY]

    def versions(self) -> int:
        """Return the number of versions held, including the initial one."""
        return len(self._history)
