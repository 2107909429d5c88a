"""Predicate helpers: frozen, comparable callables over keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Equals:
    """Matches keys equal to ``key``. Used by ``insert``."""

    key: Any

    def __call__(self, candidate: Any) -> bool:
        return candidate == self.key


@dataclass(frozen=True)
class Always:
    """Matches every key."""

    def __call__(self, candidate: Any) -> bool:
        return True


@dataclass(frozen=True)
class OneOf:
    """Matches keys equal to any of ``keys``.

    Membership is a linear equality scan, so the keys need not be hashable.
    """

    keys: tuple[Any, ...]

    def __call__(self, candidate: Any) -> bool:
        return any(candidate == k for k in self.keys)


@dataclass(frozen=True)
class Between:
    """Matches keys with ``low <= key <= high``.

    Keys that cannot be ordered against the bounds do not match.
    """

    low: Any
    high: Any

    def __call__(self, candidate: Any) -> bool:
        try:
            return bool(self.low <= candidate <= self.high)
        except TypeError:
            return False


@dataclass(frozen=True)
class Prefix:
    """Matches string keys starting with ``prefix``."""

    prefix: str

    def __call__(self, candidate: Any) -> bool:
        return isinstance(candidate, str) and candidate.startswith(self.prefix)


def equals(key: Any) -> Equals:
    """Return a predicate matching exactly ``key``."""
    return Equals(key)


always = Always()
