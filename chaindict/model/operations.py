"""Function-style API over Dictionary.

Each function takes the dictionary last and returns a new value; the
argument is never modified.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable

from chaindict.model.chain import EMPTY, Dictionary, K, Predicate, V, W


def empty() -> Dictionary[Any, Any]:
    """Return the Dictionary with no bindings."""
    return EMPTY


def get(key: K, d: Dictionary[K, V]) -> V | None:
    """Return the value key resolves to in d, or None if it is absent.

    A key bound to None also returns None; ``key in d`` tells the two apart.
    """
    return d.get(key)


def insert(key: K, value: V, d: Dictionary[K, V]) -> Dictionary[K, V]:
    return d.insert(key, value)


def remove(key: K, d: Dictionary[K, V]) -> Dictionary[K, V]:
    return d.remove(key)


def with_predicate(predicate: Predicate, value: V, d: Dictionary[K, V]) -> Dictionary[K, V]:
    return d.with_predicate(predicate, value)


def from_list(pairs: Iterable[tuple[K, V]]) -> Dictionary[K, V]:
    """Build a Dictionary from pairs. Duplicate keys resolve to the last pair."""
    return Dictionary.from_list(pairs)


def map_values(transform: Callable[[V], W], d: Dictionary[K, V]) -> Dictionary[K, W]:
    """Return d with every found value passed through transform at lookup time."""
    return d.map(transform)
