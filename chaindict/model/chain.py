"""Dictionary: an immutable chain of (predicate, value) resolution rules."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, TypeVar

from chaindict.model.predicates import Equals

K = TypeVar("K")
V = TypeVar("V")
W = TypeVar("W")

Predicate = Callable[[Any], bool]

# Marks a miss during resolution, so that a stored None is still a value.
_MISSING: Any = object()


class Dictionary(Generic[K, V]):
    """An immutable, persistent chain of resolution rules.

    The chain is walked newest-first and the first rule that matches a key
    decides its value. The concrete classes are the variants of the chain:
    Empty terminates it, Rule binds a predicate to a value, Removal blocks
    one key and Mapped transforms values found below it.

    Every write returns a new Dictionary holding this one as its parent.
    Nothing is ever changed in place, so older values stay valid.
    """

    __slots__ = ()

    # Bindings are predicates, not enumerable keys.
    __iter__ = None

    # --- Writes ---

    def with_predicate(self, predicate: Predicate, value: V) -> Dictionary[K, V]:
        """Return a new Dictionary where keys matching predicate resolve to value."""
        return Rule(predicate, value, self)

    def insert(self, key: K, value: V) -> Dictionary[K, V]:
        """Return a new Dictionary where key resolves to value."""
        return Rule(Equals(key), value, self)

    def remove(self, key: K) -> Dictionary[K, V]:
        """Return a new Dictionary where key is absent.

        The removal blocks every binding written before it, including broad
        predicates. A later write for the same key sits above it and wins.
        """
        return Removal(key, self)

    def map(self, transform: Callable[[V], W]) -> Dictionary[K, W]:
        """Return a new Dictionary whose found values pass through transform.

        The transform runs at lookup time, once per successful lookup.
        """
        return Mapped(transform, self)

    def insert_all(self, pairs: Iterable[tuple[K, V]]) -> Dictionary[K, V]:
        """Insert each (key, value) pair in order; later pairs win."""
        result: Dictionary[K, V] = self
        for key, value in pairs:
            result = result.insert(key, value)
        return result

    @staticmethod
    def from_list(pairs: Iterable[tuple[K, V]]) -> Dictionary[K, V]:
        """Build a Dictionary from (key, value) pairs; later pairs win."""
        return EMPTY.insert_all(pairs)

    # --- Reads ---

    def get(self, key: K, default: Any = None) -> Any:
        """Return the value key resolves to, or default when it is absent."""
        value = _resolve(self, key)
        if value is _MISSING:
            return default
        return value

    def lookup(self, key: K) -> V:
        """Return the value key resolves to.

        Raises KeyError if the key is absent.
        """
        value = _resolve(self, key)
        if value is _MISSING:
            raise KeyError(key)
        return value

    def depth(self) -> int:
        """Return the number of layers in the chain, excluding the terminal Empty."""
        count = 0
        node: Dictionary[Any, Any] = self
        while not isinstance(node, Empty):
            count += 1
            node = node.parent
        return count

    def __getitem__(self, key: K) -> V:
        return self.lookup(key)

    def __contains__(self, key: object) -> bool:
        return _resolve(self, key) is not _MISSING

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} depth={self.depth()}>"


class Empty(Dictionary[Any, Any]):
    """The terminal layer. Every key is absent."""

    __slots__ = ()


class Rule(Dictionary[K, V]):
    """A binding: keys matching predicate resolve to value."""

    __slots__ = ("predicate", "value", "parent")

    def __init__(self, predicate: Predicate, value: V, parent: Dictionary[K, V]) -> None:
        object.__setattr__(self, "predicate", predicate)
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "parent", parent)

    def __repr__(self) -> str:
        return f"<Rule {self.predicate!r} -> {self.value!r} depth={self.depth()}>"


class Removal(Dictionary[K, V]):
    """A blocking layer: key is absent, everything else falls through."""

    __slots__ = ("key", "parent")

    def __init__(self, key: K, parent: Dictionary[K, V]) -> None:
        object.__setattr__(self, "key", key)
        object.__setattr__(self, "parent", parent)


class Mapped(Dictionary[K, W]):
    """A lazy transform over the values found in parent."""

    __slots__ = ("transform", "parent")

    def __init__(self, transform: Callable[[Any], W], parent: Dictionary[K, Any]) -> None:
        object.__setattr__(self, "transform", transform)
        object.__setattr__(self, "parent", parent)


EMPTY: Dictionary[Any, Any] = Empty()


def _resolve(node: Dictionary[Any, Any], key: Any) -> Any:
    """Walk the chain from node and return the value for key, or _MISSING.

    Transforms from Mapped layers passed on the way down are applied
    innermost first.
    """
    transforms: list[Callable[[Any], Any]] = []
    while True:
        if isinstance(node, Rule):
            if node.predicate(key):
                value = node.value
                break
        elif isinstance(node, Removal):
            if key == node.key:
                return _MISSING
        elif isinstance(node, Mapped):
            transforms.append(node.transform)
        else:
            return _MISSING
        node = node.parent

    for transform in reversed(transforms):
        value = transform(value)
    return value
