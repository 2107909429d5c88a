"""Data model: the predicate-chain Dictionary and its operations."""

from chaindict.model.chain import Dictionary, Empty, Mapped, Removal, Rule
from chaindict.model.operations import (
    empty,
    from_list,
    get,
    insert,
    map_values,
    remove,
    with_predicate,
)
from chaindict.model.predicates import Always, Between, Equals, OneOf, Prefix, always, equals

__all__ = [
    "Always",
    "Between",
    "Dictionary",
    "Empty",
    "Equals",
    "Mapped",
    "OneOf",
    "Prefix",
    "Removal",
    "Rule",
    "always",
    "empty",
    "equals",
    "from_list",
    "get",
    "insert",
    "map_values",
    "remove",
    "with_predicate",
]
