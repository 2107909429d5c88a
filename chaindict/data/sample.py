"""Sample data: HTTP status codes and their reason phrases."""

from __future__ import annotations

from chaindict.model.chain import EMPTY, Dictionary
from chaindict.model.predicates import Between

STATUS_CLASSES = [
    (Between(100, 199), "Informational"),
    (Between(200, 299), "Success"),
    (Between(300, 399), "Redirection"),
    (Between(400, 499), "Client Error"),
    (Between(500, 599), "Server Error"),
]

REASON_PHRASES = [
    (200, "OK"),
    (201, "Created"),
    (204, "No Content"),
    (301, "Moved Permanently"),
    (304, "Not Modified"),
    (400, "Bad Request"),
    (401, "Unauthorized"),
    (403, "Forbidden"),
    (404, "Not Found"),
    (418, "I'm a teapot"),
    (500, "Internal Server Error"),
    (503, "Service Unavailable"),
]

# Reserved and never used; blocked so the 3xx class rule does not claim it.
UNUSED_CODE = 306


def sample_dictionary() -> Dictionary[int, str]:
    """Build the sample: class ranges, exact phrases on top, one code removed."""
    d: Dictionary[int, str] = EMPTY
    for predicate, label in STATUS_CLASSES:
        d = d.with_predicate(predicate, label)
    d = d.insert_all(REASON_PHRASES)
    return d.remove(UNUSED_CODE)
