"""Small predicates shared by the filtering transforms."""

from collections.abc import Callable
from typing import Any

from toolz import complement


def not_null(value: Any) -> bool:
    """Check that a value is not None."""
    return value is not None


def is_string_key(key: Any) -> bool:
    """Check whether a key takes part in string-keyed operations."""
    return isinstance(key, str)


def negate(predicate: Callable[..., Any]) -> Callable[..., bool]:
    """Return the logical complement of a predicate of any arity."""
    return complement(predicate)
