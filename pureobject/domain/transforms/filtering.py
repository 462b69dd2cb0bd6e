"""
Predicate selection over the string-keyed properties of an object.

Predicates are called exactly once per property, in insertion order, and the
surviving properties keep their original order. Each ``exclude_*`` function
keeps exactly the properties its ``filter_*`` counterpart drops.
"""

from collections.abc import Callable
from typing import Any

from toolz import flip, itemfilter, keyfilter, valfilter

from pureobject.domain.entities import (
    EntryPredicate,
    KeyPredicate,
    ValueKeyPredicate,
    ValuePredicate,
)

from .predicates import negate, not_null
from .properties import string_keyed

ObjectTransform = Callable[[Any], dict[str, Any]]


# === Filtering ===


def filter_object(obj: Any, predicate: EntryPredicate) -> dict[str, Any]:
    """
    Create a new dict with the string-keyed properties that satisfy a predicate.

    Args:
        obj: A mapping, or any object with an instance ``__dict__``
        predicate: Called as ``predicate(key, value)``

    Returns:
        A new dict of the properties for which the predicate is truthy
    """
    return itemfilter(lambda item: predicate(*item), string_keyed(obj))


def filter_object_fn(predicate: EntryPredicate) -> ObjectTransform:
    """Curried variant of ``filter_object``."""
    return flip(filter_object, predicate)


def filter_object_keys(obj: Any, predicate: KeyPredicate) -> dict[str, Any]:
    """Create a new dict with the string-keyed properties whose keys satisfy a predicate."""
    return keyfilter(predicate, string_keyed(obj))


def filter_object_keys_fn(predicate: KeyPredicate) -> ObjectTransform:
    """Curried variant of ``filter_object_keys``."""
    return flip(filter_object_keys, predicate)


def filter_object_values(obj: Any, predicate: ValuePredicate) -> dict[str, Any]:
    """Create a new dict with the string-keyed properties whose values satisfy a predicate."""
    return valfilter(predicate, string_keyed(obj))


def filter_object_values_fn(predicate: ValuePredicate) -> ObjectTransform:
    """Curried variant of ``filter_object_values``."""
    return flip(filter_object_values, predicate)


def filter_dict(obj: Any, predicate: ValueKeyPredicate) -> dict[str, Any]:
    """
    Like ``filter_object``, with the predicate called as ``predicate(value, key)``.

    Matches the argument order of ``for_each`` and ``map_object_values``, so
    callbacks written for those can be reused as filters.
    """
    return itemfilter(lambda item: predicate(item[1], item[0]), string_keyed(obj))


def filter_dict_fn(predicate: ValueKeyPredicate) -> ObjectTransform:
    """Curried variant of ``filter_dict``."""
    return flip(filter_dict, predicate)


# === Exclusion ===


def exclude_object(obj: Any, predicate: EntryPredicate) -> dict[str, Any]:
    """Create a new dict without the string-keyed properties that satisfy a predicate."""
    return filter_object(obj, negate(predicate))


def exclude_object_fn(predicate: EntryPredicate) -> ObjectTransform:
    """Curried variant of ``exclude_object``."""
    return flip(exclude_object, predicate)


def exclude_object_keys(obj: Any, predicate: KeyPredicate) -> dict[str, Any]:
    """Create a new dict without the string-keyed properties whose keys satisfy a predicate."""
    return filter_object_keys(obj, negate(predicate))


def exclude_object_keys_fn(predicate: KeyPredicate) -> ObjectTransform:
    """Curried variant of ``exclude_object_keys``."""
    return flip(exclude_object_keys, predicate)


def exclude_object_values(obj: Any, predicate: ValuePredicate) -> dict[str, Any]:
    """Create a new dict without the string-keyed properties whose values satisfy a predicate."""
    return filter_object_values(obj, negate(predicate))


def exclude_object_values_fn(predicate: ValuePredicate) -> ObjectTransform:
    """Curried variant of ``exclude_object_values``."""
    return flip(exclude_object_values, predicate)


def exclude_null_properties(obj: Any) -> dict[str, Any]:
    """Create a new dict without the string-keyed properties whose value is None."""
    return filter_object_values(obj, not_null)


exclude_null = exclude_null_properties


# === Iteration ===


def for_each(obj: Any, f: Callable[[Any, str], Any]) -> None:
    """Call ``f(value, key)`` for each string-keyed property, in order."""
    for key, value in string_keyed(obj).items():
        f(value, key)


def for_each_fn(f: Callable[[Any, str], Any]) -> Callable[[Any], None]:
    """Curried variant of ``for_each``."""
    return flip(for_each, f)
