"""Own-property enumeration.

An object's own properties are its items when it is a mapping, and the
entries of its instance ``__dict__`` otherwise (class instances, functions
carrying attributes). Only string keys are enumerated; symbolic keys are left
to the functions that operate on the full property set.
"""

from collections.abc import Mapping
from typing import Any

from toolz import keyfilter

from .predicates import is_string_key


def own_properties(obj: Any) -> Mapping[Any, Any]:
    """
    Get a read view of all own properties of an object, symbolic keys included.

    Args:
        obj: A mapping, or any object with an instance ``__dict__``

    Returns:
        The mapping itself, or the object's ``__dict__``

    Raises:
        TypeError: If the object carries no enumerable properties
    """
    if isinstance(obj, Mapping):
        return obj
    try:
        return vars(obj)
    except TypeError:
        raise TypeError(
            f"Expected a mapping or an object with attributes, got {type(obj).__name__}"
        ) from None


def string_keyed(obj: Any) -> dict[str, Any]:
    """Get a new dict of the object's own string-keyed properties, in order."""
    return keyfilter(is_string_key, own_properties(obj))


def keys(obj: Any) -> list[str]:
    """Return the object's own string-keyed property names."""
    return list(string_keyed(obj))


def values(obj: Any) -> list[Any]:
    """Return the object's own string-keyed property values."""
    return list(string_keyed(obj).values())


def entries(obj: Any) -> list[tuple[str, Any]]:
    """Return the object's own string-keyed ``(key, value)`` pairs."""
    return list(string_keyed(obj).items())


def is_empty(obj: Any) -> bool:
    """
    Test whether an object has no own string-keyed properties.

    Symbolic keys are not considered, so an "empty" object may still
    carry properties keyed by symbols.
    """
    return not any(is_string_key(key) for key in own_properties(obj))
