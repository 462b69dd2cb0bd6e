"""
Key and value mapping over the string-keyed properties of an object.

Only string-keyed properties of the input are visited, in insertion order,
but mapping functions may produce keys of any hashable type. When a mapping
function produces the same key twice, the later value overwrites the earlier
one while the key keeps its first position.

Each transform has a curried ``*_fn`` variant taking only the mapping
function, for use in pipelines.
"""

from collections.abc import Callable, Hashable
from typing import Any, TypeVar

from toolz import flip, itemmap, keymap

from .properties import string_keyed

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K", bound=Hashable)

ObjectTransform = Callable[[Any], dict[Any, Any]]


def map_object(obj: Any, f: Callable[[str, T], tuple[K, U]]) -> dict[K, U]:
    """
    Create a new dict with properties mapped from the string-keyed properties of an object.

    Args:
        obj: A mapping, or any object with an instance ``__dict__``
        f: Called as ``f(key, value)``, returning a ``(new_key, new_value)`` pair

    Returns:
        A new dict built from the pairs returned by ``f``
    """
    return itemmap(lambda item: f(*item), string_keyed(obj))


def map_object_fn(f: Callable[[str, T], tuple[K, U]]) -> ObjectTransform:
    """Curried variant of ``map_object``."""
    return flip(map_object, f)


def map_object_keys(obj: Any, f: Callable[[str], K]) -> dict[K, Any]:
    """
    Create a new dict with the string-keyed properties of an object moved to new keys.

    Args:
        obj: A mapping, or any object with an instance ``__dict__``
        f: Called as ``f(key)``, returning the new key

    Returns:
        A new dict with the same values under the new keys
    """
    return keymap(f, string_keyed(obj))


def map_object_keys_fn(f: Callable[[str], K]) -> ObjectTransform:
    """Curried variant of ``map_object_keys``."""
    return flip(map_object_keys, f)


def map_object_values(obj: Any, f: Callable[[T, str], U]) -> dict[str, U]:
    """
    Create a new dict with the string-keyed properties of an object mapped to new values.

    The result has exactly the keys of the input, in the same order.

    Args:
        obj: A mapping, or any object with an instance ``__dict__``
        f: Called as ``f(value, key)``, returning the new value

    Returns:
        A new dict with the same keys and mapped values
    """
    return itemmap(lambda item: (item[0], f(item[1], item[0])), string_keyed(obj))


def map_object_values_fn(f: Callable[[T, str], U]) -> ObjectTransform:
    """Curried variant of ``map_object_values``."""
    return flip(map_object_values, f)
