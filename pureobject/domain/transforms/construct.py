"""
Object construction and shallow copying.

``object_`` and ``record`` build plain dicts holding a snapshot of an
object's own properties, symbolic keys included. ``copy`` goes further and
keeps what makes the original behave the way it does: its class, and its
ability to be called or instantiated.

Neither performs a deep copy. Nested values are shared by reference.
"""

import inspect
import types
from collections.abc import Mapping
from contextlib import suppress
from copy import copy as shallow_copy
from functools import WRAPPER_ASSIGNMENTS, partial
from typing import Any, TypeVar

from pureobject.config import get_logger

from .properties import own_properties

logger = get_logger(__name__)

T = TypeVar("T")


def object_(properties: Any) -> dict[Any, Any]:
    """
    Create a new plain dict with every own property of the given object.

    Callables are not preserved: passing a function yields a dict of the
    attributes attached to it. Use ``copy`` to keep the function callable.

    Args:
        properties: A mapping, or any object with an instance ``__dict__``

    Returns:
        A new dict of the object's own properties, symbolic keys included
    """
    return dict(own_properties(properties))


def record(properties: Mapping[Any, T] | None = None) -> dict[Any, T]:
    """Create a new plain dict from optional initial properties."""
    if properties is None:
        return {}
    return object_(properties)


def empty_object() -> dict[Any, Any]:
    """Create a new empty plain dict."""
    return {}


def copy(value: T) -> T:
    """
    Create a shallow copy of an object that keeps its class and behaviour.

    - A class is copied as a new subclass with no overrides, so
      instantiating the copy behaves like instantiating the original.
    - A function, method or ``functools.partial`` is copied as a new
      function that forwards every argument to the original. Attributes
      attached to the original are copied onto the new function afterwards.
    - A dict (or dict subclass such as ``OrderedDict`` or ``defaultdict``)
      is copied through the class's own copy protocol, so the copy is a
      working instance of the same class with the same items.
    - A read-only mapping without instance attributes, such as
      ``MappingProxyType``, is rebuilt with its own class around a new dict
      of its items, or copied to a plain dict when its class cannot be
      built that way.
    - Any other object, callable instances included, is copied as a new
      instance of the same class with the same instance ``__dict__``, so
      methods (and ``__call__``) still resolve through the shared class.

    To get a plain dict that is neither callable nor an instance of the
    original class, use ``object_`` instead.

    Args:
        value: The object to copy

    Returns:
        A new object; never the same object as ``value``

    Raises:
        TypeError: If the object is neither a mapping, a callable nor an
            object with instance attributes
    """
    if isinstance(value, type):
        return _copy_class(value)
    if _is_function(value):
        return _copy_callable(value)
    if isinstance(value, dict):
        return _copy_dict(value)
    if isinstance(value, Mapping) and not hasattr(value, "__dict__"):
        return _copy_mapping(value)
    return _copy_instance(value)


def _is_function(value: Any) -> bool:
    if inspect.isroutine(value) or isinstance(value, partial):
        return True
    # Callables without an instance __dict__ cannot be rebuilt from their class
    return callable(value) and not hasattr(value, "__dict__")


def _copy_class(cls: type) -> Any:
    copied = types.new_class(cls.__name__, (cls,))
    copied.__module__ = cls.__module__
    copied.__qualname__ = cls.__qualname__
    logger.debug(f"Copied class {cls.__qualname__} as an empty subclass")
    return copied


def _copy_callable(function: Any) -> Any:
    def copied(*args: Any, **kwargs: Any) -> Any:
        return function(*args, **kwargs)

    for attribute in WRAPPER_ASSIGNMENTS:
        with suppress(AttributeError, TypeError):
            setattr(copied, attribute, getattr(function, attribute))

    copied.__dict__.update(getattr(function, "__dict__", {}))
    return copied


def _copy_dict(value: dict[Any, Any]) -> Any:
    copied = shallow_copy(value)
    # defaultdict's copy protocol drops instance attributes of subclasses
    if hasattr(value, "__dict__"):
        vars(copied).update(vars(value))
    return copied


def _copy_mapping(value: Mapping[Any, Any]) -> Any:
    try:
        return type(value)(dict(value))
    except TypeError:
        logger.debug(f"Copied {type(value).__name__} to a plain dict")
        return dict(value)


def _copy_instance(value: Any) -> Any:
    if not hasattr(value, "__dict__"):
        raise TypeError(
            f"Cannot copy {type(value).__name__}: expected a mapping, a callable "
            "or an object with instance attributes"
        )

    cls = type(value)
    copied = cls.__new__(cls)
    vars(copied).update(vars(value))
    return copied
