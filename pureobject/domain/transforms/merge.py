"""Merging the own properties of several objects into one."""

from collections.abc import Callable
from typing import Any

from toolz import merge

from pureobject.config import get_logger

from .properties import own_properties

logger = get_logger(__name__)


def merge_objects(*objects: Any) -> dict[Any, Any]:
    """
    Create a new dict containing the own properties of all given objects.

    If two or more objects have a property with the same key, the result
    holds the value from the last such object. Each key keeps the position
    of its first occurrence.

    Args:
        *objects: Mappings or objects with an instance ``__dict__``

    Returns:
        A new dict, symbolic keys included
    """
    merged = merge(*(own_properties(obj) for obj in objects))
    logger.debug(f"Merged {len(objects)} objects into {len(merged)} properties")
    return merged


def merge_objects_fn(*objects: Any) -> Callable[[Any], dict[Any, Any]]:
    """
    Curried variant of ``merge_objects``.

    Returns a function that merges its argument with the given objects.
    The given objects are applied after the argument, so their values win
    on conflicting keys:

        >>> with_overrides = merge_objects_fn({"debug": True})
        >>> with_overrides({"debug": False, "port": 80})
        {'debug': True, 'port': 80}
    """

    def transform(obj: Any) -> dict[Any, Any]:
        return merge_objects(obj, *objects)

    return transform
