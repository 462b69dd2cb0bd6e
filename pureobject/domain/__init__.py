"""pureobject domain layer - pure functions with no I/O."""

from . import entities, transforms
from .entities import Key, Symbol
from .transforms import *  # noqa: F403
from .transforms import __all__ as _transforms_all

__all__ = [
    # Modules
    "entities",
    "transforms",
    # Key types
    "Key",
    "Symbol",
    *_transforms_all,
]
