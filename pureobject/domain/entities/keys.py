"""Key types used by object transforms.

Pure value types with no dependencies beyond attrs.
"""

from collections.abc import Callable, Hashable
from typing import Any

from attrs import define, field

# Any hashable value can key a dict; str keys are the "string keys" that
# enumeration, mapping and filtering operate on.
Key = Hashable

KeyPredicate = Callable[[str], bool]
ValuePredicate = Callable[[Any], bool]
EntryPredicate = Callable[[str, Any], bool]
# Array-style predicate order, value first
ValueKeyPredicate = Callable[[Any, str], bool]


@define(frozen=True, slots=True, eq=False)
class Symbol:
    """Opaque, identity-compared key.

    Two symbols are only equal when they are the same object, even when they
    share a description. Symbol keys are carried by ``object_``, ``copy`` and
    ``merge_objects`` but skipped by every string-keyed operation.
    """

    description: str | None = field(default=None)

    def __repr__(self) -> str:
        if self.description is None:
            return "Symbol()"
        return f"Symbol({self.description!r})"

