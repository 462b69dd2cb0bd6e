"""Value types shared by the object transforms."""

from .keys import EntryPredicate, Key, KeyPredicate, Symbol, ValueKeyPredicate, ValuePredicate

__all__ = [
    "EntryPredicate",
    "Key",
    "KeyPredicate",
    "Symbol",
    "ValueKeyPredicate",
    "ValuePredicate",
]
