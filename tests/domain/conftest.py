"""Domain layer test fixtures - plain objects with no dependencies.

Fast creation, function-scoped for isolation.
"""

import pytest

from pureobject import Symbol
from tests.fixtures.models import Furniture


@pytest.fixture
def symbol():
    """A fresh symbolic key."""
    return Symbol("s")


@pytest.fixture
def furniture():
    """Class instance with string-keyed attributes."""
    return Furniture()


@pytest.fixture
def furniture_with_symbol(symbol):
    """Class instance carrying a symbol-keyed entry next to its attributes."""
    item = Furniture()
    vars(item)[symbol] = "hidden"
    return item


@pytest.fixture
def callable_with_attributes():
    """Function carrying attached data attributes."""

    def one() -> int:
        return 1

    one.a = 1
    one.b = 2
    return one


@pytest.fixture
def numbers():
    """Mapping of five string keys to integers."""
    return {"a": 1, "b": 2, "c": 3, "d": 4, "e": 5}
