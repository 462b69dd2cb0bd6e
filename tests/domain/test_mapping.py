"""Tests for key and value mapping."""

import pytest
from toolz import compose_left

from pureobject import (
    Symbol,
    filter_object_values_fn,
    map_object,
    map_object_fn,
    map_object_keys,
    map_object_keys_fn,
    map_object_values,
    map_object_values_fn,
)


class TestMapObject:
    """Test mapping keys and values together."""

    def test_maps_to_symbolic_keys(self):
        """Test mapping functions may return keys of any type."""
        sa = Symbol("a")
        sb = Symbol("b")
        symbols = {"a": sa, "b": sb}

        result = map_object({"a": 1, "b": 2}, lambda key, value: (symbols[key], value + 1))

        assert result == {sa: 2, sb: 3}

    def test_duplicate_keys_last_wins(self):
        result = map_object({"a": 1, "b": 2, "c": 3}, lambda key, value: ("odd" if value % 2 else "even", value))

        assert result == {"odd": 3, "even": 2}
        assert list(result) == ["odd", "even"]

    def test_only_string_keys_are_visited(self, symbol):
        seen = []

        def record_key(key, value):
            seen.append(key)
            return key, value

        map_object({"a": 1, symbol: 2, 3: 3, "b": 4}, record_key)

        assert seen == ["a", "b"]

    def test_curried(self):
        swap = map_object_fn(lambda key, value: (value, key))

        assert swap({"a": "x", "b": "y"}) == {"x": "a", "y": "b"}

    def test_errors_propagate(self):
        def fail(key, value):
            raise KeyError(key)

        with pytest.raises(KeyError):
            map_object({"a": 1}, fail)


class TestMapObjectKeys:
    """Test mapping keys."""

    def test_prefix_keys(self):
        assert map_object_keys({"a": 1, "b": 2}, lambda key: f"a{key}") == {"aa": 1, "ab": 2}

    def test_collisions_last_wins(self):
        result = map_object_keys({"A": 1, "b": 2, "a": 3}, str.lower)

        assert result == {"a": 3, "b": 2}
        assert list(result) == ["a", "b"]

    def test_curried(self):
        upper = map_object_keys_fn(str.upper)

        assert upper({"a": 1}) == {"A": 1}


class TestMapObjectValues:
    """Test mapping values."""

    def test_increment(self):
        result = map_object_values({"a": 1, "b": 2}, lambda value, key: value + 1)

        assert result == {"a": 2, "b": 3}
        assert list(result) == ["a", "b"]

    def test_value_and_key(self):
        result = map_object_values({"a": 1, "b": 2}, lambda value, key: str(value * 2) + key)

        assert result == {"a": "2a", "b": "4b"}

    def test_identity(self):
        """Test mapping with the identity keeps keys, values and order."""
        original = {"z": 1, "a": [2], "m": None}
        result = map_object_values(original, lambda value, key: value)

        assert list(result.items()) == list(original.items())
        assert result is not original

    def test_instance(self, furniture):
        assert map_object_values(furniture, lambda value, key: key) == {
            "hatstand": "hatstand",
            "sofa": "sofa",
        }

    def test_input_is_untouched(self):
        original = {"a": 1}
        map_object_values(original, lambda value, key: value * 10)

        assert original == {"a": 1}

    def test_curried_pipeline(self, numbers):
        """Test curried transforms compose into a pipeline."""
        pipeline = compose_left(
            filter_object_values_fn(lambda value: value > 2),
            map_object_values_fn(lambda value, key: value * 10),
        )

        assert pipeline(numbers) == {"c": 30, "d": 40, "e": 50}
