"""Pure functional transformations over objects and dicts."""

from .construct import copy, empty_object, object_, record
from .filtering import (
    exclude_null,
    exclude_null_properties,
    exclude_object,
    exclude_object_fn,
    exclude_object_keys,
    exclude_object_keys_fn,
    exclude_object_values,
    exclude_object_values_fn,
    filter_dict,
    filter_dict_fn,
    filter_object,
    filter_object_fn,
    filter_object_keys,
    filter_object_keys_fn,
    filter_object_values,
    filter_object_values_fn,
    for_each,
    for_each_fn,
)
from .mapping import (
    map_object,
    map_object_fn,
    map_object_keys,
    map_object_keys_fn,
    map_object_values,
    map_object_values_fn,
)
from .merge import merge_objects, merge_objects_fn
from .predicates import is_string_key, negate, not_null
from .properties import entries, is_empty, keys, own_properties, values

__all__ = [
    # Construction
    "copy",
    "empty_object",
    # Enumeration
    "entries",
    # Filtering
    "exclude_null",
    "exclude_null_properties",
    "exclude_object",
    "exclude_object_fn",
    "exclude_object_keys",
    "exclude_object_keys_fn",
    "exclude_object_values",
    "exclude_object_values_fn",
    "filter_dict",
    "filter_dict_fn",
    "filter_object",
    "filter_object_fn",
    "filter_object_keys",
    "filter_object_keys_fn",
    "filter_object_values",
    "filter_object_values_fn",
    "for_each",
    "for_each_fn",
    "is_empty",
    # Predicates
    "is_string_key",
    "keys",
    # Mapping
    "map_object",
    "map_object_fn",
    "map_object_keys",
    "map_object_keys_fn",
    "map_object_values",
    "map_object_values_fn",
    # Merging
    "merge_objects",
    "merge_objects_fn",
    "negate",
    "not_null",
    "object_",
    "own_properties",
    "record",
    "values",
]
