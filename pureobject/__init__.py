"""Pure functional object manipulation and traversal.

Every function returns a freshly allocated result and leaves its arguments
untouched:

```python
from pureobject import filter_object_values, merge_objects

defaults = {"host": "localhost", "port": 80}
merge_objects(defaults, {"port": 8080})  # {'host': 'localhost', 'port': 8080}
filter_object_values({"a": 1, "b": 2}, lambda value: value % 2 == 0)  # {'b': 2}
```
"""

from loguru import logger

from .config import PACKAGE_NAME, settings
from .domain import (
    Key,
    Symbol,
    copy,
    empty_object,
    entries,
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
    is_empty,
    keys,
    map_object,
    map_object_fn,
    map_object_keys,
    map_object_keys_fn,
    map_object_values,
    map_object_values_fn,
    merge_objects,
    merge_objects_fn,
    not_null,
    object_,
    record,
    values,
)

# Library records stay silent unless the application opts in
if not settings.logging.enabled:
    logger.disable(PACKAGE_NAME)

__all__ = [
    # Key types
    "Key",
    "Symbol",
    # Construction
    "copy",
    "empty_object",
    "object_",
    "record",
    # Enumeration
    "entries",
    "is_empty",
    "keys",
    "values",
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
    "not_null",
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
]
