"""nested-array public API.

jax conversions live in `nested_array.arrays` and the method adapter in
`nested_array.methods`; neither is imported here.
"""

from .bounds import to_valid_end_index, to_valid_index, to_valid_last_index
from .config import SETTINGS, Settings, load_settings
from .errors import (
    EmptySequenceError,
    InvalidDepthError,
    NestedArrayError,
    NestedArrayUsageError,
    RaggedArrayError,
)
from .search import (
    nested_every,
    nested_every_from_last,
    nested_find,
    nested_find_index,
    nested_find_last,
    nested_find_last_index,
    nested_includes,
    nested_includes_from_last,
    nested_index_of,
    nested_last_index_of,
    nested_some,
    nested_some_from_last,
)
from .strings import nested_join, nested_split
from .traversal import (
    build_shape,
    nested_enumerate,
    nested_fill,
    nested_fill_map,
    nested_for_each,
    nested_map,
    shape,
    shape_at_origin,
)
from .values import ValueKind, is_array_like, kind_of

__all__ = [
    "build_shape",
    "shape",
    "shape_at_origin",
    "nested_map",
    "nested_for_each",
    "nested_enumerate",
    "nested_split",
    "nested_join",
    "nested_fill",
    "nested_fill_map",
    "nested_includes",
    "nested_includes_from_last",
    "nested_index_of",
    "nested_last_index_of",
    "nested_find",
    "nested_find_last",
    "nested_find_index",
    "nested_find_last_index",
    "nested_some",
    "nested_some_from_last",
    "nested_every",
    "nested_every_from_last",
    "to_valid_index",
    "to_valid_last_index",
    "to_valid_end_index",
    "is_array_like",
    "kind_of",
    "ValueKind",
    "Settings",
    "SETTINGS",
    "load_settings",
    "NestedArrayError",
    "NestedArrayUsageError",
    "EmptySequenceError",
    "InvalidDepthError",
    "RaggedArrayError",
]
