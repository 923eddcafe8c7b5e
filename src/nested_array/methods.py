"""Method-call adapter: the free functions attached to a list subclass.

    >>> grid = NestedList.from_shape([2, 3], lambda x, y: x * 3 + y)
    >>> grid.nested_map(lambda n: n + 10).shape()
    [2, 3]
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from functools import wraps
from typing import Any

from . import search, strings, traversal

_CHAINED_RESULTS = frozenset({"nested_map"})

_INSTANCE_METHODS: dict[str, Callable[..., Any]] = {
    "shape": traversal.shape,
    "shape_at_origin": traversal.shape_at_origin,
    "nested_map": traversal.nested_map,
    "nested_for_each": traversal.nested_for_each,
    "nested_enumerate": traversal.nested_enumerate,
    "nested_fill": traversal.nested_fill,
    "nested_fill_map": traversal.nested_fill_map,
    "nested_includes": search.nested_includes,
    "nested_includes_from_last": search.nested_includes_from_last,
    "nested_index_of": search.nested_index_of,
    "nested_last_index_of": search.nested_last_index_of,
    "nested_find": search.nested_find,
    "nested_find_last": search.nested_find_last,
    "nested_find_index": search.nested_find_index,
    "nested_find_last_index": search.nested_find_last_index,
    "nested_some": search.nested_some,
    "nested_some_from_last": search.nested_some_from_last,
    "nested_every": search.nested_every,
    "nested_every_from_last": search.nested_every_from_last,
}


def _as_method(name: str, func: Callable[..., Any]) -> Callable[..., Any]:
    @wraps(func)
    def method(self, *args, **kwargs):
        result = func(self, *args, **kwargs)
        if name in _CHAINED_RESULTS:
            return type(self)(result)
        return result

    return method


def register_methods(cls: type, functions: Mapping[str, Callable[..., Any]]) -> list[str]:
    """Attach each function as a method taking the instance first.

    Names `cls` already defines (itself or through a base class) are left
    alone. Returns the names that were registered.
    """
    added = []
    for name, func in functions.items():
        if hasattr(cls, name):
            continue
        setattr(cls, name, _as_method(name, func))
        added.append(name)
    return added


class NestedList(list):
    """List subclass exposing the traversal functions as methods.

    Only the outermost list is a `NestedList`; inner levels stay whatever
    they were built as.
    """

    @classmethod
    def from_shape(cls, shape: Any, value_or_generator: Any) -> "NestedList":
        return cls(traversal.build_shape(shape, value_or_generator))

    @classmethod
    def nested_split(cls, separators: Any, content: Any) -> "NestedList":
        return cls(strings.nested_split(separators, content))

    @staticmethod
    def nested_join(separators: Any, content: Any, max_depth: Any = None) -> str:
        return strings.nested_join(separators, content, max_depth)


register_methods(NestedList, _INSTANCE_METHODS)
