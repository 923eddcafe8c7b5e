"""Recursive construction, shape queries, mapping and in-place fills.

Every function walks the nested array depth-first. A child is descended
into only while it is array-like and the coordinate vector stays shorter
than `max_depth`; otherwise it is handed to the callback as a leaf.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import Any, TypeVar

from .bounds import (
    Index,
    axis_bound,
    check_max_depth,
    require_non_empty,
    to_valid_end_index,
    to_valid_index,
    to_valid_last_index,
)
from .callbacks import adapt_callback
from .values import is_array_like

T = TypeVar("T")
U = TypeVar("U")

NestedArray = Sequence[Any]


def build_shape(shape: Sequence[int], value_or_generator: T | Callable[..., T]) -> list[Any]:
    """Build a nested array of the given shape.

    If `value_or_generator` is callable it is invoked once per leaf, in
    row-major order, with one coordinate per axis; otherwise the value itself
    is placed at every leaf position (the same object, not copies).

    >>> build_shape([2, 3], lambda x, y: x * 3 + y)
    [[0, 1, 2], [3, 4, 5]]
    >>> build_shape([2, 3], 10)
    [[10, 10, 10], [10, 10, 10]]
    """
    require_non_empty(shape)
    dims = [int(length) for length in shape]

    if callable(value_or_generator):
        generator = value_or_generator

        def build_mapped(axis: int, coords: tuple[int, ...]) -> list[Any]:
            if axis + 1 < len(dims):
                return [build_mapped(axis + 1, coords + (index,)) for index in range(dims[axis])]
            return [generator(*coords, index) for index in range(dims[axis])]

        return build_mapped(0, ())

    def build_static(axis: int) -> list[Any]:
        if axis + 1 < len(dims):
            return [build_static(axis + 1) for _ in range(dims[axis])]
        return [value_or_generator for _ in range(dims[axis])]

    return build_static(0)


def shape(array: NestedArray, max_depth: int | float | None = None) -> list[int]:
    """Lengths of each axis, taken along the deepest branch.

    When branches differ, a candidate replaces the best shape found so far if
    it is deeper, or equally deep and longer at the axis being compared.

    >>> shape([[0, 1], [2, [3, 4], 5]])
    [2, 3, 2]
    """
    depth = check_max_depth(max_depth)

    def recurse(parent: NestedArray, current: list[int]) -> list[int]:
        axis = len(current)
        best = current
        for index in range(len(parent)):
            value = parent[index]
            if not (is_array_like(value) and axis < depth):
                continue
            result = recurse(value, current + [len(value)])
            if len(result) > len(best) or (len(result) == len(best) and result[axis] > best[axis]):
                best = result
        return best

    return recurse(array, [len(array)])


def shape_at_origin(array: NestedArray, max_depth: int | float | None = None) -> list[int]:
    """Lengths of each axis, following only the first element at every level.

    >>> shape_at_origin([[0, 1], [2, [3, 4], 5]])
    [2, 2]
    """
    depth = check_max_depth(max_depth)
    result = [len(array)]
    node = array
    while len(result) < depth and len(node) > 0:
        first = node[0]
        if not is_array_like(first):
            break
        result.append(len(first))
        node = first
    return result


def nested_map(
    array: NestedArray,
    callback: Callable[..., U],
    max_depth: int | float | None = None,
) -> list[Any]:
    """Return a freshly built nested list holding `callback` applied to every leaf.

    `callback` receives `(value, indices, root, parent)`, or as many of those
    as it accepts.
    """
    depth = check_max_depth(max_depth)
    func = adapt_callback(callback)

    def recurse(parent: NestedArray, indices: list[int]) -> list[Any]:
        out = []
        for index in range(len(parent)):
            value = parent[index]
            new_indices = indices + [index]
            if is_array_like(value) and len(new_indices) < depth:
                out.append(recurse(value, new_indices))
            else:
                out.append(func(value, new_indices, array, parent))
        return out

    return recurse(array, [])


def nested_enumerate(
    array: NestedArray,
    from_indices: Sequence[Index] | None = None,
    max_depth: int | float | None = None,
    *,
    reverse: bool = False,
) -> Iterator[tuple[list[int], Any, NestedArray]]:
    """Yield `(indices, value, parent)` for every leaf in traversal order.

    Within each node, iteration starts at the `from_indices` entry for that
    node's axis (see `to_valid_index` / `to_valid_last_index`). With
    `reverse=True` children are visited in descending order, but each
    child's subtree is still exhausted before its previous sibling.
    """
    depth = check_max_depth(max_depth)
    return _walk(array, from_indices, depth, reverse)


def _walk(
    array: NestedArray,
    from_indices: Sequence[Index] | None,
    depth: int | float,
    reverse: bool,
) -> Iterator[tuple[list[int], Any, NestedArray]]:
    def recurse(parent: NestedArray, indices: list[int]) -> Iterator[tuple[list[int], Any, NestedArray]]:
        bound = axis_bound(from_indices, len(indices))
        if reverse:
            order = range(to_valid_last_index(bound, parent), -1, -1)
        else:
            order = range(to_valid_index(bound, parent), len(parent))
        for index in order:
            value = parent[index]
            new_indices = indices + [index]
            if is_array_like(value) and len(new_indices) < depth:
                yield from recurse(value, new_indices)
            else:
                yield new_indices, value, parent

    return recurse(array, [])


def nested_for_each(
    array: NestedArray,
    callback: Callable[..., Any],
    max_depth: int | float | None = None,
) -> None:
    """Call `callback(value, indices, root, parent)` for every leaf, discarding results."""
    func = adapt_callback(callback)
    for indices, value, parent in nested_enumerate(array, None, max_depth):
        func(value, indices, array, parent)


def _fill_range(
    parent: NestedArray,
    axis: int,
    start_indices: Sequence[Index] | None,
    end_indices: Sequence[Index] | None,
) -> range:
    start = to_valid_index(axis_bound(start_indices, axis), parent)
    end = to_valid_end_index(axis_bound(end_indices, axis), parent)
    return range(start, end)


def nested_fill(
    array: NestedArray,
    value: Any,
    start_indices: Sequence[Index] | None = None,
    end_indices: Sequence[Index] | None = None,
    max_depth: int | float | None = None,
) -> NestedArray:
    """Overwrite every leaf inside the per-axis `[start, end)` box with `value`, in place.

    Returns `array` itself. Omitted or missing bound entries cover the whole axis.

    >>> nested_fill([[0, 1, 2], [3, 4, 5]], 10, [0, 0], [2, 2])
    [[10, 10, 2], [10, 10, 5]]
    """
    depth = check_max_depth(max_depth)

    def recurse(parent: NestedArray, axis: int) -> None:
        for index in _fill_range(parent, axis, start_indices, end_indices):
            original = parent[index]
            if is_array_like(original) and axis + 1 < depth:
                recurse(original, axis + 1)
            else:
                parent[index] = value

    recurse(array, 0)
    return array


def nested_fill_map(
    array: NestedArray,
    callback: Callable[..., Any],
    start_indices: Sequence[Index] | None = None,
    end_indices: Sequence[Index] | None = None,
    max_depth: int | float | None = None,
) -> NestedArray:
    """Replace every leaf inside the `[start, end)` box with `callback`'s result, in place.

    `callback` receives the value being replaced and its coordinates, plus
    the root and the immediate parent. Returns `array` itself.
    """
    depth = check_max_depth(max_depth)
    func = adapt_callback(callback)

    def recurse(parent: NestedArray, indices: list[int]) -> None:
        for index in _fill_range(parent, len(indices), start_indices, end_indices):
            value = parent[index]
            new_indices = indices + [index]
            if is_array_like(value) and len(new_indices) < depth:
                recurse(value, new_indices)
            else:
                parent[index] = func(value, new_indices, array, parent)

    recurse(array, [])
    return array
