"""Search family: includes / index-of / find / find-index / some / every.

All of these walk leaves with `nested_enumerate` and stop at the first
decisive leaf. Forward variants scan depth-first left to right starting at
`from_indices`; the `_from_last` / `_last` variants scan right to left
within each node, starting at `from_indices` and moving backwards.
`from_indices` bounds every node of an axis, not just the first one reached.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import Any

from .bounds import Index
from .callbacks import adapt_callback
from .traversal import NestedArray, nested_enumerate

Leaves = Iterator[tuple[list[int], Any, NestedArray]]


def _matches(value: Any, search_element: Any) -> bool:
    return value is search_element or value == search_element


def _first_equal(leaves: Leaves, search_element: Any) -> list[int] | None:
    for indices, value, _parent in leaves:
        if _matches(value, search_element):
            return indices
    return None


def _first_match(array: NestedArray, leaves: Leaves, predicate: Callable[..., Any]) -> tuple[list[int], Any] | None:
    func = adapt_callback(predicate)
    for indices, value, parent in leaves:
        if func(value, indices, array, parent):
            return indices, value
    return None


def _all_match(array: NestedArray, leaves: Leaves, predicate: Callable[..., Any]) -> bool:
    func = adapt_callback(predicate)
    for indices, value, parent in leaves:
        if not func(value, indices, array, parent):
            return False
    return True


def nested_includes(
    array: NestedArray,
    search_element: Any,
    from_indices: Sequence[Index] | None = None,
    max_depth: int | float | None = None,
) -> bool:
    """Whether any leaf equals `search_element`, searching forwards.

    >>> nested_includes([[0, 1, 2], [3, 4, 5]], 3)
    True
    >>> nested_includes([[0, 1, 2], [3, 4, 5]], 3, [0, 1])
    False
    """
    return _first_equal(nested_enumerate(array, from_indices, max_depth), search_element) is not None


def nested_includes_from_last(
    array: NestedArray,
    search_element: Any,
    from_indices: Sequence[Index] | None = None,
    max_depth: int | float | None = None,
) -> bool:
    """Whether any leaf equals `search_element`, searching backwards."""
    leaves = nested_enumerate(array, from_indices, max_depth, reverse=True)
    return _first_equal(leaves, search_element) is not None


def nested_index_of(
    array: NestedArray,
    search_element: Any,
    from_indices: Sequence[Index] | None = None,
    max_depth: int | float | None = None,
) -> list[int] | None:
    """Coordinates of the first leaf equal to `search_element`, or None."""
    return _first_equal(nested_enumerate(array, from_indices, max_depth), search_element)


def nested_last_index_of(
    array: NestedArray,
    search_element: Any,
    from_indices: Sequence[Index] | None = None,
    max_depth: int | float | None = None,
) -> list[int] | None:
    """Coordinates of the last leaf equal to `search_element`, or None."""
    return _first_equal(nested_enumerate(array, from_indices, max_depth, reverse=True), search_element)


def nested_find(
    array: NestedArray,
    predicate: Callable[..., Any],
    from_indices: Sequence[Index] | None = None,
    max_depth: int | float | None = None,
) -> Any:
    """First leaf for which `predicate(value, indices, root, parent)` is truthy, or None."""
    found = _first_match(array, nested_enumerate(array, from_indices, max_depth), predicate)
    return None if found is None else found[1]


def nested_find_last(
    array: NestedArray,
    predicate: Callable[..., Any],
    from_indices: Sequence[Index] | None = None,
    max_depth: int | float | None = None,
) -> Any:
    found = _first_match(array, nested_enumerate(array, from_indices, max_depth, reverse=True), predicate)
    return None if found is None else found[1]


def nested_find_index(
    array: NestedArray,
    predicate: Callable[..., Any],
    from_indices: Sequence[Index] | None = None,
    max_depth: int | float | None = None,
) -> list[int] | None:
    """Coordinates of the first leaf satisfying `predicate`, or None.

    >>> nested_find_index([[0, 1, 2], [3, 4, 5]], lambda n: n % 6 == 3)
    [1, 0]
    """
    found = _first_match(array, nested_enumerate(array, from_indices, max_depth), predicate)
    return None if found is None else found[0]


def nested_find_last_index(
    array: NestedArray,
    predicate: Callable[..., Any],
    from_indices: Sequence[Index] | None = None,
    max_depth: int | float | None = None,
) -> list[int] | None:
    found = _first_match(array, nested_enumerate(array, from_indices, max_depth, reverse=True), predicate)
    return None if found is None else found[0]


def nested_some(
    array: NestedArray,
    predicate: Callable[..., Any],
    from_indices: Sequence[Index] | None = None,
    max_depth: int | float | None = None,
) -> bool:
    return _first_match(array, nested_enumerate(array, from_indices, max_depth), predicate) is not None


def nested_some_from_last(
    array: NestedArray,
    predicate: Callable[..., Any],
    from_indices: Sequence[Index] | None = None,
    max_depth: int | float | None = None,
) -> bool:
    leaves = nested_enumerate(array, from_indices, max_depth, reverse=True)
    return _first_match(array, leaves, predicate) is not None


def nested_every(
    array: NestedArray,
    predicate: Callable[..., Any],
    from_indices: Sequence[Index] | None = None,
    max_depth: int | float | None = None,
) -> bool:
    """Whether every leaf satisfies `predicate`; vacuously True with no leaves."""
    return _all_match(array, nested_enumerate(array, from_indices, max_depth), predicate)


def nested_every_from_last(
    array: NestedArray,
    predicate: Callable[..., Any],
    from_indices: Sequence[Index] | None = None,
    max_depth: int | float | None = None,
) -> bool:
    return _all_match(array, nested_enumerate(array, from_indices, max_depth, reverse=True), predicate)
