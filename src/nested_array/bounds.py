"""Boundary-index normalization shared by every bounded traversal.

Each helper turns an optional, possibly negative or infinite index into a
concrete loop bound for one axis of one node. `None` means "no bound"; NaN
is treated the same way. Fractional indices are floored.
"""

from __future__ import annotations

import math
from collections.abc import Sequence, Sized

from .errors import EmptySequenceError, InvalidDepthError

Index = int | float | None


def _is_unbounded(index: Index) -> bool:
    return index is None or (isinstance(index, float) and math.isnan(index))


def axis_bound(indices: Sequence[Index] | None, axis: int) -> Index:
    """Entry `axis` of a per-axis bound vector, or None past its end."""
    if indices is None or axis >= len(indices):
        return None
    return indices[axis]


def to_valid_index(index: Index, array: Sized) -> int:
    """Inclusive forward start: ascending loops begin here."""
    if _is_unbounded(index) or index == -math.inf:
        return 0
    if index == math.inf:
        return len(array)
    if index >= 0:
        return math.floor(index)
    return max(len(array) + math.floor(index), 0)


def to_valid_last_index(index: Index, array: Sized) -> int:
    """Inclusive backward start: descending loops begin here.

    Negative inputs are not clamped from below, so a very negative index
    yields a start below -1 and the descending loop does not run at all.
    """
    if _is_unbounded(index) or index == math.inf:
        return len(array) - 1
    if index == -math.inf:
        return -1
    if index >= 0:
        return min(math.floor(index), len(array) - 1)
    return len(array) + math.floor(index)


def to_valid_end_index(index: Index, array: Sized) -> int:
    """Exclusive forward end."""
    if _is_unbounded(index) or index == math.inf:
        return len(array)
    if index == -math.inf:
        return 0
    if index >= 0:
        return min(math.floor(index), len(array))
    return len(array) + math.floor(index)


def check_max_depth(max_depth: int | float | None) -> int | float:
    """Validate `max_depth`, returning a floored int or `math.inf` when unbounded."""
    if max_depth is None or max_depth == math.inf:
        return math.inf
    if isinstance(max_depth, float) and math.isnan(max_depth):
        raise InvalidDepthError(max_depth)
    if max_depth < 1:
        raise InvalidDepthError(max_depth)
    return math.floor(max_depth)


def require_non_empty(values: Sized) -> None:
    if not len(values):
        raise EmptySequenceError()
