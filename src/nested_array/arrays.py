"""Conversions between rectangular nested arrays and jax arrays."""

from __future__ import annotations

from typing import Any

import jax.numpy as jnp

from .bounds import check_max_depth
from .errors import NestedArrayUsageError, RaggedArrayError
from .traversal import NestedArray, nested_map, shape_at_origin
from .values import is_array_like


def _find_ragged(array: NestedArray, depth: int | float) -> RaggedArrayError | None:
    dims = shape_at_origin(array, depth)

    def check(node: NestedArray, indices: tuple[int, ...]) -> RaggedArrayError | None:
        axis = len(indices)
        if len(node) != dims[axis]:
            return RaggedArrayError(indices=indices, expected=dims[axis], found=len(node))
        for index in range(len(node)):
            value = node[index]
            child = indices + (index,)
            descend = is_array_like(value) and axis + 1 < depth
            if axis + 1 < len(dims):
                if not descend:
                    return RaggedArrayError(indices=child, expected=dims[axis + 1], found=None)
                error = check(value, child)
                if error is not None:
                    return error
            elif descend:
                return RaggedArrayError(indices=child, expected=None, found=len(value))
        return None

    return check(array, ())


def is_rectangular(array: NestedArray, max_depth: int | float | None = None) -> bool:
    """Whether every node on an axis has the same length and all leaves sit at one depth."""
    return _find_ragged(array, check_max_depth(max_depth)) is None


def to_jax(array: NestedArray, dtype: Any = None, max_depth: int | float | None = None) -> jnp.ndarray:
    """Pack a rectangular nested array into a jax array.

    Leaves at `max_depth` are passed to `jnp.asarray` as they are, so they
    must themselves be array-compatible if the structure goes deeper.
    """
    depth = check_max_depth(max_depth)
    error = _find_ragged(array, depth)
    if error is not None:
        raise error
    return jnp.asarray(nested_map(array, lambda value: value, max_depth), dtype=dtype)


def from_jax(value: Any) -> list[Any]:
    """Unpack a jax (or numpy) array of rank >= 1 into nested Python lists."""
    arr = jnp.asarray(value)
    if arr.ndim == 0:
        raise NestedArrayUsageError("cannot unpack a 0-d array into a nested array")
    return arr.tolist()
