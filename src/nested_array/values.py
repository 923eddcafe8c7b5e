"""Value model: deciding which values are traversable nodes and which are leaves."""

from __future__ import annotations

import sys
from collections.abc import Mapping
from enum import Enum

from .config import SETTINGS, Settings

_ATOMIC_SEQUENCE_TYPES = (str, bytes, bytearray)


class ValueKind(str, Enum):
    LEAF = "leaf"
    ARRAY = "array"
    JAX_ARRAY = "jax_array"
    ARRAY_LIKE = "array_like"


def is_jax_array(value: object) -> bool:
    # A jax array can only exist once jax has been imported by someone.
    jax = sys.modules.get("jax")
    return jax is not None and isinstance(value, jax.Array)


def _has_last_item(value: object) -> bool:
    try:
        length = len(value)
    except TypeError:
        # 0-d numpy/jax arrays define __len__ but are unsized.
        return False
    if length < 0:
        return False
    if length == 0:
        return True
    try:
        value[length - 1]
    except (IndexError, KeyError, TypeError):
        return False
    return True


def is_array_like(value: object, settings: Settings | None = None) -> bool:
    """Return True if `value` should be descended into rather than treated as a leaf."""
    if settings is None:
        settings = SETTINGS
    if isinstance(value, list):
        return True
    if isinstance(value, tuple):
        return not settings.tuples_as_leaves
    if isinstance(value, _ATOMIC_SEQUENCE_TYPES) or isinstance(value, Mapping):
        return False
    if settings.jax_arrays_as_leaves and is_jax_array(value):
        return False
    cls = type(value)
    if not (hasattr(cls, "__len__") and hasattr(cls, "__getitem__")):
        return False
    return _has_last_item(value)


def kind_of(value: object, settings: Settings | None = None) -> ValueKind:
    if isinstance(value, list):
        return ValueKind.ARRAY
    if not is_array_like(value, settings):
        return ValueKind.LEAF
    if is_jax_array(value):
        return ValueKind.JAX_ARRAY
    return ValueKind.ARRAY_LIKE
