"""Callback arity adaptation.

Traversal callbacks are offered `(value, indices, root, parent)`, but
callers may accept only a prefix of those arguments (`lambda n: n + 1`),
so each callback is wrapped once per call to receive exactly as many
positional arguments as its signature takes.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def positional_arity(func: Callable[..., Any], limit: int) -> int:
    """Number of leading positional arguments `func` can take, capped at `limit`."""
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        # Some builtins expose no signature; they are called with the value only.
        return 1
    count = 0
    for param in sig.parameters.values():
        if param.kind == inspect.Parameter.VAR_POSITIONAL:
            return limit
        if param.kind in _POSITIONAL:
            count += 1
    return min(count, limit)


def adapt_callback(func: Callable[..., Any], limit: int = 4) -> Callable[..., Any]:
    if not callable(func):
        raise TypeError(f"{type(func).__name__!r} object is not callable")
    arity = positional_arity(func, limit)
    if arity == limit:
        return func
    return lambda *args: func(*args[:arity])
