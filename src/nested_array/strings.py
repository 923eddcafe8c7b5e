"""Multi-axis string splitting and joining."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

from .bounds import check_max_depth, require_non_empty
from .traversal import NestedArray
from .values import is_array_like

Separator = str | re.Pattern[str]

_DEFAULT_JOIN_SEPARATOR = ","


def _split_once(separator: Separator | None, content: str) -> list[str]:
    if separator is None:
        return [content]
    if isinstance(separator, re.Pattern):
        return separator.split(content)
    if separator == "":
        return list(content)
    return content.split(separator)


def nested_split(separators: Sequence[Separator | None], content: Any) -> list[Any]:
    """Split `content` with `separators[0]`, each piece with `separators[1]`, and so on.

    String separators match literally; compiled patterns split on matches.
    An empty string separator splits into single characters and `None`
    leaves the piece whole.

    >>> nested_split([re.compile(",|;"), ""], "AB,CD;EF")
    [['A', 'B'], ['C', 'D'], ['E', 'F']]
    """
    require_non_empty(separators)

    def recurse(axis: int, text: str) -> list[Any]:
        pieces = _split_once(separators[axis], text)
        if axis + 1 < len(separators):
            return [recurse(axis + 1, piece) for piece in pieces]
        return pieces

    return recurse(0, str(content))


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    if is_array_like(value):
        return _DEFAULT_JOIN_SEPARATOR.join(_stringify(value[index]) for index in range(len(value)))
    return str(value)


def nested_join(
    separators: Sequence[str | None],
    content: NestedArray,
    max_depth: int | float | None = None,
) -> str:
    """Join a nested array back into one string, using `separators[axis]` on each axis.

    Axes without a separator (or with `None`) use `","`. Leaves that are
    still array-like at `max_depth` are rendered comma-joined, and `None`
    renders as an empty string.

    >>> nested_join([",", ""], [[0, 1, 2], [3, 4, 5]])
    '012,345'
    """
    depth = check_max_depth(max_depth)

    def recurse(parent: NestedArray, axis: int) -> str:
        separator = separators[axis] if axis < len(separators) else None
        if separator is None:
            separator = _DEFAULT_JOIN_SEPARATOR
        parts = []
        for index in range(len(parent)):
            value = parent[index]
            if is_array_like(value) and axis + 1 < depth:
                parts.append(recurse(value, axis + 1))
            else:
                parts.append(_stringify(value))
        return separator.join(parts)

    return recurse(content, 0)
