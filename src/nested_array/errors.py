"""Structured error types for nested-array usage and conversion failures."""

from __future__ import annotations

from dataclasses import dataclass


class NestedArrayError(Exception):
    """Base class for structured nested-array errors."""


class NestedArrayUsageError(NestedArrayError, ValueError):
    """Caller misuse detected before any traversal starts."""


class EmptySequenceError(NestedArrayUsageError):
    """A shape or separator sequence that must be non-empty was empty."""

    def __init__(self, message: str = "The length of the array must not be zero") -> None:
        super().__init__(message)


class InvalidDepthError(NestedArrayUsageError):
    """`max_depth` was below 1 (or not a number at all)."""

    def __init__(self, max_depth: object) -> None:
        super().__init__(f"max_depth argument must be at least 1, got {max_depth!r}")
        self.max_depth = max_depth


@dataclass(frozen=True)
class RaggedArrayError(NestedArrayError, ValueError):
    """Raised when a nested array cannot be packed into a rectangular array."""

    indices: tuple[int, ...]
    expected: int | None
    found: int | None

    def __str__(self) -> str:
        where = "[" + ", ".join(str(i) for i in self.indices) + "]"
        if self.expected is None:
            return f"unexpected nested array at {where}; sibling branches end in leaves at this depth"
        if self.found is None:
            return f"expected a nested array of length {self.expected} at {where}, found a leaf"
        return f"expected length {self.expected} at {where}, found {self.found}"
