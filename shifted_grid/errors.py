"""Exception hierarchy for the shifted grid package.

Only two kinds of failure escape this package: bad input, which is rejected
at the call that received it, and internal consistency violations, which
mean the geometry code itself is wrong.  Geometric queries that merely have
no answer (non-colinear coordinates, parallel lines) return sentinels from
:mod:`shifted_grid.coords` instead of raising.
"""

from __future__ import annotations


class ShiftedGridError(Exception):
    """Base class for all errors raised by this package."""


class InvalidArgumentError(ShiftedGridError, ValueError):
    """Raised when a parameter is outside its documented domain."""

    def __init__(self, param_name: str, reason: str | None = None) -> None:
        if reason:
            message = f"Invalid value for '{param_name}': {reason}"
            self.param_name: str | None = param_name
        else:
            message = param_name
            self.param_name = None
        super().__init__(message)


class InvalidIndexError(InvalidArgumentError):
    """Raised when a spiral index is negative or not an integer."""

    def __init__(self, index: object) -> None:
        self.index = index
        super().__init__("index", f"expected a non-negative integer, got {index!r}")


class InternalConsistencyError(ShiftedGridError, RuntimeError):
    """Raised when the inverse spiral lookup cannot be derived geometrically.

    This signals a bug in the grid math, never bad input, and must not be
    caught and defaulted.
    """

    def __init__(self, coord: object, reason: str) -> None:
        self.coord = coord
        super().__init__(f"Cannot resolve spiral index of {coord}: {reason}")
