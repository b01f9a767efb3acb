"""
Exception types raised by the grid search engine.

Every error derives from GridPathError and from the builtin exception the
calling code would otherwise expect, so ``except ValueError`` and friends
keep working for callers that do not know about this module.

An exhausted frontier is not an error: it is reported as a Failed status.
"""

from __future__ import annotations


class GridPathError(Exception):
    """Base class for all gridpath errors."""


class InvalidDimensions(GridPathError, ValueError):
    """Grid width or height is not positive."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height


class OutOfBounds(GridPathError, IndexError):
    """A coordinate or arena index falls outside the grid."""


class InvalidState(GridPathError, RuntimeError):
    """An engine operation was called in a state that does not allow it."""


class EmptyQueue(GridPathError, IndexError):
    """dequeue() or peek() on an empty priority queue."""


class UnknownAlgorithm(GridPathError, ValueError):
    """No expansion strategy is registered under the requested name."""


class InvalidLayout(GridPathError, ValueError):
    """A board layout or search configuration is malformed."""
