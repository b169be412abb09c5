"""Exception types raised by bktreex."""

from __future__ import annotations


class BKTreeError(Exception):
    """Base class for bktreex failures."""


class EncodingError(BKTreeError, ValueError):
    """A text metric received an operand that is not valid UTF-8/Unicode."""


class UnsupportedTypeError(BKTreeError, TypeError):
    """A metric was asked to compare values of a type it cannot handle."""


class MetricError(BKTreeError, ValueError):
    """A distance function returned something other than a non-negative integer."""


__all__ = [
    "BKTreeError",
    "EncodingError",
    "MetricError",
    "UnsupportedTypeError",
]
