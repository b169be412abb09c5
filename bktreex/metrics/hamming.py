"""Hamming distance over integers and text.

Integers
    Number of differing bits, ``popcount(a ^ b)``. NumPy integer scalars use
    their dtype width; Python ints are read as 64-bit two's complement words,
    so ``-1`` and ``2**64 - 1`` are the same word. Both operands must have the
    same width: a Python int pairs with ``int64`` or ``uint64`` only.

Text
    ``str`` operands, or byte strings decoded as strict UTF-8, are compared
    codepoint by codepoint over the length of the *shorter* operand. The tail
    of the longer operand is ignored::

        >>> hamming_distance("karolin", "kathrin")
        3
        >>> hamming_distance("abc", "abcdef")
        0

    This undercounts dissimilarity for text of different lengths. Prefer
    Levenshtein when lengths vary.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from bktreex.errors import UnsupportedTypeError

from ._text import TEXT_TYPES, as_codepoints, is_text

_WORD_BITS = 64
_WORD_MASK = (1 << _WORD_BITS) - 1
_WORD_MIN = -(1 << (_WORD_BITS - 1))
_WORD_MAX = _WORD_MASK

INTEGER_TYPES = (int, np.integer)


def _is_integer(value: Any) -> bool:
    return isinstance(value, INTEGER_TYPES) and not isinstance(value, (bool, np.bool_))


def _word_bits(value: Any) -> int:
    if isinstance(value, np.integer):
        return int(value.dtype.itemsize) * 8
    return _WORD_BITS


def _as_word(value: Any) -> int:
    raw = int(value)
    if not isinstance(value, np.integer) and not _WORD_MIN <= raw <= _WORD_MAX:
        raise UnsupportedTypeError(
            f"Integer {raw} does not fit in a {_WORD_BITS}-bit word."
        )
    return raw


def hamming_bits(lhs: Any, rhs: Any) -> int:
    """Population count of ``lhs ^ rhs`` for fixed-width integers."""

    width = _word_bits(lhs)
    other = _word_bits(rhs)
    if width != other:
        raise UnsupportedTypeError(
            f"Cannot compare a {width}-bit integer with a {other}-bit integer."
        )
    mask = (1 << width) - 1
    return ((_as_word(lhs) ^ _as_word(rhs)) & mask).bit_count()


def hamming_text(lhs: Any, rhs: Any) -> int:
    """Count mismatched codepoints over the shorter operand's length."""

    a = as_codepoints(lhs)
    b = as_codepoints(rhs)
    length = min(a.shape[0], b.shape[0])
    if length == 0:
        return 0
    return int(np.count_nonzero(a[:length] != b[:length]))


def hamming_distance(lhs: Any, rhs: Any) -> int:
    if _is_integer(lhs) and _is_integer(rhs):
        return hamming_bits(lhs, rhs)
    if is_text(lhs) and is_text(rhs):
        return hamming_text(lhs, rhs)
    raise UnsupportedTypeError(
        "Hamming distance supports two integers or two text values, "
        f"got {type(lhs).__name__} and {type(rhs).__name__}."
    )


def validate_hamming_operand(value: Any) -> None:
    """Raise if ``value`` could never be compared under Hamming distance."""

    if _is_integer(value):
        _as_word(value)
    elif is_text(value):
        as_codepoints(value)
    else:
        raise UnsupportedTypeError(
            f"Hamming distance supports integers and text, got {type(value).__name__}."
        )


HAMMING_VALUE_TYPES = INTEGER_TYPES + TEXT_TYPES

__all__ = [
    "HAMMING_VALUE_TYPES",
    "hamming_bits",
    "hamming_distance",
    "hamming_text",
    "validate_hamming_operand",
]
