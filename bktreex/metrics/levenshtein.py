from __future__ import annotations

from typing import Any

from bktreex import config as bk_config
from bktreex.errors import UnsupportedTypeError

from ._levenshtein_numba import levenshtein_codepoints
from ._text import TEXT_TYPES, as_codepoints, as_text, is_text


def _levenshtein_python(shorter: str, longer: str) -> int:
    # One row of running costs, indexed by position in ``shorter``.
    row = list(range(1, len(shorter) + 1))
    result = 0
    for j, cb in enumerate(longer):
        result = j
        diagonal = j
        for i, ca in enumerate(shorter):
            substitution = diagonal if ca == cb else diagonal + 1
            diagonal = row[i]
            if diagonal > result:
                result = result + 1 if substitution > result else substitution
            elif substitution > diagonal:
                result = diagonal + 1
            else:
                result = substitution
            row[i] = result
    return result


def levenshtein_distance(lhs: Any, rhs: Any) -> int:
    """Minimum number of codepoint insertions, deletions and substitutions.

    Operands are ``str`` or UTF-8 byte strings and are compared as decoded
    codepoints, so ``"青い花"`` and ``"蒼い花"`` are one edit apart even though
    their encodings differ in three bytes.
    """

    if not (is_text(lhs) and is_text(rhs)):
        raise UnsupportedTypeError(
            "Levenshtein distance supports text values only, "
            f"got {type(lhs).__name__} and {type(rhs).__name__}."
        )
    if type(lhs) is type(rhs) and lhs == rhs:
        return 0

    if bk_config.runtime_config().enable_numba:
        a = as_codepoints(lhs)
        b = as_codepoints(rhs)
        if a.shape[0] == 0 or b.shape[0] == 0:
            return int(max(a.shape[0], b.shape[0]))
        if a.shape[0] > b.shape[0]:
            a, b = b, a
        return int(levenshtein_codepoints(a, b))

    a_text = as_text(lhs)
    b_text = as_text(rhs)
    if not a_text or not b_text:
        return max(len(a_text), len(b_text))
    if len(a_text) > len(b_text):
        a_text, b_text = b_text, a_text
    return _levenshtein_python(a_text, b_text)


def validate_levenshtein_operand(value: Any) -> None:
    """Raise if ``value`` is not text or not valid UTF-8."""

    as_text(value)


LEVENSHTEIN_VALUE_TYPES = TEXT_TYPES

__all__ = [
    "LEVENSHTEIN_VALUE_TYPES",
    "levenshtein_distance",
    "validate_levenshtein_operand",
]
