from __future__ import annotations

import numba as nb
import numpy as np

I64 = np.int64


@nb.njit(cache=False, nogil=True)
def levenshtein_codepoints(shorter: np.ndarray, longer: np.ndarray) -> int:
    """Single-row edit distance over two non-empty ``uint32`` codepoint arrays.

    The cost row is sized by ``shorter``.
    """

    n_short = shorter.shape[0]
    n_long = longer.shape[0]
    row = np.empty(n_short, dtype=I64)
    for i in range(n_short):
        row[i] = i + 1

    result = 0
    for j in range(n_long):
        cb = longer[j]
        result = j
        diagonal = j
        for i in range(n_short):
            if shorter[i] == cb:
                substitution = diagonal
            else:
                substitution = diagonal + 1
            diagonal = row[i]
            if diagonal > result:
                if substitution > result:
                    result = result + 1
                else:
                    result = substitution
            elif substitution > diagonal:
                result = diagonal + 1
            else:
                result = substitution
            row[i] = result
    return result


__all__ = ["levenshtein_codepoints"]
