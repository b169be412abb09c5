from __future__ import annotations

from typing import List, Tuple

import numpy as np
from numpy.random import Generator, default_rng

ASCII_LOWER = "abcdefghijklmnopqrstuvwxyz"


def _ensure_rng(rng: Generator | None) -> Generator:
    return rng or default_rng()


def random_words(
    rng: Generator | None,
    count: int,
    *,
    alphabet: str = ASCII_LOWER,
    min_length: int = 1,
    max_length: int = 8,
) -> List[str]:
    """Sample `count` words with lengths drawn uniformly from [min_length, max_length]."""

    generator = _ensure_rng(rng)
    if count <= 0:
        return []
    letters = np.asarray(list(alphabet))
    lengths = generator.integers(min_length, max_length + 1, size=count)
    return ["".join(generator.choice(letters, size=int(n))) for n in lengths]


def random_words_dataset(
    rng: Generator | None,
    *,
    tree_words: int,
    queries: int,
    alphabet: str = ASCII_LOWER,
    max_length: int = 8,
) -> Tuple[List[str], List[str]]:
    """Return `(words, queries)` drawn from the same word distribution."""

    generator = _ensure_rng(rng)
    words = random_words(generator, tree_words, alphabet=alphabet, max_length=max_length)
    query_words = random_words(generator, queries, alphabet=alphabet, max_length=max_length)
    return words, query_words


def random_ints(rng: Generator | None, count: int, *, bits: int = 16) -> List[int]:
    """Sample `count` non-negative integers below ``2**bits``."""

    generator = _ensure_rng(rng)
    if count <= 0:
        return []
    values = generator.integers(0, 1 << bits, size=count, dtype=np.int64)
    return [int(value) for value in values]
