#!/usr/bin/env python
"""Quick-start guide for bktreex library usage.

Run with: python -m bktreex
"""

from __future__ import annotations

QUICKSTART = """\
================================================================================
                                  BKTREEX
        BK-trees for fuzzy lookup over Hamming and Levenshtein distance
================================================================================

INSTALLATION
------------
    pip install bktreex

BASIC USAGE (Levenshtein)
-------------------------
    from bktreex import BKTree

    tree = BKTree("levenshtein")
    tree.insert_all(["isValid", "isInvalid", "valid", "invalid", "validated"])

    # Lazy: results are computed as you iterate
    for word, distance in tree.find("inInvald", 2):
        print(f"Did you mean '{word}'? ({distance} edits)")

    # Eager
    matches = tree.find("inInvald", 2).collect()

    # Results come out breadth-first; sort them yourself if needed
    matches.sort(key=lambda match: match[1])

HAMMING DISTANCE
----------------
    tree = BKTree("hamming")
    tree.insert_all([0, 4, 5, 14, 15])       # bit differences between ints
    tree.find(13, 1).collect()               # [(5, 1), (15, 1)]

    # Text is compared codepoint by codepoint over the shorter length only.
    # Use Levenshtein when string lengths vary.

CUSTOM METRICS
--------------
    from bktreex import BKTree, Metric

    def manhattan(a, b):
        return sum(abs(x - y) for x, y in zip(a, b))

    tree = BKTree(Metric.from_callable(manhattan, value_types=(tuple,)))

    The metric must return non-negative integers and satisfy the triangle
    inequality, otherwise range queries can miss matches.

CONFIGURATION
-------------
    BKTREEX_METRIC              default metric name (levenshtein)
    BKTREEX_ENABLE_NUMBA        use Numba kernels for text metrics (0)
    BKTREEX_ENABLE_DIAGNOSTICS  CPU/RSS fields in operation logs (1)
    BKTREEX_LOG_LEVEL           level of the "bktreex" logger (INFO)

SPELL CLI
---------
    python -m cli.spell inInvald --max-dist 2
    python -m cli.spell recieve --words /usr/share/dict/words

================================================================================
"""


def main() -> None:
    """Print quick-start guide."""
    print(QUICKSTART)


if __name__ == "__main__":
    main()
