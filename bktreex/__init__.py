"""bktreex: BK-trees for approximate matching over discrete metrics.

Quick Start
-----------
>>> from bktreex import BKTree
>>>
>>> tree = BKTree("levenshtein")
>>> tree.insert_all(["book", "books", "boo", "boon", "cook", "cake", "cape", "cart"])
>>> tree.find("bo", 2).collect()
[('book', 2), ('boo', 1), ('boon', 2)]

Integers under Hamming distance
-------------------------------
>>> tree = BKTree.from_values([0, 4, 5, 14, 15], metric="hamming")
>>> list(tree.find(13, 1))
[(5, 1), (15, 1)]

Classes
-------
BKTree : The index; insert values, then run range queries with ``find``.
RangeQuery : Lazy result sequence returned by ``BKTree.find``.
Metric : Distance kernel record; wrap custom callables with ``Metric.from_callable``.
"""

from importlib.metadata import version as _pkg_version

try:
    __version__ = _pkg_version("bktreex")
except Exception:  # pragma: no cover - best effort during local development
    __version__ = "0.0.1"

from .core import (
    BKNode,
    BKTree,
    Metric,
    MetricRegistry,
    TreeLogStats,
    available_metrics,
    get_metric,
    register_metric,
)
from .errors import BKTreeError, EncodingError, MetricError, UnsupportedTypeError
from .metrics import hamming_distance, levenshtein_distance
from .queries import QueryStats, RangeQuery

__all__ = [
    "__version__",
    "BKTree",
    "BKNode",
    "TreeLogStats",
    "RangeQuery",
    "QueryStats",
    "Metric",
    "MetricRegistry",
    "available_metrics",
    "get_metric",
    "register_metric",
    "hamming_distance",
    "levenshtein_distance",
    "BKTreeError",
    "EncodingError",
    "MetricError",
    "UnsupportedTypeError",
]
