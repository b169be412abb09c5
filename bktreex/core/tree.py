from __future__ import annotations

import numbers
from collections import deque
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator

from bktreex.core.metrics import Metric, MetricLike, checked_distance, resolve_metric
from bktreex.diagnostics import log_operation
from bktreex.errors import UnsupportedTypeError
from bktreex.logging import get_logger
from bktreex.queries.range import RangeQuery

LOGGER = get_logger("core.tree")


class BKNode:
    """A stored value plus its children keyed by distance from that value."""

    __slots__ = ("value", "children")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.children: Dict[int, BKNode] = {}

    def __repr__(self) -> str:
        return f"BKNode(value={self.value!r}, children={sorted(self.children)})"


@dataclass
class TreeLogStats:
    num_nodes: int = 0
    num_duplicates: int = 0


class BKTree:
    """Burkhard-Keller tree over a discrete metric.

    Parameters
    ----------
    metric:
        Registered metric name (``"hamming"``, ``"levenshtein"``), a
        :class:`~bktreex.core.metrics.Metric`, or any callable
        ``distance(a, b) -> int``. ``None`` selects ``BKTREEX_METRIC``.
        The metric must satisfy the triangle inequality or ``find`` may miss
        matches.
    value_type:
        Optional type every inserted value and query target must be an
        instance of. It is checked against the metric's supported types when
        the tree is built.
    """

    def __init__(self, metric: MetricLike = None, *, value_type: type | None = None) -> None:
        self.metric: Metric = resolve_metric(metric)
        if value_type is not None and not self.metric.supports(value_type):
            raise UnsupportedTypeError(
                f"Metric '{self.metric.name}' does not support values of type "
                f"{value_type.__name__}."
            )
        self.value_type = value_type
        self.root: BKNode | None = None
        self.stats = TreeLogStats()

    @classmethod
    def from_values(
        cls,
        values: Iterable[Any],
        *,
        metric: MetricLike = None,
        value_type: type | None = None,
    ) -> "BKTree":
        tree = cls(metric, value_type=value_type)
        tree.insert_all(values)
        return tree

    def is_empty(self) -> bool:
        return self.root is None

    def __len__(self) -> int:
        return self.stats.num_nodes

    def __iter__(self) -> Iterator[Any]:
        """Yield stored values breadth-first."""

        if self.root is None:
            return
        pending = deque([self.root])
        while pending:
            node = pending.popleft()
            yield node.value
            pending.extend(node.children.values())

    def __contains__(self, value: Any) -> bool:
        """Exact-match lookup; values the tree cannot compare are never members."""

        try:
            return next(self.find(value, 0), None) is not None
        except UnsupportedTypeError:
            return False

    def __repr__(self) -> str:
        return f"BKTree(metric={self.metric.name!r}, size={len(self)})"

    def _check_type(self, value: Any) -> None:
        if self.value_type is not None and not isinstance(value, self.value_type):
            raise UnsupportedTypeError(
                f"Tree holds {self.value_type.__name__} values, got {type(value).__name__}."
            )

    def insert(self, value: Any) -> None:
        """Insert ``value``; inserting a value already present is a no-op."""

        self._check_type(value)
        if self.root is None:
            self.metric.validate(value)
            self.root = BKNode(value)
            self.stats.num_nodes += 1
            return

        current = self.root
        while True:
            distance = checked_distance(self.metric, current.value, value)
            if distance == 0:
                self.stats.num_duplicates += 1
                return
            child = current.children.get(distance)
            if child is None:
                current.children[distance] = BKNode(value)
                self.stats.num_nodes += 1
                return
            current = child

    def insert_all(self, values: Iterable[Any]) -> None:
        """Insert ``values`` in order, stopping at the first failure."""

        with log_operation(LOGGER, "insert_all") as op_log:
            nodes_before = self.stats.num_nodes
            duplicates_before = self.stats.num_duplicates
            for value in values:
                self.insert(value)
            op_log.add_metadata(
                metric=self.metric.name,
                inserted=self.stats.num_nodes - nodes_before,
                duplicates=self.stats.num_duplicates - duplicates_before,
                nodes=self.stats.num_nodes,
            )

    def find(self, target: Any, max_dist: int) -> RangeQuery:
        """Return a lazy sequence of ``(value, distance)`` within ``max_dist``."""

        if isinstance(max_dist, bool) or not isinstance(max_dist, numbers.Integral):
            raise ValueError(f"max_dist must be a non-negative integer, got {max_dist!r}.")
        max_dist = int(max_dist)
        if max_dist < 0:
            raise ValueError(f"max_dist must be non-negative, got {max_dist}.")
        self._check_type(target)
        return RangeQuery(self.root, target, max_dist, metric=self.metric)


__all__ = ["BKNode", "BKTree", "TreeLogStats"]
