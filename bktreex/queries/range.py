from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Deque, List, Tuple

from bktreex.core.metrics import Metric, checked_distance
from bktreex.diagnostics import log_operation
from bktreex.logging import get_logger

if TYPE_CHECKING:  # pragma: no cover - typing only
    from bktreex.core.tree import BKNode


LOGGER = get_logger("queries.range")

Match = Tuple[Any, int]


@dataclass
class QueryStats:
    visited: int = 0
    pruned: int = 0
    matches: int = 0


class RangeQuery:
    """Lazy breadth-first range query over a BK-tree.

    Each call to ``next`` pops candidates off a FIFO queue until one lies
    within ``max_dist`` of the target. Before a candidate's own result is
    returned, its children are enqueued unless their edge label ``k`` fails
    ``|k - d| <= max_dist``, where ``d`` is the candidate's distance to the
    target. By the triangle inequality every value below such a child is at
    least ``|k - d|`` away from the target, so no match is lost.

    Results come out in dequeue order, not sorted by distance. The query is
    single-use: once exhausted it stays exhausted. Yielded values are the
    objects stored in the tree, not copies.

    A candidate leaves the queue only after its distance has been computed,
    so if the metric raises, calling ``next`` again resumes at that candidate.
    """

    __slots__ = ("_metric", "_target", "_max_dist", "_candidates", "_exhausted", "stats")

    def __init__(
        self,
        root: "BKNode | None",
        target: Any,
        max_dist: int,
        *,
        metric: Metric,
    ) -> None:
        self._metric = metric
        self._target = target
        self._max_dist = max_dist
        self._candidates: Deque["BKNode"] = deque()
        if root is not None:
            self._candidates.append(root)
        self._exhausted = root is None
        self.stats = QueryStats()

    @property
    def target(self) -> Any:
        return self._target

    @property
    def max_dist(self) -> int:
        return self._max_dist

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def __iter__(self) -> "RangeQuery":
        return self

    def __next__(self) -> Match:
        candidates = self._candidates
        max_dist = self._max_dist
        while candidates:
            node = candidates[0]
            distance = checked_distance(self._metric, node.value, self._target)
            candidates.popleft()
            self.stats.visited += 1
            for label, child in node.children.items():
                if abs(label - distance) <= max_dist:
                    candidates.append(child)
                else:
                    self.stats.pruned += 1
            if distance <= max_dist:
                self.stats.matches += 1
                return node.value, distance
        self._exhausted = True
        raise StopIteration

    def collect(self) -> List[Match]:
        """Drain the remaining results into a list."""

        with log_operation(LOGGER, "range_query") as op_log:
            results = list(self)
            op_log.add_metadata(
                metric=self._metric.name,
                max_dist=self._max_dist,
                results=len(results),
                visited=self.stats.visited,
                pruned=self.stats.pruned,
            )
        return results


__all__ = ["Match", "QueryStats", "RangeQuery"]
