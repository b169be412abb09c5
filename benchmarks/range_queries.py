"""Compare BK-tree range queries against a brute-force scan.

Example::

    python -m benchmarks.range_queries --tree-words 20000 --queries 200 --max-dist 2
"""

from __future__ import annotations

import argparse
import json
import time
from dataclasses import asdict, dataclass
from typing import Dict, List

import numpy as np
from numpy.random import default_rng

from bktreex import BKTree, get_metric
from bktreex import config as bk_config
from tests.utils.datasets import random_ints, random_words_dataset


@dataclass(frozen=True)
class RangeBenchmarkResult:
    metric: str
    tree_words: int
    queries: int
    max_dist: int
    build_seconds: float
    tree_seconds: float
    brute_seconds: float
    mean_visited: float
    mean_results: float

    @property
    def speedup(self) -> float:
        return self.brute_seconds / self.tree_seconds if self.tree_seconds else float("inf")


def _ms(value: float) -> float:
    return float(value) * 1e3


def run_benchmark(
    *,
    metric: str,
    tree_words: int,
    queries: int,
    max_dist: int,
    seed: int,
) -> RangeBenchmarkResult:
    rng = default_rng(seed)
    if metric == "hamming":
        words: List = random_ints(rng, tree_words)
        query_words: List = random_ints(rng, queries)
    else:
        words, query_words = random_words_dataset(rng, tree_words=tree_words, queries=queries)

    start = time.perf_counter()
    tree = BKTree.from_values(words, metric=metric)
    build_seconds = time.perf_counter() - start

    visited = np.zeros(len(query_words), dtype=np.int64)
    result_counts = np.zeros(len(query_words), dtype=np.int64)
    start = time.perf_counter()
    for idx, query in enumerate(query_words):
        search = tree.find(query, max_dist)
        result_counts[idx] = sum(1 for _ in search)
        visited[idx] = search.stats.visited
    tree_seconds = time.perf_counter() - start

    distance = get_metric(metric).distance
    stored = list(tree)
    start = time.perf_counter()
    for query in query_words:
        _ = [value for value in stored if distance(value, query) <= max_dist]
    brute_seconds = time.perf_counter() - start

    return RangeBenchmarkResult(
        metric=metric,
        tree_words=len(stored),
        queries=len(query_words),
        max_dist=max_dist,
        build_seconds=build_seconds,
        tree_seconds=tree_seconds,
        brute_seconds=brute_seconds,
        mean_visited=float(np.mean(visited)) if visited.size else 0.0,
        mean_results=float(np.mean(result_counts)) if result_counts.size else 0.0,
    )


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--metric", choices=("levenshtein", "hamming"), default="levenshtein")
    parser.add_argument("--tree-words", type=int, default=10_000)
    parser.add_argument("--queries", type=int, default=100)
    parser.add_argument("--max-dist", type=int, default=2)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--json", action="store_true", help="Emit a JSON record instead of text.")
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    result = run_benchmark(
        metric=args.metric,
        tree_words=args.tree_words,
        queries=args.queries,
        max_dist=args.max_dist,
        seed=args.seed,
    )
    if args.json:
        record: Dict = asdict(result)
        record["speedup"] = result.speedup
        record["runtime"] = bk_config.describe_runtime()
        print(json.dumps(record, indent=2))
        return
    print(
        f"bktreex[{result.metric}] | words={result.tree_words} queries={result.queries} "
        f"max_dist={result.max_dist} build={result.build_seconds:.4f}s "
        f"tree={_ms(result.tree_seconds) / max(result.queries, 1):.4f}ms/q "
        f"brute={_ms(result.brute_seconds) / max(result.queries, 1):.4f}ms/q "
        f"speedup={result.speedup:.2f}x visited={result.mean_visited:.1f} "
        f"results={result.mean_results:.1f}"
    )


if __name__ == "__main__":
    main()
