"""Core BK-tree structures and the metric registry."""

from .metrics import (
    DistanceKernel,
    Metric,
    MetricLike,
    MetricRegistry,
    available_metrics,
    checked_distance,
    get_metric,
    register_metric,
    resolve_metric,
)
from .tree import BKNode, BKTree, TreeLogStats

__all__ = [
    "BKNode",
    "BKTree",
    "TreeLogStats",
    "DistanceKernel",
    "Metric",
    "MetricLike",
    "MetricRegistry",
    "available_metrics",
    "checked_distance",
    "get_metric",
    "register_metric",
    "resolve_metric",
]
