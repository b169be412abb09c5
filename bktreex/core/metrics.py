from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Protocol, Tuple, Union

from bktreex import config as bk_config
from bktreex.errors import MetricError
from bktreex.metrics import (
    HAMMING_VALUE_TYPES,
    LEVENSHTEIN_VALUE_TYPES,
    hamming_distance,
    levenshtein_distance,
    validate_hamming_operand,
    validate_levenshtein_operand,
)


class DistanceKernel(Protocol):
    def __call__(self, lhs: Any, rhs: Any) -> int:
        ...


@dataclass(frozen=True)
class Metric:
    """Container for a distance kernel used by tree algorithms.

    ``value_types`` lists the operand types the kernel accepts; an empty tuple
    means the kernel does its own type checking. ``validator`` checks a single
    operand up front and raises the error the kernel would raise for it.
    """

    name: str
    kernel: DistanceKernel
    value_types: Tuple[type, ...] = ()
    validator: Optional[Callable[[Any], None]] = None

    def distance(self, lhs: Any, rhs: Any) -> int:
        return self.kernel(lhs, rhs)

    def validate(self, value: Any) -> None:
        if self.validator is not None:
            self.validator(value)

    def supports(self, value_type: type) -> bool:
        if not self.value_types:
            return True
        return issubclass(value_type, self.value_types)

    @classmethod
    def from_callable(
        cls,
        func: Callable[[Any, Any], int],
        *,
        name: str | None = None,
        value_types: Tuple[type, ...] = (),
        validator: Optional[Callable[[Any], None]] = None,
    ) -> "Metric":
        label = name or getattr(func, "__name__", None) or "custom"
        return cls(
            name=label,
            kernel=func,
            value_types=tuple(value_types),
            validator=validator,
        )


MetricLike = Union[Metric, str, Callable[[Any, Any], int], None]


class MetricRegistry:
    """Minimal registry for runtime-selectable metrics."""

    def __init__(self) -> None:
        self._metrics: Dict[str, Metric] = {}

    def register(self, metric: Metric, *, overwrite: bool = False) -> None:
        name = metric.name.lower()
        if not overwrite and name in self._metrics:
            raise ValueError(f"Metric '{metric.name}' already registered.")
        self._metrics[name] = metric

    def get(self, name: str) -> Metric:
        key = name.lower()
        if key not in self._metrics:
            raise KeyError(f"Metric '{name}' not registered.")
        return self._metrics[key]

    def names(self) -> Tuple[str, ...]:
        return tuple(sorted(self._metrics.keys()))


def _load_runtime_registry() -> MetricRegistry:
    registry = MetricRegistry()
    registry.register(
        Metric(
            name="hamming",
            kernel=hamming_distance,
            value_types=HAMMING_VALUE_TYPES,
            validator=validate_hamming_operand,
        )
    )
    registry.register(
        Metric(
            name="levenshtein",
            kernel=levenshtein_distance,
            value_types=LEVENSHTEIN_VALUE_TYPES,
            validator=validate_levenshtein_operand,
        )
    )
    return registry


_REGISTRY = _load_runtime_registry()


def get_metric(name: str | None = None) -> Metric:
    """Return a registered metric, defaulting to the runtime-selected metric."""

    if name is None:
        name = bk_config.runtime_config().metric
    return _REGISTRY.get(name)


def register_metric(metric: Metric, *, overwrite: bool = False) -> None:
    _REGISTRY.register(metric, overwrite=overwrite)


def available_metrics() -> Tuple[str, ...]:
    return _REGISTRY.names()


def resolve_metric(metric: MetricLike) -> Metric:
    """Coerce a metric name, callable or ``Metric`` into a ``Metric``."""

    if isinstance(metric, Metric):
        return metric
    if metric is None or isinstance(metric, str):
        return get_metric(metric)
    if callable(metric):
        return Metric.from_callable(metric)
    raise TypeError(
        f"Expected a metric name, Metric or callable, got {type(metric).__name__}."
    )


def checked_distance(metric: Metric, lhs: Any, rhs: Any) -> int:
    """Evaluate ``metric`` and verify the result is a non-negative integer."""

    raw = metric.distance(lhs, rhs)
    if isinstance(raw, bool):
        raise MetricError(f"Metric '{metric.name}' returned a bool, expected an integer.")
    try:
        value = operator.index(raw)
    except TypeError as exc:
        raise MetricError(
            f"Metric '{metric.name}' returned {raw!r}; distances must be integers."
        ) from exc
    if value < 0:
        raise MetricError(f"Metric '{metric.name}' returned negative distance {value}.")
    return value


__all__ = [
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
