"""Per-operation resource logging.

``log_operation`` wraps a tree operation and emits a single INFO record of the
form ``op=<name> wall_ms=... cpu_user_ms=... rss_delta=... key=value ...``.
CPU and RSS sampling go through :mod:`psutil` and can be switched off with
``BKTREEX_ENABLE_DIAGNOSTICS=0``, in which case those fields read ``NA``.
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator

import psutil

from bktreex import config as bk_config


@dataclass
class OperationLog:
    op: str
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, **values: Any) -> None:
        self.metadata.update(values)


@dataclass(frozen=True)
class _ResourceSample:
    cpu_user: float
    rss: int


def _sample(process: psutil.Process | None) -> _ResourceSample | None:
    if process is None:
        return None
    cpu = process.cpu_times()
    memory = process.memory_info()
    return _ResourceSample(cpu_user=float(cpu.user), rss=int(memory.rss))


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:.3f}"
    return str(value)


def _render(
    record: OperationLog,
    *,
    wall_seconds: float,
    before: _ResourceSample | None,
    after: _ResourceSample | None,
) -> str:
    parts = [f"op={record.op}", f"wall_ms={wall_seconds * 1e3:.3f}"]
    if before is None or after is None:
        parts.append("cpu_user_ms=NA")
        parts.append("rss_delta=NA")
    else:
        parts.append(f"cpu_user_ms={(after.cpu_user - before.cpu_user) * 1e3:.3f}")
        parts.append(f"rss_delta={after.rss - before.rss}")
    for key, value in record.metadata.items():
        parts.append(f"{key}={_format_value(value)}")
    return " ".join(parts)


@contextmanager
def log_operation(
    logger: logging.Logger,
    op: str,
    *,
    level: int = logging.INFO,
) -> Iterator[OperationLog]:
    """Time the wrapped block and log a summary line once it completes."""

    runtime = bk_config.runtime_config()
    process = psutil.Process() if runtime.enable_diagnostics else None
    record = OperationLog(op=op)
    before = _sample(process)
    start = time.perf_counter()
    yield record
    wall_seconds = time.perf_counter() - start
    after = _sample(process)
    if logger.isEnabledFor(level):
        logger.log(
            level,
            _render(record, wall_seconds=wall_seconds, before=before, after=after),
        )


__all__ = ["OperationLog", "log_operation"]
