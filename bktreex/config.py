from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict

_LOGGER = logging.getLogger("bktreex")

_SUPPORTED_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}
_DEFAULT_METRIC = "levenshtein"
_DEFAULT_LOG_LEVEL = "INFO"


def _bool_from_env(value: str | None, *, default: bool) -> bool:
    if value is None:
        return default
    value = value.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return default


def _normalise_log_level(value: str | None) -> str:
    if value is None or value.strip() == "":
        return _DEFAULT_LOG_LEVEL
    level = value.strip().upper()
    if level not in _SUPPORTED_LOG_LEVELS:
        raise ValueError(
            f"Unsupported log level '{value}'. Expected one of {sorted(_SUPPORTED_LOG_LEVELS)}."
        )
    return level


def _normalise_metric(value: str | None) -> str:
    if value is None:
        return _DEFAULT_METRIC
    return value.strip().lower() or _DEFAULT_METRIC


@dataclass(frozen=True)
class RuntimeConfig:
    metric: str
    enable_numba: bool
    enable_diagnostics: bool
    log_level: str

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        metric = _normalise_metric(os.getenv("BKTREEX_METRIC"))
        enable_numba = _bool_from_env(os.getenv("BKTREEX_ENABLE_NUMBA"), default=False)
        enable_diagnostics = _bool_from_env(
            os.getenv("BKTREEX_ENABLE_DIAGNOSTICS"), default=True
        )
        log_level = _normalise_log_level(os.getenv("BKTREEX_LOG_LEVEL"))
        return cls(
            metric=metric,
            enable_numba=enable_numba,
            enable_diagnostics=enable_diagnostics,
            log_level=log_level,
        )


def _configure_logging(level: str) -> None:
    logger = logging.getLogger("bktreex")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        formatter = logging.Formatter("%(levelname)s %(name)s: %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)


@lru_cache(maxsize=None)
def runtime_config() -> RuntimeConfig:
    config = RuntimeConfig.from_env()
    _configure_logging(config.log_level)
    if config.enable_numba:
        _LOGGER.debug("Numba kernels enabled for text metrics.")
    return config


def reset_runtime_config_cache() -> None:
    runtime_config.cache_clear()


def describe_runtime() -> Dict[str, Any]:
    """Return a serialisable view of the active runtime configuration."""

    config = runtime_config()
    return {
        "metric": config.metric,
        "enable_numba": config.enable_numba,
        "enable_diagnostics": config.enable_diagnostics,
        "log_level": config.log_level,
    }


__all__ = [
    "RuntimeConfig",
    "describe_runtime",
    "reset_runtime_config_cache",
    "runtime_config",
]
