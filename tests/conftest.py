from __future__ import annotations

import pytest

from bktreex import config as bk_config

_RUNTIME_ENV_VARS = (
    "BKTREEX_METRIC",
    "BKTREEX_ENABLE_NUMBA",
    "BKTREEX_ENABLE_DIAGNOSTICS",
    "BKTREEX_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolated_runtime(monkeypatch: pytest.MonkeyPatch):
    for key in _RUNTIME_ENV_VARS:
        monkeypatch.delenv(key, raising=False)
    bk_config.reset_runtime_config_cache()
    yield
    bk_config.reset_runtime_config_cache()
