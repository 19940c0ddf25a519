from __future__ import annotations

import pytest

from cadence_engine.config import reset_settings_cache


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    for name in (
        "CADENCE_MIN_PERIOD",
        "CADENCE_MAX_PERIOD",
        "CADENCE_NUM_PERIODS",
        "CADENCE_SAMPLES_PER_PEAK",
        "CADENCE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()
