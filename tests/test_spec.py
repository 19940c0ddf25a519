from __future__ import annotations

import dataclasses
import json

import pytest

from cadence_engine.config import get_settings, reset_settings_cache
from cadence_engine.core.errors import ConfigurationError
from cadence_engine.core.spec import PeriodConfig, config_from_dict, default_period_config, load_config


def test_default_config():
    cfg = default_period_config()
    assert (cfg.min_period, cfg.max_period, cfg.num_periods, cfg.samples_per_peak) == (
        0.1,
        8760.0,
        5,
        5,
    )
    cfg.validate()


def test_config_is_frozen():
    cfg = default_period_config()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.num_periods = 3  # type: ignore[misc]


def test_config_from_dict_accepts_both_key_styles():
    cfg = config_from_dict({"minPeriod": 1, "max_period": "48", "numPeriods": 2})
    assert cfg == PeriodConfig(min_period=1.0, max_period=48.0, num_periods=2, samples_per_peak=5)


def test_config_from_dict_rejects_garbage():
    with pytest.raises(ConfigurationError):
        config_from_dict({"minPeriod": "soon"})


def test_load_config(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"minPeriod": 0.5, "maxPeriod": 24, "numPeriods": 3, "samplesPerPeak": 7}))
    assert load_config(path) == PeriodConfig(0.5, 24.0, 3, 7)


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("CADENCE_MIN_PERIOD", "2")
    monkeypatch.setenv("CADENCE_NUM_PERIODS", "9")
    monkeypatch.setenv("CADENCE_LOG_LEVEL", "debug")
    reset_settings_cache()
    settings = get_settings()
    assert settings.period_config() == PeriodConfig(2.0, 8760.0, 9, 5)
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "cfg, message",
    [
        (PeriodConfig(float("nan"), 10.0, 3, 5), "finite"),
        (PeriodConfig(1.0, float("inf"), 3, 5), "finite"),
        (PeriodConfig(1e-310, 10.0, 3, 5), "frequency grid"),
    ],
)
def test_validate_rejects_non_finite_periods(cfg, message):
    with pytest.raises(ConfigurationError, match=message):
        cfg.validate()


def test_load_config_fills_gaps_from_base(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"numPeriods": 2}))
    assert load_config(path, PeriodConfig(1.0, 240.0, 9, 4)) == PeriodConfig(1.0, 240.0, 2, 4)


def test_load_config_rejects_malformed_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    with pytest.raises(ConfigurationError):
        load_config(path)
