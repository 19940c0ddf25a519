from __future__ import annotations

"""Simple settings loader with environment variables.

The ``get_settings`` function reads environment variables and caches the
resulting ``Settings`` object.  Tests may call ``reset_settings_cache`` to
force a reload when they modify environment variables at runtime.
"""

from dataclasses import dataclass
import os
from functools import lru_cache

from .core.spec import PeriodConfig, default_period_config


@dataclass
class Settings:
    min_period: float = 0.1
    max_period: float = 8760.0
    num_periods: int = 5
    samples_per_peak: int = 5
    log_level: str = "WARNING"

    def period_config(self) -> PeriodConfig:
        """Return the default :class:`PeriodConfig` described by these settings."""

        return PeriodConfig(
            min_period=self.min_period,
            max_period=self.max_period,
            num_periods=self.num_periods,
            samples_per_peak=self.samples_per_peak,
        )


@lru_cache()
def get_settings() -> Settings:
    """Return settings loaded from environment variables."""

    defaults = default_period_config()
    min_period = float(os.getenv("CADENCE_MIN_PERIOD", defaults.min_period))
    max_period = float(os.getenv("CADENCE_MAX_PERIOD", defaults.max_period))
    num_periods = int(os.getenv("CADENCE_NUM_PERIODS", defaults.num_periods))
    samples_per_peak = int(os.getenv("CADENCE_SAMPLES_PER_PEAK", defaults.samples_per_peak))
    log_level = os.getenv("CADENCE_LOG_LEVEL", "WARNING").upper()
    return Settings(
        min_period=min_period,
        max_period=max_period,
        num_periods=num_periods,
        samples_per_peak=samples_per_peak,
        log_level=log_level,
    )


def reset_settings_cache() -> None:
    """Clear the settings cache (mainly for tests)."""

    get_settings.cache_clear()
