"""Period detection configuration.

``PeriodConfig`` is a frozen dataclass so that a configuration cannot change
once an analysis starts.  Construction performs no checks; the engine calls
:meth:`PeriodConfig.validate` before any spectral work begins so that invalid
values surface as :class:`~cadence_engine.core.errors.ConfigurationError`.
"""
from __future__ import annotations

from dataclasses import dataclass
import json
import math
from pathlib import Path
from typing import Any, Mapping

from .errors import ConfigurationError


@dataclass(frozen=True)
class PeriodConfig:
    """Search range and output size for the period detector.

    Periods are expressed in hours.
    """

    min_period: float
    max_period: float
    num_periods: int
    samples_per_peak: int = 5

    def validate(self) -> None:
        """Raise :class:`ConfigurationError` if a constraint is violated."""

        if not math.isfinite(self.min_period):
            raise ConfigurationError("minPeriod must be a finite number")
        if not math.isfinite(self.max_period):
            raise ConfigurationError("maxPeriod must be a finite number")
        if self.min_period <= 0:
            raise ConfigurationError("minPeriod must be positive")
        if self.max_period <= 0:
            raise ConfigurationError("maxPeriod must be positive")
        if self.min_period >= self.max_period:
            raise ConfigurationError("minPeriod must be less than maxPeriod")
        if self.num_periods <= 0:
            raise ConfigurationError("numPeriods must be at least 1")
        if self.samples_per_peak < 1:
            raise ConfigurationError("samplesPerPeak must be at least 1")
        if not math.isfinite(self.max_freq):
            raise ConfigurationError("minPeriod is too small to derive a frequency grid")

    @property
    def min_freq(self) -> float:
        return 1 / self.max_period

    @property
    def max_freq(self) -> float:
        return 1 / self.min_period


def default_period_config() -> PeriodConfig:
    """Return the default search: 6 minutes to one year, five periods."""

    return PeriodConfig(min_period=0.1, max_period=8760.0, num_periods=5, samples_per_peak=5)


# ---------------------------------------------------------------------------

_KEY_ALIASES = {
    "min_period": ("min_period", "minPeriod"),
    "max_period": ("max_period", "maxPeriod"),
    "num_periods": ("num_periods", "numPeriods"),
    "samples_per_peak": ("samples_per_peak", "samplesPerPeak"),
}


def _lookup(raw: Mapping[str, Any], field: str, default: Any) -> Any:
    for key in _KEY_ALIASES[field]:
        if key in raw:
            return raw[key]
    return default


def config_from_dict(raw: Mapping[str, Any], base: PeriodConfig | None = None) -> PeriodConfig:
    """Build a :class:`PeriodConfig` from a JSON-compatible mapping.

    Keys may be given in snake_case or camelCase; missing keys fall back to
    ``base`` (or :func:`default_period_config`).
    """

    base = base or default_period_config()
    try:
        return PeriodConfig(
            min_period=float(_lookup(raw, "min_period", base.min_period)),
            max_period=float(_lookup(raw, "max_period", base.max_period)),
            num_periods=int(_lookup(raw, "num_periods", base.num_periods)),
            samples_per_peak=int(_lookup(raw, "samples_per_peak", base.samples_per_peak)),
        )
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid period configuration: {exc}") from exc


def load_config(path: str | Path, base: PeriodConfig | None = None) -> PeriodConfig:
    """Load a :class:`PeriodConfig` from a JSON file, filling gaps from ``base``."""

    try:
        raw = json.loads(Path(path).read_text())
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Invalid configuration file {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Configuration file {path} must hold a JSON object")
    return config_from_dict(raw, base)
