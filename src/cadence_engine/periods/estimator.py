"""Classical (Schuster) periodogram on a linear frequency grid.

The power at frequency ``f`` is ``(sum(cos(wt))**2 + sum(sin(wt))**2) / N``
with ``w = 2*pi*f``.  There is no mean removal, variance normalisation or
windowing; significance scores downstream depend on this exact scaling.

Input times are relative hours and must be chronologically sorted: the span
is taken from the first and last elements as given.
"""
from __future__ import annotations

import math
from typing import NamedTuple, Sequence

import numpy as np

from ..core.spec import PeriodConfig

MIN_POINTS = 4
MIN_FREQS = 100
MAX_FREQS = 10_000

# Upper bound on frequency x sample cells evaluated per block.
_BLOCK_CELLS = 2_000_000


class Periodogram(NamedTuple):
    freqs: np.ndarray
    powers: np.ndarray


def _empty() -> Periodogram:
    return Periodogram(np.empty(0, dtype=np.float64), np.empty(0, dtype=np.float64))


def frequency_grid_size(span: float, config: PeriodConfig) -> int:
    """Return the number of grid frequencies for a series spanning ``span`` hours."""

    raw = config.samples_per_peak * span * (config.max_freq - config.min_freq)
    if not math.isfinite(raw):
        return MAX_FREQS
    return min(max(int(round(raw)), MIN_FREQS), MAX_FREQS)


def frequency_grid(n_freqs: int, config: PeriodConfig) -> np.ndarray:
    """Return ``n_freqs`` evenly spaced frequencies from ``1/max`` to ``1/min``."""

    min_freq = config.min_freq
    step = (config.max_freq - min_freq) / (n_freqs - 1)
    return min_freq + np.arange(n_freqs, dtype=np.float64) * step


def compute_power(times: np.ndarray, freqs: np.ndarray) -> np.ndarray:
    """Return the un-normalised periodogram power for every frequency."""

    times = np.asarray(times, dtype=np.float64)
    freqs = np.atleast_1d(np.asarray(freqs, dtype=np.float64))
    n = times.shape[0]
    powers = np.empty(freqs.shape[0], dtype=np.float64)
    block = max(1, _BLOCK_CELLS // max(n, 1))
    for lo in range(0, freqs.shape[0], block):
        omega = 2 * np.pi * freqs[lo : lo + block]
        phase = np.outer(omega, times)
        sum_cos = np.cos(phase).sum(axis=1)
        sum_sin = np.sin(phase).sum(axis=1)
        powers[lo : lo + block] = (sum_cos * sum_cos + sum_sin * sum_sin) / n
    return powers


def compute_periodogram(
    times: Sequence[float] | np.ndarray, config: PeriodConfig
) -> Periodogram | None:
    """Compute the periodogram of ``times`` (relative hours, sorted ascending).

    Returns ``None`` when fewer than :data:`MIN_POINTS` points are supplied
    (insufficient data, not an error) and an empty periodogram when the
    positional span ``times[-1] - times[0]`` is not positive.
    """

    values = np.asarray(times, dtype=np.float64)
    if values.shape[0] < MIN_POINTS:
        return None
    span = float(values[-1] - values[0])
    if span <= 0:
        return _empty()
    freqs = frequency_grid(frequency_grid_size(span, config), config)
    return Periodogram(freqs, compute_power(values, freqs))
