"""Local-maximum extraction and significance scoring."""
from __future__ import annotations

from typing import List

import numpy as np

from ..analysis.schemas import PeriodResult

TOTAL_POWER_FLOOR = 1e-10


def find_local_peaks(powers: np.ndarray) -> np.ndarray:
    """Return indices of strict interior local maxima.

    Endpoints never qualify and plateaus are never peaks.
    """

    data = np.asarray(powers, dtype=np.float64)
    if data.shape[0] < 3:
        return np.empty(0, dtype=np.intp)
    inner = data[1:-1]
    mask = (inner > data[:-2]) & (inner > data[2:])
    return np.flatnonzero(mask) + 1


def rank_peaks(peaks: np.ndarray, powers: np.ndarray) -> np.ndarray:
    """Order peak indices by power, highest first; exact ties keep index order."""

    order = np.argsort(-powers[peaks], kind="stable")
    return peaks[order]


def find_significant_peaks(
    freqs: np.ndarray, powers: np.ndarray, num_periods: int
) -> List[PeriodResult]:
    """Return up to ``num_periods`` ranked :class:`PeriodResult` entries.

    Significance is the peak power as a percentage of the power summed over
    the whole spectrum, with the total floored at ``1e-10``.
    """

    freqs = np.asarray(freqs, dtype=np.float64)
    powers = np.asarray(powers, dtype=np.float64)
    peaks = find_local_peaks(powers)
    if peaks.size == 0:
        return []

    top = rank_peaks(peaks, powers)[:num_periods]
    total_power = max(float(powers.sum()), TOTAL_POWER_FLOOR)
    return [
        PeriodResult(
            period=float(1 / freqs[idx]),
            power=float(powers[idx]),
            significance=float(powers[idx] / total_power * 100),
        )
        for idx in top
    ]
