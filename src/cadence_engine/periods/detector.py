"""Period detector combining the periodogram and peak extraction."""
from __future__ import annotations

from typing import List

import pandas as pd

from ..analysis.schemas import PeriodResult
from ..core.spec import PeriodConfig
from ..core.timeconv import to_relative_hours
from .estimator import compute_periodogram
from .peaks import find_significant_peaks


class PeriodDetector:
    """Detect candidate periods in a chronologically sorted set of moments."""

    def __init__(self, config: PeriodConfig) -> None:
        self.config = config

    def detect(self, moments: pd.DatetimeIndex) -> List[PeriodResult]:
        """Return ranked periods, or an empty list when none can be found.

        Fewer than four moments, a zero span and a spectrum without interior
        maxima all yield ``[]``.
        """

        periodogram = compute_periodogram(to_relative_hours(moments), self.config)
        if periodogram is None:
            return []
        return find_significant_peaks(
            periodogram.freqs, periodogram.powers, self.config.num_periods
        )
