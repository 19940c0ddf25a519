"""Top-level orchestration for timestamp periodicity analysis."""
from __future__ import annotations

import logging
import time
from typing import Sequence

import pandas as pd

from ..aggregation import calendar
from ..continuity.runs import analyze_continuous_periods
from ..core.errors import EmptyInputError
from ..core.spec import PeriodConfig
from ..core.timeconv import to_moments
from ..periods import windows
from ..periods.detector import PeriodDetector
from .schemas import AnalysisResult, PeriodResults

logger = logging.getLogger(__name__)


def detect_periods(
    moments: pd.DatetimeIndex, end: pd.Timestamp, detector: PeriodDetector
) -> PeriodResults:
    """Run the detector on the daily, weekly, all-time and quarterly windows.

    ``moments`` must be sorted ascending.
    """

    return PeriodResults(
        daily=detector.detect(windows.daily_window(moments, end)),
        weekly=detector.detect(windows.weekly_window(moments, end)),
        all_time=detector.detect(moments),
        quarterly=windows.detect_quarterly_periods(moments, detector),
    )


def analyze(timestamps: Sequence[int], config: PeriodConfig) -> AnalysisResult:
    """Analyse epoch-millisecond ``timestamps`` with ``config``.

    Raises :class:`EmptyInputError` for an empty sequence and
    :class:`ConfigurationError` for an invalid configuration, before any
    spectral work starts.  ``timestamps`` is never modified; the analysis
    works on a sorted copy.
    """

    if len(timestamps) == 0:
        raise EmptyInputError("no timestamps provided")
    config.validate()

    started = time.perf_counter()
    moments = to_moments(timestamps).sort_values()
    start_date, end_date = moments[0], moments[-1]
    logger.debug(
        "Analysing %d timestamps from %s to %s", len(moments), start_date, end_date
    )

    detector = PeriodDetector(config)
    result = AnalysisResult(
        total_records=len(moments),
        start_date=start_date.to_pydatetime(),
        end_date=end_date.to_pydatetime(),
        days=calendar.aggregate_by_day(moments),
        weeks=calendar.aggregate_by_week(moments),
        months=calendar.aggregate_by_month(moments),
        periods=detect_periods(moments, end_date, detector),
        continuous=analyze_continuous_periods(moments, detector),
    )
    logger.info("Analysis completed in %.3fs", time.perf_counter() - started)
    return result
