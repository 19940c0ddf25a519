"""Longest run of active UTC calendar days and its spectral analysis."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pandas as pd

from ..analysis.schemas import ContinuousResult, PeriodResults
from ..core.timeconv import RESOLUTION, floor_day
from ..periods.detector import PeriodDetector

ONE_DAY = pd.Timedelta(days=1).as_unit(RESOLUTION)
MAX_GAP_DAYS = 2


@dataclass
class ContinuousRun:
    """First/last day of the longest run and the moments that fall inside it."""

    start: Optional[pd.Timestamp]
    end: Optional[pd.Timestamp]
    moments: pd.DatetimeIndex


def find_longest_continuous_period(moments: pd.DatetimeIndex) -> ContinuousRun:
    """Find the longest run of active days, allowing gaps of up to two days.

    Runs are measured in distinct active days.  The first run reaching the
    maximum length wins.  The input is not modified; the returned moments are
    sorted and cover ``[start, end + 1 day)``.  Fewer than two moments are
    returned unchanged with no bounds.
    """

    if len(moments) < 2:
        return ContinuousRun(start=None, end=None, moments=moments)

    ordered = moments.sort_values()
    days = floor_day(ordered).unique()

    best_start = best_end = days[0]
    best_len = 0
    run_start = run_end = days[0]
    run_len = 1
    for prev, day in zip(days[:-1], days[1:]):
        if (day - prev) / ONE_DAY <= MAX_GAP_DAYS:
            run_end = day
            run_len += 1
            continue
        if run_len > best_len:
            best_start, best_end, best_len = run_start, run_end, run_len
        run_start = run_end = day
        run_len = 1
    if run_len > best_len:
        best_start, best_end = run_start, run_end

    inside = (ordered >= best_start) & (ordered < best_end + ONE_DAY)
    return ContinuousRun(start=best_start, end=best_end, moments=ordered[inside])


def _unfiltered_results(moments: pd.DatetimeIndex, detector: PeriodDetector) -> PeriodResults:
    # Daily and weekly reuse the unfiltered moments; no 72h/336h window here.
    results = detector.detect(moments)
    return PeriodResults(daily=results, weekly=list(results), all_time=list(results))


def analyze_continuous_periods(
    moments: pd.DatetimeIndex, detector: PeriodDetector
) -> ContinuousResult:
    """Analyse all moments and the longest continuous run separately."""

    if len(moments) == 0:
        return ContinuousResult()

    all_data = _unfiltered_results(moments, detector)
    run = find_longest_continuous_period(moments)
    longest = PeriodResults()
    if len(run.moments) > 0:
        longest = _unfiltered_results(run.moments, detector)
    return ContinuousResult(
        all_data=all_data,
        longest_continuous=longest,
        start=run.start.date() if run.start is not None else None,
        end=run.end.date() if run.end is not None else None,
        record_count=len(moments),
    )
