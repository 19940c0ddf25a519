"""Window selection: trailing daily/weekly windows and calendar quarters.

Every subset keeps the order of the moments it was cut from, so callers that
pass a sorted index hand the estimator sorted subsets.
"""
from __future__ import annotations

from typing import Dict, List

import numpy as np
import pandas as pd

from ..analysis.schemas import PeriodResult
from ..core.timeconv import RESOLUTION
from .detector import PeriodDetector

DAILY_WINDOW = pd.Timedelta(hours=72).as_unit(RESOLUTION)
WEEKLY_WINDOW = pd.Timedelta(hours=336).as_unit(RESOLUTION)
_UPPER_MARGIN = pd.Timedelta(hours=24).as_unit(RESOLUTION)


def filter_by_time_range(
    moments: pd.DatetimeIndex, end: pd.Timestamp, duration: pd.Timedelta
) -> pd.DatetimeIndex:
    """Keep moments strictly after ``end - duration`` and strictly before ``end + 24h``."""

    lower = end - duration
    upper = end + _UPPER_MARGIN
    return moments[(moments > lower) & (moments < upper)]


def daily_window(moments: pd.DatetimeIndex, end: pd.Timestamp) -> pd.DatetimeIndex:
    return filter_by_time_range(moments, end, DAILY_WINDOW)


def weekly_window(moments: pd.DatetimeIndex, end: pd.Timestamp) -> pd.DatetimeIndex:
    return filter_by_time_range(moments, end, WEEKLY_WINDOW)


def quarter_label(moment: pd.Timestamp) -> str:
    """Return the calendar quarter of ``moment`` as ``"{year}-Q{n}"``."""

    return f"{moment.year}-Q{moment.quarter}"


def group_by_quarter(moments: pd.DatetimeIndex) -> Dict[str, pd.DatetimeIndex]:
    """Partition moments by calendar quarter, sorted by label."""

    if len(moments) == 0:
        return {}
    labels = np.asarray([quarter_label(moment) for moment in moments])
    return {str(label): moments[labels == label] for label in sorted(set(labels))}


def detect_quarterly_periods(
    moments: pd.DatetimeIndex, detector: PeriodDetector
) -> Dict[str, List[PeriodResult]]:
    """Run the detector independently on each quarter's moments."""

    return {label: detector.detect(subset) for label, subset in group_by_quarter(moments).items()}
