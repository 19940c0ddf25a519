"""Day, week and month event counts on the UTC calendar.

Day and month series are dense (zero-filled between the first and last
bucket); the week series only lists weeks that contain events.
"""
from __future__ import annotations

from datetime import date
from typing import List

import pandas as pd

from ..analysis.schemas import DayRecord, MonthRecord, WeekRecord
from ..core.timeconv import RESOLUTION, floor_day


def _counts(keys: pd.DatetimeIndex | pd.PeriodIndex) -> pd.Series:
    return keys.value_counts().sort_index()


def aggregate_by_day(moments: pd.DatetimeIndex) -> List[DayRecord]:
    if len(moments) == 0:
        return []
    counts = _counts(floor_day(moments))
    full = pd.date_range(counts.index.min(), counts.index.max(), freq="D", unit=RESOLUTION)
    dense = counts.reindex(full, fill_value=0)
    return [DayRecord(date=day.date(), count=int(n)) for day, n in dense.items()]


def week_starts(moments: pd.DatetimeIndex) -> pd.DatetimeIndex:
    """Return the Monday (UTC midnight) of each moment's week."""

    days = floor_day(moments)
    return days - pd.to_timedelta(days.dayofweek, unit="D").as_unit(RESOLUTION)


def aggregate_by_week(moments: pd.DatetimeIndex) -> List[WeekRecord]:
    if len(moments) == 0:
        return []
    counts = _counts(week_starts(moments))
    return [WeekRecord(week_start=start.date(), count=int(n)) for start, n in counts.items()]


def aggregate_by_month(moments: pd.DatetimeIndex) -> List[MonthRecord]:
    if len(moments) == 0:
        return []
    months = moments.tz_convert(None).to_period("M")
    counts = _counts(months)
    full = pd.period_range(counts.index.min(), counts.index.max(), freq="M")
    dense = counts.reindex(full, fill_value=0)
    return [
        MonthRecord(month=date(period.year, period.month, 1), count=int(n)) for period, n in dense.items()
    ]
