"""Pydantic models describing analysis results.

Field names are snake_case in Python and camelCase once serialised.
"""
from __future__ import annotations

import datetime as dt
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel


class _ResultModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class PeriodResult(_ResultModel):
    """Single detected period (hours) with its raw power and significance (%)."""

    period: float
    power: float
    significance: float


class PeriodResults(_ResultModel):
    """Period candidates for each analysis window."""

    daily: List[PeriodResult] = Field(default_factory=list)
    weekly: List[PeriodResult] = Field(default_factory=list)
    all_time: List[PeriodResult] = Field(default_factory=list)
    quarterly: Dict[str, List[PeriodResult]] = Field(default_factory=dict)

    @field_serializer("quarterly")
    def serialize_quarterly(
        self, value: Dict[str, List[PeriodResult]]
    ) -> Dict[str, List[PeriodResult]]:
        return {label: value[label] for label in sorted(value)}


class DayRecord(_ResultModel):
    date: dt.date
    count: int


class WeekRecord(_ResultModel):
    """Event count for the week starting on ``week_start`` (a Monday)."""

    week_start: dt.date = Field(alias="week")
    count: int


class MonthRecord(_ResultModel):
    """Event count for the month starting on ``month`` (first day)."""

    month: dt.date
    count: int


class ContinuousResult(_ResultModel):
    """Spectral results for all data and for the longest continuous day run.

    ``start`` and ``end`` are the first and last calendar days of the run and
    are ``None`` when the input holds fewer than two timestamps.  The daily
    and weekly entries are computed on the same unfiltered input as
    ``all_time``; they are not restricted to the 72h/336h windows used by
    :attr:`AnalysisResult.periods`.
    """

    all_data: PeriodResults = Field(default_factory=PeriodResults)
    longest_continuous: PeriodResults = Field(default_factory=PeriodResults)
    start: Optional[dt.date] = None
    end: Optional[dt.date] = None
    record_count: int = 0


class AnalysisResult(_ResultModel):
    total_records: int
    start_date: dt.datetime
    end_date: dt.datetime
    days: List[DayRecord]
    weeks: List[WeekRecord]
    months: List[MonthRecord]
    periods: PeriodResults
    continuous: ContinuousResult
