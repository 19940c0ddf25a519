"""Conversions between epoch milliseconds, UTC moments and relative hours.

All moments are timezone-aware UTC; calendar truncation elsewhere in the
package relies on this single zone convention.
"""
from __future__ import annotations

from typing import Iterable

import numpy as np
import pandas as pd

# Moments are kept at millisecond resolution so every int64 epoch-millisecond
# value is representable; offsets combined with them use the same unit.
RESOLUTION = "ms"
_HOUR = pd.Timedelta(hours=1).as_unit(RESOLUTION)


def to_moments(timestamps: Iterable[int]) -> pd.DatetimeIndex:
    """Return UTC moments for epoch-millisecond values, keeping their order."""

    values = np.asarray(list(timestamps), dtype=np.int64)
    return pd.DatetimeIndex(values.astype("datetime64[ms]")).tz_localize("UTC")


def to_relative_hours(moments: pd.DatetimeIndex) -> np.ndarray:
    """Return hours elapsed since the earliest moment, in input order.

    The anchor is recomputed on every call so that each subset is measured
    from its own minimum.
    """

    if len(moments) == 0:
        return np.empty(0, dtype=np.float64)
    offsets = moments - moments.min()
    return np.asarray(offsets / _HOUR, dtype=np.float64)


def floor_day(moments: pd.DatetimeIndex) -> pd.DatetimeIndex:
    """Truncate moments to the start of their UTC calendar day."""

    return moments.floor("D")
