"""Timestamp builders shared by the test modules."""
from __future__ import annotations

from typing import Iterable, List

import pandas as pd


def ms(value: str) -> int:
    """Return epoch milliseconds for an ISO timestamp interpreted as UTC."""

    return int(pd.Timestamp(value, tz="UTC").value // 1_000_000)


def hourly(start: str, hours: Iterable[float]) -> List[int]:
    base = ms(start)
    return [base + int(h * 3_600_000) for h in hours]
