"""Read epoch-millisecond timestamps from delimited text files."""
from __future__ import annotations

import csv
from pathlib import Path
from typing import List

from ..core.errors import TimestampParseError


def parse_timestamp(value: str) -> int:
    try:
        return int(value.strip(), 10)
    except ValueError as exc:
        raise TimestampParseError(f"invalid timestamp {value!r}") from exc


def load_timestamps_csv(path: str | Path, delimiter: str = ",") -> List[int]:
    """Return every non-empty cell of ``path`` as an integer, row by row."""

    timestamps: List[int] = []
    with Path(path).open(newline="") as handle:
        for row in csv.reader(handle, delimiter=delimiter):
            for value in row:
                if value.strip() == "":
                    continue
                timestamps.append(parse_timestamp(value))
    return timestamps
