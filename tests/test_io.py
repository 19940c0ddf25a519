from __future__ import annotations

import json

import pytest

from cadence_engine import PeriodConfig, analyze
from cadence_engine.core.errors import TimestampParseError
from cadence_engine.io import artifacts
from cadence_engine.io.timestamps import load_timestamps_csv

from helpers import hourly


def test_load_timestamps_reads_every_cell(tmp_path):
    path = tmp_path / "ts.csv"
    path.write_text("1700000000000,1700000001000\n\n1700000002000, ,1700000003000\n")
    assert load_timestamps_csv(path) == [
        1700000000000,
        1700000001000,
        1700000002000,
        1700000003000,
    ]


def test_load_timestamps_rejects_non_integers(tmp_path):
    path = tmp_path / "ts.csv"
    path.write_text("1700000000000\n17000.5\n")
    with pytest.raises(TimestampParseError, match="17000.5"):
        load_timestamps_csv(path)


def test_result_serialises_with_camel_case(tmp_path):
    stamps = []
    for start in ("2024-05-02", "2024-02-03"):
        stamps += hourly(start, [0, 5, 11, 24, 30])
    result = analyze(stamps, PeriodConfig(1.0, 48.0, 2, 5))
    out = tmp_path / "result.json"
    artifacts.write_result(out, result)
    payload = json.loads(out.read_text())

    assert payload["totalRecords"] == 10
    assert set(payload["periods"]) == {"daily", "weekly", "allTime", "quarterly"}
    assert list(payload["periods"]["quarterly"]) == ["2024-Q1", "2024-Q2"]
    assert set(payload["continuous"]) == {"allData", "longestContinuous", "start", "end", "recordCount"}
    assert payload["weeks"][0] == {"week": "2024-01-29", "count": 5}
    assert payload["days"][0] == {"date": "2024-02-03", "count": 3}
    assert payload["months"][0] == {"month": "2024-02-01", "count": 5}
    assert payload["continuous"]["start"] == "2024-02-03"
    first = payload["periods"]["allTime"][0]
    assert set(first) == {"period", "power", "significance"}
    assert artifacts.result_to_dict(result) == payload
