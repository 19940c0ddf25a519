from __future__ import annotations

import pytest

pytest.importorskip("fastapi")

from cadence_engine.api import app, schemas
from cadence_engine.core.errors import ConfigurationError

from helpers import hourly

STAMPS = hourly("2024-01-01", [0, 5, 11, 24, 29, 35, 48, 53, 72])


def test_analyze_request_with_defaults():
    result = app.analyze_request(schemas.AnalyzeRequest(timestamps=STAMPS))
    assert result.total_records == len(STAMPS)
    assert len(result.periods.all_time) <= 5


def test_analyze_request_propagates_engine_errors():
    request = schemas.AnalyzeRequest(
        timestamps=STAMPS,
        config=schemas.PeriodConfigSpec(min_period=10, max_period=5, num_periods=2),
    )
    with pytest.raises(ConfigurationError):
        app.analyze_request(request)


def test_default_config_payload():
    assert app.default_config() == {
        "minPeriod": 0.1,
        "maxPeriod": 8760.0,
        "numPeriods": 5,
        "samplesPerPeak": 5,
    }


def test_http_endpoints():
    pytest.importorskip("httpx")
    from fastapi.testclient import TestClient

    client = TestClient(app.app)
    resp = client.post(
        "/analyze",
        json={"timestamps": STAMPS, "config": {"minPeriod": 1, "maxPeriod": 48, "numPeriods": 2}},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["totalRecords"] == len(STAMPS)
    assert len(body["periods"]["allTime"]) <= 2

    bad = client.post(
        "/analyze",
        json={"timestamps": STAMPS, "config": {"minPeriod": 5, "maxPeriod": 2, "numPeriods": 2}},
    )
    assert bad.status_code == 400
    assert "less than" in bad.json()["detail"]

    empty = client.post("/analyze", json={"timestamps": []})
    assert empty.status_code == 400

    invalid = client.post(
        "/analyze",
        json={"timestamps": STAMPS, "config": {"minPeriod": 0, "maxPeriod": 2, "numPeriods": 2}},
    )
    assert invalid.status_code == 422

    assert client.get("/config/default").json()["numPeriods"] == 5
