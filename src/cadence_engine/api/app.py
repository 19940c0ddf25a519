"""In-memory analysis helpers and their FastAPI wrappers.

The synchronous helpers keep the test suite light-weight while the
FastAPI application exposes the same capabilities over HTTP.
"""
from __future__ import annotations

from typing import Any, Dict

from fastapi import FastAPI, HTTPException

from ..analysis.runner import analyze
from ..analysis.schemas import AnalysisResult
from ..core.errors import CadenceError
from ..io.artifacts import result_to_dict
from . import schemas


def analyze_request(request: schemas.AnalyzeRequest) -> AnalysisResult:
    """Run an analysis for ``request``, using the default config when absent."""

    config_spec = request.config or schemas.PeriodConfigSpec.from_settings()
    return analyze(request.timestamps, config_spec.to_config())


def default_config() -> Dict[str, Any]:
    return schemas.PeriodConfigSpec.from_settings().model_dump(by_alias=True)


fastapi_app = FastAPI(title="Cadence Engine API", version="0.1.0")


@fastapi_app.post("/analyze", response_model=Dict[str, Any])
def analyze_endpoint(request: schemas.AnalyzeRequest) -> Dict[str, Any]:
    """HTTP endpoint wrapping :func:`analyze_request`."""

    try:
        result = analyze_request(request)
    except CadenceError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return result_to_dict(result)


@fastapi_app.get("/config/default", response_model=Dict[str, Any])
def default_config_endpoint() -> Dict[str, Any]:
    """Return the default period configuration."""

    return default_config()


app = fastapi_app
