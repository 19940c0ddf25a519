"""Utilities to serialise analysis results."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

from ..analysis.schemas import AnalysisResult


def result_to_dict(result: AnalysisResult) -> Dict[str, Any]:
    """Return a JSON-compatible mapping with camelCase keys."""

    return result.model_dump(mode="json", by_alias=True)


def result_to_json(result: AnalysisResult, indent: int | None = 2) -> str:
    return result.model_dump_json(by_alias=True, indent=indent)


def write_result(path: str | Path, result: AnalysisResult) -> None:
    Path(path).write_text(result_to_json(result))
