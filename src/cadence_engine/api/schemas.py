"""API request models (light-weight)."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..config import get_settings
from ..core.spec import PeriodConfig


class PeriodConfigSpec(BaseModel):
    """Period search configuration accepted over HTTP."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    min_period: float = Field(gt=0)
    max_period: float = Field(gt=0)
    num_periods: int = Field(ge=1)
    samples_per_peak: int = Field(5, ge=1)

    @classmethod
    def from_settings(cls) -> "PeriodConfigSpec":
        settings = get_settings()
        return cls(
            min_period=settings.min_period,
            max_period=settings.max_period,
            num_periods=settings.num_periods,
            samples_per_peak=settings.samples_per_peak,
        )

    def to_config(self) -> PeriodConfig:
        return PeriodConfig(
            min_period=self.min_period,
            max_period=self.max_period,
            num_periods=self.num_periods,
            samples_per_peak=self.samples_per_peak,
        )


class AnalyzeRequest(BaseModel):
    """Timestamps (epoch milliseconds) and an optional configuration."""

    timestamps: List[int]
    config: Optional[PeriodConfigSpec] = None
