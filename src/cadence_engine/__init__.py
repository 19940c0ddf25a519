"""Periodicity detection and calendar summaries for event timestamps."""

from .analysis.runner import analyze
from .core.errors import CadenceError, ConfigurationError, EmptyInputError
from .core.spec import PeriodConfig, default_period_config

__all__ = [
    "analyze",
    "PeriodConfig",
    "default_period_config",
    "CadenceError",
    "ConfigurationError",
    "EmptyInputError",
]
