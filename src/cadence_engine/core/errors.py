"""Exceptions raised by the analysis engine."""
from __future__ import annotations


class CadenceError(ValueError):
    """Base class for all engine errors."""


class ConfigurationError(CadenceError):
    """Raised when a :class:`PeriodConfig` violates its constraints."""


class EmptyInputError(CadenceError):
    """Raised when no timestamps are supplied."""


class TimestampParseError(CadenceError):
    """Raised when a delimited source holds a non-integer timestamp."""
