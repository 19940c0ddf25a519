"""Spectral period detection package."""

from .detector import PeriodDetector
from .estimator import Periodogram, compute_periodogram, compute_power
from .peaks import find_local_peaks, find_significant_peaks

__all__ = [
    "PeriodDetector",
    "Periodogram",
    "compute_periodogram",
    "compute_power",
    "find_local_peaks",
    "find_significant_peaks",
]
