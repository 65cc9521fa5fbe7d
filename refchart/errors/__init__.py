"""
Error classification for chart data processing.

This module provides a structured exception hierarchy for the problems
encountered while preparing price series and rendering charts.
"""

from .data_quality import (
    DataQualityError,
    MissingDataError,
    MalformedDataError,
    InsufficientDataError,
)
from .recovery import GracefulDegradationError

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MissingDataError",
    "MalformedDataError",
    "InsufficientDataError",
    # Recovery Categories
    "GracefulDegradationError",
]
