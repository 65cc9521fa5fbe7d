"""
Canonical data models for price series and their derived shapes.

This module defines immutable data structures that represent validated
samples, the segments produced by the reference split, and the results of
cursor queries. All of them are created fresh per render pass.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Sample:
    """Single price observation; also the point type of a segment."""
    ts: datetime            # UTC timestamp (plain numbers work for the algorithms too)
    price: float
    synthetic: bool = field(default=False, compare=False)  # True for crossing points


class Side(str, Enum):
    """Which side of the reference a segment lies on."""
    ABOVE = "above"
    BELOW = "below"


@dataclass(frozen=True)
class Segment:
    """Contiguous run of points on one side of the reference."""
    points: tuple[Sample, ...]
    side: Side

    @property
    def is_above(self) -> bool:
        return self.side is Side.ABOVE

    @property
    def start(self) -> Sample:
        return self.points[0]

    @property
    def end(self) -> Sample:
        return self.points[-1]

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class CursorResult:
    """Result of a cursor query: left-bracketing sample and interpolated price."""
    sample: Sample
    price: float


@dataclass(frozen=True)
class PreparationResult:
    """Result of preparing a batch of raw records."""

    samples: tuple[Sample, ...] = ()

    success: bool = True
    error_msg: Optional[str] = None
    error_index: Optional[int] = None

    @classmethod
    def success_with_samples(cls, samples: list[Sample]):
        """Create successful result with samples."""
        return cls(samples=tuple(samples), success=True)

    @classmethod
    def error(cls, error_msg: str, index: Optional[int] = None):
        """Create error result."""
        return cls(success=False, error_msg=error_msg, error_index=index)
