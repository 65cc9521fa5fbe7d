"""
Scales mapping data space to pixel space.

Provides linear and time scales with inversion for pointer tracking, the
price domain rule that keeps the reference line in view, and "nice" tick
generation for grid lines and axes.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Sequence

from ..data.models import Sample
from ..errors import InsufficientDataError

# Candidate time tick intervals in seconds
TIME_INTERVALS = (
    1, 5, 15, 30,
    60, 5 * 60, 15 * 60, 30 * 60,
    3600, 3 * 3600, 6 * 3600, 12 * 3600,
    86400, 2 * 86400, 7 * 86400, 30 * 86400, 365 * 86400,
)


@dataclass(frozen=True)
class LinearScale:
    """Maps a numeric domain linearly onto a pixel range."""
    domain: tuple[float, float]
    range: tuple[float, float]

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            return (r0 + r1) / 2.0
        return r0 + (value - d0) / (d1 - d0) * (r1 - r0)

    def invert(self, pixel: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if r1 == r0:
            return (d0 + d1) / 2.0
        return d0 + (pixel - r0) / (r1 - r0) * (d1 - d0)

    def ticks(self, count: int = 10) -> list[float]:
        return nice_ticks(self.domain[0], self.domain[1], count)


@dataclass(frozen=True)
class TimeScale:
    """Maps a datetime domain linearly onto a pixel range."""
    domain: tuple[datetime, datetime]
    range: tuple[float, float]

    def __call__(self, value: datetime) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        span = (d1 - d0).total_seconds()
        if span == 0:
            return (r0 + r1) / 2.0
        return r0 + (value - d0).total_seconds() / span * (r1 - r0)

    def invert(self, pixel: float) -> datetime:
        d0, d1 = self.domain
        r0, r1 = self.range
        if r1 == r0:
            return d0 + (d1 - d0) / 2
        return d0 + (d1 - d0) * ((pixel - r0) / (r1 - r0))

    def ticks(self, count: int = 8) -> list[datetime]:
        """Ticks on the smallest standard interval giving at most ~count ticks."""
        d0, d1 = self.domain
        span = (d1 - d0).total_seconds()
        if span <= 0:
            return [d0]

        target = span / max(count, 1)
        interval = next((s for s in TIME_INTERVALS if s >= target), TIME_INTERVALS[-1])
        start = math.ceil(d0.timestamp() / interval) * interval
        stop = d1.timestamp()
        tz = d0.tzinfo
        ticks = []
        t = start
        while t <= stop:
            ticks.append(datetime.fromtimestamp(t, tz=tz))
            t += interval
        return ticks


def time_extent(samples: Sequence[Sample]) -> tuple[datetime, datetime]:
    """
    Earliest and latest sample timestamp.

    Raises:
        InsufficientDataError: If there are no samples
    """
    if not samples:
        raise InsufficientDataError("Cannot compute time extent of an empty series",
                                    required_count=1, available_count=0)
    stamps = [s.ts for s in samples]
    return min(stamps), max(stamps)


def price_domain(samples: Sequence[Sample], reference: float) -> tuple[float, float]:
    """
    Price domain that always contains the reference.

    The lower bound is the smallest price below the reference (or the
    reference itself), the upper bound the largest price above it.
    """
    low = min((s.price if s.price < reference else reference for s in samples),
              default=reference)
    high = max((s.price if s.price > reference else reference for s in samples),
               default=reference)
    return low, high


def tick_step(start: float, stop: float, count: int) -> float:
    """Tick spacing of 1, 2 or 5 times a power of ten closest to the requested count."""
    raw_step = abs(stop - start) / max(count, 1)
    if raw_step == 0:
        return 0.0
    power = math.floor(math.log10(raw_step))
    base = 10 ** power
    error = raw_step / base
    if error >= math.sqrt(50):
        factor = 10
    elif error >= math.sqrt(10):
        factor = 5
    elif error >= math.sqrt(2):
        factor = 2
    else:
        factor = 1
    return factor * base


def nice_ticks(start: float, stop: float, count: int = 10) -> list[float]:
    """
    Round tick values covering [start, stop].

    Returns:
        Ascending tick values, [start] for an empty span
    """
    lo, hi = min(start, stop), max(start, stop)
    step = tick_step(lo, hi, count)
    if step == 0:
        return [lo]

    first = math.ceil(lo / step)
    last = math.floor(hi / step)
    return [round(i * step, 12) for i in range(first, last + 1)]
