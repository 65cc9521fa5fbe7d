"""Cursor tracking: nearest left sample and interpolated price"""

from bisect import bisect_right
from typing import Any, Optional, Sequence

from refchart.data.models import CursorResult, Sample


def interpolate_price(left: Sample, right: Sample, x: Any) -> float:
    """
    Linearly interpolate the price at x between two samples.

    Equal timestamps are not guarded; the result is then whatever the
    division produces.
    """
    fraction = (x - left.ts) / (right.ts - left.ts)
    return left.price + fraction * (right.price - left.price)


def locate(samples: Sequence[Sample], x: Any) -> Optional[CursorResult]:
    """
    Find the sample bracketing x from the left and the price at x.

    Past the last sample the price is held flat at the last price.

    Args:
        samples: Samples in chronological order
        x: Query position (datetime, or number for numeric series)

    Returns:
        CursorResult, or None if x precedes every sample or there are none
    """
    index = bisect_right(samples, x, key=lambda s: s.ts) - 1
    if index < 0:
        return None

    left = samples[index]
    if index + 1 < len(samples):
        price = interpolate_price(left, samples[index + 1], x)
    else:
        price = left.price

    return CursorResult(sample=left, price=price)
