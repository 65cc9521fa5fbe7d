"""Reference split of a price series into above/below segments"""

from typing import Sequence

from refchart.data.models import Sample, Segment, Side


def crosses_reference(prev_price: float, price: float, reference: float) -> bool:
    """
    Check whether the path between two prices crosses the reference.

    A price equal to the reference counts as the lower side.

    Args:
        prev_price: Price of the earlier point
        price: Price of the later point
        reference: Reference price

    Returns:
        True if the two prices lie on opposite sides
    """
    return ((prev_price > reference and price <= reference) or
            (prev_price <= reference and price > reference))


def interpolate_crossing(prev: Sample, current: Sample, reference: float) -> Sample:
    """
    Linearly interpolate the point where the path from prev to current meets
    the reference.

    Args:
        prev: Earlier point
        current: Later point, on the other side of the reference

    Returns:
        Synthetic sample with price equal to the reference
    """
    t = (reference - prev.price) / (current.price - prev.price)
    ts = prev.ts + (current.ts - prev.ts) * t
    return Sample(ts=ts, price=reference, synthetic=True)


def classify_side(points: Sequence[Sample], reference: float) -> Side:
    """
    Classify a run of points as above or below the reference.

    ABOVE requires the first two points to be at or above the reference.
    A single-point run is classified by its only point.
    """
    head = points[:2]
    if all(p.price >= reference for p in head):
        return Side.ABOVE
    return Side.BELOW


def split_by_reference(samples: Sequence[Sample], reference: float) -> list[Segment]:
    """
    Split an ordered series into segments lying on one side of the reference.

    Every crossing between two consecutive points is replaced by an
    interpolated point at the reference price, which closes one segment and
    opens the next.

    Args:
        samples: Samples in chronological order
        reference: Reference price

    Returns:
        Segments in chronological order, empty for an empty series
    """
    segments = []
    current: list[Sample] = []

    for sample in samples:
        if not current:
            current.append(sample)
            continue

        last = current[-1]
        if crosses_reference(last.price, sample.price, reference):
            crossing = interpolate_crossing(last, sample, reference)
            current.append(crossing)
            segments.append(Segment(points=tuple(current),
                                    side=classify_side(current, reference)))
            current = [crossing, sample]
        else:
            current.append(sample)

    if current:
        segments.append(Segment(points=tuple(current),
                                side=classify_side(current, reference)))

    return segments
