"""Series algorithms: reference split, cursor interpolation and smoothing"""

from .cursor import locate
from .segmenter import classify_side, crosses_reference, split_by_reference
from .smoothing import ema, smooth_samples

__all__ = [
    "split_by_reference",
    "classify_side",
    "crosses_reference",
    "locate",
    "ema",
    "smooth_samples",
]
