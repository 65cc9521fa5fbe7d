"""
Rendering adapter.

Turns segments and cursor results into drawable geometry and SVG markup.
Nothing in here feeds back into the series algorithms.
"""

from .overlay import CursorOverlay, build_overlay
from .scales import LinearScale, TimeScale, nice_ticks, price_domain, time_extent
from .svg import SvgChartRenderer

__all__ = [
    "CursorOverlay",
    "build_overlay",
    "LinearScale",
    "TimeScale",
    "nice_ticks",
    "price_domain",
    "time_extent",
    "SvgChartRenderer",
]
