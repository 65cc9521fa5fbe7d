"""
Hover overlay view model.

Positions the guide line, day highlight block, marker and tooltip for one
cursor query. The overlay is recomputed on every pointer move and only the
latest one is ever drawn.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from ..data.models import CursorResult, Side
from .frame import ChartFrame

GAIN_GLOW_ID = "gainGlow"
LOSS_GLOW_ID = "lossGlow"


@dataclass(frozen=True)
class CursorOverlay:
    """Pixel geometry and text of the hover feedback."""
    query_ts: datetime
    price: float
    side: Side

    # Plot-area coordinates
    marker_x: float
    marker_y: float
    block_x: float
    block_width: float
    guide_height: float

    marker_color: str
    glow_filter_id: str

    tooltip_text: str
    tooltip_left: float        # Relative to the outer SVG
    tooltip_top: float


def format_tooltip(price: float, decimals: int = 2) -> str:
    """Tooltip text for a price."""
    return f"Price: {price:.{decimals}f}"


def build_overlay(frame: ChartFrame, query_ts: datetime, result: CursorResult) -> CursorOverlay:
    """
    Build the overlay for a cursor result.

    The marker sits at the query time on the interpolated price; its color
    follows the side of that price. The highlight block spans the configured
    number of days from the bracketing sample, cut at the end of the time
    domain when that many days cannot be represented.
    """
    chart = frame.config.chart
    style = frame.config.style
    margin = frame.config.margin

    marker_x = frame.x_scale(query_ts)
    marker_y = frame.y_scale(result.price)

    if result.price >= frame.reference:
        side, color, glow = Side.ABOVE, style.gain_color, GAIN_GLOW_ID
    else:
        side, color, glow = Side.BELOW, style.loss_color, LOSS_GLOW_ID

    block_x = frame.x_scale(result.sample.ts)
    try:
        block_end_ts = result.sample.ts + timedelta(days=chart.highlight_block_days)
    except OverflowError:
        block_end_ts = frame.x_scale.domain[1]
    block_end = frame.x_scale(block_end_ts)

    return CursorOverlay(
        query_ts=query_ts,
        price=result.price,
        side=side,
        marker_x=marker_x,
        marker_y=marker_y,
        block_x=block_x,
        block_width=block_end - block_x,
        guide_height=frame.inner_height,
        marker_color=color,
        glow_filter_id=glow,
        tooltip_text=format_tooltip(result.price, chart.tooltip_decimals),
        tooltip_left=marker_x + margin.left + chart.tooltip_offset_px,
        tooltip_top=marker_y + margin.top - chart.tooltip_offset_px,
    )
