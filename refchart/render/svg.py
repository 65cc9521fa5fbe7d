"""Inline SVG renderer for reference charts."""

from __future__ import annotations

from datetime import datetime
from html import escape
from typing import Optional

from ..logging import get_render_logger
from .curves import area_path, line_path
from .frame import ChartFrame
from .overlay import GAIN_GLOW_ID, LOSS_GLOW_ID, CursorOverlay

logger = get_render_logger(__name__)


def _num(value: float) -> str:
    return f"{value:.2f}"


def _attrs(**attrs) -> str:
    parts = []
    for name, value in attrs.items():
        if value is None:
            continue
        if isinstance(value, float):
            value = _num(value)
        parts.append(f'{name.rstrip("_").replace("_", "-")}="{escape(str(value))}"')
    return " ".join(parts)


def _format_time_tick(ts: datetime, span_seconds: float) -> str:
    if span_seconds >= 2 * 86400:
        return ts.strftime("%b %d")
    return ts.strftime("%H:%M")


def _format_price_tick(value: float) -> str:
    return f"{value:g}"


class SvgChartRenderer:
    """
    Draws a ChartFrame (and optionally a hover overlay) as SVG markup.

    Usage:
        renderer = SvgChartRenderer()
        markup = renderer.render(frame, overlay)
    """

    def render(self, frame: Optional[ChartFrame], overlay: Optional[CursorOverlay] = None,
               width: int = 800, height: int = 400) -> str:
        """
        Render the chart.

        Args:
            frame: Snapshot of the render pass; None draws an empty canvas
            overlay: Hover overlay to draw on top, if any
            width: Canvas width used when there is no frame
            height: Canvas height used when there is no frame

        Returns:
            SVG markup string
        """
        if frame is None:
            return f'<svg xmlns="http://www.w3.org/2000/svg" {_attrs(width=width, height=height)}></svg>'

        chart = frame.config.chart
        margin = frame.config.margin
        style = frame.config.style

        body = [
            self._grid(frame),
            self._reference_line(frame),
            self._segments(frame),
            self._x_axis(frame),
            self._y_axis(frame),
        ]
        if overlay is not None:
            body.append(self._overlay(frame, overlay))

        parts = [
            f'<svg xmlns="http://www.w3.org/2000/svg" '
            f'{_attrs(width=chart.width, height=chart.height, viewBox=f"0 0 {chart.width} {chart.height}")}>'
        ]
        if style.glow:
            parts.append(self._defs(frame))
        parts.append(f'<g transform="translate({margin.left},{margin.top})">')
        parts.extend(body)
        parts.append("</g>")
        if overlay is not None:
            parts.append(self._tooltip(overlay))
        parts.append("</svg>")

        logger.debug("SVG rendered", segment_count=len(frame.segments),
                     overlay=overlay is not None)
        return "".join(parts)

    def _defs(self, frame: ChartFrame) -> str:
        style = frame.config.style
        filters = [
            self._glow_filter(GAIN_GLOW_ID, style.gain_color, style.glow_std_deviation),
            self._glow_filter(LOSS_GLOW_ID, style.loss_color, style.glow_std_deviation),
        ]
        return f"<defs>{''.join(filters)}</defs>"

    @staticmethod
    def _glow_filter(filter_id: str, color: str, std_deviation: float) -> str:
        return (
            f'<filter {_attrs(id=filter_id, width="300%", height="300%", x="-100%", y="-100%")}>'
            f'<feFlood {_attrs(result="flood", flood_color=color, flood_opacity="1")}/>'
            f'<feComposite {_attrs(in_="flood", in2="SourceGraphic", operator="in", result="mask")}/>'
            f'<feGaussianBlur {_attrs(in_="mask", stdDeviation=std_deviation, result="blur")}/>'
            '<feMerge><feMergeNode in="blur"/><feMergeNode in="SourceGraphic"/></feMerge>'
            "</filter>"
        )

    def _grid(self, frame: ChartFrame) -> str:
        style = frame.config.style
        lines = []
        for tick in frame.y_scale.ticks(frame.config.chart.grid_ticks):
            y = frame.y_scale(tick)
            lines.append(f'<line {_attrs(x1=0.0, y1=y, x2=float(frame.inner_width), y2=y, stroke=style.grid_color, stroke_dasharray=style.dash_pattern)}/>')
        return f'<g class="grid">{"".join(lines)}</g>'

    def _reference_line(self, frame: ChartFrame) -> str:
        style = frame.config.style
        y = frame.reference_y
        return (f'<line class="reference" {_attrs(x1=0.0, y1=y, x2=float(frame.inner_width), y2=y, stroke=style.reference_color, stroke_width=1, stroke_dasharray=style.dash_pattern)}/>')

    def _segments(self, frame: ChartFrame) -> str:
        style = frame.config.style
        baseline = frame.reference_y
        paths = []
        for segment in frame.segments:
            points = [(frame.x_scale(p.ts), frame.y_scale(p.price)) for p in segment.points]
            color = style.gain_color if segment.is_above else style.loss_color
            glow = None
            if style.glow:
                glow = f"url(#{GAIN_GLOW_ID if segment.is_above else LOSS_GLOW_ID})"
            paths.append(
                f'<path class="area {segment.side.value}" '
                f'{_attrs(d=area_path(points, baseline, style.curve), fill=color, opacity=style.area_opacity)}/>'
            )
            paths.append(
                f'<path class="line {segment.side.value}" '
                f'{_attrs(d=line_path(points, style.curve), fill="none", stroke=color, stroke_width=style.stroke_width, filter=glow)}/>'
            )
        return f'<g class="segments">{"".join(paths)}</g>'

    def _x_axis(self, frame: ChartFrame) -> str:
        d0, d1 = frame.x_scale.domain
        span = (d1 - d0).total_seconds()
        ticks = []
        for tick in frame.x_scale.ticks(frame.config.chart.x_ticks):
            x = frame.x_scale(tick)
            ticks.append(
                f'<g class="tick" transform="translate({_num(x)},0)">'
                f'<line y2="6" stroke="currentColor"/>'
                f'<text y="9" dy="0.71em" text-anchor="middle">{escape(_format_time_tick(tick, span))}</text>'
                "</g>"
            )
        return (f'<g class="axis axis-x" transform="translate(0,{_num(frame.inner_height)})">'
                f'<path d="M0,0H{_num(frame.inner_width)}" stroke="currentColor"/>'
                f'{"".join(ticks)}</g>')

    def _y_axis(self, frame: ChartFrame) -> str:
        ticks = []
        for tick in frame.y_scale.ticks(frame.config.chart.grid_ticks):
            y = frame.y_scale(tick)
            ticks.append(
                f'<g class="tick" transform="translate(0,{_num(y)})">'
                f'<line x2="-6" stroke="currentColor"/>'
                f'<text x="-9" dy="0.32em" text-anchor="end">{escape(_format_price_tick(tick))}</text>'
                "</g>"
            )
        return (f'<g class="axis axis-y">'
                f'<path d="M0,0V{_num(frame.inner_height)}" stroke="currentColor"/>'
                f'{"".join(ticks)}</g>')

    def _overlay(self, frame: ChartFrame, overlay: CursorOverlay) -> str:
        style = frame.config.style
        glow = f"url(#{overlay.glow_filter_id})" if style.glow else None
        return (
            '<g class="overlay">'
            f'<line class="guide" {_attrs(x1=overlay.marker_x, y1=0.0, x2=overlay.marker_x, y2=overlay.guide_height, stroke=style.reference_color, stroke_width=1, stroke_dasharray=style.dash_pattern)}/>'
            f'<rect class="highlight" {_attrs(x=overlay.block_x, y=0.0, width=overlay.block_width, height=overlay.guide_height, fill="lightgray", opacity=0.3)}/>'
            f'<circle class="marker" {_attrs(cx=overlay.marker_x, cy=overlay.marker_y, r=style.marker_radius, fill="white", stroke=overlay.marker_color, stroke_width=2, filter=glow)}/>'
            "</g>"
        )

    @staticmethod
    def _tooltip(overlay: CursorOverlay) -> str:
        return (
            f'<g class="tooltip" transform="translate({_num(overlay.tooltip_left)},{_num(overlay.tooltip_top)})">'
            '<rect x="0" y="-14" width="90" height="20" fill="#fff" stroke="#ccc"/>'
            f'<text x="5" y="0">{escape(overlay.tooltip_text)}</text>'
            "</g>"
        )
