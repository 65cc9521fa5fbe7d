"""
Reference chart orchestrator.

Runs one render pass per data or reference change (prepare, smooth, split,
fit scales) and answers pointer events against the latest pass. Each pass
produces a new immutable ChartFrame; pointer queries only read it, so a
newer query result simply replaces the previous overlay.
"""

from typing import Any, Iterable, Optional

from .config.defaults import DefaultConfig, get_default_config
from .data.models import Segment
from .data.preparator import SeriesPreparator
from .errors import GracefulDegradationError
from .logging import get_render_logger, log_render_pass
from .render.frame import ChartFrame, build_frame
from .render.overlay import CursorOverlay, build_overlay
from .render.svg import SvgChartRenderer
from .series.cursor import locate
from .series.segmenter import split_by_reference
from .series.smoothing import smooth_samples

logger = get_render_logger(__name__)


class ReferenceChart:
    """
    Gain/loss price chart around a fixed reference price.

    Usage:
        chart = ReferenceChart()
        chart.render(records, reference=105)
        chart.pointer_move(320)
        markup = chart.to_svg()
    """

    def __init__(self, config: Optional[DefaultConfig] = None,
                 renderer: Optional[SvgChartRenderer] = None):
        self.config = config or get_default_config()
        self.preparator = SeriesPreparator(self.config.data)
        self.renderer = renderer or SvgChartRenderer()

        self.frame: Optional[ChartFrame] = None
        self.overlay: Optional[CursorOverlay] = None

    def render(self, records: Iterable[dict[str, Any]],
               reference: Optional[float] = None) -> Optional[ChartFrame]:
        """
        Run a render pass over a batch of raw records.

        Invalid data is logged and leaves the chart empty.

        Args:
            records: Raw ``{timestamp, price}`` records in chronological order
            reference: Reference price, defaults to the configured one

        Returns:
            The new frame, or None if the batch was rejected or empty
        """
        if reference is None:
            reference = self.config.chart.reference_point

        # Previous pass is dropped whatever the outcome
        self.frame = None
        self.overlay = None

        result = self.preparator.prepare(records)
        if not result.success:
            logger.warning("Render pass aborted", reason=result.error_msg,
                           error_index=result.error_index)
            return None

        if not result.samples:
            logger.info("Render pass skipped", reason="empty series")
            return None

        samples = result.samples
        alpha = self.config.smoothing.alpha
        if alpha > 0:
            samples = tuple(smooth_samples(samples, alpha))

        segments = split_by_reference(samples, reference)
        self.frame = build_frame(samples, segments, reference, self.config)

        log_render_pass(logger, len(samples), len(segments), reference,
                        context={"smoothing_alpha": alpha} if alpha > 0 else None)
        return self.frame

    @property
    def segments(self) -> tuple[Segment, ...]:
        """
        Segments of the current pass.

        Raises:
            GracefulDegradationError: If no pass has succeeded
        """
        return self.require_frame().segments

    def require_frame(self) -> ChartFrame:
        """Current frame, raising if the chart is empty."""
        if self.frame is None:
            raise GracefulDegradationError(
                "No chart has been rendered",
                degraded_functionality="segments",
                fallback_strategy="empty chart",
            )
        return self.frame

    def pointer_move(self, pointer_x: float) -> Optional[CursorOverlay]:
        """
        Update the hover overlay for a pointer at an SVG x coordinate.

        Args:
            pointer_x: Pointer x relative to the outer SVG (margins included)

        Returns:
            The new overlay, or None when there is nothing to the left of
            the pointer (the previous overlay is kept in that case)
        """
        frame = self.frame
        if frame is None:
            return None

        query_ts = frame.x_scale.invert(pointer_x - self.config.margin.left)
        result = locate(frame.samples, query_ts)
        if result is None:
            return None

        self.overlay = build_overlay(frame, query_ts, result)
        return self.overlay

    def pointer_leave(self) -> None:
        """Hide the hover overlay."""
        self.overlay = None

    def to_svg(self) -> str:
        """SVG markup of the current frame and overlay."""
        return self.renderer.render(self.frame, self.overlay,
                                    width=self.config.chart.width,
                                    height=self.config.chart.height)
