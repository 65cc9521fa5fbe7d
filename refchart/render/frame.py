"""Immutable snapshot of one render pass"""

from dataclasses import dataclass

from ..config.defaults import DefaultConfig
from ..data.models import Sample, Segment
from .scales import LinearScale, TimeScale, price_domain, time_extent


@dataclass(frozen=True)
class ChartFrame:
    """Everything needed to draw one pass and answer pointer queries."""
    samples: tuple[Sample, ...]
    segments: tuple[Segment, ...]
    reference: float
    x_scale: TimeScale
    y_scale: LinearScale
    inner_width: float
    inner_height: float
    config: DefaultConfig

    @property
    def reference_y(self) -> float:
        """Pixel y of the reference line."""
        return self.y_scale(self.reference)


def build_frame(samples, segments, reference: float, config: DefaultConfig) -> ChartFrame:
    """
    Fit scales to the samples and the reference.

    Raises:
        InsufficientDataError: If there are no samples
    """
    margin = config.margin
    inner_width = config.chart.width - margin.left - margin.right
    inner_height = config.chart.height - margin.top - margin.bottom

    x_scale = TimeScale(domain=time_extent(samples), range=(0.0, float(inner_width)))
    y_scale = LinearScale(domain=price_domain(samples, reference),
                          range=(float(inner_height), 0.0))

    return ChartFrame(
        samples=tuple(samples),
        segments=tuple(segments),
        reference=reference,
        x_scale=x_scale,
        y_scale=y_scale,
        inner_width=inner_width,
        inner_height=inner_height,
        config=config,
    )
