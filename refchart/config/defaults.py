"""Default configuration parameters for the reference chart."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MarginParams:
    """Plot area margins in pixels."""
    top: int = 20
    right: int = 40
    bottom: int = 30
    left: int = 40


@dataclass(frozen=True)
class ChartParams:
    """Canvas and interaction parameters."""
    reference_point: float = 110.0                   # Gain/loss threshold
    width: int = 800                                 # Outer SVG width
    height: int = 400                                # Outer SVG height
    grid_ticks: int = 10                             # Horizontal grid line count hint
    x_ticks: int = 8                                 # Time axis tick count hint
    tooltip_offset_px: int = 15                      # Tooltip offset from marker
    tooltip_decimals: int = 2                        # Price precision in tooltip
    highlight_block_days: int = 1                    # Width of hover block


@dataclass(frozen=True)
class StyleParams:
    """Visual style parameters."""
    gain_color: str = "green"
    loss_color: str = "red"
    grid_color: str = "#ccc"
    reference_color: str = "black"
    dash_pattern: str = "3,3"
    area_opacity: float = 0.25
    stroke_width: float = 3.0
    curve: str = "linear"                            # "linear" or "monotone"
    glow: bool = False                               # Glow filters on strokes and marker
    glow_std_deviation: float = 3.0
    marker_radius: float = 5.0


@dataclass(frozen=True)
class SmoothingParams:
    """Price smoothing parameters."""
    alpha: float = 0.0                               # 0.0 disables smoothing


@dataclass(frozen=True)
class DataParams:
    """Raw record parsing parameters."""
    timestamp_field: str = "timestamp"
    price_field: str = "price"


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    chart: ChartParams
    margin: MarginParams
    style: StyleParams
    smoothing: SmoothingParams
    data: DataParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        chart=ChartParams(),
        margin=MarginParams(),
        style=StyleParams(),
        smoothing=SmoothingParams(),
        data=DataParams(),
    )


def config_from_dict(values: dict) -> DefaultConfig:
    """Build a DefaultConfig from a (possibly partial) nested dictionary."""
    return DefaultConfig(
        chart=ChartParams(**values.get("chart", {})),
        margin=MarginParams(**values.get("margin", {})),
        style=StyleParams(**values.get("style", {})),
        smoothing=SmoothingParams(**values.get("smoothing", {})),
        data=DataParams(**values.get("data", {})),
    )
