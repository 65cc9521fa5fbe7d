"""Configuration validation utilities."""

import math
from dataclasses import dataclass
from typing import Any

VALID_CURVES = ("linear", "monotone")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_chart_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate chart canvas parameters."""
        errors = []

        if "reference_point" in params:
            value = params["reference_point"]
            if not _is_number(value) or not math.isfinite(value):
                errors.append(ValidationError(
                    field="reference_point",
                    message="Must be a finite number",
                    value=value
                ))

        for name in ("width", "height", "grid_ticks", "x_ticks", "highlight_block_days"):
            if name in params:
                value = params[name]
                if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a positive integer",
                        value=value
                    ))

        for name in ("tooltip_offset_px", "tooltip_decimals"):
            if name in params:
                value = params[name]
                if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a non-negative integer",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_margin_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate plot margins."""
        errors = []

        for name, value in params.items():
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                errors.append(ValidationError(
                    field=f"margin.{name}",
                    message="Must be a non-negative integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_style_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate style parameters."""
        errors = []

        if "curve" in params and params["curve"] not in VALID_CURVES:
            errors.append(ValidationError(
                field="curve",
                message=f"Must be one of {', '.join(VALID_CURVES)}",
                value=params["curve"]
            ))

        if "area_opacity" in params:
            value = params["area_opacity"]
            if not _is_number(value) or value < 0 or value > 1:
                errors.append(ValidationError(
                    field="area_opacity",
                    message="Must be a number between 0 and 1",
                    value=value
                ))

        for name in ("stroke_width", "glow_std_deviation", "marker_radius"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value < 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a non-negative number",
                        value=value
                    ))

        if "glow" in params and not isinstance(params["glow"], bool):
            errors.append(ValidationError(
                field="glow",
                message="Must be a boolean",
                value=params["glow"]
            ))

        return errors

    @staticmethod
    def validate_smoothing_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate smoothing parameters."""
        errors = []

        if "alpha" in params:
            value = params["alpha"]
            if not _is_number(value) or value < 0 or value >= 1:
                errors.append(ValidationError(
                    field="alpha",
                    message="Must be a number in [0, 1)",
                    value=value
                ))

        return errors

    @classmethod
    def validate_config(cls, config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "chart" in config:
            errors.extend(cls.validate_chart_params(config["chart"]))

        if "margin" in config:
            errors.extend(cls.validate_margin_params(config["margin"]))

        if "style" in config:
            errors.extend(cls.validate_style_params(config["style"]))

        if "smoothing" in config:
            errors.extend(cls.validate_smoothing_params(config["smoothing"]))

        chart = config.get("chart", {})
        margin = config.get("margin", {})
        if all(k in chart for k in ("width", "height")) and margin and not errors:
            if chart["width"] <= margin.get("left", 0) + margin.get("right", 0):
                errors.append(ValidationError(
                    field="width",
                    message="Must exceed left + right margins",
                    value=chart["width"]
                ))
            if chart["height"] <= margin.get("top", 0) + margin.get("bottom", 0):
                errors.append(ValidationError(
                    field="height",
                    message="Must exceed top + bottom margins",
                    value=chart["height"]
                ))

        return errors
