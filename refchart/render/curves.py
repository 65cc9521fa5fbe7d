"""SVG path data for line and area shapes in pixel space"""

from typing import Sequence

Point = tuple[float, float]

CURVES = ("linear", "monotone")


def _fmt(value: float) -> str:
    return f"{value:.2f}"


def _xy(point: Point) -> str:
    return f"{_fmt(point[0])},{_fmt(point[1])}"


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def _secant(p0: Point, p1: Point) -> float:
    h = p1[0] - p0[0]
    return (p1[1] - p0[1]) / h if h else 0.0


def _interior_tangent(p0: Point, p1: Point, p2: Point) -> float:
    h0 = p1[0] - p0[0]
    h1 = p2[0] - p1[0]
    s0 = _secant(p0, p1)
    s1 = _secant(p1, p2)
    if h0 + h1 == 0:
        return 0.0
    p = (s0 * h1 + s1 * h0) / (h0 + h1)
    return (_sign(s0) + _sign(s1)) * min(abs(s0), abs(s1), 0.5 * abs(p))


def _end_tangent(p0: Point, p1: Point, t: float) -> float:
    h = p1[0] - p0[0]
    return (3 * (p1[1] - p0[1]) / h - t) / 2 if h else t


def monotone_tangents(points: Sequence[Point]) -> list[float]:
    """
    Tangents of a monotone-in-x cubic through the points (Steffen's method).

    The curve does not overshoot the data between two points.
    """
    n = len(points)
    if n < 3:
        slope = _secant(points[0], points[-1]) if n == 2 else 0.0
        return [slope] * n

    tangents = [0.0] * n
    for i in range(1, n - 1):
        tangents[i] = _interior_tangent(points[i - 1], points[i], points[i + 1])
    tangents[0] = _end_tangent(points[0], points[1], tangents[1])
    tangents[-1] = _end_tangent(points[-2], points[-1], tangents[-2])
    return tangents


def _linear_body(points: Sequence[Point]) -> str:
    return "".join(f"L{_xy(p)}" for p in points[1:])


def _monotone_body(points: Sequence[Point]) -> str:
    if len(points) < 3:
        return _linear_body(points)

    tangents = monotone_tangents(points)
    parts = []
    for i in range(len(points) - 1):
        (x0, y0), (x1, y1) = points[i], points[i + 1]
        dx = (x1 - x0) / 3
        c1 = (x0 + dx, y0 + dx * tangents[i])
        c2 = (x1 - dx, y1 - dx * tangents[i + 1])
        parts.append(f"C{_xy(c1)},{_xy(c2)},{_xy((x1, y1))}")
    return "".join(parts)


def line_path(points: Sequence[Point], curve: str = "linear") -> str:
    """
    Path data for a polyline or monotone curve through the points.

    Returns:
        SVG path "d" attribute, empty string for no points
    """
    if not points:
        return ""
    if curve not in CURVES:
        raise ValueError(f"Unknown curve '{curve}', expected one of {CURVES}")

    body = _monotone_body(points) if curve == "monotone" else _linear_body(points)
    return f"M{_xy(points[0])}{body}"


def area_path(points: Sequence[Point], baseline: float, curve: str = "linear") -> str:
    """
    Path data for the area between the curve and a horizontal baseline.

    Args:
        points: Curve points in pixel space, ascending x
        baseline: Pixel y of the baseline (the reference line)
        curve: "linear" or "monotone"
    """
    if not points:
        return ""
    top = line_path(points, curve)
    last_x = points[-1][0]
    first_x = points[0][0]
    return f"{top}L{_xy((last_x, baseline))}L{_xy((first_x, baseline))}Z"
