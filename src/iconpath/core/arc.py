"""Elliptical arc to cubic Bezier conversion.

Implements the SVG endpoint-to-center arc parameterization and
approximates the resulting elliptical arc with cubic Bezier segments of
at most 90 degrees each.
"""

import math

from iconpath.domain import CubicCurve

# Largest angular span covered by a single cubic segment
MAX_SEGMENT_ANGLE = math.pi / 2


def _vector_angle(ux: float, uy: float, vx: float, vy: float) -> float:
    """Signed angle from vector u to vector v in radians."""
    return math.atan2(ux * vy - uy * vx, ux * vx + uy * vy)


def _straight_cubic(x1: float, y1: float, x2: float, y2: float) -> CubicCurve:
    """Cubic that traces the straight line from (x1, y1) to (x2, y2)."""
    dx = x2 - x1
    dy = y2 - y1
    return CubicCurve(
        x1 + dx / 3,
        y1 + dy / 3,
        x1 + 2 * dx / 3,
        y1 + 2 * dy / 3,
        x2,
        y2,
    )


def arc_to_cubic(
    x1: float,
    y1: float,
    rx: float,
    ry: float,
    rotation: float,
    large_arc: bool,
    sweep: bool,
    x2: float,
    y2: float,
) -> list[CubicCurve]:
    """Approximate an SVG elliptical arc with cubic Bezier segments.

    Degenerate input is not an error: identical endpoints yield no
    segments and a zero radius yields a single straight cubic.

    Args:
        x1: Start point X (the current point)
        y1: Start point Y
        rx: Ellipse X radius
        ry: Ellipse Y radius
        rotation: Rotation of the ellipse X axis in degrees
        large_arc: Choose the arc spanning more than 180 degrees
        sweep: Traverse in the positive-angle direction
        x2: End point X
        y2: End point Y

    Returns:
        Cubic segments in traversal order, the last ending exactly at (x2, y2)

    Examples:
        >>> arc_to_cubic(0, 0, 5, 5, 0, False, True, 0, 0)
        []
        >>> len(arc_to_cubic(0, 0, 5, 5, 0, False, True, 10, 0))
        2
    """
    if x1 == x2 and y1 == y2:
        return []

    rx = abs(rx)
    ry = abs(ry)
    if rx == 0 or ry == 0:
        return [_straight_cubic(x1, y1, x2, y2)]

    phi = math.radians(rotation % 360)
    cos_phi = math.cos(phi)
    sin_phi = math.sin(phi)

    # Half chord in the ellipse's local frame
    dx2 = (x1 - x2) / 2
    dy2 = (y1 - y2) / 2
    x1p = cos_phi * dx2 + sin_phi * dy2
    y1p = -sin_phi * dx2 + cos_phi * dy2

    # Radius correction: grow the ellipse until the chord fits
    lam = (x1p * x1p) / (rx * rx) + (y1p * y1p) / (ry * ry)
    if lam > 1:
        scale = math.sqrt(lam)
        rx *= scale
        ry *= scale

    rx_sq = rx * rx
    ry_sq = ry * ry
    num = rx_sq * ry_sq - rx_sq * y1p * y1p - ry_sq * x1p * x1p
    den = rx_sq * y1p * y1p + ry_sq * x1p * x1p
    coef = math.sqrt(max(0.0, num / den))
    if large_arc == sweep:
        coef = -coef

    cxp = coef * (rx * y1p / ry)
    cyp = coef * -(ry * x1p / rx)

    cx = cos_phi * cxp - sin_phi * cyp + (x1 + x2) / 2
    cy = sin_phi * cxp + cos_phi * cyp + (y1 + y2) / 2

    ux = (x1p - cxp) / rx
    uy = (y1p - cyp) / ry
    vx = (-x1p - cxp) / rx
    vy = (-y1p - cyp) / ry

    theta1 = _vector_angle(1.0, 0.0, ux, uy)
    delta_theta = _vector_angle(ux, uy, vx, vy)

    if not sweep and delta_theta > 0:
        delta_theta -= 2 * math.pi
    elif sweep and delta_theta < 0:
        delta_theta += 2 * math.pi

    # Tolerance keeps exact quarter turns from spilling into an extra segment
    segment_count = max(1, math.ceil(abs(delta_theta) / MAX_SEGMENT_ANGLE - 1e-9))
    delta = delta_theta / segment_count
    k = 4 / 3 * math.tan(delta / 4)

    def to_path_space(px: float, py: float) -> tuple[float, float]:
        ex = rx * px
        ey = ry * py
        return (cx + cos_phi * ex - sin_phi * ey, cy + sin_phi * ex + cos_phi * ey)

    segments: list[CubicCurve] = []
    angle = theta1
    for i in range(segment_count):
        next_angle = angle + delta
        cos1 = math.cos(angle)
        sin1 = math.sin(angle)
        cos2 = math.cos(next_angle)
        sin2 = math.sin(next_angle)

        c1x, c1y = to_path_space(cos1 - k * sin1, sin1 + k * cos1)
        c2x, c2y = to_path_space(cos2 + k * sin2, sin2 - k * cos2)
        if i == segment_count - 1:
            ex, ey = x2, y2
        else:
            ex, ey = to_path_space(cos2, sin2)

        segments.append(CubicCurve(c1x, c1y, c2x, c2y, ex, ey))
        angle = next_angle

    return segments
