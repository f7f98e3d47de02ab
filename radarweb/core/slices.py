"""Slice geometry: forward mapping (category index, value) -> screen point.

NO Kivy imports - all functions are pure and deterministic.

Coordinate System (screen, see primitives.py):
- Angle 0 degrees = right (3 o'clock), clockwise is positive
- The chart rotation is added to every angle; the default rotation of
  270 degrees puts index 0 at 12 o'clock (top)
"""
from __future__ import annotations

import math

from radarweb.core.axis import AxisRange
from radarweb.core.constants import FULL_CIRCLE_DEG
from radarweb.core.primitives import Point, Rect


def slice_angle_degrees(entry_count: int) -> float:
    """Angle occupied by one slice: 360 / entry_count.

    Callers must check entry_count > 0 first; 0.0 is returned otherwise.
    """
    if entry_count <= 0:
        return 0.0
    return FULL_CIRCLE_DEG / entry_count


def chart_radius(content_rect: Rect) -> float:
    """Outer radius: the shorter half-dimension of the content rect."""
    return min(content_rect.width / 2.0, content_rect.height / 2.0)


def radius_for_value(value: float, axis_range: AxisRange, scale_factor: float) -> float:
    """Distance from center for a value; affine in value."""
    return (value - axis_range.minimum) * scale_factor


def polar_point(center: Point, radius: float, angle_deg: float) -> Point:
    """Move `radius` away from `center` along `angle_deg`."""
    angle_rad = math.radians(angle_deg)
    return Point(
        center.x + radius * math.cos(angle_rad),
        center.y + radius * math.sin(angle_rad),
    )


def point_for_entry(
    index: int,
    value: float,
    center: Point,
    axis_range: AxisRange,
    scale_factor: float,
    rotation_degrees: float,
    slice_angle: float,
) -> Point:
    """Map a category index and a value to an absolute screen point.

    Args:
        index: category index, 0 = first slice
        value: axis value, radius grows from axis_range.minimum
        center: chart center
        axis_range: calibrated radial axis
        scale_factor: pixels per axis unit (see axis.scale_factor)
        rotation_degrees: current chart rotation
        slice_angle: angle of one slice (see slice_angle_degrees)
    """
    radius = radius_for_value(value, axis_range, scale_factor)
    angle_deg = slice_angle * index + rotation_degrees
    return polar_point(center, radius, angle_deg)


def distance_to_center(point: Point, center: Point) -> float:
    return math.hypot(point.x - center.x, point.y - center.y)
