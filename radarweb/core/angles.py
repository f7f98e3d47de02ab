"""Inverse mapping: screen angle -> category index.

NO Kivy imports - all functions are pure and deterministic.
"""
from __future__ import annotations

import math
from typing import List

from radarweb.core.constants import FULL_CIRCLE_DEG
from radarweb.core.primitives import Point
from radarweb.core.slices import slice_angle_degrees


def normalized_angle(angle_deg: float) -> float:
    """Map any angle into [0, 360)."""
    angle = angle_deg % FULL_CIRCLE_DEG
    # -1e-20 % 360.0 rounds up to 360.0
    if angle >= FULL_CIRCLE_DEG:
        angle = 0.0
    return angle


def angle_for_point(point: Point, center: Point) -> float:
    """Absolute angle of `point` seen from `center`, in [0, 360).

    Exact inverse of slices.polar_point's convention.
    """
    return normalized_angle(math.degrees(math.atan2(point.y - center.y, point.x - center.x)))


def reference_angle(index: int, slice_angle: float) -> float:
    """Upper half-boundary of slice `index`: slice*(i+1) - slice/2."""
    return slice_angle * (index + 1) - slice_angle / 2.0


def reference_angles(entry_count: int) -> List[float]:
    slice_angle = slice_angle_degrees(entry_count)
    return [reference_angle(i, slice_angle) for i in range(max(0, entry_count))]


def index_for_angle(absolute_angle_deg: float, rotation_degrees: float, entry_count: int) -> int:
    """Resolve the category whose slice contains an absolute screen angle.

    The first index whose reference angle is strictly greater than the
    rotation-adjusted angle wins, so a boundary angle belongs to the next
    slice. Angles past the last reference angle wrap around to index 0,
    as does a call with no entries.
    """
    angle = normalized_angle(absolute_angle_deg - rotation_degrees)
    slice_angle = slice_angle_degrees(entry_count)
    for i in range(max(0, entry_count)):
        if reference_angle(i, slice_angle) > angle:
            return i
    return 0
