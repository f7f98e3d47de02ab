"""Screen-space value types shared by the geometry modules.

Coordinate System (screen):
- Origin at top-left, Y increases downward
- Angle 0 degrees = right (3 o'clock), angles grow clockwise
"""
from __future__ import annotations

from typing import NamedTuple


class Point(NamedTuple):
    x: float
    y: float


class Rect(NamedTuple):
    """Axis-aligned rectangle (origin + size) in the chart's local space."""

    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2.0, self.y + self.height / 2.0)

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0
