"""Renderer capability set consumed by RadarChart.draw().

The chart owns geometry; a renderer only turns geometry into pixels.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Protocol, Sequence, runtime_checkable

from radarweb.core.primitives import Point

if TYPE_CHECKING:
    from radarweb.core.chart import RadarChart


@dataclass(frozen=True)
class Highlight:
    """A highlighted category of one series."""

    index: int
    data_set_index: int = 0
    value: Optional[float] = None
    point: Optional[Point] = None


@runtime_checkable
class RadarRenderer(Protocol):
    def draw_extras(self, chart: "RadarChart") -> None:
        """Draw the web (spokes and rings)."""
        ...

    def draw_data(self, chart: "RadarChart") -> None:
        """Draw one polygon per series."""
        ...

    def draw_highlighted(self, chart: "RadarChart", highlights: Sequence[Highlight]) -> None:
        ...
