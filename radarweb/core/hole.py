"""Central cut-out geometry."""
from __future__ import annotations


def hole_radius(outer_radius: float, radius_percent: float) -> float:
    """Radius of the center hole; only used when hole drawing is enabled.

    radius_percent is not clamped: values above 1 produce a hole at least as
    large as the chart.
    """
    return outer_radius * radius_percent
