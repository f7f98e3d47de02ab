"""Minimum content insets reserved around the chart."""
from __future__ import annotations

from radarweb.core.constants import BASE_OFFSET_FALLBACK, LEGEND_OFFSET_FACTOR


def legend_offset(legend_font_point_size: float) -> float:
    """Inset reserved for the legend so axis content does not overlap it."""
    return legend_font_point_size * LEGEND_OFFSET_FACTOR


def base_offset(x_axis_enabled: bool, x_axis_labels_enabled: bool, rotated_label_width: float) -> float:
    """Inset that keeps the category labels from clipping."""
    if x_axis_enabled and x_axis_labels_enabled:
        return rotated_label_width
    return BASE_OFFSET_FALLBACK
