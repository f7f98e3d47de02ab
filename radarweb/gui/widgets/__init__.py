"""Widgets package - uses lazy imports to avoid triggering Kivy initialization."""

from __future__ import annotations

from typing import Any

__all__ = ["RadarChartWidget", "KivyRadarRenderer"]


def __getattr__(name: str) -> Any:
    """Lazy load Kivy-dependent widgets on first access."""
    if name == "RadarChartWidget":
        from radarweb.gui.widgets.radar_chart import RadarChartWidget

        return RadarChartWidget
    if name == "KivyRadarRenderer":
        from radarweb.gui.widgets.radar_chart import KivyRadarRenderer

        return KivyRadarRenderer
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
