"""Radar chart Kivy widget and renderer.

Geometry comes from radarweb.core in y-down screen space; Kivy is y-up, so
every y is flipped against the widget height before it reaches the canvas.
"""
from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

from kivy.clock import Clock
from kivy.graphics import Color, Ellipse, Line
from kivy.metrics import dp
from kivy.properties import NumericProperty, ObjectProperty
from kivy.uix.label import Label
from kivy.uix.relativelayout import RelativeLayout

from radarweb.common.theme_constants import (
    HIGHLIGHT_COLOR,
    HOLE_COLOR,
    INNER_WEB_COLOR,
    WEB_COLOR,
    series_color,
)
from radarweb.core.chart import RadarChart
from radarweb.core.errors import RenderError
from radarweb.core.primitives import Point, Rect
from radarweb.core.renderer import Highlight
from radarweb.core.slices import polar_point

_logger = logging.getLogger(__name__)

LABEL_RADIUS_FACTOR = 1.12


class KivyRadarRenderer:
    """Draws a RadarChart onto a Kivy canvas.

    Args:
        canvas: target canvas (usually widget.canvas.before)
        height: height of the widget, used to flip y
    """

    def __init__(self, canvas: Any, height: float) -> None:
        self.canvas = canvas
        self.height = height

    def _flat(self, points: Sequence[Point], close: bool = False) -> List[float]:
        flat: List[float] = []
        for p in points:
            flat.extend([p.x, self.height - p.y])
        if close and points:
            flat.extend(flat[:2])
        return flat

    def draw_extras(self, chart: RadarChart) -> None:
        config = chart.config
        center = chart.center
        with self.canvas:
            # 1. Spokes, with a bullet at the outer end
            Color(*WEB_COLOR[:3], config.web_alpha)
            bullet = chart.web_line_hole_radius
            for _, end in chart.web_spokes():
                Line(points=self._flat([center, end]), width=config.web_line_width)
                x, y = end.x, self.height - end.y
                Ellipse(pos=(x - bullet, y - bullet), size=(bullet * 2, bullet * 2))

            # 2. Rings
            Color(*INNER_WEB_COLOR[:3], config.web_alpha)
            for _, ring in chart.web_rings():
                if len(ring) > 1:
                    Line(points=self._flat(ring, close=True), width=config.inner_web_line_width)

    def draw_data(self, chart: RadarChart) -> None:
        if chart.data is None:
            return
        with self.canvas:
            for i, data_set in enumerate(chart.data):
                points = chart.series_points(data_set)
                if len(points) < 2:
                    continue
                Color(*series_color(i))
                Line(points=self._flat(points, close=True), width=dp(2))

            radius = chart.hole_radius
            if radius > 0:
                center = chart.center
                Color(*HOLE_COLOR)
                Ellipse(
                    pos=(center.x - radius, self.height - center.y - radius),
                    size=(radius * 2, radius * 2),
                )

    def draw_highlighted(self, chart: RadarChart, highlights: Sequence[Highlight]) -> None:
        dot = dp(8)
        with self.canvas:
            Color(*HIGHLIGHT_COLOR)
            for h in highlights:
                if h.point is None:
                    continue
                x, y = h.point.x, self.height - h.point.y
                Ellipse(pos=(x - dot / 2, y - dot / 2), size=(dot, dot))


class RadarChartWidget(RelativeLayout):
    """Radar chart widget.

    Properties:
        chart: RadarChart holding data, options and geometry
        padding: inset between the widget border and the chart content
    """

    chart = ObjectProperty(None, allownone=True)
    padding = NumericProperty(dp(45))

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        if self.chart is None:
            self.chart = RadarChart()
        self._redraw_trigger = Clock.create_trigger(self._do_redraw, 0)
        self._labels: List[Label] = []

        for prop in ("pos", "size", "chart"):
            self.bind(**{prop: self._schedule_redraw})

    def _schedule_redraw(self, *_: Any) -> None:
        self._redraw_trigger()

    def refresh(self) -> None:
        """Call after mutating chart.data in place."""
        self.chart.notify_dataset_changed()
        self._schedule_redraw()

    def _content_rect(self) -> Rect:
        return Rect(
            self.padding,
            self.padding,
            max(0.0, self.width - 2 * self.padding),
            max(0.0, self.height - 2 * self.padding),
        )

    def _do_redraw(self, *_: Any) -> None:
        self.canvas.before.clear()
        if not self.get_root_window():
            return
        if self.width <= 0 or self.height <= 0:
            return

        self.chart.content_rect = self._content_rect()
        try:
            drawn = self.chart.draw(KivyRadarRenderer(self.canvas.before, self.height))
        except RenderError as e:
            _logger.warning("Radar redraw failed: %s", e, exc_info=True)
            self.canvas.before.clear()
            return
        self._update_labels(drawn)

    def _update_labels(self, visible: bool) -> None:
        chart = self.chart
        count = chart.entry_count if visible and chart.config.x_axis_labels_enabled else 0
        while len(self._labels) < count:
            lbl = Label(
                font_size=dp(11),
                halign="center",
                valign="middle",
                size_hint=(None, None),
                size=(dp(80), dp(40)),
            )
            self._labels.append(lbl)
            self.add_widget(lbl)
        for i, lbl in enumerate(self._labels):
            if i >= count or chart.data is None:
                lbl.opacity = 0
                continue
            pos = polar_point(
                chart.center,
                chart.radius * LABEL_RADIUS_FACTOR,
                chart.slice_angle * i + chart.rotation_degrees,
            )
            lbl.opacity = 1
            lbl.text = chart.data.label_for(i)
            lbl.center = (pos.x, self.height - pos.y)

    def on_touch_down(self, touch: Any) -> bool:
        if not self.collide_point(*touch.pos):
            return super().on_touch_down(touch)
        lx, ly = self.to_local(*touch.pos)
        highlight: Optional[Highlight] = self.chart.highlight_for_point(Point(lx, self.height - ly))
        if highlight is None:
            self.chart.clear_highlights()
        else:
            self.chart.set_highlights([highlight])
        self._schedule_redraw()
        return True
