"""RadarChart: the owned state of one radial chart.

Holds the configuration, the dataset reference, the content rect and the
cached axis calibration. Every geometry query delegates to the pure
functions of the sibling modules. Call notify_dataset_changed() whenever the
dataset is replaced or mutated; the cached AxisRange is only valid until then.

Not thread-safe: callers serialize access per chart instance.
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence, Tuple

from radarweb.common.typed_config.models import RadarConfig
from radarweb.core import angles, hole, offsets, slices, web
from radarweb.core.axis import AxisRange, RadialAxisCalibrator, scale_factor
from radarweb.core.data import RadarData, RadarDataSet
from radarweb.core.errors import RadarWebError, RenderError
from radarweb.core.primitives import Point, Rect
from radarweb.core.renderer import Highlight, RadarRenderer

_logger = logging.getLogger(__name__)

EMPTY_RECT = Rect(0.0, 0.0, 0.0, 0.0)


class RadarChart:
    """Radial ("spider-web") chart state and geometry queries.

    Args:
        config: chart options, defaults to RadarConfig()
        data: dataset, may be set later via the `data` property
        content_rect: drawable area supplied by the layout layer
    """

    def __init__(
        self,
        config: Optional[RadarConfig] = None,
        data: Optional[RadarData] = None,
        content_rect: Rect = EMPTY_RECT,
    ) -> None:
        self._config = config or RadarConfig()
        self.calibrator = RadialAxisCalibrator(
            forced_minimum=self._config.forced_axis_minimum,
            forced_maximum=self._config.forced_axis_maximum,
        )
        self.content_rect = content_rect
        self.rotation_degrees = self._config.rotation_degrees
        self._skip_web_line_count = max(0, self._config.skip_web_line_count)
        self._highlights: List[Highlight] = []
        self._data: Optional[RadarData] = None
        if data is not None:
            self.data = data

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def config(self) -> RadarConfig:
        return self._config

    def apply_config(self, config: RadarConfig) -> None:
        """Replace the options; axis overrides trigger a recalculation."""
        override_changed = (
            config.forced_axis_minimum != self.calibrator.forced_minimum
            or config.forced_axis_maximum != self.calibrator.forced_maximum
        )
        self._config = config
        self.rotation_degrees = config.rotation_degrees
        self.skip_web_line_count = config.skip_web_line_count
        if override_changed:
            self.set_axis_override(config.forced_axis_minimum, config.forced_axis_maximum)

    @property
    def data(self) -> Optional[RadarData]:
        return self._data

    @data.setter
    def data(self, data: Optional[RadarData]) -> None:
        self._data = data
        self.notify_dataset_changed()

    def notify_dataset_changed(self) -> None:
        """Recalibrate both axes from the current dataset."""
        if self._data is None:
            self.calibrator.reset()
            self._highlights = []
            return

        axis_range = self.calibrator.calibrate(self._data.y_min(), self._data.y_max())
        self.calibrator.calibrate_x(self._data.entry_count)
        self._highlights = [h for h in self._highlights if h.index < self.entry_count]
        _logger.debug(
            "Radar recalculated: entries=%d min=%s max=%s",
            self.entry_count,
            axis_range.minimum,
            axis_range.maximum,
        )
        if self.entry_count > 0 and axis_range.is_degenerate:
            _logger.warning("Radar axis range is empty (min == max == %s); data will not be drawn", axis_range.minimum)

    def set_axis_override(self, minimum: Optional[float], maximum: Optional[float]) -> AxisRange:
        """Force (or with None, release) the radial axis bounds."""
        self.calibrator.forced_minimum = minimum
        self.calibrator.forced_maximum = maximum
        self.notify_dataset_changed()
        return self.axis_range

    # ------------------------------------------------------------------
    # Derived geometry
    # ------------------------------------------------------------------

    @property
    def skip_web_line_count(self) -> int:
        return self._skip_web_line_count

    @skip_web_line_count.setter
    def skip_web_line_count(self, value: int) -> None:
        self._skip_web_line_count = web.clamp_skip_count(value)

    @property
    def entry_count(self) -> int:
        return self._data.entry_count if self._data is not None else 0

    @property
    def axis_range(self) -> AxisRange:
        return self.calibrator.axis_range

    @property
    def chart_y_min(self) -> float:
        return self.axis_range.minimum

    @property
    def chart_y_max(self) -> float:
        return self.axis_range.maximum

    @property
    def y_range(self) -> float:
        return self.axis_range.range

    @property
    def is_empty(self) -> bool:
        """No entries or no axis range: nothing is drawn."""
        return self.entry_count == 0 or self.axis_range.is_degenerate

    @property
    def slice_angle(self) -> float:
        return slices.slice_angle_degrees(self.entry_count)

    @property
    def factor(self) -> float:
        """Pixels per axis unit."""
        return scale_factor(self.content_rect, self.axis_range)

    @property
    def radius(self) -> float:
        return slices.chart_radius(self.content_rect)

    @property
    def center(self) -> Point:
        return self.content_rect.center

    @property
    def web_line_hole_radius(self) -> float:
        return web.inner_line_hole_radius(self._config.web_line_width)

    @property
    def hole_radius(self) -> float:
        """Center cut-out radius, 0.0 when the hole is disabled."""
        if not self._config.draw_hole_enabled:
            return 0.0
        return hole.hole_radius(self.radius, self._config.hole_radius_percent)

    def required_legend_offset(self, legend_font_point_size: float) -> float:
        return offsets.legend_offset(legend_font_point_size)

    def required_base_offset(self, rotated_label_width: float) -> float:
        return offsets.base_offset(
            self._config.x_axis_enabled,
            self._config.x_axis_labels_enabled,
            rotated_label_width,
        )

    def point_for(self, index: int, value: float) -> Optional[Point]:
        """Screen point of `value` on spoke `index`; None when the chart is empty."""
        if self.is_empty:
            return None
        return slices.point_for_entry(
            index,
            value,
            self.center,
            self.axis_range,
            self.factor,
            self.rotation_degrees,
            self.slice_angle,
        )

    def series_points(self, data_set: RadarDataSet) -> List[Point]:
        """Polygon vertices of one series, skipping missing values."""
        if self.is_empty:
            return []
        points = []
        for i, value in enumerate(data_set.values):
            if value is None or not math.isfinite(value):
                continue
            point = self.point_for(i, value)
            if point is not None:
                points.append(point)
        return points

    def web_spokes(self) -> List[Tuple[int, Point]]:
        """(index, outer end) of every eligible spoke."""
        if self.is_empty:
            return []
        return [
            (i, slices.polar_point(self.center, self.radius, self.slice_angle * i + self.rotation_degrees))
            for i in web.eligible_spokes(self.entry_count, self._skip_web_line_count)
        ]

    def web_rings(self) -> List[Tuple[float, List[Point]]]:
        """(axis value, closed polygon) of every concentric ring."""
        if self.is_empty:
            return []
        rings = []
        for level in web.ring_levels(self.axis_range, self._config.y_axis_label_count):
            polygon = [self.point_for(i, level) for i in range(self.entry_count)]
            rings.append((level, [p for p in polygon if p is not None]))
        return rings

    # ------------------------------------------------------------------
    # Highlighting
    # ------------------------------------------------------------------

    def index_for_angle(self, angle_deg: float) -> int:
        """Category under an absolute screen angle, taking rotation into account."""
        return angles.index_for_angle(angle_deg, self.rotation_degrees, self.entry_count)

    def highlight_for_point(self, point: Point, data_set_index: int = 0) -> Optional[Highlight]:
        """Resolve a touch point into a highlight; None outside the chart radius."""
        if self.is_empty or self._data is None:
            return None
        if slices.distance_to_center(point, self.center) > self.radius:
            return None
        index = self.index_for_angle(angles.angle_for_point(point, self.center))
        return self.highlight_index(index, data_set_index)

    def highlight_index(self, index: int, data_set_index: int = 0) -> Optional[Highlight]:
        if self._data is None or not 0 <= data_set_index < len(self._data):
            return None
        values = self._data.data_sets[data_set_index].values
        if not 0 <= index < len(values):
            return None
        value = values[index]
        point = self.point_for(index, value) if value is not None and math.isfinite(value) else None
        return Highlight(index=index, data_set_index=data_set_index, value=value, point=point)

    @property
    def highlights(self) -> List[Highlight]:
        return list(self._highlights)

    def set_highlights(self, highlights: Sequence[Highlight]) -> None:
        self._highlights = [h for h in highlights if 0 <= h.index < self.entry_count]

    def clear_highlights(self) -> None:
        self._highlights = []

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def draw(self, renderer: RadarRenderer) -> bool:
        """Run the renderer in order: web, data, highlights.

        Returns:
            False when there was nothing to draw.

        Raises:
            RenderError: the renderer failed; chart state is left untouched.
        """
        if self.is_empty:
            _logger.debug("Radar draw skipped: entries=%d range=%s", self.entry_count, self.y_range)
            return False
        try:
            if self._config.draw_web:
                renderer.draw_extras(self)
            renderer.draw_data(self)
            if self._highlights:
                renderer.draw_highlighted(self, self.highlights)
        except RadarWebError:
            raise
        except Exception as e:
            raise RenderError(
                f"Radar renderer failed: {e}",
                user_message="The chart could not be drawn.",
                context={"renderer": type(renderer).__name__, "entries": self.entry_count},
            ) from e
        return True
