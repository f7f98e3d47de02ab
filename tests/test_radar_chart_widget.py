"""Tests for the Kivy renderer (mock-based; the canvas is never drawn)."""

import os
from unittest.mock import MagicMock, patch

import pytest

pytest.importorskip("kivy")

from radarweb.common.typed_config.models import RadarConfig  # noqa: E402
from radarweb.core.chart import RadarChart  # noqa: E402
from radarweb.core.data import RadarData  # noqa: E402
from radarweb.core.primitives import Rect  # noqa: E402
from radarweb.core.renderer import Highlight  # noqa: E402

# Skip tests that import Kivy-dependent modules on CI (no display available)
_CI_SKIP = pytest.mark.skipif(
    os.environ.get("CI", "").lower() == "true", reason="Requires display - cannot import Kivy modules on headless CI"
)

MODULE = "radarweb.gui.widgets.radar_chart"


@pytest.fixture
def chart():
    return RadarChart(
        config=RadarConfig(rotation_degrees=0.0, draw_hole_enabled=False),
        data=RadarData.from_series([[0.0, 50.0, 100.0, 50.0]]),
        content_rect=Rect(0, 0, 200, 200),
    )


@_CI_SKIP
class TestKivyRadarRenderer:
    @patch(f"{MODULE}.Ellipse")
    @patch(f"{MODULE}.Line")
    @patch(f"{MODULE}.Color")
    def test_data_polygon_is_flipped_and_closed(self, _color, line, _ellipse, chart):
        from radarweb.gui.widgets.radar_chart import KivyRadarRenderer

        renderer = KivyRadarRenderer(MagicMock(), height=200.0)
        renderer.draw_data(chart)

        points = line.call_args.kwargs["points"]
        assert len(points) == (4 + 1) * 2
        assert points[:2] == points[-2:]
        # index 1 (angle 90, y-down) sits below center on screen -> above center in Kivy
        assert points[2] == pytest.approx(100.0)
        assert points[3] == pytest.approx(200.0 - 150.0)

    @patch(f"{MODULE}.Ellipse")
    @patch(f"{MODULE}.Line")
    @patch(f"{MODULE}.Color")
    def test_extras_draw_one_line_per_eligible_spoke(self, _color, line, ellipse, chart):
        from radarweb.gui.widgets.radar_chart import KivyRadarRenderer

        chart.skip_web_line_count = 1
        KivyRadarRenderer(MagicMock(), height=200.0).draw_extras(chart)

        spokes = len(chart.web_spokes())
        rings = len([r for r in chart.web_rings() if len(r[1]) > 1])
        assert spokes == 2
        assert line.call_count == spokes + rings
        assert ellipse.call_count == spokes

    @patch(f"{MODULE}.Ellipse")
    @patch(f"{MODULE}.Line")
    @patch(f"{MODULE}.Color")
    def test_spoke_bullet_uses_hole_radius(self, _color, _line, ellipse, chart):
        from radarweb.gui.widgets.radar_chart import KivyRadarRenderer

        KivyRadarRenderer(MagicMock(), height=200.0).draw_extras(chart)

        radius = chart.web_line_hole_radius
        _, end = chart.web_spokes()[0]
        kwargs = ellipse.call_args_list[0].kwargs
        assert kwargs["size"] == pytest.approx((radius * 2, radius * 2))
        assert kwargs["pos"] == pytest.approx((end.x - radius, 200.0 - end.y - radius))

    @patch(f"{MODULE}.Ellipse")
    @patch(f"{MODULE}.Color")
    def test_highlight_without_point_is_skipped(self, _color, ellipse, chart):
        from radarweb.gui.widgets.radar_chart import KivyRadarRenderer

        renderer = KivyRadarRenderer(MagicMock(), height=200.0)
        renderer.draw_highlighted(chart, [Highlight(index=0), chart.highlight_index(2)])
        assert ellipse.call_count == 1
