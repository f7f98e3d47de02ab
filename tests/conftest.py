"""
Pytest configuration and shared fixtures for radarweb tests.

The five-axis fixtures use a 200x200 content rect and a 0-100 axis, so the
scale factor is exactly 1.0 and the chart radius is 100.
"""

import pytest

from radarweb.common.typed_config.models import RadarConfig
from radarweb.core.chart import RadarChart
from radarweb.core.data import RadarData
from radarweb.core.primitives import Rect


@pytest.fixture
def five_axis_data():
    """5 categories, values 0-100."""
    return RadarData.from_series(
        [[0.0, 25.0, 50.0, 75.0, 100.0]],
        labels=["a", "b", "c", "d", "e"],
    )


@pytest.fixture
def five_axis_chart(five_axis_data):
    """Rotation 0: index 0 points right (3 o'clock)."""
    return RadarChart(
        config=RadarConfig(rotation_degrees=0.0),
        data=five_axis_data,
        content_rect=Rect(0, 0, 200, 200),
    )
