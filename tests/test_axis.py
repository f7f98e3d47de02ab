"""Tests for radial axis calibration and scale factor."""

import math

import pytest

from radarweb.core.axis import AxisRange, RadialAxisCalibrator, scale_factor
from radarweb.core.primitives import Rect


class TestAxisRange:
    def test_range(self):
        assert AxisRange(10.0, 35.0).range == 25.0

    def test_zero_range_is_degenerate(self):
        assert AxisRange(3.0, 3.0).is_degenerate
        assert AxisRange().is_degenerate

    def test_positive_range_is_not_degenerate(self):
        assert not AxisRange(0.0, 1e-9).is_degenerate


class TestCalibrate:
    def test_uses_dataset_extrema(self):
        calibrator = RadialAxisCalibrator()
        result = calibrator.calibrate(-5.0, 20.0)
        assert result == AxisRange(-5.0, 20.0)
        assert calibrator.axis_range is result

    def test_forced_bounds_win(self):
        calibrator = RadialAxisCalibrator(forced_minimum=0.0, forced_maximum=100.0)
        assert calibrator.calibrate(12.0, 40.0) == AxisRange(0.0, 100.0)

    def test_forced_minimum_only(self):
        calibrator = RadialAxisCalibrator(forced_minimum=0.0)
        assert calibrator.calibrate(12.0, 40.0) == AxisRange(0.0, 40.0)

    def test_crossing_override_keeps_maximum_above_minimum(self):
        """A forced minimum above the data maximum must not invert the axis."""
        calibrator = RadialAxisCalibrator(forced_minimum=50.0)
        result = calibrator.calibrate(0.0, 10.0)
        assert result.maximum >= result.minimum
        assert result == AxisRange(10.0, 50.0)

    def test_degenerate_dataset_does_not_raise(self):
        calibrator = RadialAxisCalibrator()
        result = calibrator.calibrate(0.0, 0.0)
        assert result.minimum == result.maximum == 0.0

    @pytest.mark.parametrize("bad", [math.inf, -math.inf, math.nan])
    def test_non_finite_extrema_collapse_to_zero(self, bad):
        calibrator = RadialAxisCalibrator()
        result = calibrator.calibrate(bad, bad)
        assert result == AxisRange(0.0, 0.0)

    def test_recalibration_replaces_cache(self):
        calibrator = RadialAxisCalibrator()
        calibrator.calibrate(0.0, 10.0)
        calibrator.calibrate(0.0, 50.0)
        assert calibrator.axis_range.maximum == 50.0

    def test_x_range_spans_entry_count(self):
        calibrator = RadialAxisCalibrator()
        assert calibrator.calibrate_x(7) == AxisRange(0.0, 7.0)
        assert calibrator.calibrate_x(-1) == AxisRange(0.0, 0.0)

    def test_reset(self):
        calibrator = RadialAxisCalibrator()
        calibrator.calibrate(1.0, 2.0)
        calibrator.reset()
        assert calibrator.axis_range.is_degenerate


class TestScaleFactor:
    def test_square_rect(self):
        assert scale_factor(Rect(0, 0, 200, 200), AxisRange(0.0, 100.0)) == pytest.approx(1.0)

    def test_uses_shorter_side(self):
        assert scale_factor(Rect(0, 0, 400, 100), AxisRange(0.0, 10.0)) == pytest.approx(5.0)

    def test_zero_range_short_circuits(self):
        """No division by zero, no NaN/Inf."""
        factor = scale_factor(Rect(0, 0, 200, 200), AxisRange(5.0, 5.0))
        assert factor == 0.0
