"""Radial (value) axis calibration.

NO Kivy imports - all functions are pure and deterministic, apart from the
calibrator's cached range which is replaced on every calibration.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from radarweb.core.primitives import Rect


@dataclass(frozen=True)
class AxisRange:
    """Calibrated extent of an axis. Invariant: maximum >= minimum."""

    minimum: float = 0.0
    maximum: float = 0.0

    @property
    def range(self) -> float:
        return self.maximum - self.minimum

    @property
    def is_degenerate(self) -> bool:
        """True when nothing can be scaled against this range."""
        return not self.range > 0.0


EMPTY_RANGE = AxisRange(0.0, 0.0)


def _finite_or_zero(value: float) -> float:
    value = float(value)
    return value if math.isfinite(value) else 0.0


class RadialAxisCalibrator:
    """Owns the cached AxisRange of the radial axis (only the "left" side is used).

    Args:
        forced_minimum: explicit axis minimum, wins over the dataset's minimum
        forced_maximum: explicit axis maximum, wins over the dataset's maximum
    """

    def __init__(
        self,
        forced_minimum: Optional[float] = None,
        forced_maximum: Optional[float] = None,
    ) -> None:
        self.forced_minimum = forced_minimum
        self.forced_maximum = forced_maximum
        self._axis_range = EMPTY_RANGE
        self._x_range = EMPTY_RANGE

    @property
    def axis_range(self) -> AxisRange:
        return self._axis_range

    @property
    def x_range(self) -> AxisRange:
        return self._x_range

    def calibrate(self, dataset_min: float, dataset_max: float) -> AxisRange:
        """Compute and cache the radial axis range.

        Non-finite extrema (an empty dataset) collapse to 0. A forced bound that
        crosses the other bound is resolved by swapping, keeping maximum >= minimum.
        """
        minimum = _finite_or_zero(dataset_min)
        maximum = _finite_or_zero(dataset_max)
        if self.forced_minimum is not None:
            minimum = float(self.forced_minimum)
        if self.forced_maximum is not None:
            maximum = float(self.forced_maximum)
        if maximum < minimum:
            minimum, maximum = maximum, minimum
        self._axis_range = AxisRange(minimum, maximum)
        return self._axis_range

    def calibrate_x(self, entry_count: int) -> AxisRange:
        """The category axis always spans [0, entry_count]."""
        self._x_range = AxisRange(0.0, float(max(0, entry_count)))
        return self._x_range

    def reset(self) -> None:
        self._axis_range = EMPTY_RANGE
        self._x_range = EMPTY_RANGE


def scale_factor(content_rect: Rect, axis_range: AxisRange) -> float:
    """Pixels per axis unit: min(width, height) / 2 / range.

    Returns 0.0 for a degenerate range; callers treat that as "nothing to draw".
    """
    if axis_range.is_degenerate:
        return 0.0
    return min(content_rect.width, content_rect.height) / 2.0 / axis_range.range
