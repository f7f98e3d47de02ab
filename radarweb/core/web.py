"""Web grid planning: which spokes and rings are eligible for drawing.

NO Kivy imports - all functions are pure and deterministic. The renderer
still applies its own visibility and style decisions on top.
"""
from __future__ import annotations

import math
from typing import List

from radarweb.core.axis import AxisRange
from radarweb.core.constants import (
    MAX_Y_AXIS_LABEL_COUNT,
    MIN_Y_AXIS_LABEL_COUNT,
    WEB_LINE_HOLE_FACTOR,
)

_LEVEL_EPSILON = 1e-9


def clamp_skip_count(skip_count: int) -> int:
    """Negative skip counts mean "skip nothing"."""
    return max(0, int(skip_count))


def is_spoke_eligible(index: int, skip_count: int) -> bool:
    """True for every (skip_count + 1)-th spoke, starting at index 0.

    skip_count = 1 -> one spoke is skipped in between.
    """
    return skip_count == 0 or index % (skip_count + 1) == 0


def eligible_spokes(entry_count: int, skip_count: int) -> List[int]:
    skip_count = clamp_skip_count(skip_count)
    return [i for i in range(max(0, entry_count)) if is_spoke_eligible(i, skip_count)]


def inner_line_hole_radius(web_line_width: float) -> float:
    """Radius of the bullet drawn at the end of each web spoke."""
    return web_line_width * WEB_LINE_HOLE_FACTOR


def round_to_next_significant(number: float) -> float:
    """Round to one significant digit (0.0234 -> 0.02, 873 -> 900)."""
    if not math.isfinite(number) or number == 0.0:
        return 0.0
    digits = math.ceil(math.log10(abs(number)))
    magnitude = 10.0 ** (1 - digits)
    return round(number * magnitude) / magnitude


def ring_levels(axis_range: AxisRange, label_count: int) -> List[float]:
    """Axis values that get a concentric ring, on a "nice" interval.

    Args:
        axis_range: calibrated radial axis
        label_count: requested number of rings, clamped to [2, 25]

    Returns:
        Ascending values within [minimum, maximum]; empty for a degenerate range.
    """
    if axis_range.is_degenerate:
        return []
    label_count = min(MAX_Y_AXIS_LABEL_COUNT, max(MIN_Y_AXIS_LABEL_COUNT, label_count))

    interval = round_to_next_significant(axis_range.range / label_count)
    if interval <= 0.0:
        return []
    magnitude = 10.0 ** math.floor(math.log10(interval))
    if int(interval / magnitude) > 5:
        # 7 -> 10, 0.8 -> 1
        interval = 10.0 * magnitude

    # tolerate float error such as 0.3 / 0.1 == 2.9999999999999996
    first = math.ceil(axis_range.minimum / interval - _LEVEL_EPSILON) * interval
    last = math.floor(axis_range.maximum / interval + _LEVEL_EPSILON) * interval
    if last < first:
        return []
    count = int(round((last - first) / interval)) + 1
    return [first + i * interval for i in range(count)]
