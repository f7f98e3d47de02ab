# radarweb/common/typed_config/models.py
#
# Frozen dataclass for the radar chart options plus conversion helpers.

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from radarweb.core.constants import (
    DEFAULT_HOLE_RADIUS_PERCENT,
    DEFAULT_INNER_WEB_LINE_WIDTH,
    DEFAULT_ROTATION_DEG,
    DEFAULT_WEB_ALPHA,
    DEFAULT_WEB_LINE_WIDTH,
    DEFAULT_Y_AXIS_LABEL_COUNT,
    MAX_Y_AXIS_LABEL_COUNT,
    MIN_Y_AXIS_LABEL_COUNT,
)

_TRUE_STRINGS = frozenset({"true", "1", "yes"})
_FALSE_STRINGS = frozenset({"false", "0", "no"})


# =============================================================================
# Helper Functions
# =============================================================================


def safe_int(value: Any, default: int) -> int:
    """int conversion. None/bool/float/unparseable values return default.

    Note:
        bool is a subclass of int but returns default, so True does not
        silently become 1. float returns default to avoid truncation.
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def safe_float(value: Any, default: float) -> float:
    """float conversion. None/bool/non-finite/unparseable values return default."""
    if value is None:
        return default
    if isinstance(value, bool):
        return default
    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    return result if math.isfinite(result) else default


def safe_optional_float(value: Any) -> float | None:
    """Like safe_float, but "unset" (None, "", invalid) stays None."""
    if value is None or value == "":
        return None
    sentinel = math.nan
    result = safe_float(value, sentinel)
    return None if math.isnan(result) else result


def safe_bool(value: Any, default: bool = False) -> bool:
    """bool conversion. Unrecognized strings return default (typo guard)."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        if not value:
            return default
        lower = value.lower()
        if lower in _TRUE_STRINGS:
            return True
        if lower in _FALSE_STRINGS:
            return False
        return default
    return default


# =============================================================================
# Dataclasses
# =============================================================================


@dataclass(frozen=True)
class RadarConfig:
    """Radar chart options ("radar" section).

    Thread-safety: Immutable (frozen=True)

    Attributes:
        skip_web_line_count: spokes skipped between two drawn spokes (>= 0)
        hole_radius_percent: center cut-out size relative to the chart radius
        draw_hole_enabled: draw the center cut-out
        forced_axis_minimum: manual radial axis minimum, None = from data
        forced_axis_maximum: manual radial axis maximum, None = from data
        rotation_degrees: initial chart rotation
        web_line_width: width of the spokes
        inner_web_line_width: width of the rings
        web_alpha: grid transparency (0.0 - 1.0)
        draw_web: draw spokes and rings at all
        x_axis_enabled: category axis shown
        x_axis_labels_enabled: category labels shown
        y_axis_label_count: requested ring count, clamped to [2, 25]

    Note:
        hole_radius_percent is not clamped.
    """

    skip_web_line_count: int = 0
    hole_radius_percent: float = DEFAULT_HOLE_RADIUS_PERCENT
    draw_hole_enabled: bool = True
    forced_axis_minimum: float | None = None
    forced_axis_maximum: float | None = None
    rotation_degrees: float = DEFAULT_ROTATION_DEG
    web_line_width: float = DEFAULT_WEB_LINE_WIDTH
    inner_web_line_width: float = DEFAULT_INNER_WEB_LINE_WIDTH
    web_alpha: float = DEFAULT_WEB_ALPHA
    draw_web: bool = True
    x_axis_enabled: bool = True
    x_axis_labels_enabled: bool = True
    y_axis_label_count: int = DEFAULT_Y_AXIS_LABEL_COUNT

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "RadarConfig":
        """Build from a dict. Missing keys take defaults, bad types are normalized."""
        label_count = safe_int(d.get("y_axis_label_count"), DEFAULT_Y_AXIS_LABEL_COUNT)
        return cls(
            skip_web_line_count=max(0, safe_int(d.get("skip_web_line_count"), 0)),
            hole_radius_percent=safe_float(d.get("hole_radius_percent"), DEFAULT_HOLE_RADIUS_PERCENT),
            draw_hole_enabled=safe_bool(d.get("draw_hole_enabled"), default=True),
            forced_axis_minimum=safe_optional_float(d.get("forced_axis_minimum")),
            forced_axis_maximum=safe_optional_float(d.get("forced_axis_maximum")),
            rotation_degrees=safe_float(d.get("rotation_degrees"), DEFAULT_ROTATION_DEG),
            web_line_width=safe_float(d.get("web_line_width"), DEFAULT_WEB_LINE_WIDTH),
            inner_web_line_width=safe_float(d.get("inner_web_line_width"), DEFAULT_INNER_WEB_LINE_WIDTH),
            web_alpha=min(1.0, max(0.0, safe_float(d.get("web_alpha"), DEFAULT_WEB_ALPHA))),
            draw_web=safe_bool(d.get("draw_web"), default=True),
            x_axis_enabled=safe_bool(d.get("x_axis_enabled"), default=True),
            x_axis_labels_enabled=safe_bool(d.get("x_axis_labels_enabled"), default=True),
            y_axis_label_count=min(MAX_Y_AXIS_LABEL_COUNT, max(MIN_Y_AXIS_LABEL_COUNT, label_count)),
        )
