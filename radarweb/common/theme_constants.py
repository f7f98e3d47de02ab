# radarweb/common/theme_constants.py
#
# Default colors shared by core/ and gui/ (RGBA, 0.0-1.0).
# Runtime-mutable values do not belong here.

from radarweb.core.constants import DEFAULT_HOLE_COLOR, DEFAULT_WEB_COLOR

WEB_COLOR = DEFAULT_WEB_COLOR
INNER_WEB_COLOR = DEFAULT_WEB_COLOR
HOLE_COLOR = DEFAULT_HOLE_COLOR
HIGHLIGHT_COLOR = (1.0, 0.85, 0.2, 1.0)

# One outline color per overlaid series, cycled when there are more series
SERIES_COLORS = (
    (0.3, 0.6, 0.9, 0.9),
    (0.9, 0.5, 0.2, 0.9),
    (0.3, 0.75, 0.35, 0.9),
    (0.7, 0.35, 0.8, 0.9),
)


def series_color(index: int) -> tuple:
    return SERIES_COLORS[index % len(SERIES_COLORS)]
