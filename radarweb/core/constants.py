"""Fixed constants of the radar chart geometry."""

FULL_CIRCLE_DEG = 360.0

# Index 0 points "up" in a y-down screen space
DEFAULT_ROTATION_DEG = 270.0

# Bullet drawn at the end of each web spoke
WEB_LINE_HOLE_FACTOR = 3.0

LEGEND_OFFSET_FACTOR = 4.0
BASE_OFFSET_FALLBACK = 10.0

DEFAULT_WEB_LINE_WIDTH = 1.5
DEFAULT_INNER_WEB_LINE_WIDTH = 0.75
DEFAULT_WEB_ALPHA = 150.0 / 255.0
DEFAULT_WEB_COLOR = (122 / 255.0, 122 / 255.0, 122 / 255.0, 1.0)
DEFAULT_HOLE_COLOR = (1.0, 1.0, 1.0, 1.0)
DEFAULT_HOLE_RADIUS_PERCENT = 0.5

# Axis label (ring) count bounds
DEFAULT_Y_AXIS_LABEL_COUNT = 6
MIN_Y_AXIS_LABEL_COUNT = 2
MAX_Y_AXIS_LABEL_COUNT = 25
