"""Calibrated constants for icon normalization.

The area factors encode the launcher design target for a 48dp icon drawn
on a 24x24 keyline grid: a square icon may cover 375/576 of the icon
square, a circular icon 380/576. They must not be tuned.
"""

import math

# Ratio of visible area to full icon size for a square shaped icon.
MAX_SQUARE_AREA_FACTOR = 375.0 / 576

# Ratio of visible area to full icon size for a circular shaped icon.
MAX_CIRCLE_AREA_FACTOR = 380.0 / 576

# Area of a circle inscribed in its bounding square.
CIRCLE_AREA_BY_RECT = math.pi / 4

# Interpolates the area factor between the circle and square targets.
LINEAR_SCALE_SLOPE = (MAX_CIRCLE_AREA_FACTOR - MAX_SQUARE_AREA_FACTOR) / (1 - CIRCLE_AREA_BY_RECT)

# Coverage (0-255) a pixel must exceed to count as visible.
MIN_VISIBLE_ALPHA = 40

# Shape matching: allowed deviation of the bounding box from a square.
BOUND_RATIO_MARGIN = 0.05

# Shape matching: fraction of differing pixels still accepted as a match.
PIXEL_DIFF_PERCENTAGE_THRESHOLD = 0.005

# Sentinel for border rows without a visible pixel.
NO_BORDER = -1.0

# ── Shadow padding (fractions of the icon size) ──

BLUR_FACTOR = 0.5 / 48
KEY_SHADOW_DISTANCE = 1.0 / 48
HALF_DISTANCE = 0.5
