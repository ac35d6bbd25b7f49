"""Scale calculator: maps hull coverage to a visual normalization scale.

The hull/box ratio tells how round versus square the silhouette is. Round
shapes may cover MAX_CIRCLE_AREA_FACTOR of the icon square, square ones
MAX_SQUARE_AREA_FACTOR, anything in between is interpolated linearly. The
icon is scaled down (never up) until its hull covers that fraction.
"""

from __future__ import annotations

import math

from iconshape.engine.area import AreaEstimate
from iconshape.engine.constants import (
    BLUR_FACTOR,
    CIRCLE_AREA_BY_RECT,
    HALF_DISTANCE,
    KEY_SHADOW_DISTANCE,
    LINEAR_SCALE_SLOPE,
    MAX_CIRCLE_AREA_FACTOR,
    MAX_SQUARE_AREA_FACTOR,
)
from iconshape.engine.context import BoundingBox, IconBounds, ScaleMetrics


def required_area_factor(hull_by_box: float) -> float:
    """Target fraction of the icon square the hull should cover."""
    if hull_by_box < CIRCLE_AREA_BY_RECT:
        return MAX_CIRCLE_AREA_FACTOR
    return MAX_SQUARE_AREA_FACTOR + LINEAR_SCALE_SLOPE * (1 - hull_by_box)


def compute_scale(estimate: AreaEstimate, width: int, height: int) -> tuple[float, ScaleMetrics]:
    """Scale for an icon rendered at ``width`` x ``height`` with the given hull."""
    scale_required = required_area_factor(estimate.hull_by_box)
    area_scale = estimate.hull_area / (width * height)
    # sqrt because the scale applies to both width and height
    if area_scale > scale_required:
        scale = math.sqrt(scale_required / area_scale)
    else:
        scale = 1.0

    metrics = ScaleMetrics(
        hull_area=estimate.hull_area,
        box_area=estimate.box_area,
        hull_by_box=estimate.hull_by_box,
        area_scale=area_scale,
        scale_required=scale_required,
    )
    return scale, metrics


def icon_bounds(box: BoundingBox, width: int, height: int) -> IconBounds:
    """Fractional distance of the visible box from each edge of the render."""
    return IconBounds(
        left=box.left / width,
        top=box.top / height,
        right=1 - box.right / width,
        bottom=1 - box.bottom / height,
    )


def scale_for_bounds(bounds: IconBounds) -> float:
    """Extra down-scale needed to leave room for the icon's blur and key shadow.

    Top, left and right need BLUR_FACTOR of free space; the bottom needs room
    for the blur plus the key shadow offset.
    """
    scale = 1.0

    min_side = min(bounds.left, bounds.right, bounds.top)
    if min_side < BLUR_FACTOR:
        scale = (HALF_DISTANCE - BLUR_FACTOR) / (HALF_DISTANCE - min_side)

    bottom_space = BLUR_FACTOR + KEY_SHADOW_DISTANCE
    if bounds.bottom < bottom_space:
        scale = min(scale, (HALF_DISTANCE - bottom_space) / (HALF_DISTANCE - bounds.bottom))
    return scale


def scale_without_shadow(scale: float, bounds: IconBounds | None) -> float:
    """Scale for drawing an icon that must keep space for a shadow added later."""
    if bounds is None:
        return scale
    return min(scale, scale_for_bounds(bounds))


def normalized_circle_size(size: int) -> int:
    """Diameter of the normalized circle that fits inside a ``size`` x ``size`` square."""
    area = size * size * MAX_CIRCLE_AREA_FACTOR
    return round(math.sqrt(4 * area / math.pi))
