"""Shape matcher: does the icon's silhouette equal a given mask?

The mask is fitted into the icon's bounding box and XOR-ed with the icon's
visible pixels. A thin band around the mask outline is ignored, since edge
pixels differ between any two rasterizations of the same curve.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np
from scipy.ndimage import binary_dilation, binary_erosion

from iconshape.engine.config import NormalizerConfig
from iconshape.engine.context import BoundingBox, ScanBuffers
from iconshape.render.mask import MaskPath
from iconshape.render.rasterizer import rasterize_geometry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShapeMatch:
    matches: bool
    # Fraction of box pixels where icon and mask disagree
    differing_fraction: float = 1.0
    # False when the aspect gate rejected the icon before rasterizing
    checked: bool = True


def is_square_enough(box: BoundingBox, margin: float) -> bool:
    return abs(box.aspect_ratio - 1) <= margin


def _outline_band(mask: np.ndarray, width: float) -> np.ndarray | None:
    if width <= 0:
        return None
    radius = max(1, int(math.ceil(width / 2)))
    outer = binary_dilation(mask, iterations=radius)
    inner = binary_erosion(mask, iterations=radius)
    return outer & ~inner


def match_shape(
    buffers: ScanBuffers,
    box: BoundingBox,
    mask: MaskPath,
    config: NormalizerConfig | None = None,
) -> ShapeMatch:
    """Compare the visible pixels inside ``box`` with ``mask`` fitted to the box."""
    config = config or NormalizerConfig()

    if not is_square_enough(box, config.bound_ratio_margin):
        logger.debug(
            "Shape %s skipped: box %dx%d is not square (ratio %.3f)",
            mask.name,
            box.width,
            box.height,
            box.aspect_ratio,
        )
        return ShapeMatch(matches=False, checked=False)

    region = buffers.surface[box.top : box.bottom + 1, box.left : box.right + 1]
    icon = region > config.min_visible_alpha

    fitted = mask.fitted(0, 0, box.width, box.height)
    shape = rasterize_geometry(fitted, (box.height, box.width)) > 0

    diff = icon ^ shape
    band = _outline_band(shape, config.mask_outline_width)
    if band is not None:
        diff &= ~band

    differing = int(np.count_nonzero(diff))
    fraction = differing / box.area
    matches = fraction < config.pixel_diff_threshold
    logger.debug("Shape %s: %d differing pixels (%.4f), match=%s", mask.name, differing, fraction, matches)
    return ShapeMatch(matches=matches, differing_fraction=fraction)
