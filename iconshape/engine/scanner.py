"""Boundary scanner: per-row left/right visible extents and the overall bounding box."""

from __future__ import annotations

import numpy as np

from iconshape.engine.constants import MIN_VISIBLE_ALPHA, NO_BORDER
from iconshape.engine.context import BoundingBox, ScanBuffers


def fit_render_size(intrinsic: tuple[int, int] | None, max_size: int) -> tuple[int, int]:
    """Pick the (width, height) to render an icon at, never exceeding ``max_size``.

    Missing or non-positive dimensions fall back to ``max_size``; oversized
    icons are shrunk proportionally so the aspect ratio is preserved.
    """
    if intrinsic is None:
        return max_size, max_size

    width, height = intrinsic
    if width <= 0 or height <= 0:
        width = max_size if width <= 0 or width > max_size else width
        height = max_size if height <= 0 or height > max_size else height
    elif width > max_size or height > max_size:
        largest = max(width, height)
        width = max_size * width // largest
        height = max_size * height // largest
    return width, height


def scan_boundaries(
    buffers: ScanBuffers,
    width: int,
    height: int,
    min_visible_alpha: int = MIN_VISIBLE_ALPHA,
) -> BoundingBox | None:
    """Record the first and last visible column of every row in ``[0, height)``.

    Rows without a visible pixel get ``-1`` on both borders. Returns the
    bounding box of all visible pixels, or None if the region is empty.
    """
    region = buffers.surface[:height, :width]
    visible = region > min_visible_alpha
    rows_hit = visible.any(axis=1)

    left = buffers.left_border
    right = buffers.right_border
    left[:height] = NO_BORDER
    right[:height] = NO_BORDER

    if not rows_hit.any():
        return None

    # argmax returns the first True; on the reversed row that is the last one
    first_x = np.argmax(visible, axis=1)
    last_x = width - 1 - np.argmax(visible[:, ::-1], axis=1)

    left[:height] = np.where(rows_hit, first_x, NO_BORDER)
    right[:height] = np.where(rows_hit, last_x, NO_BORDER)

    ys = np.flatnonzero(rows_hit)
    return BoundingBox(
        left=int(first_x[rows_hit].min()),
        top=int(ys[0]),
        right=int(last_x[rows_hit].max()),
        bottom=int(ys[-1]),
    )
