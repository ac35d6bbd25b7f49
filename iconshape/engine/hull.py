"""Convex hull approximation over a discretized border.

A border is a per-row x coordinate (left or right edge of the silhouette).
The pass removes local concavities and fills gap rows so that the border can
serve as a hull edge for area integration. It works in place on the scan
buffers and walks rows iteratively.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

LEFT = 1
RIGHT = -1


def convert_to_convex_array(
    xs: NDArray[np.float64],
    direction: int,
    top: int,
    bottom: int,
    angles: NDArray[np.float64] | None = None,
) -> None:
    """Make ``xs[top:bottom + 1]`` a convex border, in place.

    Args:
        xs: x coordinate per row, ``-1`` where the row has no visible pixel.
            ``xs[top]`` and ``xs[bottom]`` must be valid.
        direction: ``LEFT`` (1) for the left border, ``RIGHT`` (-1) for the right.
        top: First row (inclusive) with a valid value.
        bottom: Last row (inclusive) with a valid value.
        angles: Optional scratch array, at least ``len(xs)`` long, receiving
            the slope assigned to each row.
    """
    if angles is None:
        angles = np.zeros(len(xs))

    last = -1
    last_angle = math.inf

    for i in range(top + 1, bottom + 1):
        if xs[i] <= -1:
            continue

        if last_angle == math.inf:
            start = top
        else:
            current = (xs[i] - xs[last]) / (i - last)
            start = last
            # Concave turn: move the anchor up until the turn becomes convex.
            if (current - last_angle) * direction < 0:
                while start > top:
                    start -= 1
                    current = (xs[i] - xs[start]) / (i - start)
                    if (current - angles[start]) * direction >= 0:
                        break

        last_angle = (xs[i] - xs[start]) / (i - start)
        anchor = xs[start]
        for j in range(start, i):
            angles[j] = last_angle
            xs[j] = anchor + last_angle * (j - start)
        last = i
