"""Area estimator: integrates the convexified borders into a hull area."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from iconshape.engine.context import BoundingBox


@dataclass(frozen=True)
class AreaEstimate:
    hull_area: float
    box_area: float

    @property
    def hull_by_box(self) -> float:
        """How much of the bounding box the hull covers. Circle ≈ π/4, square = 1."""
        return self.hull_area / self.box_area


def estimate_area(
    left: NDArray[np.float64],
    right: NDArray[np.float64],
    box: BoundingBox,
    height: int,
) -> AreaEstimate:
    """Sum ``right - left + 1`` over every row of ``[0, height)`` with a valid border."""
    lo = left[:height]
    hi = right[:height]
    valid = lo > -1
    hull_area = float(np.sum(hi[valid] - lo[valid] + 1))
    return AreaEstimate(hull_area=hull_area, box_area=float(box.area))
