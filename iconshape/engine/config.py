"""Normalizer configuration: thresholds used by the scan and match stages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from iconshape.engine.constants import (
    BOUND_RATIO_MARGIN,
    MIN_VISIBLE_ALPHA,
    PIXEL_DIFF_PERCENTAGE_THRESHOLD,
)

if TYPE_CHECKING:
    from iconshape.config import Settings


@dataclass(frozen=True)
class NormalizerConfig:
    """Controls pixel visibility and shape-match tolerances."""

    # Coverage a pixel must exceed to be visible (0-255)
    min_visible_alpha: int = MIN_VISIBLE_ALPHA

    # Max |width/height - 1| of the icon box before shape matching is skipped
    bound_ratio_margin: float = BOUND_RATIO_MARGIN

    # Differing pixel fraction below which the icon matches the mask
    pixel_diff_threshold: float = PIXEL_DIFF_PERCENTAGE_THRESHOLD

    # Width (px) of the mask outline band excluded from the differing count.
    # 0 disables the band.
    mask_outline_width: float = 2.0

    @classmethod
    def from_settings(cls, settings: Settings) -> NormalizerConfig:
        return cls(mask_outline_width=settings.mask_outline_width)
