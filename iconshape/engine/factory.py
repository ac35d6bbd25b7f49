"""Icon factory: normalizes icons and wraps legacy ones in the adaptive mask.

A legacy icon whose silhouette does not already match the adaptive mask is
shrunk by its normalization scale and drawn as the foreground of an adaptive
icon with an opaque background, so every icon ends up with the same shape.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from iconshape.engine.context import IconBounds
from iconshape.engine.normalizer import IconNormalizer, NormalizerPool
from iconshape.engine.scale import scale_without_shadow
from iconshape.render.icons import AdaptiveIcon, IconRenderer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WrapResult:
    icon: IconRenderer
    scale: float
    bounds: IconBounds | None
    wrapped: bool = False


class IconFactory:
    def __init__(self, normalizer: IconNormalizer | NormalizerPool, wrap_legacy: bool = True) -> None:
        self.normalizer = normalizer
        self.wrap_legacy = wrap_legacy

    def normalize_and_wrap(self, icon: IconRenderer) -> WrapResult:
        """Normalize ``icon``, wrapping it into the adaptive mask when needed."""
        mask = self.normalizer.adaptive_mask

        if isinstance(icon, AdaptiveIcon):
            result = self.normalizer.get_scale(icon, adaptive=True)
            return WrapResult(icon=icon, scale=result.scale, bounds=result.bounds)

        if not self.wrap_legacy or mask is None:
            result = self.normalizer.get_scale(icon)
            return WrapResult(icon=icon, scale=result.scale, bounds=result.bounds)

        result = self.normalizer.get_scale(icon, mask=mask)
        if result.matches_mask:
            return WrapResult(icon=icon, scale=result.scale, bounds=result.bounds)

        wrapper = AdaptiveIcon(mask, foreground=icon, foreground_scale=result.scale)
        wrapped = self.normalizer.get_scale(wrapper, adaptive=True)
        logger.debug("Wrapped legacy icon at foreground scale %.4f", result.scale)
        return WrapResult(icon=wrapper, scale=wrapped.scale, bounds=wrapped.bounds, wrapped=True)

    def scale_without_shadow(self, icon: IconRenderer) -> float:
        """Normalization scale further reduced to leave room for the icon shadow."""
        result = self.normalize_and_wrap(icon)
        return scale_without_shadow(result.scale, result.bounds)
