"""iconshape: visual normalization of arbitrarily shaped launcher icons."""

from iconshape.engine import (
    AdaptiveScaleCache,
    IconFactory,
    IconNormalizer,
    NormalizationResult,
    NormalizerConfig,
    NormalizerPool,
)
from iconshape.render import AdaptiveIcon, AlphaIcon, IconRenderer, MaskPath, ShapeIcon, SvgIcon

__all__ = [
    "AdaptiveIcon",
    "AdaptiveScaleCache",
    "AlphaIcon",
    "IconFactory",
    "IconNormalizer",
    "IconRenderer",
    "MaskPath",
    "NormalizationResult",
    "NormalizerConfig",
    "NormalizerPool",
    "ShapeIcon",
    "SvgIcon",
]
