"""Icon normalization engine."""

from iconshape.engine.cache import AdaptiveScaleCache
from iconshape.engine.config import NormalizerConfig
from iconshape.engine.context import BoundingBox, IconBounds, NormalizationResult, ScaleMetrics
from iconshape.engine.factory import IconFactory, WrapResult
from iconshape.engine.normalizer import IconNormalizer, NormalizerPool

__all__ = [
    "AdaptiveScaleCache",
    "BoundingBox",
    "IconBounds",
    "IconFactory",
    "IconNormalizer",
    "NormalizationResult",
    "NormalizerConfig",
    "NormalizerPool",
    "ScaleMetrics",
    "WrapResult",
]
