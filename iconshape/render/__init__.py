"""Rasterizer adapter: renders icon content into 8-bit coverage arrays."""

from iconshape.render.icons import AdaptiveIcon, AlphaIcon, IconRenderer, ShapeIcon, SvgIcon
from iconshape.render.mask import MaskPath

__all__ = [
    "AdaptiveIcon",
    "AlphaIcon",
    "IconRenderer",
    "MaskPath",
    "ShapeIcon",
    "SvgIcon",
]
