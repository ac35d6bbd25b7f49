"""Icon renderers: the capability the normalizer consumes.

Anything with an ``intrinsic_size`` and a ``render(width, height)`` method
returning an 8-bit ``(height, width)`` coverage array can be normalized.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from iconshape.render.mask import MaskPath
from iconshape.render.rasterizer import (
    FULL_COVERAGE,
    rasterize_geometry,
    rasterize_svg_alpha,
    resize_coverage,
)


@runtime_checkable
class IconRenderer(Protocol):
    @property
    def intrinsic_size(self) -> tuple[int, int] | None:
        """Natural (width, height) in pixels, or None if the icon has no size."""
        ...

    def render(self, width: int, height: int) -> NDArray[np.uint8]:
        """Draw the icon filling ``width`` x ``height``; returns coverage[y, x]."""
        ...


class ShapeIcon:
    """Solid silhouette of a mask, optionally inset within the render area."""

    def __init__(
        self,
        mask: MaskPath,
        intrinsic_size: tuple[int, int] | None = None,
        inset: float = 0.0,
        alpha: int = FULL_COVERAGE,
    ) -> None:
        self.mask = mask
        self._intrinsic_size = intrinsic_size
        self.inset = inset
        self.alpha = alpha

    @property
    def intrinsic_size(self) -> tuple[int, int] | None:
        return self._intrinsic_size

    def render(self, width: int, height: int) -> NDArray[np.uint8]:
        dx = width * self.inset
        dy = height * self.inset
        geometry = self.mask.fitted(dx, dy, width - 2 * dx, height - 2 * dy)
        return rasterize_geometry(geometry, (height, width), alpha=self.alpha)


class AlphaIcon:
    """Bitmap icon: an alpha array or a Pillow image, resampled on demand."""

    def __init__(self, source: NDArray[np.uint8] | Image.Image) -> None:
        if isinstance(source, Image.Image):
            if "A" in source.getbands():
                source = np.array(source.getchannel("A"))
            else:
                source = np.array(source.convert("L"))
        coverage = np.asarray(source)
        if coverage.ndim != 2:
            raise ValueError(f"Expected a 2-D coverage array, got shape {coverage.shape}")
        self.coverage = np.clip(coverage, 0, FULL_COVERAGE).astype(np.uint8)

    @property
    def intrinsic_size(self) -> tuple[int, int] | None:
        h, w = self.coverage.shape
        return (w, h)

    def render(self, width: int, height: int) -> NDArray[np.uint8]:
        return resize_coverage(self.coverage, width, height)


class SvgIcon:
    """Vector icon rendered through CairoSVG."""

    def __init__(self, svg_code: str, intrinsic_size: tuple[int, int] | None = None) -> None:
        self.svg_code = svg_code
        self._intrinsic_size = intrinsic_size

    @property
    def intrinsic_size(self) -> tuple[int, int] | None:
        return self._intrinsic_size

    def render(self, width: int, height: int) -> NDArray[np.uint8]:
        return rasterize_svg_alpha(self.svg_code, width, height)


class AdaptiveIcon:
    """Icon whose silhouette is the shared adaptive mask.

    The background fills the whole mask; the optional foreground is drawn
    centred at ``foreground_scale`` and clipped to the mask.
    """

    def __init__(
        self,
        mask: MaskPath,
        foreground: IconRenderer | None = None,
        foreground_scale: float = 1.0,
        background_alpha: int = FULL_COVERAGE,
    ) -> None:
        self.mask = mask
        self.foreground = foreground
        self.foreground_scale = foreground_scale
        self.background_alpha = background_alpha

    @property
    def intrinsic_size(self) -> tuple[int, int] | None:
        return None

    def render(self, width: int, height: int) -> NDArray[np.uint8]:
        shape = rasterize_geometry(self.mask.fitted(0, 0, width, height), (height, width))
        out = np.where(shape > 0, np.uint8(self.background_alpha), np.uint8(0))

        if self.foreground is not None:
            fw = max(1, round(width * self.foreground_scale))
            fh = max(1, round(height * self.foreground_scale))
            fg = np.asarray(self.foreground.render(fw, fh), dtype=np.uint8)
            top = (height - fh) // 2
            left = (width - fw) // 2
            # Foreground larger than the canvas is cropped around its centre
            src_top = max(0, -top)
            src_left = max(0, -left)
            dst_top = max(0, top)
            dst_left = max(0, left)
            h = min(fh - src_top, height - dst_top)
            w = min(fw - src_left, width - dst_left)
            region = out[dst_top : dst_top + h, dst_left : dst_left + w]
            np.maximum(region, fg[src_top : src_top + h, src_left : src_left + w], out=region)
            out[shape == 0] = 0

        return out.astype(np.uint8)
