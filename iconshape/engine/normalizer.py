"""Icon normalizer: runs scan → hull → area → scale (→ shape match) for one icon.

An IconNormalizer owns fixed-size scratch buffers, so one instance must not
run concurrently; ``get_scale`` holds an instance lock for the whole call.
Worker pools should prefer one instance per thread via NormalizerPool.
"""

from __future__ import annotations

import logging
import threading
import time

import numpy as np
from numpy.typing import NDArray

from iconshape.engine.area import estimate_area
from iconshape.engine.cache import AdaptiveScaleCache
from iconshape.engine.config import NormalizerConfig
from iconshape.engine.context import CachedScale, NormalizationResult, ScanBuffers
from iconshape.engine.hull import LEFT, RIGHT, convert_to_convex_array
from iconshape.engine.scale import compute_scale, icon_bounds
from iconshape.engine.scanner import fit_render_size, scan_boundaries
from iconshape.engine.shape_match import ShapeMatch, match_shape
from iconshape.render.icons import IconRenderer, ShapeIcon
from iconshape.render.mask import MaskPath

logger = logging.getLogger(__name__)


class IconNormalizer:
    """Computes the scale that gives differently shaped icons an equal visual weight."""

    def __init__(
        self,
        max_size: int,
        config: NormalizerConfig | None = None,
        adaptive_mask: MaskPath | None = None,
        cache: AdaptiveScaleCache | None = None,
    ) -> None:
        self.max_size = max_size
        self.config = config or NormalizerConfig()
        self.adaptive_mask = adaptive_mask
        self.cache = cache or AdaptiveScaleCache()
        self._buffers = ScanBuffers(max_size)
        self._lock = threading.Lock()

    @classmethod
    def for_icon_size(cls, icon_bitmap_size: int, **kwargs) -> IconNormalizer:
        # Twice the target size so the icon is never scaled down twice.
        return cls(icon_bitmap_size * 2, **kwargs)

    def get_scale(
        self,
        icon: IconRenderer,
        *,
        mask: MaskPath | None = None,
        adaptive: bool = False,
    ) -> NormalizationResult:
        """Scale (and fractional bounds) to apply before drawing ``icon``.

        Args:
            icon: Renderer producing the icon's coverage.
            mask: If given, also report whether the icon silhouette matches it.
            adaptive: The icon uses the shared adaptive mask. Its art is
                ignored and the process-wide cached result is returned.
        """
        if adaptive:
            if self.adaptive_mask is None:
                raise ValueError("Adaptive icon requested but no adaptive mask is configured")
            entry = self.cache.get_or_compute(self._compute_adaptive)
            return NormalizationResult(scale=entry.scale, bounds=entry.bounds)

        with self._lock:
            return self._normalize(icon, mask)

    def match_mask(self, icon: IconRenderer, mask: MaskPath) -> ShapeMatch:
        """Detailed shape comparison of ``icon`` against ``mask``."""
        with self._lock:
            width, height = self._load(icon)
            box = scan_boundaries(self._buffers, width, height, self.config.min_visible_alpha)
            if box is None:
                return ShapeMatch(matches=False, checked=False)
            return match_shape(self._buffers, box, mask, self.config)

    def _compute_adaptive(self) -> CachedScale:
        # Neutral filler: the bare mask, fully opaque.
        filler = ShapeIcon(self.adaptive_mask)
        with self._lock:
            result = self._normalize(filler, None)
        return CachedScale(scale=result.scale, bounds=result.bounds)

    def _load(self, icon: IconRenderer) -> tuple[int, int]:
        width, height = fit_render_size(icon.intrinsic_size, self.max_size)
        self._buffers.load(self._render(icon, width, height))
        return width, height

    def _render(self, icon: IconRenderer, width: int, height: int) -> NDArray[np.uint8]:
        coverage = np.asarray(icon.render(width, height))
        if coverage.shape != (height, width):
            raise ValueError(
                f"Renderer returned shape {coverage.shape}, expected {(height, width)}"
            )
        if coverage.dtype == np.bool_:
            return np.where(coverage, 255, 0).astype(np.uint8)
        if coverage.dtype != np.uint8:
            coverage = np.clip(coverage, 0, 255).astype(np.uint8)
        return coverage

    def _normalize(self, icon: IconRenderer, mask: MaskPath | None) -> NormalizationResult:
        start = time.perf_counter()
        buffers = self._buffers

        width, height = self._load(icon)
        box = scan_boundaries(buffers, width, height, self.config.min_visible_alpha)
        if box is None:
            logger.debug("No visible pixels in %dx%d render, scale 1.0", width, height)
            return NormalizationResult(
                scale=1.0,
                bounds=None,
                matches_mask=False if mask is not None else None,
            )

        convert_to_convex_array(buffers.left_border, LEFT, box.top, box.bottom, buffers.angles)
        convert_to_convex_array(buffers.right_border, RIGHT, box.top, box.bottom, buffers.angles)

        estimate = estimate_area(buffers.left_border, buffers.right_border, box, height)
        scale, metrics = compute_scale(estimate, width, height)
        bounds = icon_bounds(box, width, height)

        matches = None
        if mask is not None:
            matches = match_shape(buffers, box, mask, self.config).matches

        elapsed = (time.perf_counter() - start) * 1000
        logger.debug(
            "Normalized %dx%d icon: hull/box=%.4f area=%.4f scale=%.4f in %.1fms",
            width,
            height,
            metrics.hull_by_box,
            metrics.area_scale,
            scale,
            elapsed,
        )
        return NormalizationResult(scale=scale, bounds=bounds, matches_mask=matches, metrics=metrics)


class NormalizerPool:
    """One IconNormalizer per thread, all sharing a single adaptive cache."""

    def __init__(
        self,
        icon_bitmap_size: int,
        adaptive_mask: MaskPath | None = None,
        config: NormalizerConfig | None = None,
    ) -> None:
        self.max_size = icon_bitmap_size * 2
        self.adaptive_mask = adaptive_mask
        self.config = config or NormalizerConfig()
        self.cache = AdaptiveScaleCache()
        self._local = threading.local()

    def get(self) -> IconNormalizer:
        normalizer = getattr(self._local, "normalizer", None)
        if normalizer is None:
            normalizer = IconNormalizer(
                self.max_size,
                config=self.config,
                adaptive_mask=self.adaptive_mask,
                cache=self.cache,
            )
            self._local.normalizer = normalizer
            logger.debug("Created normalizer for thread %s", threading.current_thread().name)
        return normalizer

    def get_scale(
        self,
        icon: IconRenderer,
        *,
        mask: MaskPath | None = None,
        adaptive: bool = False,
    ) -> NormalizationResult:
        return self.get().get_scale(icon, mask=mask, adaptive=adaptive)
