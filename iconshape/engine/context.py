"""Normalization state: scratch buffers and the value types flowing between stages.

ScanBuffers is overwritten on every call and carries no identity across calls.
Everything else is an immutable result value.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from iconshape.engine.constants import NO_BORDER


@dataclass
class ScanBuffers:
    """Fixed-size scratch memory owned by one normalizer instance."""

    max_size: int
    # Coverage surface: surface[y, x] is 8-bit alpha
    surface: NDArray[np.uint8] = field(init=False)
    # For each row y, the leftmost / rightmost visible x (or -1)
    left_border: NDArray[np.float64] = field(init=False)
    right_border: NDArray[np.float64] = field(init=False)
    # Tangent recorded for each row by the hull pass
    angles: NDArray[np.float64] = field(init=False)

    def __post_init__(self) -> None:
        if self.max_size <= 0:
            raise ValueError(f"max_size must be positive, got {self.max_size}")
        self.surface = np.zeros((self.max_size, self.max_size), dtype=np.uint8)
        self.left_border = np.full(self.max_size, NO_BORDER)
        self.right_border = np.full(self.max_size, NO_BORDER)
        self.angles = np.zeros(self.max_size)

    def clear(self) -> None:
        self.surface.fill(0)
        self.left_border.fill(NO_BORDER)
        self.right_border.fill(NO_BORDER)
        self.angles.fill(0.0)

    def load(self, coverage: NDArray[np.uint8]) -> None:
        """Clear the surface and copy a rendered ``(h, w)`` region into its top-left corner."""
        h, w = coverage.shape
        if h > self.max_size or w > self.max_size:
            raise ValueError(
                f"Rendered region {w}x{h} exceeds scan surface {self.max_size}x{self.max_size}"
            )
        self.clear()
        self.surface[:h, :w] = coverage


@dataclass(frozen=True)
class BoundingBox:
    """Smallest box containing all visible pixels. Edges are inclusive indices."""

    left: int
    top: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        return self.right - self.left + 1

    @property
    def height(self) -> int:
        return self.bottom - self.top + 1

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height


@dataclass(frozen=True)
class IconBounds:
    """Fractional insets of the visible box from each edge of the rendered surface."""

    left: float
    top: float
    right: float
    bottom: float


@dataclass(frozen=True)
class ScaleMetrics:
    hull_area: float
    box_area: float
    hull_by_box: float
    area_scale: float
    scale_required: float


@dataclass(frozen=True)
class NormalizationResult:
    scale: float = 1.0
    bounds: IconBounds | None = None
    matches_mask: bool | None = None
    metrics: ScaleMetrics | None = None


@dataclass(frozen=True)
class CachedScale:
    """Write-once adaptive mask result."""

    scale: float
    bounds: IconBounds | None
