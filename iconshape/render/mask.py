"""Mask paths: closed silhouettes in unit-square coordinates.

A mask spans [0, 1] x [0, 1] with y pointing down, the same convention as
SVG. Built-in shapes cover the usual launcher icon masks; themes can supply
arbitrary SVG path data instead.
"""

from __future__ import annotations

import logging

import numpy as np
from shapely import affinity
from shapely.geometry import Point, Polygon, box
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union
from svgpathtools import parse_path

logger = logging.getLogger(__name__)

# Segments per quarter circle when buffering round shapes.
_QUAD_SEGMENTS = 32

# Points sampled along SVG path data.
_PATH_SAMPLES = 512

# Points sampled around a superellipse.
_SQUIRCLE_SAMPLES = 256


class MaskPath:
    """Immutable unit-square silhouette backed by a shapely geometry."""

    def __init__(self, geometry: BaseGeometry, name: str = "custom") -> None:
        if geometry.is_empty:
            raise ValueError(f"Mask '{name}' has no area")
        if not geometry.is_valid:
            geometry = geometry.buffer(0)
        self.geometry = geometry
        self.name = name

    def __repr__(self) -> str:
        return f"MaskPath({self.name!r})"

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        return self.geometry.bounds

    def fitted(self, left: float, top: float, width: float, height: float) -> BaseGeometry:
        """Scale the unit square to ``width`` x ``height`` and move it to ``(left, top)``."""
        scaled = affinity.scale(self.geometry, xfact=width, yfact=height, origin=(0, 0))
        return affinity.translate(scaled, xoff=left, yoff=top)

    # ── Built-in shapes ──

    @classmethod
    def square(cls) -> MaskPath:
        return cls(box(0.0, 0.0, 1.0, 1.0), name="square")

    @classmethod
    def circle(cls) -> MaskPath:
        return cls(Point(0.5, 0.5).buffer(0.5, quad_segs=_QUAD_SEGMENTS), name="circle")

    @classmethod
    def rounded_square(cls, radius: float = 0.2) -> MaskPath:
        """Square with corners rounded by ``radius`` (fraction of the side, ≤ 0.5)."""
        if radius <= 0.0:
            return cls.square()
        if radius >= 0.5:
            return cls.circle()
        core = box(radius, radius, 1.0 - radius, 1.0 - radius)
        return cls(core.buffer(radius, quad_segs=_QUAD_SEGMENTS), name="rounded_square")

    @classmethod
    def squircle(cls, exponent: float = 4.0) -> MaskPath:
        """Superellipse |2x-1|^n + |2y-1|^n = 1."""
        theta = np.linspace(0, 2 * np.pi, _SQUIRCLE_SAMPLES, endpoint=False)
        c = np.cos(theta)
        s = np.sin(theta)
        x = 0.5 + 0.5 * np.sign(c) * np.abs(c) ** (2.0 / exponent)
        y = 0.5 + 0.5 * np.sign(s) * np.abs(s) ** (2.0 / exponent)
        return cls(Polygon(np.column_stack([x, y])), name="squircle")

    @classmethod
    def teardrop(cls) -> MaskPath:
        """Circle with the bottom-right corner squared off."""
        shape = unary_union([
            Point(0.5, 0.5).buffer(0.5, quad_segs=_QUAD_SEGMENTS),
            box(0.5, 0.5, 1.0, 1.0),
        ])
        return cls(shape, name="teardrop")

    @classmethod
    def from_svg_path(cls, d: str, size: float = 1.0, name: str = "svg") -> MaskPath:
        """Build a mask from SVG path data drawn in a ``size`` x ``size`` view box.

        Launcher themes usually describe masks in a 100 x 100 box, e.g.
        ``MaskPath.from_svg_path("M50,0 A50,50,0,1,1,50,100 A50,50,0,1,1,50,0 Z", 100)``.
        """
        path = parse_path(d)
        if len(path) == 0 or path.length() < 1e-10:
            raise ValueError(f"Mask path data has no length: {d!r}")

        points = []
        for t in np.linspace(0, 1, _PATH_SAMPLES, endpoint=False):
            pt = path.point(t)
            points.append((pt.real / size, pt.imag / size))

        polygon = Polygon(points)
        if not polygon.is_valid:
            logger.debug("Repairing self-intersecting mask path %s", name)
            polygon = polygon.buffer(0)
        return cls(polygon, name=name)
