"""Rasterization: shapely geometry and SVG documents to 8-bit coverage arrays.

Coverage arrays are indexed ``[row, col]`` (``[y, x]``) and hold 0-255.
Geometry is in continuous pixel space, where pixel (r, c) covers the square
[c, c + 1) x [r, r + 1). A pixel is filled iff its centre lies inside the
geometry, so a shape fitted to an integer box reproduces that box exactly.
"""

from __future__ import annotations

import io

import numpy as np
from numpy.typing import NDArray
from PIL import Image
from shapely.geometry import MultiPolygon, Polygon
from shapely.geometry.base import BaseGeometry
from skimage.draw import polygon as draw_polygon

# Offset from a pixel's corner to its centre.
_PIXEL_CENTER = 0.5

FULL_COVERAGE = 255


def _fill_ring(
    grid: NDArray[np.bool_],
    coords: list[tuple[float, float]],
    value: bool,
) -> None:
    xs = np.array([c[0] for c in coords]) - _PIXEL_CENTER
    ys = np.array([c[1] for c in coords]) - _PIXEL_CENTER
    rr, cc = draw_polygon(ys, xs, shape=grid.shape)
    grid[rr, cc] = value


def rasterize_geometry(
    geometry: BaseGeometry,
    shape: tuple[int, int],
    alpha: int = FULL_COVERAGE,
) -> NDArray[np.uint8]:
    """Fill ``geometry`` into a zeroed ``(rows, cols)`` array.

    MultiPolygon parts are all drawn; interior rings are cut out again.
    """
    grid = np.zeros(shape, dtype=bool)
    if geometry is None or geometry.is_empty:
        return grid.astype(np.uint8)

    if isinstance(geometry, MultiPolygon):
        parts = list(geometry.geoms)
    elif isinstance(geometry, Polygon):
        parts = [geometry]
    else:
        parts = [g for g in getattr(geometry, "geoms", []) if isinstance(g, Polygon)]

    for part in parts:
        if part.is_empty:
            continue
        _fill_ring(grid, list(part.exterior.coords), True)
        for hole in part.interiors:
            _fill_ring(grid, list(hole.coords), False)

    return grid.astype(np.uint8) * np.uint8(alpha)


def rasterize_svg_alpha(svg_code: str | bytes, width: int, height: int) -> NDArray[np.uint8]:
    """Render an SVG document with CairoSVG and return its alpha channel."""
    import cairosvg

    raw = svg_code.encode("utf-8") if isinstance(svg_code, str) else svg_code
    png_data = cairosvg.svg2png(bytestring=raw, output_width=width, output_height=height)
    image = Image.open(io.BytesIO(png_data)).convert("RGBA")
    if image.size != (width, height):
        image = image.resize((width, height), Image.Resampling.BILINEAR)
    return np.array(image.getchannel("A"), dtype=np.uint8)


def resize_coverage(coverage: NDArray[np.uint8], width: int, height: int) -> NDArray[np.uint8]:
    """Resample a coverage array to ``width`` x ``height`` with Pillow."""
    if coverage.shape == (height, width):
        return coverage.copy()
    image = Image.fromarray(np.ascontiguousarray(coverage, dtype=np.uint8))
    return np.array(image.resize((width, height), Image.Resampling.BILINEAR), dtype=np.uint8)
