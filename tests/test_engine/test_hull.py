"""Tests for the convex hull approximation of border sequences."""

from __future__ import annotations

import numpy as np
import pytest
from scipy.spatial import ConvexHull
from shapely import affinity
from shapely.geometry import Polygon

from iconshape.engine.area import estimate_area
from iconshape.engine.context import ScanBuffers
from iconshape.engine.hull import LEFT, RIGHT, convert_to_convex_array
from iconshape.engine.scanner import scan_boundaries
from iconshape.render.rasterizer import rasterize_geometry


def _border(values: list[float]) -> np.ndarray:
    return np.array(values, dtype=np.float64)


def _assert_convex(xs: np.ndarray, direction: int, top: int, bottom: int) -> None:
    seg = xs[top : bottom + 1]
    second = seg[2:] - 2 * seg[1:-1] + seg[:-2]
    assert np.all(second * direction >= -1e-9)


class TestConvertToConvexArray:
    @pytest.mark.parametrize("direction", [LEFT, RIGHT])
    def test_gap_between_equal_values_is_filled_flat(self, direction):
        xs = _border([-1, 5, -1, 5, -1])
        convert_to_convex_array(xs, direction, 1, 3)
        assert list(xs) == [-1, 5, 5, 5, -1]

    def test_gap_is_interpolated_linearly(self):
        xs = _border([10, -1, -1, -1, 2])
        convert_to_convex_array(xs, LEFT, 0, 4)
        assert list(xs) == [10, 8, 6, 4, 2]

    def test_left_notch_is_removed(self):
        xs = _border([0, 0, 3, 0, 0])
        convert_to_convex_array(xs, LEFT, 0, 4)
        assert list(xs) == [0, 0, 0, 0, 0]

    def test_right_notch_is_removed(self):
        xs = _border([9, 9, 6, 9, 9])
        convert_to_convex_array(xs, RIGHT, 0, 4)
        assert list(xs) == [9, 9, 9, 9, 9]

    def test_convex_left_border_is_unchanged(self):
        xs = _border([4, 2, 0, 2, 4])
        convert_to_convex_array(xs, LEFT, 0, 4)
        assert list(xs) == [4, 2, 0, 2, 4]

    def test_anchor_walks_back_to_top(self):
        xs = _border([0, 5, 5, 0])
        convert_to_convex_array(xs, LEFT, 0, 3)
        assert list(xs) == [0, 0, 0, 0]

    def test_rows_outside_range_untouched(self):
        xs = _border([-1, -1, 3, -1, 3, -1])
        convert_to_convex_array(xs, LEFT, 2, 4)
        assert xs[0] == -1 and xs[1] == -1 and xs[5] == -1

    def test_records_angles(self):
        xs = _border([10, -1, 6])
        angles = np.zeros(3)
        convert_to_convex_array(xs, LEFT, 0, 2, angles)
        assert list(angles[:2]) == [-2.0, -2.0]

    @pytest.mark.parametrize("seed", range(10))
    @pytest.mark.parametrize("direction", [LEFT, RIGHT])
    def test_random_borders_become_convex(self, seed, direction):
        rng = np.random.default_rng(seed)
        xs = rng.integers(0, 60, size=80).astype(np.float64)
        gaps = rng.random(80) < 0.2
        xs[gaps] = -1
        xs[5] = 30
        xs[70] = 30
        xs[:5] = -1
        xs[71:] = -1

        convert_to_convex_array(xs, direction, 5, 70)

        assert np.all(xs[5:71] > -1)
        _assert_convex(xs, direction, 5, 70)


def _regular_polygon(n_vertices: int, inner_radius: float = 1.0) -> Polygon:
    """Centred polygon of radius 90 on a 200px surface, alternating radii for stars."""
    n_points = n_vertices if inner_radius == 1.0 else 2 * n_vertices
    angles = np.linspace(-np.pi / 2, 3 * np.pi / 2, n_points, endpoint=False)
    radii = np.where(np.arange(n_points) % 2 == 0, 1.0, inner_radius)
    shape = Polygon(np.column_stack([radii * np.cos(angles), radii * np.sin(angles)]))
    return affinity.translate(affinity.scale(shape, 90, 90, origin=(0, 0)), 100, 100)


def _hull_pass(shape: Polygon) -> tuple[ScanBuffers, float, float]:
    buffers = ScanBuffers(200)
    buffers.load(rasterize_geometry(shape, (200, 200)))
    box = scan_boundaries(buffers, 200, 200)
    convert_to_convex_array(buffers.left_border, LEFT, box.top, box.bottom, buffers.angles)
    convert_to_convex_array(buffers.right_border, RIGHT, box.top, box.bottom, buffers.angles)
    estimate = estimate_area(buffers.left_border, buffers.right_border, box, 200)
    return buffers, estimate.hull_area, estimate.box_area


def _exact_pixel_hull_area(surface: np.ndarray) -> float:
    rows, cols = np.nonzero(surface)
    corners = np.concatenate([
        np.column_stack([cols, rows]),
        np.column_stack([cols + 1, rows + 1]),
        np.column_stack([cols + 1, rows]),
        np.column_stack([cols, rows + 1]),
    ])
    return ConvexHull(corners).volume


class TestHullArea:
    @pytest.mark.parametrize("rotation", [0, 45])
    def test_convex_shapes_match_exact_hull(self, rotation):
        pentagon = affinity.rotate(_regular_polygon(5), rotation, origin=(100, 100))
        buffers, hull_area, _ = _hull_pass(pentagon)
        exact = _exact_pixel_hull_area(buffers.surface)
        assert hull_area == pytest.approx(exact, rel=0.05)

    def test_star_hull_lies_between_pixels_and_box(self):
        # Strongly concave: the anchor walk fills notches only partially
        buffers, hull_area, box_area = _hull_pass(_regular_polygon(5, inner_radius=0.4))
        pixels = int(np.count_nonzero(buffers.surface))
        assert hull_area > pixels
        assert hull_area <= box_area
