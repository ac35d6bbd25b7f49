"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from iconshape.engine.normalizer import IconNormalizer
from iconshape.render.icons import AlphaIcon
from iconshape.render.mask import MaskPath

# Scan surface side used by most tests (icon bitmap size 100)
MAX_SIZE = 200

# Android's default adaptive icon mask, in a 100x100 view box
ANDROID_CIRCLE_MASK = "M50,0A50,50,0,1,1,50,100A50,50,0,1,1,50,0"

FILLED_SQUARE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <rect x="0" y="0" width="100" height="100" fill="#4ECDC4"/>
</svg>'''


def rect_icon(size: int, left: int, top: int, width: int, height: int) -> AlphaIcon:
    """Opaque rectangle on a transparent ``size`` x ``size`` bitmap."""
    coverage = np.zeros((size, size), dtype=np.uint8)
    coverage[top : top + height, left : left + width] = 255
    return AlphaIcon(coverage)


@pytest.fixture
def normalizer() -> IconNormalizer:
    return IconNormalizer(MAX_SIZE)


@pytest.fixture
def circle_mask() -> MaskPath:
    return MaskPath.circle()


@pytest.fixture
def square_mask() -> MaskPath:
    return MaskPath.square()


@pytest.fixture
def adaptive_normalizer(circle_mask: MaskPath) -> IconNormalizer:
    return IconNormalizer(MAX_SIZE, adaptive_mask=circle_mask)


@pytest.fixture
def cairo_available() -> None:
    try:
        import cairosvg  # noqa: F401
    except (ImportError, OSError):
        pytest.skip("cairo library not available")
