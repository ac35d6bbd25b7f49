"""Tests for legacy icon wrapping."""

from __future__ import annotations

import math

import pytest

from iconshape.engine.factory import IconFactory
from iconshape.engine.normalizer import IconNormalizer, NormalizerPool
from iconshape.engine.scale import scale_for_bounds
from iconshape.render.icons import AdaptiveIcon, ShapeIcon
from iconshape.render.mask import MaskPath

SQUARE_SCALE = math.sqrt(375 / 576)


class TestNormalizeAndWrap:
    def test_legacy_square_is_wrapped(self, adaptive_normalizer, square_mask):
        factory = IconFactory(adaptive_normalizer)
        icon = ShapeIcon(square_mask)

        result = factory.normalize_and_wrap(icon)

        assert result.wrapped is True
        assert isinstance(result.icon, AdaptiveIcon)
        assert result.icon.foreground is icon
        assert result.icon.foreground_scale == pytest.approx(SQUARE_SCALE)
        assert result.scale == adaptive_normalizer.cache.peek().scale

    def test_icon_matching_mask_is_kept(self, adaptive_normalizer, circle_mask):
        factory = IconFactory(adaptive_normalizer)
        icon = ShapeIcon(circle_mask)

        result = factory.normalize_and_wrap(icon)

        assert result.wrapped is False
        assert result.icon is icon
        assert result.scale == pytest.approx(0.9167, abs=0.005)

    def test_adaptive_icon_uses_cache(self, adaptive_normalizer, circle_mask):
        factory = IconFactory(adaptive_normalizer)
        icon = AdaptiveIcon(circle_mask, foreground=ShapeIcon(MaskPath.teardrop()))

        result = factory.normalize_and_wrap(icon)

        assert result.wrapped is False
        assert result.icon is icon
        assert adaptive_normalizer.cache.peek() is not None
        assert result.scale == adaptive_normalizer.cache.peek().scale

    def test_wrapping_disabled(self, adaptive_normalizer, square_mask):
        factory = IconFactory(adaptive_normalizer, wrap_legacy=False)
        result = factory.normalize_and_wrap(ShapeIcon(square_mask))
        assert result.wrapped is False
        assert result.scale == pytest.approx(SQUARE_SCALE)

    def test_no_adaptive_mask_means_plain_normalization(self, normalizer, square_mask):
        result = IconFactory(normalizer).normalize_and_wrap(ShapeIcon(square_mask))
        assert result.wrapped is False
        assert result.scale == pytest.approx(SQUARE_SCALE)

    def test_works_with_pool(self, circle_mask, square_mask):
        factory = IconFactory(NormalizerPool(100, adaptive_mask=circle_mask))
        result = factory.normalize_and_wrap(ShapeIcon(square_mask))
        assert result.wrapped is True


def test_scale_without_shadow(square_mask):
    factory = IconFactory(IconNormalizer(200), wrap_legacy=False)
    icon = ShapeIcon(square_mask)
    plain = factory.normalize_and_wrap(icon)

    scale = factory.scale_without_shadow(icon)

    assert scale == pytest.approx(min(plain.scale, scale_for_bounds(plain.bounds)))
    assert scale <= plain.scale
