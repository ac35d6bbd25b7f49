"""Process setup: logging and a settings-driven normalizer pool."""

from __future__ import annotations

import logging

from dotenv import load_dotenv

from iconshape.config import Settings, settings
from iconshape.engine.config import NormalizerConfig
from iconshape.engine.normalizer import NormalizerPool
from iconshape.render.mask import MaskPath

load_dotenv()


def configure_logging(config: Settings = settings) -> None:
    logging.basicConfig(
        level=getattr(logging, config.iconshape_log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def create_pool(
    adaptive_mask: MaskPath | None = None,
    config: Settings = settings,
) -> NormalizerPool:
    """Factory for the per-thread normalizer pool used by icon loader workers."""
    return NormalizerPool(
        config.icon_bitmap_size,
        adaptive_mask=adaptive_mask,
        config=NormalizerConfig.from_settings(config),
    )
