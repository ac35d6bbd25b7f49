"""Process configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    iconshape_env: str = "development"
    iconshape_log_level: str = "info"

    # Target icon bitmap size in pixels; the scan surface is twice this.
    icon_bitmap_size: int = 192

    # Stroke width (px) of the mask outline ignored during shape matching.
    mask_outline_width: float = 2.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
