"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    pixelkit_env: str = "development"
    pixelkit_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Operation defaults
    default_tolerance: int = 30
    default_palette_size: int = 8

    # Decoded images above this pixel count are rejected (≈ 40 MP)
    max_image_pixels: int = 40_000_000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
