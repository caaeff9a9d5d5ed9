"""Application configuration from environment variables."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic_settings import BaseSettings

from icontree.models.theme import ThemeVariant


class Settings(BaseSettings):
    env: str = "development"
    log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Source layout: <svg_dir>/<theme>/<kebab-name>.svg
    svg_dir: Path = Path("svg")

    # Outputs. Only these are ever cleared.
    output_dir: Path = Path("build/icons")
    manifest_output: Path = Path("build/manifest.json")

    # Fallback themes tried after the requested one
    rollback_preference: list[ThemeVariant] = [
        ThemeVariant.OUTLINE,
        ThemeVariant.FILL,
        ThemeVariant.TWOTONE,
    ]

    # 1 = build icons sequentially
    max_workers: int = 1

    model_config = {
        "env_prefix": "ICONTREE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()


def configure_logging(level_name: str | None = None) -> None:
    """Root logging setup shared by the API and the command line."""
    level_name = (level_name or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
