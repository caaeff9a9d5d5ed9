"""Manifest — which icons exist in which theme, read from the source tree."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from icontree.models.theme import ALL_THEMES, ThemeVariant
from icontree.naming.themes import require_theme


def list_theme_icons(svg_dir: str | os.PathLike[str], theme: ThemeVariant | str) -> list[str]:
    """Sorted base names with a source file under ``<svg_dir>/<theme>``."""
    variant = require_theme(theme, "manifest")
    theme_dir = Path(svg_dir) / variant.value
    if not theme_dir.is_dir():
        return []
    return sorted(p.stem for p in theme_dir.glob("*.svg") if p.is_file())


def build_manifest(
    svg_dir: str | os.PathLike[str],
    themes: Iterable[ThemeVariant | str] = ALL_THEMES,
) -> dict[str, list[str]]:
    manifest: dict[str, list[str]] = {}
    for theme in themes:
        variant = require_theme(theme, "manifest")
        manifest[variant.value] = list_theme_icons(svg_dir, variant)
    return manifest


def collect_base_names(
    svg_dir: str | os.PathLike[str],
    themes: Iterable[ThemeVariant | str] = ALL_THEMES,
) -> list[str]:
    names: set[str] = set()
    for icons in build_manifest(svg_dir, themes).values():
        names.update(icons)
    return sorted(names)
