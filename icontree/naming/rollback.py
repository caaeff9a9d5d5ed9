"""Rollback resolution — pick the theme whose source SVG actually exists."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable
from pathlib import Path

from icontree.errors import MissingSourceError
from icontree.models.theme import ThemeVariant
from icontree.naming.themes import require_theme

logger = logging.getLogger(__name__)


def is_accessible(path: str | os.PathLike[str]) -> bool:
    """Report whether ``path`` exists.

    Any failure (permissions, broken mounts, unusable paths) counts as absent.
    """
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


def source_path(svg_dir: str | os.PathLike[str], theme: ThemeVariant | str, icon_name: str) -> Path:
    variant = require_theme(theme, icon_name)
    return Path(svg_dir).resolve() / variant.value / f"{icon_name}.svg"


def resolve_available_theme(
    requested_order: Iterable[ThemeVariant | str],
    icon_name: str,
    svg_dir: str | os.PathLike[str],
    exists: Callable[[Path], bool] = is_accessible,
) -> ThemeVariant:
    """Return the first theme in ``requested_order`` with a source file.

    First match wins; later candidates are not checked.
    """
    tried: list[str] = []
    for theme in requested_order:
        variant = require_theme(theme, icon_name)
        tried.append(variant.value)
        if exists(source_path(svg_dir, variant, icon_name)):
            return variant
        logger.debug("No %s source for %s", variant.value, icon_name)
    raise MissingSourceError(icon_name, tried)


def rollback_order(
    theme: ThemeVariant | str,
    preference: Iterable[ThemeVariant | str],
) -> list[ThemeVariant]:
    """Candidate themes for ``theme``: itself first, then ``preference``."""
    requested = require_theme(theme, "rollback")
    order = [requested]
    for candidate in preference:
        variant = require_theme(candidate, "rollback")
        if variant not in order:
            order.append(variant)
    return order
