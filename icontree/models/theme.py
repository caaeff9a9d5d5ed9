"""Theme variants an icon can be drawn in."""

from __future__ import annotations

import enum


class ThemeVariant(str, enum.Enum):
    FILL = "fill"
    OUTLINE = "outline"
    TWOTONE = "twotone"

    def __str__(self) -> str:
        return self.value


ALL_THEMES: tuple[ThemeVariant, ...] = tuple(ThemeVariant)


def coerce_theme(value: object) -> ThemeVariant | None:
    """Return the ThemeVariant for ``value`` or None if it is not one."""
    if isinstance(value, ThemeVariant):
        return value
    if isinstance(value, str):
        try:
            return ThemeVariant(value)
        except ValueError:
            return None
    return None
