"""Build configuration — what one IconBuilder run reads from."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from icontree.models.theme import ALL_THEMES, ThemeVariant


@dataclass
class BuildConfig:
    """Controls where sources come from and how a theme pass runs."""

    svg_dir: Path = Path("svg")

    # Themes tried, in order, after the requested theme has no source
    rollback_preference: list[ThemeVariant] = field(
        default_factory=lambda: [ThemeVariant.OUTLINE, ThemeVariant.FILL, ThemeVariant.TWOTONE]
    )

    # Thread pool size for a theme pass; 1 builds sequentially
    max_workers: int = 1

    themes: tuple[ThemeVariant, ...] = ALL_THEMES

    @classmethod
    def from_settings(cls, settings) -> BuildConfig:
        return cls(
            svg_dir=Path(settings.svg_dir),
            rollback_preference=list(settings.rollback_preference),
            max_workers=max(1, settings.max_workers),
        )
