"""Per-icon and per-pass results handed to the code emitter."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from icontree.models.abstract_node import AbstractNode
from icontree.models.theme import ThemeVariant
from icontree.naming.themes import NameBinding


@dataclass(frozen=True)
class IconBuild:
    """One icon built for one theme pass."""

    name: str
    theme: ThemeVariant
    # Theme whose source was actually read (differs from ``theme`` after rollback)
    source_theme: ThemeVariant
    binding: NameBinding
    tree: AbstractNode
    source_path: Path

    @property
    def rolled_back(self) -> bool:
        return self.source_theme is not self.theme


@dataclass
class ThemePassResult:
    theme: ThemeVariant
    icons: list[IconBuild] = field(default_factory=list)
    # base name -> identifier, for the emitter's index/name map
    bindings: dict[str, str] = field(default_factory=dict)
    # base name -> error message
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors
