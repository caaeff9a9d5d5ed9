"""Theme naming — identifiers and kebab-case file names per theme.

Both names are pure functions of (base name, theme) so regenerating the
output never renames anything. The outline kebab suffix is ``-o``, not
``-outline``; generated packages already ship under that name.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from icontree.errors import UnknownThemeError
from icontree.models.theme import ThemeVariant, coerce_theme

_IDENTIFIER_SUFFIX: dict[ThemeVariant, str] = {
    ThemeVariant.FILL: "Fill",
    ThemeVariant.OUTLINE: "Outline",
    ThemeVariant.TWOTONE: "TwoTone",
}

_KEBAB_SUFFIX: dict[ThemeVariant, str] = {
    ThemeVariant.FILL: "-fill",
    ThemeVariant.OUTLINE: "-o",
    ThemeVariant.TWOTONE: "-twotone",
}

# Acronyms, capitalized/lowercase words and digit runs
_WORD_RE = re.compile(r"[A-Z]{2,}(?=[A-Z][a-z]|[^A-Za-z]|$)|[A-Z]?[a-z]+|[A-Z]+|\d+")


@dataclass(frozen=True)
class NameBinding:
    identifier: str
    kebab_name: str


def require_theme(theme: object, name: str) -> ThemeVariant:
    variant = coerce_theme(theme)
    if variant is None:
        raise UnknownThemeError(theme, name)
    return variant


def to_pascal_case(name: str) -> str:
    """``"arrow-up"`` -> ``"ArrowUp"``, ``"500px"`` -> ``"500Px"``."""
    words = _WORD_RE.findall(name)
    return "".join(word[:1].upper() + word[1:].lower() for word in words)


def identifier_for(base_identifier: str, theme: ThemeVariant | str) -> str:
    return base_identifier + _IDENTIFIER_SUFFIX[require_theme(theme, base_identifier)]


def kebab_name_for(base_name: str, theme: ThemeVariant | str) -> str:
    return base_name + _KEBAB_SUFFIX[require_theme(theme, base_name)]


def binding_for(base_name: str, theme: ThemeVariant | str) -> NameBinding:
    return NameBinding(
        identifier=identifier_for(to_pascal_case(base_name), theme),
        kebab_name=kebab_name_for(base_name, theme),
    )


def derive_bindings(
    base_names: Iterable[str],
    theme: ThemeVariant | str,
    use_kebab: bool = False,
) -> dict[str, str]:
    """Map each base name to its kebab name or identifier for ``theme``.

    Duplicate base names collapse into one entry.
    """
    bindings: dict[str, str] = {}
    for base_name in base_names:
        if use_kebab:
            bindings[base_name] = kebab_name_for(base_name, theme)
        else:
            bindings[base_name] = identifier_for(to_pascal_case(base_name), theme)
    return bindings
