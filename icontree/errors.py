"""Exceptions raised while building icon trees and names."""

from __future__ import annotations


class IconTreeError(Exception):
    """Base class for every error raised by icontree."""


class SvgValidationError(IconTreeError, ValueError):
    """An SVG source failed a structural check. Fatal for that icon only."""

    def __init__(self, message: str, debug_label: str | None = None) -> None:
        self.debug_label = debug_label
        if debug_label:
            message = f"{message} [{debug_label}]"
        super().__init__(message)


class SvgParseError(SvgValidationError):
    """The markup could not be parsed at all."""


class UnknownThemeError(IconTreeError, TypeError):
    """A theme outside fill/outline/twotone reached the naming engine.

    Always a caller bug; never recorded as a per-icon failure.
    """

    def __init__(self, theme: object, name: str) -> None:
        self.theme = theme
        self.name = name
        super().__init__(f"Unknown theme type: {theme}, name: {name}")


class MissingSourceError(IconTreeError, LookupError):
    """No candidate theme has a source SVG for the icon."""

    def __init__(self, icon_name: str, tried: list[str]) -> None:
        self.icon_name = icon_name
        self.tried = list(tried)
        super().__init__(
            f"There is no SVG of the icon: {icon_name} (tried: {', '.join(self.tried) or 'nothing'})"
        )
