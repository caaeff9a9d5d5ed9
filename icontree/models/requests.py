"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from icontree.models.theme import ThemeVariant


class TreeRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    debug_label: str | None = Field(default=None, description="Label attached to validation errors")


class NamesRequest(BaseModel):
    base_names: list[str] = Field(..., description="Kebab-case base icon names")
    theme: ThemeVariant = Field(..., description="fill, outline or twotone")
    use_kebab: bool = Field(default=False, description="Return kebab file names instead of identifiers")
