"""Tree models on both sides of the tree builder.

SvgNode is what the markup parser hands over; AbstractNode is what the
code emitter receives.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


@dataclass
class SvgAttr:
    name: str
    value: str


@dataclass
class SvgNode:
    """One parsed element. ``tag_name`` is None for non-element nodes."""

    tag_name: str | None
    attrs: list[SvgAttr] = field(default_factory=list)
    child_nodes: list[SvgNode] = field(default_factory=list)

    def get_attr(self, name: str) -> SvgAttr | None:
        for attr in self.attrs:
            if attr.name == name:
                return attr
        return None


class AbstractNode(BaseModel):
    """Normalized, framework-agnostic element. Frozen once built."""

    model_config = ConfigDict(frozen=True)

    tag: str = Field(..., min_length=1)
    attrs: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    children: tuple[AbstractNode, ...] = ()

    @field_validator("attrs", mode="after")
    @classmethod
    def freeze_attrs(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("attrs")
    def dump_attrs(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)

    def walk(self):
        """Yield this node and every descendant, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()
