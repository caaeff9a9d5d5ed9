"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from icontree.models.abstract_node import AbstractNode


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    env: str = ""
    themes: list[str] = Field(default_factory=list)


class TreeResponse(BaseModel):
    tree: AbstractNode
    width: int
    height: int
    processing_time_ms: float = 0.0


class NamesResponse(BaseModel):
    theme: str
    bindings: dict[str, str] = Field(default_factory=dict)
