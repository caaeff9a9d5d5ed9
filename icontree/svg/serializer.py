"""Write SVG markup back out from an AbstractNode tree."""

from __future__ import annotations

from xml.sax.saxutils import quoteattr

from icontree.models.abstract_node import AbstractNode


def serialize_svg(node: AbstractNode, indent: int = 2) -> str:
    """Render ``node`` and its children as indented SVG markup."""
    lines: list[str] = []
    _write(node, 0, indent, lines)
    return "\n".join(lines)


def _write(node: AbstractNode, depth: int, indent: int, lines: list[str]) -> None:
    pad = " " * (depth * indent)
    attr_str = "".join(f" {name}={quoteattr(value)}" for name, value in node.attrs.items())
    if not node.children:
        lines.append(f"{pad}<{node.tag}{attr_str} />")
        return
    lines.append(f"{pad}<{node.tag}{attr_str}>")
    for child in node.children:
        _write(child, depth + 1, indent, lines)
    lines.append(f"{pad}</{node.tag}>")
