"""Abstract tree builder — validate a parsed SVG root and normalize it.

Usage:
    root = parse_svg_markup(text, debug_label="outline/close")
    tree = generate_abstract_tree(root, "outline/close")

Every check raises SvgValidationError carrying the debug label so a batch
run can point at the offending file.
"""

from __future__ import annotations

import logging
import re

from icontree.errors import SvgValidationError
from icontree.models.abstract_node import AbstractNode, SvgNode

logger = logging.getLogger(__name__)

# Leading ASCII integer, the way parseInt reads "24.5" or "24px"
_LEADING_INT_RE = re.compile(r"\s*([+-]?[0-9]+)")


def _parse_int(token: str) -> int | None:
    match = _LEADING_INT_RE.match(token)
    return int(match.group(1), 10) if match else None


def parse_view_box_size(value: str, debug_label: str | None = None) -> tuple[int, int]:
    """Return (width, height) from a ``minX minY width height`` viewBox."""
    tail = value.split()[2:]
    size = [_parse_int(token) for token in tail]
    if len(size) != 2 or None in size:
        shown = ", ".join(tail) if tail else "nothing"
        raise SvgValidationError(
            f"The size tuple should be [ width, height ], but got [ {shown} ]", debug_label
        )
    return size[0], size[1]


def _is_drawable_leaf(node: SvgNode) -> bool:
    return node.tag_name != "style" and not node.child_nodes


def generate_abstract_tree(root: SvgNode | None, debug_label: str | None = None) -> AbstractNode:
    """Validate ``root`` as a complete icon document and normalize it."""
    if root is None:
        raise SvgValidationError("Missing SVG root", debug_label)
    if root.tag_name != "svg":
        raise SvgValidationError(f"Root element should be <svg>, got <{root.tag_name}>", debug_label)

    view_box = root.get_attr("viewBox")
    if view_box is None:
        raise SvgValidationError("Root <svg> has no viewBox", debug_label)
    parse_view_box_size(view_box.value, debug_label)

    drawable = [child for child in root.child_nodes if _is_drawable_leaf(child)]
    if not drawable:
        raise SvgValidationError("Root <svg> has no drawable leaf child", debug_label)

    tree = normalize_node(root, debug_label)
    logger.debug("Built tree for %s: %d nodes", debug_label, sum(1 for _ in tree.walk()))
    return tree


def normalize_node(node: SvgNode, debug_label: str | None = None) -> AbstractNode:
    if not node.tag_name:
        raise SvgValidationError("Found a node without a tag name", debug_label)
    attrs = {attr.name: attr.value for attr in node.attrs}
    children = tuple(normalize_node(child, debug_label) for child in node.child_nodes)
    return AbstractNode(tag=node.tag_name, attrs=attrs, children=children)
