"""POST /api/tree — validate one SVG and return its abstract tree.

Validation failures surface as 422 through the app's SvgValidationError
handler.
"""

from __future__ import annotations

import time

from fastapi import APIRouter

from icontree.models.requests import TreeRequest
from icontree.models.responses import TreeResponse
from icontree.svg.parser import parse_svg_markup
from icontree.svg.tree import generate_abstract_tree, parse_view_box_size

router = APIRouter()


@router.post("/tree", response_model=TreeResponse)
async def build_tree(req: TreeRequest) -> TreeResponse:
    start = time.perf_counter()
    label = req.debug_label or "request"
    tree = generate_abstract_tree(parse_svg_markup(req.svg, label), label)
    width, height = parse_view_box_size(tree.attrs["viewBox"], label)
    return TreeResponse(
        tree=tree,
        width=width,
        height=height,
        processing_time_ms=round((time.perf_counter() - start) * 1000, 2),
    )
