"""POST /api/names — identifier or kebab names for a theme."""

from __future__ import annotations

from fastapi import APIRouter

from icontree.models.requests import NamesRequest
from icontree.models.responses import NamesResponse
from icontree.naming.themes import derive_bindings

router = APIRouter()


@router.post("/names", response_model=NamesResponse)
async def names(req: NamesRequest) -> NamesResponse:
    return NamesResponse(
        theme=req.theme.value,
        bindings=derive_bindings(req.base_names, req.theme, req.use_kebab),
    )
