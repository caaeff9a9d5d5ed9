"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from icontree import __version__
from icontree.config import Settings
from icontree.dependencies import get_settings
from icontree.models.responses import HealthResponse
from icontree.models.theme import ALL_THEMES

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        env=settings.env,
        themes=[theme.value for theme in ALL_THEMES],
    )
