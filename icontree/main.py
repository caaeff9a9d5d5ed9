"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from icontree import __version__
from icontree.config import Settings, configure_logging, settings
from icontree.errors import SvgValidationError

logger = logging.getLogger(__name__)


async def _svg_validation_error(request: Request, exc: SvgValidationError) -> JSONResponse:
    logger.info("%s rejected: %s", request.url.path, exc)
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "debug_label": exc.debug_label},
    )


def create_app(app_settings: Settings | None = None) -> FastAPI:
    app_settings = app_settings or settings
    app = FastAPI(
        title="icontree",
        description="SVG icon sources to validated abstract trees and per-theme names",
        version=__version__,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.add_exception_handler(SvgValidationError, _svg_validation_error)

    from icontree.api.router import api_router

    app.include_router(api_router)
    return app


load_dotenv()
configure_logging()
app = create_app()
