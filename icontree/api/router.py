"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from icontree.api import health, names, tree

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(tree.router)
api_router.include_router(names.router)
