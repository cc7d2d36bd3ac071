"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from logoforge.api import algorithms, catalog, designer, generate, health, icons

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(algorithms.router)
api_router.include_router(generate.router)
api_router.include_router(designer.router)
api_router.include_router(icons.router)
api_router.include_router(catalog.router)
