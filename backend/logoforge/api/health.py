"""Health check."""

from __future__ import annotations

from fastapi import APIRouter

from logoforge.engine.library import get_library
from logoforge.engine.registry import load_algorithms
from logoforge.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        algorithms_registered=load_algorithms().count,
        library_size=len(get_library()),
    )
