"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import HTTPException

from logoforge.config import Settings, settings
from logoforge.models.requests import PaintRequest
from logoforge.svg.paint import PaintContext


def get_settings() -> Settings:
    return settings


def resolve_paint(req: PaintRequest, settings: Settings) -> PaintContext:
    """Request colours over configured defaults; bad colours are a 422."""
    try:
        return PaintContext(
            color=req.color or settings.default_color,
            knockout=req.knockout or settings.default_knockout,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
