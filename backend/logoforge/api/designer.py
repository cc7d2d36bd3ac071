"""POST /api/designer: run the designer pipeline for a brand."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from logoforge.config import Settings
from logoforge.dependencies import get_settings, resolve_paint
from logoforge.engine.designer import recommend_colors, run_designer_brain
from logoforge.models.designer import BrandInput, DesignerOutput
from logoforge.models.requests import DesignerRequest, PaintRequest
from logoforge.svg.paint import PaintContext

router = APIRouter()


@router.post("/designer", response_model=DesignerOutput)
async def designer(req: DesignerRequest, settings: Settings = Depends(get_settings)) -> DesignerOutput:
    brand = BrandInput.model_validate(req.model_dump(include=set(BrandInput.model_fields)))
    if req.use_palette:
        paint = PaintContext.from_palette(recommend_colors(brand.category).model_dump())
    else:
        paint = resolve_paint(PaintRequest(color=req.color, knockout=req.knockout), settings)
    return await run_in_threadpool(run_designer_brain, brand, None, paint)
