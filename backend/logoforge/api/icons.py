"""/api/icons: abstract icon variations by category."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from logoforge.config import Settings
from logoforge.dependencies import get_settings, resolve_paint
from logoforge.engine.icons import available_categories, category_keywords, generate_icon_variations, resolve_category
from logoforge.models.requests import IconRequest
from logoforge.models.responses import IconResponse

router = APIRouter(prefix="/icons")


@router.get("/categories")
async def categories() -> dict[str, list[str]]:
    return {name: category_keywords(name) for name in available_categories()}


@router.post("", response_model=IconResponse)
async def icons(req: IconRequest, settings: Settings = Depends(get_settings)) -> IconResponse:
    paint = resolve_paint(req, settings)
    svgs = await run_in_threadpool(
        generate_icon_variations,
        req.params,
        req.brand_name,
        paint,
        req.category,
        req.keywords,
        req.count,
    )
    return IconResponse(category=resolve_category(req.category, req.keywords), svgs=svgs)
