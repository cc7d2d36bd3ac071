"""POST /api/generate and /api/batch: seeded logo generation."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from fastapi.concurrency import run_in_threadpool

from logoforge.config import Settings
from logoforge.dependencies import get_settings, resolve_paint
from logoforge.engine.batch import generate_batch, select_entry
from logoforge.engine.config import DEFAULT_CONFIG
from logoforge.engine.lettermark import score_lettermark
from logoforge.engine.library import find_entry, get_library
from logoforge.engine.seed import derive_params, generate_seed, seed_score, validate_seed
from logoforge.models.requests import BatchRequest, GenerateRequest
from logoforge.models.responses import BatchResponse, GenerateResponse
from logoforge.svg.paint import PaintContext

router = APIRouter()


def _generate(req: GenerateRequest, paint: PaintContext) -> GenerateResponse:
    if req.seed:
        try:
            seed = validate_seed(req.seed)
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e)) from e
    else:
        seed = generate_seed(req.brand_name, req.category)

    if req.algorithm:
        entry = find_entry(req.algorithm)
        if entry is None:
            raise HTTPException(status_code=404, detail=f"Unknown algorithm: {req.algorithm}")
    else:
        entry = select_entry(seed, get_library())

    params = derive_params(seed)
    svg = entry.render(params, req.brand_name, paint)
    return GenerateResponse(
        id=seed,
        svg=svg,
        algorithm=entry.name,
        description=entry.description,
        params=params,
        quality_score=seed_score(seed, DEFAULT_CONFIG.batch_score_floor, DEFAULT_CONFIG.batch_score_span),
        lettermark=score_lettermark(svg, entry.name) if entry.kind == "wordmark" else None,
    )


@router.post("/generate", response_model=GenerateResponse)
async def generate(req: GenerateRequest, settings: Settings = Depends(get_settings)) -> GenerateResponse:
    paint = resolve_paint(req, settings)
    return await run_in_threadpool(_generate, req, paint)


@router.post("/batch", response_model=BatchResponse)
async def batch(req: BatchRequest, settings: Settings = Depends(get_settings)) -> BatchResponse:
    paint = resolve_paint(req, settings)
    results = await run_in_threadpool(
        generate_batch,
        req.brand_name,
        req.category,
        req.count,
        paint,
        archetype=req.archetype,
        vibe=req.vibe,
        sort_by_quality=req.sort_by_quality,
        workers=settings.batch_workers,
    )
    return BatchResponse(results=results, count=len(results))
