"""Reference data: industry palettes and letter skeletons."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from logoforge.engine.designer import available_color_categories, recommend_colors
from logoforge.engine.skeletons import get_skeleton, has_curves, has_diagonals, render_skeleton, skeleton_summary
from logoforge.models.designer import ColorPalette
from logoforge.models.responses import AnatomyPartInfo, SkeletonResponse
from logoforge.svg.paint import DEFAULT_PAINT

router = APIRouter()


@router.get("/colors")
async def colors() -> list[str]:
    return available_color_categories()


@router.get("/colors/{category}", response_model=ColorPalette)
async def color_palette(category: str) -> ColorPalette:
    return recommend_colors(category)


@router.get("/skeletons")
async def skeletons() -> dict[str, object]:
    return skeleton_summary()


@router.get("/skeletons/{letter}", response_model=SkeletonResponse)
async def skeleton(letter: str) -> SkeletonResponse:
    sk = get_skeleton(letter)
    if sk is None:
        raise HTTPException(status_code=404, detail=f"No skeleton for {letter!r}")
    return SkeletonResponse(
        letter=sk.letter,
        description=sk.description,
        anchors=[(p.x, p.y) for p in sk.anchors],
        anatomy=[
            AnatomyPartInfo(type=part.type, anchors=list(part.anchors), path=part.path, is_primary=part.is_primary)
            for part in sk.anatomy
        ],
        svg_path=sk.svg_path,
        stroke_width_ratio=sk.stroke_width_ratio,
        has_curves=has_curves(sk),
        has_diagonals=has_diagonals(sk),
        svg=render_skeleton(sk, DEFAULT_PAINT),
    )
