"""Letter fusion: the brand initial with a small emblem fused on or beside it."""

from __future__ import annotations

from logoforge.engine.markup import glyph, scale, svg, translate
from logoforge.engine.registry import Family, algorithm
from logoforge.models.params import ParameterVector
from logoforge.svg.paint import PaintContext
from logoforge.svg.serializer import el

# Emblems on a 100-unit box, selected by cutout position.
EMBLEMS: tuple[tuple[str, str], ...] = (
    ("leaf", "M50 0 C20 0 0 20 0 50 C0 80 20 100 50 100 C80 100 100 80 100 50 C100 20 80 0 50 0 Z"),
    ("bolt", "M40 0 L60 0 L55 40 L90 40 L40 100 L45 50 L10 50 Z"),
    ("circle", "M50 0 A50 50 0 1 0 50 100 A50 50 0 1 0 50 0 Z"),
)


@algorithm(id="letter_fusion", family=Family.FUSION, description="Initial fused with an emblem")
def letter_fusion(params: ParameterVector, brand_name: str, paint: PaintContext) -> str:
    _, emblem = EMBLEMS[params.cutout_position % len(EMBLEMS)]
    overlay = params.interlock_depth > 50
    # Low fill opacity draws the emblem as an outline instead of a solid.
    outlined = params.fill_opacity < 0.5
    ink = paint.knockout if overlay else paint.color

    if outlined:
        mark = el("path", d=emblem, fill="none", stroke=ink, stroke_width=8)
    else:
        mark = el("path", d=emblem, fill=ink)
    dx, dy = (100, 80) if overlay else (140, 40)
    return svg(
        glyph(brand_name.upper(), paint, y=140, size=140, font_family="Arial, sans-serif"),
        el("g", mark, transform=f"{translate(dx, dy)} {scale(0.4 * params.scale_variance)}"),
    )
