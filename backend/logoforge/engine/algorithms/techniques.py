"""Skeleton techniques: eight ways to draw the brand initial's anatomy.

Every technique reads the skeleton of the brand's first character (scaled x2
onto the canvas) and wraps its output in a rotation about the canvas centre.
Characters without a skeleton get a hand-authored fallback shape instead.
"""

from __future__ import annotations

from typing import Any, Callable

from logoforge.engine.markup import (
    glyph,
    luminance_mask,
    rotate,
    svg,
    translate,
    url,
)
from logoforge.engine.registry import Family, algorithm
from logoforge.engine.skeletons import (
    canvas_skeleton,
    modular_points,
    skeleton_for_brand,
    stencil_gaps,
)
from logoforge.models.params import ParameterVector
from logoforge.svg.paint import PaintContext
from logoforge.svg.serializer import el, fmt

ROUND = {"stroke_linecap": "round", "stroke_linejoin": "round"}
SQUARE_CAP_TYPES = frozenset({"stem", "bar", "crossbar"})


def _rotated(params: ParameterVector, *children: dict[str, Any]) -> dict[str, Any]:
    return el("g", *children, transform=rotate(params.rotation))


def _stroke(d: str, paint: PaintContext, width: float, **attrs: Any) -> dict[str, Any]:
    return el("path", d=d, fill="none", stroke=paint.color, stroke_width=width, **attrs)


def _fallback_text(brand_name: str, paint: PaintContext, **attrs: Any) -> dict[str, Any]:
    return glyph(brand_name, paint, y=150, size=140, **attrs)


# ---------------------------------------------------------------------------
# Modular
# ---------------------------------------------------------------------------


@algorithm(id="modular", family=Family.TECHNIQUE, description="Geometric units at skeleton anchors")
def modular(params: ParameterVector, brand_name: str, paint: PaintContext) -> str:
    if skeleton_for_brand(brand_name) is None:
        return svg(
            el("circle", cx=100, cy=100, r=15, fill=paint.color),
            *(
                el("circle", cx=x, cy=y, r=12, fill=paint.color, opacity=0.7)
                for x, y in ((70, 70), (130, 70), (70, 130), (130, 130))
            ),
        )

    skeleton = canvas_skeleton(brand_name[0])
    points = modular_points(skeleton)
    unit_size = 8 + params.stroke_width * 2
    radius = params.corner_radius * 0.3
    use_circles = params.corner_radius > 25

    connections = [
        el(
            "line",
            x1=a.x, y1=a.y, x2=b.x, y2=b.y,
            stroke=paint.color,
            stroke_width=params.stroke_width,
            opacity=0.3,
        )
        for a, b in zip(points, points[1:])
    ]
    units = []
    for i, p in enumerate(points):
        size = unit_size * (1 + (i % 3) * 0.1 * params.scale_variance)
        opacity = 0.7 + (i % 3) * 0.1
        if use_circles:
            units.append(el("circle", cx=p.x, cy=p.y, r=size / 2, fill=paint.color, opacity=opacity))
        else:
            units.append(
                el(
                    "rect",
                    x=p.x - size / 2, y=p.y - size / 2,
                    width=size, height=size,
                    rx=radius,
                    fill=paint.color,
                    opacity=opacity,
                )
            )
    return svg(_rotated(params, *connections, *units))


# ---------------------------------------------------------------------------
# Stencil
# ---------------------------------------------------------------------------


@algorithm(id="stencil", family=Family.TECHNIQUE, description="Letter with cut stencil gaps")
def stencil(params: ParameterVector, brand_name: str, paint: PaintContext) -> str:
    if skeleton_for_brand(brand_name) is None:
        mask = luminance_mask(
            "stencil-fallback",
            el("rect", x=90, y=40, width=20, height=10, fill="black"),
            el("rect", x=90, y=150, width=20, height=10, fill="black"),
        )
        return svg(el("defs", mask), _fallback_text(brand_name, paint, mask=url("stencil-fallback")))

    letter = brand_name[0].upper()
    skeleton = canvas_skeleton(letter)
    gap = 6 + params.spacing_ratio * 4
    cutouts = []
    for i, g in enumerate(stencil_gaps(skeleton)):
        cx, cy = g.center
        cutouts.append(
            el(
                "rect",
                x=cx - gap / 2, y=cy - gap / 2,
                width=gap, height=gap * 1.2,
                fill="black",
                transform=rotate(45 * i, cx, cy),
            )
        )
    mask_id = f"stencil-mask-{letter}"
    return svg(
        el("defs", luminance_mask(mask_id, *cutouts)),
        el(
            "g",
            _stroke(
                skeleton.svg_path, paint, params.stroke_width * 3,
                stroke_linecap="square", stroke_linejoin="miter",
            ),
            mask=url(mask_id),
            transform=rotate(params.rotation),
        ),
    )


# ---------------------------------------------------------------------------
# Outline
# ---------------------------------------------------------------------------


@algorithm(id="outline", family=Family.TECHNIQUE, description="Echoing parallel strokes")
def outline(params: ParameterVector, brand_name: str, paint: PaintContext) -> str:
    if skeleton_for_brand(brand_name) is None:
        return svg(
            _fallback_text(brand_name, paint, fill="none", stroke=paint.color, stroke_width=8),
            _fallback_text(brand_name, paint, fill="none", stroke=paint.color, stroke_width=4, opacity=0.5),
            _fallback_text(brand_name, paint, fill="none", stroke=paint.color, stroke_width=2),
        )

    path = canvas_skeleton(brand_name[0]).svg_path
    base = params.stroke_width * 2
    layers = min(params.element_count, 4)
    echoes = [
        _stroke(path, paint, base * (1 + (i - 1) * 0.6), opacity=0.2 + (layers - i) * 0.2, **ROUND)
        for i in range(layers, 0, -1)
    ]
    return svg(_rotated(params, *echoes, _stroke(path, paint, base * 0.5, **ROUND)))


# ---------------------------------------------------------------------------
# Geometric construction
# ---------------------------------------------------------------------------


@algorithm(id="geometric", family=Family.TECHNIQUE, description="Anatomy parts styled by type")
def geometric_construction(params: ParameterVector, brand_name: str, paint: PaintContext) -> str:
    if skeleton_for_brand(brand_name) is None:
        width = params.stroke_width * 2
        return svg(
            el("rect", x=50, y=30, width=100, height=140, fill="none", stroke=paint.color, stroke_width=width),
            el("line", x1=50, y1=100, x2=150, y2=100, stroke=paint.color, stroke_width=width),
        )

    skeleton = canvas_skeleton(brand_name[0])
    stroke_w = params.stroke_width * 2
    guides = []
    if params.fill_opacity < 0.5:
        guides = [el("circle", cx=a.x, cy=a.y, r=3, fill=paint.color, opacity=0.3) for a in skeleton.anchors]

    parts = []
    for part in skeleton.anatomy:
        if not part.path:
            continue
        parts.append(
            _stroke(
                part.path,
                paint,
                stroke_w if part.is_primary else stroke_w * 0.8,
                stroke_linecap="square" if part.type in SQUARE_CAP_TYPES else "round",
                opacity=1 if part.is_primary else 0.7,
            )
        )
    return svg(_rotated(params, *guides, *parts))


# ---------------------------------------------------------------------------
# Calligraphic
# ---------------------------------------------------------------------------


@algorithm(id="calligraphic", family=Family.TECHNIQUE, description="Tapered calligraphic strokes")
def calligraphic(params: ParameterVector, brand_name: str, paint: PaintContext) -> str:
    if skeleton_for_brand(brand_name) is None:
        return svg(glyph(brand_name, paint, y=145, size=120, weight=400, font_family="Georgia, serif"))

    skeleton = canvas_skeleton(brand_name[0])
    taper = params.stroke_taper / 100
    base = params.stroke_width * 4
    strokes = []
    for part in skeleton.anatomy:
        if not part.path or part.type in ("apex", "vertex"):
            continue
        start = base * (1 if part.is_primary else 0.8)
        end = start * (1 - taper * 0.5)
        strokes.append(
            _stroke(part.path, paint, (start + end) / 2, opacity=1 if part.is_primary else 0.85, **ROUND)
        )
    return svg(_rotated(params, *strokes))


# ---------------------------------------------------------------------------
# Monoline
# ---------------------------------------------------------------------------


@algorithm(id="monoline", family=Family.TECHNIQUE, description="Single uniform stroke")
def monoline(params: ParameterVector, brand_name: str, paint: PaintContext) -> str:
    if skeleton_for_brand(brand_name) is None:
        return svg(
            _stroke("M 40 180 L 100 20 L 160 180 M 60 120 L 140 120", paint, params.stroke_width * 2, **ROUND)
        )
    path = canvas_skeleton(brand_name[0]).svg_path
    return svg(_rotated(params, _stroke(path, paint, params.stroke_width * 2.5, **ROUND)))


# ---------------------------------------------------------------------------
# Shadow
# ---------------------------------------------------------------------------


@algorithm(id="shadow", family=Family.TECHNIQUE, description="Layered offset shadow")
def shadow(params: ParameterVector, brand_name: str, paint: PaintContext) -> str:
    if skeleton_for_brand(brand_name) is None:
        return svg(
            glyph(brand_name, paint, x=108, y=155, size=140, opacity=0.2),
            glyph(brand_name, paint, x=104, y=151, size=140, opacity=0.4),
            glyph(brand_name, paint, x=100, y=147, size=140),
        )

    path = canvas_skeleton(brand_name[0]).svg_path
    width = params.stroke_width * 3
    offset = 6 + params.interlock_depth * 0.1
    return svg(
        _rotated(
            params,
            el("g", _stroke(path, paint, width, opacity=0.2, **ROUND), transform=translate(offset, offset)),
            el(
                "g",
                _stroke(path, paint, width, opacity=0.4, **ROUND),
                transform=translate(offset / 2, offset / 2),
            ),
            _stroke(path, paint, width, **ROUND),
        )
    )


# ---------------------------------------------------------------------------
# Dotted
# ---------------------------------------------------------------------------


@algorithm(id="dotted", family=Family.TECHNIQUE, description="Dash-patterned skeleton")
def dotted(params: ParameterVector, brand_name: str, paint: PaintContext) -> str:
    if skeleton_for_brand(brand_name) is None:
        return svg(
            _fallback_text(
                brand_name, paint, fill="none", stroke=paint.color, stroke_width=6, stroke_dasharray="8 4"
            )
        )

    path = canvas_skeleton(brand_name[0]).svg_path
    dash = 4 + params.spacing_ratio * 6
    gap = 3 + params.spacing_ratio * 4
    return svg(
        _rotated(
            params,
            _stroke(path, paint, params.stroke_width * 2, stroke_dasharray=f"{fmt(dash)} {fmt(gap)}", **ROUND),
        )
    )


TECHNIQUES: dict[str, Callable[[ParameterVector, str, PaintContext], str]] = {
    "modular": modular,
    "stencil": stencil,
    "outline": outline,
    "geometric": geometric_construction,
    "calligraphic": calligraphic,
    "monoline": monoline,
    "shadow": shadow,
    "dotted": dotted,
}


def generate_with_technique(
    technique: str, params: ParameterVector, brand_name: str, paint: PaintContext
) -> str:
    """Render with a named technique; unknown names draw monoline."""
    return TECHNIQUES.get(technique, monoline)(params, brand_name, paint)


def available_techniques() -> list[str]:
    return list(TECHNIQUES)
