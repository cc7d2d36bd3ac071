"""Geometric trinity series: three-fold constructions with masked negative space."""

from __future__ import annotations

from typing import Any

from logoforge.engine.markup import CENTER, luminance_mask, ref_id, rotate, svg, url
from logoforge.engine.registry import Family, algorithm
from logoforge.engine.seed import string_hash
from logoforge.models.params import ParameterVector
from logoforge.svg.paint import PaintContext
from logoforge.svg.serializer import el, fmt
from logoforge.utils.geometry import ring_points


def _pt(p: tuple[float, float]) -> str:
    return f"{fmt(p[0])},{fmt(p[1])}"


def _polygon(*points: tuple[float, float]) -> str:
    head, *rest = points
    return f"M{_pt(head)} " + " ".join(f"L{_pt(p)}" for p in rest) + " Z"


def _masked(mask_id: str, *shapes: dict[str, Any]) -> list[dict[str, Any]]:
    for shape in shapes:
        shape["mask"] = url(mask_id)
    return list(shapes)


@algorithm(id="trinity_knot", family=Family.TRINITY, description="Three-lobed knot")
def trinity_knot(params: ParameterVector, brand_name: str, paint: PaintContext) -> str:
    seed = string_hash(brand_name)
    mask_id = ref_id("trinity-mask", brand_name)
    # Three points 40 units out, starting straight up.
    p1, p2, p3 = ring_points(CENTER, CENTER, 40, 3, start_degrees=-90)
    style = seed % 3

    if style == 0:
        cutouts = (
            el("circle", cx=CENTER, cy=CENTER, r=15, fill="black"),
            el(
                "path",
                d=" ".join(f"M{_pt(p)} L{CENTER},{CENTER}" for p in (p1, p2, p3)),
                stroke="black",
                stroke_width=8,
            ),
        )
        lobes = [el("circle", cx=p[0], cy=p[1], r=35, fill=paint.color) for p in (p1, p2, p3)]
        return svg(el("defs", luminance_mask(mask_id, *cutouts)), *_masked(mask_id, *lobes))

    if style == 1:
        c = f"{CENTER},{CENTER}"
        return svg(
            el(
                "path",
                d=f"M{_pt(p1)} Q{c} {_pt(p2)} Q{c} {_pt(p3)} Q{c} {_pt(p1)}",
                stroke=paint.color,
                stroke_width=35,
                stroke_linecap="round",
                stroke_linejoin="round",
                fill="none",
            ),
            el("circle", cx=CENTER, cy=CENTER, r=15, fill=paint.color),
        )

    return svg(
        el(
            "g",
            *(el("circle", cx=p[0], cy=p[1], r=25, fill=paint.color) for p in (p1, p2, p3)),
            el("circle", cx=CENTER, cy=CENTER, r=45, stroke=paint.color, stroke_width=8, fill="none"),
            transform=rotate(seed % 60),
        )
    )


@algorithm(id="cubic_hexagon", family=Family.TRINITY, description="Isometric cube and hexagon weave")
def cubic_hexagon(params: ParameterVector, brand_name: str, paint: PaintContext) -> str:
    seed = string_hash(brand_name)
    mask_id = ref_id("cube-mask", brand_name)
    c, t, tr, br, bl, tl = (100, 100), (100, 20), (169, 60), (169, 140), (31, 140), (31, 60)
    bottom = (100, 180)
    style = seed % 3

    if style == 0:
        faces = [
            el("path", d=_polygon(c, tr, t, tl), fill=paint.color, opacity=1),
            el("path", d=_polygon(c, bl, bottom, br), fill=paint.color, opacity=0.6),
            el("path", d=_polygon(c, tl, bl), fill=paint.color, opacity=0.8),
            el("path", d=_polygon(c, tr, br), fill=paint.color, opacity=0.8),
        ]
        cutouts = [el("path", d=f"M{_pt(c)} L{_pt(p)}", stroke="black", stroke_width=8) for p in (t, bl, br)]
    elif style == 1:
        faces = [
            el(
                "path",
                d=_polygon(t, tr, br, bottom, bl, tl),
                fill="none",
                stroke=paint.color,
                stroke_width=30,
                stroke_linejoin="round",
            )
        ]
        cutouts = [
            el(
                "path",
                d="M100,110 L60,40 L140,40 Z",
                fill="black",
                transform=rotate(0 if seed % 2 == 0 else 60),
            )
        ]
    else:
        rim = ((100, 20), (170, 60), (170, 140), (100, 180), (30, 140), (30, 60))
        opacities = (0.9, 0.7, 0.5, 0.7, 0.9, 0.5)
        faces = [
            el("path", d=_polygon(c, rim[i], rim[(i + 1) % 6]), fill=paint.color, opacity=opacities[i])
            for i in range(6)
        ]
        cutouts = [el("circle", cx=100, cy=100, r=15, fill="black")]

    return svg(el("defs", luminance_mask(mask_id, *cutouts)), *_masked(mask_id, *faces))


@algorithm(id="arrowhead_stack", family=Family.TRINITY, description="Arrowhead with core cut")
def arrowhead_stack(params: ParameterVector, brand_name: str, paint: PaintContext) -> str:
    seed = string_hash(brand_name)
    mask_id = ref_id("arrow-mask", brand_name)
    style = seed % 3

    if style == 0:
        mask = luminance_mask(
            mask_id,
            el("path", d="M100,80 L140,160 L60,160 Z", fill="black"),
            el("rect", x=90, y=160, width=20, height=40, fill="black"),
        )
        return svg(
            el("defs", mask),
            el("path", d="M100,20 L180,180 L20,180 Z", fill=paint.color, mask=url(mask_id)),
        )

    if style == 1:
        return svg(
            *(
                el("path", d=_polygon((100, 20 + dy), (150, 70 + dy), (100, 120 + dy), (50, 70 + dy)),
                   fill=paint.color, opacity=opacity)
                for dy, opacity in ((0, 0.4), (40, 0.7), (80, 1))
            )
        )

    mask = luminance_mask(mask_id, el("path", d="M40,20 L80,100 L40,180 L20,100 Z", fill="black", opacity=0.5))
    return svg(
        el("defs", mask),
        el("path", d="M40,20 L140,100 L40,180 Z", fill=paint.color, mask=url(mask_id)),
        el("path", d="M140,100 L180,100 L160,80 Z", fill=paint.color, opacity=0.5),
    )
