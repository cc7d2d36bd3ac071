"""Premium masked compositions.

The brand-name hash picks between small style variants of each composition, so
one base generator yields several looks without new library entries.
"""

from __future__ import annotations

from logoforge.engine.markup import (
    full_rect,
    glyph,
    initial,
    luminance_mask,
    ref_id,
    svg,
    url,
)
from logoforge.engine.registry import Family, algorithm
from logoforge.engine.seed import string_hash
from logoforge.models.params import ParameterVector
from logoforge.svg.paint import PaintContext
from logoforge.svg.serializer import el


@algorithm(id="construction", family=Family.PREMIUM, description="Architectural construction grid")
def construction(params: ParameterVector, brand_name: str, paint: PaintContext) -> str:
    seed = string_hash(brand_name)
    guides = el(
        "g",
        el("circle", cx=100, cy=100, r=80),
        el("line", x1=100, y1=20, x2=100, y2=180),
        el("line", x1=20, y1=100, x2=180, y2=100),
        el("line", x1=20, y1=20, x2=180, y2=180),
        el("line", x1=180, y1=20, x2=20, y2=180),
        stroke=paint.color,
        stroke_width=0.5,
        opacity=0.4,
        stroke_dasharray="2 2",
        fill="none",
    )
    if seed % 2 == 0:
        main = el("path", d="M100 20 L 100 100 L 180 100 A 80 80 0 0 0 100 20", fill=paint.color, opacity=0.9)
    else:
        main = el(
            "text",
            text=initial(brand_name).upper(),
            x=100,
            y=140,
            font_family="monospace",
            font_weight="bold",
            font_size=100,
            text_anchor="middle",
            fill=paint.color,
        )
    nodes = el(
        "g",
        *(el("circle", cx=x, cy=y, r=2) for x, y in ((100, 20), (180, 100), (100, 180), (20, 100))),
        el("circle", cx=100, cy=100, r=3),
        fill=paint.color,
    )
    return svg(guides, main, nodes)


@algorithm(id="neo_gradient", family=Family.PREMIUM, description="Gradient orb with soft highlight")
def neo_gradient(params: ParameterVector, brand_name: str, paint: PaintContext) -> str:
    grad_id = ref_id("grad", brand_name)
    blur_id = ref_id("blur", brand_name)
    defs = el(
        "defs",
        el(
            "linearGradient",
            el("stop", offset="0%", stop_color=paint.knockout, stop_opacity=0.8),
            el("stop", offset="100%", stop_color=paint.color),
            id=grad_id, x1="0%", y1="0%", x2="100%", y2="100%",
        ),
        el("filter", el("feGaussianBlur", in_="SourceGraphic", stdDeviation=5), id=blur_id),
    )
    return svg(
        defs,
        el("circle", cx=100, cy=100, r=60, fill=url(grad_id)),
        el("circle", cx=70, cy=70, r=20, fill=paint.knockout, opacity=0.3, filter=url(blur_id)),
        glyph(
            brand_name, paint, y=105, size=60, weight="bold",
            font_family="sans-serif", fill=paint.knockout, fill_opacity=0.9,
        ),
    )


_CONTAINERS = ("squircle", "circle", "hexagon")


@algorithm(id="negative_space", family=Family.PREMIUM, description="Container with letter cut out")
def negative_space(params: ParameterVector, brand_name: str, paint: PaintContext) -> str:
    seed = string_hash(brand_name)
    mask_id = ref_id("mask", brand_name)
    cutouts = [glyph(brand_name, paint, y=135, size=100, font_family="sans-serif", fill="black")]
    if seed % 2 == 0:
        cutouts.append(el("path", d="M0 200 L200 0", stroke="black", stroke_width=20))

    container = _CONTAINERS[seed % 3]
    if container == "squircle":
        shape = el("rect", x=20, y=20, width=160, height=160, rx=40)
    elif container == "circle":
        shape = el("circle", cx=100, cy=100, r=80)
    else:
        shape = el("path", d="M50 20 L150 20 L190 100 L150 180 L50 180 L10 100 Z")
    shape.update(fill=paint.color, mask=url(mask_id))
    return svg(el("defs", luminance_mask(mask_id, *cutouts)), shape)


@algorithm(id="swiss_minimal", family=Family.PREMIUM, description="Bold international-style shapes")
def swiss_minimal(params: ParameterVector, brand_name: str, paint: PaintContext) -> str:
    if string_hash(brand_name) % 2 == 0:
        return svg(
            el("path", d="M100 20 L180 180 L20 180 Z", fill=paint.color),
            el("circle", cx=100, cy=120, r=30, fill=paint.knockout),
        )
    return svg(
        el("path", d="M50 180 L50 140 L100 40 L150 140 L150 180 L120 180 L100 140 L80 180 Z", fill=paint.color),
        el(
            "path",
            d="M20 140 A 40 40 0 0 1 100 100 A 40 40 0 0 1 180 140",
            fill="none",
            stroke=paint.color,
            stroke_width=20,
            stroke_linecap="round",
        ),
    )


@algorithm(id="negative_space_letter", family=Family.PREMIUM, description="Solid square with letter knocked out")
def negative_space_letter(params: ParameterVector, brand_name: str, paint: PaintContext) -> str:
    mask_id = ref_id("cutout", brand_name)
    mask = luminance_mask(mask_id, glyph(brand_name, paint, y=150, size=150, fill="black"))
    block = full_rect(paint.color)
    block["mask"] = url(mask_id)
    return svg(el("defs", mask), block)


@algorithm(id="gradient_glow", family=Family.PREMIUM, description="Glowing ring")
def gradient_glow(params: ParameterVector, brand_name: str, paint: PaintContext) -> str:
    glow_id = ref_id("glow", brand_name)
    glow = el(
        "filter",
        el("feGaussianBlur", stdDeviation=5, result="coloredBlur"),
        el("feMerge", el("feMergeNode", in_="coloredBlur"), el("feMergeNode", in_="SourceGraphic")),
        id=glow_id,
    )
    return svg(
        el("defs", glow),
        el(
            "circle",
            cx=100, cy=100, r=50 * params.scale_variance,
            fill="none", stroke=paint.color, stroke_width=10,
            filter=url(glow_id),
        ),
    )


@algorithm(id="single_stroke", family=Family.PREMIUM, description="One smooth wave stroke")
def single_stroke(params: ParameterVector, brand_name: str, paint: PaintContext) -> str:
    return svg(
        el(
            "path",
            d="M50 100 Q100 0 150 100 T250 100",
            fill="none",
            stroke=paint.color,
            stroke_width=params.stroke_width * 2,
            stroke_linecap="round",
        )
    )
