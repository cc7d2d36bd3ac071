"""Interlocking geometry: rounded links woven around the canvas centre."""

from __future__ import annotations

from logoforge.engine.markup import CENTER, rotate, svg, translate
from logoforge.engine.registry import Family, algorithm
from logoforge.models.params import ParameterVector
from logoforge.svg.paint import PaintContext
from logoforge.svg.serializer import el


@algorithm(id="interlocking", family=Family.INTERLOCKING, description="Links rotated about the centre")
def interlocking(params: ParameterVector, brand_name: str, paint: PaintContext) -> str:
    count = max(3, params.element_count)
    radius = 50 * params.spacing_ratio
    stroke_w = max(4, params.stroke_width * 3)
    w = 40 * params.scale_variance
    h = 80 * params.scale_variance
    rx = min(w / 2, params.corner_radius + 10)

    links = [
        el(
            "g",
            el(
                "rect",
                x=CENTER - w / 2, y=CENTER - h / 2,
                width=w, height=h, rx=rx,
                fill="none", stroke=paint.color, stroke_width=stroke_w,
            ),
            transform=f"{rotate(i * 360 / count)} {translate(0, -radius)}",
        )
        for i in range(count)
    ]
    return svg(el("g", *links, transform=rotate(params.rotation)))
