"""Modern geometric marks: rotated blades, woven corners and pinwheels."""

from __future__ import annotations

from logoforge.engine.markup import CENTER, rotate, svg, translate
from logoforge.engine.registry import Family, algorithm
from logoforge.engine.seed import string_hash
from logoforge.models.params import ParameterVector
from logoforge.svg.paint import PaintContext
from logoforge.svg.serializer import el

_VIXEL_BLADES = (
    "M 100 100 L 100 40 A 20 20 0 0 1 140 40 L 140 80",
    "M 100 100 L 100 30 L 140 30 L 140 70 L 120 70 L 120 50 L 120 50",
    "M 100 100 L 100 20 A 80 80 0 0 1 180 100 Z",
)

_PINWHEEL_BLADES = (
    "M 100 100 L 100 20 L 150 50 L 130 100 Z",
    "M 100 100 Q 130 50 160 20 L 160 80 Q 130 90 100 100 Z",
)

# Corner L of a 60-unit arm, 20 thick, drawn from the origin.
_WEAVE_L = "M 0 0 L 60 0 L 60 20 L 20 20 L 20 60 L 0 60 Z"
_WEAVE_GAP = 4


@algorithm(id="vixel_flow", family=Family.MODERN, description="Four flowing blades around the centre")
def vixel_flow(params: ParameterVector, brand_name: str, paint: PaintContext) -> str:
    seed = string_hash(brand_name)
    blade = _VIXEL_BLADES[seed % 3]
    arms = [
        el(
            "g",
            el("path", d=blade, fill=paint.color, opacity=0.8 + (i % 2) * 0.2),
            transform=rotate(i * 90 + 45),
        )
        for i in range(4)
    ]
    accent = el("circle", cx=CENTER, cy=CENTER, r=15, fill=paint.knockout) if seed % 2 == 0 else None
    return svg(*arms, accent)


@algorithm(id="geometric_weave", family=Family.MODERN, description="Four corner L-shapes woven into a cross")
def geometric_weave(params: ParameterVector, brand_name: str, paint: PaintContext) -> str:
    seed = string_hash(brand_name)
    corners = [
        el(
            "g",
            el("g", el("path", d=_WEAVE_L, fill=paint.color), transform=translate(_WEAVE_GAP, _WEAVE_GAP)),
            transform=f"{translate(CENTER, CENTER)} rotate({i * 90})",
        )
        for i in range(4)
    ]
    diamond = None
    if seed % 3 == 0:
        diamond = el("rect", x=CENTER - 10, y=CENTER - 10, width=20, height=20, fill=paint.knockout,
                     transform=rotate(45))
    return svg(*corners, diamond)


@algorithm(id="radial_pinwheel", family=Family.MODERN, description="Three to six fins turning about the centre")
def radial_pinwheel(params: ParameterVector, brand_name: str, paint: PaintContext) -> str:
    seed = string_hash(brand_name)
    count = 3 + seed % 4
    blade = _PINWHEEL_BLADES[seed % 2]
    fins = [
        el(
            "g",
            el("path", d=blade, fill=paint.color, fill_opacity=0.6 + (i % 2) * 0.4),
            transform=rotate(i * 360 / count),
        )
        for i in range(count)
    ]
    return svg(*fins, el("circle", cx=CENTER, cy=CENTER, r=15, fill=paint.knockout))
