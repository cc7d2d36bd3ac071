"""Abstract monograms keyed on the brand initial: triangle, circular and grid families."""

from __future__ import annotations

from logoforge.engine.markup import CENTER, initial, rotate, svg
from logoforge.engine.registry import Family, algorithm
from logoforge.engine.seed import string_hash
from logoforge.models.params import ParameterVector
from logoforge.svg.paint import PaintContext
from logoforge.svg.serializer import el

_TRIANGLE = "M100 20 L20 180 L180 180 Z"


@algorithm(id="triangle_monogram", family=Family.MONOGRAM, description="Triangle-family monogram (A, V)")
def triangle_monogram(params: ParameterVector, brand_name: str, paint: PaintContext) -> str:
    letter = initial(brand_name).upper()
    seed = string_hash(brand_name)

    if letter == "A" and seed % 2 == 0:
        parts = [
            el("path", d=_TRIANGLE, fill=paint.color),
            el("circle", cx=100, cy=140, r=30, fill=paint.knockout),
            el("rect", x=90, y=120, width=20, height=80, fill=paint.knockout),
        ]
    elif letter == "A":
        parts = [
            el("path", d="M100 20 L180 180 L140 180 L100 80 L60 180 L20 180 Z", fill=paint.color),
            el("rect", x=70, y=130, width=60, height=20, fill=paint.color),
        ]
    elif letter == "V":
        parts = [el("path", d="M20 20 L100 180 L180 20 L140 20 L100 120 L60 20 Z", fill=paint.color)]
    else:
        parts = [
            el(
                "path",
                d="M100 20 L180 180 L20 180 Z",
                fill="none",
                stroke=paint.color,
                stroke_width=params.stroke_width * 4 + 10,
                stroke_linejoin="round",
            ),
            el("circle", cx=100, cy=110, r=20, fill=paint.color),
        ]
    return svg(el("g", *parts, transform=rotate(params.rotation)))


@algorithm(id="circular_monogram", family=Family.MONOGRAM, description="Ring-family monogram (C, G, O, Q)")
def circular_monogram(params: ParameterVector, brand_name: str, paint: PaintContext) -> str:
    letter = initial(brand_name).upper()
    seed = string_hash(brand_name)
    stroke_w = 20 + params.stroke_width * 2
    ring = el("circle", cx=CENTER, cy=CENTER, r=70, fill="none", stroke=paint.color, stroke_width=stroke_w)

    if letter in ("C", "G"):
        # The dash gap opens the ring; its offset and turn differ per letter.
        ring.update(
            {
                "stroke-dasharray": 350,
                "stroke-dashoffset": 60 if letter == "C" else 90,
                "transform": rotate(90 if letter == "C" else 45),
                "stroke-linecap": "round",
            }
        )
        parts = [ring]
        if letter == "G":
            parts.append(el("rect", x=90, y=90, width=50, height=stroke_w, fill=paint.color))
    elif letter in ("O", "Q"):
        parts = [ring]
        if letter == "Q":
            parts.append(
                el("rect", x=110, y=110, width=30, height=60, fill=paint.color, transform=rotate(-45, 125, 140))
            )
        if seed % 2 == 0:
            parts.append(el("circle", cx=CENTER, cy=CENTER, r=30 - params.stroke_width, fill=paint.color))
    else:
        parts = [ring, el("circle", cx=CENTER, cy=CENTER, r=30, fill=paint.color, opacity=0.5)]
    return svg(el("g", *parts, transform=rotate(params.rotation)))


@algorithm(id="grid_monogram", family=Family.MONOGRAM, description="Block-family monogram (H, E, F, L)")
def grid_monogram(params: ParameterVector, brand_name: str, paint: PaintContext) -> str:
    letter = initial(brand_name).upper()

    if letter == "H":
        parts = [
            el("rect", x=40, y=30, width=40, height=140, rx=5, fill=paint.color),
            el("rect", x=120, y=30, width=40, height=140, rx=5, fill=paint.color),
            el("rect", x=40, y=90, width=120, height=20, fill=paint.color),
        ]
    elif letter in ("E", "F", "L"):
        parts = [
            el("rect", x=40, y=30, width=40, height=140, fill=paint.color),
            el("rect", x=40, y=30, width=100, height=30, fill=paint.color),
            el("rect", x=40, y=140, width=100 if letter == "L" else 40, height=30, fill=paint.color),
        ]
        if letter != "L":
            parts.append(el("rect", x=40, y=85, width=80, height=30, fill=paint.color))
    else:
        parts = [
            el("rect", x=50, y=50, width=100, height=100, fill="none", stroke=paint.color, stroke_width=20),
            el("rect", x=90, y=90, width=20, height=20, fill=paint.color),
        ]
    return svg(el("g", *parts, transform=rotate(params.rotation)))
