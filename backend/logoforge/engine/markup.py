"""Shared markup helpers for generators on the fixed 200-unit canvas."""

from __future__ import annotations

from typing import Any

from logoforge.engine.seed import string_hash
from logoforge.svg.paint import PaintContext
from logoforge.svg.serializer import el, fmt, serialize_svg

CANVAS = 200
CENTER = 100


def rotate(angle: float, cx: float = CENTER, cy: float = CENTER) -> str:
    return f"rotate({fmt(angle)} {fmt(cx)} {fmt(cy)})"


def translate(dx: float, dy: float) -> str:
    return f"translate({fmt(dx)} {fmt(dy)})"


def scale(factor: float) -> str:
    return f"scale({fmt(factor)})"


def ref_id(prefix: str, brand_name: str) -> str:
    """Document-local id. Derived from a hash so brand text never lands in ids."""
    return f"{prefix}-{string_hash(brand_name)}"


def url(ref: str) -> str:
    return f"url(#{ref})"


def initial(brand_name: str) -> str:
    return brand_name[:1]


def svg(*elements: dict[str, Any] | None) -> str:
    return serialize_svg([e for e in elements if e], CANVAS)


def full_rect(fill: str) -> dict[str, Any]:
    return el("rect", width=CANVAS, height=CANVAS, fill=fill)


def luminance_mask(mask_id: str, *cutouts: dict[str, Any]) -> dict[str, Any]:
    """White-filled mask; ``cutouts`` (drawn black) remove coverage."""
    return el("mask", full_rect("white"), *cutouts, id=mask_id)


def glyph(
    brand_name: str,
    paint: PaintContext,
    *,
    y: float,
    size: float,
    weight: int | str = 900,
    x: float = CENTER,
    **attrs: Any,
) -> dict[str, Any]:
    """Centered text glyph of the brand's first character."""
    attrs.setdefault("fill", paint.color)
    return el(
        "text",
        text=initial(brand_name),
        x=x,
        y=y,
        font_size=size,
        font_weight=weight,
        text_anchor="middle",
        **attrs,
    )
