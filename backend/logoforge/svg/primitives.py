"""Icon primitive toolkit.

Abstract-icon compositions draw exclusively with these functions. Each takes the
paint context first and keyword geometry after; ``x``/``y`` default to the
canvas centre and ``size`` is the primitive's characteristic dimension (radius
for round shapes, edge length for polygons). Every primitive returns a single
element dict; multi-part primitives return a ``<g>``.
"""

from __future__ import annotations

from typing import Any, Sequence

from logoforge.svg.paint import PaintContext
from logoforge.svg.serializer import el, fmt
from logoforge.utils.geometry import polar_point, ring_points

CENTER = 100

Point = tuple[float, float]

ROUND_CAP = {"stroke_linecap": "round"}
ROUND_JOIN = {"stroke_linecap": "round", "stroke_linejoin": "round"}


def _rotation(rotation: float, x: float, y: float) -> str | None:
    return f"rotate({fmt(rotation)} {fmt(x)} {fmt(y)})" if rotation else None


def _ink(paint: PaintContext, fill: bool, stroke_width: float) -> dict[str, Any]:
    if fill:
        return {"fill": paint.color}
    return {"fill": "none", "stroke": paint.color, "stroke_width": stroke_width}


def _opacity(opacity: float) -> float | None:
    return None if opacity == 1 else opacity


def _pt(p: Point) -> str:
    return f"{fmt(p[0])} {fmt(p[1])}"


# ---------------------------------------------------------------------------
# Closed shapes
# ---------------------------------------------------------------------------


def circle(
    paint: PaintContext,
    *,
    x: float = CENTER,
    y: float = CENTER,
    size: float = 40,
    fill: bool = True,
    stroke_width: float = 4,
    opacity: float = 1,
) -> dict[str, Any]:
    return el("circle", cx=x, cy=y, r=size, opacity=_opacity(opacity), **_ink(paint, fill, stroke_width))


def ring(
    paint: PaintContext,
    *,
    x: float = CENTER,
    y: float = CENTER,
    size: float = 40,
    stroke_width: float = 8,
    opacity: float = 1,
) -> dict[str, Any]:
    return circle(paint, x=x, y=y, size=size, fill=False, stroke_width=stroke_width, opacity=opacity)


def dot(
    paint: PaintContext, *, x: float = CENTER, y: float = CENTER, size: float = 10, opacity: float = 1
) -> dict[str, Any]:
    return circle(paint, x=x, y=y, size=size, opacity=opacity)


def ellipse(
    paint: PaintContext,
    *,
    x: float = CENTER,
    y: float = CENTER,
    rx: float = 50,
    ry: float = 20,
    fill: bool = True,
    stroke_width: float = 4,
    opacity: float = 1,
) -> dict[str, Any]:
    return el("ellipse", cx=x, cy=y, rx=rx, ry=ry, opacity=_opacity(opacity), **_ink(paint, fill, stroke_width))


def semicircle(
    paint: PaintContext,
    *,
    x: float = CENTER,
    y: float = CENTER,
    size: float = 40,
    rotation: float = 0,
    fill: bool = True,
    stroke_width: float = 4,
    opacity: float = 1,
) -> dict[str, Any]:
    d = f"M {_pt((x - size, y))} A {fmt(size)} {fmt(size)} 0 0 1 {_pt((x + size, y))}"
    extra = {} if fill else ROUND_CAP
    return el(
        "path",
        d=f"{d} Z" if fill else d,
        transform=_rotation(rotation, x, y),
        opacity=_opacity(opacity),
        **_ink(paint, fill, stroke_width),
        **extra,
    )


def quarter_circle(
    paint: PaintContext,
    *,
    x: float = CENTER,
    y: float = CENTER,
    size: float = 40,
    rotation: float = 0,
    fill: bool = True,
    stroke_width: float = 4,
    opacity: float = 1,
) -> dict[str, Any]:
    sweep = f"A {fmt(size)} {fmt(size)} 0 0 0 {_pt((x, y - size))}"
    if fill:
        d, extra = f"M {_pt((x, y))} L {_pt((x + size, y))} {sweep} Z", {}
    else:
        d, extra = f"M {_pt((x + size, y))} {sweep}", ROUND_CAP
    return el(
        "path",
        d=d,
        transform=_rotation(rotation, x, y),
        opacity=_opacity(opacity),
        **_ink(paint, fill, stroke_width),
        **extra,
    )


def sector(
    paint: PaintContext,
    *,
    x: float = CENTER,
    y: float = CENTER,
    size: float = 50,
    start: float = 0,
    sweep: float = 60,
    opacity: float = 1,
) -> dict[str, Any]:
    """Filled pie slice from ``start`` through ``sweep`` degrees."""
    p1 = polar_point(x, y, size, start)
    p2 = polar_point(x, y, size, start + sweep)
    large = 1 if sweep > 180 else 0
    d = f"M {_pt((x, y))} L {_pt(p1)} A {fmt(size)} {fmt(size)} 0 {large} 1 {_pt(p2)} Z"
    return el("path", d=d, fill=paint.color, opacity=_opacity(opacity))


def rectangle(
    paint: PaintContext,
    *,
    x: float = CENTER,
    y: float = CENTER,
    size: float = 40,
    aspect_ratio: float = 1.5,
    rotation: float = 0,
    fill: bool = True,
    stroke_width: float = 4,
    corner_radius: float = 0,
    opacity: float = 1,
) -> dict[str, Any]:
    """Rectangle centred on (x, y), ``size`` tall and ``size * aspect_ratio`` wide."""
    width = size * aspect_ratio
    return el(
        "rect",
        x=x - width / 2,
        y=y - size / 2,
        width=width,
        height=size,
        rx=corner_radius or None,
        transform=_rotation(rotation, x, y),
        opacity=_opacity(opacity),
        **_ink(paint, fill, stroke_width),
    )


def square(
    paint: PaintContext,
    *,
    x: float = CENTER,
    y: float = CENTER,
    size: float = 40,
    rotation: float = 0,
    fill: bool = True,
    stroke_width: float = 4,
    corner_radius: float = 0,
    opacity: float = 1,
) -> dict[str, Any]:
    return rectangle(
        paint,
        x=x,
        y=y,
        size=size,
        aspect_ratio=1,
        rotation=rotation,
        fill=fill,
        stroke_width=stroke_width,
        corner_radius=corner_radius,
        opacity=opacity,
    )


def triangle(
    paint: PaintContext,
    *,
    x: float = CENTER,
    y: float = CENTER,
    size: float = 40,
    rotation: float = 0,
    fill: bool = True,
    stroke_width: float = 4,
    opacity: float = 1,
) -> dict[str, Any]:
    """Equilateral triangle, apex up, centred on its centroid."""
    h = size * 0.866
    d = (
        f"M {_pt((x, y - h * 0.67))} L {_pt((x + size / 2, y + h * 0.33))} "
        f"L {_pt((x - size / 2, y + h * 0.33))} Z"
    )
    extra = {} if fill else {"stroke_linejoin": "round"}
    return el(
        "path",
        d=d,
        transform=_rotation(rotation, x, y),
        opacity=_opacity(opacity),
        **_ink(paint, fill, stroke_width),
        **extra,
    )


# ---------------------------------------------------------------------------
# Strokes
# ---------------------------------------------------------------------------


def line(
    paint: PaintContext,
    *,
    x: float = CENTER,
    y: float = CENTER,
    length: float = 60,
    rotation: float = 0,
    stroke_width: float = 6,
    opacity: float = 1,
) -> dict[str, Any]:
    """Horizontal round-capped line centred on (x, y), then rotated."""
    half = length / 2
    return el(
        "line",
        x1=x - half,
        y1=y,
        x2=x + half,
        y2=y,
        stroke=paint.color,
        stroke_width=stroke_width,
        transform=_rotation(rotation, x, y),
        opacity=_opacity(opacity),
        **ROUND_CAP,
    )


def segment(
    paint: PaintContext,
    start: Point,
    end: Point,
    *,
    stroke_width: float = 4,
    opacity: float = 1,
    dasharray: str | None = None,
) -> dict[str, Any]:
    """Straight line between two explicit points, butt caps."""
    return el(
        "line",
        x1=start[0],
        y1=start[1],
        x2=end[0],
        y2=end[1],
        stroke=paint.color,
        stroke_width=stroke_width,
        stroke_dasharray=dasharray,
        opacity=_opacity(opacity),
    )


def polyline(
    paint: PaintContext,
    points: Sequence[Point],
    *,
    closed: bool = False,
    fill: bool = False,
    stroke_width: float = 4,
    rounded: bool = True,
    opacity: float = 1,
) -> dict[str, Any]:
    """Straight-edged path through ``points``; filled shapes are always closed."""
    head, *rest = points
    d = f"M {_pt(head)} " + " ".join(f"L {_pt(p)}" for p in rest)
    if closed or fill:
        d += " Z"
    extra = ROUND_JOIN if rounded and not fill else {}
    return el("path", d=d, opacity=_opacity(opacity), **_ink(paint, fill, stroke_width), **extra)


def curve(
    paint: PaintContext,
    d: str,
    *,
    fill: bool = False,
    stroke_width: float = 4,
    linecap: str | None = "round",
    linejoin: str | None = None,
    opacity: float = 1,
) -> dict[str, Any]:
    """Control-point path (``Q``/``C``/``T`` commands) on the canvas."""
    stroke_style = {} if fill else {"stroke_linecap": linecap, "stroke_linejoin": linejoin}
    return el("path", d=d, opacity=_opacity(opacity), **_ink(paint, fill, stroke_width), **stroke_style)


def arrow(
    paint: PaintContext,
    *,
    x: float = CENTER,
    y: float = CENTER,
    size: float = 40,
    rotation: float = 0,
    stroke_width: float = 6,
    opacity: float = 1,
) -> dict[str, Any]:
    half = size / 2
    d = (
        f"M {_pt((x - half, y))} L {_pt((x + half, y))} "
        f"M {_pt((x + half * 0.3, y - half * 0.5))} L {_pt((x + half, y))} "
        f"L {_pt((x + half * 0.3, y + half * 0.5))}"
    )
    return el(
        "path",
        d=d,
        fill="none",
        stroke=paint.color,
        stroke_width=stroke_width,
        transform=_rotation(rotation, x, y),
        opacity=_opacity(opacity),
        **ROUND_JOIN,
    )


def chevron(
    paint: PaintContext,
    *,
    x: float = CENTER,
    y: float = CENTER,
    size: float = 30,
    rotation: float = 0,
    stroke_width: float = 6,
    opacity: float = 1,
) -> dict[str, Any]:
    d = (
        f"M {_pt((x - size / 2, y + size / 3))} L {_pt((x, y - size / 3))} "
        f"L {_pt((x + size / 2, y + size / 3))}"
    )
    return el(
        "path",
        d=d,
        fill="none",
        stroke=paint.color,
        stroke_width=stroke_width,
        transform=_rotation(rotation, x, y),
        opacity=_opacity(opacity),
        **ROUND_JOIN,
    )


def arc(
    paint: PaintContext,
    *,
    x: float = CENTER,
    y: float = CENTER,
    size: float = 40,
    sweep: float = 90,
    rotation: float = 0,
    stroke_width: float = 6,
    opacity: float = 1,
) -> dict[str, Any]:
    """Open arc of ``sweep`` degrees centred on the +x axis, then rotated."""
    p1 = polar_point(x, y, size, -sweep / 2)
    p2 = polar_point(x, y, size, sweep / 2)
    large = 1 if sweep > 180 else 0
    return el(
        "path",
        d=f"M {_pt(p1)} A {fmt(size)} {fmt(size)} 0 {large} 1 {_pt(p2)}",
        fill="none",
        stroke=paint.color,
        stroke_width=stroke_width,
        transform=_rotation(rotation, x, y),
        opacity=_opacity(opacity),
        **ROUND_CAP,
    )


def wave(
    paint: PaintContext,
    *,
    x: float = CENTER,
    y: float = CENTER,
    size: float = 60,
    waves: int = 2,
    rotation: float = 0,
    stroke_width: float = 5,
    opacity: float = 1,
) -> dict[str, Any]:
    amplitude = size / 6
    width = size / waves
    d = f"M {_pt((x - size / 2, y))}"
    for i in range(waves):
        x_start = x - size / 2 + i * width
        direction = -1 if i % 2 == 0 else 1
        d += f" Q {_pt((x_start + width / 2, y + amplitude * direction))} {_pt((x_start + width, y))}"
    return el(
        "path",
        d=d,
        fill="none",
        stroke=paint.color,
        stroke_width=stroke_width,
        transform=_rotation(rotation, x, y),
        opacity=_opacity(opacity),
        **ROUND_CAP,
    )


def spiral(
    paint: PaintContext,
    *,
    x: float = CENTER,
    y: float = CENTER,
    size: float = 40,
    rotation: float = 0,
    stroke_width: float = 5,
    opacity: float = 1,
) -> dict[str, Any]:
    """Three nested 240-degree arcs with shrinking radius."""
    parts = []
    for i in range(3):
        r = size - i * 10
        start = i * 120
        p1 = polar_point(x, y, r, start)
        p2 = polar_point(x, y, r - 5, start + 240)
        parts.append(f"M {_pt(p1)} A {fmt(r)} {fmt(r)} 0 1 1 {_pt(p2)}")
    return el(
        "path",
        d=" ".join(parts),
        fill="none",
        stroke=paint.color,
        stroke_width=stroke_width,
        transform=_rotation(rotation, x, y),
        opacity=_opacity(opacity),
        **ROUND_CAP,
    )


# ---------------------------------------------------------------------------
# Dot arrangements
# ---------------------------------------------------------------------------


def dot_grid(
    paint: PaintContext,
    *,
    x: float = CENTER,
    y: float = CENTER,
    size: float = 6,
    cols: int = 3,
    rows: int = 3,
    gap: float = 20,
    opacity: float = 1,
) -> dict[str, Any]:
    start_x = x - (cols - 1) * gap / 2
    start_y = y - (rows - 1) * gap / 2
    return el(
        "g",
        *(
            dot(paint, x=start_x + col * gap, y=start_y + row * gap, size=size, opacity=opacity)
            for row in range(rows)
            for col in range(cols)
        ),
    )


def dot_pattern(
    paint: PaintContext,
    *,
    x: float = CENTER,
    y: float = CENTER,
    size: float = 5,
    count: int = 6,
    radius: float = 30,
    opacity: float = 1,
) -> dict[str, Any]:
    """Ring of ``count`` dots around a slightly larger centre dot."""
    dots = [
        dot(paint, x=px, y=py, size=size, opacity=opacity)
        for px, py in ring_points(x, y, radius, count)
    ]
    dots.append(dot(paint, x=x, y=y, size=size * 1.2, opacity=opacity))
    return el("g", *dots)


TOOLKIT = (
    "circle",
    "ring",
    "dot",
    "ellipse",
    "semicircle",
    "quarter_circle",
    "sector",
    "rectangle",
    "square",
    "triangle",
    "line",
    "segment",
    "polyline",
    "curve",
    "arrow",
    "chevron",
    "arc",
    "wave",
    "spiral",
    "dot_grid",
    "dot_pattern",
)
