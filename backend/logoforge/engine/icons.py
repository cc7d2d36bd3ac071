"""Abstract icon system: symbol-only marks composed from the primitive toolkit.

Each semantic category owns four compositions. A request resolves to a category
(exact name, else keyword scan, else ``default``) and the brand-name hash picks
the composition within it. Compositions draw only through
``logoforge.svg.primitives``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any, Callable

from logoforge.engine.markup import CENTER, rotate, svg
from logoforge.engine.seed import string_hash
from logoforge.models.params import ParameterVector
from logoforge.svg import primitives as pr
from logoforge.svg.paint import PaintContext
from logoforge.svg.serializer import el
from logoforge.utils.geometry import ring_points

logger = logging.getLogger(__name__)

Composition = Callable[[ParameterVector, int, PaintContext], list[dict[str, Any]]]

DEFAULT_CATEGORY = "default"


@dataclass
class IconCategory:
    name: str
    label: str
    keywords: tuple[str, ...]
    compositions: list[Composition] = field(default_factory=list)


# Declaration order is the keyword-scan order.
CATEGORIES: dict[str, IconCategory] = {
    c.name: c
    for c in (
        IconCategory(
            "speed", "Speed and motion",
            ("fast", "quick", "motion", "dynamic", "swift", "rapid", "velocity", "rush", "dash", "sprint"),
        ),
        IconCategory(
            "growth", "Growth and ascent",
            ("grow", "rise", "up", "increase", "expand", "elevate", "boost", "scale", "climb", "progress"),
        ),
        IconCategory(
            "connect", "Connection and network",
            ("network", "link", "connect", "social", "community", "together", "unite", "bridge", "team", "group"),
        ),
        IconCategory(
            "secure", "Security and trust",
            ("safe", "secure", "protect", "trust", "shield", "guard", "lock", "defense", "privacy", "reliable"),
        ),
        IconCategory(
            "tech", "Technology and digital",
            ("tech", "digital", "code", "software", "app", "cyber", "data", "compute", "ai", "algorithm",
             "dev", "cloud"),
        ),
        IconCategory(
            "creative", "Creative and design",
            ("design", "creative", "art", "studio", "craft", "build", "make", "create", "imagine", "visual"),
        ),
        IconCategory(
            "data", "Data and analytics",
            ("analytics", "data", "insight", "chart", "metric", "measure", "track", "report", "dashboard",
             "statistics"),
        ),
        IconCategory(
            "communication", "Communication",
            ("chat", "message", "talk", "speak", "voice", "call", "signal", "broadcast", "media", "social"),
        ),
        IconCategory(
            "finance", "Finance and money",
            ("money", "finance", "bank", "invest", "pay", "fund", "capital", "trade", "wealth", "crypto", "coin"),
        ),
        IconCategory(
            "health", "Health and wellness",
            ("health", "wellness", "care", "medical", "fit", "life", "vital", "heal", "therapy", "clinic"),
        ),
        IconCategory(DEFAULT_CATEGORY, "Abstract", ()),
    )
}


def composition(category: str):
    """Append the decorated function to ``category``'s composition list."""

    def decorator(fn: Composition) -> Composition:
        CATEGORIES[category].compositions.append(fn)
        return fn

    return decorator


# ---------------------------------------------------------------------------
# Speed
# ---------------------------------------------------------------------------


@composition("speed")
def stacked_chevrons(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    spacing = 18 + seed % 10
    sw = p.stroke_width * 2
    return [
        pr.chevron(paint, y=CENTER - spacing, size=35, stroke_width=sw),
        pr.chevron(paint, y=CENTER, size=35, stroke_width=sw, opacity=0.7),
        pr.chevron(paint, y=CENTER + spacing, size=35, stroke_width=sw, opacity=0.4),
    ]


@composition("speed")
def parallel_lines(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    gap = 15 + seed % 8
    return [
        pr.line(paint, y=CENTER - gap, length=70, stroke_width=p.stroke_width * 2),
        pr.line(paint, y=CENTER, length=90, stroke_width=p.stroke_width * 2.5),
        pr.line(paint, y=CENTER + gap, length=70, stroke_width=p.stroke_width * 2),
    ]


@composition("speed")
def arrow_sequence(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    return [
        pr.arrow(paint, x=CENTER - 25, size=35, stroke_width=p.stroke_width * 1.5, opacity=0.5),
        pr.arrow(paint, x=CENTER + 10, size=50, stroke_width=p.stroke_width * 2),
    ]


@composition("speed")
def motion_blur(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    base = 50 + seed % 20
    thin = p.stroke_width * 1.5
    return [
        pr.line(paint, x=CENTER - 15, y=CENTER - 20, length=base * 0.6, stroke_width=thin, opacity=0.4),
        pr.line(paint, x=CENTER, y=CENTER, length=base, stroke_width=p.stroke_width * 2.5),
        pr.line(paint, x=CENTER - 15, y=CENTER + 20, length=base * 0.6, stroke_width=thin, opacity=0.4),
        pr.triangle(paint, x=CENTER + 35, size=30, rotation=90, fill=False, stroke_width=p.stroke_width * 2),
    ]


# ---------------------------------------------------------------------------
# Growth
# ---------------------------------------------------------------------------


@composition("growth")
def ascending_bars(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    gap = 12 + seed % 6 + 8
    return [
        pr.rectangle(paint, x=CENTER + dx, y=CENTER + dy, size=h, aspect_ratio=0.4, corner_radius=p.corner_radius)
        for dx, dy, h in ((-gap, 20, 30), (0, 0, 50), (gap, -20, 70))
    ]


@composition("growth")
def upward_triangle(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    return [
        pr.triangle(paint, size=70, fill=False, stroke_width=p.stroke_width * 2.5),
        pr.line(paint, y=CENTER + 5, length=40, stroke_width=p.stroke_width * 2, opacity=0.6),
    ]


@composition("growth")
def rising_arc(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    return [
        pr.arc(paint, size=50, sweep=180, stroke_width=p.stroke_width * 2.5),
        pr.dot(paint, y=CENTER - 55, size=8),
    ]


@composition("growth")
def growth_curve(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    return [
        pr.curve(paint, "M 50 150 Q 80 130 100 100 T 150 50", stroke_width=p.stroke_width * 2.5),
        pr.dot(paint, x=150, y=50, size=10),
    ]


# ---------------------------------------------------------------------------
# Connect
# ---------------------------------------------------------------------------


@composition("connect")
def overlapping_rings(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    offset = 25 + seed % 10
    return [
        pr.ring(paint, x=CENTER - offset, size=35, stroke_width=p.stroke_width * 2),
        pr.ring(paint, x=CENTER + offset, size=35, stroke_width=p.stroke_width * 2),
    ]


@composition("connect")
def ring_chain(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    return [pr.ring(paint, x=CENTER + dx, size=28, stroke_width=p.stroke_width * 1.8) for dx in (-30, 0, 30)]


@composition("connect")
def node_network(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    hub = (CENTER, CENTER)
    nodes = ((CENTER - 40, CENTER + 30), (CENTER + 40, CENTER + 30), (CENTER, CENTER - 45))
    links = [pr.segment(paint, node, hub, stroke_width=p.stroke_width * 1.5) for node in nodes]
    dots = [pr.dot(paint, x=x, y=y, size=8, opacity=0.7) for x, y in nodes]
    return [*links, pr.dot(paint, size=12), *dots]


@composition("connect")
def hub_and_spokes(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    spokes = 5 + seed % 3
    parts: list[dict[str, Any]] = []
    for end in ring_points(CENTER, CENTER, 45, spokes):
        parts.append(pr.segment(paint, (CENTER, CENTER), end, stroke_width=p.stroke_width * 1.5, opacity=0.6))
        parts.append(pr.dot(paint, x=end[0], y=end[1], size=6))
    parts.append(pr.circle(paint, size=15))
    return parts


# ---------------------------------------------------------------------------
# Secure
# ---------------------------------------------------------------------------


@composition("secure")
def shield_outline(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    return [
        pr.curve(
            paint,
            "M 100 40 L 150 60 L 150 110 Q 150 150 100 170 Q 50 150 50 110 L 50 60 Z",
            stroke_width=p.stroke_width * 2.5,
            linecap=None,
            linejoin="round",
        )
    ]


@composition("secure")
def padlock(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    sw = p.stroke_width * 2.5
    return [
        pr.arc(paint, y=CENTER - 25, size=25, sweep=180, rotation=180, stroke_width=sw),
        pr.square(paint, y=CENTER + 15, size=55, corner_radius=p.corner_radius * 0.3, fill=False, stroke_width=sw),
    ]


@composition("secure")
def checked_circle(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    return [
        pr.ring(paint, size=55, stroke_width=p.stroke_width * 2),
        pr.polyline(paint, ((75, 100), (95, 120), (130, 80)), stroke_width=p.stroke_width * 2.5),
    ]


@composition("secure")
def fortress_rings(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    return [
        pr.ring(paint, size=55, stroke_width=p.stroke_width * 1.5),
        pr.ring(paint, size=38, stroke_width=p.stroke_width * 1.5),
        pr.dot(paint, size=12),
    ]


# ---------------------------------------------------------------------------
# Tech
# ---------------------------------------------------------------------------


@composition("tech")
def pixel_grid(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    grid, cell, gap = 3, 20, 4
    origin = CENTER - (grid - 1) * (cell + gap) / 2
    return [
        pr.square(
            paint,
            x=origin + col * (cell + gap),
            y=origin + row * (cell + gap),
            size=cell,
            corner_radius=p.corner_radius * 0.1,
            opacity=round(0.6 + (row + col) * 0.1, 2),
        )
        for row in range(grid)
        for col in range(grid)
        if (seed + row * grid + col) % 3 != 0
    ]


@composition("tech")
def code_brackets(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    sw = p.stroke_width * 2.5
    return [
        pr.polyline(paint, ((70, 60), (50, 100), (70, 140)), stroke_width=sw),
        pr.polyline(paint, ((130, 60), (150, 100), (130, 140)), stroke_width=sw),
        pr.line(paint, length=30, stroke_width=p.stroke_width * 2, rotation=-20),
    ]


@composition("tech")
def cursor(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    return [
        pr.polyline(paint, ((70, 50), (70, 140), (95, 120), (120, 155)), stroke_width=p.stroke_width * 2.5),
        pr.polyline(paint, ((70, 50), (130, 95), (95, 105)), fill=True, opacity=0.3),
    ]


@composition("tech")
def binary_dots(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    return [pr.dot_grid(paint, cols=4, rows=3, gap=22, size=7)]


# ---------------------------------------------------------------------------
# Creative
# ---------------------------------------------------------------------------


@composition("creative")
def pen_nib(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    return [
        pr.polyline(
            paint,
            ((100, 50), (130, 90), (130, 140), (100, 170), (70, 140), (70, 90)),
            closed=True,
            stroke_width=p.stroke_width * 2,
        ),
        pr.segment(paint, (100, 100), (100, 170), stroke_width=p.stroke_width * 1.5),
    ]


@composition("creative")
def bezier_handles(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    return [
        pr.curve(paint, "M 50 140 C 50 60 150 60 150 140", stroke_width=p.stroke_width * 2.5),
        pr.dot(paint, x=50, y=140, size=6),
        pr.dot(paint, x=150, y=140, size=6),
        pr.segment(paint, (50, 140), (50, 60), stroke_width=p.stroke_width, dasharray="4 4", opacity=0.4),
        pr.segment(paint, (150, 140), (150, 60), stroke_width=p.stroke_width, dasharray="4 4", opacity=0.4),
    ]


@composition("creative")
def colour_wheel(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    return [pr.sector(paint, size=50, start=i * 60, sweep=60, opacity=round(0.3 + i * 0.1, 2)) for i in range(6)]


@composition("creative")
def artboard(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    sw = p.stroke_width * 1.5
    return [
        pr.square(paint, size=80, fill=False, stroke_width=p.stroke_width * 2, corner_radius=p.corner_radius * 0.2),
        pr.line(paint, y=CENTER - 25, length=50, stroke_width=sw, opacity=0.6),
        pr.line(paint, y=CENTER, length=40, stroke_width=sw, opacity=0.4),
        pr.line(paint, y=CENTER + 25, length=60, stroke_width=sw, opacity=0.6),
    ]


# ---------------------------------------------------------------------------
# Data
# ---------------------------------------------------------------------------


@composition("data")
def line_chart(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    points = ((40, 80), (80, 110), (120, 60), (160, 90))
    return [
        pr.polyline(paint, ((40, 150), *points), stroke_width=p.stroke_width * 2.5),
        *(pr.dot(paint, x=x, y=y, size=6) for x, y in points),
    ]


@composition("data")
def stacked_layers(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    return [
        pr.ellipse(paint, y=CENTER + dy, rx=55, ry=18, fill=False, stroke_width=p.stroke_width * 2)
        for dy in (-30, 0, 30)
    ]


@composition("data")
def grid_pattern(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    sw = p.stroke_width * 1.5
    columns = [pr.segment(paint, (x, 50), (x, 150), stroke_width=sw, opacity=0.5) for x in (60, 100, 140)]
    rows = [pr.segment(paint, (50, y), (150, y), stroke_width=sw, opacity=0.5) for y in (70, 100, 130)]
    return [*columns, *rows, pr.dot(paint, x=100, y=100, size=10)]


@composition("data")
def pie_quarters(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    return [
        *(
            pr.quarter_circle(paint, size=50, rotation=r, opacity=o)
            for r, o in ((-90, 0.8), (0, 0.5), (90, 0.3), (180, 0.6))
        ),
        pr.circle(paint, size=15),
    ]


# ---------------------------------------------------------------------------
# Communication
# ---------------------------------------------------------------------------


@composition("communication")
def speech_bubble(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    return [
        pr.curve(
            paint,
            "M 50 60 L 150 60 Q 160 60 160 70 L 160 120 Q 160 130 150 130 L 90 130 L 70 155 "
            "L 75 130 L 50 130 Q 40 130 40 120 L 40 70 Q 40 60 50 60 Z",
            stroke_width=p.stroke_width * 2,
            linecap=None,
            linejoin="round",
        )
    ]


@composition("communication")
def signal_waves(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    x = CENTER + 30
    return [
        *(
            pr.arc(paint, x=x, size=r, sweep=90, rotation=135, stroke_width=p.stroke_width * 2, opacity=o)
            for r, o in ((25, 0.4), (40, 0.6), (55, 0.8))
        ),
        pr.dot(paint, x=x, size=10),
    ]


@composition("communication")
def chat_dots(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    return [pr.dot(paint, x=CENTER + dx, size=12) for dx in (-25, 0, 25)]


@composition("communication")
def megaphone(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    sw = p.stroke_width * 2
    return [
        pr.polyline(paint, ((60, 80), (100, 60), (100, 140), (60, 120)), closed=True, stroke_width=sw),
        *(
            pr.arc(paint, x=115, size=r, sweep=90, rotation=-45, stroke_width=sw, opacity=o)
            for r, o in ((20, 0.5), (35, 0.7), (50, 1))
        ),
    ]


# ---------------------------------------------------------------------------
# Finance
# ---------------------------------------------------------------------------


@composition("finance")
def coins(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    sw = p.stroke_width * 2
    return [
        pr.circle(paint, x=CENTER - 20, y=CENTER + 15, size=35, fill=False, stroke_width=sw),
        pr.circle(paint, x=CENTER + 10, y=CENTER - 5, size=35, fill=False, stroke_width=sw),
        pr.circle(
            paint, x=CENTER + 5, y=CENTER + 25, size=25, fill=False, stroke_width=p.stroke_width * 1.5, opacity=0.5
        ),
    ]


@composition("finance")
def trend_arrow(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    return [
        pr.curve(paint, "M 40 140 Q 70 140 90 100 T 160 50", stroke_width=p.stroke_width * 2.5),
        pr.triangle(paint, x=160, y=50, size=15, rotation=45),
    ]


@composition("finance")
def coin_stack(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    return [
        *(pr.ellipse(paint, y=CENTER + dy, rx=45, ry=12, opacity=o) for dy, o in ((35, 0.4), (20, 0.6), (5, 0.8))),
        pr.ellipse(paint, y=CENTER - 10, rx=45, ry=12, fill=False, stroke_width=p.stroke_width * 2),
    ]


@composition("finance")
def gem(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    facet = p.stroke_width * 1.5
    return [
        pr.polyline(paint, ((100, 40), (145, 75), (100, 160), (55, 75)), closed=True, stroke_width=p.stroke_width * 2),
        pr.polyline(paint, ((55, 75), (100, 90), (145, 75)), stroke_width=facet, rounded=False),
        pr.segment(paint, (100, 40), (100, 90), stroke_width=facet),
    ]


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------


@composition("health")
def heart(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    return [
        pr.curve(
            paint,
            "M 100 160 C 40 120 40 60 80 60 C 100 60 100 80 100 80 C 100 80 100 60 120 60 "
            "C 160 60 160 120 100 160 Z",
            stroke_width=p.stroke_width * 2.5,
            linecap=None,
            linejoin="round",
        )
    ]


@composition("health")
def plus_cross(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    return [
        pr.line(paint, length=80, stroke_width=p.stroke_width * 3),
        pr.line(paint, length=80, rotation=90, stroke_width=p.stroke_width * 3),
    ]


@composition("health")
def leaf(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    return [
        pr.curve(
            paint,
            "M 100 160 Q 60 120 60 80 Q 60 40 100 40 Q 140 40 140 80 Q 140 120 100 160 Z",
            stroke_width=p.stroke_width * 2.5,
            linecap=None,
            linejoin="round",
        ),
        pr.curve(paint, "M 100 160 Q 100 100 100 60", stroke_width=p.stroke_width * 1.5),
    ]


@composition("health")
def pulse(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    points = ((30, 100), (65, 100), (80, 60), (100, 140), (120, 80), (135, 100), (170, 100))
    return [pr.polyline(paint, points, stroke_width=p.stroke_width * 2.5)]


# ---------------------------------------------------------------------------
# Default
# ---------------------------------------------------------------------------


@composition(DEFAULT_CATEGORY)
def dot_cluster(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    return [pr.dot_pattern(paint, count=6 + seed % 3, size=6)]


@composition(DEFAULT_CATEGORY)
def concentric(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    return [
        pr.ring(paint, size=55, stroke_width=p.stroke_width * 2),
        pr.ring(paint, size=35, stroke_width=p.stroke_width * 1.5),
        pr.dot(paint, size=10),
    ]


@composition(DEFAULT_CATEGORY)
def wave_form(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    return [pr.wave(paint, waves=2 + seed % 2, stroke_width=p.stroke_width * 2.5)]


@composition(DEFAULT_CATEGORY)
def framed_dot(p: ParameterVector, seed: int, paint: PaintContext) -> list[dict[str, Any]]:
    return [
        pr.square(paint, size=60, rotation=45, fill=False, stroke_width=p.stroke_width * 2),
        pr.dot(paint, size=12),
    ]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def _keyword_hit(keyword: str, category: IconCategory) -> bool:
    kw = keyword.strip().lower()
    if not kw:
        return False
    return any(ck in kw or kw in ck for ck in category.keywords)


def resolve_category(category: str | None = None, keywords: Iterable[str] = ()) -> str:
    """Exact category name, else first category with a fuzzy keyword hit, else ``default``."""
    if category and category.lower() in CATEGORIES:
        return category.lower()
    keywords = list(keywords)
    for cat in CATEGORIES.values():
        if any(_keyword_hit(kw, cat) for kw in keywords):
            return cat.name
    logger.debug("No icon category for %r / %s, using default", category, keywords)
    return DEFAULT_CATEGORY


def generate_abstract_icon(
    params: ParameterVector,
    brand_name: str,
    paint: PaintContext,
    category: str | None = None,
    keywords: Sequence[str] = (),
) -> str:
    seed = string_hash(brand_name)
    compositions = CATEGORIES[resolve_category(category, keywords)].compositions
    content = compositions[seed % len(compositions)](params, seed, paint)
    return svg(el("g", *content, transform=rotate(params.rotation)))


def generate_icon_variations(
    params: ParameterVector,
    brand_name: str,
    paint: PaintContext,
    category: str | None = None,
    keywords: Sequence[str] = (),
    count: int = 4,
) -> list[str]:
    """``count`` icons with drifting stroke, corner and rotation, each on a suffixed brand seed."""
    variations = []
    for i in range(count):
        variant = params.with_overrides(
            {
                "stroke_width": params.stroke_width * (0.8 + i * 0.15),
                "corner_radius": params.corner_radius + i * 5,
                "rotation": params.rotation + i * 10,
            }
        )
        variations.append(generate_abstract_icon(variant, f"{brand_name}-v{i}", paint, category, keywords))
    return variations


def available_categories() -> list[str]:
    return list(CATEGORIES)


def category_keywords(category: str) -> list[str]:
    found = CATEGORIES.get(category.lower())
    return list(found.keywords) if found else []


def category_label(category: str) -> str:
    return CATEGORIES[category].label
