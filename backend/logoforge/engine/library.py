"""The named algorithm library.

Every entry is data: a base generator id plus a read-only override map. A preset
like "Stencil Bold" is ``("stencil", {"stroke_width": 5, "spacing_ratio": 1.5})``;
rendering merges the overrides onto the caller's parameters (overrides win) and
delegates to the registered base generator.

The library order is part of the selection contract (``seed byte mod length``)
and is never re-sorted or filtered at call time. Sub-pools used by the batch
engine are computed once from it.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Literal

from logoforge.engine.registry import get_registry, load_algorithms
from logoforge.models.params import ParameterVector
from logoforge.svg.paint import PaintContext

logger = logging.getLogger(__name__)

Kind = Literal["symbol", "wordmark"]
Archetype = Literal["any", "symbol", "wordmark"]


@dataclass(frozen=True)
class LibraryEntry:
    name: str
    description: str
    base_id: str
    overrides: Mapping[str, Any]
    kind: Kind = "wordmark"
    category: str | None = None

    @property
    def is_preset(self) -> bool:
        return bool(self.overrides)

    def render(self, params: ParameterVector, brand_name: str, paint: PaintContext) -> str:
        spec = get_registry().get(self.base_id)
        return spec.fn(params.with_overrides(self.overrides), brand_name, paint)


# (name, description, overrides) rows following a base entry.
Presets = tuple[tuple[str, str, dict[str, Any]], ...]

_PREMIUM: tuple[tuple[str, str, str, dict[str, Any]], ...] = (
    ("Architectural Grid", "Technical construction", "construction", {}),
    ("Neo Gradient", "Modern vivid gradient", "neo_gradient", {}),
    ("Negative Space", "Bold cutout", "negative_space", {}),
    ("Swiss Minimal", "International typographic", "swiss_minimal", {}),
    ("Techno Construct", "Blueprint style", "construction", {"stroke_width": 1}),
    ("Glass Orb", "Soft gradient sphere", "neo_gradient", {"fill_opacity": 0.9}),
    ("Iconic Cut", "App icon style", "negative_space", {"corner_radius": 50}),
    ("Negative Space Letter", "Letter knocked out of a solid field", "negative_space_letter", {}),
    ("Gradient Glow", "Soft glowing ring", "gradient_glow", {}),
)

_TECHNIQUES: tuple[tuple[str, str, str, Presets], ...] = (
    ("modular", "Modular Units", "Geometric units placed at skeleton anchor points", (
        ("Modular Dots", "Circular units on letter skeleton", {"corner_radius": 50, "stroke_width": 3}),
        ("Modular Blocks", "Square units on letter anatomy", {"corner_radius": 5, "stroke_width": 4}),
        ("Modular Network", "Connected geometric nodes", {"stroke_width": 2, "scale_variance": 1.1}),
        ("Modular Constellation", "Star-like point distribution",
         {"corner_radius": 50, "stroke_width": 2, "rotation": 15}),
    )),
    ("stencil", "Stencil Cut", "Letter with cut gaps for stencil effect", (
        ("Stencil Bold", "Heavy stencil with wide gaps", {"stroke_width": 5, "spacing_ratio": 1.5}),
        ("Stencil Fine", "Thin stencil precise cuts", {"stroke_width": 3, "spacing_ratio": 0.8}),
        ("Stencil Industrial", "Factory marking style", {"stroke_width": 4, "rotation": 0}),
        ("Stencil Graffiti", "Street art aesthetic", {"stroke_width": 6, "spacing_ratio": 1.2, "rotation": -5}),
    )),
    ("outline", "Multi-Outline", "Multiple parallel strokes following skeleton", (
        ("Multi-Outline Glow", "Glowing layered outlines", {"element_count": 4, "stroke_width": 3}),
        ("Double Stroke", "Twin line letter", {"element_count": 2, "stroke_width": 4}),
        ("Neon Tube", "Neon sign aesthetic", {"element_count": 3, "stroke_width": 5}),
        ("Echo Lines", "Fading echo effect", {"element_count": 5, "stroke_width": 2}),
    )),
    ("geometric", "Geometric Construction", "Built from skeleton with geometric primitives", (
        ("Blueprint Letter", "Technical drawing style", {"stroke_width": 2, "fill_opacity": 0.3}),
        ("Structural Form", "Architectural skeleton", {"stroke_width": 3, "fill_opacity": 0.5}),
        ("Wireframe Type", "Minimal wireframe", {"stroke_width": 1, "fill_opacity": 0.2}),
        ("Construction Grid", "Grid-based construction", {"stroke_width": 2, "rotation": 0}),
    )),
    ("calligraphic", "Calligraphic Stroke", "Variable width calligraphic rendering", (
        ("Brush Script", "Calligraphy brush feel", {"stroke_taper": 60, "stroke_width": 4}),
        ("Pen Stroke", "Fountain pen aesthetic", {"stroke_taper": 40, "stroke_width": 3}),
        ("Chisel Tip", "Flat nib calligraphy", {"stroke_taper": 80, "stroke_width": 5}),
        ("Flow Script", "Smooth flowing line", {"stroke_taper": 30, "stroke_width": 4}),
    )),
    ("monoline", "Monoline Letter", "Single continuous stroke skeleton", (
        ("Monoline Clean", "Pure single line letter", {"stroke_width": 3}),
        ("Monoline Bold", "Heavy single stroke", {"stroke_width": 5}),
        ("Monoline Wire", "Thin wire aesthetic", {"stroke_width": 1.5}),
        ("Monoline Tilt", "Angled single line", {"stroke_width": 3, "rotation": 10}),
    )),
    ("shadow", "Shadow Depth", "Skeleton with layered shadow effect", (
        ("Long Shadow", "Extended depth shadow", {"interlock_depth": 80, "stroke_width": 4}),
        ("Soft Shadow", "Subtle depth effect", {"interlock_depth": 30, "stroke_width": 3}),
        ("Hard Shadow", "Sharp offset shadow", {"interlock_depth": 60, "stroke_width": 5}),
        ("3D Block", "Isometric block shadow", {"interlock_depth": 90, "stroke_width": 4}),
    )),
    ("dotted", "Dotted Path", "Skeleton rendered with dotted/dashed stroke", (
        ("Morse Code", "Dot-dash pattern", {"spacing_ratio": 1.0, "stroke_width": 3}),
        ("Dashed Line", "Long dash segments", {"spacing_ratio": 1.5, "stroke_width": 4}),
        ("Dotted Trail", "Close dot pattern", {"spacing_ratio": 0.6, "stroke_width": 2}),
        ("Perforated", "Perforation style", {"spacing_ratio": 0.8, "stroke_width": 3}),
    )),
)

_INTERLOCKING_PRESETS: Presets = (
    ("Quantum Interlock", "Tight geometric weave",
     {"interlock_depth": 80, "element_count": 3, "corner_radius": 5}),
    ("Orbital Rings", "Circular paths", {"corner_radius": 50, "element_count": 2, "scale_variance": 1.2}),
    ("Trinity Knot", "Triangular weave", {"element_count": 3, "spacing_ratio": 0.8}),
    ("Quad Link", "Four-way connection", {"element_count": 4, "corner_radius": 10}),
    ("Chain Reaction", "Linear linking", {"spacing_ratio": 1.5}),
    ("Weave Grid", "Dense pattern", {"element_count": 6, "stroke_width": 2}),
    ("Soft Interlock", "Rounded edges", {"corner_radius": 40}),
    ("Hard Link", "Sharp edges", {"corner_radius": 0}),
)

_FUSION_PRESETS: Presets = (
    ("Eco Fusion", "Nature integrated", {"cutout_position": 0}),
    ("Power Fusion", "Energy integrated", {"cutout_position": 1}),
    ("Global Fusion", "World integrated", {"cutout_position": 2}),
    ("Solid Fusion", "Bold merger", {"interlock_depth": 20}),
    ("Outline Fusion", "Stroke based", {"fill_opacity": 0}),
)

# Per category: base entry first, then three presets.
_ICONS: tuple[tuple[str, tuple[tuple[str, str, dict[str, Any]], ...]], ...] = (
    ("speed", (
        ("Speed Arrows", "Dynamic motion chevrons", {}),
        ("Motion Lines", "Parallel velocity lines", {"stroke_width": 4}),
        ("Fast Forward", "Arrow sequence motion", {"rotation": 0}),
        ("Dash Blur", "Speed blur effect", {"stroke_width": 5}),
    )),
    ("growth", (
        ("Rising Bars", "Ascending growth chart", {}),
        ("Peak Triangle", "Upward mountain peak", {"stroke_width": 3}),
        ("Lift Arc", "Rising curved motion", {"corner_radius": 20}),
        ("Elevate", "Vertical growth symbol", {"stroke_width": 4}),
    )),
    ("connect", (
        ("Link Rings", "Overlapping connection circles", {}),
        ("Network Hub", "Central node with connections", {"stroke_width": 3}),
        ("Chain Link", "Linked ring chain", {"corner_radius": 50}),
        ("Social Web", "Hub and spoke network", {"stroke_width": 4}),
    )),
    ("secure", (
        ("Shield Mark", "Protective shield outline", {}),
        ("Lock Symbol", "Security lock abstraction", {"stroke_width": 3}),
        ("Trust Check", "Verified checkmark circle", {"corner_radius": 50}),
        ("Fortress", "Concentric protective rings", {"stroke_width": 4}),
    )),
    ("tech", (
        ("Pixel Grid", "Digital pixel pattern", {}),
        ("Code Brackets", "Developer syntax symbol", {"stroke_width": 3}),
        ("Cursor Mark", "Digital pointer icon", {"corner_radius": 0}),
        ("Binary Dots", "Data point matrix", {"stroke_width": 4}),
    )),
    ("creative", (
        ("Pen Nib", "Creative writing tool", {}),
        ("Bezier Curve", "Design path symbol", {"stroke_width": 3}),
        ("Color Wheel", "Spectrum palette icon", {"corner_radius": 50}),
        ("Artboard", "Design frame symbol", {"stroke_width": 4}),
    )),
    ("data", (
        ("Chart Line", "Analytics graph symbol", {}),
        ("Layer Stack", "Stacked data layers", {"stroke_width": 3}),
        ("Grid Matrix", "Data grid pattern", {"corner_radius": 0}),
        ("Pie Segments", "Data distribution chart", {"stroke_width": 4}),
    )),
    ("communication", (
        ("Speech Bubble", "Chat message symbol", {}),
        ("Signal Waves", "Broadcast wave symbol", {"stroke_width": 3}),
        ("Chat Dots", "Typing indicator icon", {"corner_radius": 50}),
        ("Broadcast", "Megaphone signal icon", {"stroke_width": 4}),
    )),
    ("finance", (
        ("Coin Stack", "Abstract currency circles", {}),
        ("Growth Arrow", "Financial upward trend", {"stroke_width": 3}),
        ("Value Layers", "Stacked wealth symbol", {"corner_radius": 0}),
        ("Gem Diamond", "Premium value icon", {"stroke_width": 4}),
    )),
    ("health", (
        ("Heart Symbol", "Wellness heart outline", {}),
        ("Plus Cross", "Medical plus sign", {"stroke_width": 5}),
        ("Leaf Curve", "Natural wellness symbol", {"corner_radius": 50}),
        ("Pulse Line", "Heartbeat monitor line", {"stroke_width": 4}),
    )),
    ("default", (
        ("Abstract Dots", "Minimal dot pattern", {}),
        ("Concentric Rings", "Circular focus symbol", {"stroke_width": 3}),
        ("Wave Form", "Flowing wave pattern", {"stroke_width": 4}),
        ("Centered Square", "Geometric focus mark", {"corner_radius": 0}),
    )),
)

# Symbol-only series after the icons, in library order.
_SYMBOLS: tuple[tuple[str, str, str], ...] = (
    ("Vixel Flow", "Flowing four-blade ribbon mark", "vixel_flow"),
    ("Geometric Weave", "Interlocking corner weave", "geometric_weave"),
    ("Radial Pinwheel", "Turbine fins in rotation", "radial_pinwheel"),
    ("Triangle Mono", "Triangular monogram construction", "triangle_monogram"),
    ("Circular Mono", "Ring-based monogram construction", "circular_monogram"),
    ("Grid Mono", "Block-grid monogram construction", "grid_monogram"),
    ("Trinity Loop", "Three-fold knot with negative core", "trinity_knot"),
    ("Cubic Weave", "Isometric cube and hexagon weave", "cubic_hexagon"),
    ("Arrowhead Core", "Arrowhead with cut core", "arrowhead_stack"),
    ("Bio Blob", "Organic blob with masked void", "bio_geo"),
    ("Swiss Block", "Industrial block with hard cutout", "swiss_block"),
    ("Chunky Glyph", "Heavy single-stroke glyph", "chunky_glyph"),
)


def _entry(
    name: str,
    description: str,
    base_id: str,
    overrides: Mapping[str, Any],
    kind: Kind = "wordmark",
    category: str | None = None,
) -> LibraryEntry:
    unknown = set(overrides) - set(ParameterVector.model_fields)
    if unknown:
        raise ValueError(f"Preset {name!r} overrides unknown fields: {sorted(unknown)}")
    return LibraryEntry(name, description, base_id, MappingProxyType(dict(overrides)), kind, category)


def _series(base_id: str, name: str, description: str, presets: Presets) -> list[LibraryEntry]:
    return [_entry(name, description, base_id, {})] + [
        _entry(n, d, base_id, overrides) for n, d, overrides in presets
    ]


def build_library() -> tuple[LibraryEntry, ...]:
    """Assemble the ordered library and check every base id is registered."""
    registry = load_algorithms()
    entries: list[LibraryEntry] = [_entry(*row) for row in _PREMIUM]
    for base_id, name, description, presets in _TECHNIQUES:
        entries.extend(_series(base_id, name, description, presets))
    entries.append(_entry("Single Stroke", "One flowing wave stroke", "single_stroke", {}))
    entries.extend(
        _series("interlocking", "Interlocking Geometry", "Shapes weaving around a shared centre",
                _INTERLOCKING_PRESETS)
    )
    entries.append(_entry("Radial Clover", "Radial interlocking petals", "interlocking", {}))
    entries.extend(_series("letter_fusion", "Letter Fusion", "Initial fused with an emblem", _FUSION_PRESETS))
    for category, rows in _ICONS:
        entries.extend(
            _entry(n, d, f"icon.{category}", overrides, kind="symbol", category=category)
            for n, d, overrides in rows
        )
    entries.extend(_entry(n, d, base_id, {}, kind="symbol") for n, d, base_id in _SYMBOLS)

    missing = [e.base_id for e in entries if e.base_id not in registry]
    if missing:
        raise KeyError(f"Library references unregistered algorithms: {sorted(set(missing))}")
    names = [e.name for e in entries]
    if len(set(names)) != len(names):
        raise ValueError("Duplicate library entry names")
    logger.debug("Built algorithm library: %d entries over %d base algorithms", len(entries), registry.count)
    return tuple(entries)


@lru_cache(maxsize=1)
def get_library() -> tuple[LibraryEntry, ...]:
    return build_library()


@lru_cache(maxsize=1)
def _by_name() -> dict[str, LibraryEntry]:
    return {e.name: e for e in get_library()}


def find_entry(name: str) -> LibraryEntry | None:
    return _by_name().get(name)


def get_entry(name: str) -> LibraryEntry:
    entry = find_entry(name)
    if entry is None:
        raise KeyError(f"Unknown library entry: {name}")
    return entry


def entry_names() -> list[str]:
    return [e.name for e in get_library()]


def icon_entries(category: str) -> list[LibraryEntry]:
    """Library entries drawing ``category``'s icons, base entry first."""
    return [e for e in get_library() if e.category == category]


# ---------------------------------------------------------------------------
# Batch pools
# ---------------------------------------------------------------------------

VIBE_NAME_KEYWORDS: dict[str, tuple[str, ...]] = {
    "minimalist": ("Minimal", "Swiss", "Clean", "Monoline", "Outline", "Wire", "Simple", "Grid", "Geometric"),
    "tech": ("Tech", "Pixel", "Code", "Binary", "Cursor", "Digital", "Blueprint", "Techno", "Construct",
             "Network", "Data", "Grid"),
    "nature": ("Organic", "Leaf", "Health", "Heart", "Eco", "Flow", "Curve", "Soft", "Calligraphic", "Brush"),
    "bold": ("Bold", "Shadow", "Block", "Stencil", "Hard", "Solid", "Long", "3D", "Graffiti", "Industrial",
             "Neon"),
}

VIBE_DESCRIPTION_KEYWORDS: dict[str, tuple[str, ...]] = {
    "minimalist": ("clean", "minimal", "thin", "simple", "pure", "essential"),
    "tech": ("digital", "technical", "code", "data", "pixel", "syntax", "precision"),
    "nature": ("organic", "natural", "flowing", "soft", "wellness", "calm"),
    "bold": ("bold", "heavy", "strong", "loud", "impact", "depth", "dimensional"),
}

VIBE_EXCLUSIVE_MIN = 5
VIBE_FILLER = 10


def symbol_pool() -> tuple[LibraryEntry, ...]:
    return tuple(e for e in get_library() if e.kind == "symbol")


def wordmark_pool() -> tuple[LibraryEntry, ...]:
    return tuple(e for e in get_library() if e.kind == "wordmark")


def vibe_score(entry: LibraryEntry, vibe: str) -> int:
    """+10 per name keyword hit, +5 per description keyword hit."""
    name = entry.name.lower()
    description = entry.description.lower()
    score = sum(10 for kw in VIBE_NAME_KEYWORDS.get(vibe, ()) if kw.lower() in name)
    score += sum(5 for kw in VIBE_DESCRIPTION_KEYWORDS.get(vibe, ()) if kw in description)
    return score


@lru_cache(maxsize=None)
def candidate_pool(archetype: Archetype = "any", vibe: str = "") -> tuple[LibraryEntry, ...]:
    """Fixed pool for an (archetype, vibe) pair.

    Vibe hits are ranked by score (stable). Five or more hits form the pool on
    their own; fewer are followed by up to ten non-hits in library order; none
    leave the archetype pool unchanged.
    """
    if archetype == "symbol":
        pool = symbol_pool()
    elif archetype == "wordmark":
        pool = wordmark_pool()
    else:
        pool = get_library()
    if not pool:
        pool = get_library()

    vibe = vibe.lower()
    if vibe not in VIBE_NAME_KEYWORDS:
        return pool

    scored = sorted(((vibe_score(e, vibe), e) for e in pool), key=lambda pair: -pair[0])
    hits = tuple(e for score, e in scored if score > 0)
    if len(hits) >= VIBE_EXCLUSIVE_MIN:
        return hits
    if hits:
        misses = tuple(e for score, e in scored if score == 0)
        return hits + misses[:VIBE_FILLER]
    return pool
