"""Word-association tables used by the designer pipeline."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_INDUSTRY = "technology"

INDUSTRY_CONCEPTS: dict[str, tuple[str, ...]] = {
    "technology": ("innovation", "future", "connection", "speed", "precision", "digital", "smart", "network",
                   "data", "cloud"),
    "finance": ("trust", "growth", "stability", "security", "wealth", "progress", "solid", "reliable", "protect",
                "value"),
    "healthcare": ("care", "life", "wellness", "healing", "protection", "comfort", "vitality", "balance",
                   "nurture", "trust"),
    "food": ("fresh", "natural", "taste", "warmth", "homemade", "quality", "artisan", "organic", "delicious",
             "nourish"),
    "fashion": ("style", "elegance", "trend", "luxury", "expression", "beauty", "unique", "refined", "bold",
                "timeless"),
    "education": ("growth", "knowledge", "wisdom", "enlighten", "discover", "learn", "achieve", "inspire",
                  "guide", "open"),
    "entertainment": ("joy", "excitement", "fun", "energy", "experience", "wonder", "play", "engage", "thrill",
                      "delight"),
    "real-estate": ("home", "foundation", "space", "build", "shelter", "community", "invest", "growth",
                    "establish", "roots"),
    "consulting": ("expert", "guide", "strategy", "insight", "solve", "partner", "transform", "clarity", "focus",
                   "lead"),
    "creative": ("imagination", "vision", "expression", "craft", "unique", "inspire", "create", "design", "art",
                 "story"),
}


@dataclass(frozen=True)
class VisualMapping:
    shapes: tuple[str, ...]
    styles: tuple[str, ...]
    algorithms: tuple[str, ...]  # library entry names


PERSONALITY_TO_VISUAL: dict[str, VisualMapping] = {
    "professional": VisualMapping(
        shapes=("square", "rectangle", "line", "grid"),
        styles=("minimal", "geometric", "structured"),
        algorithms=("Swiss Minimal", "Monoline Clean", "Blueprint Letter", "Shield Mark"),
    ),
    "playful": VisualMapping(
        shapes=("circle", "wave", "dot-pattern", "rounded"),
        styles=("organic", "colorful", "dynamic"),
        algorithms=("Modular Dots", "Wave Form", "Chat Dots", "Multi-Outline Glow"),
    ),
    "minimal": VisualMapping(
        shapes=("line", "circle", "single-element"),
        styles=("clean", "space", "refined"),
        algorithms=("Monoline Wire", "Concentric Rings", "Swiss Minimal", "Abstract Dots"),
    ),
    "bold": VisualMapping(
        shapes=("triangle", "square", "heavy-stroke", "solid"),
        styles=("impactful", "strong", "statement"),
        algorithms=("Stencil Bold", "Hard Shadow", "Negative Space", "3D Block"),
    ),
    "elegant": VisualMapping(
        shapes=("curve", "spiral", "refined-line", "script"),
        styles=("sophisticated", "refined", "timeless"),
        algorithms=("Calligraphic Stroke", "Brush Script", "Flow Script", "Pen Stroke"),
    ),
    "tech": VisualMapping(
        shapes=("grid", "pixel", "circuit", "node"),
        styles=("digital", "precise", "modern"),
        algorithms=("Pixel Grid", "Code Brackets", "Binary Dots", "Architectural Grid"),
    ),
    "organic": VisualMapping(
        shapes=("leaf", "wave", "curve", "flowing"),
        styles=("natural", "soft", "flowing"),
        algorithms=("Leaf Curve", "Wave Form", "Flow Script", "Eco Fusion"),
    ),
    "geometric": VisualMapping(
        shapes=("triangle", "circle", "square", "polygon"),
        styles=("precise", "mathematical", "balanced"),
        algorithms=("Quantum Interlock", "Orbital Rings", "Trinity Knot", "Construction Grid"),
    ),
}

VISUAL_METAPHORS: dict[str, tuple[str, ...]] = {
    "speed": ("arrow", "streak", "forward-motion", "wind-lines", "progressive-bars"),
    "growth": ("upward-angle", "ascending-steps", "sprout", "rising-curve", "expanding-circles"),
    "connection": ("interlock", "bridge", "handshake-abstract", "linked-rings", "network-nodes"),
    "trust": ("shield", "check", "solid-foundation", "encompassing-circle", "steady-base"),
    "innovation": ("spark", "lightbulb-abstract", "forward-arrow", "breaking-pattern", "new-path"),
    "quality": ("diamond", "crown-abstract", "star", "refined-edge", "precise-angle"),
    "balance": ("symmetry", "scales-abstract", "yin-yang", "centered-composition", "equal-weights"),
    "energy": ("burst", "radial", "dynamic-angle", "power-lines", "explosive-center"),
    "wisdom": ("book-abstract", "scroll-curve", "light-rays", "deep-knowledge", "enlightenment"),
    "community": ("gathering", "circle-of-people", "connected-dots", "unified-shape", "collective"),
}

# Free-text cues: (substrings, concept or audience tags appended on a hit)
DESCRIPTION_CUES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("sell", "product"), "commerce"),
    (("service", "help"), "service"),
    (("build", "create"), "creation"),
    (("connect", "platform"), "platform"),
)

AUDIENCE_CUES: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (("business", "b2b"), ("businesses", "professionals")),
    (("consumer", "b2c"), ("consumers", "everyday-people")),
    (("young", "gen"), ("youth", "digital-natives")),
    (("premium", "luxury"), ("affluent", "discerning")),
)

CATEGORY_PERSONALITY: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (("technology", "consulting"), ("professional", "tech")),
    (("entertainment", "food"), ("playful", "approachable")),
    (("fashion", "real-estate"), ("elegant", "premium")),
)

# Later rules win, so order matters.
TONE_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("professional", "minimal"), "serious"),
    (("elegant", "bold"), "premium"),
    (("playful", "organic"), "approachable"),
    (("tech", "geometric"), "innovative"),
)

DIRECTION_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("organic", "playful"), "organic"),
    (("minimal",), "minimal"),
    (("bold",), "bold"),
    (("elegant",), "refined"),
)

# whatTheyDo concept -> icon categories
WHAT_TO_ICON: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (("innovation", "digital", "smart", "network"), ("tech",)),
    (("trust", "growth", "stability"), ("growth", "secure")),
    (("care", "life", "wellness"), ("health",)),
    (("fresh", "natural", "organic"), ("health",)),
    (("connect", "platform", "community"), ("connect",)),
    (("wealth", "value", "commerce"), ("finance",)),
)

# related concept -> icon category
ASSOCIATION_TO_ICON: tuple[tuple[str, str], ...] = (
    ("speed", "speed"),
    ("growth", "growth"),
    ("connection", "connect"),
    ("innovation", "tech"),
    ("trust", "secure"),
)

LETTERMARK_ALGORITHMS = (
    "Monoline Clean",
    "Stencil Bold",
    "Blueprint Letter",
    "Calligraphic Stroke",
    "Shadow Depth",
    "Multi-Outline Glow",
)

PREMIUM_ALGORITHMS = ("Architectural Grid", "Neo Gradient", "Quantum Interlock", "Orbital Rings")

FALLBACK_ALGORITHM = "Abstract Dots"
