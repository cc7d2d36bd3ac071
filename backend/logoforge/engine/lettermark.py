"""Lettermark quality scoring.

Rates rendered letter-based marks on structure alone (element counts, masks,
transforms, opacity layering) to separate constructed letterforms from a plain
typed initial in a container.
"""

from __future__ import annotations

import re

from logoforge.models.results import LettermarkMetrics, LettermarkScore

_PATH_RE = re.compile(r"<path\b")
_CIRCLE_RE = re.compile(r"<circle\b")
_LINE_RE = re.compile(r"<line\b")
_RECT_RE = re.compile(r"<rect\b")
_POLYGON_RE = re.compile(r"<polygon\b")
_GRADIENT_RE = re.compile(r"linearGradient|radialGradient")
_MASK_RE = re.compile(r"<mask\b")
_TEXT_RE = re.compile(r"<text\b")
_PARTIAL_OPACITY_RE = re.compile(r'opacity="0\.')
_CONTAINER_RADIUS_RE = re.compile(r"""\br=["']4[0-5]["']""")

PASS_SCORE = 6.5
MIN_SIGNALS = 2

# Library entries known to produce distinctive letterforms.
PREMIUM_LETTERMARK_ALGORITHMS = (
    "Negative Space Letter",
    "Negative Space",
    "Architectural Grid",
    "Techno Construct",
    "Blueprint Letter",
    "Long Shadow",
    "3D Block",
)

DIAGONAL_LETTERS = frozenset("AKMNVWXYZ")
ROUND_LETTERS = frozenset("CGOQS")
STEM_LETTERS = frozenset("BDEFHILPRT")
FUSION_LETTERS = frozenset("JU")


def _count(pattern: re.Pattern[str], svg: str) -> int:
    return len(pattern.findall(svg))


def is_premium(algorithm_name: str) -> bool:
    return any(name in algorithm_name for name in PREMIUM_LETTERMARK_ALGORITHMS)


def score_lettermark(svg: str, algorithm_name: str) -> LettermarkScore:
    multiple_paths = _count(_PATH_RE, svg) > 1
    polygons = bool(_POLYGON_RE.search(svg))
    many_circles = _count(_CIRCLE_RE, svg) > 2
    transforms = "transform=" in svg
    gradients = bool(_GRADIENT_RE.search(svg))
    masks = bool(_MASK_RE.search(svg))
    lines = _count(_LINE_RE, svg) > 1
    rects = _count(_RECT_RE, svg) > 1
    layered = bool(_PARTIAL_OPACITY_RE.search(svg))

    text_only = bool(_TEXT_RE.search(svg)) and not multiple_paths and not polygons and not rects
    circle_container = bool(_CONTAINER_RADIUS_RE.search(svg)) and not masks
    centred_text_only = 'text-anchor="middle"' in svg and not transforms and not multiple_paths

    metrics = LettermarkMetrics(
        has_geometric_construction=multiple_paths or polygons or (rects and transforms),
        has_negative_space=masks or (polygons and multiple_paths),
        has_asymmetry=transforms or layered,
        has_abstract_integration=(polygons or many_circles) and multiple_paths,
        has_depth_or_dimension=gradients or layered or transforms,
        has_unique_letterform=lines or polygons or masks,
    )
    signals = metrics.signals
    premium = is_premium(algorithm_name)

    geometric = 3
    geometric += 2 if metrics.has_geometric_construction else 0
    geometric += 1 if multiple_paths else 0
    geometric += 2 if polygons else 0
    geometric += 1 if transforms else 0
    geometric += 1 if lines else 0
    geometric = min(10, geometric)

    uniqueness = 4
    uniqueness += 2 if metrics.has_negative_space else 0
    uniqueness += 1 if metrics.has_asymmetry else 0
    uniqueness += 2 if metrics.has_unique_letterform else 0
    uniqueness += 1 if premium else 0
    uniqueness = min(10, uniqueness)

    negative = 3
    negative += 4 if masks else 0
    negative += 2 if metrics.has_abstract_integration else 0
    negative += 1 if polygons and multiple_paths else 0
    negative = min(10, negative)

    if text_only and not transforms:
        geometric = max(1, geometric - 4)
        uniqueness = max(1, uniqueness - 4)
    if circle_container and centred_text_only:
        geometric = max(1, geometric - 3)
        uniqueness = max(1, uniqueness - 3)

    if premium:
        geometric = min(10, geometric + 1)
        uniqueness = min(10, uniqueness + 1)
        negative = min(10, negative + 1)

    is_generic = geometric < 5 and uniqueness < 5 and signals < MIN_SIGNALS
    overall = round(geometric * 0.35 + uniqueness * 0.35 + negative * 0.30, 1)

    return LettermarkScore(
        geometric_complexity=geometric,
        uniqueness=uniqueness,
        negative_space_usage=negative,
        is_generic=is_generic,
        overall=overall,
        passes=overall >= PASS_SCORE and signals >= MIN_SIGNALS and not is_generic,
        metrics=metrics,
    )


def recommended_lettermark_algorithm(letter: str) -> str:
    """Library entry best suited to the letter's anatomy."""
    upper = letter[:1].upper()
    if upper in DIAGONAL_LETTERS:
        return "Blueprint Letter"
    if upper in ROUND_LETTERS:
        return "Negative Space Letter"
    if upper in STEM_LETTERS:
        return "Architectural Grid"
    if upper in FUSION_LETTERS:
        return "Letter Fusion"
    return "Shadow Depth"
