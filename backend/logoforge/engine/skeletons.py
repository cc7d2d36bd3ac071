"""Letter skeleton model: anatomical anchor/part data for A-Z.

Anchors live on a 100-unit grid. Each anatomy part references anchor indices
and optionally carries its own path segment; ``svg_path`` draws every part.
The table is built once at import and never mutated.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass, field
from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray

from logoforge.svg.paint import PaintContext
from logoforge.svg.path import ShapePath
from logoforge.svg.serializer import el, serialize_svg
from logoforge.utils.geometry import apply_affine, bbox, scale_matrix

logger = logging.getLogger(__name__)

ANATOMY_TYPES: tuple[str, ...] = (
    "stem", "bowl", "crossbar", "diagonal", "terminal", "apex", "vertex",
    "arm", "leg", "spine", "bar", "tail", "spur", "hook", "arc", "loop",
    "counter", "shoulder", "ear", "link", "baseline", "capline",
)

CURVED_TYPES = frozenset({"bowl", "arc", "loop", "hook", "spine", "shoulder"})
DIAGONAL_TYPES = frozenset({"diagonal", "arm", "leg"})

# Half-size of a stencil gap around a part's midpoint (skeleton units).
STENCIL_GAP_MARGIN = 5.0


class Point(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class AnatomyPart:
    type: str
    anchors: tuple[int, ...]
    path: str = ""
    is_primary: bool = False


@dataclass(frozen=True)
class LetterSkeleton:
    letter: str
    description: str
    anchors: tuple[Point, ...]
    anatomy: tuple[AnatomyPart, ...]
    svg_path: str
    stroke_width_ratio: float = 0.12
    scale: float = field(default=1.0, compare=False)

    def __post_init__(self) -> None:
        for part in self.anatomy:
            if part.type not in ANATOMY_TYPES:
                raise ValueError(f"{self.letter}: unknown anatomy type {part.type!r}")
            if not part.anchors:
                raise ValueError(f"{self.letter}: {part.type} references no anchors")
            for idx in part.anchors:
                if not 0 <= idx < len(self.anchors):
                    raise ValueError(f"{self.letter}: {part.type} anchor {idx} out of range")

    def anchor_array(self) -> NDArray[np.float64]:
        return np.array(self.anchors, dtype=np.float64)


class StencilGap(NamedTuple):
    start: Point
    end: Point

    @property
    def center(self) -> Point:
        return Point((self.start.x + self.end.x) / 2, (self.start.y + self.end.y) / 2)


def _part(type_: str, anchors: tuple[int, ...], path: str = "", primary: bool = False) -> AnatomyPart:
    return AnatomyPart(type=type_, anchors=anchors, path=path, is_primary=primary)


def _pts(*coords: tuple[float, float]) -> tuple[Point, ...]:
    return tuple(Point(x, y) for x, y in coords)


_O_LOOP = "M 50 5 C 80 5 95 25 95 50 C 95 75 80 95 50 95 C 20 95 5 75 5 50 C 5 25 20 5 50 5 Z"
_P_BOWL = "M 15 10 L 65 10 Q 95 10 95 32 Q 95 55 65 55 L 15 55"
_STEM_LEFT = "M 15 10 L 15 90"

_SKELETON_DATA: tuple[LetterSkeleton, ...] = (
    LetterSkeleton(
        letter="A",
        description="2 diagonals meeting at apex + horizontal crossbar",
        anchors=_pts((10, 90), (50, 5), (90, 90), (25, 60), (75, 60)),
        anatomy=(
            _part("diagonal", (0, 1), "M 10 90 L 50 5", True),
            _part("diagonal", (1, 2), "M 50 5 L 90 90", True),
            _part("apex", (1,)),
            _part("crossbar", (3, 4), "M 25 60 L 75 60"),
        ),
        svg_path="M 10 90 L 50 5 L 90 90 M 25 60 L 75 60",
    ),
    LetterSkeleton(
        letter="B",
        description="vertical stem + 2 bowls (upper smaller, lower larger)",
        anchors=_pts((15, 10), (15, 90), (15, 50), (65, 10), (70, 30), (65, 50), (70, 50), (75, 70), (70, 90)),
        anatomy=(
            _part("stem", (0, 1), _STEM_LEFT, True),
            _part("bowl", (0, 3, 4, 5, 2), "M 15 10 L 65 10 Q 85 10 85 30 Q 85 50 65 50 L 15 50"),
            _part("bowl", (2, 6, 7, 8, 1), "M 15 50 L 70 50 Q 95 50 95 70 Q 95 90 70 90 L 15 90", True),
        ),
        svg_path=(
            "M 15 10 L 15 90 M 15 10 L 65 10 Q 85 10 85 30 Q 85 50 65 50 L 15 50 "
            "M 15 50 L 70 50 Q 95 50 95 70 Q 95 90 70 90 L 15 90"
        ),
    ),
    LetterSkeleton(
        letter="C",
        description="open curve, 270 degree arc",
        anchors=_pts((85, 25), (50, 5), (10, 50), (50, 95), (85, 75)),
        anatomy=(
            _part("arc", (0, 1, 2, 3, 4), "M 85 25 Q 85 5 50 5 Q 10 5 10 50 Q 10 95 50 95 Q 85 95 85 75", True),
            _part("terminal", (0,)),
            _part("terminal", (4,)),
        ),
        svg_path="M 85 25 C 85 5 70 5 50 5 C 20 5 10 25 10 50 C 10 75 20 95 50 95 C 70 95 85 95 85 75",
    ),
    LetterSkeleton(
        letter="D",
        description="vertical stem + single large bowl",
        anchors=_pts((15, 10), (15, 90), (60, 10), (90, 50), (60, 90)),
        anatomy=(
            _part("stem", (0, 1), _STEM_LEFT, True),
            _part("bowl", (0, 2, 3, 4, 1), "M 15 10 L 60 10 Q 95 10 95 50 Q 95 90 60 90 L 15 90", True),
        ),
        svg_path="M 15 10 L 15 90 L 60 90 Q 95 90 95 50 Q 95 10 60 10 L 15 10",
    ),
    LetterSkeleton(
        letter="E",
        description="vertical stem + 3 horizontal bars",
        anchors=_pts((15, 10), (15, 90), (15, 50), (85, 10), (70, 50), (85, 90)),
        anatomy=(
            _part("stem", (0, 1), _STEM_LEFT, True),
            _part("bar", (0, 3), "M 15 10 L 85 10"),
            _part("crossbar", (2, 4), "M 15 50 L 70 50"),
            _part("bar", (1, 5), "M 15 90 L 85 90"),
        ),
        svg_path="M 15 10 L 15 90 M 15 10 L 85 10 M 15 50 L 70 50 M 15 90 L 85 90",
    ),
    LetterSkeleton(
        letter="F",
        description="vertical stem + 2 horizontal bars (top + middle)",
        anchors=_pts((15, 10), (15, 90), (15, 50), (85, 10), (65, 50)),
        anatomy=(
            _part("stem", (0, 1), _STEM_LEFT, True),
            _part("bar", (0, 3), "M 15 10 L 85 10"),
            _part("crossbar", (2, 4), "M 15 50 L 65 50"),
        ),
        svg_path="M 15 10 L 15 90 M 15 10 L 85 10 M 15 50 L 65 50",
    ),
    LetterSkeleton(
        letter="G",
        description="C curve + horizontal bar + short vertical beard",
        anchors=_pts((85, 25), (50, 5), (10, 50), (50, 95), (85, 75), (85, 50), (55, 50)),
        anatomy=(
            _part(
                "arc",
                (0, 1, 2, 3, 4),
                "M 85 25 C 85 5 70 5 50 5 C 20 5 10 25 10 50 C 10 75 20 95 50 95 C 70 95 85 85 85 75",
                True,
            ),
            _part("bar", (6, 5), "M 55 50 L 85 50"),
            _part("stem", (5, 4), "M 85 50 L 85 75"),
        ),
        svg_path=(
            "M 85 25 C 85 5 70 5 50 5 C 20 5 10 25 10 50 C 10 75 20 95 50 95 "
            "C 70 95 85 85 85 75 L 85 50 L 55 50"
        ),
    ),
    LetterSkeleton(
        letter="H",
        description="2 vertical stems + horizontal crossbar",
        anchors=_pts((15, 10), (15, 90), (85, 10), (85, 90), (15, 50), (85, 50)),
        anatomy=(
            _part("stem", (0, 1), _STEM_LEFT, True),
            _part("stem", (2, 3), "M 85 10 L 85 90", True),
            _part("crossbar", (4, 5), "M 15 50 L 85 50"),
        ),
        svg_path="M 15 10 L 15 90 M 85 10 L 85 90 M 15 50 L 85 50",
    ),
    LetterSkeleton(
        letter="I",
        description="vertical stem + serifs",
        anchors=_pts((50, 10), (50, 90), (30, 10), (70, 10), (30, 90), (70, 90)),
        anatomy=(
            _part("stem", (0, 1), "M 50 10 L 50 90", True),
            _part("terminal", (2, 0, 3), "M 30 10 L 70 10"),
            _part("terminal", (4, 1, 5), "M 30 90 L 70 90"),
        ),
        svg_path="M 50 10 L 50 90 M 30 10 L 70 10 M 30 90 L 70 90",
    ),
    LetterSkeleton(
        letter="J",
        description="vertical stem + bottom hook",
        anchors=_pts((70, 10), (70, 65), (50, 90), (20, 75), (40, 10), (85, 10)),
        anatomy=(
            _part("stem", (0, 1), "M 70 10 L 70 65", True),
            _part("hook", (1, 2, 3), "M 70 65 Q 70 95 50 95 Q 20 95 20 75"),
            _part("terminal", (4, 0, 5), "M 40 10 L 85 10"),
        ),
        svg_path="M 70 10 L 70 65 Q 70 95 50 95 Q 20 95 20 75 M 40 10 L 85 10",
    ),
    LetterSkeleton(
        letter="K",
        description="vertical stem + diagonal arm + diagonal leg",
        anchors=_pts((15, 10), (15, 90), (15, 55), (85, 10), (85, 90)),
        anatomy=(
            _part("stem", (0, 1), _STEM_LEFT, True),
            _part("arm", (2, 3), "M 15 55 L 85 10"),
            _part("leg", (2, 4), "M 15 55 L 85 90"),
        ),
        svg_path="M 15 10 L 15 90 M 15 55 L 85 10 M 15 55 L 85 90",
    ),
    LetterSkeleton(
        letter="L",
        description="vertical stem + horizontal base",
        anchors=_pts((15, 10), (15, 90), (85, 90)),
        anatomy=(
            _part("stem", (0, 1), _STEM_LEFT, True),
            _part("bar", (1, 2), "M 15 90 L 85 90"),
        ),
        svg_path="M 15 10 L 15 90 L 85 90",
    ),
    LetterSkeleton(
        letter="M",
        description="2 verticals + 2 diagonals meeting at center valley",
        anchors=_pts((10, 90), (10, 10), (50, 60), (90, 10), (90, 90)),
        anatomy=(
            _part("stem", (0, 1), "M 10 90 L 10 10", True),
            _part("diagonal", (1, 2), "M 10 10 L 50 60"),
            _part("vertex", (2,)),
            _part("diagonal", (2, 3), "M 50 60 L 90 10"),
            _part("stem", (3, 4), "M 90 10 L 90 90", True),
        ),
        svg_path="M 10 90 L 10 10 L 50 60 L 90 10 L 90 90",
    ),
    LetterSkeleton(
        letter="N",
        description="2 verticals + single diagonal",
        anchors=_pts((15, 90), (15, 10), (85, 90), (85, 10)),
        anatomy=(
            _part("stem", (0, 1), "M 15 90 L 15 10", True),
            _part("diagonal", (1, 2), "M 15 10 L 85 90"),
            _part("stem", (2, 3), "M 85 90 L 85 10", True),
        ),
        svg_path="M 15 90 L 15 10 L 85 90 L 85 10",
    ),
    LetterSkeleton(
        letter="O",
        description="closed oval",
        anchors=_pts((50, 5), (95, 50), (50, 95), (5, 50)),
        anatomy=(_part("loop", (0, 1, 2, 3), _O_LOOP, True),),
        svg_path=_O_LOOP,
    ),
    LetterSkeleton(
        letter="P",
        description="vertical stem + upper bowl",
        anchors=_pts((15, 10), (15, 90), (15, 55), (65, 10), (80, 32), (65, 55)),
        anatomy=(
            _part("stem", (0, 1), _STEM_LEFT, True),
            _part("bowl", (0, 3, 4, 5, 2), _P_BOWL, True),
        ),
        svg_path=f"{_STEM_LEFT} {_P_BOWL}",
    ),
    LetterSkeleton(
        letter="Q",
        description="O + diagonal tail",
        anchors=_pts((50, 5), (95, 50), (50, 95), (5, 50), (55, 75), (95, 98)),
        anatomy=(
            _part("loop", (0, 1, 2, 3), _O_LOOP, True),
            _part("tail", (4, 5), "M 55 75 L 95 98"),
        ),
        svg_path=f"{_O_LOOP} M 55 75 L 95 98",
    ),
    LetterSkeleton(
        letter="R",
        description="P (stem + bowl) + diagonal leg",
        anchors=_pts((15, 10), (15, 90), (15, 55), (65, 10), (80, 32), (65, 55), (85, 90)),
        anatomy=(
            _part("stem", (0, 1), _STEM_LEFT, True),
            _part("bowl", (0, 3, 4, 5, 2), _P_BOWL),
            _part("leg", (5, 6), "M 45 55 L 85 90"),
        ),
        svg_path=f"{_STEM_LEFT} {_P_BOWL} M 45 55 L 85 90",
    ),
    LetterSkeleton(
        letter="S",
        description="double curve (spine)",
        anchors=_pts((80, 20), (50, 5), (15, 25), (50, 50), (85, 75), (50, 95), (20, 80)),
        anatomy=(
            _part(
                "spine",
                (0, 1, 2, 3, 4, 5, 6),
                "M 80 20 C 80 5 60 5 50 5 C 25 5 15 15 15 30 C 15 45 30 50 50 50 "
                "C 70 50 85 55 85 70 C 85 85 75 95 50 95 C 40 95 20 95 20 80",
                True,
            ),
        ),
        svg_path=(
            "M 80 20 C 80 5 60 5 50 5 C 25 5 15 15 15 30 C 15 45 30 50 50 50 "
            "C 70 50 85 55 85 70 C 85 85 75 95 50 95 C 40 95 20 95 20 80"
        ),
    ),
    LetterSkeleton(
        letter="T",
        description="horizontal top + vertical stem",
        anchors=_pts((5, 10), (95, 10), (50, 10), (50, 90)),
        anatomy=(
            _part("bar", (0, 1), "M 5 10 L 95 10"),
            _part("stem", (2, 3), "M 50 10 L 50 90", True),
        ),
        svg_path="M 5 10 L 95 10 M 50 10 L 50 90",
    ),
    LetterSkeleton(
        letter="U",
        description="2 verticals + connecting bottom curve",
        anchors=_pts((15, 10), (15, 65), (50, 95), (85, 65), (85, 10)),
        anatomy=(
            _part("stem", (0, 1), "M 15 10 L 15 65", True),
            _part("arc", (1, 2, 3), "M 15 65 Q 15 95 50 95 Q 85 95 85 65"),
            _part("stem", (3, 4), "M 85 65 L 85 10", True),
        ),
        svg_path="M 15 10 L 15 65 Q 15 95 50 95 Q 85 95 85 65 L 85 10",
    ),
    LetterSkeleton(
        letter="V",
        description="2 diagonals meeting at bottom vertex",
        anchors=_pts((10, 10), (50, 90), (90, 10)),
        anatomy=(
            _part("diagonal", (0, 1), "M 10 10 L 50 90", True),
            _part("vertex", (1,)),
            _part("diagonal", (1, 2), "M 50 90 L 90 10", True),
        ),
        svg_path="M 10 10 L 50 90 L 90 10",
    ),
    LetterSkeleton(
        letter="W",
        description="2 Vs connected (double valley)",
        anchors=_pts((5, 10), (25, 90), (50, 40), (75, 90), (95, 10)),
        anatomy=(
            _part("diagonal", (0, 1), "M 5 10 L 25 90", True),
            _part("vertex", (1,)),
            _part("diagonal", (1, 2), "M 25 90 L 50 40"),
            _part("apex", (2,)),
            _part("diagonal", (2, 3), "M 50 40 L 75 90"),
            _part("vertex", (3,)),
            _part("diagonal", (3, 4), "M 75 90 L 95 10", True),
        ),
        svg_path="M 5 10 L 25 90 L 50 40 L 75 90 L 95 10",
        stroke_width_ratio=0.10,
    ),
    LetterSkeleton(
        letter="X",
        description="2 diagonals crossing at center",
        anchors=_pts((10, 10), (90, 90), (90, 10), (10, 90), (50, 50)),
        anatomy=(
            _part("diagonal", (0, 4, 1), "M 10 10 L 90 90", True),
            _part("diagonal", (2, 4, 3), "M 90 10 L 10 90", True),
        ),
        svg_path="M 10 10 L 90 90 M 90 10 L 10 90",
    ),
    LetterSkeleton(
        letter="Y",
        description="2 upper diagonals meeting at center + vertical stem below",
        anchors=_pts((10, 10), (50, 50), (90, 10), (50, 90)),
        anatomy=(
            _part("arm", (0, 1), "M 10 10 L 50 50"),
            _part("arm", (2, 1), "M 90 10 L 50 50"),
            _part("stem", (1, 3), "M 50 50 L 50 90", True),
        ),
        svg_path="M 10 10 L 50 50 L 90 10 M 50 50 L 50 90",
    ),
    LetterSkeleton(
        letter="Z",
        description="horizontal top + diagonal + horizontal bottom",
        anchors=_pts((10, 10), (90, 10), (10, 90), (90, 90)),
        anatomy=(
            _part("bar", (0, 1), "M 10 10 L 90 10"),
            _part("diagonal", (1, 2), "M 90 10 L 10 90", True),
            _part("bar", (2, 3), "M 10 90 L 90 90"),
        ),
        svg_path="M 10 10 L 90 10 L 10 90 L 90 90",
    ),
)

_SKELETONS: dict[str, LetterSkeleton] = {sk.letter: sk for sk in _SKELETON_DATA}

# Curated groupings. G's horizontal bar counts as a crossbar here.
LETTER_GROUPS: dict[str, tuple[str, ...]] = {
    "with_bowls": ("B", "D", "O", "P", "Q", "R"),
    "with_diagonals": ("A", "K", "M", "N", "V", "W", "X", "Y", "Z"),
    "with_curves": ("C", "G", "J", "O", "Q", "S", "U"),
    "straight_only": ("E", "F", "H", "I", "L", "T"),
    "with_crossbars": ("A", "E", "F", "G", "H"),
}


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


def get_skeleton(letter: str) -> LetterSkeleton | None:
    """Case-insensitive lookup. Anything other than a single A-Z letter misses."""
    if not letter or len(letter) != 1:
        return None
    return _SKELETONS.get(letter.upper())


def skeleton_for_brand(brand_name: str) -> LetterSkeleton | None:
    """Skeleton of the brand's first character, ``None`` when it is not A-Z."""
    skeleton = get_skeleton(brand_name[:1])
    if skeleton is None:
        logger.debug("No skeleton for %r, using fallback shape", brand_name[:1])
    return skeleton


def all_skeletons() -> tuple[LetterSkeleton, ...]:
    return _SKELETON_DATA


# ---------------------------------------------------------------------------
# Derived queries
# ---------------------------------------------------------------------------


def primary_anchors(skeleton: LetterSkeleton) -> list[Point]:
    """Anchors referenced by primary parts, first-seen order, no duplicates."""
    seen: list[int] = []
    for part in skeleton.anatomy:
        if part.is_primary:
            seen.extend(i for i in part.anchors if i not in seen)
    return [skeleton.anchors[i] for i in seen]


def anatomy_by_type(skeleton: LetterSkeleton, type_: str) -> list[AnatomyPart]:
    return [part for part in skeleton.anatomy if part.type == type_]


def skeleton_bounds(skeleton: LetterSkeleton) -> tuple[float, float, float, float]:
    """(min_x, min_y, max_x, max_y) over the anchors."""
    return bbox(skeleton.anchor_array())


def has_curves(skeleton: LetterSkeleton) -> bool:
    return any(part.type in CURVED_TYPES for part in skeleton.anatomy)


def has_diagonals(skeleton: LetterSkeleton) -> bool:
    return any(part.type in DIAGONAL_TYPES for part in skeleton.anatomy)


def modular_points(skeleton: LetterSkeleton) -> list[Point]:
    return list(skeleton.anchors)


def stencil_gaps(skeleton: LetterSkeleton, margin: float = STENCIL_GAP_MARGIN) -> list[StencilGap]:
    """Gap boxes centred on the midpoint of each multi-anchor part's end anchors."""
    gaps: list[StencilGap] = []
    for part in skeleton.anatomy:
        if len(part.anchors) < 2:
            continue
        start = skeleton.anchors[part.anchors[0]]
        end = skeleton.anchors[part.anchors[-1]]
        mid_x, mid_y = (start.x + end.x) / 2, (start.y + end.y) / 2
        gaps.append(
            StencilGap(Point(mid_x - margin, mid_y - margin), Point(mid_x + margin, mid_y + margin))
        )
    return gaps


def outline_segments(skeleton: LetterSkeleton) -> list[str]:
    return [part.path for part in skeleton.anatomy if part.path]


def dominant_anatomy(skeleton: LetterSkeleton) -> str:
    """Type of the first primary part (or of the first part)."""
    for part in skeleton.anatomy:
        if part.is_primary:
            return part.type
    return skeleton.anatomy[0].type


def letters_by_anatomy(*types: str) -> list[str]:
    """Letters whose anatomy includes every one of ``types``."""
    return [
        sk.letter
        for sk in _SKELETON_DATA
        if all(any(part.type == t for part in sk.anatomy) for t in types)
    ]


def skeleton_summary() -> dict[str, object]:
    return {
        "total_letters": len(_SKELETON_DATA),
        "categories": {name: list(letters) for name, letters in LETTER_GROUPS.items()},
        "anatomy_types": list(ANATOMY_TYPES),
    }


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------


def transform_anchors(skeleton: LetterSkeleton, matrix: NDArray[np.float64]) -> list[Point]:
    return [Point(float(x), float(y)) for x, y in apply_affine(skeleton.anchor_array(), matrix)]


def scale_skeleton(skeleton: LetterSkeleton, factor: float) -> LetterSkeleton:
    """Copy of ``skeleton`` with anchors and every path scaled about the origin."""
    return LetterSkeleton(
        letter=skeleton.letter,
        description=skeleton.description,
        anchors=tuple(transform_anchors(skeleton, scale_matrix(factor))),
        anatomy=tuple(
            AnatomyPart(
                type=part.type,
                anchors=part.anchors,
                path=ShapePath(part.path).scaled(factor).d(),
                is_primary=part.is_primary,
            )
            for part in skeleton.anatomy
        ),
        svg_path=ShapePath(skeleton.svg_path).scaled(factor).d(),
        stroke_width_ratio=skeleton.stroke_width_ratio,
        scale=skeleton.scale * factor,
    )


@functools.lru_cache(maxsize=64)
def canvas_skeleton(letter: str, factor: float = 2.0) -> LetterSkeleton | None:
    """Scaled skeleton for ``letter``, cached per (letter, factor)."""
    skeleton = get_skeleton(letter)
    if skeleton is None:
        return None
    return scale_skeleton(skeleton, factor)


def render_skeleton(
    skeleton: LetterSkeleton,
    paint: PaintContext,
    stroke_width: float | None = None,
    size: float = 100,
) -> str:
    """Standalone markup of the skeleton path on a ``size`` canvas."""
    factor = size / 100
    if stroke_width is None:
        stroke_width = skeleton.stroke_width_ratio * size
    path = skeleton.svg_path if factor == 1 else ShapePath(skeleton.svg_path).scaled(factor).d()
    return serialize_svg(
        [
            el(
                "path",
                d=path,
                fill="none",
                stroke=paint.color,
                stroke_width=stroke_width,
                stroke_linecap="round",
                stroke_linejoin="round",
            )
        ],
        canvas_size=size,
    )
