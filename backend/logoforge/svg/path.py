"""Parsed SVG path with structural affine transforms.

Facade over svgpathtools: ``d`` strings are parsed once into segments, every
transform is applied to segment control points (never to raw text), and ``d()``
re-serializes with explicit x/y pairs.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from svgpathtools import Arc, CubicBezier, Line, Path, QuadraticBezier, parse_path
from svgpathtools.path import transform

from logoforge.svg.serializer import fmt
from logoforge.utils.geometry import scale_matrix, translation_matrix

# Endpoint distance below which two segments count as joined.
_JOIN_TOL = 1e-6


def _xy(z: complex) -> str:
    return f"{fmt(z.real)} {fmt(z.imag)}"


def _joined(a: complex, b: complex) -> bool:
    return abs(a - b) < _JOIN_TOL


class ShapePath:
    """Immutable parsed path. Transforms return new instances."""

    __slots__ = ("_path",)

    def __init__(self, d: str | Path = "") -> None:
        if isinstance(d, Path):
            self._path = d
        else:
            self._path = parse_path(d) if d and d.strip() else Path()

    @property
    def segments(self) -> Path:
        return self._path

    @property
    def is_empty(self) -> bool:
        return len(self._path) == 0

    def transformed(self, matrix: NDArray[np.float64]) -> ShapePath:
        """Apply a 3x3 homogeneous matrix to every segment."""
        if self.is_empty:
            return self
        return ShapePath(Path(*[transform(seg, matrix) for seg in self._path]))

    def scaled(self, sx: float, sy: float | None = None) -> ShapePath:
        return self.transformed(scale_matrix(sx, sy))

    def translated(self, dx: float, dy: float) -> ShapePath:
        return self.transformed(translation_matrix(dx, dy))

    def points(self) -> NDArray[np.float64]:
        """All end and control points as an (N, 2) array."""
        pts: list[complex] = []
        for seg in self._path:
            if isinstance(seg, Arc):
                pts.extend((seg.start, seg.end))
            else:
                pts.extend(seg.bpoints())
        if not pts:
            return np.zeros((0, 2))
        return np.array([[p.real, p.imag] for p in pts])

    def bbox(self) -> tuple[float, float, float, float]:
        """Exact (xmin, ymin, xmax, ymax) of the drawn geometry."""
        if self.is_empty:
            return (0.0, 0.0, 0.0, 0.0)
        xmin, xmax, ymin, ymax = self._path.bbox()
        return (float(xmin), float(ymin), float(xmax), float(ymax))

    def d(self) -> str:
        """Serialize as absolute ``M/L/Q/C/A`` commands, ``Z`` on closed subpaths."""
        parts: list[str] = []
        subpath_start: complex | None = None
        subpath_len = 0
        cursor: complex | None = None

        def close_if_needed() -> None:
            if subpath_start is not None and subpath_len > 1 and _joined(cursor, subpath_start):
                parts.append("Z")

        for seg in self._path:
            if cursor is None or not _joined(cursor, seg.start):
                close_if_needed()
                parts.append(f"M {_xy(seg.start)}")
                subpath_start = seg.start
                subpath_len = 0
            if isinstance(seg, Line):
                parts.append(f"L {_xy(seg.end)}")
            elif isinstance(seg, QuadraticBezier):
                parts.append(f"Q {_xy(seg.control)} {_xy(seg.end)}")
            elif isinstance(seg, CubicBezier):
                parts.append(f"C {_xy(seg.control1)} {_xy(seg.control2)} {_xy(seg.end)}")
            elif isinstance(seg, Arc):
                parts.append(
                    f"A {fmt(seg.radius.real)} {fmt(seg.radius.imag)} {fmt(seg.rotation)} "
                    f"{int(seg.large_arc)} {int(seg.sweep)} {_xy(seg.end)}"
                )
            else:
                raise TypeError(f"Unsupported segment type: {type(seg).__name__}")
            subpath_len += 1
            cursor = seg.end
        close_if_needed()
        return " ".join(parts)

    def __str__(self) -> str:
        return self.d()

    def __repr__(self) -> str:
        return f"ShapePath({self.d()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ShapePath):
            return NotImplemented
        return self.d() == other.d()

    def __hash__(self) -> int:
        return hash(self.d())


def scale_path(d: str, factor: float) -> str:
    """Scale a ``d`` string about the origin; empty input stays empty."""
    return ShapePath(d).scaled(factor).d()

