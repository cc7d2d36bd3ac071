"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def centroid(points: NDArray[np.float64]) -> tuple[float, float]:
    """Compute centroid of a point set."""
    if len(points) == 0:
        return (0.0, 0.0)
    return (float(np.mean(points[:, 0])), float(np.mean(points[:, 1])))


def translation_matrix(dx: float, dy: float) -> NDArray[np.float64]:
    return np.array([[1.0, 0.0, dx], [0.0, 1.0, dy], [0.0, 0.0, 1.0]])


def scale_matrix(sx: float, sy: float | None = None) -> NDArray[np.float64]:
    sy = sx if sy is None else sy
    return np.array([[sx, 0.0, 0.0], [0.0, sy, 0.0], [0.0, 0.0, 1.0]])


def rotation_matrix(degrees: float, cx: float = 0.0, cy: float = 0.0) -> NDArray[np.float64]:
    """Rotation about (cx, cy), SVG orientation (positive = clockwise on screen)."""
    rad = math.radians(degrees)
    c, s = math.cos(rad), math.sin(rad)
    rot = np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])
    return translation_matrix(cx, cy) @ rot @ translation_matrix(-cx, -cy)


def apply_affine(points: NDArray[np.float64], matrix: NDArray[np.float64]) -> NDArray[np.float64]:
    """Apply a 3x3 homogeneous matrix to an (N, 2) point array."""
    if len(points) == 0:
        return np.zeros((0, 2))
    homogeneous = np.hstack([points, np.ones((len(points), 1))])
    return (homogeneous @ matrix.T)[:, :2]


def polar_point(cx: float, cy: float, radius: float, degrees: float) -> tuple[float, float]:
    """Point at ``degrees`` (0 = +x axis, clockwise on screen) around (cx, cy)."""
    rad = math.radians(degrees)
    return (cx + radius * math.cos(rad), cy + radius * math.sin(rad))


def ring_points(
    cx: float, cy: float, radius: float, count: int, start_degrees: float = 0.0
) -> list[tuple[float, float]]:
    """``count`` points evenly spaced on a circle."""
    if count <= 0:
        return []
    step = 360.0 / count
    return [polar_point(cx, cy, radius, start_degrees + i * step) for i in range(count)]
