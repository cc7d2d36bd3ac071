"""Tests for geometry helpers."""

import numpy as np
import pytest

from logoforge.utils.geometry import (
    apply_affine,
    bbox,
    centroid,
    polar_point,
    ring_points,
    rotation_matrix,
    scale_matrix,
    translation_matrix,
)


def test_bbox_and_centroid():
    pts = np.array([[0.0, 0.0], [10.0, 4.0], [2.0, 8.0]])
    assert bbox(pts) == (0.0, 0.0, 10.0, 8.0)
    assert centroid(pts) == (4.0, 4.0)
    assert bbox(np.zeros((0, 2))) == (0.0, 0.0, 0.0, 0.0)


def test_affine_composition():
    pts = np.array([[1.0, 1.0]])
    m = translation_matrix(10, 0) @ scale_matrix(2)
    assert apply_affine(pts, m).tolist() == [[12.0, 2.0]]


def test_rotation_about_centre():
    out = apply_affine(np.array([[200.0, 100.0]]), rotation_matrix(90, 100, 100))
    assert out[0] == pytest.approx([100.0, 200.0])


def test_polar_point_clockwise_on_screen():
    x, y = polar_point(100, 100, 10, 90)
    assert x == pytest.approx(100)
    assert y == pytest.approx(110)


def test_ring_points():
    pts = ring_points(0, 0, 1, 4)
    assert len(pts) == 4
    assert pts[0] == pytest.approx((1, 0))
    assert ring_points(0, 0, 1, 0) == []
