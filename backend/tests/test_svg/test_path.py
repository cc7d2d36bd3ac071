"""Tests for ShapePath."""

import numpy as np
import pytest

from logoforge.svg.path import ShapePath, scale_path
from logoforge.utils.geometry import rotation_matrix


def test_empty():
    path = ShapePath("")
    assert path.is_empty
    assert path.d() == ""
    assert path.bbox() == (0.0, 0.0, 0.0, 0.0)
    assert path.points().shape == (0, 2)


def test_bbox_of_lines():
    path = ShapePath("M 10 90 L 50 5 L 90 90")
    assert path.bbox() == (10.0, 5.0, 90.0, 90.0)


def test_d_round_trips_absolute_lines():
    assert ShapePath("M 10 90 L 50 5 L 90 90").d() == "M 10 90 L 50 5 L 90 90"


def test_d_starts_new_subpath_on_jump():
    d = ShapePath("M 10 90 L 50 5 M 25 60 L 75 60").d()
    assert d == "M 10 90 L 50 5 M 25 60 L 75 60"


def test_scaled_and_translated():
    path = ShapePath("M 10 10 L 20 20")
    assert path.scaled(2).bbox() == (20.0, 20.0, 40.0, 40.0)
    assert path.translated(5, -5).bbox() == (15.0, 5.0, 25.0, 15.0)
    # Original untouched
    assert path.bbox() == (10.0, 10.0, 20.0, 20.0)


def test_transformed_rotation():
    path = ShapePath("M 0 0 L 10 0").transformed(rotation_matrix(90))
    xmin, ymin, xmax, ymax = path.bbox()
    assert xmin == pytest.approx(0, abs=1e-9)
    assert ymax == pytest.approx(10)


def test_curve_bbox_is_exact():
    # The control point sits far above; the curve itself only reaches halfway.
    path = ShapePath("M 0 100 Q 50 0 100 100")
    assert path.bbox()[1] == pytest.approx(50)
    assert np.min(path.points()[:, 1]) == 0


def test_equality_and_hash():
    a = ShapePath("M 0 0 L 10 10")
    b = ShapePath("M0,0 L10,10")
    assert a == b
    assert hash(a) == hash(b)


def test_scale_path():
    assert scale_path("M 10 20 L 30 40", 2) == "M 20 40 L 60 80"
    assert scale_path("", 2) == ""
