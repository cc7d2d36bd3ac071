"""Tests for the letter skeleton model."""

import string

import pytest

from logoforge.engine.skeletons import (
    ANATOMY_TYPES,
    all_skeletons,
    anatomy_by_type,
    canvas_skeleton,
    dominant_anatomy,
    get_skeleton,
    has_curves,
    has_diagonals,
    letters_by_anatomy,
    outline_segments,
    primary_anchors,
    render_skeleton,
    scale_skeleton,
    skeleton_bounds,
    skeleton_for_brand,
    skeleton_summary,
    stencil_gaps,
    transform_anchors,
)
from logoforge.svg.paint import PaintContext
from logoforge.utils.geometry import translation_matrix
from tests.conftest import NON_LETTER_BRANDS


def test_all_letters_present():
    letters = [sk.letter for sk in all_skeletons()]
    assert letters == list(string.ascii_uppercase)


def test_anchor_indices_valid():
    for sk in all_skeletons():
        assert sk.svg_path.startswith("M")
        assert sk.anatomy
        for part in sk.anatomy:
            assert part.type in ANATOMY_TYPES
            assert all(0 <= i < len(sk.anchors) for i in part.anchors)


def test_anchors_on_grid():
    for sk in all_skeletons():
        min_x, min_y, max_x, max_y = skeleton_bounds(sk)
        assert 0 <= min_x <= max_x <= 100
        assert 0 <= min_y <= max_y <= 100


def test_lookup_case_insensitive():
    assert get_skeleton("n") is get_skeleton("N")
    assert get_skeleton("n").letter == "N"


@pytest.mark.parametrize("key", ["", "9", "#", "AB", "é"])
def test_lookup_miss(key):
    assert get_skeleton(key) is None


def test_skeleton_for_brand():
    assert skeleton_for_brand("nexus").letter == "N"
    for brand in NON_LETTER_BRANDS:
        assert skeleton_for_brand(brand) is None


def test_curves_and_diagonals():
    assert has_curves(get_skeleton("O"))
    assert not has_curves(get_skeleton("L"))
    assert has_diagonals(get_skeleton("A"))
    assert not has_diagonals(get_skeleton("H"))


def test_primary_anchors_unique():
    sk = get_skeleton("A")
    anchors = primary_anchors(sk)
    assert anchors
    assert len(anchors) == len(set(anchors))


def test_anatomy_by_type():
    crossbars = anatomy_by_type(get_skeleton("H"), "crossbar")
    assert len(crossbars) == 1
    assert crossbars[0].path == "M 15 50 L 85 50"


def test_dominant_anatomy():
    assert dominant_anatomy(get_skeleton("A")) == "diagonal"
    assert dominant_anatomy(get_skeleton("D")) in ANATOMY_TYPES


def test_stencil_gaps_per_multi_anchor_part():
    sk = get_skeleton("H")
    gaps = stencil_gaps(sk)
    assert len(gaps) == sum(1 for part in sk.anatomy if len(part.anchors) >= 2)
    for gap in gaps:
        assert gap.end.x - gap.start.x == pytest.approx(10)


def test_outline_segments_skip_pathless_parts():
    sk = get_skeleton("A")
    segments = outline_segments(sk)
    assert "M 25 60 L 75 60" in segments
    assert all(segments)


def test_letters_by_anatomy():
    assert {"B", "D", "P", "R"} <= set(letters_by_anatomy("bowl"))
    assert {"A", "E", "F", "H"} <= set(letters_by_anatomy("crossbar"))
    assert "A" in letters_by_anatomy("crossbar", "diagonal")


def test_skeleton_summary():
    summary = skeleton_summary()
    assert summary["total_letters"] == 26
    assert "with_bowls" in summary["categories"]
    assert summary["anatomy_types"] == list(ANATOMY_TYPES)


def test_scale_skeleton():
    sk = get_skeleton("L")
    scaled = scale_skeleton(sk, 2)
    assert scaled.anchors[0].x == sk.anchors[0].x * 2
    assert scaled.scale == 2
    assert skeleton_bounds(scaled)[2] == skeleton_bounds(sk)[2] * 2


def test_transform_anchors():
    sk = get_skeleton("T")
    moved = transform_anchors(sk, translation_matrix(10, -5))
    assert len(moved) == len(sk.anchors)
    for before, after in zip(sk.anchors, moved):
        assert after.x == pytest.approx(before.x + 10)
        assert after.y == pytest.approx(before.y - 5)


def test_canvas_skeleton_cached():
    assert canvas_skeleton("N") is canvas_skeleton("N")
    assert canvas_skeleton("9") is None


def test_render_skeleton():
    svg = render_skeleton(get_skeleton("A"), PaintContext(color="red"), size=100)
    assert svg.startswith('<svg viewBox="0 0 100 100"')
    assert 'stroke="red"' in svg
    assert 'stroke-width="12"' in svg
