"""Tests for lettermark structural scoring."""

import pytest

from logoforge.engine.lettermark import (
    PREMIUM_LETTERMARK_ALGORITHMS,
    is_premium,
    recommended_lettermark_algorithm,
    score_lettermark,
)
from logoforge.engine.library import find_entry, get_entry
from logoforge.models.params import ParameterVector
from logoforge.svg.paint import DEFAULT_PAINT
from tests.conftest import GENERIC_TEXT_SVG, STRUCTURED_SVG


def test_structured_mark_passes():
    score = score_lettermark(STRUCTURED_SVG, "Stencil Cut")
    assert score.metrics.signals == 6
    assert score.geometric_complexity == 9
    assert score.uniqueness == 9
    assert score.negative_space_usage == 10
    assert score.overall == 9.3
    assert not score.is_generic
    assert score.passes


def test_premium_bonus_capped():
    score = score_lettermark(STRUCTURED_SVG, "Negative Space Letter")
    assert score.geometric_complexity == 10
    assert score.uniqueness == 10
    assert score.negative_space_usage == 10
    assert score.overall == 10.0


def test_generic_text_in_circle_fails():
    score = score_lettermark(GENERIC_TEXT_SVG, "Plain")
    assert score.metrics.signals == 0
    assert score.geometric_complexity == 1
    assert score.uniqueness == 1
    assert score.is_generic
    assert not score.passes


def test_is_premium_substring():
    assert is_premium("Techno Construct")
    assert is_premium("Long Shadow")
    assert not is_premium("Monoline Clean")


def test_premium_names_in_library():
    for name in PREMIUM_LETTERMARK_ALGORITHMS:
        assert find_entry(name) is not None, name


@pytest.mark.parametrize(
    "letter, expected",
    [
        ("N", "Blueprint Letter"),
        ("o", "Negative Space Letter"),
        ("B", "Architectural Grid"),
        ("J", "Letter Fusion"),
        ("9", "Shadow Depth"),
        ("", "Shadow Depth"),
    ],
)
def test_recommended_algorithm(letter, expected):
    assert recommended_lettermark_algorithm(letter) == expected
    assert find_entry(expected) is not None


def test_scores_in_bounds_for_library_wordmarks():
    params = ParameterVector()
    for name in ("Monoline Clean", "Stencil Bold", "Blueprint Letter", "Shadow Depth"):
        svg = get_entry(name).render(params, "Nexus", DEFAULT_PAINT)
        score = score_lettermark(svg, name)
        assert 0 <= score.overall <= 10
        for value in (score.geometric_complexity, score.uniqueness, score.negative_space_usage):
            assert 1 <= value <= 10
