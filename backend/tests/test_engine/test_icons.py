"""Tests for the abstract icon system."""

import pytest

from logoforge.engine.icons import (
    CATEGORIES,
    DEFAULT_CATEGORY,
    available_categories,
    category_keywords,
    category_label,
    generate_abstract_icon,
    generate_icon_variations,
    resolve_category,
)
from logoforge.engine.seed import string_hash
from logoforge.models.params import ParameterVector
from logoforge.svg.paint import DEFAULT_PAINT
from logoforge.svg.serializer import serialize_svg
from tests.conftest import BRAND_COLOR


def test_eleven_categories():
    assert available_categories() == [
        "speed", "growth", "connect", "secure", "tech", "creative",
        "data", "communication", "finance", "health", "default",
    ]


def test_four_compositions_each():
    assert all(len(cat.compositions) == 4 for cat in CATEGORIES.values())
    assert sum(len(cat.compositions) for cat in CATEGORIES.values()) == 44


@pytest.mark.parametrize("category", list(CATEGORIES))
def test_compositions_build_elements(category):
    params = ParameterVector(element_count=6, corner_radius=40)
    for fn in CATEGORIES[category].compositions:
        for seed in (0, 7, 12345):
            elements = fn(params, seed, DEFAULT_PAINT)
            assert elements, fn.__name__
            assert all("tag" in e for e in elements if e), fn.__name__
            assert serialize_svg(elements).startswith("<svg")


def test_resolve_exact_category():
    assert resolve_category("finance") == "finance"
    assert resolve_category("Finance", ["rapid"]) == "finance"


def test_resolve_by_keyword_scan_order():
    assert resolve_category(None, ["rapid delivery"]) == "speed"
    # "data" is a keyword of both tech and data; tech is declared first
    assert resolve_category(None, ["data"]) == "tech"
    assert resolve_category("bakery", ["wellness"]) == "health"


def test_resolve_default():
    assert resolve_category() == DEFAULT_CATEGORY
    assert resolve_category("bakery", ["zzz"]) == DEFAULT_CATEGORY
    assert resolve_category(None, ["", "   "]) == DEFAULT_CATEGORY


def test_category_metadata():
    assert "coin" in category_keywords("Finance")
    assert category_keywords("nope") == []
    assert category_keywords(DEFAULT_CATEGORY) == []
    assert category_label("health") == "Health and wellness"


def test_icon_deterministic():
    params = ParameterVector()
    a = generate_abstract_icon(params, "Nexus", DEFAULT_PAINT, "tech")
    assert a == generate_abstract_icon(params, "Nexus", DEFAULT_PAINT, "tech")


def test_icon_composition_chosen_by_brand_hash():
    params = ParameterVector(rotation=0)
    compositions = CATEGORIES["growth"].compositions
    expected = compositions[string_hash("Nexus") % len(compositions)](params, string_hash("Nexus"), DEFAULT_PAINT)
    svg = generate_abstract_icon(params, "Nexus", DEFAULT_PAINT, "growth")
    assert serialize_svg(expected).splitlines()[1].strip() in svg


def test_icon_rotation_and_paint(paint):
    svg = generate_abstract_icon(ParameterVector(rotation=30), "Nexus", paint, "secure")
    assert "rotate(30 100 100)" in svg
    assert BRAND_COLOR in svg


def test_variations():
    params = ParameterVector(stroke_width=4, corner_radius=10, rotation=0)
    variants = generate_icon_variations(params, "Nexus", DEFAULT_PAINT, "connect")
    assert len(variants) == 4
    assert variants[1] != variants[0]
    assert "rotate(10 100 100)" in variants[1]
    assert "rotate(30 100 100)" in variants[3]


def test_variation_count():
    assert generate_icon_variations(ParameterVector(), "Nexus", DEFAULT_PAINT, count=0) == []
    assert len(generate_icon_variations(ParameterVector(), "Nexus", DEFAULT_PAINT, count=7)) == 7


def _tags(elements):
    for elem in elements:
        yield elem["tag"]
        yield from _tags(elem.get("children", []))


def test_compositions_only_use_toolkit_tags():
    allowed = {"circle", "ellipse", "path", "rect", "line", "g"}
    for category in CATEGORIES.values():
        for fn in category.compositions:
            assert set(_tags(fn(ParameterVector(), 3, DEFAULT_PAINT))) <= allowed, fn.__name__
