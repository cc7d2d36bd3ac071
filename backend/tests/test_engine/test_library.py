"""Tests for the named algorithm library and batch pools."""

import re

import pytest

from logoforge.engine.icons import available_categories
from logoforge.engine.library import (
    _entry,
    candidate_pool,
    entry_names,
    find_entry,
    get_entry,
    get_library,
    icon_entries,
    symbol_pool,
    vibe_score,
    wordmark_pool,
)
from logoforge.engine.registry import get_registry
from logoforge.engine.seed import derive_params
from logoforge.models.params import ParameterVector
from tests.conftest import BRAND_COLOR, FIXED_SEED, NON_LETTER_BRANDS


def test_library_size():
    assert len(get_library()) == 122


def test_library_order():
    names = entry_names()
    assert names[0] == "Architectural Grid"
    assert names.index("Modular Units") < names.index("Modular Dots") < names.index("Stencil Cut")
    assert names.index("Letter Fusion") < names.index("Speed Arrows")
    assert names[-1] == "Chunky Glyph"


def test_names_unique():
    names = entry_names()
    assert len(names) == len(set(names))


def test_every_entry_registered():
    registry = get_registry()
    for entry in get_library():
        assert entry.base_id in registry


def test_preset_overrides():
    monoline_bold = get_entry("Monoline Bold")
    assert monoline_bold.base_id == "monoline"
    assert monoline_bold.is_preset
    assert dict(monoline_bold.overrides) == {"stroke_width": 5}
    assert not get_entry("Monoline Letter").is_preset


def test_preset_overrides_read_only():
    entry = get_entry("Monoline Bold")
    with pytest.raises(TypeError):
        entry.overrides["stroke_width"] = 1


def test_unknown_override_field_rejected():
    with pytest.raises(ValueError, match="unknown fields"):
        _entry("Broken", "bad preset", "monoline", {"glow_radius": 3})


def test_lookup():
    assert find_entry("Nope") is None
    with pytest.raises(KeyError):
        get_entry("Nope")
    assert find_entry("Glass Orb").base_id == "neo_gradient"


def test_icon_entries_per_category():
    for category in available_categories():
        entries = icon_entries(category)
        assert len(entries) == 4
        assert all(e.kind == "symbol" for e in entries)
        assert all(e.base_id == f"icon.{category}" for e in entries)
    assert icon_entries("default")[0].name == "Abstract Dots"


def test_pools_partition_library():
    assert len(symbol_pool()) + len(wordmark_pool()) == len(get_library())
    assert "Speed Arrows" in [e.name for e in symbol_pool()]
    assert "Stencil Bold" in [e.name for e in wordmark_pool()]


@pytest.mark.parametrize("brand", ["Nexus", *NON_LETTER_BRANDS])
def test_every_entry_renders(brand, paint):
    params = derive_params(FIXED_SEED)
    for entry in get_library():
        svg = entry.render(params, brand, paint)
        assert svg.startswith("<svg viewBox=\"0 0 200 200\""), entry.name
        assert svg.rstrip().endswith("</svg>"), entry.name
        assert "None" not in svg, entry.name
        assert not re.search(r"\bnan\b", svg), entry.name
        assert "currentColor" not in svg, entry.name
        assert BRAND_COLOR in svg, entry.name


def test_render_deterministic(paint):
    params = ParameterVector()
    for entry in get_library()[:20]:
        assert entry.render(params, "Nexus", paint) == entry.render(params, "Nexus", paint)


def test_preset_changes_output(paint):
    params = ParameterVector()
    assert get_entry("Monoline Letter").render(params, "Nexus", paint) != get_entry("Monoline Bold").render(
        params, "Nexus", paint
    )


def test_vibe_score():
    assert vibe_score(get_entry("Swiss Minimal"), "minimalist") >= 20
    assert vibe_score(get_entry("Swiss Minimal"), "unknown") == 0


def test_candidate_pool_any_is_library():
    assert candidate_pool("any", "") == get_library()
    assert candidate_pool("any", "no-such-vibe") == get_library()


def test_candidate_pool_vibe_ranked():
    pool = candidate_pool("any", "tech")
    scores = [vibe_score(e, "tech") for e in pool]
    assert len(pool) >= 5
    assert all(s > 0 for s in scores)
    assert scores == sorted(scores, reverse=True)


def test_candidate_pool_archetype():
    assert all(e.kind == "symbol" for e in candidate_pool("symbol", ""))
    assert all(e.kind == "wordmark" for e in candidate_pool("wordmark", ""))
    assert all(e.kind == "symbol" for e in candidate_pool("symbol", "bold"))
