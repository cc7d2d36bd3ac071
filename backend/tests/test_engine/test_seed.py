"""Tests for seed generation and parameter derivation."""

import math

import pytest

from logoforge.engine.seed import (
    derive_params,
    generate_seed,
    get_param,
    seed_score,
    seeded_random,
    select_index,
    string_hash,
    validate_seed,
)
from logoforge.models.params import ANATOMY_CHOICES, FIELD_RANGES, ParameterVector, round_half_up
from tests.conftest import FIXED_SEED, SHORT_SEED


def test_generate_seed_is_sha256_hex():
    seed = generate_seed("Nexus", "technology")
    assert len(seed) == 64
    assert validate_seed(seed) == seed


def test_generate_seed_deterministic_with_fixed_inputs():
    a = generate_seed("Nexus", "technology", timestamp=1, salt="x")
    b = generate_seed("nexus", "TECHNOLOGY", timestamp=1, salt="x")
    assert a == b
    assert a != generate_seed("Nexus", "technology", timestamp=2, salt="x")


def test_generate_seed_unsalted_calls_differ():
    assert generate_seed("Nexus", "technology") != generate_seed("Nexus", "technology")


@pytest.mark.parametrize("bad", ["", "xyz", "12", "12g4", "not a seed"])
def test_validate_seed_rejects(bad):
    with pytest.raises(ValueError):
        validate_seed(bad)


def test_get_param_in_range():
    for offset in range(40):
        value = get_param(FIXED_SEED, offset, 1, 8, 0.5)
        assert 1 <= value <= 8
        assert value * 2 == int(value * 2)


def test_get_param_short_seed_wraps():
    # A four-digit seed has a single chunk, every offset reads it.
    values = {get_param(SHORT_SEED, offset, 0, 100) for offset in range(10)}
    assert len(values) == 1
    assert values.pop() == round(0xABCD / 0xFFFF * 100, 2)


def test_get_param_integer():
    value = get_param(FIXED_SEED, 5, 2, 6, 1, integer=True)
    assert isinstance(value, int)
    assert 2 <= value <= 6


def test_derive_params_deterministic():
    assert derive_params(FIXED_SEED) == derive_params(FIXED_SEED)


def test_derive_params_ranges():
    for i in range(30):
        params = derive_params(generate_seed(f"brand{i}", "general", timestamp=i, salt="s"))
        for name, (lo, hi) in FIELD_RANGES.items():
            assert lo <= getattr(params, name) <= hi, name
        assert params.symmetry in ("bilateral", "radial", "none")
        assert 1 <= len(params.anatomy) <= 3
        assert len(set(params.anatomy)) == len(params.anatomy)
        assert all(part in ANATOMY_CHOICES for part in params.anatomy)
        assert params.gradient_angle % 15 == 0
        assert params.stroke_width * 2 == int(params.stroke_width * 2)


def test_select_index():
    assert select_index(FIXED_SEED, 122) == 0x3F % 122
    assert select_index(FIXED_SEED, 1) == 0
    with pytest.raises(ValueError):
        select_index(FIXED_SEED, 0)


def test_seed_score_range():
    assert seed_score(FIXED_SEED, 85, 15) == 85 + 0x9A1C % 15
    for i in range(50):
        score = seed_score(generate_seed("Acme", "finance", timestamp=i, salt="s"), 85, 15)
        assert 85 <= score <= 99


def test_string_hash_known_values():
    assert string_hash("") == 0
    assert string_hash("a") == 97
    assert string_hash("ab") == 97 * 31 + 98


def test_string_hash_wraps_to_32_bits():
    h = string_hash("a much longer brand name that overflows")
    assert 0 <= h <= 2**31


def test_seeded_random():
    value = seeded_random("Nexus")
    assert 0 <= value < 1
    assert value == seeded_random("Nexus")
    x = math.sin(string_hash("Nexus")) * 10000
    assert value == x - math.floor(x)


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(2.49) == 2


def test_parameter_vector_clamps():
    p = ParameterVector(stroke_width=20, corner_radius=-3, element_count=9, fill_opacity=0)
    assert p.stroke_width == 8
    assert p.corner_radius == 0
    assert p.element_count == 6
    assert p.fill_opacity == 0.3


def test_parameter_vector_rotation_wraps():
    assert ParameterVector(rotation=370).rotation == 10
    assert ParameterVector(rotation=-5).rotation == 355
    assert ParameterVector(rotation=360).rotation == 360


def test_parameter_vector_integer_fields_round_half_up():
    assert ParameterVector(element_count=2.5).element_count == 3
    assert ParameterVector(cutout_position=4.4).cutout_position == 4


def test_parameter_vector_anatomy_normalized():
    p = ParameterVector(anatomy=["bowl", "bowl", "wing", "stem", "crossbar", "terminal"])
    assert p.anatomy == ("bowl", "stem", "crossbar")
    assert ParameterVector(anatomy=[]).anatomy == ("stem",)


def test_with_overrides():
    base = ParameterVector()
    p = base.with_overrides({"stroke_width": 2, "rotation": -10})
    assert p.stroke_width == 2
    assert p.rotation == 350
    assert base.stroke_width == 4.0
    assert base.with_overrides({}) is base


def test_with_overrides_unknown_field():
    with pytest.raises(ValueError, match="Unknown parameter fields"):
        ParameterVector().with_overrides({"glow": 1})
