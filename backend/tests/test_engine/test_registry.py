"""Tests for the algorithm registry."""

import pytest

from logoforge.engine.registry import AlgorithmRegistry, AlgorithmSpec, Family, get_registry, load_algorithms


def _noop(params, brand_name, paint) -> str:
    return "<svg />"


def test_register_and_get():
    reg = AlgorithmRegistry()
    spec = AlgorithmSpec(id="stencil", family=Family.TECHNIQUE, fn=_noop)
    reg.register(spec)
    assert reg.get("stencil") is spec
    assert "stencil" in reg
    assert reg.count == 1


def test_duplicate_id_rejected():
    reg = AlgorithmRegistry()
    reg.register(AlgorithmSpec(id="a", family=Family.ICON, fn=_noop))
    with pytest.raises(ValueError, match="Duplicate"):
        reg.register(AlgorithmSpec(id="a", family=Family.ICON, fn=_noop))


def test_get_family_keeps_order():
    reg = AlgorithmRegistry()
    for i in range(3):
        reg.register(AlgorithmSpec(id=f"icon.{i}", family=Family.ICON, fn=_noop))
    reg.register(AlgorithmSpec(id="modular", family=Family.TECHNIQUE, fn=_noop))
    assert [s.id for s in reg.get_family(Family.ICON)] == ["icon.0", "icon.1", "icon.2"]
    assert len(reg.all()) == 4


def test_unknown_id():
    with pytest.raises(KeyError):
        AlgorithmRegistry().get("missing")


def test_load_algorithms_idempotent():
    first = load_algorithms().count
    assert load_algorithms().count == first
    assert load_algorithms() is get_registry()


def test_families_populated():
    reg = get_registry()
    assert len(reg.get_family(Family.TECHNIQUE)) == 8
    assert len(reg.get_family(Family.ICON)) == 11
    for family in Family:
        assert reg.get_family(family), family
