"""Tests for the batch engine."""

from logoforge.engine.batch import generate_batch, generate_candidate, select_entry
from logoforge.engine.config import EngineConfig
from logoforge.engine.library import candidate_pool, get_library
from logoforge.engine.seed import derive_params, seed_score
from logoforge.svg.paint import DEFAULT_PAINT
from tests.conftest import FIXED_SEED


def test_acme_finance_batch():
    results = generate_batch("Acme", "finance", 5, DEFAULT_PAINT)
    assert len(results) == 5
    assert len({r.id for r in results}) == 5
    assert all(85 <= r.quality_score <= 99 for r in results)


def test_result_fields_consistent():
    for result in generate_batch("Nexus", "technology", 3, DEFAULT_PAINT):
        assert result.params == derive_params(result.id)
        assert result.quality_score == seed_score(result.id, 85, 15)
        assert result.svg.startswith("<svg")
        assert result.algorithm in [e.name for e in get_library()]


def test_count_non_positive():
    assert generate_batch("Acme", "finance", 0, DEFAULT_PAINT) == []
    assert generate_batch("Acme", "finance", -3, DEFAULT_PAINT) == []


def test_count_above_minimum():
    results = generate_batch("Acme", "finance", 20, DEFAULT_PAINT)
    assert len(results) == 20
    assert len({r.id for r in results}) == 20


def test_batches_do_not_repeat():
    a = {r.id for r in generate_batch("Acme", "finance", 5, DEFAULT_PAINT)}
    b = {r.id for r in generate_batch("Acme", "finance", 5, DEFAULT_PAINT)}
    assert not a & b


def test_sort_by_quality():
    results = generate_batch("Acme", "finance", 8, DEFAULT_PAINT, sort_by_quality=True)
    scores = [r.quality_score for r in results]
    assert scores == sorted(scores, reverse=True)


def test_archetype_symbol():
    symbols = {e.name for e in candidate_pool("symbol", "")}
    for result in generate_batch("Acme", "finance", 6, DEFAULT_PAINT, archetype="symbol"):
        assert result.algorithm in symbols


def test_vibe_restricts_pool():
    pool = {e.name for e in candidate_pool("any", "tech")}
    for result in generate_batch("Acme", "finance", 6, DEFAULT_PAINT, vibe="tech"):
        assert result.algorithm in pool


def test_workers():
    results = generate_batch("Acme", "finance", 6, DEFAULT_PAINT, workers=4)
    assert len(results) == 6
    assert len({r.id for r in results}) == 6


def test_custom_config():
    config = EngineConfig(batch_score_floor=50, batch_score_span=5)
    for result in generate_batch("Acme", "finance", 4, DEFAULT_PAINT, config=config):
        assert 50 <= result.quality_score <= 54


def test_select_entry_stable():
    pool = get_library()
    assert select_entry(FIXED_SEED, pool) is select_entry(FIXED_SEED, pool)
    assert select_entry(FIXED_SEED, pool) is pool[0x3F % len(pool)]


def test_generate_candidate_salts_differ():
    pool = get_library()
    a = generate_candidate("Acme", "finance", "salt-a", pool, DEFAULT_PAINT)
    b = generate_candidate("Acme", "finance", "salt-b", pool, DEFAULT_PAINT)
    assert a.id != b.id
    assert a.algorithm == select_entry(a.id, pool).name
    assert a.params == derive_params(a.id)
