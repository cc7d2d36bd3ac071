"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from logoforge.engine.registry import get_registry
from logoforge.main import app
from tests.conftest import BRAND_COLOR, FIXED_SEED


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["library_size"] == 122
    assert data["algorithms_registered"] == get_registry().count


# ---------------------------------------------------------------------------
# Algorithms
# ---------------------------------------------------------------------------


def test_list_algorithms():
    data = client.get("/api/algorithms").json()
    assert data["count"] == 122
    assert data["algorithms"][0]["name"] == "Architectural Grid"


def test_list_algorithms_by_kind():
    symbols = client.get("/api/algorithms", params={"kind": "symbol"}).json()
    wordmarks = client.get("/api/algorithms", params={"kind": "wordmark"}).json()
    assert symbols["count"] == 56
    assert symbols["count"] + wordmarks["count"] == 122


def test_get_algorithm():
    response = client.get("/api/algorithms/Glass%20Orb")
    assert response.status_code == 200
    data = response.json()
    assert data["base_id"] == "neo_gradient"
    assert data["family"] == "premium"
    assert data["overrides"] == {"fill_opacity": 0.9}


def test_get_algorithm_not_found():
    assert client.get("/api/algorithms/Nope").status_code == 404


# ---------------------------------------------------------------------------
# Generate and batch
# ---------------------------------------------------------------------------


def test_generate_with_seed_and_algorithm():
    response = client.post(
        "/api/generate",
        json={"brand_name": "Nexus", "seed": FIXED_SEED, "algorithm": "Stencil Bold", "color": BRAND_COLOR},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == FIXED_SEED
    assert data["algorithm"] == "Stencil Bold"
    assert data["quality_score"] == 85 + 0x9A1C % 15
    assert BRAND_COLOR in data["svg"]
    assert data["lettermark"] is not None
    assert 0 <= data["lettermark"]["overall"] <= 10


def test_generate_is_reproducible_from_seed():
    body = {"brand_name": "Nexus", "seed": FIXED_SEED}
    first = client.post("/api/generate", json=body).json()
    second = client.post("/api/generate", json=body).json()
    assert first == second


def test_generate_symbol_has_no_lettermark_score():
    data = client.post(
        "/api/generate", json={"brand_name": "Nexus", "seed": FIXED_SEED, "algorithm": "Speed Arrows"}
    ).json()
    assert data["lettermark"] is None


def test_generate_fresh_seed():
    data = client.post("/api/generate", json={"brand_name": "Acme", "category": "finance"}).json()
    assert len(data["id"]) == 64
    assert 85 <= data["quality_score"] <= 99


def test_generate_bad_seed():
    response = client.post("/api/generate", json={"brand_name": "Nexus", "seed": "not-hex"})
    assert response.status_code == 422


def test_generate_unknown_algorithm():
    response = client.post("/api/generate", json={"brand_name": "Nexus", "algorithm": "Nope"})
    assert response.status_code == 404


def test_generate_bad_colour():
    response = client.post("/api/generate", json={"brand_name": "Nexus", "color": '"><script>'})
    assert response.status_code == 422


def test_generate_empty_name():
    assert client.post("/api/generate", json={"brand_name": ""}).status_code == 422


def test_batch():
    response = client.post("/api/batch", json={"brand_name": "Acme", "category": "finance", "count": 5})
    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 5
    assert len({r["id"] for r in data["results"]}) == 5
    assert all(85 <= r["quality_score"] <= 99 for r in data["results"])


def test_batch_sorted_symbols():
    data = client.post(
        "/api/batch",
        json={"brand_name": "Acme", "count": 6, "archetype": "symbol", "sort_by_quality": True},
    ).json()
    scores = [r["quality_score"] for r in data["results"]]
    assert scores == sorted(scores, reverse=True)


def test_batch_count_validation():
    assert client.post("/api/batch", json={"brand_name": "Acme", "count": 0}).status_code == 422
    assert client.post("/api/batch", json={"brand_name": "Acme", "count": 51}).status_code == 422


# ---------------------------------------------------------------------------
# Designer
# ---------------------------------------------------------------------------


def test_designer():
    response = client.post(
        "/api/designer", json={"name": "Nexus", "category": "technology", "personality": ["professional"]}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["discovery"]["visual_direction"] == "geometric"
    assert 1 <= len(data["variants"]) <= 4
    assert data["recommendation"]["id"] in [v["id"] for v in data["variants"]]
    assert data["palette"]["primary"] == "#4F46E5"
    assert "Nexus" in data["design_rationale"]


def test_designer_palette_paint():
    data = client.post(
        "/api/designer", json={"name": "Nexus", "category": "technology", "use_palette": True}
    ).json()
    assert all("#4F46E5" in v["svg"] for v in data["variants"])


def test_designer_invalid_personality():
    response = client.post("/api/designer", json={"name": "Nexus", "personality": ["grumpy"]})
    assert response.status_code == 422


# ---------------------------------------------------------------------------
# Icons and catalog
# ---------------------------------------------------------------------------


def test_icon_categories():
    data = client.get("/api/icons/categories").json()
    assert len(data) == 11
    assert "coin" in data["finance"]
    assert data["default"] == []


def test_icons():
    response = client.post("/api/icons", json={"brand_name": "Nexus", "category": "tech", "count": 3})
    assert response.status_code == 200
    data = response.json()
    assert data["category"] == "tech"
    assert len(data["svgs"]) == 3


def test_icons_by_keyword():
    data = client.post("/api/icons", json={"brand_name": "Nexus", "keywords": ["money"]}).json()
    assert data["category"] == "finance"
    assert len(data["svgs"]) == 4


def test_colors():
    assert len(client.get("/api/colors").json()) == 18
    assert client.get("/api/colors/technology").json()["primary"] == "#4F46E5"
    assert client.get("/api/colors/unknown-industry").json()["primary"] == "#3B82F6"


def test_skeletons():
    data = client.get("/api/skeletons").json()
    assert data["total_letters"] == 26


def test_skeleton_letter():
    response = client.get("/api/skeletons/a")
    assert response.status_code == 200
    data = response.json()
    assert data["letter"] == "A"
    assert data["has_diagonals"]
    assert data["svg"].startswith("<svg")


def test_skeleton_not_found():
    assert client.get("/api/skeletons/9").status_code == 404
