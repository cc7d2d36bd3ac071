"""Tests for the designer pipeline stages and runner."""

from collections import Counter

import pytest

from logoforge.engine.designer import (
    DESIGNER_STAGES,
    INDUSTRY_COLORS,
    DesignerPipeline,
    DesignerState,
    available_color_categories,
    designer_generate,
    recommend_colors,
    run_designer_brain,
    run_discovery,
    run_quality_check,
    run_refinement,
    run_selection,
    run_sketching,
    run_word_association,
    score_quality,
)
from logoforge.engine.designer.stages import TYPE_TAGS, split_name
from logoforge.engine.library import find_entry
from logoforge.models.designer import BrandInput, QualityScores, RefinedLogo, SketchConcept
from logoforge.models.params import ParameterVector
from logoforge.svg.paint import DEFAULT_PAINT
from tests.conftest import BRAND_COLOR, STRUCTURED_SVG


def _logo(id_: str, overall: int, approved: bool) -> RefinedLogo:
    scores = QualityScores(
        scalability=overall, simplicity=overall, relevance=overall,
        uniqueness=overall, versatility=overall, overall=overall,
    )
    return RefinedLogo(
        id=id_, svg="<svg />", concept_name=id_, algorithm="Abstract Dots",
        rationale="r", quality_scores=scores, approved=approved,
    )


# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------


def test_nexus_discovery(nexus):
    discovery = run_discovery(nexus)
    assert discovery.visual_direction == "geometric"
    assert discovery.emotional_tone == "serious"
    assert discovery.what_they_do == ["innovation", "future", "connection"]
    assert discovery.who_they_serve == ["general-audience"]
    assert discovery.personality == ["professional"]


def test_discovery_infers_personality_from_category():
    discovery = run_discovery(BrandInput(name="Nexus", category=" Technology "))
    assert discovery.personality == ["professional", "tech"]
    # tech/geometric is the last tone rule, so it wins over professional
    assert discovery.emotional_tone == "innovative"


def test_discovery_unknown_category():
    discovery = run_discovery(BrandInput(name="Loaf", category="bakery"))
    assert discovery.what_they_do == []
    assert discovery.personality == ["professional"]


def test_discovery_cues():
    brand = BrandInput(
        name="Acme",
        category="finance",
        description="We build a platform to sell products",
        target_audience="B2B and premium buyers",
    )
    discovery = run_discovery(brand)
    assert discovery.what_they_do == ["trust", "growth", "stability", "commerce", "creation", "platform"]
    assert discovery.who_they_serve == ["businesses", "professionals", "affluent", "discerning"]


def test_discovery_later_rules_win():
    discovery = run_discovery(BrandInput(name="Pop", personality=["playful", "bold"]))
    assert discovery.visual_direction == "bold"
    assert discovery.emotional_tone == "approachable"


# ---------------------------------------------------------------------------
# Word association
# ---------------------------------------------------------------------------


def test_split_name():
    assert split_name("NexusLabs") == ["nexus", "labs"]
    assert split_name("hello-world_x y") == ["hello", "world", "x", "y"]
    assert split_name("Acme2Go") == ["acme2", "go"]


def test_word_association(nexus):
    discovery = run_discovery(nexus)
    associations = run_word_association(nexus, discovery)
    scores = [a.relevance_score for a in associations]
    assert scores == sorted(scores, reverse=True)
    assert associations[0].word == "nexus"
    assert associations[0].relevance_score == 90
    assert "innovation" in associations[0].related_concepts
    assert {"innovation", "connection"} <= {a.word for a in associations}


def test_word_association_keywords():
    brand = BrandInput(name="Acme", category="finance", keywords=["Growth", "  ", "zzz"])
    associations = run_word_association(brand, run_discovery(brand))
    keyword_hits = [a for a in associations if a.relevance_score == 80]
    assert [a.word for a in keyword_hits] == ["Growth"]
    assert keyword_hits[0].related_concepts == ["growth"]


def test_word_association_limit():
    brand = BrandInput(name="a-b-c-d-e-f-g-h-i-j-k-l", category="technology")
    assert len(run_word_association(brand, run_discovery(brand))) == 10


# ---------------------------------------------------------------------------
# Sketching and refinement
# ---------------------------------------------------------------------------


def _sketch(brand: BrandInput) -> list[SketchConcept]:
    discovery = run_discovery(brand)
    return run_sketching(brand, discovery, run_word_association(brand, discovery))


def test_nexus_sketch_has_lettermark(nexus):
    concepts = _sketch(nexus)
    letters = [c for c in concepts if c.tags[:2] == ["lettermark", "n"]]
    assert letters
    assert all(c.name.startswith("N ") for c in letters)


def test_sketch_bounds(nexus):
    concepts = _sketch(nexus)
    assert 0 < len(concepts) <= 25
    assert len({c.id for c in concepts}) == len(concepts)
    scores = [c.score for c in concepts]
    assert scores == sorted(scores, reverse=True)
    for concept in concepts:
        assert find_entry(concept.algorithm) is not None, concept.algorithm


def test_sketch_preferences():
    no_letters = _sketch(BrandInput(name="Nexus", category="technology", prefer_lettermark=False))
    assert not [c for c in no_letters if c.tags[0] == "lettermark"]
    abstract = _sketch(BrandInput(name="Nexus", category="technology", prefer_abstract=True))
    assert not [c for c in abstract if "fusion" in c.tags]


@pytest.mark.parametrize(
    "prefer_abstract, prefer_lettermark",
    [(True, False), (True, None), (None, False), (None, None)],
)
def test_sketch_tops_up_to_minimum(prefer_abstract, prefer_lettermark):
    brand = BrandInput(
        name="Nexus", category="technology", prefer_abstract=prefer_abstract, prefer_lettermark=prefer_lettermark,
    )
    concepts = _sketch(brand)
    assert 20 <= len(concepts) <= 25
    assert len({c.algorithm for c in concepts if c.tags[0] == "library"}) == len(
        [c for c in concepts if c.tags[0] == "library"]
    )
    if prefer_abstract or prefer_lettermark is False:
        topped = [find_entry(c.algorithm) for c in concepts if c.tags[0] == "library"]
        assert all(entry.kind == "symbol" for entry in topped)


def test_sketch_icon_concepts_from_discovery(nexus):
    icons = [c for c in _sketch(nexus) if c.tags[0] == "abstract"]
    assert {c.tags[1] for c in icons} == {"tech", "connect"}
    assert max(c.score for c in icons) == 90


def test_refinement_diversity(nexus):
    discovery = run_discovery(nexus)
    concepts = run_sketching(nexus, discovery, run_word_association(nexus, discovery))
    refined = run_refinement(concepts, nexus, discovery)
    assert 0 < len(refined) <= 5
    scores = [c.score for c in refined]
    assert scores == sorted(scores, reverse=True)


@pytest.mark.parametrize("name", ["Fusion", "Abstract", "Lettermark", "FusionLabs", "Nexus"])
@pytest.mark.parametrize("prefer_abstract", [None, True, False])
@pytest.mark.parametrize("prefer_lettermark", [None, True, False])
def test_refinement_caps_type_tags(name, prefer_abstract, prefer_lettermark):
    brand = BrandInput(
        name=name, category="technology", prefer_abstract=prefer_abstract, prefer_lettermark=prefer_lettermark,
    )
    discovery = run_discovery(brand)
    refined = run_refinement(_sketch(brand), brand, discovery)
    tag_counts = Counter(tag for c in refined for tag in set(c.tags) if tag in TYPE_TAGS)
    assert all(count <= 2 for count in tag_counts.values()), tag_counts
    others = [c for c in refined if not set(c.tags) & set(TYPE_TAGS)]
    assert len(others) <= 2


def test_refinement_counts_fusion_against_both_caps():
    # Long name: no short-name lettermark boost reorders the concepts
    brand = BrandInput(name="Fusion Industries", category="technology")
    discovery = run_discovery(brand)

    def concept(i: int, score: int, tags: list[str]) -> SketchConcept:
        return SketchConcept(id=f"c{i}", name=f"c{i}", approach="a", algorithm="Letter Fusion",
                             score=score, tags=tags)

    concepts = [
        concept(0, 99, ["metaphor", "fusion"]),
        concept(1, 98, ["metaphor", "fusion"]),
        concept(2, 97, ["fusion", "lettermark", "icon"]),
        concept(3, 96, ["lettermark", "x"]),
        concept(4, 95, ["abstract", "data"]),
    ]
    refined = run_refinement(concepts, brand, discovery)
    assert [c.id for c in refined] == ["c0", "c1", "c3", "c4"]


def test_refinement_short_name_boosts_lettermarks(nexus):
    discovery = run_discovery(nexus)
    concept = SketchConcept(
        id="concept-0", name="N Monoline", approach="a", algorithm="Monoline Clean",
        score=70, tags=["lettermark", "n", "professional"],
    )
    (refined,) = run_refinement([concept], nexus, discovery)
    assert refined.score == 70 + 5 + 8


# ---------------------------------------------------------------------------
# Quality check and selection
# ---------------------------------------------------------------------------


def test_score_quality_bounds(nexus):
    discovery = run_discovery(nexus)
    concept = SketchConcept(id="c", name="n", approach="a", algorithm="Architectural Grid", score=80,
                            tags=["professional"])
    scores = score_quality(STRUCTURED_SVG, concept, discovery)
    assert 40 <= scores.scalability <= 100
    assert 40 <= scores.simplicity <= 100
    assert scores.relevance == 83
    assert scores.uniqueness == 82
    expected = (
        scores.scalability * 0.20 + scores.simplicity * 0.25 + scores.relevance * 0.25
        + scores.uniqueness * 0.15 + scores.versatility * 0.15
    )
    assert abs(scores.overall - expected) <= 0.5


def test_score_quality_ignores_gradient_names_as_lines(nexus):
    discovery = run_discovery(nexus)
    concept = SketchConcept(id="c", name="n", approach="a", algorithm="X", score=1)
    plain = score_quality('<svg><circle r="5" /></svg>', concept, discovery)
    gradient = score_quality(
        '<svg><linearGradient id="g" /><circle r="5" fill="url(#g)" /></svg>', concept, discovery
    )
    assert plain.simplicity == gradient.simplicity
    assert gradient.versatility < plain.versatility


def test_quality_check_renders(nexus, paint):
    discovery = run_discovery(nexus)
    concepts = run_sketching(nexus, discovery, run_word_association(nexus, discovery))
    refined = run_refinement(concepts, nexus, discovery)
    variants = run_quality_check(refined, nexus, discovery, ParameterVector(), paint)
    assert [v.id for v in variants] == [c.id for c in refined]
    for v in variants:
        assert v.svg.startswith("<svg")
        assert BRAND_COLOR in v.svg
        assert v.approved == (v.quality_scores.overall >= 65)


def test_quality_check_unknown_algorithm_draws_icon(nexus):
    discovery = run_discovery(nexus)
    concept = SketchConcept(id="c", name="n", approach="a", algorithm="Not In Library", score=1)
    (variant,) = run_quality_check([concept], nexus, discovery, ParameterVector(), DEFAULT_PAINT)
    assert variant.svg.startswith("<svg")


def test_selection_backfills_best_rejected(nexus):
    discovery = run_discovery(nexus)
    variants = [
        _logo("a", 60, False),
        _logo("b", 70, True),
        _logo("c", 64, False),
        _logo("d", 50, False),
        _logo("e", 40, False),
    ]
    selection = run_selection(variants, nexus, discovery)
    assert [v.id for v in selection.variants] == ["b", "c", "a", "d"]
    assert selection.recommendation.id == "b"
    assert "Nexus" in selection.design_rationale
    assert "70/100" in selection.design_rationale


def test_selection_tie_keeps_first(nexus):
    discovery = run_discovery(nexus)
    selection = run_selection([_logo("a", 80, True), _logo("b", 80, True)], nexus, discovery)
    assert selection.recommendation.id == "a"


def test_selection_empty(nexus):
    with pytest.raises(ValueError):
        run_selection([], nexus, run_discovery(nexus))


# ---------------------------------------------------------------------------
# Colours
# ---------------------------------------------------------------------------


def test_palettes():
    assert len(INDUSTRY_COLORS) == 18
    assert available_color_categories()[-1] == "general"
    for palette in INDUSTRY_COLORS.values():
        assert palette.primary.startswith("#")
        assert len(palette.alternatives) >= 1


def test_recommend_colors_resolution():
    assert recommend_colors("technology") == INDUSTRY_COLORS["saas"]
    assert recommend_colors(" FinTech ") == INDUSTRY_COLORS["fintech"]
    assert recommend_colors("bakery-of-doom") == INDUSTRY_COLORS["general"]
    assert recommend_colors(None) == INDUSTRY_COLORS["general"]


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


def test_pipeline_runs_all_stages(nexus):
    state = DesignerPipeline().run(DesignerState(brand=nexus))
    assert [name for name, _ in state.timings] == [name for name, _ in DESIGNER_STAGES]
    assert all(ms >= 0 for _, ms in state.timings)
    output = state.output
    assert output.concepts_explored == len(state.concepts)
    assert 1 <= len(output.variants) <= 4
    assert output.recommendation in output.variants
    assert output.palette == INDUSTRY_COLORS["saas"]


def test_pipeline_deterministic(nexus):
    assert run_designer_brain(nexus) == run_designer_brain(nexus)


def test_custom_stage_list(nexus):
    state = DesignerPipeline(DESIGNER_STAGES[:2]).run(DesignerState(brand=nexus))
    assert state.discovery is not None
    assert state.associations
    assert state.concepts == ()
    assert state.output is None


def test_designer_generate():
    output = designer_generate("Nexus")
    assert 1 <= len(output.variants) <= 4
    assert output.discovery.visual_direction == "geometric"
    best = max(v.quality_scores.overall for v in output.variants)
    assert output.recommendation.quality_scores.overall == best


def test_designer_generate_non_letter_brand():
    output = designer_generate("#Brand", category="finance", keywords=["money"])
    assert output.variants
