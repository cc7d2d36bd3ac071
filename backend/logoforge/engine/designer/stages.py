"""Designer-brain stages.

Each stage is a pure function of the brand input and the output of the stage
before it, so every stage can be exercised on its own:

    discovery -> associations -> concepts -> refined concepts -> scored variants -> selection
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from collections.abc import Iterable, Sequence
from typing import NamedTuple

from logoforge.engine.config import DEFAULT_CONFIG, EngineConfig
from logoforge.engine.designer.tables import (
    ASSOCIATION_TO_ICON,
    AUDIENCE_CUES,
    CATEGORY_PERSONALITY,
    DEFAULT_INDUSTRY,
    DESCRIPTION_CUES,
    DIRECTION_RULES,
    FALLBACK_ALGORITHM,
    INDUSTRY_CONCEPTS,
    LETTERMARK_ALGORITHMS,
    PERSONALITY_TO_VISUAL,
    PREMIUM_ALGORITHMS,
    TONE_RULES,
    VISUAL_METAPHORS,
    WHAT_TO_ICON,
)
from logoforge.engine.icons import CATEGORIES, generate_abstract_icon, resolve_category
from logoforge.engine.library import find_entry, get_library, icon_entries
from logoforge.engine.seed import string_hash
from logoforge.models.designer import (
    BrandInput,
    ConceptAssociation,
    DesignerDiscovery,
    QualityScores,
    RefinedLogo,
    SketchConcept,
)
from logoforge.models.params import ParameterVector, round_half_up
from logoforge.svg.paint import PaintContext

logger = logging.getLogger(__name__)

# Splits "NexusLabs", "nexus-labs", "nexus_labs" and "nexus labs" alike.
_NAME_SPLIT_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|[-_\s]+")

_SCALE_ELEMENT_RE = re.compile(r"<(?:circle|rect|path)\b")
_SHAPE_ELEMENT_RE = re.compile(r"<(?:circle|rect|path|line|polygon)\b")
_THIN_STROKE_RE = re.compile(r'stroke-width="(?:1"|0\.)')
_TINY_RADIUS_RE = re.compile(r'\br="[12]"')

FIRST_PART_RELEVANCE = 90
NAME_PART_RELEVANCE = 70
KEYWORD_RELEVANCE = 80
DISCOVERY_RELEVANCE = 85

# Tags capped by refinement; concepts carrying none of them count as "other"
TYPE_TAGS = ("lettermark", "abstract", "fusion")


def _unique(items: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(items))


def _contains_any(text: str, needles: Sequence[str]) -> bool:
    return any(needle in text for needle in needles)


def _clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, value))


def _category(brand: BrandInput, default: str = "general") -> str:
    return (brand.category or default).strip().lower()


# ---------------------------------------------------------------------------
# 1. Discovery
# ---------------------------------------------------------------------------


def run_discovery(brand: BrandInput) -> DesignerDiscovery:
    """Infer what the brand does, who it serves and how it should feel."""
    category = _category(brand)
    description = (brand.description or "").lower()
    audience = (brand.target_audience or "").lower()

    what_they_do = list(INDUSTRY_CONCEPTS.get(category, ())[:3])
    what_they_do += [concept for cues, concept in DESCRIPTION_CUES if _contains_any(description, cues)]

    who_they_serve = [tag for cues, tags in AUDIENCE_CUES if _contains_any(audience, cues) for tag in tags]
    if not who_they_serve:
        who_they_serve = ["general-audience"]

    personality: list[str] = list(brand.personality)
    if not personality:
        personality = [trait for cats, traits in CATEGORY_PERSONALITY if category in cats for trait in traits]
        personality = personality or ["professional"]

    tone = "friendly"
    for traits, value in TONE_RULES:
        if any(t in personality for t in traits):
            tone = value
    direction = "geometric"
    for traits, value in DIRECTION_RULES:
        if any(t in personality for t in traits):
            direction = value

    return DesignerDiscovery(
        what_they_do=what_they_do,
        who_they_serve=who_they_serve,
        personality=personality,
        emotional_tone=tone,
        visual_direction=direction,
    )


# ---------------------------------------------------------------------------
# 2. Word association
# ---------------------------------------------------------------------------


def split_name(name: str) -> list[str]:
    return [part.lower() for part in _NAME_SPLIT_RE.split(name) if part]


def run_word_association(
    brand: BrandInput,
    discovery: DesignerDiscovery,
    config: EngineConfig = DEFAULT_CONFIG,
) -> list[ConceptAssociation]:
    """Name parts, keywords and discovered concepts mapped to visual metaphors, most relevant first."""
    industry = INDUSTRY_CONCEPTS.get(_category(brand), INDUSTRY_CONCEPTS[DEFAULT_INDUSTRY])
    shapes = [
        shape
        for trait in discovery.personality
        if trait in PERSONALITY_TO_VISUAL
        for shape in PERSONALITY_TO_VISUAL[trait].shapes
    ]

    associations: list[ConceptAssociation] = []
    for i, part in enumerate(split_name(brand.name)):
        related: list[str] = []
        metaphors: list[str] = []
        for concept, concept_metaphors in VISUAL_METAPHORS.items():
            if concept[:3] in part or part[:3] in concept:
                related.append(concept)
                metaphors.extend(concept_metaphors[:2])
        related.extend(industry[:2])
        metaphors.extend(shapes[:2])
        associations.append(
            ConceptAssociation(
                word=part,
                related_concepts=_unique(related),
                visual_metaphors=_unique(metaphors),
                relevance_score=FIRST_PART_RELEVANCE if i == 0 else NAME_PART_RELEVANCE,
            )
        )

    for keyword in brand.keywords:
        kw = keyword.strip().lower()
        if not kw:
            continue
        related = [concept for concept in VISUAL_METAPHORS if concept in kw or kw in concept]
        if related:
            associations.append(
                ConceptAssociation(
                    word=keyword,
                    related_concepts=related,
                    visual_metaphors=[m for concept in related for m in VISUAL_METAPHORS[concept]],
                    relevance_score=KEYWORD_RELEVANCE,
                )
            )

    for concept in discovery.what_they_do:
        if concept in VISUAL_METAPHORS:
            associations.append(
                ConceptAssociation(
                    word=concept,
                    related_concepts=[concept],
                    visual_metaphors=list(VISUAL_METAPHORS[concept]),
                    relevance_score=DISCOVERY_RELEVANCE,
                )
            )

    associations.sort(key=lambda a: a.relevance_score, reverse=True)
    return associations[: config.association_limit]


# ---------------------------------------------------------------------------
# 3. Sketching
# ---------------------------------------------------------------------------


def relevant_icon_categories(
    discovery: DesignerDiscovery,
    associations: Sequence[ConceptAssociation],
    limit: int = DEFAULT_CONFIG.icon_category_limit,
) -> list[str]:
    found: list[str] = []
    for what in discovery.what_they_do:
        for triggers, categories in WHAT_TO_ICON:
            if what in triggers:
                found.extend(categories)
    for assoc in associations:
        for concept, category in ASSOCIATION_TO_ICON:
            if concept in assoc.related_concepts:
                found.append(category)
    return _unique(found)[:limit]


def run_sketching(
    brand: BrandInput,
    discovery: DesignerDiscovery,
    associations: Sequence[ConceptAssociation],
    config: EngineConfig = DEFAULT_CONFIG,
) -> list[SketchConcept]:
    """Sketch concepts from every angle and keep the strongest ``sketch_limit``."""
    seed = string_hash(brand.name)
    personality = list(discovery.personality)
    direction = discovery.visual_direction
    concepts: list[SketchConcept] = []

    def add(name: str, approach: str, algorithm: str, params: dict[str, float], score: int, tags: list[str]) -> None:
        concepts.append(
            SketchConcept(
                id=f"concept-{len(concepts)}",
                name=name,
                approach=approach,
                algorithm=algorithm,
                params=params,
                score=score,
                tags=tags,
            )
        )

    # Personality- and category-matched library entries
    seen: set[str] = set()
    for trait in personality:
        mapping = PERSONALITY_TO_VISUAL.get(trait)
        for name in mapping.algorithms if mapping else ():
            entry = find_entry(name)
            if entry is None or name in seen:
                continue
            seen.add(name)
            add(name, f"{entry.description} for a {trait} personality", name, {}, 68, ["personality", trait])

    category = _category(brand, default="")
    if category in CATEGORIES:
        for entry in get_library():
            if entry.name in seen:
                continue
            if category in entry.name.lower() or category in entry.description.lower():
                seen.add(entry.name)
                add(entry.name, f"{entry.description} from the {category} family", entry.name, {}, 70,
                    ["category", category])

    # Lettermarks
    if brand.prefer_lettermark is not False:
        letter = brand.name[0].upper()
        for i, name in enumerate(LETTERMARK_ALGORITHMS):
            if find_entry(name) is None:
                continue
            add(
                f"{letter} {name.split()[0]}",
                f'Letter "{letter}" rendered in {name.lower()} style',
                name,
                {
                    "stroke_width": 3 + seed % 3,
                    "corner_radius": 20 if direction == "organic" else 5,
                    "rotation": 0,
                },
                70 + (10 if i < 3 else 0),
                ["lettermark", letter.lower(), *personality],
            )

    # Abstract icons
    if brand.prefer_abstract is not False:
        categories = relevant_icon_categories(discovery, associations, config.icon_category_limit)
        if not categories:
            categories = [resolve_category(brand.category, brand.keywords)]
        for i, icon_category in enumerate(categories):
            for j, entry in enumerate(icon_entries(icon_category)[:3]):
                add(
                    f"{icon_category} Icon {j + 1}",
                    f"Abstract {icon_category} symbol: {entry.description}",
                    entry.name,
                    {
                        "stroke_width": 3 + seed % 2,
                        "corner_radius": 0 if direction == "geometric" else 15,
                    },
                    75 + (15 if i < 2 else 0) - 3 * j,
                    ["abstract", icon_category, *personality],
                )

    # Letter + icon fusions
    if not brand.prefer_abstract:
        fusions = [entry for entry in get_library() if "Fusion" in entry.name]
        for i, entry in enumerate(fusions):
            add(
                f"Fusion {i + 1}",
                f"Letter integrated with {entry.description.lower()}",
                entry.name,
                {"stroke_width": 4, "fill_opacity": 0.8},
                65 + (10 if i < 2 else 0),
                ["fusion", "lettermark", "icon"],
            )

    # Fixed premium picks
    for i, name in enumerate(PREMIUM_ALGORITHMS):
        if find_entry(name) is None:
            continue
        add(
            f"Premium {name.split()[0]}",
            f"High-end {name.lower()} construction",
            name,
            {"stroke_width": 2 + i % 2, "corner_radius": 10, "scale_variance": 1.0},
            80 - 2 * i,
            ["premium", "geometric", "professional"],
        )

    # Visual metaphors of the strongest associations
    for assoc in associations[:5]:
        for j, metaphor in enumerate(assoc.visual_metaphors[:2]):
            key = metaphor.split("-")[0]
            entry = next(
                (e for e in get_library() if key in e.name.lower() or key in e.description.lower()),
                None,
            )
            if entry is None:
                continue
            add(
                f"{assoc.word} → {metaphor}",
                f'Visual metaphor: "{assoc.word}" expressed as {metaphor}',
                entry.name,
                {"stroke_width": 3, "rotation": 0},
                assoc.relevance_score - 5 * j,
                ["metaphor", assoc.word.lower(), metaphor],
            )

    if not concepts:
        logger.debug("No concepts sketched for %r, using %s", brand.name, FALLBACK_ALGORITHM)
        add("Fallback Mark", "Minimal abstract mark", FALLBACK_ALGORITHM, {}, 50, ["abstract", "default"])

    # Top up from the library, honouring the lettermark and abstract preferences
    if len(concepts) < config.sketch_minimum:
        used = {c.algorithm for c in concepts}
        skip_wordmarks = brand.prefer_lettermark is False or bool(brand.prefer_abstract)
        for entry in get_library():
            if len(concepts) >= config.sketch_minimum:
                break
            if entry.name in used:
                continue
            if skip_wordmarks and entry.kind == "wordmark":
                continue
            if brand.prefer_abstract is False and entry.category is not None:
                continue
            used.add(entry.name)
            add(entry.name, entry.description, entry.name, {}, 55, ["library", entry.kind])
        logger.debug("Topped up sketches for %r to %d concepts", brand.name, len(concepts))

    concepts.sort(key=lambda c: c.score, reverse=True)
    return concepts[: config.sketch_limit]


# ---------------------------------------------------------------------------
# 4. Refinement
# ---------------------------------------------------------------------------


def refine_score(concept: SketchConcept, brand: BrandInput, discovery: DesignerDiscovery) -> int:
    direction = discovery.visual_direction
    score = concept.score
    score += 5 * sum(1 for trait in discovery.personality if trait in concept.tags)
    for marker, wanted in (("Minimal", "minimal"), ("Bold", "bold"), ("Organic", "organic")):
        if marker in concept.algorithm and direction == wanted:
            score += 10
    if len(brand.name) <= 6 and "lettermark" in concept.tags:
        score += 8
    if brand.prefer_abstract and "abstract" in concept.tags:
        score += 12
    if direction == "minimal" and "Complex" in concept.algorithm:
        score -= 10
    return score


def run_refinement(
    concepts: Sequence[SketchConcept],
    brand: BrandInput,
    discovery: DesignerDiscovery,
    config: EngineConfig = DEFAULT_CONFIG,
) -> list[SketchConcept]:
    """Re-score, then pick the top ``refinement_size`` with at most ``refinement_type_cap`` per type."""
    rescored = [c.model_copy(update={"score": refine_score(c, brand, discovery)}) for c in concepts]
    rescored.sort(key=lambda c: c.score, reverse=True)

    selected: list[SketchConcept] = []
    taken: Counter[str] = Counter()
    for concept in rescored:
        # A fusion concept also carries "lettermark", so it counts against both caps
        kinds = [tag for tag in TYPE_TAGS if tag in concept.tags] or ["other"]
        if any(taken[kind] >= config.refinement_type_cap for kind in kinds):
            continue
        selected.append(concept)
        taken.update(kinds)
        if len(selected) >= config.refinement_size:
            break
    return selected


# ---------------------------------------------------------------------------
# 5. Quality check
# ---------------------------------------------------------------------------


def score_quality(svg: str, concept: SketchConcept, discovery: DesignerDiscovery) -> QualityScores:
    """Structural heuristics over the rendered markup."""
    scalability = 80
    if _THIN_STROKE_RE.search(svg):
        scalability -= 15
    if len(_SCALE_ELEMENT_RE.findall(svg)) > 10:
        scalability -= 10
    if _TINY_RADIUS_RE.search(svg):
        scalability -= 10
    scalability = _clamp(scalability, 40, 100)

    elements = len(_SHAPE_ELEMENT_RE.findall(svg))
    simplicity = 85
    if elements > 8:
        simplicity -= (elements - 8) * 3
    if elements < 3:
        simplicity += 5
    simplicity = _clamp(simplicity, 40, 100)

    matching = sum(1 for t in concept.tags if t in discovery.personality or t in discovery.what_they_do)
    relevance = _clamp(75 + 8 * matching, 50, 100)

    uniqueness = 70
    if "Interlock" in concept.algorithm or "Fusion" in concept.algorithm:
        uniqueness += 10
    if "Architectural" in concept.algorithm or "Neo" in concept.algorithm:
        uniqueness += 12
    if "Minimal" in concept.algorithm or "Dots" in concept.algorithm:
        uniqueness -= 5
    uniqueness = _clamp(uniqueness, 50, 100)

    versatility = 75
    if "gradient" not in svg and "url(#" not in svg:
        versatility += 10
    if elements <= 5:
        versatility += 8
    versatility = _clamp(versatility, 50, 100)

    overall = round_half_up(
        scalability * 0.20 + simplicity * 0.25 + relevance * 0.25 + uniqueness * 0.15 + versatility * 0.15
    )
    return QualityScores(
        scalability=scalability,
        simplicity=simplicity,
        relevance=relevance,
        uniqueness=uniqueness,
        versatility=versatility,
        overall=overall,
    )


def render_concept(concept: SketchConcept, brand: BrandInput, params: ParameterVector, paint: PaintContext) -> str:
    entry = find_entry(concept.algorithm)
    if entry is None:
        logger.debug("Concept %s names unknown entry %r, drawing an abstract icon", concept.id, concept.algorithm)
        return generate_abstract_icon(params, brand.name, paint, brand.category, brand.keywords)
    return entry.render(params, brand.name, paint)


def concept_rationale(concept: SketchConcept, discovery: DesignerDiscovery) -> str:
    parts = [concept.approach]
    if discovery.personality:
        parts.append(f"This aligns with the brand's {' and '.join(discovery.personality[:2])} personality.")
    if "lettermark" in concept.tags:
        parts.append("The lettermark creates immediate name recognition.")
    elif "abstract" in concept.tags:
        parts.append("The abstract symbol is versatile and memorable across applications.")
    return " ".join(parts)


def run_quality_check(
    refined: Sequence[SketchConcept],
    brand: BrandInput,
    discovery: DesignerDiscovery,
    base_params: ParameterVector,
    paint: PaintContext,
    config: EngineConfig = DEFAULT_CONFIG,
) -> list[RefinedLogo]:
    """Render each refined concept with a slight stroke drift and score it."""
    variants: list[RefinedLogo] = []
    for index, concept in enumerate(refined):
        stroke = concept.params.get("stroke_width", base_params.stroke_width) + index * 0.3
        params = base_params.with_overrides({**concept.params, "stroke_width": stroke})
        svg = render_concept(concept, brand, params, paint)
        scores = score_quality(svg, concept, discovery)
        variants.append(
            RefinedLogo(
                id=concept.id,
                svg=svg,
                concept_name=concept.name,
                algorithm=concept.algorithm,
                rationale=concept_rationale(concept, discovery),
                quality_scores=scores,
                approved=scores.overall >= config.pass_threshold,
            )
        )
    return variants


# ---------------------------------------------------------------------------
# 6. Selection
# ---------------------------------------------------------------------------


class Selection(NamedTuple):
    variants: list[RefinedLogo]
    recommendation: RefinedLogo
    design_rationale: str


def design_rationale(brand: BrandInput, discovery: DesignerDiscovery, recommendation: RefinedLogo) -> str:
    q = recommendation.quality_scores
    return (
        f"Based on discovery, {brand.name} is {discovery.emotional_tone} brand targeting "
        f"{', '.join(discovery.who_they_serve)}.\n"
        f"The visual direction is {discovery.visual_direction}, reflected in {recommendation.concept_name}.\n"
        f"{recommendation.rationale}\n"
        f"Quality score: {q.overall}/100 (Scalability: {q.scalability}, Simplicity: {q.simplicity}, "
        f"Relevance: {q.relevance})."
    )


def run_selection(
    variants: Sequence[RefinedLogo],
    brand: BrandInput,
    discovery: DesignerDiscovery,
    config: EngineConfig = DEFAULT_CONFIG,
) -> Selection:
    """Approved variants first, backfilled with the best rejected ones; the top scorer is recommended."""
    if not variants:
        raise ValueError("Selection needs at least one variant")
    approved = [v for v in variants if v.approved]
    rejected = sorted((v for v in variants if not v.approved), key=lambda v: v.quality_scores.overall, reverse=True)
    final = (approved + rejected)[: config.final_variant_count]
    # max() keeps the first of equal scores
    recommendation = max(final, key=lambda v: v.quality_scores.overall)
    return Selection(final, recommendation, design_rationale(brand, discovery, recommendation))
