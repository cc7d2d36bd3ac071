"""Stage runner for the designer pipeline.

The runner threads an immutable :class:`DesignerState` through the stages in
order. Each stage returns a new state and the runner records how long it took.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace

from logoforge.engine.config import DEFAULT_CONFIG, EngineConfig
from logoforge.engine.designer.colors import recommend_colors
from logoforge.engine.designer.stages import (
    run_discovery,
    run_quality_check,
    run_refinement,
    run_selection,
    run_sketching,
    run_word_association,
)
from logoforge.models.designer import (
    BrandInput,
    ConceptAssociation,
    DesignerDiscovery,
    DesignerOutput,
    RefinedLogo,
    SketchConcept,
)
from logoforge.models.params import ParameterVector
from logoforge.svg.paint import DEFAULT_PAINT, PaintContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DesignerState:
    brand: BrandInput
    base_params: ParameterVector = field(default_factory=ParameterVector)
    paint: PaintContext = DEFAULT_PAINT
    config: EngineConfig = DEFAULT_CONFIG

    discovery: DesignerDiscovery | None = None
    associations: tuple[ConceptAssociation, ...] = ()
    concepts: tuple[SketchConcept, ...] = ()
    refined: tuple[SketchConcept, ...] = ()
    variants: tuple[RefinedLogo, ...] = ()
    output: DesignerOutput | None = None
    timings: tuple[tuple[str, float], ...] = ()


Stage = Callable[[DesignerState], DesignerState]


def _discover(state: DesignerState) -> DesignerState:
    return replace(state, discovery=run_discovery(state.brand))


def _associate(state: DesignerState) -> DesignerState:
    associations = run_word_association(state.brand, state.discovery, state.config)
    return replace(state, associations=tuple(associations))


def _sketch(state: DesignerState) -> DesignerState:
    concepts = run_sketching(state.brand, state.discovery, state.associations, state.config)
    return replace(state, concepts=tuple(concepts))


def _refine(state: DesignerState) -> DesignerState:
    refined = run_refinement(state.concepts, state.brand, state.discovery, state.config)
    return replace(state, refined=tuple(refined))


def _check_quality(state: DesignerState) -> DesignerState:
    variants = run_quality_check(
        state.refined, state.brand, state.discovery, state.base_params, state.paint, state.config
    )
    return replace(state, variants=tuple(variants))


def _select(state: DesignerState) -> DesignerState:
    selection = run_selection(state.variants, state.brand, state.discovery, state.config)
    output = DesignerOutput(
        discovery=state.discovery,
        associations=list(state.associations),
        concepts_explored=len(state.concepts),
        variants=selection.variants,
        recommendation=selection.recommendation,
        design_rationale=selection.design_rationale,
        palette=recommend_colors(state.brand.category),
    )
    return replace(state, output=output)


DESIGNER_STAGES: tuple[tuple[str, Stage], ...] = (
    ("discovery", _discover),
    ("word_association", _associate),
    ("sketching", _sketch),
    ("refinement", _refine),
    ("quality_check", _check_quality),
    ("selection", _select),
)


class DesignerPipeline:
    """Runs designer stages in order."""

    def __init__(self, stages: Sequence[tuple[str, Stage]] = DESIGNER_STAGES) -> None:
        self.stages = tuple(stages)

    def run(self, state: DesignerState) -> DesignerState:
        start = time.perf_counter()
        for name, stage in self.stages:
            t0 = time.perf_counter()
            state = stage(state)
            elapsed = (time.perf_counter() - t0) * 1000
            state = replace(state, timings=state.timings + ((name, elapsed),))
            logger.debug("  %s completed in %.1fms", name, elapsed)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Designer pipeline for %r: %d concepts, %d refined, %d approved in %.0fms",
            state.brand.name,
            len(state.concepts),
            len(state.refined),
            sum(1 for v in state.variants if v.approved),
            total,
        )
        return state


def run_designer_brain(
    brand: BrandInput,
    base_params: ParameterVector | None = None,
    paint: PaintContext | None = None,
    config: EngineConfig | None = None,
) -> DesignerOutput:
    state = DesignerState(
        brand=brand,
        base_params=base_params or ParameterVector(),
        paint=paint or DEFAULT_PAINT,
        config=config or DEFAULT_CONFIG,
    )
    return DesignerPipeline().run(state).output


def designer_generate(
    brand_name: str,
    category: str = "technology",
    keywords: Sequence[str] = (),
    personality: Sequence[str] = ("professional",),
    paint: PaintContext | None = None,
) -> DesignerOutput:
    """Quick entry point with the default parameter vector."""
    brand = BrandInput(name=brand_name, category=category, keywords=list(keywords), personality=list(personality))
    return run_designer_brain(brand, ParameterVector(), paint)
