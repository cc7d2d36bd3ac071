"""Designer-brain records: brand input, stage outputs and the final presentation."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Personality = Literal["professional", "playful", "minimal", "bold", "elegant", "tech", "organic", "geometric"]
EmotionalTone = Literal["serious", "friendly", "premium", "approachable", "innovative", "traditional"]
VisualDirection = Literal["geometric", "organic", "minimal", "complex", "bold", "refined"]


class BrandInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Brand name")
    category: str | None = Field(default=None, description="Industry category, e.g. 'technology'")
    description: str | None = None
    target_audience: str | None = None
    keywords: list[str] = Field(default_factory=list)
    personality: list[Personality] = Field(default_factory=list)
    prefer_lettermark: bool | None = None
    prefer_abstract: bool | None = None


class DesignerDiscovery(BaseModel):
    model_config = ConfigDict(frozen=True)

    what_they_do: list[str] = Field(default_factory=list)
    who_they_serve: list[str] = Field(default_factory=list)
    # Inferred personalities may include traits outside the input enum (e.g. "approachable").
    personality: list[str] = Field(default_factory=list)
    emotional_tone: EmotionalTone = "friendly"
    visual_direction: VisualDirection = "geometric"


class ConceptAssociation(BaseModel):
    model_config = ConfigDict(frozen=True)

    word: str
    related_concepts: list[str] = Field(default_factory=list)
    visual_metaphors: list[str] = Field(default_factory=list)
    relevance_score: int = Field(..., ge=0, le=100)


class SketchConcept(BaseModel):
    """One sketched idea: a library entry plus parameter overrides and a heuristic score."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    approach: str
    algorithm: str = Field(..., description="Library entry name")
    params: dict[str, float] = Field(default_factory=dict, description="ParameterVector overrides")
    score: int
    tags: list[str] = Field(default_factory=list)


class QualityScores(BaseModel):
    model_config = ConfigDict(frozen=True)

    scalability: int = Field(..., ge=0, le=100)
    simplicity: int = Field(..., ge=0, le=100)
    relevance: int = Field(..., ge=0, le=100)
    uniqueness: int = Field(..., ge=0, le=100)
    versatility: int = Field(..., ge=0, le=100)
    overall: int = Field(..., ge=0, le=100)


class RefinedLogo(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    svg: str
    concept_name: str
    algorithm: str
    rationale: str
    quality_scores: QualityScores
    approved: bool


class ColorAlternative(BaseModel):
    model_config = ConfigDict(frozen=True)

    primary: str
    secondary: str
    name: str


class ColorPalette(BaseModel):
    """Industry colour recommendation."""

    model_config = ConfigDict(frozen=True)

    primary: str
    secondary: str
    background: str
    text: str
    alternatives: list[ColorAlternative] = Field(default_factory=list)
    reasoning: str = ""


class DesignerOutput(BaseModel):
    discovery: DesignerDiscovery
    associations: list[ConceptAssociation] = Field(default_factory=list)
    concepts_explored: int = 0
    variants: list[RefinedLogo] = Field(default_factory=list)
    recommendation: RefinedLogo
    design_rationale: str
    palette: ColorPalette
