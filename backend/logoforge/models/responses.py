"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from logoforge.models.params import ParameterVector
from logoforge.models.results import GenerationResult, LettermarkScore


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    algorithms_registered: int = 0
    library_size: int = 0


class AlgorithmInfo(BaseModel):
    name: str
    description: str = ""
    base_id: str
    family: str
    overrides: dict[str, Any] = Field(default_factory=dict)
    kind: str = "wordmark"
    category: str | None = None


class AlgorithmsResponse(BaseModel):
    algorithms: list[AlgorithmInfo] = Field(default_factory=list)
    count: int = 0


class GenerateResponse(BaseModel):
    id: str
    svg: str
    algorithm: str
    description: str = ""
    params: ParameterVector
    quality_score: int
    lettermark: LettermarkScore | None = None


class BatchResponse(BaseModel):
    results: list[GenerationResult] = Field(default_factory=list)
    count: int = 0


class IconResponse(BaseModel):
    category: str
    svgs: list[str] = Field(default_factory=list)


class AnatomyPartInfo(BaseModel):
    type: str
    anchors: list[int] = Field(default_factory=list)
    path: str = ""
    is_primary: bool = False


class SkeletonResponse(BaseModel):
    letter: str
    description: str = ""
    anchors: list[tuple[float, float]] = Field(default_factory=list)
    anatomy: list[AnatomyPartInfo] = Field(default_factory=list)
    svg_path: str
    stroke_width_ratio: float
    has_curves: bool = False
    has_diagonals: bool = False
    svg: str = ""
