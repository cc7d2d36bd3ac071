"""Generation result records shared by the batch engine and the HTTP layer."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from logoforge.models.params import ParameterVector


class GenerationResult(BaseModel):
    """One generated logo candidate."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Seed the candidate was derived from")
    svg: str
    algorithm: str = Field(..., description="Library entry name")
    description: str = ""
    params: ParameterVector
    quality_score: int = Field(..., ge=0, le=100)


class LettermarkMetrics(BaseModel):
    has_geometric_construction: bool = False
    has_negative_space: bool = False
    has_asymmetry: bool = False
    has_abstract_integration: bool = False
    has_depth_or_dimension: bool = False
    has_unique_letterform: bool = False

    @property
    def signals(self) -> int:
        return sum(self.model_dump().values())


class LettermarkScore(BaseModel):
    """Structural quality rating of a letter-based mark (1-10 scales)."""

    geometric_complexity: int = Field(..., ge=1, le=10)
    uniqueness: int = Field(..., ge=1, le=10)
    negative_space_usage: int = Field(..., ge=1, le=10)
    is_generic: bool
    overall: float = Field(..., ge=0, le=10)
    passes: bool
    metrics: LettermarkMetrics
