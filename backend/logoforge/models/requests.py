"""API request models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from logoforge.models.designer import BrandInput
from logoforge.models.params import ParameterVector


class PaintRequest(BaseModel):
    color: str | None = Field(default=None, description="Ink colour (defaults to settings.default_color)")
    knockout: str | None = Field(default=None, description="Knockout colour for punched-out shapes")


class GenerateRequest(PaintRequest):
    brand_name: str = Field(..., min_length=1, description="Brand name")
    category: str = Field(default="general", description="Industry category mixed into the seed")
    seed: str | None = Field(default=None, description="Hex seed; a fresh one is generated when omitted")
    algorithm: str | None = Field(default=None, description="Library entry name; seed-selected when omitted")


class BatchRequest(PaintRequest):
    brand_name: str = Field(..., min_length=1)
    category: str = Field(default="general")
    count: int = Field(default=5, ge=1, le=50, description="Number of results to return")
    archetype: Literal["any", "symbol", "wordmark"] = "any"
    vibe: str = Field(default="", description="minimalist, tech, nature or bold")
    sort_by_quality: bool = Field(default=False, description="Sort candidates by score before truncating")


class DesignerRequest(BrandInput):
    color: str | None = None
    knockout: str | None = None
    use_palette: bool = Field(default=False, description="Paint with the recommended industry palette")


class IconRequest(PaintRequest):
    brand_name: str = Field(..., min_length=1)
    category: str | None = Field(default=None, description="Icon category; resolved from keywords when omitted")
    keywords: list[str] = Field(default_factory=list)
    count: int = Field(default=4, ge=1, le=12)
    params: ParameterVector = Field(default_factory=ParameterVector)
