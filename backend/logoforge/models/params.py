"""Generation parameter vector.

Every field is clamped to its declared range on construction, integer fields are
rounded half-up, and rotation wraps modulo 360. Instances are immutable; preset
overrides produce a new vector through :meth:`ParameterVector.with_overrides`.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

Symmetry = Literal["bilateral", "radial", "none"]
AnatomyChoice = Literal["stem", "bowl", "crossbar", "terminal"]

ANATOMY_CHOICES: tuple[str, ...] = ("stem", "bowl", "crossbar", "terminal")

FIELD_RANGES: dict[str, tuple[float, float]] = {
    "stroke_width": (1.0, 8.0),
    "corner_radius": (0.0, 50.0),
    "rotation": (0.0, 360.0),
    "curve_tension": (0.1, 1.0),
    "element_count": (2, 6),
    "spacing_ratio": (0.5, 2.0),
    "scale_variance": (0.8, 1.2),
    "fill_opacity": (0.3, 1.0),
    "gradient_angle": (0.0, 360.0),
    "cutout_position": (0, 11),
    "interlock_depth": (10.0, 90.0),
    "stroke_taper": (0.0, 100.0),
}

INTEGER_FIELDS = frozenset({"element_count", "cutout_position"})


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def _normalize_anatomy(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        value = [value]
    seen: list[str] = []
    for part in value or ():
        if part in ANATOMY_CHOICES and part not in seen:
            seen.append(part)
    return tuple(seen[:3]) or ("stem",)


class ParameterVector(BaseModel):
    """Fixed-shape record of independent generation controls."""

    model_config = ConfigDict(frozen=True)

    stroke_width: float = Field(default=4.0, description="Base stroke width (1-8)")
    corner_radius: float = Field(default=10.0, description="Corner rounding (0-50)")
    rotation: float = Field(default=0.0, description="Rotation in degrees (0-360)")
    curve_tension: float = Field(default=0.5, description="Curve tension (0.1-1.0)")
    element_count: int = Field(default=3, description="Element count (2-6)")
    spacing_ratio: float = Field(default=1.0, description="Spacing ratio (0.5-2.0)")
    scale_variance: float = Field(default=1.0, description="Scale variance (0.8-1.2)")
    symmetry: Symmetry = Field(default="bilateral")
    fill_opacity: float = Field(default=0.8, description="Fill opacity (0.3-1.0)")
    gradient_angle: float = Field(default=45.0, description="Gradient angle (0-360, step 15)")
    anatomy: tuple[AnatomyChoice, ...] = Field(
        default=("stem", "bowl"),
        description="1-3 unique anatomy parts",
    )
    cutout_position: int = Field(default=0, description="Cutout slot (0-11)")
    interlock_depth: float = Field(default=50.0, description="Interlock depth (10-90)")
    stroke_taper: float = Field(default=0.0, description="Stroke taper (0-100)")

    @model_validator(mode="before")
    @classmethod
    def _clamp_fields(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        data = dict(data)
        for name, (lo, hi) in FIELD_RANGES.items():
            if data.get(name) is None:
                continue
            value = float(data[name])
            if name == "rotation" and not lo <= value <= hi:
                value %= 360.0
            value = min(hi, max(lo, value))
            data[name] = round_half_up(value) if name in INTEGER_FIELDS else value
        if "anatomy" in data:
            data["anatomy"] = _normalize_anatomy(data["anatomy"])
        return data

    def with_overrides(self, overrides: Mapping[str, Any]) -> ParameterVector:
        """Return a new vector with ``overrides`` applied (overrides win)."""
        unknown = set(overrides) - set(type(self).model_fields)
        if unknown:
            raise ValueError(f"Unknown parameter fields: {sorted(unknown)}")
        if not overrides:
            return self
        return type(self).model_validate({**self.model_dump(), **dict(overrides)})
