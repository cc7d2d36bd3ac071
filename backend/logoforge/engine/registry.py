"""Algorithm registry: every base generator is a plain function registered via decorator.

Usage:
    @algorithm(id="stencil", family=Family.TECHNIQUE, description="Letter with cut gaps")
    def stencil(params: ParameterVector, brand_name: str, paint: PaintContext) -> str:
        ...

Named library entries (presets) refer to these ids; see ``engine.library``.
"""

from __future__ import annotations

import enum
import importlib
import logging
import pkgutil
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from logoforge.models.params import ParameterVector
    from logoforge.svg.paint import PaintContext

logger = logging.getLogger(__name__)

Generator = Callable[["ParameterVector", str, "PaintContext"], str]


class Family(str, enum.Enum):
    TECHNIQUE = "technique"
    PREMIUM = "premium"
    INTERLOCKING = "interlocking"
    FUSION = "fusion"
    ICON = "icon"
    MODERN = "modern"
    MONOGRAM = "monogram"
    TRINITY = "trinity"
    CREATIVE = "creative"


@dataclass(frozen=True)
class AlgorithmSpec:
    id: str
    family: Family
    fn: Generator
    description: str = ""


class AlgorithmRegistry:
    """Registry of base generators, in registration order."""

    def __init__(self) -> None:
        self._algorithms: dict[str, AlgorithmSpec] = {}

    def register(self, spec: AlgorithmSpec) -> None:
        if spec.id in self._algorithms:
            raise ValueError(f"Duplicate algorithm ID: {spec.id}")
        self._algorithms[spec.id] = spec
        logger.debug("Registered algorithm %s (%s)", spec.id, spec.family.value)

    def get(self, algorithm_id: str) -> AlgorithmSpec:
        return self._algorithms[algorithm_id]

    def __contains__(self, algorithm_id: object) -> bool:
        return algorithm_id in self._algorithms

    def get_family(self, family: Family) -> list[AlgorithmSpec]:
        return [s for s in self._algorithms.values() if s.family == family]

    def all(self) -> list[AlgorithmSpec]:
        return list(self._algorithms.values())

    @property
    def count(self) -> int:
        return len(self._algorithms)


# Module-level singleton
_registry = AlgorithmRegistry()


def get_registry() -> AlgorithmRegistry:
    return _registry


def algorithm(*, id: str, family: Family, description: str = ""):
    """Decorator to register a base generator."""

    def decorator(fn: Generator) -> Generator:
        _registry.register(AlgorithmSpec(id=id, family=family, fn=fn, description=description))
        return fn

    return decorator


def load_algorithms() -> AlgorithmRegistry:
    """Import every module under ``engine.algorithms`` so decorators fire."""
    import logoforge.engine.algorithms as pkg

    for info in pkgutil.iter_modules(pkg.__path__):
        importlib.import_module(f"{pkg.__name__}.{info.name}")
    return _registry
