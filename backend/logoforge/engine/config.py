"""Engine configuration: canvas geometry, batch scoring and designer thresholds."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Tunables shared by the batch engine and the designer pipeline."""

    # Canvas
    canvas_size: int = 200
    skeleton_grid: int = 100  # skeleton anchors live on a 100-unit grid

    # Batch engine
    batch_min_candidates: int = 15
    batch_score_floor: int = 85
    batch_score_span: int = 15  # scores land in [floor, floor + span - 1]

    # Designer pipeline
    association_limit: int = 10
    sketch_minimum: int = 20
    sketch_limit: int = 25
    icon_category_limit: int = 3
    refinement_size: int = 5
    refinement_type_cap: int = 2
    pass_threshold: int = 65
    final_variant_count: int = 4

    @property
    def center(self) -> float:
        return self.canvas_size / 2

    @property
    def skeleton_scale(self) -> float:
        return self.canvas_size / self.skeleton_grid


DEFAULT_CONFIG = EngineConfig()
