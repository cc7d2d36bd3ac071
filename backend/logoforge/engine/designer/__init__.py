from logoforge.engine.designer.colors import (
    CATEGORY_ALIASES,
    INDUSTRY_COLORS,
    available_color_categories,
    recommend_colors,
)
from logoforge.engine.designer.pipeline import (
    DESIGNER_STAGES,
    DesignerPipeline,
    DesignerState,
    designer_generate,
    run_designer_brain,
)
from logoforge.engine.designer.stages import (
    run_discovery,
    run_quality_check,
    run_refinement,
    run_selection,
    run_sketching,
    run_word_association,
    score_quality,
)

__all__ = [
    "CATEGORY_ALIASES",
    "DESIGNER_STAGES",
    "DesignerPipeline",
    "DesignerState",
    "INDUSTRY_COLORS",
    "available_color_categories",
    "designer_generate",
    "recommend_colors",
    "run_designer_brain",
    "run_discovery",
    "run_quality_check",
    "run_refinement",
    "run_selection",
    "run_sketching",
    "run_word_association",
    "score_quality",
]
