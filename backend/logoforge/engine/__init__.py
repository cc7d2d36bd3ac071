"""LogoForge generative engine."""

from logoforge.engine.batch import generate_batch
from logoforge.engine.config import DEFAULT_CONFIG, EngineConfig
from logoforge.engine.designer import DesignerPipeline, designer_generate, recommend_colors, run_designer_brain
from logoforge.engine.icons import generate_abstract_icon, generate_icon_variations, resolve_category
from logoforge.engine.library import LibraryEntry, find_entry, get_entry, get_library
from logoforge.engine.registry import Family, algorithm, get_registry, load_algorithms
from logoforge.engine.seed import derive_params, generate_seed

__all__ = [
    "DEFAULT_CONFIG",
    "DesignerPipeline",
    "EngineConfig",
    "Family",
    "LibraryEntry",
    "algorithm",
    "derive_params",
    "designer_generate",
    "find_entry",
    "generate_abstract_icon",
    "generate_batch",
    "generate_icon_variations",
    "generate_seed",
    "get_entry",
    "get_library",
    "get_registry",
    "load_algorithms",
    "recommend_colors",
    "resolve_category",
    "run_designer_brain",
]
