"""One base generator per abstract-icon category (``icon.<category>``)."""

from __future__ import annotations

from logoforge.engine.icons import available_categories, category_label, generate_abstract_icon
from logoforge.engine.registry import Family, Generator, algorithm
from logoforge.models.params import ParameterVector
from logoforge.svg.paint import PaintContext


def _category_generator(category: str) -> Generator:
    def generate(params: ParameterVector, brand_name: str, paint: PaintContext) -> str:
        return generate_abstract_icon(params, brand_name, paint, category=category)

    generate.__name__ = f"{category}_icon"
    return generate


for _category in available_categories():
    algorithm(
        id=f"icon.{_category}",
        family=Family.ICON,
        description=f"{category_label(_category)} icon",
    )(_category_generator(_category))
