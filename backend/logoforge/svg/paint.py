"""Paint context threaded through every generator.

Generators never embed their own colours: whatever draws a visible fill or stroke
uses ``paint.color`` and visible knockout shapes use ``paint.knockout``. Mask
luminance values (white/black inside ``<mask>``) are not paint.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

_FORBIDDEN = set('"<>&')


def _check_colour(value: str, field: str) -> None:
    if not value or not value.strip():
        raise ValueError(f"Paint {field} must not be empty")
    if _FORBIDDEN & set(value):
        raise ValueError(f"Paint {field} contains markup characters: {value!r}")


@dataclass(frozen=True)
class PaintContext:
    color: str = "currentColor"
    knockout: str = "white"

    def __post_init__(self) -> None:
        _check_colour(self.color, "color")
        _check_colour(self.knockout, "knockout")

    @classmethod
    def from_palette(cls, palette: Mapping[str, str]) -> PaintContext:
        """Primary colour as ink, background as knockout."""
        return cls(color=palette["primary"], knockout=palette.get("background", "white"))


DEFAULT_PAINT = PaintContext()
