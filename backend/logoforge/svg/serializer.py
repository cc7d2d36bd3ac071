"""Write compact SVG markup from element dicts.

An element is a plain dict: ``{"tag": "circle", "cx": 100, ..., "children": [...]}``.
Attribute keys written with underscores (``stroke_width``) are emitted with
hyphens. ``None`` values are skipped. Floats are formatted with at most two
decimals and no trailing zeros.
"""

from __future__ import annotations

from html import escape
from typing import Any

SVG_NS = "http://www.w3.org/2000/svg"

# Structural keys, not attributes.
_RESERVED = ("tag", "children", "text")


def fmt(value: float) -> str:
    """Compact number: integral floats as ints, otherwise up to 2 decimals."""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, int):
        return str(value)
    rounded = round(float(value), 2)
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.2f}".rstrip("0").rstrip(".")


def el(tag: str, *children: dict[str, Any], text: str | None = None, **attrs: Any) -> dict[str, Any]:
    """Build an element dict."""
    elem: dict[str, Any] = {"tag": tag}
    for key, value in attrs.items():
        if value is not None:
            elem[key.rstrip("_").replace("_", "-")] = value
    if children:
        elem["children"] = [c for c in children if c]
    if text is not None:
        elem["text"] = text
    return elem


def _attr_value(value: Any) -> str:
    if isinstance(value, (int, float)):
        return fmt(value)
    return escape(str(value), quote=True)


def _render(elem: dict[str, Any], depth: int, lines: list[str]) -> None:
    pad = "  " * depth
    tag = elem.get("tag", "path")
    attrs = {k: v for k, v in elem.items() if k not in _RESERVED}
    attr_str = "".join(f' {k}="{_attr_value(v)}"' for k, v in attrs.items())
    children = elem.get("children") or []
    text = elem.get("text")

    if text is not None:
        lines.append(f"{pad}<{tag}{attr_str}>{escape(text, quote=False)}</{tag}>")
    elif children:
        lines.append(f"{pad}<{tag}{attr_str}>")
        for child in children:
            _render(child, depth + 1, lines)
        lines.append(f"{pad}</{tag}>")
    else:
        lines.append(f"{pad}<{tag}{attr_str} />")


def serialize_element(elem: dict[str, Any]) -> str:
    lines: list[str] = []
    _render(elem, 0, lines)
    return "\n".join(lines)


def serialize_svg(elements: list[dict[str, Any]], canvas_size: float = 200) -> str:
    """Root ``<svg>`` with a square viewBox holding ``elements`` in order."""
    size = fmt(canvas_size)
    lines = [f'<svg viewBox="0 0 {size} {size}" xmlns="{SVG_NS}">']
    for elem in elements:
        if elem:
            _render(elem, 1, lines)
    lines.append("</svg>")
    return "\n".join(lines)
