"""Tests for the paint context."""

import pytest

from logoforge.svg.paint import DEFAULT_PAINT, PaintContext


def test_defaults():
    assert DEFAULT_PAINT.color == "currentColor"
    assert DEFAULT_PAINT.knockout == "white"


@pytest.mark.parametrize("color", ["", "   ", 'red" onload="x', "<b>", "a&b"])
def test_rejects_bad_colour(color):
    with pytest.raises(ValueError):
        PaintContext(color=color)
    with pytest.raises(ValueError):
        PaintContext(knockout=color)


def test_accepts_css_colours():
    PaintContext(color="#ff6600", knockout="rgb(0, 0, 0)")
    PaintContext(color="hsl(120 50% 50%)")


def test_from_palette():
    paint = PaintContext.from_palette({"primary": "#2563eb", "background": "#f8fafc"})
    assert paint == PaintContext("#2563eb", "#f8fafc")
    assert PaintContext.from_palette({"primary": "#000"}).knockout == "white"


def test_frozen():
    with pytest.raises(AttributeError):
        DEFAULT_PAINT.color = "red"
