"""Tests for the compact SVG serializer."""

from logoforge.svg.serializer import SVG_NS, el, fmt, serialize_element, serialize_svg


def test_fmt():
    assert fmt(5) == "5"
    assert fmt(5.0) == "5"
    assert fmt(2.5) == "2.5"
    assert fmt(1 / 3) == "0.33"
    assert fmt(-0.004) == "0"
    assert fmt(True) == "true"


def test_el_hyphenates_and_skips_none():
    elem = el("path", d="M 0 0", stroke_width=2, stroke_dasharray=None, class_="x")
    assert elem == {"tag": "path", "d": "M 0 0", "stroke-width": 2, "class": "x"}


def test_el_children_and_text():
    group = el("g", el("circle", r=1), {}, transform="rotate(0 100 100)")
    assert len(group["children"]) == 1
    assert el("text", text="N")["text"] == "N"


def test_serialize_element_self_closing():
    assert serialize_element(el("circle", cx=100, cy=100, r=12.5)) == '<circle cx="100" cy="100" r="12.5" />'


def test_serialize_escapes():
    out = serialize_element(el("text", text="A&B<", fill="red"))
    assert out == '<text fill="red">A&amp;B&lt;</text>'


def test_serialize_svg_root():
    out = serialize_svg([el("rect", width=10, height=10), None, {}])
    lines = out.splitlines()
    assert lines[0] == f'<svg viewBox="0 0 200 200" xmlns="{SVG_NS}">'
    assert lines[1] == '  <rect width="10" height="10" />'
    assert lines[-1] == "</svg>"
    assert len(lines) == 3


def test_serialize_nested():
    out = serialize_svg([el("g", el("circle", r=2), transform="translate(1 2)")], canvas_size=100)
    assert 'viewBox="0 0 100 100"' in out
    assert '    <circle r="2" />' in out
