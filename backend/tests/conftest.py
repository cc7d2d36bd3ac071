"""Shared test fixtures."""

from __future__ import annotations

import pytest

from logoforge.engine.registry import load_algorithms
from logoforge.models.designer import BrandInput
from logoforge.models.params import ParameterVector
from logoforge.svg.paint import PaintContext


# Arbitrary 64-digit hex seed, the length generate_seed produces
FIXED_SEED = "3f9a1c7e5b2d48a06e1f9c3b7d5a2e4f8c6b0a1d3e5f7a9c2b4d6e8f0a1c3e5b"
SHORT_SEED = "abcd"

LETTER_BRANDS = ["Nexus", "acme", "Orbit", "Zenith", "quill"]
NON_LETTER_BRANDS = ["9Brand", "#Brand"]

BRAND_COLOR = "#ff6600"
BRAND_KNOCKOUT = "#101010"

# A mark with two paths, a mask and a rotation: enough structure to pass the lettermark heuristics.
STRUCTURED_SVG = '''<svg viewBox="0 0 200 200" xmlns="http://www.w3.org/2000/svg">
  <defs>
    <mask id="m1">
      <rect x="0" y="0" width="200" height="200" fill="white" />
      <circle cx="100" cy="100" r="20" fill="black" />
    </mask>
  </defs>
  <g transform="rotate(15 100 100)" mask="url(#m1)">
    <path d="M 40 160 L 100 40 L 160 160" fill="none" stroke="currentColor" stroke-width="6" />
    <path d="M 65 110 L 135 110" fill="none" stroke="currentColor" stroke-width="6" />
    <polygon points="100,60 120,100 80,100" fill="currentColor" />
  </g>
</svg>'''

# Plain centred text in a container circle: the classic generic lettermark.
GENERIC_TEXT_SVG = '''<svg viewBox="0 0 200 200" xmlns="http://www.w3.org/2000/svg">
  <circle cx="100" cy="100" r="45" fill="none" stroke="currentColor" stroke-width="4" />
  <text x="100" y="115" text-anchor="middle" font-size="48" fill="currentColor">N</text>
</svg>'''


@pytest.fixture(scope="session", autouse=True)
def algorithms():
    return load_algorithms()


@pytest.fixture
def params() -> ParameterVector:
    return ParameterVector()


@pytest.fixture
def paint() -> PaintContext:
    return PaintContext(color=BRAND_COLOR, knockout=BRAND_KNOCKOUT)


@pytest.fixture
def nexus() -> BrandInput:
    return BrandInput(name="Nexus", category="technology", personality=["professional"])
