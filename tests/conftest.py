"""Shared test fixtures."""

from __future__ import annotations

import pytest


SQUARE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10">
  <path id="SQ" name="Square" d="M0 0 L10 0 L10 10 Z"/>
</svg>'''

# Three provinces side by side: absolute, relative and curved outlines,
# plus one element without path data.
PROVINCES_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="200px" height="100px">
  <!-- <path id="COMMENTED" d="M0 0 L1 1"/> -->
  <path id="TUR01" name="Adana" d="M0 0 L50 0 L50 50 L0 50 Z"/>
  <path id="TUR02" name="Aydin" d="M50 0 l50 0 l0 50 l-50 0 z"/>
  <path id="TUR03" d="M100 0 C120 0 140 10 150 25 L100 50 Z"/>
  <path name="Lake" class="water"/>
</svg>'''

MALFORMED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 20 20">
  <path id="bad" d="M0 0 Lxx yy Z"/>
  <path id="good" d="M0 0 L20 0 L20 20 Z"/>
</svg>'''

# Every point shares x = 5: zero-width document bounds.
VERTICAL_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 40 40">
  <path id="v" d="M5 0 L5 10 V5 20"/>
</svg>'''

# No viewBox, no width/height.
BARE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <path id="a" d="M10 10 L20 10 L20 20 Z"/>
</svg>'''


@pytest.fixture
def square_svg() -> str:
    return SQUARE_SVG


@pytest.fixture
def provinces_svg() -> str:
    return PROVINCES_SVG


@pytest.fixture
def malformed_svg() -> str:
    return MALFORMED_SVG
