"""Shared fixtures for g6draw tests."""

import pytest
from defusedxml import ElementTree

from g6draw.config import LayoutConfig, StyleConfig

SVG_NS = "{http://www.w3.org/2000/svg}"

# graph6 strings with known structure
GRAPHS = {
    "empty": "?",          # 0 vertices
    "single": "@",         # 1 vertex
    "edge": "A_",          # 2 vertices, edge 0-1
    "pair": "A?",          # 2 isolated vertices
    "triangle": "Bw",      # K3
    "path4": "Ch",         # path 0-1-2-3
    "k4": "C~",            # K4
    "edgeless5": "D??",    # 5 isolated vertices
    "mixed5": "DQc",       # edges 0-2, 1-3, 0-4, 3-4
    "petersen": "IheA@GUAo",
}


@pytest.fixture
def graphs():
    """graph6 strings keyed by a short name."""
    return dict(GRAPHS)


@pytest.fixture
def style():
    """Default drawing style."""
    return StyleConfig()


@pytest.fixture
def layout_config():
    """Layout settings with fewer iterations for quick tests."""
    return LayoutConfig(iterations=120)


@pytest.fixture
def parse_svg():
    """Parse SVG text into an element tree, failing on malformed XML."""
    def parse(text: str):
        return ElementTree.fromstring(text.encode("utf-8"))
    return parse


@pytest.fixture
def svg_elements(parse_svg):
    """Return all SVG elements with the given tag name."""
    def find(text: str, tag: str):
        return list(parse_svg(text).iter(f"{SVG_NS}{tag}"))
    return find
