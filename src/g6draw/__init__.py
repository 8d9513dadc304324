"""g6draw - Render graph6-encoded graphs as SVG diagrams.

g6draw decodes a graph in the graph6 text format, lays it out with a
deterministic force-directed algorithm and writes an SVG drawing, optionally
highlighting selected vertices and edges.
"""

__version__ = "0.1.0"
__author__ = "g6draw contributors"
__description__ = "Render graph6-encoded graphs as SVG diagrams"

from g6draw.config import G6DrawConfig, LayoutConfig, StyleConfig
from g6draw.errors import (
    DecodeError,
    G6DrawError,
    GraphTooLarge,
    HighlightError,
    InvalidVertex,
    SelectorSyntaxError,
    UnknownEdge,
    UnknownVertex,
)
from g6draw.models import Graph, HighlightSet, Point

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "G6DrawConfig",
    "LayoutConfig",
    "StyleConfig",
    "G6DrawError",
    "DecodeError",
    "InvalidVertex",
    "GraphTooLarge",
    "HighlightError",
    "UnknownVertex",
    "UnknownEdge",
    "SelectorSyntaxError",
    "Graph",
    "HighlightSet",
    "Point",
]
