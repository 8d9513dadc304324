"""Diagram generation for g6draw.

Renderers turn a decoded, laid-out graph into a textual diagram format. SVG is
the only output format.
"""

from .framework import Drawing, DrawingGenerator, GraphRenderer
from .svg import SvgRenderer

__all__ = [
    "DrawingGenerator",
    "Drawing",
    "GraphRenderer",
    "SvgRenderer",
]
