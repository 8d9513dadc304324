"""Vertex layout algorithms."""

from g6draw.layout.force import ForceLayout
from g6draw.layout.grid import snap_to_grid

__all__ = [
    "ForceLayout",
    "snap_to_grid",
]
