"""Highlight selector parsing and resolution against a graph."""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

from .errors import SelectorSyntaxError, UnknownEdge, UnknownVertex
from .models import Graph, HighlightSet, normalize_edge
from .parser.graph6 import decode

logger = logging.getLogger(__name__)

_VERTEX_PATTERN = re.compile(r"^\s*(-?\d+)\s*$")
_EDGE_PATTERN = re.compile(r"^\s*(-?\d+)\s*[-,:]\s*(-?\d+)\s*$")


@dataclass(frozen=True)
class VertexSelector:
    """Selects a single vertex by index."""
    vertex: int

    def __str__(self) -> str:
        return str(self.vertex)


@dataclass(frozen=True)
class EdgeSelector:
    """Selects the edge between two vertices, in either order."""
    u: int
    v: int

    def __str__(self) -> str:
        return f"{self.u}-{self.v}"


Selector = VertexSelector | EdgeSelector


def parse_selector(text: str) -> Selector:
    """Parse ``"3"`` as a vertex and ``"0-1"``, ``"0,1"`` or ``"0:1"`` as an edge."""
    match = _VERTEX_PATTERN.match(text)
    if match:
        return VertexSelector(int(match.group(1)))

    match = _EDGE_PATTERN.match(text)
    if match:
        return EdgeSelector(int(match.group(1)), int(match.group(2)))

    raise SelectorSyntaxError(text)


def selectors_from_graph6(text: str | bytes) -> list[EdgeSelector]:
    """Select every edge of another graph6 graph, in graph6 order."""
    return [EdgeSelector(u, v) for u, v in decode(text).edges()]


def resolve(graph: Graph, selectors: Iterable[Selector]) -> HighlightSet:
    """Validate selectors against ``graph`` and collect the highlight set.

    Selectors are checked in input order and the first invalid one raises.

    Raises:
        UnknownVertex: A vertex selector is outside ``0..n-1``
        UnknownEdge: An edge selector does not name an edge of ``graph``
    """
    vertices = set()
    edges = set()

    for selector in selectors:
        if isinstance(selector, VertexSelector):
            if not 0 <= selector.vertex < graph.vertex_count():
                raise UnknownVertex(selector.vertex)
            vertices.add(selector.vertex)
        elif isinstance(selector, EdgeSelector):
            if selector.u == selector.v or not graph.has_edge(selector.u, selector.v):
                raise UnknownEdge(selector.u, selector.v)
            edges.add(normalize_edge(selector.u, selector.v))
        else:
            raise TypeError(f"Unsupported selector type: {type(selector).__name__}")

    logger.debug(f"Resolved highlights: {len(vertices)} vertices, {len(edges)} edges")
    return HighlightSet(frozenset(vertices), frozenset(edges))
