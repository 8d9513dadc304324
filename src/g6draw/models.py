"""Graph data models shared by the codec, layout and renderer."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import NamedTuple

from .errors import InvalidVertex

Edge = tuple[int, int]


class Point(NamedTuple):
    """A 2D drawing position."""
    x: float
    y: float


# One point per vertex, indexed by vertex number.
Coordinates = tuple[Point, ...]


def normalize_edge(u: int, v: int) -> Edge:
    """Return the edge as an ordered ``(smaller, larger)`` pair."""
    return (u, v) if u < v else (v, u)


def graph6_order(edge: Edge) -> tuple[int, int]:
    """Sort key placing edges in graph6 bit order (column by column)."""
    return (edge[1], edge[0])


@dataclass(frozen=True)
class Graph:
    """Immutable undirected simple graph on vertices ``0..order-1``."""
    order: int
    edge_list: tuple[Edge, ...] = ()
    _adjacency: tuple[frozenset[int], ...] = field(init=False, repr=False, compare=False)

    def __init__(self, order: int, edges: Iterable[Edge] = ()):
        if order < 0:
            raise InvalidVertex(order, order, f"Vertex count must be >= 0, got {order}")

        normalized = set()
        for u, v in edges:
            for vertex in (u, v):
                if not 0 <= vertex < order:
                    raise InvalidVertex(vertex, order)
            if u == v:
                raise InvalidVertex(u, order, f"Self loop on vertex {u} is not allowed")
            normalized.add(normalize_edge(u, v))

        edge_list = tuple(sorted(normalized, key=graph6_order))

        adjacency = [set() for _ in range(order)]
        for u, v in edge_list:
            adjacency[u].add(v)
            adjacency[v].add(u)

        object.__setattr__(self, "order", order)
        object.__setattr__(self, "edge_list", edge_list)
        object.__setattr__(self, "_adjacency", tuple(frozenset(a) for a in adjacency))

    def vertex_count(self) -> int:
        return self.order

    def edge_count(self) -> int:
        return len(self.edge_list)

    def vertices(self) -> range:
        return range(self.order)

    def edges(self) -> tuple[Edge, ...]:
        """Edges as ``(u, v)`` pairs with ``u < v``, in graph6 bit order."""
        return self.edge_list

    def neighbors(self, v: int) -> frozenset[int]:
        self._check_vertex(v)
        return self._adjacency[v]

    def degree(self, v: int) -> int:
        return len(self.neighbors(v))

    def has_edge(self, u: int, v: int) -> bool:
        if not (0 <= u < self.order and 0 <= v < self.order):
            return False
        return v in self._adjacency[u]

    def edge_index(self, u: int, v: int) -> int:
        """Position of the edge's bit in the graph6 upper triangle."""
        low, high = normalize_edge(u, v)
        return high * (high - 1) // 2 + low

    def components(self) -> list[list[int]]:
        """Connected components, each sorted, ordered by smallest vertex."""
        seen = set()
        result = []
        for start in range(self.order):
            if start in seen:
                continue
            seen.add(start)
            stack = [start]
            component = []
            while stack:
                vertex = stack.pop()
                component.append(vertex)
                for neighbor in self._adjacency[vertex]:
                    if neighbor not in seen:
                        seen.add(neighbor)
                        stack.append(neighbor)
            result.append(sorted(component))
        return result

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < self.order:
            raise InvalidVertex(v, self.order)


@dataclass(frozen=True)
class HighlightSet:
    """Validated vertices and edges to draw in the highlight style."""
    vertices: frozenset[int] = frozenset()
    edges: frozenset[Edge] = frozenset()

    def __post_init__(self):
        object.__setattr__(self, "vertices", frozenset(self.vertices))
        object.__setattr__(self, "edges", frozenset(normalize_edge(u, v) for u, v in self.edges))

    @classmethod
    def empty(cls) -> "HighlightSet":
        return cls()

    def has_vertex(self, v: int) -> bool:
        return v in self.vertices

    def has_edge(self, u: int, v: int) -> bool:
        return normalize_edge(u, v) in self.edges

    def __bool__(self) -> bool:
        return bool(self.vertices or self.edges)
