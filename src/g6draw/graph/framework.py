"""Drawing pipeline: graph6 text in, rendered diagram out."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass

from ..config import G6DrawConfig, StyleConfig
from ..errors import GraphTooLarge
from ..highlight import Selector, resolve
from ..layout.force import ForceLayout
from ..models import Coordinates, Graph, HighlightSet
from ..parser.graph6 import decode

logger = logging.getLogger(__name__)


class GraphRenderer(ABC):
    """Abstract base class for graph renderers."""

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Name of the output format."""
        pass

    @abstractmethod
    def render(
        self,
        graph: Graph,
        coordinates: Coordinates,
        highlights: HighlightSet,
        style: StyleConfig,
    ) -> str:
        """Render a laid-out graph to string format."""
        pass

    @abstractmethod
    def get_file_extension(self) -> str:
        """Get file extension for this format."""
        pass


@dataclass(frozen=True)
class Drawing:
    """A decoded graph together with its derived layout and highlights."""
    graph: Graph
    coordinates: Coordinates
    highlights: HighlightSet


class DrawingGenerator:
    """Runs decode, highlight resolution, layout and rendering."""

    def __init__(self, config: G6DrawConfig | None = None):
        self.config = config or G6DrawConfig()
        self.layout_engine = ForceLayout(self.config.layout)
        self.renderers: dict[str, GraphRenderer] = {}

    def add_renderer(self, renderer: GraphRenderer) -> None:
        """Add a graph renderer."""
        self.renderers[renderer.format_name] = renderer

    def build(self, text: str | bytes, selectors: Iterable[Selector] = ()) -> Drawing:
        """Decode ``text``, resolve ``selectors`` and lay the graph out.

        Raises:
            DecodeError: If ``text`` is not valid graph6
            HighlightError: If a selector does not resolve against the graph
            GraphTooLarge: If the graph exceeds ``layout.max_vertices``
        """
        graph = decode(text)
        logger.info(f"Decoded graph with {graph.vertex_count()} vertices and {graph.edge_count()} edges")

        highlights = resolve(graph, selectors)

        limit = self.config.layout.max_vertices
        if limit is not None and graph.vertex_count() > limit:
            raise GraphTooLarge(graph.vertex_count(), limit)

        coordinates = self.layout_engine.layout(graph)
        return Drawing(graph, coordinates, highlights)

    def render_drawing(self, drawing: Drawing, format_name: str = "svg") -> str:
        """Render a drawing with the named renderer.

        Args:
            drawing: Graph, coordinates and highlights to render
            format_name: Output format (default: 'svg')

        Returns:
            Rendered diagram as string
        """
        if format_name not in self.renderers:
            available = list(self.renderers.keys())
            raise ValueError(f"Unknown format '{format_name}'. Available: {available}")

        renderer = self.renderers[format_name]
        logger.info(f"Rendering graph with {renderer.format_name} renderer")
        return renderer.render(
            drawing.graph, drawing.coordinates, drawing.highlights, self.config.style
        )

    def draw(
        self,
        text: str | bytes,
        selectors: Iterable[Selector] = (),
        format_name: str = "svg",
    ) -> str:
        """Run the whole pipeline and return the rendered diagram."""
        return self.render_drawing(self.build(text, selectors), format_name)
