"""SVG renderer for laid-out graphs."""

import html
import logging
import math
from dataclasses import dataclass

from ..config import StyleConfig
from ..models import Coordinates, Graph, HighlightSet, Point
from .framework import GraphRenderer

logger = logging.getLogger(__name__)

XML_HEADER = '<?xml version="1.0" encoding="UTF-8" standalone="no"?>'
GENERATOR_COMMENT = "<!-- Created with g6draw -->"
SVG_NAMESPACE = "http://www.w3.org/2000/svg"
INDENT = "  "


def fmt(value: float) -> str:
    """Format a number with at most two decimals and no trailing zeros."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def attr(value) -> str:
    return html.escape(str(value), quote=True)


@dataclass(frozen=True)
class Canvas:
    """Drawing surface: coordinate bounds grown by the margin on every side."""
    width: float
    height: float
    offset_x: float
    offset_y: float

    @classmethod
    def fit(cls, coordinates: Coordinates, margin: float) -> "Canvas":
        if not coordinates:
            return cls(2 * margin, 2 * margin, margin, margin)
        min_x = min(p.x for p in coordinates)
        max_x = max(p.x for p in coordinates)
        min_y = min(p.y for p in coordinates)
        max_y = max(p.y for p in coordinates)
        return cls(
            width=max_x - min_x + 2 * margin,
            height=max_y - min_y + 2 * margin,
            offset_x=margin - min_x,
            offset_y=margin - min_y,
        )

    def place(self, point: Point) -> Point:
        return Point(point.x + self.offset_x, point.y + self.offset_y)


class SvgRenderer(GraphRenderer):
    """Renders a graph with its coordinates and highlights as an SVG document."""

    @property
    def format_name(self) -> str:
        return "svg"

    def get_file_extension(self) -> str:
        return ".svg"

    def render(
        self,
        graph: Graph,
        coordinates: Coordinates,
        highlights: HighlightSet,
        style: StyleConfig,
    ) -> str:
        """Render the drawing as SVG text.

        Edges are drawn before vertices so vertex markers sit on top of the
        lines. Within each category highlighted elements are emitted last so
        no plain sibling can cover them. Labels go in a final group above
        everything else.
        """
        if len(coordinates) != graph.vertex_count():
            raise ValueError(
                f"Expected {graph.vertex_count()} coordinates, got {len(coordinates)}"
            )

        canvas = Canvas.fit(coordinates, style.margin)
        points = [canvas.place(p) for p in coordinates]

        lines = [XML_HEADER, GENERATOR_COMMENT, ""]
        lines.append(
            f'<svg width="{fmt(canvas.width)}" height="{fmt(canvas.height)}" '
            f'viewBox="0 0 {fmt(canvas.width)} {fmt(canvas.height)}" '
            f'version="1.1" xmlns="{SVG_NAMESPACE}">'
        )

        if style.background_color:
            lines.append(
                f'{INDENT}<rect x="0" y="0" width="{fmt(canvas.width)}" '
                f'height="{fmt(canvas.height)}" fill="{attr(style.background_color)}"/>'
            )

        lines.append(f'{INDENT}<g class="edges">')
        plain_edges = [e for e in graph.edges() if not highlights.has_edge(*e)]
        marked_edges = [e for e in graph.edges() if highlights.has_edge(*e)]
        for u, v in plain_edges:
            lines.append(self._render_edge(points, u, v, False, style))
        for u, v in marked_edges:
            lines.append(self._render_edge(points, u, v, True, style))
        lines.append(f"{INDENT}</g>")

        lines.append(f'{INDENT}<g class="vertices">')
        plain_vertices = [v for v in graph.vertices() if not highlights.has_vertex(v)]
        marked_vertices = [v for v in graph.vertices() if highlights.has_vertex(v)]
        for v in plain_vertices:
            lines.append(self._render_vertex(points, v, False, style))
        for v in marked_vertices:
            lines.append(self._render_vertex(points, v, True, style))
        lines.append(f"{INDENT}</g>")

        labels = self._render_labels(graph, points, style)
        if labels:
            lines.append(f'{INDENT}<g class="labels">')
            lines.extend(labels)
            lines.append(f"{INDENT}</g>")

        lines.append("</svg>")

        logger.debug(
            f"Rendered SVG canvas {fmt(canvas.width)}x{fmt(canvas.height)} with "
            f"{len(marked_vertices)} highlighted vertices and {len(marked_edges)} highlighted edges"
        )
        return "\n".join(lines) + "\n"

    def _render_edge(self, points, u, v, highlighted, style) -> str:
        start, end = points[u], points[v]
        color = style.highlight_color if highlighted else style.edge_color
        width = style.edge_stroke_width + (style.highlight_stroke_boost if highlighted else 0)
        css_class = "edge highlight" if highlighted else "edge"

        return (
            f'{INDENT * 2}<line class="{css_class}" x1="{fmt(start.x)}" y1="{fmt(start.y)}" '
            f'x2="{fmt(end.x)}" y2="{fmt(end.y)}" stroke="{attr(color)}" '
            f'stroke-width="{fmt(width)}" stroke-linecap="round"/>'
        )

    def _render_vertex(self, points, v, highlighted, style) -> str:
        center = points[v]
        fill = style.highlight_color if highlighted else style.vertex_color
        border = style.highlight_color if highlighted else style.vertex_border_color
        css_class = "vertex highlight" if highlighted else "vertex"

        return (
            f'{INDENT * 2}<circle class="{css_class}" cx="{fmt(center.x)}" cy="{fmt(center.y)}" '
            f'r="{fmt(style.vertex_radius)}" fill="{attr(fill)}" stroke="{attr(border)}" '
            f'stroke-width="{fmt(style.vertex_border_width)}"/>'
        )

    def _render_labels(self, graph, points, style) -> list[str]:
        """Edge index labels followed by vertex index labels."""
        lines = []
        if style.edge_labels:
            for u, v in graph.edges():
                index = graph.edge_index(u, v)
                label = index if style.zero_indexed else index + 1
                position = self._edge_label_position(points[u], points[v], style.font_size)
                lines.append(self._render_text(position, label, style))
        if style.vertex_labels:
            for v in graph.vertices():
                label = v if style.zero_indexed else v + 1
                lines.append(self._render_text(points[v], label, style))
        return lines

    @staticmethod
    def _edge_label_position(start: Point, end: Point, font_size: float) -> Point:
        """Midpoint of the edge, pushed off the line along its normal."""
        dx = end.x - start.x
        dy = end.y - start.y
        length = math.hypot(dx, dy)
        mid = Point((start.x + end.x) / 2, (start.y + end.y) / 2)
        if length == 0:
            return Point(mid.x, mid.y - font_size)
        return Point(mid.x - dy / length * font_size, mid.y + dx / length * font_size)

    @staticmethod
    def _render_text(position: Point, content, style) -> str:
        return (
            f'{INDENT * 2}<text x="{fmt(position.x)}" y="{fmt(position.y)}" '
            f'fill="{attr(style.label_color)}" font-size="{fmt(style.font_size)}" '
            f'font-family="sans-serif" text-anchor="middle" dominant-baseline="central">'
            f"{html.escape(str(content))}</text>"
        )
