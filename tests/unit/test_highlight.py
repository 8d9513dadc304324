"""Unit tests for highlight selector parsing and resolution."""

import pytest

from g6draw.errors import DecodeError, HighlightError, SelectorSyntaxError, UnknownEdge, UnknownVertex
from g6draw.highlight import (
    EdgeSelector,
    VertexSelector,
    parse_selector,
    resolve,
    selectors_from_graph6,
)
from g6draw.parser.graph6 import decode


class TestParseSelector:
    """Test parsing selector text."""

    def test_vertex(self):
        assert parse_selector("3") == VertexSelector(3)

    def test_vertex_with_whitespace(self):
        assert parse_selector(" 12 ") == VertexSelector(12)

    @pytest.mark.parametrize("text", ["0-1", "0,1", "0:1", " 0 - 1 "])
    def test_edge_separators(self, text):
        assert parse_selector(text) == EdgeSelector(0, 1)

    def test_negative_vertex_parsed(self):
        """Negative indices parse and are rejected when resolved."""
        assert parse_selector("-1") == VertexSelector(-1)

    @pytest.mark.parametrize("text", ["", "a", "1-", "1-2-3", "1.5"])
    def test_invalid_text(self, text):
        with pytest.raises(SelectorSyntaxError):
            parse_selector(text)

    def test_str_round_trip(self):
        assert parse_selector(str(EdgeSelector(4, 2))) == EdgeSelector(4, 2)
        assert parse_selector(str(VertexSelector(7))) == VertexSelector(7)


class TestResolve:
    """Test resolving selectors against a graph."""

    def test_resolve_vertices_and_edges(self, graphs):
        graph = decode(graphs["path4"])
        highlights = resolve(graph, [VertexSelector(0), EdgeSelector(2, 1)])

        assert highlights.vertices == frozenset({0})
        assert highlights.edges == frozenset({(1, 2)})

    def test_resolve_nothing(self, graphs):
        highlights = resolve(decode(graphs["edge"]), [])
        assert not highlights

    def test_vertex_one_past_last(self, graphs):
        graph = decode(graphs["triangle"])
        with pytest.raises(UnknownVertex) as exc_info:
            resolve(graph, [VertexSelector(graph.vertex_count())])
        assert exc_info.value.vertex == 3

    def test_negative_vertex(self, graphs):
        with pytest.raises(UnknownVertex):
            resolve(decode(graphs["edge"]), [VertexSelector(-1)])

    def test_missing_edge(self, graphs):
        with pytest.raises(UnknownEdge) as exc_info:
            resolve(decode(graphs["path4"]), [EdgeSelector(0, 2)])
        assert (exc_info.value.u, exc_info.value.v) == (0, 2)

    def test_edge_with_out_of_range_endpoint(self, graphs):
        with pytest.raises(UnknownEdge):
            resolve(decode(graphs["edge"]), [EdgeSelector(0, 5)])

    def test_self_loop_edge(self, graphs):
        with pytest.raises(UnknownEdge):
            resolve(decode(graphs["triangle"]), [EdgeSelector(1, 1)])

    def test_first_invalid_selector_reported(self, graphs):
        graph = decode(graphs["edge"])
        selectors = [VertexSelector(0), VertexSelector(9), EdgeSelector(0, 2)]
        with pytest.raises(UnknownVertex) as exc_info:
            resolve(graph, selectors)
        assert exc_info.value.vertex == 9

    def test_errors_are_highlight_errors(self, graphs):
        with pytest.raises(HighlightError, match=r"Unknown edge: \(0, 3\)"):
            resolve(decode(graphs["path4"]), [EdgeSelector(0, 3)])

    def test_duplicate_selectors_collapse(self, graphs):
        highlights = resolve(
            decode(graphs["edge"]),
            [EdgeSelector(0, 1), EdgeSelector(1, 0), VertexSelector(1), VertexSelector(1)],
        )
        assert highlights.edges == frozenset({(0, 1)})
        assert highlights.vertices == frozenset({1})

    def test_unsupported_selector_type(self, graphs):
        with pytest.raises(TypeError):
            resolve(decode(graphs["edge"]), ["0"])


class TestSelectorsFromGraph6:
    """Test highlighting the edges of a second graph."""

    def test_edges_in_graph6_order(self, graphs):
        assert selectors_from_graph6(graphs["path4"]) == [
            EdgeSelector(0, 1), EdgeSelector(1, 2), EdgeSelector(2, 3),
        ]

    def test_subgraph_resolves(self, graphs):
        highlights = resolve(decode(graphs["k4"]), selectors_from_graph6(graphs["path4"]))
        assert highlights.edges == frozenset({(0, 1), (1, 2), (2, 3)})

    def test_supergraph_rejected(self, graphs):
        with pytest.raises(UnknownEdge) as exc_info:
            resolve(decode(graphs["path4"]), selectors_from_graph6(graphs["k4"]))
        assert (exc_info.value.u, exc_info.value.v) == (0, 2)

    def test_malformed_graph6(self):
        with pytest.raises(DecodeError):
            selectors_from_graph6("C")
