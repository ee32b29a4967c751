"""Tests for algorithms.coloring: smallest-last greedy coloring."""

import networkx as nx
from hypothesis import given, settings

from planarityharness.algorithms import GreedyColoring
from planarityharness.enums import EmbedResult
from planarityharness.graph import WorkingGraph
from tests.strategies import networkx_graphs


def _working(graph: nx.Graph) -> WorkingGraph:
    working = WorkingGraph(graph.number_of_nodes())
    for u, v in graph.edges:
        working.add_edge(u, v)
    return working


class TestGreedyColoring:
    """Coloring and its integrity predicate."""

    def test_triangle_uses_three_colors(self) -> None:
        """Odd cycles need three colors."""
        graph = _working(nx.cycle_graph(3))
        colorer = GreedyColoring()
        assert colorer.color_vertices(graph) is EmbedResult.OK
        assert colorer.num_colors_used(graph) == 3

    def test_k6_uses_six_colors(self) -> None:
        """The complete graph on six vertices reaches the threshold."""
        graph = _working(nx.complete_graph(6))
        colorer = GreedyColoring()
        colorer.color_vertices(graph)
        assert colorer.num_colors_used(graph) == 6

    def test_no_colors_before_coloring(self) -> None:
        """Zero colors until color_vertices runs."""
        assert GreedyColoring().num_colors_used(WorkingGraph(3)) == 0

    def test_integrity_requires_coloring(self) -> None:
        """An uncolored graph fails the check."""
        graph = _working(nx.path_graph(3))
        assert not GreedyColoring().color_vertices_integrity_check(graph, _working(nx.path_graph(3)))

    def test_integrity_rejects_monochromatic_edge(self) -> None:
        """Adjacent vertices must differ."""
        graph = _working(nx.path_graph(3))
        graph.colors = {0: 0, 1: 0, 2: 1}
        assert not GreedyColoring().color_vertices_integrity_check(graph, _working(nx.path_graph(3)))

    def test_integrity_rejects_uncolored_vertex(self) -> None:
        """Every vertex gets a color."""
        graph = _working(nx.path_graph(3))
        graph.colors = {0: 0, 1: 1}
        assert not GreedyColoring().color_vertices_integrity_check(graph, _working(nx.path_graph(3)))

    def test_integrity_rejects_changed_graph(self) -> None:
        """The colored graph must still match the original."""
        graph = _working(nx.path_graph(3))
        colorer = GreedyColoring()
        colorer.color_vertices(graph)
        assert not colorer.color_vertices_integrity_check(graph, _working(nx.cycle_graph(3)))

    @given(networkx_graphs(max_vertices=12))
    @settings(max_examples=100)
    def test_planar_graphs_use_at_most_six_colors(self, graph: nx.Graph) -> None:
        """Smallest-last order colors planar graphs with at most six colors."""
        working = _working(graph)
        colorer = GreedyColoring()
        colorer.color_vertices(working)
        assert colorer.color_vertices_integrity_check(working, _working(graph))
        is_planar, _ = nx.check_planarity(graph)
        if is_planar:
            assert colorer.num_colors_used(working) <= 6
