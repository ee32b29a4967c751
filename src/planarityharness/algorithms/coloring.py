"""Smallest-last greedy vertex coloring.

Coloring vertices greedily in smallest-last (degeneracy) order uses at most
``degeneracy + 1`` colors, hence at most six on planar graphs.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import networkx as nx

from planarityharness.enums import EmbedResult

if TYPE_CHECKING:
    from planarityharness.graph.working import WorkingGraph

__all__ = ["GreedyColoring"]


class GreedyColoring:
    """Coloring capability backed by ``networkx.greedy_color``."""

    __slots__ = ("strategy",)

    def __init__(self, strategy: str = "smallest_last") -> None:
        self.strategy = strategy

    def color_vertices(self, graph: WorkingGraph) -> EmbedResult:
        graph.colors = nx.greedy_color(graph.to_networkx(), strategy=self.strategy)
        return EmbedResult.OK

    def color_vertices_integrity_check(self, graph: WorkingGraph, original: WorkingGraph) -> bool:
        colors = graph.colors
        if colors is None or graph.edges() != original.edges():
            return False
        if set(colors) != set(range(graph.vertex_count)):
            return False
        return all(colors[u] != colors[v] for u, v in graph.edges())

    def num_colors_used(self, graph: WorkingGraph) -> int:
        return len(set(graph.colors.values())) if graph.colors else 0
