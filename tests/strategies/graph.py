"""Hypothesis strategies for candidate graph generation.

Provides reusable strategies for generating BitMatrixGraph candidates the
way a graph generator would hand them to the harness, plus the matching
networkx graphs for the analysis helpers.

Event-Emitting Strategies (HypoFuzz-Optimized):
    - bit_matrix_graphs: Emits ``strategy=graph_{topology}``
    - upper_triangle_matrices: Emits ``strategy=matrix_{density}``

Python 3.13+.
"""

from __future__ import annotations

import networkx as nx
from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from planarityharness.constants import MAXN
from planarityharness.graph import BitMatrixGraph

__all__ = [
    "bit_matrix_graphs",
    "networkx_graphs",
    "upper_triangle_matrices",
    "vertex_counts",
]

# Small graphs keep the minor searches fast while still covering K5, K3,3
# and their subdivisions.
vertex_counts: st.SearchStrategy[int] = st.integers(min_value=1, max_value=8)


@composite
def bit_matrix_graphs(
    draw: st.DrawFn,
    *,
    min_vertices: int = 1,
    max_vertices: int = 8,
) -> BitMatrixGraph:
    """Generate symmetric bit-matrix graphs of assorted topologies.

    Args:
        draw: Hypothesis draw function.
        min_vertices: Minimum vertex count.
        max_vertices: Maximum vertex count (at most MAXN).

    Events emitted:
        - ``strategy=graph_{topology}``: Graph topology category.
    """
    n = draw(st.integers(min_value=min_vertices, max_value=min(max_vertices, MAXN)))
    pairs = [(u, v) for u in range(n) for v in range(u + 1, n)]
    topology = draw(st.sampled_from(["empty", "path", "cycle", "complete", "random"]))

    match topology:
        case "empty":
            event("strategy=graph_empty")
            edges: list[tuple[int, int]] = []
        case "path":
            event("strategy=graph_path")
            edges = [(i, i + 1) for i in range(n - 1)]
        case "cycle":
            event("strategy=graph_cycle")
            edges = [(i, i + 1) for i in range(n - 1)]
            if n >= 3:
                edges.append((0, n - 1))
        case "complete":
            event("strategy=graph_complete")
            edges = pairs
        case _:
            event("strategy=graph_random")
            edges = draw(st.lists(st.sampled_from(pairs), unique=True)) if pairs else []

    return BitMatrixGraph.from_edges(n, edges)


@composite
def upper_triangle_matrices(
    draw: st.DrawFn,
    *,
    max_vertices: int = MAXN,
) -> BitMatrixGraph:
    """Generate matrices with bits set only above the diagonal.

    Generators are allowed to fill only the upper triangle; transfer must
    still produce every edge.

    Events emitted:
        - ``strategy=matrix_{density}``: ``sparse`` or ``dense``.
    """
    n = draw(st.integers(min_value=1, max_value=max_vertices))
    rows = []
    for i in range(n):
        upper_mask = ((1 << n) - 1) & ~((1 << (i + 1)) - 1)
        rows.append(draw(st.integers(min_value=0, max_value=(1 << n) - 1)) & upper_mask)
    matrix = BitMatrixGraph(tuple(rows))
    density = "dense" if 4 * matrix.edge_count >= n * (n - 1) else "sparse"
    event(f"strategy=matrix_{density}")
    return matrix


@composite
def networkx_graphs(draw: st.DrawFn, *, max_vertices: int = 8) -> nx.Graph:
    """Generate networkx graphs on ``0..n-1`` for the analysis helpers."""
    matrix = draw(bit_matrix_graphs(max_vertices=max_vertices))
    graph = nx.Graph()
    graph.add_nodes_from(range(matrix.vertex_count))
    graph.add_edges_from(matrix.upper_edges())
    return graph
