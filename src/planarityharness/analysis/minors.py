"""Graph minor analysis for small forbidden-subgraph searches.

Provides outerplanarity testing and K4, K2,3 and K3,3 minor detection used
by the default algorithm suite and its integrity predicates.

K4, K2,3 and K3,3 all have maximum degree 3, so for each of them containing
the graph as a minor is equivalent to containing a subdivision of it
(a homeomorph). All three are 2-connected, so any occurrence lies inside a
single biconnected component; every search below works block by block and
reports the block that contains the minor.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import networkx as nx

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

__all__ = [
    "augment_with_apex",
    "find_k4_block",
    "find_k23_block",
    "find_k33_block",
    "has_k4_minor",
    "has_k23_minor",
    "has_k33_minor",
    "is_outerplanar",
    "kuratowski_type",
    "series_parallel_core",
]

# Smallest vertex counts that can host each minor.
_K4_ORDER = 4
_K23_ORDER = 5
_K33_ORDER = 6


def augment_with_apex(graph: nx.Graph) -> tuple[nx.Graph, int]:
    """Return graph plus a new vertex adjacent to every vertex, and that vertex.

    A graph is outerplanar if and only if its apex augmentation is planar.
    The apex is labelled one past the largest existing label.
    """
    apex = max(graph.nodes, default=-1) + 1
    augmented = nx.Graph(graph)
    augmented.add_node(apex)
    augmented.add_edges_from((apex, v) for v in graph.nodes)
    return augmented, apex


def is_outerplanar(graph: nx.Graph) -> bool:
    """Check whether graph has an embedding with every vertex on the outer face."""
    augmented, _ = augment_with_apex(graph)
    is_planar, _ = nx.check_planarity(augmented)
    return is_planar


def series_parallel_core(graph: nx.Graph) -> set[int]:
    """Reduce graph by series and parallel reductions and return what remains.

    Repeatedly deletes vertices of degree at most 1 and suppresses vertices of
    degree 2 (replacing the path a-v-b by the edge a-b, merging it with an
    existing a-b edge). The result is empty exactly when graph has no K4
    minor; otherwise every remaining vertex has degree at least 3, and such a
    graph always contains a K4 subdivision.

    Complexity:
        Time: O(V + E) reductions, each O(1) amortized on adjacency sets
        Space: O(V + E)
    """
    adjacency: dict[int, set[int]] = {
        v: {w for w in graph.neighbors(v) if w != v} for v in graph.nodes
    }
    pending = [v for v, nbrs in adjacency.items() if len(nbrs) <= 2]

    while pending:
        v = pending.pop()
        nbrs = adjacency.get(v)
        if nbrs is None or len(nbrs) > 2:
            continue
        del adjacency[v]
        for w in nbrs:
            adjacency[w].discard(v)
        if len(nbrs) == 2:
            a, b = nbrs
            adjacency[a].add(b)
            adjacency[b].add(a)
        pending.extend(nbrs)

    return set(adjacency)


def _block_has_k4_minor(block: nx.Graph) -> bool:
    return bool(series_parallel_core(block))


def _is_k4(block: nx.Graph) -> bool:
    return block.number_of_nodes() == _K4_ORDER and block.number_of_edges() == 6


def _block_has_k23_minor(block: nx.Graph) -> bool:
    # A 2-connected graph without a K2,3 minor is outerplanar or is K4 itself.
    if block.number_of_nodes() < _K23_ORDER:
        return False
    return not (is_outerplanar(block) or _is_k4(block))


def _separation_pair(block: nx.Graph) -> tuple[int, int] | None:
    nodes = sorted(block.nodes)
    for index, u in enumerate(nodes):
        for v in nodes[index + 1 :]:
            rest = block.subgraph(w for w in nodes if w not in (u, v))
            if not nx.is_connected(rest):
                return u, v
    return None


def _block_has_k33_minor(block: nx.Graph) -> bool:
    """Decide K3,3 minor containment for a 2-connected graph.

    A 3-connected nonplanar graph other than K5 always contains a K3,3
    subdivision. Graphs with a separation pair {u, v} are split into pieces,
    one per component of block - {u, v}, each completed with the virtual edge
    u-v; a K3,3 minor (being 3-connected) survives in exactly one piece.
    """
    pending = [block]
    while pending:
        current = pending.pop()
        if current.number_of_nodes() < _K33_ORDER:
            continue
        is_planar, _ = nx.check_planarity(current)
        if is_planar:
            continue
        pair = _separation_pair(current)
        if pair is None:
            return True
        u, v = pair
        rest = current.subgraph(w for w in current.nodes if w not in pair)
        for component in nx.connected_components(rest):
            piece = nx.Graph(current.subgraph(component | {u, v}))
            piece.add_edge(u, v)
            pending.append(piece)
    return False


def _find_block(graph: nx.Graph, predicate: Callable[[nx.Graph], bool]) -> frozenset[int] | None:
    blocks: Iterable[set[int]] = nx.biconnected_components(graph)
    for nodes in sorted(blocks, key=min):
        block = nx.Graph(graph.subgraph(nodes))
        if predicate(block):
            return frozenset(nodes)
    return None


def find_k4_block(graph: nx.Graph) -> frozenset[int] | None:
    """Return the vertices of a biconnected component with a K4 minor, or None."""
    return _find_block(graph, _block_has_k4_minor)


def find_k23_block(graph: nx.Graph) -> frozenset[int] | None:
    """Return the vertices of a biconnected component with a K2,3 minor, or None."""
    return _find_block(graph, _block_has_k23_minor)


def find_k33_block(graph: nx.Graph) -> frozenset[int] | None:
    """Return the vertices of a biconnected component with a K3,3 minor, or None."""
    return _find_block(graph, _block_has_k33_minor)


def has_k4_minor(graph: nx.Graph) -> bool:
    """Check whether graph contains K4 as a minor (equivalently, a K4 homeomorph).

    Example:
        >>> has_k4_minor(nx.complete_graph(4))
        True
        >>> has_k4_minor(nx.cycle_graph(6))
        False
    """
    return bool(series_parallel_core(graph))


def has_k23_minor(graph: nx.Graph) -> bool:
    """Check whether graph contains K2,3 as a minor (equivalently, a K2,3 homeomorph).

    Example:
        >>> has_k23_minor(nx.complete_bipartite_graph(2, 3))
        True
        >>> has_k23_minor(nx.complete_graph(4))
        False
    """
    return find_k23_block(graph) is not None


def has_k33_minor(graph: nx.Graph) -> bool:
    """Check whether graph contains K3,3 as a minor (equivalently, a K3,3 homeomorph).

    Example:
        >>> has_k33_minor(nx.petersen_graph())
        True
        >>> has_k33_minor(nx.complete_graph(5))
        False
    """
    return find_k33_block(graph) is not None


def kuratowski_type(edges: Iterable[tuple[int, int]]) -> str | None:
    """Classify an edge set as a subdivision of K5 or K3,3.

    Suppresses every degree-2 vertex and compares what remains with K5 and
    K3,3.

    Returns:
        ``"K5"``, ``"K3,3"``, or None when the edges form neither
    """
    subdivision = nx.MultiGraph()
    subdivision.add_edges_from(edges)
    if subdivision.number_of_edges() == 0:
        return None

    for v in [v for v in subdivision.nodes if subdivision.degree(v) == 2]:
        ends = [w for _, w in subdivision.edges(v)]
        if v in ends:
            return None
        subdivision.remove_node(v)
        subdivision.add_edge(ends[0], ends[1])

    if nx.number_of_selfloops(subdivision):
        return None
    branch = nx.Graph(subdivision)
    if branch.number_of_edges() != subdivision.number_of_edges():
        return None
    if nx.is_isomorphic(branch, nx.complete_graph(5)):
        return "K5"
    if nx.is_isomorphic(branch, nx.complete_bipartite_graph(3, 3)):
        return "K3,3"
    return None
