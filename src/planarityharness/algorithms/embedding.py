"""Embedding-family algorithms backed by networkx.

NetworkXEmbedder implements every EmbedMode:

- planarity and planar drawing via ``networkx.check_planarity``, leaving a
  rotation system (and, for drawing, straight-line coordinates) on the graph
  or a Kuratowski subgraph when the graph is not planar;
- outerplanarity by testing the apex augmentation for planarity;
- K2,3, K3,3 and K4 searches by block-wise minor detection, leaving the edge
  set of the offending biconnected component as the obstruction.

Before running, the embedder renumbers the graph into depth-first preorder,
as embedders traditionally do. Callers must sort the vertices back before
checking integrity.

Python 3.13+.
"""

from __future__ import annotations

import logging
from itertools import combinations
from typing import TYPE_CHECKING, TypeAlias

import networkx as nx

from planarityharness.analysis.minors import (
    augment_with_apex,
    find_k4_block,
    find_k23_block,
    find_k33_block,
    has_k4_minor,
    has_k23_minor,
    has_k33_minor,
    is_outerplanar,
    kuratowski_type,
)
from planarityharness.enums import EmbedMode, EmbedResult
from planarityharness.graph.working import normalize_edge

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    from planarityharness.graph.working import Edge, WorkingGraph

__all__ = ["NetworkXEmbedder", "rotation_system_to_embedding"]

logger = logging.getLogger(__name__)

Point: TypeAlias = tuple[float, float]


def rotation_system_to_embedding(data: Mapping[int, list[int]]) -> nx.PlanarEmbedding:
    """Rebuild a PlanarEmbedding from ``{vertex: clockwise neighbors}``.

    Isolated vertices are kept as nodes.
    """
    embedding = nx.PlanarEmbedding()
    embedding.add_nodes_from(data)
    embedding.set_data(data)
    return embedding


def _edge_set(edges: Iterable[tuple[int, int]]) -> frozenset[Edge]:
    return frozenset(normalize_edge(u, v) for u, v in edges)


def _orientation(a: Point, b: Point, c: Point) -> int:
    cross = (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])
    return (cross > 0) - (cross < 0)


def _on_segment(a: Point, b: Point, p: Point) -> bool:
    return min(a[0], b[0]) <= p[0] <= max(a[0], b[0]) and min(a[1], b[1]) <= p[1] <= max(
        a[1], b[1]
    )


def _segments_intersect(p1: Point, p2: Point, q1: Point, q2: Point) -> bool:
    o1 = _orientation(p1, p2, q1)
    o2 = _orientation(p1, p2, q2)
    o3 = _orientation(q1, q2, p1)
    o4 = _orientation(q1, q2, p2)
    if o1 != o2 and o3 != o4:
        return True
    return (
        (o1 == 0 and _on_segment(p1, p2, q1))
        or (o2 == 0 and _on_segment(p1, p2, q2))
        or (o3 == 0 and _on_segment(q1, q2, p1))
        or (o4 == 0 and _on_segment(q1, q2, p2))
    )


def _is_straight_line_drawing(positions: Mapping[int, Point], edges: frozenset[Edge]) -> bool:
    """Check that no two edges without a common endpoint touch."""
    for (a, b), (c, d) in combinations(sorted(edges), 2):
        if {a, b} & {c, d}:
            continue
        if _segments_intersect(positions[a], positions[b], positions[c], positions[d]):
            return False
    return True


class NetworkXEmbedder:
    """Embedding capability for every EmbedMode.

    Example:
        >>> from planarityharness.graph import WorkingGraph
        >>> g = WorkingGraph(3)
        >>> for u, v in [(0, 1), (1, 2), (0, 2)]:
        ...     g.add_edge(u, v)
        >>> NetworkXEmbedder().embed(g, EmbedMode.PLANAR)
        <EmbedResult.OK: 1>
    """

    __slots__ = ()

    def embed(self, graph: WorkingGraph, mode: EmbedMode) -> EmbedResult:
        graph.clear_annotations()
        graph.renumber(list(nx.dfs_preorder_nodes(graph.nx_graph)))
        graph.embed_mode = mode
        structure = graph.to_networkx()

        match mode:
            case EmbedMode.PLANAR | EmbedMode.DRAW_PLANAR:
                return self._embed_planar(graph, structure, draw=mode is EmbedMode.DRAW_PLANAR)
            case EmbedMode.OUTERPLANAR:
                return self._embed_outerplanar(graph, structure)
            case EmbedMode.SEARCH_K23:
                return self._search(graph, structure, find_k23_block)
            case EmbedMode.SEARCH_K33:
                return self._search(graph, structure, find_k33_block)
            case EmbedMode.SEARCH_K4:
                return self._search(graph, structure, find_k4_block)

    def _embed_planar(self, graph: WorkingGraph, structure: nx.Graph, *, draw: bool) -> EmbedResult:
        is_planar, certificate = nx.check_planarity(structure, counterexample=True)
        if not is_planar:
            graph.obstruction = _edge_set(certificate.edges())
            return EmbedResult.NONEMBEDDABLE
        graph.embedding = certificate.get_data()
        if draw:
            positions = nx.combinatorial_embedding_to_pos(
                rotation_system_to_embedding(graph.embedding)
            )
            graph.positions = {v: (float(x), float(y)) for v, (x, y) in positions.items()}
        return EmbedResult.OK

    def _embed_outerplanar(self, graph: WorkingGraph, structure: nx.Graph) -> EmbedResult:
        augmented, apex = augment_with_apex(structure)
        is_planar, certificate = nx.check_planarity(augmented, counterexample=True)
        if not is_planar:
            graph.obstruction = _edge_set(
                (u, v) for u, v in certificate.edges() if apex not in (u, v)
            )
            return EmbedResult.NONEMBEDDABLE
        # The apex sits in the outer face; its rotation stays in the embedding.
        graph.embedding = certificate.get_data()
        return EmbedResult.OK

    def _search(
        self,
        graph: WorkingGraph,
        structure: nx.Graph,
        finder: Callable[[nx.Graph], frozenset[int] | None],
    ) -> EmbedResult:
        block = finder(structure)
        if block is None:
            return EmbedResult.OK
        graph.obstruction = _edge_set(structure.subgraph(block).edges())
        return EmbedResult.NONEMBEDDABLE

    # ------------------------------------------------------------------
    # Integrity
    # ------------------------------------------------------------------

    def test_embed_result_integrity(
        self, graph: WorkingGraph, original: WorkingGraph, result: EmbedResult
    ) -> EmbedResult:
        if not graph.is_sorted:
            logger.debug("Integrity: vertices not restored to original order")
            return EmbedResult.NOTOK
        edges = original.edges()
        if graph.edges() != edges:
            logger.debug("Integrity: edge set differs from the original")
            return EmbedResult.NOTOK

        mode = graph.embed_mode
        match result, mode:
            case EmbedResult.OK, EmbedMode.PLANAR | EmbedMode.DRAW_PLANAR:
                consistent = self._check_planar_embedding(graph, edges) and (
                    mode is EmbedMode.PLANAR or self._check_drawing(graph, edges)
                )
            case EmbedResult.NONEMBEDDABLE, EmbedMode.PLANAR | EmbedMode.DRAW_PLANAR:
                obstruction = graph.obstruction
                consistent = (
                    obstruction is not None
                    and obstruction <= edges
                    and kuratowski_type(obstruction) is not None
                )
            case EmbedResult.OK, EmbedMode.OUTERPLANAR:
                consistent = self._check_outerplanar_embedding(graph, edges)
            case EmbedResult.NONEMBEDDABLE, EmbedMode.OUTERPLANAR:
                obstruction = graph.obstruction
                consistent = (
                    obstruction is not None
                    and obstruction <= edges
                    and not is_outerplanar(nx.Graph(list(obstruction)))
                )
            case EmbedResult.OK, EmbedMode.SEARCH_K23:
                consistent = graph.obstruction is None and not has_k23_minor(original.nx_graph)
            case EmbedResult.OK, EmbedMode.SEARCH_K33:
                consistent = graph.obstruction is None and not has_k33_minor(original.nx_graph)
            case EmbedResult.OK, EmbedMode.SEARCH_K4:
                consistent = graph.obstruction is None and not has_k4_minor(original.nx_graph)
            case EmbedResult.NONEMBEDDABLE, EmbedMode.SEARCH_K23:
                consistent = self._check_block(graph, edges, has_k23_minor)
            case EmbedResult.NONEMBEDDABLE, EmbedMode.SEARCH_K33:
                consistent = self._check_block(graph, edges, has_k33_minor)
            case EmbedResult.NONEMBEDDABLE, EmbedMode.SEARCH_K4:
                consistent = self._check_block(graph, edges, has_k4_minor)
            case _:
                consistent = False

        if not consistent:
            logger.debug("Integrity: %s result inconsistent for mode %s", result.name, mode)
            return EmbedResult.NOTOK
        return result

    @staticmethod
    def _check_planar_embedding(graph: WorkingGraph, edges: frozenset[Edge]) -> bool:
        if graph.embedding is None:
            return False
        try:
            embedding = rotation_system_to_embedding(graph.embedding)
            embedding.check_structure()
        except nx.NetworkXException:
            return False
        return (
            set(embedding.nodes) == set(range(graph.vertex_count))
            and _edge_set(embedding.edges()) == edges
        )

    @staticmethod
    def _check_drawing(graph: WorkingGraph, edges: frozenset[Edge]) -> bool:
        positions = graph.positions
        if positions is None or set(positions) != set(range(graph.vertex_count)):
            return False
        if len(set(positions.values())) != len(positions):
            return False
        return _is_straight_line_drawing(positions, edges)

    @staticmethod
    def _check_outerplanar_embedding(graph: WorkingGraph, edges: frozenset[Edge]) -> bool:
        if graph.embedding is None:
            return False
        apex = graph.vertex_count
        try:
            embedding = rotation_system_to_embedding(graph.embedding)
            embedding.check_structure()
        except nx.NetworkXException:
            return False
        embedded = _edge_set(embedding.edges())
        apex_edges = {normalize_edge(v, apex) for v in range(graph.vertex_count)}
        return apex_edges <= embedded and embedded - apex_edges == edges

    @staticmethod
    def _check_block(
        graph: WorkingGraph, edges: frozenset[Edge], has_minor: Callable[[nx.Graph], bool]
    ) -> bool:
        obstruction = graph.obstruction
        if not obstruction or not obstruction <= edges:
            return False
        block = nx.Graph(list(obstruction))
        return nx.is_biconnected(block) and has_minor(block)
