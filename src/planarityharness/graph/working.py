"""Native mutable graph structure used as the algorithm execution target.

WorkingGraph wraps a ``networkx.Graph`` with the allocation semantics the
harness relies on:

- a fixed vertex count, vertices numbered ``0..n-1``;
- a fixed arc capacity (two arcs per undirected edge) that makes
  ``add_edge`` refuse once full;
- reinitialization to empty without reallocation;
- full copy between identically allocated graphs and adjacency-list copy
  between differently allocated ones;
- DFS renumbering (as embedders do) and the canonical sort that undoes it;
- the adjacency-list text form used for failure artifacts.

Algorithms also leave their results on the graph as annotations: a rotation
system, drawing positions, an obstruction edge set, or a vertex coloring.

Python 3.13+.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, TypeAlias

import networkx as nx

from planarityharness.constants import ARCS_PER_EDGE, complete_edge_count
from planarityharness.enums import EmbedMode
from planarityharness.graph.errors import EdgeCapacityError, GraphError
from planarityharness.integrity import FailureContext, GraphCopyError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

__all__ = ["Edge", "WorkingGraph", "normalize_edge"]

Edge: TypeAlias = tuple[int, int]


def normalize_edge(u: int, v: int) -> Edge:
    """Return the undirected edge (u, v) with the smaller endpoint first."""
    return (u, v) if u < v else (v, u)


class WorkingGraph:
    """Mutable undirected simple graph with fixed vertex and arc capacity.

    Attributes:
        embedding: Rotation system ``{vertex: neighbors in clockwise order}``
            left by an embedder, or None
        positions: Drawing coordinates ``{vertex: (x, y)}``, or None
        obstruction: Edge set of an obstruction isolated by an algorithm, or None
        colors: Vertex coloring ``{vertex: color}``, or None
        embed_mode: Embedding mode that produced the annotations, or None

    Example:
        >>> g = WorkingGraph(3)
        >>> g.add_edge(0, 1)
        >>> g.add_edge(1, 2)
        >>> print(g.to_adjacency_list())
        N=3
        0: 1 -1
        1: 0 2 -1
        2: 1 -1
    """

    __slots__ = (
        "_arc_capacity",
        "_graph",
        "_labels",
        "_vertex_count",
        "colors",
        "embed_mode",
        "embedding",
        "obstruction",
        "positions",
    )

    def __init__(self, vertex_count: int, *, arc_capacity: int | None = None) -> None:
        """Allocate an empty graph.

        Args:
            vertex_count: Number of vertices
            arc_capacity: Maximum number of arcs (two per edge); defaults to
                the arc count of the complete graph on vertex_count vertices

        Raises:
            ValueError: If vertex_count is negative or arc_capacity is
                negative or odd
        """
        if vertex_count < 0:
            msg = f"vertex_count must be non-negative, got {vertex_count}"
            raise ValueError(msg)
        if arc_capacity is None:
            arc_capacity = ARCS_PER_EDGE * complete_edge_count(vertex_count)
        if arc_capacity < 0 or arc_capacity % ARCS_PER_EDGE:
            msg = f"arc_capacity must be a non-negative multiple of {ARCS_PER_EDGE}"
            raise ValueError(msg)

        self._vertex_count = vertex_count
        self._arc_capacity = arc_capacity
        self._graph: nx.Graph = nx.Graph()
        self._labels: list[int] = []
        self.embedding: dict[int, list[int]] | None = None
        self.positions: dict[int, tuple[float, float]] | None = None
        self.obstruction: frozenset[Edge] | None = None
        self.colors: dict[int, int] | None = None
        self.embed_mode: EmbedMode | None = None
        self.reinitialize()

    @classmethod
    def with_edge_capacity(cls, vertex_count: int, edge_capacity: int) -> WorkingGraph:
        """Allocate a graph that holds at most edge_capacity edges."""
        return cls(vertex_count, arc_capacity=ARCS_PER_EDGE * edge_capacity)

    # ------------------------------------------------------------------
    # Allocation properties
    # ------------------------------------------------------------------

    @property
    def vertex_count(self) -> int:
        """Number of vertices."""
        return self._vertex_count

    @property
    def arc_capacity(self) -> int:
        """Maximum number of arcs."""
        return self._arc_capacity

    @property
    def edge_capacity(self) -> int:
        """Maximum number of undirected edges."""
        return self._arc_capacity // ARCS_PER_EDGE

    @property
    def has_full_capacity(self) -> bool:
        """True when the graph can hold the complete graph on its vertices."""
        return self.edge_capacity == complete_edge_count(self._vertex_count)

    @property
    def edge_count(self) -> int:
        """Number of edges currently present."""
        return self._graph.number_of_edges()

    @property
    def nx_graph(self) -> nx.Graph:
        """Read-only networkx view of the current structure."""
        return self._graph.copy(as_view=True)

    def to_networkx(self) -> nx.Graph:
        """Independent mutable networkx copy of the current structure."""
        return nx.Graph(self._graph)

    @property
    def is_sorted(self) -> bool:
        """True when vertex ``k`` is the k-th vertex of the original numbering."""
        return all(label == index for index, label in enumerate(self._labels))

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def reinitialize(self) -> None:
        """Reset to the empty graph on the same vertices, keeping capacity."""
        self._graph = nx.Graph()
        self._graph.add_nodes_from(range(self._vertex_count))
        self._labels = list(range(self._vertex_count))
        self.clear_annotations()

    def clear_annotations(self) -> None:
        """Drop any results left by a previous algorithm run."""
        self.embedding = None
        self.positions = None
        self.obstruction = None
        self.colors = None
        self.embed_mode = None

    def add_edge(self, u: int, v: int) -> None:
        """Insert the undirected edge (u, v).

        Raises:
            GraphError: If an endpoint is out of range, the edge is a loop,
                or the edge already exists
            EdgeCapacityError: If the arc capacity is exhausted
        """
        self._check_vertex(u)
        self._check_vertex(v)
        if u == v:
            msg = f"loop at vertex {u} not supported"
            raise GraphError(msg)
        if self._graph.has_edge(u, v):
            msg = f"edge ({u}, {v}) already present"
            raise GraphError(msg)
        if ARCS_PER_EDGE * (self.edge_count + 1) > self._arc_capacity:
            msg = f"arc capacity {self._arc_capacity} exhausted adding ({u}, {v})"
            raise EdgeCapacityError(msg, arc_capacity=self._arc_capacity)
        self._graph.add_edge(u, v)

    def copy_from(self, source: WorkingGraph) -> None:
        """Make this graph an exact copy of source, annotations included.

        Both graphs must have the same allocation.

        Raises:
            GraphCopyError: If vertex count or arc capacity differ
        """
        if source is self:
            return
        if (
            source.vertex_count != self._vertex_count
            or source.arc_capacity != self._arc_capacity
        ):
            msg = "full copy requires identically allocated graphs"
            raise GraphCopyError(
                msg,
                FailureContext(
                    component="graph",
                    operation="copy_from",
                    detail=(
                        f"source n={source.vertex_count} arcs={source.arc_capacity}, "
                        f"target n={self._vertex_count} arcs={self._arc_capacity}"
                    ),
                ),
            )
        self._graph = source._graph.copy()
        self._labels = list(source._labels)
        self.embedding = (
            {v: list(nbrs) for v, nbrs in source.embedding.items()}
            if source.embedding is not None
            else None
        )
        self.positions = dict(source.positions) if source.positions is not None else None
        self.obstruction = source.obstruction
        self.colors = dict(source.colors) if source.colors is not None else None
        self.embed_mode = source.embed_mode

    def copy_adjacency_lists(self, source: WorkingGraph) -> None:
        """Replace this graph's edges with source's edges.

        Unlike copy_from, the two graphs may have different arc capacities
        as long as source's edges fit. Annotations are not copied.

        Raises:
            GraphCopyError: If vertex counts differ or source has more edges
                than this graph can hold
        """
        if source.vertex_count != self._vertex_count:
            msg = "adjacency-list copy requires equal vertex counts"
            raise GraphCopyError(
                msg,
                FailureContext(
                    component="graph",
                    operation="copy_adjacency_lists",
                    detail=f"source n={source.vertex_count}, target n={self._vertex_count}",
                ),
            )
        if ARCS_PER_EDGE * source.edge_count > self._arc_capacity:
            msg = "adjacency-list copy exceeds target arc capacity"
            raise GraphCopyError(
                msg,
                FailureContext(
                    component="graph",
                    operation="copy_adjacency_lists",
                    detail=f"source edges={source.edge_count}, target arcs={self._arc_capacity}",
                ),
            )
        self._graph.clear_edges()
        self._graph.add_edges_from(source._graph.edges())
        self._labels = list(source._labels)
        self.clear_annotations()

    # ------------------------------------------------------------------
    # Vertex ordering
    # ------------------------------------------------------------------

    def renumber(self, order: Sequence[int]) -> None:
        """Relabel vertices so that ``order[k]`` becomes vertex ``k``.

        Embedders renumber into depth-first order before they run;
        sort_vertices() restores the original numbering.

        Raises:
            GraphError: If order is not a permutation of the vertices
        """
        if sorted(order) != list(range(self._vertex_count)):
            msg = "renumbering order must be a permutation of the vertices"
            raise GraphError(msg)
        mapping = {old: new for new, old in enumerate(order)}
        self._labels = [self._labels[old] for old in order]
        self._relabel(mapping)

    def sort_vertices(self) -> None:
        """Restore the original vertex numbering after a renumbering."""
        if self.is_sorted:
            return
        mapping = dict(enumerate(self._labels))
        self._labels = list(range(self._vertex_count))
        self._relabel(mapping)

    def _relabel(self, mapping: Mapping[int, int]) -> None:
        self._graph = nx.relabel_nodes(self._graph, mapping, copy=True)

        def label(v: int) -> int:
            # Auxiliary vertices (such as an apex) lie outside the mapping.
            return mapping.get(v, v)

        if self.embedding is not None:
            self.embedding = {
                label(v): [label(w) for w in nbrs] for v, nbrs in self.embedding.items()
            }
        if self.positions is not None:
            self.positions = {label(v): xy for v, xy in self.positions.items()}
        if self.obstruction is not None:
            self.obstruction = frozenset(normalize_edge(label(u), label(v)) for u, v in self.obstruction)
        if self.colors is not None:
            self.colors = {label(v): color for v, color in self.colors.items()}

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_edge(self, u: int, v: int) -> bool:
        """Check whether the edge (u, v) is present."""
        return self._graph.has_edge(u, v)

    def neighbors(self, v: int) -> list[int]:
        """Neighbors of v in ascending order."""
        self._check_vertex(v)
        return sorted(self._graph.neighbors(v))

    def degree(self, v: int) -> int:
        """Degree of v."""
        self._check_vertex(v)
        return self._graph.degree(v)

    def degrees(self) -> tuple[int, ...]:
        """Degree of every vertex, by vertex index."""
        return tuple(self._graph.degree(v) for v in range(self._vertex_count))

    def edges(self) -> frozenset[Edge]:
        """Edge set with each edge normalized to (smaller, larger)."""
        return frozenset(normalize_edge(u, v) for u, v in self._graph.edges())

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < self._vertex_count:
            msg = f"vertex {v} out of range for {self._vertex_count} vertices"
            raise GraphError(msg)

    # ------------------------------------------------------------------
    # Adjacency-list text form
    # ------------------------------------------------------------------

    def to_adjacency_list(self) -> str:
        """Serialize as ``N=<n>`` followed by ``v: <neighbors> -1`` lines."""
        lines = [f"N={self._vertex_count}"]
        for v in range(self._vertex_count):
            tokens = [*self.neighbors(v), -1]
            lines.append(f"{v}: {' '.join(str(t) for t in tokens)}")
        return "\n".join(lines)

    def write_adjacency_list(self, path: str | Path) -> Path:
        """Write the adjacency-list text form to path and return the path."""
        target = Path(path)
        target.write_text(self.to_adjacency_list() + "\n", encoding="utf-8")
        return target

    @classmethod
    def from_adjacency_list(
        cls, text: str | Iterable[str], *, arc_capacity: int | None = None
    ) -> WorkingGraph:
        """Parse the adjacency-list text form.

        Args:
            text: Serialized graph, as one string or as lines
            arc_capacity: Arc capacity of the new graph (default: complete graph)

        Raises:
            ValueError: If the header or a vertex line is malformed
            GraphError: If a line names an invalid edge
        """
        lines = text.splitlines() if isinstance(text, str) else list(text)
        content = [line.strip() for line in lines if line.strip()]
        if not content or not content[0].startswith("N="):
            msg = "adjacency list must start with an N=<vertex count> header"
            raise ValueError(msg)
        graph = cls(int(content[0][2:]), arc_capacity=arc_capacity)
        for line in content[1:]:
            head, _, tail = line.partition(":")
            v = int(head)
            for token in tail.split():
                w = int(token)
                if w == -1:
                    break
                if not graph.has_edge(v, w):
                    graph.add_edge(v, w)
        return graph

    @classmethod
    def read_adjacency_list(cls, path: str | Path, *, arc_capacity: int | None = None) -> WorkingGraph:
        """Read a graph written by write_adjacency_list."""
        return cls.from_adjacency_list(
            Path(path).read_text(encoding="utf-8"), arc_capacity=arc_capacity
        )

    def __repr__(self) -> str:
        """Return compact representation for debugging."""
        return (
            f"WorkingGraph(n={self._vertex_count}, m={self.edge_count}, "
            f"arc_capacity={self._arc_capacity})"
        )
