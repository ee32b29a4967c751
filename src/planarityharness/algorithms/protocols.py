"""Capability interfaces the harness calls.

The harness never depends on a concrete algorithm implementation. It calls
an embedding capability for the embedding family of selectors and a coloring
capability for vertex coloring; each comes with the integrity predicate that
checks its output against the original graph.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .coloring import GreedyColoring
from .embedding import NetworkXEmbedder

if TYPE_CHECKING:
    from planarityharness.enums import EmbedMode, EmbedResult
    from planarityharness.graph.working import WorkingGraph

__all__ = ["AlgorithmSuite", "ColoringCapability", "EmbeddingCapability"]


@runtime_checkable
class EmbeddingCapability(Protocol):
    """Embedding-family algorithms and their integrity predicate."""

    def embed(self, graph: WorkingGraph, mode: EmbedMode) -> EmbedResult:
        """Run the algorithm selected by mode on graph, consuming it."""
        ...

    def test_embed_result_integrity(
        self, graph: WorkingGraph, original: WorkingGraph, result: EmbedResult
    ) -> EmbedResult:
        """Verify graph's embedding result against original.

        Returns result when the output is consistent with it, and a different
        code (normally NOTOK) otherwise.
        """
        ...


@runtime_checkable
class ColoringCapability(Protocol):
    """Vertex coloring and its integrity predicate."""

    def color_vertices(self, graph: WorkingGraph) -> EmbedResult:
        """Color graph's vertices, leaving the coloring on graph."""
        ...

    def color_vertices_integrity_check(self, graph: WorkingGraph, original: WorkingGraph) -> bool:
        """Verify graph's coloring is proper and graph still matches original."""
        ...

    def num_colors_used(self, graph: WorkingGraph) -> int:
        """Number of distinct colors in graph's coloring."""
        ...


@dataclass(frozen=True, slots=True)
class AlgorithmSuite:
    """Bundle of capabilities injected into a test session.

    Attributes:
        embedder: Embedding-family capability (default: networkx-backed)
        colorer: Coloring capability (default: smallest-last greedy)
    """

    embedder: EmbeddingCapability = field(default_factory=NetworkXEmbedder)
    colorer: ColoringCapability = field(default_factory=GreedyColoring)
