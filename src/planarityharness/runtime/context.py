"""Per-run test context: one AlgorithmResult per active selector.

Each AlgorithmResult owns an original graph (the canonical copy of the
current candidate) and a working graph (the scratch copy an algorithm
consumes), plus statistics broken down by edge count. The context is sized
once, for the vertex count of the first candidate, and its graphs are
reinitialized rather than reallocated for every later candidate.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from planarityharness.constants import MAXN, complete_edge_count
from planarityharness.graph.working import WorkingGraph
from planarityharness.integrity import (
    ContextAllocationError,
    CounterOverflowError,
    FailureContext,
)

if TYPE_CHECKING:
    from planarityharness.enums import Selector
    from planarityharness.runtime.config import HarnessConfig

__all__ = ["AlgorithmResult", "Tally", "TestContext", "acquire_context"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Tally:
    """Counter pair: graphs seen and graphs with an OK result."""

    graphs_seen: int = 0
    graphs_ok: int = 0

    @property
    def graphs_rejected(self) -> int:
        """Graphs seen without an OK result."""
        return self.graphs_seen - self.graphs_ok


@dataclass(slots=True)
class AlgorithmResult:
    """Graphs and statistics for one selector.

    Attributes:
        selector: Selector this slot runs
        original: Canonical copy of the current candidate; algorithms never
            touch it
        working: Scratch graph consumed by each algorithm run
        total: Grand-total counters
        buckets: Counters indexed by edge count, ``0 .. n(n-1)/2``
    """

    selector: Selector
    original: WorkingGraph
    working: WorkingGraph
    total: Tally = field(default_factory=Tally)
    buckets: list[Tally] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.buckets:
            edge_slots = complete_edge_count(self.original.vertex_count) + 1
            self.buckets = [Tally() for _ in range(edge_slots)]

    def count_seen(self, edge_count: int, counter_limit: int) -> None:
        """Count one more graph with edge_count edges.

        The grand total and the bucket move together, or not at all.

        Raises:
            CounterOverflowError: If the grand total would exceed counter_limit
        """
        if self.total.graphs_seen + 1 > counter_limit:
            msg = f"graphs_seen would exceed {counter_limit}"
            raise CounterOverflowError(
                msg,
                FailureContext(
                    component="context",
                    operation="count",
                    selector=self.selector.value,
                    detail=f"edges={edge_count}",
                ),
                limit=counter_limit,
            )
        self.total.graphs_seen += 1
        self.buckets[edge_count].graphs_seen += 1

    def count_ok(self, edge_count: int) -> None:
        """Record an OK result for a graph already counted by count_seen."""
        self.total.graphs_ok += 1
        self.buckets[edge_count].graphs_ok += 1

    def bucket(self, edge_count: int) -> Tally:
        """Counters for graphs with edge_count edges."""
        return self.buckets[edge_count]


@dataclass(slots=True)
class TestContext:
    """Ordered AlgorithmResults for a run, sized for one vertex count.

    Attributes:
        vertex_count: Vertex count the graphs were allocated for
        min_edges: Smallest edge count in the report
        max_edges: Largest edge count in the report
        results: One AlgorithmResult per selector, in execution order
    """

    __test__ = False  # not a pytest test class

    vertex_count: int
    min_edges: int
    max_edges: int
    results: tuple[AlgorithmResult, ...]

    @property
    def primary(self) -> AlgorithmResult:
        """Selector 0, which receives the bit-matrix transfer."""
        return self.results[0]


def acquire_context(config: HarnessConfig, vertex_count: int) -> TestContext:
    """Allocate the test context for a run on vertex_count-vertex candidates.

    Raises:
        ContextAllocationError: If vertex_count is outside ``1..MAXN`` or the
            configured edge range or capacity does not fit vertex_count
    """
    complete = complete_edge_count(vertex_count)
    problem: str | None = None
    if not 1 <= vertex_count <= MAXN:
        problem = f"vertex count {vertex_count} outside 1..{MAXN}"
    elif config.resolved_max_edges(vertex_count) > complete:
        problem = f"max_edges {config.max_edges} exceeds {complete} possible edges"
    elif config.min_edges > complete:
        problem = f"min_edges {config.min_edges} exceeds {complete} possible edges"
    elif config.resolved_edge_capacity(vertex_count) > complete:
        problem = f"edge_capacity {config.edge_capacity} exceeds {complete} possible edges"
    if problem is not None:
        raise ContextAllocationError(
            problem,
            FailureContext(
                component="context",
                operation="acquire",
                selector=config.command,
                detail=f"n={vertex_count}",
            ),
        )

    capacity = config.resolved_edge_capacity(vertex_count)
    results = tuple(
        AlgorithmResult(
            selector=selector,
            original=WorkingGraph.with_edge_capacity(vertex_count, capacity),
            working=WorkingGraph.with_edge_capacity(vertex_count, capacity),
        )
        for selector in config.selectors
    )
    logger.info(
        "Allocated test context: n=%d, %d selector(s), edge capacity %d",
        vertex_count,
        len(results),
        capacity,
    )
    return TestContext(
        vertex_count=vertex_count,
        min_edges=config.min_edges,
        max_edges=config.resolved_max_edges(vertex_count),
        results=results,
    )
