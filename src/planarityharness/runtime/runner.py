"""Per-candidate execution: populate, count, copy, execute, classify.

Each selector's run ends in a TestOutcome. Accepted and rejected outcomes are
legitimate answers; a failed outcome carries a Failure describing what went
wrong and which candidate triggered it. Exceptions raised by the graph layer
or by algorithm capabilities are converted into Failure values here and
logged; nothing propagates out of the runner.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, assert_never

import networkx as nx

from planarityharness.constants import MATRIX_ARTIFACT_NAME
from planarityharness.enums import (
    EmbedResult,
    FailureKind,
    OutcomeStatus,
    Selector,
    TransferStatus,
)
from planarityharness.graph.errors import GraphError
from planarityharness.graph.transfer import transfer_graph
from planarityharness.integrity import (
    CounterOverflowError,
    GraphCopyError,
    GraphCorruptionError,
    HarnessIntegrityError,
)

if TYPE_CHECKING:
    from planarityharness.algorithms.protocols import AlgorithmSuite
    from planarityharness.graph.bitmatrix import BitMatrixGraph
    from planarityharness.runtime.config import HarnessConfig
    from planarityharness.runtime.context import AlgorithmResult, TestContext

__all__ = ["Failure", "TestOutcome", "populate_originals", "run_selectors", "run_test"]

logger = logging.getLogger(__name__)

# Exceptions an algorithm capability may raise while running or checking.
_CAPABILITY_ERRORS = (GraphError, HarnessIntegrityError, nx.NetworkXException)


@dataclass(frozen=True, slots=True)
class Failure:
    """Structured description of a fatal failure.

    Attributes:
        kind: Failure category
        candidate: Ordinal of the candidate graph (1-based)
        selector: Selector being processed, or None before any selector ran
        message: Primary user-facing message
    """

    kind: FailureKind
    candidate: int
    selector: Selector | None
    message: str

    @property
    def lines(self) -> tuple[str, ...]:
        """Messages written to the output stream for this failure."""
        if self.kind is FailureKind.INTEGRITY:
            return (self.message, _run_test_failed(self.candidate))
        return (self.message,)

    @property
    def dumps_adjacency_list(self) -> bool:
        """True when the original graph was populated and is worth dumping."""
        return self.kind not in (
            FailureKind.ALLOCATION,
            FailureKind.TRANSFER,
            FailureKind.CORRUPTION,
        )


@dataclass(frozen=True, slots=True)
class TestOutcome:
    """Outcome of running one selector against one candidate.

    Attributes:
        selector: Selector that ran
        status: Accepted, rejected by the algorithm, or failed
        result: Raw capability result, when the algorithm got to run
        failure: Failure details, set only when status is FAILED
    """

    __test__ = False  # not a pytest test class

    selector: Selector
    status: OutcomeStatus
    result: EmbedResult | None = None
    failure: Failure | None = None

    @property
    def is_failure(self) -> bool:
        """True when the outcome raises the session error flag."""
        return self.status is OutcomeStatus.FAILED


def _run_test_failed(candidate: int) -> str:
    return f"Failed to runTest() on graph #{candidate}."


def _failed(
    selector: Selector, kind: FailureKind, candidate: int, message: str, result: EmbedResult | None = None
) -> TestOutcome:
    return TestOutcome(
        selector=selector,
        status=OutcomeStatus.FAILED,
        result=result,
        failure=Failure(kind=kind, candidate=candidate, selector=selector, message=message),
    )


def populate_originals(context: TestContext, matrix: BitMatrixGraph) -> Failure | None:
    """Fill every original graph of context with the candidate.

    Selector 0 receives the bit-matrix transfer. Every other selector's
    original is reinitialized and filled by adjacency-list copy from
    selector 0's original, before any algorithm runs.

    Returns:
        None on success, or the Failure that aborts this candidate
    """
    primary = context.primary
    candidate = primary.total.graphs_seen + 1

    try:
        status = transfer_graph(matrix, primary.original)
    except HarnessIntegrityError as e:
        kind = FailureKind.CORRUPTION if isinstance(e, GraphCorruptionError) else FailureKind.TRANSFER
        logger.error("Transfer of candidate %d failed: %s", candidate, e)
        return Failure(
            kind=kind,
            candidate=candidate,
            selector=primary.selector,
            message=f"Failed to initialize with generated graph in {MATRIX_ARTIFACT_NAME}",
        )
    if status is TransferStatus.SHORTFALL:
        logger.warning(
            "Candidate %d truncated to %d edges by edge capacity %d",
            candidate,
            primary.original.edge_count,
            primary.original.edge_capacity,
        )

    for result in context.results[1:]:
        result.original.reinitialize()
        try:
            result.original.copy_adjacency_lists(primary.original)
        except GraphCopyError as e:
            logger.error("Adjacency-list copy for %s failed: %s", result.selector.name, e)
            return Failure(
                kind=FailureKind.TRANSFER,
                candidate=candidate,
                selector=result.selector,
                message="Failed to copy adjacency lists",
            )
    return None


def run_test(result: AlgorithmResult, suite: AlgorithmSuite, config: HarnessConfig) -> TestOutcome:
    """Run result's selector against its populated original graph.

    Counts the candidate, copies the original into the working graph,
    executes and verifies the algorithm, and records an OK result.
    """
    selector = result.selector
    original = result.original
    edge_count = original.edge_count

    try:
        result.count_seen(edge_count, config.counter_limit)
    except CounterOverflowError as e:
        logger.error("Counter overflow for %s: %s", selector.name, e)
        return _failed(
            selector,
            FailureKind.COUNTER_OVERFLOW,
            result.total.graphs_seen + 1,
            "Exceeded maximum number of supported graphs",
        )
    candidate = result.total.graphs_seen

    try:
        result.working.copy_from(original)
    except GraphCopyError as e:
        logger.error("Copy of graph #%d for %s failed: %s", candidate, selector.name, e)
        return _failed(selector, FailureKind.COPY, candidate, f"Failed to copy graph #{candidate}")

    match selector:
        case Selector.VERTEX_COLORING:
            outcome = _run_coloring(result, suite, config, candidate)
        case (
            Selector.PLANARITY
            | Selector.DRAWING
            | Selector.OUTERPLANARITY
            | Selector.SEARCH_K23
            | Selector.SEARCH_K33
            | Selector.SEARCH_K4
        ):
            outcome = _run_embedding(result, suite, candidate)
        case unreachable:
            assert_never(unreachable)

    if outcome.status is OutcomeStatus.ACCEPTED:
        result.count_ok(edge_count)
    logger.debug(
        "Graph #%d (%d edges) %s: %s", candidate, edge_count, selector.name, outcome.status
    )
    return outcome


def _run_coloring(
    result: AlgorithmResult, suite: AlgorithmSuite, config: HarnessConfig, candidate: int
) -> TestOutcome:
    selector = result.selector
    colorer = suite.colorer
    working = result.working

    try:
        code = colorer.color_vertices(working)
    except _CAPABILITY_ERRORS as e:
        logger.error("Coloring raised on graph #%d: %s", candidate, e)
        code = EmbedResult.NOTOK
    if code is not EmbedResult.OK:
        return _failed(selector, FailureKind.EXECUTION, candidate, _run_test_failed(candidate), code)

    try:
        consistent = colorer.color_vertices_integrity_check(working, result.original)
    except _CAPABILITY_ERRORS as e:
        logger.error("Coloring integrity check raised on graph #%d: %s", candidate, e)
        consistent = False
    if not consistent:
        return _failed(
            selector,
            FailureKind.INTEGRITY,
            candidate,
            f"Integrity check failed on graph #{candidate}.",
            code,
        )

    if colorer.num_colors_used(working) >= config.color_threshold:
        return TestOutcome(selector, OutcomeStatus.REJECTED_BY_ALGORITHM, EmbedResult.NONEMBEDDABLE)
    return TestOutcome(selector, OutcomeStatus.ACCEPTED, EmbedResult.OK)


def _run_embedding(result: AlgorithmResult, suite: AlgorithmSuite, candidate: int) -> TestOutcome:
    selector = result.selector
    mode = selector.embed_mode
    embedder = suite.embedder
    working = result.working
    if mode is None:
        return _failed(selector, FailureKind.EXECUTION, candidate, _run_test_failed(candidate))

    try:
        code = embedder.embed(working, mode)
    except _CAPABILITY_ERRORS as e:
        logger.error("Embedding raised on graph #%d: %s", candidate, e)
        code = EmbedResult.NOTOK
    if code not in (EmbedResult.OK, EmbedResult.NONEMBEDDABLE):
        return _failed(selector, FailureKind.EXECUTION, candidate, _run_test_failed(candidate), code)

    try:
        working.sort_vertices()
        verdict = embedder.test_embed_result_integrity(working, result.original, code)
    except _CAPABILITY_ERRORS as e:
        logger.error("Embedding integrity check raised on graph #%d: %s", candidate, e)
        verdict = EmbedResult.NOTOK
    if verdict is not code:
        return _failed(
            selector,
            FailureKind.INTEGRITY,
            candidate,
            f"Integrity check failed on graph #{candidate}.",
            code,
        )

    if code is EmbedResult.OK:
        return TestOutcome(selector, OutcomeStatus.ACCEPTED, code)
    return TestOutcome(selector, OutcomeStatus.REJECTED_BY_ALGORITHM, code)


def run_selectors(
    context: TestContext, suite: AlgorithmSuite, config: HarnessConfig
) -> tuple[TestOutcome, ...]:
    """Run every selector of context in order, stopping at the first failure."""
    outcomes: list[TestOutcome] = []
    for result in context.results:
        outcome = run_test(result, suite, config)
        outcomes.append(outcome)
        if outcome.is_failure:
            break
    return tuple(outcomes)
