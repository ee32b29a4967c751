"""Test session: the run object a graph generator drives.

A TestSession owns everything one run needs: its configuration, the
algorithm suite, the lazily allocated TestContext, the failure reporter and
the error counter. The generator calls process_candidate() once per
candidate and finish() once at the end. Once any candidate fails, later
candidates are skipped until finish() resets the session.

Sessions share no state, so independent runs (or threads that each own a
session) do not interfere.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, TextIO

from planarityharness.algorithms.protocols import AlgorithmSuite
from planarityharness.constants import ADJLIST_ARTIFACT_NAME, MATRIX_ARTIFACT_NAME
from planarityharness.diagnostics.artifacts import FailureReporter, read_matrix_graph
from planarityharness.diagnostics.report import format_report
from planarityharness.enums import FailureKind, RunStatus, Selector
from planarityharness.integrity import ContextAllocationError
from planarityharness.runtime.config import HarnessConfig
from planarityharness.runtime.context import Tally, TestContext, acquire_context
from planarityharness.runtime.runner import Failure, TestOutcome, populate_originals, run_selectors

if TYPE_CHECKING:
    from collections.abc import Iterable

    from planarityharness.graph.bitmatrix import BitMatrixGraph

__all__ = [
    "CandidateReport",
    "RunSummary",
    "TestSession",
    "replay_matrix_artifact",
    "run_candidates",
]

logger = logging.getLogger(__name__)

_ALLOCATION_MESSAGE = "Unable to create the test framework."
_SEE_ARTIFACTS = f"See {ADJLIST_ARTIFACT_NAME} and {MATRIX_ARTIFACT_NAME}"


@dataclass(frozen=True, slots=True)
class CandidateReport:
    """What happened to one candidate.

    Attributes:
        skipped: True when an earlier failure suppressed processing
        outcomes: One TestOutcome per selector that ran, in order
        failure: The failure that ended processing of this candidate, if any
        artifacts: Paths of the failure artifacts written for it
    """

    skipped: bool = False
    outcomes: tuple[TestOutcome, ...] = ()
    failure: Failure | None = None
    artifacts: tuple[Path, ...] = ()

    @property
    def ok(self) -> bool:
        """True when the candidate was processed without failure."""
        return not self.skipped and self.failure is None


@dataclass(frozen=True, slots=True)
class RunSummary:
    """Final counts of a run.

    Attributes:
        status: SUCCESS, or ERROR if any candidate failed
        error_count: Number of failures recorded
        graphs_seen: Selector 0's grand-total graphs seen
        graphs_ok: Selector 0's grand-total OK results
        totals: Grand-total counters per selector
        report: Text of the final statistics tables
    """

    status: RunStatus
    error_count: int = 0
    graphs_seen: int = 0
    graphs_ok: int = 0
    totals: MappingProxyType[Selector, Tally] = field(
        default_factory=lambda: MappingProxyType({})
    )
    report: str = ""


class TestSession:
    """Explicit state of one harness run.

    Example:
        >>> import io
        >>> from planarityharness.graph import BitMatrixGraph
        >>> session = TestSession(HarnessConfig(quiet=True))
        >>> triangle = BitMatrixGraph.from_edges(3, [(0, 1), (0, 2), (1, 2)])
        >>> session.process_candidate(io.StringIO(), triangle, 3).ok
        True
        >>> session.finish(io.StringIO()).graphs_ok
        1
    """

    __test__ = False  # not a pytest test class

    __slots__ = ("_config", "_context", "_error_count", "_reporter", "_suite")

    def __init__(
        self,
        config: HarnessConfig | None = None,
        suite: AlgorithmSuite | None = None,
        reporter: FailureReporter | None = None,
    ) -> None:
        self._config = config if config is not None else HarnessConfig()
        self._suite = suite if suite is not None else AlgorithmSuite()
        self._reporter = (
            reporter
            if reporter is not None
            else FailureReporter(self._config.artifact_dir, enabled=self._config.write_artifacts)
        )
        self._context: TestContext | None = None
        self._error_count = 0

    @property
    def config(self) -> HarnessConfig:
        """Run configuration."""
        return self._config

    @property
    def context(self) -> TestContext | None:
        """Allocated test context, or None before the first candidate."""
        return self._context

    @property
    def error_count(self) -> int:
        """Number of failures recorded since the last finish()."""
        return self._error_count

    @property
    def error_found(self) -> bool:
        """True once any failure occurred; later candidates are skipped."""
        return self._error_count > 0

    def process_candidate(
        self, stream: TextIO, matrix: BitMatrixGraph, vertex_count: int
    ) -> CandidateReport:
        """Run the configured selectors against one candidate.

        Args:
            stream: Output stream for progress and failure messages
            matrix: Candidate graph, read only during this call
            vertex_count: Vertex count of the candidates in this run

        Returns:
            CandidateReport describing the outcome
        """
        if self.error_found:
            return CandidateReport(skipped=True)

        if self._context is None:
            try:
                self._context = acquire_context(self._config, vertex_count)
            except ContextAllocationError as e:
                logger.error("Test context allocation failed: %s", e)
                stream.write(f"\r{_ALLOCATION_MESSAGE}\n")
                self._error_count += 1
                return CandidateReport(
                    failure=Failure(
                        kind=FailureKind.ALLOCATION,
                        candidate=1,
                        selector=None,
                        message=_ALLOCATION_MESSAGE,
                    )
                )
        context = self._context

        failure = populate_originals(context, matrix)
        if failure is not None:
            stream.write(f"\r{failure.message}\n")
            self._error_count += 1
            return CandidateReport(failure=failure, artifacts=self._reporter.dump(matrix))

        outcomes = run_selectors(context, self._suite, self._config)
        report = CandidateReport(outcomes=outcomes)
        failed = outcomes[-1].failure if outcomes and outcomes[-1].is_failure else None
        if failed is not None:
            for line in failed.lines:
                stream.write(f"\r{line}\n")
            stream.write(f"{_SEE_ARTIFACTS}\n")
            self._error_count += 1
            report = CandidateReport(
                outcomes=outcomes,
                failure=failed,
                artifacts=self._reporter.dump(matrix, context.primary.original),
            )

        self._write_progress(stream, context)
        return report

    def _write_progress(self, stream: TextIO, context: TestContext) -> None:
        if self._config.quiet:
            return
        seen = context.primary.total.graphs_seen
        if seen % self._config.progress_interval == 0:
            stream.write(f"\r{seen} ")
            stream.flush()

    def finish(self, stream: TextIO) -> RunSummary:
        """Print the final report, release the context and reset the session.

        Returns:
            RunSummary of the run that just ended
        """
        status = RunStatus.ERROR if self.error_found else RunStatus.SUCCESS
        context = self._context
        seen = context.primary.total.graphs_seen if context is not None else 0

        if not self._config.quiet:
            stream.write(f"\r{seen} \n")

        summary = RunSummary(status=status, error_count=self._error_count)
        if context is not None:
            report = format_report(context, self._config, status)
            stream.write(report)
            primary = context.primary.total
            summary = RunSummary(
                status=status,
                error_count=self._error_count,
                graphs_seen=primary.graphs_seen,
                graphs_ok=primary.graphs_ok,
                totals=MappingProxyType(
                    {
                        result.selector: Tally(result.total.graphs_seen, result.total.graphs_ok)
                        for result in context.results
                    }
                ),
                report=report,
            )
            logger.info("Released test context after %d graph(s), status %s", seen, status)

        self._context = None
        self._error_count = 0
        return summary


def run_candidates(
    graphs: Iterable[BitMatrixGraph],
    config: HarnessConfig | None = None,
    stream: TextIO | None = None,
    *,
    suite: AlgorithmSuite | None = None,
) -> RunSummary:
    """Drive a full run over graphs and return its summary.

    Every graph is passed with its own vertex count; the context is sized
    by the first. Iteration stops at the first failure since the session
    would skip the remaining candidates anyway.
    """
    out = stream if stream is not None else sys.stdout
    session = TestSession(config, suite)
    for matrix in graphs:
        session.process_candidate(out, matrix, matrix.vertex_count)
        if session.error_found:
            break
    return session.finish(out)


def replay_matrix_artifact(
    path: str | Path,
    config: HarnessConfig | None = None,
    stream: TextIO | None = None,
    *,
    suite: AlgorithmSuite | None = None,
) -> RunSummary:
    """Re-run the candidate stored in a bit-matrix artifact.

    Raises:
        ValueError: If path is not a well-formed bit-matrix artifact
        OSError: If path cannot be read
    """
    matrix = read_matrix_graph(path)
    logger.info("Replaying %d-vertex candidate from %s", matrix.vertex_count, path)
    return run_candidates([matrix], config, stream, suite=suite)
