"""Test run orchestration: configuration, context, runner and session.

Python 3.13+.
"""

from .config import HarnessConfig
from .context import AlgorithmResult, Tally, TestContext, acquire_context
from .runner import Failure, TestOutcome, populate_originals, run_selectors, run_test
from .session import (
    CandidateReport,
    RunSummary,
    TestSession,
    replay_matrix_artifact,
    run_candidates,
)

__all__ = [
    "AlgorithmResult",
    "CandidateReport",
    "Failure",
    "HarnessConfig",
    "RunSummary",
    "Tally",
    "TestContext",
    "TestOutcome",
    "TestSession",
    "acquire_context",
    "populate_originals",
    "replay_matrix_artifact",
    "run_candidates",
    "run_selectors",
    "run_test",
]
