"""planarityharness - differential test harness for graph embedding algorithms.

Feeds candidate graphs from a generator through planarity, planar drawing,
outerplanarity, K2,3/K3,3/K4 search and vertex coloring algorithms, checks
every result with the algorithm's own integrity predicate, and keeps
statistics broken down by edge count. Failing candidates are dumped to disk
for offline reproduction.

Public API:
    TestSession - Run object driven by a graph generator
    HarnessConfig - Immutable run configuration
    BitMatrixGraph - Bit-matrix candidate graph
    WorkingGraph - Mutable graph the algorithms run on
    run_candidates - Drive a full run over an iterable of candidates
    replay_matrix_artifact - Re-run a dumped errorMatrix.txt
    AlgorithmSuite - Injectable embedding and coloring capabilities

Enums:
    Selector - Algorithm selected for a run
    OutcomeStatus - Accepted, rejected by the algorithm, or failed
    FailureKind - Category of a fatal failure

Exceptions:
    HarnessIntegrityError - Base class of harness failures
    GraphError - Invalid graph operation

Submodules:
    planarityharness.graph - Bit-matrix and working graph structures, transfer
    planarityharness.algorithms - Capability protocols and the networkx suite
    planarityharness.analysis - Outerplanarity and minor detection helpers
    planarityharness.runtime - Configuration, context, runner and session
    planarityharness.diagnostics - Report tables and failure artifacts
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .algorithms import AlgorithmSuite
from .enums import FailureKind, OutcomeStatus, Selector
from .graph import BitMatrixGraph, GraphError, WorkingGraph
from .integrity import HarnessIntegrityError
from .runtime import HarnessConfig, TestSession, replay_matrix_artifact, run_candidates

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("planarityharness")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AlgorithmSuite",
    "BitMatrixGraph",
    "FailureKind",
    "GraphError",
    "HarnessConfig",
    "HarnessIntegrityError",
    "OutcomeStatus",
    "Selector",
    "TestSession",
    "WorkingGraph",
    "__version__",
    "replay_matrix_artifact",
    "run_candidates",
]
