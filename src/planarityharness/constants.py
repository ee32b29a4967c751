"""Shared constants for planarityharness.

This module provides centralized configuration constants used across
the graph, runtime and diagnostics packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Graph limits: Bit-matrix width and capacity formulas
- Counter limits: Statistics counter bounds
- Reporting: Progress cadence and artifact file names

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Graph limits
    "MAXN",
    "ARCS_PER_EDGE",
    # Counter limits
    "COUNTER_LIMIT",
    # Algorithm thresholds
    "COLOR_THRESHOLD",
    # Reporting
    "PROGRESS_INTERVAL",
    "DEBUG_PROGRESS_INTERVAL",
    "MATRIX_ARTIFACT_NAME",
    "ADJLIST_ARTIFACT_NAME",
    "complete_edge_count",
]

# ============================================================================
# GRAPH LIMITS
# ============================================================================

# Width of one bit-matrix row. Every row of a BitMatrixGraph fits in MAXN
# bits and the hex artifact prints each row as four hex digits.
MAXN: int = 16

# Each undirected edge occupies two arcs in a WorkingGraph, one per endpoint.
ARCS_PER_EDGE: int = 2


def complete_edge_count(vertex_count: int) -> int:
    """Return the number of edges of the complete graph on vertex_count vertices."""
    return vertex_count * (vertex_count - 1) // 2


# ============================================================================
# COUNTER LIMITS
# ============================================================================

# Largest value a statistics counter may hold (an unsigned 64-bit counter).
# Incrementing past it is reported as a counter overflow instead of wrapping.
COUNTER_LIMIT: int = 2**64 - 1

# ============================================================================
# ALGORITHM THRESHOLDS
# ============================================================================

# Vertex coloring is classified as a negative result at this many colors.
COLOR_THRESHOLD: int = 6

# ============================================================================
# REPORTING
# ============================================================================

# Progress line cadence in performance mode.
PROGRESS_INTERVAL: int = 379

# Progress line cadence in debug mode (every candidate).
DEBUG_PROGRESS_INTERVAL: int = 1

# Failure artifact file names, relative to the configured artifact directory.
MATRIX_ARTIFACT_NAME: str = "errorMatrix.txt"
ADJLIST_ARTIFACT_NAME: str = "error.txt"
