"""Reporting and failure artifacts.

Python 3.13+.
"""

from .artifacts import FailureReporter, read_matrix_graph, write_matrix_graph
from .labels import SELECTOR_LABELS, AlgorithmLabels, labels_for
from .report import format_report, format_stats

__all__ = [
    "SELECTOR_LABELS",
    "AlgorithmLabels",
    "FailureReporter",
    "format_report",
    "format_stats",
    "labels_for",
    "read_matrix_graph",
    "write_matrix_graph",
]
