"""Hypothesis strategies for planarityharness property-based testing.

Usage:
    from tests.strategies import bit_matrix_graphs, networkx_graphs
"""

from .graph import (
    bit_matrix_graphs,
    networkx_graphs,
    upper_triangle_matrices,
    vertex_counts,
)

__all__ = [
    "bit_matrix_graphs",
    "networkx_graphs",
    "upper_triangle_matrices",
    "vertex_counts",
]
