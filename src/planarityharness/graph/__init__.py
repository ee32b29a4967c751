"""Graph representations and the transfer between them.

Exports:
    BitMatrixGraph: Immutable generator encoding (one bitset per vertex)
    WorkingGraph: Mutable native graph with fixed capacity
    transfer_graph: Populate a WorkingGraph from a BitMatrixGraph
    GraphError: Invalid WorkingGraph operation
    EdgeCapacityError: Edge refused because the arc capacity is exhausted

Python 3.13+.
"""

from .bitmatrix import BitMatrixGraph
from .errors import EdgeCapacityError, GraphError
from .transfer import transfer_graph
from .working import Edge, WorkingGraph, normalize_edge

__all__ = [
    "BitMatrixGraph",
    "Edge",
    "EdgeCapacityError",
    "GraphError",
    "WorkingGraph",
    "normalize_edge",
    "transfer_graph",
]
