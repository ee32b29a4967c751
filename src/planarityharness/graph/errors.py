"""Graph-layer error types.

These are ordinary operational errors of the native graph structure, not
harness integrity failures: whether a refused edge is a defect depends on how
the graph was sized, which only the caller knows.

Python 3.13+.
"""

__all__ = ["EdgeCapacityError", "GraphError"]


class GraphError(Exception):
    """Base exception for invalid operations on a WorkingGraph."""


class EdgeCapacityError(GraphError):
    """Edge insertion refused because the graph's arc capacity is exhausted.

    Attributes:
        arc_capacity: Arc capacity of the graph that refused the edge
    """

    def __init__(self, message: str, *, arc_capacity: int) -> None:
        """Initialize EdgeCapacityError.

        Args:
            message: Human-readable error description
            arc_capacity: Arc capacity of the refusing graph
        """
        super().__init__(message)
        self.arc_capacity = arc_capacity
