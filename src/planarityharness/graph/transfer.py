"""Transfer of generator bit-matrix graphs into WorkingGraph instances.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from planarityharness.constants import complete_edge_count
from planarityharness.enums import TransferStatus
from planarityharness.graph.errors import EdgeCapacityError
from planarityharness.integrity import FailureContext, GraphCorruptionError, GraphTransferError

if TYPE_CHECKING:
    from planarityharness.graph.bitmatrix import BitMatrixGraph
    from planarityharness.graph.working import WorkingGraph

__all__ = ["transfer_graph"]

logger = logging.getLogger(__name__)


def transfer_graph(matrix: BitMatrixGraph, target: WorkingGraph) -> TransferStatus:
    """Reinitialize target and insert every upper-triangle edge of matrix.

    Rows are scanned in order; for row ``i`` every set bit ``j > i`` becomes
    the undirected edge ``(i, j)``. Only the upper triangle is read since the
    encoding is symmetric.

    A refused insertion is interpreted against the target's allocation:

    - capacity for the complete graph on the matrix's vertices: nothing
      should ever be refused, so the refusal means corruption;
    - any smaller capacity: the caller under-provisioned on purpose (many
      algorithms only need a linear number of edges), so transfer stops
      early and keeps the edges inserted so far.

    Args:
        matrix: Source bit-matrix graph
        target: Graph to repopulate

    Returns:
        TransferStatus.COMPLETE, or TransferStatus.SHORTFALL after an
        expected early stop

    Raises:
        GraphTransferError: If matrix has more vertices than target
        GraphCorruptionError: If a full-capacity target refused an edge
    """
    n = matrix.vertex_count
    if n > target.vertex_count:
        msg = f"cannot transfer {n} vertices into a graph allocated for {target.vertex_count}"
        raise GraphTransferError(
            msg, FailureContext(component="transfer", operation="reinitialize", detail=f"n={n}")
        )

    target.reinitialize()

    for i in range(n - 1):
        for j in range(i + 1, n):
            if not matrix.has_bit(i, j):
                continue
            try:
                target.add_edge(i, j)
            except EdgeCapacityError as e:
                if target.edge_capacity == complete_edge_count(n):
                    msg = f"edge ({i}, {j}) refused by a full-capacity graph"
                    raise GraphCorruptionError(
                        msg,
                        FailureContext(
                            component="transfer",
                            operation="add_edge",
                            detail=f"arc_capacity={e.arc_capacity}, n={n}",
                        ),
                    ) from e
                logger.debug(
                    "Transfer stopped at edge (%d, %d): capacity %d edges",
                    i,
                    j,
                    target.edge_capacity,
                )
                return TransferStatus.SHORTFALL

    return TransferStatus.COMPLETE
