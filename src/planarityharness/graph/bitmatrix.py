"""Bit-matrix adjacency encoding produced by graph generators.

A BitMatrixGraph is an immutable sequence of ``n`` row bitsets. Bit ``j`` of
row ``i`` (the value ``1 << j``) is set when edge ``(i, j)`` is present, so
higher bits correspond to higher-indexed neighbors. Rows are at most
``MAXN`` bits wide.

The same encoding is used for the bit-matrix failure artifact: the decimal
vertex count on the first line, then one four-digit upper-case hex row per
line.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from planarityharness.constants import MAXN

if TYPE_CHECKING:
    from collections.abc import Iterable

__all__ = ["BitMatrixGraph"]

_ROW_MASK: int = (1 << MAXN) - 1


@dataclass(frozen=True, slots=True)
class BitMatrixGraph:
    """Immutable bit-matrix adjacency representation.

    Generators may populate both triangles of the matrix or only the upper
    one; consumers in this package read only the upper triangle.

    Attributes:
        rows: One bitset per vertex

    Example:
        >>> triangle = BitMatrixGraph.from_edges(3, [(0, 1), (0, 2), (1, 2)])
        >>> triangle.edge_count
        3
        >>> triangle.to_hex_lines()
        ('3', '0006', '0005', '0003')
    """

    rows: tuple[int, ...]

    def __post_init__(self) -> None:
        """Validate row count and row width.

        Raises:
            ValueError: If there are more than MAXN rows or a row does not
                fit in MAXN bits
        """
        if len(self.rows) > MAXN:
            msg = f"bit-matrix graphs hold at most {MAXN} vertices, got {len(self.rows)}"
            raise ValueError(msg)
        for index, row in enumerate(self.rows):
            if row < 0 or row > _ROW_MASK:
                msg = f"row {index} does not fit in {MAXN} bits: {row!r}"
                raise ValueError(msg)

    @classmethod
    def from_edges(cls, vertex_count: int, edges: Iterable[tuple[int, int]]) -> BitMatrixGraph:
        """Build a symmetric bit-matrix from an undirected edge list.

        Args:
            vertex_count: Number of vertices
            edges: Pairs of distinct vertex indices

        Raises:
            ValueError: If an edge is a loop or names a vertex out of range
        """
        rows = [0] * vertex_count
        for u, v in edges:
            if u == v or not (0 <= u < vertex_count and 0 <= v < vertex_count):
                msg = f"invalid edge ({u}, {v}) for {vertex_count} vertices"
                raise ValueError(msg)
            rows[u] |= 1 << v
            rows[v] |= 1 << u
        return cls(tuple(rows))

    @classmethod
    def complete(cls, vertex_count: int) -> BitMatrixGraph:
        """Build the complete graph on vertex_count vertices."""
        return cls.from_edges(
            vertex_count,
            ((u, v) for u in range(vertex_count) for v in range(u + 1, vertex_count)),
        )

    @classmethod
    def from_hex_lines(cls, lines: Iterable[str]) -> BitMatrixGraph:
        """Parse the bit-matrix artifact format.

        Args:
            lines: Decimal vertex count followed by one hex row per vertex

        Raises:
            ValueError: If the line count does not match the vertex count or
                a line is not a valid number
        """
        content = [line.strip() for line in lines if line.strip()]
        if not content:
            msg = "empty bit-matrix"
            raise ValueError(msg)
        vertex_count = int(content[0])
        hex_rows = content[1:]
        if len(hex_rows) != vertex_count:
            msg = f"expected {vertex_count} rows, found {len(hex_rows)}"
            raise ValueError(msg)
        return cls(tuple(int(row, 16) for row in hex_rows))

    @property
    def vertex_count(self) -> int:
        """Number of vertices (rows)."""
        return len(self.rows)

    def has_bit(self, row: int, column: int) -> bool:
        """Check whether bit ``column`` of ``row`` is set."""
        return bool(self.rows[row] >> column & 1)

    def upper_edges(self) -> list[tuple[int, int]]:
        """List edges ``(i, j)`` with ``i < j`` read from the upper triangle, in row order."""
        n = self.vertex_count
        return [(i, j) for i in range(n - 1) for j in range(i + 1, n) if self.has_bit(i, j)]

    @property
    def edge_count(self) -> int:
        """Number of edges in the upper triangle."""
        return len(self.upper_edges())

    def row_popcounts(self) -> tuple[int, ...]:
        """Number of bits set in each row (the degree sequence of a symmetric matrix)."""
        return tuple(row.bit_count() for row in self.rows)

    def to_hex_lines(self) -> tuple[str, ...]:
        """Render the bit-matrix artifact lines (without trailing newlines)."""
        return (str(self.vertex_count), *(f"{row:04X}" for row in self.rows))
