"""Failure artifacts for offline reproduction.

Two files are written when a candidate fails:

- ``errorMatrix.txt``: the raw bit-matrix, first line the vertex count, then
  one row per line as four upper-case hex digits;
- ``error.txt``: the original graph in WorkingGraph's adjacency-list form.

Both read back: read_matrix_graph() for the first,
WorkingGraph.read_adjacency_list() for the second.

Python 3.13+.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from planarityharness.constants import ADJLIST_ARTIFACT_NAME, MATRIX_ARTIFACT_NAME
from planarityharness.graph.bitmatrix import BitMatrixGraph

if TYPE_CHECKING:
    from planarityharness.graph.working import WorkingGraph

__all__ = ["FailureReporter", "read_matrix_graph", "write_matrix_graph"]

logger = logging.getLogger(__name__)


def write_matrix_graph(path: str | Path, matrix: BitMatrixGraph) -> Path:
    """Write matrix in the bit-matrix artifact form and return the path."""
    target = Path(path)
    target.write_text("\n".join(matrix.to_hex_lines()) + "\n", encoding="utf-8")
    return target


def read_matrix_graph(path: str | Path) -> BitMatrixGraph:
    """Read a bit-matrix artifact written by write_matrix_graph.

    Raises:
        ValueError: If the file is not a well-formed bit-matrix artifact
    """
    return BitMatrixGraph.from_hex_lines(Path(path).read_text(encoding="utf-8").splitlines())


class FailureReporter:
    """Writes failure artifacts into a fixed directory.

    Write errors are logged and reported as a missing path; they never
    replace the failure being reported.
    """

    __slots__ = ("_directory", "_enabled")

    def __init__(self, directory: str | Path = ".", *, enabled: bool = True) -> None:
        self._directory = Path(directory)
        self._enabled = enabled

    @property
    def directory(self) -> Path:
        """Directory receiving the artifacts."""
        return self._directory

    @property
    def matrix_path(self) -> Path:
        """Location of the bit-matrix artifact."""
        return self._directory / MATRIX_ARTIFACT_NAME

    @property
    def adjacency_list_path(self) -> Path:
        """Location of the adjacency-list artifact."""
        return self._directory / ADJLIST_ARTIFACT_NAME

    def dump_matrix(self, matrix: BitMatrixGraph) -> Path | None:
        """Write the bit-matrix artifact; return its path, or None if not written."""
        if not self._enabled:
            return None
        try:
            path = write_matrix_graph(self.matrix_path, matrix)
        except OSError as e:
            logger.error("Could not write %s: %s", self.matrix_path, e)
            return None
        logger.info("Wrote %s", path)
        return path

    def dump_adjacency_list(self, graph: WorkingGraph) -> Path | None:
        """Write the adjacency-list artifact; return its path, or None if not written."""
        if not self._enabled:
            return None
        try:
            path = graph.write_adjacency_list(self.adjacency_list_path)
        except OSError as e:
            logger.error("Could not write %s: %s", self.adjacency_list_path, e)
            return None
        logger.info("Wrote %s", path)
        return path

    def dump(self, matrix: BitMatrixGraph, original: WorkingGraph | None = None) -> tuple[Path, ...]:
        """Write the adjacency list of original (if given) and the bit-matrix."""
        written: list[Path | None] = []
        if original is not None:
            written.append(self.dump_adjacency_list(original))
        written.append(self.dump_matrix(matrix))
        return tuple(path for path in written if path is not None)
