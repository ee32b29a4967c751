"""Human-readable labels for each selector's report table.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from types import MappingProxyType

from planarityharness.enums import Selector

__all__ = ["SELECTOR_LABELS", "AlgorithmLabels", "labels_for"]


@dataclass(frozen=True, slots=True)
class AlgorithmLabels:
    """Label triple for one selector.

    Attributes:
        algorithm: Algorithm name in the Begin/End Stats lines
        ok: Column heading for OK results
        negative: Column heading for negative results
    """

    algorithm: str
    ok: str
    negative: str


SELECTOR_LABELS: MappingProxyType[Selector, AlgorithmLabels] = MappingProxyType(
    {
        Selector.PLANARITY: AlgorithmLabels("Planarity", "Planar", "Not Planar"),
        Selector.DRAWING: AlgorithmLabels("Planar Drawing", "Planar", "Not Planar"),
        Selector.OUTERPLANARITY: AlgorithmLabels("Outerplanarity", "Embedded", "Obstructed"),
        Selector.SEARCH_K23: AlgorithmLabels("K2,3 Search", "no K2,3", "with K2,3"),
        Selector.SEARCH_K33: AlgorithmLabels("K3,3 Search", "no K3,3", "with K3,3"),
        Selector.SEARCH_K4: AlgorithmLabels("K4 Search", "no K4", "with K4"),
        Selector.VERTEX_COLORING: AlgorithmLabels("Vertex Coloring", "<=5 colors", ">5 colors"),
    }
)


def labels_for(selector: Selector) -> AlgorithmLabels:
    """Return the label triple for selector."""
    return SELECTOR_LABELS[selector]
