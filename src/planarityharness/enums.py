"""Enumerations for planarityharness type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so selectors compare equal to the
single-character command tags used by graph generators.

Python 3.13+.
"""

from enum import Enum, StrEnum, auto

__all__ = [
    "ALL_SELECTORS_TAG",
    "EmbedMode",
    "EmbedResult",
    "FailureKind",
    "OutcomeStatus",
    "RunStatus",
    "Selector",
    "TransferStatus",
]

ALL_SELECTORS_TAG: str = "a"
"""Meta-selector tag meaning: run every Selector against each candidate."""


class Selector(StrEnum):
    """Algorithm selected for a test run.

    StrEnum provides automatic string conversion: str(Selector.PLANARITY) == "p"

    Declaration order is the order used by the ``all`` meta-selector.
    """

    PLANARITY = "p"
    """Planar embedding."""

    DRAWING = "d"
    """Planar embedding plus a straight-line drawing."""

    OUTERPLANARITY = "o"
    """Outerplanar embedding."""

    SEARCH_K23 = "2"
    """Search for a K2,3 homeomorph."""

    SEARCH_K33 = "3"
    """Search for a K3,3 homeomorph."""

    SEARCH_K4 = "4"
    """Search for a K4 homeomorph."""

    VERTEX_COLORING = "c"
    """Vertex coloring."""

    @classmethod
    def resolve(cls, command: str) -> tuple["Selector", ...]:
        """Expand a command tag into the selectors it runs.

        Args:
            command: A single selector tag, or ``"a"`` for every selector

        Returns:
            Tuple of selectors in execution order

        Raises:
            ValueError: If command is not a known tag
        """
        if command == ALL_SELECTORS_TAG:
            return tuple(cls)
        return (cls(command),)

    @property
    def embed_mode(self) -> "EmbedMode | None":
        """Embedding mode for embedding-family selectors, None for coloring."""
        match self:
            case Selector.PLANARITY:
                return EmbedMode.PLANAR
            case Selector.DRAWING:
                return EmbedMode.DRAW_PLANAR
            case Selector.OUTERPLANARITY:
                return EmbedMode.OUTERPLANAR
            case Selector.SEARCH_K23:
                return EmbedMode.SEARCH_K23
            case Selector.SEARCH_K33:
                return EmbedMode.SEARCH_K33
            case Selector.SEARCH_K4:
                return EmbedMode.SEARCH_K4
            case Selector.VERTEX_COLORING:
                return None


class EmbedMode(Enum):
    """Embedding flag passed to an embedding capability."""

    PLANAR = auto()
    DRAW_PLANAR = auto()
    OUTERPLANAR = auto()
    SEARCH_K23 = auto()
    SEARCH_K33 = auto()
    SEARCH_K4 = auto()


class EmbedResult(Enum):
    """Result code returned by algorithm capabilities.

    OK and NONEMBEDDABLE are both legitimate answers; NOTOK means the
    algorithm itself failed.
    """

    OK = auto()
    NONEMBEDDABLE = auto()
    NOTOK = auto()


class TransferStatus(StrEnum):
    """How a bit-matrix transfer ended."""

    COMPLETE = "complete"
    """Every edge of the bit-matrix was inserted."""

    SHORTFALL = "shortfall"
    """Insertion stopped at an intentionally reduced edge capacity."""


class OutcomeStatus(StrEnum):
    """Classification of one algorithm run against one candidate."""

    ACCEPTED = "accepted"
    """Algorithm succeeded with a positive answer (counted as OK)."""

    REJECTED_BY_ALGORITHM = "rejected"
    """Algorithm succeeded with a negative answer (seen, not OK, not an error)."""

    FAILED = "failed"
    """Harness or algorithm defect; raises the session error flag."""


class FailureKind(StrEnum):
    """Kind of fatal failure recorded by the harness.

    StrEnum provides automatic string conversion: str(FailureKind.COPY) == "copy"
    """

    CORRUPTION = "corruption"
    """Edge insertion refused despite full arc capacity."""

    ALLOCATION = "allocation"
    """Test context or its graphs could not be built."""

    TRANSFER = "transfer"
    """Graph could not be populated from a bit-matrix or adjacency-list copy."""

    COPY = "copy"
    """Original graph could not be copied into the working graph."""

    EXECUTION = "execution"
    """Algorithm returned neither an accept nor an expected negative result."""

    INTEGRITY = "integrity"
    """Algorithm's consistency predicate rejected its own output."""

    COUNTER_OVERFLOW = "counter_overflow"
    """Statistics counter would exceed its limit."""


class RunStatus(StrEnum):
    """Overall status printed in the final report."""

    SUCCESS = "SUCCESS"
    ERROR = "ERROR"
